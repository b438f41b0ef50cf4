"""Partition header describing the filesystem partition of a disk image."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from famp.boot_config import ConfigError
from famp.os_info import OsInfo

FS_ADDRESS = 0xF000
VIRTUAL_BASE = 0x80000000

HEADER_START = b"PARTS\0"
HEADER_END = b"PARTE\0" + bytes(9)

_LAYOUT = struct.Struct("<6sBIIHIBIHBI15s")
HEADER_SIZE = _LAYOUT.size

_U32 = 0xFFFFFFFF


class PartitionType(IntEnum):
    UKA = 1 << 0  # user and kernel access
    KOA = 1 << 1  # kernel access only
    CDKOA = 1 << 2  # critical data, kernel access only
    CDUKA = 1 << 3  # critical data, user and kernel access
    EXTRA = 1 << 4  # unregulated partition


class FsType(IntEnum):
    FAT32 = 1 << 5
    EXT2 = 1 << 6
    FAMP_CUSTOM = 1 << 7
    ISO9660 = 1 << 8


_PART_TYPES = {
    "UKA": PartitionType.UKA,
    "KOA": PartitionType.KOA,
    "CDKOA": PartitionType.CDKOA,
    "CDUKA": PartitionType.CDUKA,
    "E": PartitionType.EXTRA,
}


@dataclass
class PartitionHeader:
    header_start: bytes = bytes(6)
    partition_type: int = 0
    starting_lba: int = 0
    ending_lba: int = 0
    partition_address: int = 0
    virtual_address: int = 0
    fs_type: int = 0
    famp_custom_fs_revision: int = 0
    cylinder: int = 0
    head: int = 0
    sector: int = 0
    header_end: bytes = bytes(15)

    def pack(self) -> bytes:
        """Serialise the header into its packed binary record."""
        return _LAYOUT.pack(
            bytes(self.header_start)[:6],
            self.partition_type & 0xFF,
            self.starting_lba & _U32,
            self.ending_lba & _U32,
            self.partition_address & 0xFFFF,
            self.virtual_address & _U32,
            self.fs_type & 0xFF,
            self.famp_custom_fs_revision & _U32,
            self.cylinder & 0xFFFF,
            self.head & 0xFF,
            self.sector & _U32,
            bytes(self.header_end)[:15],
        )

    @classmethod
    def unpack(cls, data) -> "PartitionHeader":
        """Parse a header from the first HEADER_SIZE bytes of ``data``."""
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"partition header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack(data[:HEADER_SIZE]))

    def set_lba(self, start_lba: int, fs_size: int) -> None:
        """Set the LBA range covering ``fs_size`` bytes from ``start_lba``."""
        self.starting_lba = start_lba & _U32
        self.ending_lba = (start_lba + fs_size // 512) & _U32


def _fs_from_os_info(header: PartitionHeader, os_info: OsInfo) -> None:
    if os_info.fs_type == 2:
        header.fs_type = FsType.FAT32
    elif os_info.fs_type == 3:
        header.fs_type = FsType.EXT2
    elif os_info.fs_type == 4:
        # The field is a single byte, so this type does not fit.
        header.fs_type = FsType.ISO9660 & 0xFF
    elif os_info.fs_type == 1:
        header.fs_type = FsType.FAMP_CUSTOM
        header.famp_custom_fs_revision = 1
    else:
        header.fs_type = FsType.FAMP_CUSTOM


def configure_header(
    header: PartitionHeader,
    kernel_size: int,
    os_info: OsInfo | None = None,
    fs_type: str | None = None,
    part_type: str | None = None,
) -> PartitionHeader:
    """Fill in tags, filesystem and partition type, and addresses.

    With ``os_info`` the filesystem comes from the configuration and the
    partition is user and kernel accessible. Otherwise the filesystem is
    always the custom one and ``part_type`` names the partition type; an
    unknown name leaves the type unchanged.
    """
    if os_info is None and fs_type is None and part_type is None:
        raise ConfigError(
            "Cannot initiate FS type and size.\nThere is no data to use to "
            "configure, or there is some wrong data passed to "
            "`init_FS_type_and_size`. Aborting."
        )
    header.header_start = HEADER_START
    header.header_end = HEADER_END

    if os_info is not None:
        _fs_from_os_info(header, os_info)
        header.partition_type = PartitionType.UKA
    else:
        header.fs_type = FsType.FAMP_CUSTOM
        header.famp_custom_fs_revision = 1
        if part_type is not None and part_type in _PART_TYPES:
            header.partition_type = _PART_TYPES[part_type]

    header.partition_address = FS_ADDRESS
    header.virtual_address = (VIRTUAL_BASE + kernel_size) & _U32
    return header