import pytest

from famp.boot_config import ConfigError
from famp.os_info import OsInfo
from famp.partition import (
    FS_ADDRESS,
    HEADER_SIZE,
    FsType,
    PartitionHeader,
    PartitionType,
    configure_header,
)


def _os_info(fs_type):
    return OsInfo(
        os_type=2,
        os_name="TestOS",
        os_version="1.0",
        fs_type=fs_type,
        disk_name="disk",
        auto_format=True,
        bin_folder="bin",
        kernel_object="kernel.o",
        kernel_binary="kernel.bin",
        kernel_binary_size=1024,
        kernel_source="kernel.c",
    )


def test_pack_length_matches_header_size():
    assert len(PartitionHeader().pack()) == HEADER_SIZE


def test_configured_header_carries_tags():
    header = configure_header(PartitionHeader(), 0, part_type="UKA")
    packed = header.pack()
    assert packed[:6] == b"PARTS\0"
    assert packed[-15:-9] == b"PARTE\0"


def test_round_trip():
    header = configure_header(PartitionHeader(), 4096, part_type="KOA")
    header.set_lba(7, 5 * 512)
    header.cylinder = 3
    assert PartitionHeader.unpack(header.pack()) == header


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        PartitionHeader.unpack(b"PARTS\0")


def test_set_lba_spans_fs_sectors():
    header = PartitionHeader()
    header.set_lba(10, 5 * 512)
    assert header.starting_lba == 10
    assert header.ending_lba - header.starting_lba == 5


def test_unconfigured_header_has_zero_tags():
    header = PartitionHeader()
    header.set_lba(1, 512)
    assert header.pack()[:6] == bytes(6)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("UKA", PartitionType.UKA),
        ("KOA", PartitionType.KOA),
        ("CDKOA", PartitionType.CDKOA),
        ("CDUKA", PartitionType.CDUKA),
        ("E", PartitionType.EXTRA),
    ],
)
def test_part_type_names(name, expected):
    header = configure_header(PartitionHeader(), 0, fs_type="FAMP_CFS", part_type=name)
    assert header.partition_type == expected
    assert header.fs_type == FsType.FAMP_CUSTOM
    assert header.famp_custom_fs_revision == 1


def test_unknown_part_type_leaves_type_unchanged():
    header = configure_header(PartitionHeader(), 0, fs_type="other", part_type="nope")
    assert header.partition_type == 0
    assert header.fs_type == FsType.FAMP_CUSTOM


def test_addresses_set():
    header = configure_header(PartitionHeader(), 1024, part_type="UKA")
    assert header.partition_address == FS_ADDRESS
    assert header.virtual_address == 0x80000000 + 1024


def test_os_info_fat32():
    header = configure_header(PartitionHeader(), 0, os_info=_os_info(2))
    assert header.fs_type == FsType.FAT32
    assert header.partition_type == PartitionType.UKA
    assert header.famp_custom_fs_revision == 0


def test_os_info_custom_sets_revision():
    header = configure_header(PartitionHeader(), 0, os_info=_os_info(1))
    assert header.fs_type == FsType.FAMP_CUSTOM
    assert header.famp_custom_fs_revision == 1


def test_os_info_ext2():
    header = configure_header(PartitionHeader(), 0, os_info=_os_info(3))
    assert header.fs_type == FsType.EXT2


def test_no_data_raises():
    with pytest.raises(ConfigError):
        configure_header(PartitionHeader(), 0)