"""Operating-system description built from parsed ``boot.yaml`` entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from famp.yaml_lexer import YamlError

NEEDED_NAMES = (
    "os_type",
    "os_name",
    "os_vers",
    "pref_FS",
    "bin_folder",
    "kernel_o_binary",
    "kernel_bin_binary",
    "kernel_source_code_file",
)

# Positions read, in order, from the entry list.
_FIELD_COUNT = 10

_MISSING = "\n\nError:\n\tMissing some information in `boot.yaml`.\n"


class DataType(Enum):
    CHR = 0
    HEX = 1
    DEC = 2
    STR = 3


@dataclass(frozen=True)
class Entry:
    name: str
    value: str
    data_type: DataType


@dataclass
class OsInfo:
    os_type: int
    os_name: str
    os_version: str
    fs_type: int
    disk_name: str
    auto_format: bool
    bin_folder: str
    kernel_object: str
    kernel_binary: str
    kernel_binary_size: int
    kernel_source: str
    has_second_stage: bool = False

    @property
    def kernel_object_name_size(self) -> int:
        return len(self.kernel_object)

    @property
    def kernel_source_name_size(self) -> int:
        return len(self.kernel_source)


def _os_type(value: str) -> int:
    return 0x03 if value == "64bit" else 0x02


def _fs_type(value: str) -> int:
    return {"custom": 1, "FAT32": 2, "ext2": 3}.get(value, 1)


def build_os_info(entries: Iterable[Entry], base_dir) -> OsInfo:
    """Read entries by position into an OsInfo; kernel paths are relative to base_dir."""
    items = list(entries)
    if len(items) < len(NEEDED_NAMES) or len(items) < _FIELD_COUNT:
        raise YamlError(_MISSING)
    values = [entry.value for entry in items[:_FIELD_COUNT]]
    (
        os_type,
        os_name,
        os_version,
        fs_type,
        disk_name,
        auto_format,
        bin_folder,
        kernel_object,
        kernel_binary,
        kernel_source,
    ) = values

    kernel_path = Path(base_dir) / kernel_binary
    if not kernel_path.is_file():
        raise YamlError(f"Error opening kernel binary file`{kernel_path}`.")
    kernel_size = kernel_path.stat().st_size

    return OsInfo(
        os_type=_os_type(os_type),
        os_name=os_name,
        os_version=os_version,
        fs_type=_fs_type(fs_type),
        disk_name=disk_name,
        auto_format=auto_format == "yes",
        bin_folder=bin_folder,
        kernel_object=kernel_object,
        kernel_binary=kernel_binary,
        kernel_binary_size=kernel_size,
        kernel_source=kernel_source,
    )