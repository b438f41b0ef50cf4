"""Global descriptor table layout, defaults and the checks made before loading it."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

_SEGMENT = struct.Struct("<HHBBBB")
_NULL = struct.Struct("<Q")
_DESCRIPTOR = struct.Struct("<HI")

CODE_ACCESS = 0b10011010
DATA_ACCESS = 0b10010010
GRANULARITY_32 = 0b11001111
GRANULARITY_16 = 0b00001111
FULL_LIMIT = 0xFFFF

_LOAD_ERROR = (
    "\n  Error from `load_32bit`:\n  There is not a valid GDT/GDT description "
    "loaded into memory :(\n      -> Did you forget to `init_bootloader`?\n"
    "      -> Perhaps you forgot to setup your GDT?"
)


class GdtError(Exception):
    """Raised when no valid GDT is available to switch to 32-bit mode."""


class GdtStatus(IntEnum):
    NO_GDT = 0x00
    BIT16_BIT32_GDT = 0x01
    BIT32_ONLY_GDT = 0x02


@dataclass
class SegmentDescriptor:
    limit: int = 0
    base: int = 0
    base2: int = 0
    access: int = 0
    granularity: int = 0
    base_high: int = 0

    def pack(self) -> bytes:
        """The 8-byte segment descriptor."""
        return _SEGMENT.pack(
            self.limit & 0xFFFF,
            self.base & 0xFFFF,
            self.base2 & 0xFF,
            self.access & 0xFF,
            self.granularity & 0xFF,
            self.base_high & 0xFF,
        )


@dataclass
class Gdt:
    """Null descriptor followed by 32-bit and 16-bit code and data segments."""

    null_desc: int = 0
    code32: SegmentDescriptor = field(default_factory=SegmentDescriptor)
    data32: SegmentDescriptor = field(default_factory=SegmentDescriptor)
    code16: SegmentDescriptor = field(default_factory=SegmentDescriptor)
    data16: SegmentDescriptor = field(default_factory=SegmentDescriptor)

    def pack(self) -> bytes:
        """The table as it is laid out in memory."""
        return _NULL.pack(self.null_desc & 0xFFFFFFFFFFFFFFFF) + b"".join(
            segment.pack()
            for segment in (self.code32, self.data32, self.code16, self.data16)
        )


@dataclass
class GdtDescriptor:
    size: int = 0
    address: int = 0

    def pack(self) -> bytes:
        """The packed 6-byte descriptor: size then address."""
        return _DESCRIPTOR.pack(self.size & 0xFFFF, self.address & 0xFFFFFFFF)


def default_gdt() -> Gdt:
    """Flat 4 GiB segments for 32-bit and 16-bit code and data."""
    return Gdt(
        null_desc=0,
        code32=SegmentDescriptor(FULL_LIMIT, 0, 0, CODE_ACCESS, GRANULARITY_32, 0),
        data32=SegmentDescriptor(FULL_LIMIT, 0, 0, DATA_ACCESS, GRANULARITY_32, 0),
        code16=SegmentDescriptor(FULL_LIMIT, 0, 0, CODE_ACCESS, GRANULARITY_16, 0),
        data16=SegmentDescriptor(FULL_LIMIT, 0, 0, DATA_ACCESS, GRANULARITY_16, 0),
    )


def setup_gdt(status, address):
    """Build the default table when none is loaded.

    Returns ``(gdt, descriptor, new_status)`` for status NO_GDT, with the
    descriptor pointing at ``address``; returns None when a table is
    already present.
    """
    if status != GdtStatus.NO_GDT:
        return None
    gdt = default_gdt()
    descriptor = GdtDescriptor(size=len(gdt.pack()), address=address & 0xFFFFFFFF)
    return gdt, descriptor, GdtStatus.BIT16_BIT32_GDT


def validate_for_load(gdt: Gdt, descriptor: GdtDescriptor, status):
    """Return ``(descriptor, gdt)`` ready to load; raise GdtError if they are not valid."""
    if gdt.null_desc == 1 or descriptor.size == 1 or status == GdtStatus.NO_GDT:
        raise GdtError(_LOAD_ERROR)
    return descriptor, gdt