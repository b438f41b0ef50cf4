"""Bit and byte helpers shared by the protocol and its text-mode output."""

from __future__ import annotations

_BYTE = 0xFF
_WORD = 0xFFFF


def _clamp_bit(pos: int) -> int:
    return 7 if pos >= 8 else pos


def set_bit(value: int, pos: int) -> int:
    """Return the byte ``value`` with bit ``pos`` set; positions past 7 mean bit 7."""
    pos = _clamp_bit(pos)
    mask = 1 << pos
    return ((value & ~mask) | mask) & _BYTE


def unset_bit(value: int, pos: int) -> int:
    """Return the byte ``value`` with bit ``pos`` cleared; positions past 7 mean bit 7."""
    pos = _clamp_bit(pos)
    return (value & ~(1 << pos)) & _BYTE


def bit_is_set(value: int, pos: int) -> bool:
    """True if bit ``pos`` of ``value`` is set; positions past 7 mean bit 7."""
    return bool(value & (1 << _clamp_bit(pos)))


def bit_not_set(value: int, pos: int) -> bool:
    """True if bit ``pos`` of ``value`` is clear; positions past 7 mean bit 7."""
    return not bit_is_set(value, pos)


def _grab_byte(value: int, pos: int, width: int) -> int:
    pos = min(max(pos, 1), width)
    return (value >> (8 * (pos - 1))) & _BYTE


def grab_byte_s(value: int, pos: int) -> int:
    """Byte ``pos`` (1 = lowest) of a 16-bit value; ``pos`` is clamped to 1..2."""
    return _grab_byte(value & _WORD, pos, 2)


def grab_byte_i(value: int, pos: int) -> int:
    """Byte ``pos`` (1 = lowest) of a 32-bit value; ``pos`` is clamped to 1..4."""
    return _grab_byte(value & 0xFFFFFFFF, pos, 4)


def text_attribute(background: int, foreground: int) -> int:
    """Attribute byte for a text cell, or 0 when both colours are the same.

    A colour whose high nibble is set is taken from that nibble.
    """
    background &= _BYTE
    foreground &= _BYTE
    if (background >> 4) & 0x0F:
        background >>= 4
    if (foreground >> 4) & 0x0F:
        foreground >>= 4
    if foreground == background:
        return 0
    return ((background << 4) | (foreground & 0x0F)) & _WORD


def text_value(character: int, foreground: int, background: int) -> int:
    """16-bit text cell: character in the low byte, attribute in the high byte.

    Returns 0 when the attribute is 0 (matching colours).
    """
    attribute = text_attribute(foreground, background)
    if attribute == 0:
        return 0
    return ((character & _BYTE) | (attribute << 8)) & _WORD