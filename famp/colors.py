"""Text-mode colours, their names and a small integer-to-text helper."""

from __future__ import annotations

import string
from enum import IntEnum

_DIGITS = string.digits + string.ascii_lowercase


class Color(IntEnum):
    BLACK = 0x00
    BLUE = 0x01
    GREEN = 0x02
    CYAN = 0x03
    RED = 0x04
    MAGENTA = 0x05
    BROWN = 0x06
    LIGHT_GREY = 0x07
    DARK_GREY = 0x08
    LIGHT_BLUE = 0x09
    LIME_GREEN = 0x0A
    LIGHT_CYAN = 0x0B
    LIGHT_RED = 0x0C
    LIGHT_MAGENTA = 0x0D
    YELLOW = 0x0E
    WHITE = 0x0F
    WWHITE = 0xF0
    RRED = 0xF4
    CYAN_WHITE = 0x3F
    CYAN_RED = 0x34


COLOR_NAMES = (
    "black", "blue", "green", "cyan", "red", "magenta", "brown",
    "light grey", "dark grey", "light blue", "lime green", "light cyan",
    "light red", "light magenta", "yellow", "white",
)

# Labels carry inline colour codes understood by the text screen.
_LABELS = (
    "black", "@bblue@w", "@ggreen@w", "@ccyan@w",
    "@rred@w", "@mmagenta@w", "@brbrown@w", "@lglight grey@w",
    "@dgdark grey@w", "@lblight blue@w", "@lglime green@w",
    "@lclight cyan@w", "@lrlight red@w", "@lmlight magenta@w",
    "@yyellow@w", "white",
)

_BY_NAME = {name: Color(value) for value, name in enumerate(COLOR_NAMES)}


def itoa(value: int, base: int = 10) -> str:
    """Digits of ``value`` in ``base`` (2..36, lowercase); empty for other bases.

    Only base 10 shows a minus sign for negative values.
    """
    if not 2 <= base <= 36:
        return ""
    magnitude = abs(value)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    sign = "-" if value < 0 and base == 10 else ""
    return sign + "".join(reversed(digits))


def color_from_name(name: str) -> Color:
    """The colour with the given lowercase name; ValueError if there is none."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"`{name}` is not a valid color") from None


def color_label(color: int) -> str:
    """Display label, with colour codes, for one of the sixteen base colours."""
    if not 0 <= color < len(_LABELS):
        raise ValueError(f"no label for color {color}")
    return _LABELS[color]