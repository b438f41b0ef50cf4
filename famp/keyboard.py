"""Scancode-set-1 keyboard decoding with shift handling and line input."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterable


class Scancode(IntEnum):
    NOTHING = 0x00
    ESCAPE = 0x01
    ONE = 0x02
    TWO = 0x03
    THREE = 0x04
    FOUR = 0x05
    FIVE = 0x06
    SIX = 0x07
    SEVEN = 0x08
    EIGHT = 0x09
    NINE = 0x0A
    ZERO = 0x0B
    MINUS = 0x0C
    EQUAL = 0x0D
    BACKSPACE = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18  # noqa: E741
    P = 0x19
    LEFT_BRACKET = 0x1A
    RIGHT_BRACKET = 0x1B
    ENTER = 0x1C
    LEFT_CONTROL = 0x1D
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SEMICOLON = 0x27
    SINGLE_QUOTE = 0x28
    BACKTICK = 0x29
    LEFT_SHIFT = 0x2A
    FORWARD_SLASH = 0x2B
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    COMMA = 0x33
    PERIOD = 0x34
    BACK_SLASH = 0x35
    RIGHT_SHIFT = 0x36
    KEYPAD_ASTERISK = 0x37
    LEFT_ALT = 0x38
    SPACE = 0x39
    CAPS_LOCK = 0x3A
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    NUMBER_LOCK = 0x45
    SCROLL_LOCK = 0x46
    KEYPAD_SEVEN = 0x47
    KEYPAD_EIGHT = 0x48
    KEYPAD_NINE = 0x49
    KEYPAD_MINUS = 0x4A
    KEYPAD_FOUR = 0x4B
    KEYPAD_FIVE = 0x4C
    KEYPAD_SIX = 0x4D
    KEYPAD_PLUS = 0x4E
    KEYPAD_ONE = 0x4F
    KEYPAD_TWO = 0x50
    KEYPAD_THREE = 0x51
    KEYPAD_ZERO = 0x52
    KEYPAD_PERIOD = 0x53
    F11 = 0x57


LEFT_SHIFT_RELEASE = 0xAA
RIGHT_SHIFT_RELEASE = 0xB6

# Character for each scancode; 0 means the key produces no character.
_KEYS = (
    bytes(2)
    + b"1234567890-="
    + bytes(2)
    + b"qwertyuiop[]"
    + bytes(2)
    + b"asdfghjkl;'`"
    + bytes(1)
    + b"\\zxcvbnm,./"
    + bytes(1)
    + b"*"
    + bytes(1)
    + b" "
    + bytes(27)
)

_SHIFTED_DIGITS = b")!@#$%^&*("

_RELEASE_CODES = frozenset((
    0x81, 0x82, 0x83, 0x84, 0x85, 0x86, 0x87, 0x88, 0x89,
    0x8A, 0x8B, 0x8C, 0x8D, 0x8E, 0x8F, 0x90, 0x91, 0x92,
    0x93, 0x94, 0x95, 0x96, 0x97, 0x98, 0x99, 0x9A, 0x9B,
    0x9C, 0x9D, 0x9E, 0x9F, 0xA0, 0xA1, 0xA2, 0xA3, 0xA4,
    0xA5, 0xA6, 0xA7, 0xA8, 0xA9, 0xAA, 0xAB, 0xAC, 0xAD,
    0xAE, 0xAF, 0xB0, 0xB1, 0xB2, 0xB3, 0xB4, 0xB5, 0xB6,
    0xB7, 0xB8, 0xB9, 0xBA, 0xBB, 0xBC, 0xBE, 0xBF, 0xC0,
    0xC1, 0xC2, 0xC3, 0xC4, 0xC5, 0xC6, 0xC7, 0xC8, 0xC9,
    0xCA, 0xCB, 0xCC, 0xCE, 0xCF, 0xD0, 0xD1, 0xD2, 0xD3,
    0xD5, 0xD6, 0xD7,
))


def is_release(scancode: int) -> bool:
    """True if ``scancode`` is one of the recognised key-release codes."""
    return scancode in _RELEASE_CODES


def _key(scancode: int) -> int:
    return _KEYS[scancode] if 0 <= scancode < len(_KEYS) else 0


def _is_digit(char: int) -> bool:
    return ord("0") <= char <= ord("9")


class Keyboard:
    """Decodes a stream of scancodes into character codes."""

    def __init__(self, scancodes: Iterable[int]) -> None:
        self._source = iter(scancodes)
        self.shift_pressed = False

    def _read(self) -> int:
        try:
            return next(self._source) & 0xFF
        except StopIteration:
            raise EOFError("no more scancodes") from None

    def get_key(self) -> int:
        """Read scancodes for one key press; return its character code or 0.

        Keys without a character return their scancode. Raises EOFError
        when the scancode stream runs out.
        """
        scancode = self._read()
        while True:
            if scancode == Scancode.ENTER:
                return ord("\n")
            if scancode in (Scancode.LEFT_SHIFT, Scancode.RIGHT_SHIFT):
                if scancode == Scancode.RIGHT_SHIFT and self.shift_pressed:
                    return 0
                self.shift_pressed = True
                scancode = self._read()
                if scancode == LEFT_SHIFT_RELEASE:
                    self.shift_pressed = False
                    return 0
                if is_release(scancode):
                    return 0
                char = _key(scancode)
                if _is_digit(char):
                    return _SHIFTED_DIGITS[char - ord("0")]
                if not ord("A") <= char <= ord("Z"):
                    continue
                return char - 0x20
            break

        if scancode == Scancode.SPACE:
            return ord(" ")
        if scancode == Scancode.BACK_SLASH:
            return ord("?") if self.shift_pressed else ord("/")
        if scancode == Scancode.SEMICOLON:
            return ord(":") if self.shift_pressed else ord(";")
        if scancode == Scancode.BACKTICK:
            return ord("~") if self.shift_pressed else ord("`")
        if scancode == Scancode.KEYPAD_EIGHT:
            return 0
        if scancode in (RIGHT_SHIFT_RELEASE, LEFT_SHIFT_RELEASE):
            self.shift_pressed = False
            return 0
        if scancode == Scancode.NOTHING:
            return 0
        if is_release(scancode):
            return 0

        char = _key(scancode)
        if char == 0:
            return scancode
        if self.shift_pressed:
            if _is_digit(char):
                return _SHIFTED_DIGITS[char - ord("0")]
            return char - 0x20
        return char

    def read_char(self) -> str:
        """Wait for the first key press that yields a non-zero code."""
        while True:
            key = self.get_key()
            if key:
                return chr(key)

    def read_line(self, echo: Callable[[str], object] | None = None) -> str:
        """Read keys up to Enter; each key, Enter included, is passed to ``echo``."""
        chars: list[str] = []
        while True:
            key = self.get_key()
            if not key:
                continue
            char = chr(key)
            if echo is not None:
                echo(char)
            if char == "\n":
                return "".join(chars)
            chars.append(char)