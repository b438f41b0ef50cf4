"""An 80x25 text-mode screen buffer with cursor, colours and inline colour codes."""

from __future__ import annotations

from famp.bits import text_value
from famp.colors import Color
from famp.cursor import COLS, ROWS, Cursor

BACKSPACE = 0x0E
TAB_WIDTH = 4

_LIGHT_CODES = {
    "g": Color.LIGHT_GREY,
    "b": Color.LIGHT_BLUE,
    "G": Color.LIME_GREEN,
    "c": Color.LIGHT_CYAN,
    "r": Color.LIGHT_RED,
    "m": Color.LIGHT_MAGENTA,
}

_SIMPLE_CODES = {
    "y": Color.YELLOW,
    "w": Color.WHITE,
    "B": Color.BLACK,
    "c": Color.CYAN,
    "m": Color.MAGENTA,
    "g": Color.GREEN,
}


class TextScreen:
    """Cells of character and attribute, written at the cursor position.

    Writes that fall outside the visible area are dropped.
    """

    def __init__(self, color: int = Color.WHITE) -> None:
        self.cells = [0] * (ROWS * COLS)
        self.cursor = Cursor()
        self.color = color & 0xFF
        self.default_color = self.color

    def _write(self, code: int) -> None:
        index = self.cursor.x + self.cursor.y * COLS
        if 0 <= index < len(self.cells):
            self.cells[index] = ((self.color << 8) | (code & 0xFF)) & 0xFFFF

    def put_char(self, character) -> None:
        """Write one character, handling newline, tab and backspace."""
        code = ord(character) if isinstance(character, str) else int(character)
        cursor = self.cursor
        if code == ord("\n"):
            cursor.newline()
            if cursor.y >= ROWS - 1:
                self.scroll()
        elif code == ord("\t"):
            cursor.x += TAB_WIDTH
        elif code == BACKSPACE:
            if cursor.x >= 1:
                cursor.x -= 1
                self._write(ord(" "))
            else:
                cursor.back_line()
        else:
            self._write(code)
            cursor.x += 1

    def _color_code(self, text: str, i: int) -> int:
        """Apply the colour code starting at ``text[i]``; return the next index."""
        code = text[i] if i < len(text) else ""
        following = text[i + 1] if i + 1 < len(text) else ""
        if code == "l":
            if following in _LIGHT_CODES:
                self.color = _LIGHT_CODES[following]
                return i + 2
            self.color = self.default_color
            return i + 1
        if code == "d":
            if following == "g":
                self.color = Color.DARK_GREY
                return i + 2
            self.color = self.default_color
            return i + 1
        if code == ":":
            self.cursor.reset()
            return i + 1
        if code == "b":
            if following == "r":
                self.color = Color.BROWN
                return i + 2
            self.color = Color.BLUE
            return i + 1
        if code == "r":
            if following == "e":
                self.color = self.default_color
                return i + 2
            self.color = Color.RED
            return i + 1
        if code in _SIMPLE_CODES:
            self.color = _SIMPLE_CODES[code]
        return i + 1

    def print(self, text: str) -> None:
        """Write text, interpreting ``@`` colour codes; long lines wrap."""
        cursor = self.cursor
        i = 0
        while i < len(text):
            ch = text[i]
            if ch == "\0":
                break
            if ch == "\n":
                cursor.newline()
                i += 1
            elif ch == "\t":
                cursor.x += TAB_WIDTH
                i += 1
            elif ch == "@":
                i = self._color_code(text, i + 1)
            else:
                self._write(ord(ch))
                i += 1
                cursor.x += 1
                if cursor.x >= COLS:
                    cursor.x = 0
                    cursor.y += 1

    def scroll(self) -> None:
        """Shift rows up once the cursor reaches the bottom row."""
        cursor = self.cursor
        if cursor.y < ROWS - 1:
            return
        offset = cursor.y - ROWS + 1
        kept = (ROWS - offset) * COLS
        start = offset * COLS
        self.cells[:kept] = self.cells[start:start + kept]
        blank = text_value(ord(" "), (self.color >> 4) & 0xFF, self.color & 0xFF)
        row_start = kept
        for index in range(row_start, min(row_start + COLS, len(self.cells))):
            self.cells[index] = blank
        cursor.y = ROWS - 1
        cursor.x = 0

    def clear(self) -> None:
        """Blank the screen in white on black and home the cursor."""
        blank = text_value(ord(" "), 0x00, 0x0F)
        self.cells = [blank] * (ROWS * COLS)
        self.cursor.reset()

    def fill(self, color: int) -> None:
        """Blank the screen with ``color``, home the cursor and make it the default."""
        color &= 0xFF
        blank = text_value(ord(" "), (color >> 4) & 0x0F, color & 0x0F)
        self.cells = [blank] * (ROWS * COLS)
        self.cursor.reset()
        self.color = color
        self.default_color = color

    def row_text(self, row: int) -> str:
        """Characters of one row, without their attributes."""
        if not 0 <= row < ROWS:
            raise IndexError(f"row {row} is off the screen")
        return "".join(chr(cell & 0xFF) for cell in self.cells[row * COLS:(row + 1) * COLS])