"""Text-mode cursor position and the VGA register writes that move it."""

from __future__ import annotations

from collections import deque

ROWS = 25
COLS = 80

SCREEN_CTRL_PORT = 0x3D4
SCREEN_DATA_PORT = 0x3D5

# The saved-column history is indexed by a single byte.
_HISTORY_LIMIT = 256


class Cursor:
    """Cursor column/row with a history of columns left at each newline."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self._columns: deque[int] = deque(maxlen=_HISTORY_LIMIT)

    def offset(self) -> int:
        """Linear cell offset of the cursor, as a 16-bit value."""
        return (self.y * COLS + self.x) & 0xFFFF

    def register_writes(self) -> list[tuple[int, int]]:
        """Port writes that place the hardware cursor at the current position."""
        pos = self.offset()
        return [
            (SCREEN_CTRL_PORT, 14),
            (SCREEN_DATA_PORT, (pos >> 8) & 0xFF),
            (SCREEN_CTRL_PORT, 15),
            (SCREEN_DATA_PORT, pos & 0xFF),
        ]

    def reset(self) -> None:
        """Move the cursor to the top-left corner."""
        self.x = 0
        self.y = 0

    def newline(self) -> None:
        """Remember the current column and move to the start of the next row."""
        self._columns.append(self.x)
        self.y += 1
        self.x = 0

    def back_line(self) -> bool:
        """Return to the end of the previous row; False if already on the first."""
        if self.y == 0:
            return False
        self.y -= 1
        self.x = self._columns.pop() if self._columns else 0
        return True