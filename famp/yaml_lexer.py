"""Tokenizer for the small YAML dialect used by ``boot.yaml``."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterator

_DIGITS = "0123456789"
_HEX_LETTERS = "ABCDEFabcdef"
_WORD_STOPS = '":\n\t '


class YamlError(Exception):
    """Raised when a configuration file cannot be read or understood."""


class TokenKind(Enum):
    USER_DEF = auto()
    COLON = auto()
    LSQRBR = auto()
    RSQRBR = auto()
    STRING = auto()
    NUMBER = auto()
    HEX = auto()
    CHARACTER = auto()
    COMMA = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    line: int


_SINGLE = {
    ":": TokenKind.COLON,
    "[": TokenKind.LSQRBR,
    "]": TokenKind.RSQRBR,
    ",": TokenKind.COMMA,
}


def read_source(path) -> str:
    """Return the text of ``path``; raise YamlError if it is missing or empty."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise YamlError(f"The file `{path}` does not exist.") from exc
    if not data:
        raise YamlError(f"Nothing found in the file `{path}` :(.")
    return data.decode("latin-1")


class Lexer:
    """Splits configuration text into tokens, tracking the current line."""

    def __init__(self, source: str) -> None:
        end = source.find("\0")
        self._src = source if end < 0 else source[:end]
        self._pos = 0
        self.line = 1

    @property
    def _char(self) -> str:
        return self._src[self._pos] if self._pos < len(self._src) else ""

    def _peek(self) -> str:
        nxt = self._pos + 1
        return self._src[nxt] if nxt < len(self._src) else ""

    def _read_while(self, predicate) -> str:
        start = self._pos
        while self._pos < len(self._src) and predicate(self._src[self._pos]):
            self._pos += 1
        return self._src[start:self._pos]

    def _word(self) -> str:
        return self._read_while(lambda c: c not in _WORD_STOPS)

    def _number(self) -> Token:
        line = self.line
        is_hex = self._peek() == "x"
        prefix = ""
        if is_hex:
            # The "0x" prefix is dropped, leaving a single leading zero.
            prefix = "0"
            self._pos += 2
        digits = self._read_while(lambda c: c in _DIGITS or c in _HEX_LETTERS)
        kind = TokenKind.HEX if is_hex else TokenKind.NUMBER
        return Token(kind, prefix + digits, line)

    def next_token(self) -> Token:
        """Return the next token; an EOF token once the text is used up."""
        while True:
            if self._pos >= len(self._src):
                return Token(TokenKind.EOF, "", self.line)
            ch = self._char
            if ch in _DIGITS:
                return self._number()
            if ch == "#":
                self._read_while(lambda c: c != "\n")
                self._pos += 1
                continue
            if ch == "\n":
                while self._char == "\n":
                    self.line += 1
                    self._pos += 1
                continue
            if ch in "\t ":
                self._read_while(lambda c: c == ch)
                continue
            if ch in _SINGLE:
                self._pos += 1
                return Token(_SINGLE[ch], ch, self.line)
            if ch == '"':
                self._pos += 1
                word = self._word()
                # Closing quote and the character after it are consumed.
                self._pos += 2
                return Token(TokenKind.STRING, word, self.line)
            if ch == "'":
                self._pos += 1
                value = self._char
                self._pos += 2
                return Token(TokenKind.CHARACTER, value, self.line)
            if ch not in string.ascii_letters:
                raise YamlError(
                    f"Error on line {self.line}:\n\tInvalid value `{ch}`({ord(ch):x})."
                )
            return Token(TokenKind.USER_DEF, self._word(), self.line)

    def tokens(self) -> Iterator[Token]:
        """Yield every token up to and including the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return