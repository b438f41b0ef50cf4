"""Parser turning ``boot.yaml`` text into entries and OS information."""

from __future__ import annotations

from pathlib import Path

from famp.os_info import DataType, Entry, OsInfo, build_os_info
from famp.yaml_lexer import Lexer, TokenKind, YamlError, read_source

_VALUE_TYPES = {
    TokenKind.CHARACTER: DataType.CHR,
    TokenKind.STRING: DataType.STR,
    TokenKind.NUMBER: DataType.DEC,
    TokenKind.HEX: DataType.HEX,
}


def parse_entries(source: str) -> list[Entry]:
    """Parse ``name: value`` pairs in order of appearance."""
    lexer = Lexer(source)
    entries: list[Entry] = []
    token = lexer.next_token()
    while True:
        if token.kind is TokenKind.EOF:
            return entries
        if token.kind is not TokenKind.USER_DEF:
            raise YamlError(f"Error on line {lexer.line}.")
        name = token.value
        token = lexer.next_token()
        if token.kind is not TokenKind.COLON:
            raise YamlError(f"Expected `:` after `{name}`.")
        token = lexer.next_token()
        data_type = _VALUE_TYPES.get(token.kind)
        if data_type is None:
            raise YamlError(
                f"Error on line {lexer.line}:\n\tExpected a string, decimal or hex value."
            )
        entries.append(Entry(name, token.value, data_type))
        token = lexer.next_token()


def open_and_parse_yaml(filename, base_dir=None) -> OsInfo:
    """Read a configuration file and build its OsInfo.

    Kernel paths are resolved against ``base_dir``, by default the file's directory.
    """
    path = Path(filename)
    entries = parse_entries(read_source(path))
    return build_os_info(entries, path.parent if base_dir is None else base_dir)