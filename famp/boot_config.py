"""Helpers for the configuration tools: paths, files and template rendering."""

from __future__ import annotations

import re
from pathlib import Path

MAX_PATH = 80

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d+|\*)?(?:\.(?P<prec>\d+|\*))?"
    r"(?P<length>hh|h|ll|l|z|j|t|L)?(?P<conv>[diouxXcsfFeEgG%])"
)


class ConfigError(Exception):
    """Raised when configuring the boot protocol cannot go on."""


def initiate_path(first, second=None) -> str:
    """Join two path pieces as plain text, refusing overly long results."""
    if not first:
        raise ConfigError(
            "Cannot initiate the path. No data given to configure the path."
        )
    first = str(first)
    if second is None:
        return first
    second = str(second)
    if len(first) + len(second) > MAX_PATH:
        raise ConfigError(
            f"Path is too large: {first}{second}.\n"
            "FAMP only allows up to 50 characters for a path."
        )
    return first + second


def read_format(path) -> str:
    """Return the text of a template file; it must exist and be non-empty."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigError(
            f"Error openeing {path}.\n\tWas it deleted?"
        ) from exc
    if not data:
        raise ConfigError(
            f"Error with size of {path}.\n\tWas all the content removed?"
        )
    return data.decode("latin-1")


def write_file(path, data) -> None:
    """Write ``data`` (text or bytes) to ``path``, replacing its contents."""
    if data is None:
        raise ConfigError(f"There was no buffer to write to the file {path}.")
    if isinstance(data, str):
        data = data.encode("latin-1")
    try:
        Path(path).write_bytes(bytes(data))
    except OSError as exc:
        raise ConfigError(f"Error creating file {path}.") from exc


def strdel(text: str, start: int, length: int) -> str:
    """Return ``text`` with ``length`` characters removed from ``start``."""
    end = start + length
    if start < 0 or length < 0 or end > len(text):
        raise ConfigError("End position surpasses length of text.")
    return text[:start] + text[end:]


def c_format(template: str, *args) -> str:
    """Render a printf-style template, ignoring C length modifiers."""
    def strip(match: re.Match) -> str:
        if match.group("conv") == "%":
            return "%%"
        return (
            "%"
            + match.group("flags")
            + (match.group("width") or "")
            + (f".{match.group('prec')}" if match.group("prec") is not None else "")
            + match.group("conv")
        )

    pieces = []
    last = 0
    for match in _SPEC.finditer(template):
        pieces.append(template[last:match.start()].replace("%", "%%"))
        pieces.append(strip(match))
        last = match.end()
    pieces.append(template[last:].replace("%", "%%"))
    try:
        return "".join(pieces) % tuple(args)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot render template: {exc}") from exc


def pad_os_name(name: str) -> str:
    """Pad an OS name with spaces to 15 characters; longer names are kept."""
    return name.ljust(15) if len(name) < 15 else name


def render_boot_source(
    template: str,
    fs_type: int,
    os_name: str,
    os_version: str,
    os_type: int,
    first_sector: int,
    ssb_size: int,
    kernel_size: int,
    fs_size: int,
) -> str:
    """Fill the boot sector template with OS fields and sector layout.

    The layout is second stage, then kernel, then filesystem, each given as
    start sector, end sector and sector count.
    """
    ssb_sectors = ssb_size // 512
    kernel_sectors = kernel_size // 512
    fs_sectors = fs_size // 512
    kernel_start = first_sector + ssb_sectors
    fs_start = kernel_start + kernel_sectors
    return c_format(
        template,
        fs_type,
        os_name,
        os_version,
        os_type,
        first_sector,
        kernel_start,
        ssb_sectors,
        kernel_start,
        fs_start,
        kernel_sectors,
        fs_start,
        fs_start + fs_sectors,
        fs_sectors,
    )