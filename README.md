# famp

Python helpers for a small x86 boot protocol. The package reads the OS
description kept in `boot.yaml`, builds the partition header for the
filesystem partition, fills the boot sector source template with the sector
layout, and models the pieces the protocol runs at boot time: the 80x25 VGA
text screen and its cursor, the scancode-set-1 keyboard decoder, the colour
prompt, and the default global descriptor table.

It is a library only; it installs no commands.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `famp.yaml_lexer` – `Lexer` splits configuration text into `Token`s of a
  `TokenKind`; `read_source(path)` reads a file. Problems raise `YamlError`.
- `famp.yaml_parser` – `parse_entries(source)` returns the `name: value`
  pairs as `Entry` objects in order; `open_and_parse_yaml(filename, base_dir)`
  reads a file and builds an `OsInfo`.
- `famp.os_info` – `OsInfo`, `Entry`, `DataType` and
  `build_os_info(entries, base_dir)`, which reads the entries by position and
  takes the kernel binary's size from disk (relative to `base_dir`).
- `famp.boot_config` – `initiate_path`, `read_format`, `write_file`,
  `strdel`, `c_format` (printf-style templates), `pad_os_name` and
  `render_boot_source`. Problems raise `ConfigError`.
- `famp.partition` – `PartitionHeader` with `pack`, `unpack` and `set_lba`;
  `configure_header` fills in tags, filesystem type, partition type and
  addresses. `PartitionType` and `FsType` name the codes.
- `famp.bits` – bit and byte helpers and `text_attribute` / `text_value` for
  text cells.
- `famp.colors` – the `Color` enum, `color_from_name`, `color_label` and
  `itoa`.
- `famp.cursor` – `Cursor`, with the VGA port writes that place it.
- `famp.screen` – `TextScreen`, a cell buffer with `put_char`, `print`
  (understands `@` colour codes), `scroll`, `clear`, `fill` and `row_text`.
- `famp.keyboard` – `Keyboard` decodes an iterable of scancodes with
  `get_key`, `read_char` and `read_line`; `is_release` tells release codes.
  Running out of scancodes raises `EOFError`.
- `famp.color_prompt` – `read_color` and `clear_screen`, which asks the user
  to fix matching foreground and background colours.
- `famp.gdt` – `Gdt`, `SegmentDescriptor`, `GdtDescriptor`, `default_gdt`,
  `setup_gdt` and `validate_for_load` (raises `GdtError`).

## `boot.yaml`

A flat list of `name: value` pairs. Values are strings in double quotes,
characters in single quotes, decimal numbers or `0x` hex numbers; `#` starts
a comment. `build_os_info` reads the first ten entries in this order:

```
os_type: "32bit"
os_name: "MyOS"
os_vers: "0.1"
pref_FS: "FAT32"
disk_name: "mydisk"
auto_format: "yes"
bin_folder: "bin"
kernel_o_binary: "kernel.o"
kernel_bin_binary: "bin/kernel.bin"
kernel_source_code_file: "kernel.c"
```

## Examples

```python
from famp.yaml_parser import parse_entries
from famp.partition import PartitionHeader, configure_header
from famp.keyboard import Keyboard
from famp.screen import TextScreen
from famp.gdt import GdtStatus, setup_gdt

entries = parse_entries('os_name: "MyOS"\n')
print(entries[0].name, entries[0].value)          # os_name MyOS

header = configure_header(PartitionHeader(), 4096, part_type="KOA")
header.set_lba(10, 2560)
raw = header.pack()

line = Keyboard([0x23, 0x17, 0x1C]).read_line()   # "hi"

screen = TextScreen(0x3F)
screen.print("hello @gworld\n")
print(screen.row_text(0).rstrip("\0"))            # hello world

gdt, descriptor, status = setup_gdt(GdtStatus.NO_GDT, 0xA000)
```

## What this package does not do

It has no command-line tools. It does not pad binaries to whole sectors or
write memory stamps into them, and it does not assemble, check or format a
disk image file; `PartitionHeader` and `render_boot_source` produce the
pieces, but writing them into an image is left to the caller. The screen,
keyboard and GDT modules are in-memory models and touch no hardware.