import pytest

from famp.boot_config import (
    ConfigError,
    c_format,
    initiate_path,
    pad_os_name,
    read_format,
    render_boot_source,
    strdel,
    write_file,
)


def test_initiate_path_joins():
    assert initiate_path("../", "tools_bin/temp_FS_part_header.bin") == (
        "../tools_bin/temp_FS_part_header.bin"
    )


def test_initiate_path_single():
    assert initiate_path("boot_protocol/bin") == "boot_protocol/bin"


def test_initiate_path_empty_first_raises():
    with pytest.raises(ConfigError):
        initiate_path("", "x")


def test_initiate_path_too_long_raises():
    with pytest.raises(ConfigError):
        initiate_path("a" * 60, "b" * 30)


def test_write_then_read(tmp_path):
    target = tmp_path / "out.txt"
    write_file(target, "abc %d\n")
    assert read_format(target) == "abc %d\n"


def test_write_bytes(tmp_path):
    target = tmp_path / "out.bin"
    write_file(target, b"\x00\x01\xff")
    assert target.read_bytes() == b"\x00\x01\xff"


def test_write_none_raises(tmp_path):
    with pytest.raises(ConfigError):
        write_file(tmp_path / "x", None)


def test_read_missing_raises(tmp_path):
    with pytest.raises(ConfigError):
        read_format(tmp_path / "missing")


def test_read_empty_raises(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    with pytest.raises(ConfigError):
        read_format(target)


def test_strdel_removes_range():
    assert strdel("hello world", 5, 6) == "hello"


def test_strdel_past_end_raises():
    with pytest.raises(ConfigError):
        strdel("abc", 2, 5)


def test_c_format_length_modifiers():
    assert c_format("%ld-%s-%lu", 3, "x", 7) == "3-x-7"


def test_c_format_hex_and_percent():
    assert c_format("%X %x 100%%", 255, 255) == "FF ff 100%"


def test_c_format_argument_mismatch_raises():
    with pytest.raises(ConfigError):
        c_format("%d %d", 1)


def test_pad_os_name_short():
    padded = pad_os_name("abc")
    assert len(padded) == 15
    assert padded.rstrip(" ") == "abc"


def test_pad_os_name_long_unchanged():
    name = "a" * 20
    assert pad_os_name(name) == name


def test_render_boot_source_layout():
    template = "%d %s %s %d" + " %d" * 9
    out = render_boot_source(template, 1, "OS", "v1", 2, 3, 1024, 2048, 2560)
    fields = out.split()
    assert fields[:5] == ["1", "OS", "v1", "2", "3"]
    assert fields[5] == fields[7]
    assert fields[8] == fields[10]
    assert int(fields[5]) == 3 + int(fields[6])
    assert int(fields[8]) == int(fields[7]) + int(fields[9])
    assert int(fields[11]) == int(fields[10]) + int(fields[12])
    assert int(fields[12]) == 2560 // 512