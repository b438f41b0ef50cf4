import pytest

from famp.os_info import DataType
from famp.yaml_lexer import YamlError
from famp.yaml_parser import open_and_parse_yaml, parse_entries

BOOT_YAML = """# boot configuration
os_type: "64bit"
os_name: "FAMP"
os_vers: "1.0"
pref_FS: "FAT32"
disk_name: "disk"
auto_format: "no"
bin_folder: "bin"
kernel_o_binary: "kernel.o"
kernel_bin_binary: "kernel.bin"
kernel_source_code_file: "kernel.c"
"""


def test_entry_types():
    entries = parse_entries("a: \"text\"\nb: 42\nc: 0xA\nd: 'z'\n")
    assert [e.name for e in entries] == ["a", "b", "c", "d"]
    assert [e.data_type for e in entries] == [
        DataType.STR,
        DataType.DEC,
        DataType.HEX,
        DataType.CHR,
    ]
    assert entries[0].value == "text"
    assert entries[1].value == "42"


def test_empty_source_gives_no_entries():
    assert parse_entries("# only a comment\n") == []


def test_missing_colon():
    with pytest.raises(YamlError, match="Expected `:` after `key`"):
        parse_entries("key 1")


def test_bad_value():
    with pytest.raises(YamlError, match="Expected a string, decimal or hex value"):
        parse_entries("key: [")


def test_stray_token():
    with pytest.raises(YamlError, match="Error on line"):
        parse_entries(": 1")


def test_open_and_parse(tmp_path):
    (tmp_path / "boot.yaml").write_text(BOOT_YAML)
    (tmp_path / "kernel.bin").write_bytes(bytes(2048))
    info = open_and_parse_yaml(tmp_path / "boot.yaml")
    assert info.os_type == 0x03
    assert info.os_name == "FAMP"
    assert info.fs_type == 2
    assert info.auto_format is False
    assert info.kernel_binary == "kernel.bin"
    assert info.kernel_binary_size == len(bytes(2048))


def test_open_and_parse_explicit_base_dir(tmp_path):
    conf = tmp_path / "conf"
    conf.mkdir()
    (conf / "boot.yaml").write_text(BOOT_YAML)
    (tmp_path / "kernel.bin").write_bytes(bytes(10))
    info = open_and_parse_yaml(conf / "boot.yaml", tmp_path)
    assert info.kernel_binary_size == len(bytes(10))


def test_open_and_parse_missing_file(tmp_path):
    with pytest.raises(YamlError, match="does not exist"):
        open_and_parse_yaml(tmp_path / "boot.yaml")