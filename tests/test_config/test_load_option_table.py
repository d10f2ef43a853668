import textwrap

import pytest

from argstomp import OptionBinder, ValueKind
from argstomp.config import convert_options, load_option_table
from argstomp.exceptions import OptionTableError

YAML_TABLE = textwrap.dedent(
    """
    options:
      - dest: first_word
        long_name: first
        short_name: "f"
        required: true
      - dest: second_word
      - dest: num
        short_name: "n"
        value_kind: int
        default: 0
      - dest: bool
        short_name: "b"
        value_kind: boolean
        default: true
    """
)

TOML_TABLE = textwrap.dedent(
    """
    [[options]]
    dest = "first_word"
    long_name = "first"
    short_name = "f"
    required = true

    [[options]]
    dest = "num"
    short_name = "n"
    value_kind = "long"
    default = 0
    help = "A number."
    """
)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


@pytest.mark.parametrize("name", ["options.yaml", "options.yml"])
def test_load_yaml(tmp_path, name):
    table = load_option_table(write(tmp_path, name, YAML_TABLE))
    assert [descriptor.dest for descriptor in table] == [
        "first_word",
        "second_word",
        "num",
        "bool",
    ]
    assert table.get_option("first_word").flags == ("--first", "-f")
    assert table.get_option("first_word").required is True
    assert table.get_option("second_word").long_name == "second_word"
    assert table.get_option("num").value_kind == ValueKind.INTEGER
    assert table.get_option("bool").default is True


def test_load_toml(tmp_path):
    table = load_option_table(str(write(tmp_path, "options.toml", TOML_TABLE)))
    num = table.get_option("num")
    assert num.value_kind == ValueKind.LONG
    assert num.help == "A number."
    assert len(table) == 2


def test_loaded_table_binds(tmp_path):
    table = load_option_table(write(tmp_path, "options.yaml", YAML_TABLE))
    args = OptionBinder(table).parse_args(["--first", "hello", "-n", "42", "-b"])
    assert args.first_word == "hello"
    assert args.second_word is None
    assert args.num == 42
    assert args.bool is False


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_option_table(tmp_path / "missing.yaml")


def test_invalid_path_type():
    with pytest.raises(TypeError):
        load_option_table(42)


def test_unsupported_format(tmp_path):
    with pytest.raises(OptionTableError, match="Unsupported config format"):
        load_option_table(write(tmp_path, "options.json", "{}"))


@pytest.mark.parametrize(
    "content",
    ["- dest: first\n", "title: nothing\n", "options: first\n", ""],
)
def test_invalid_root(tmp_path, content):
    with pytest.raises(OptionTableError, match="list of options"):
        load_option_table(write(tmp_path, "options.yaml", content))


def test_malformed_yaml(tmp_path):
    with pytest.raises(OptionTableError, match="Cannot parse"):
        load_option_table(write(tmp_path, "options.yaml", "options: [\n"))


def test_malformed_toml(tmp_path):
    with pytest.raises(OptionTableError, match="Cannot parse"):
        load_option_table(write(tmp_path, "options.toml", "[[options]\n"))


def test_invalid_value_kind_entry():
    with pytest.raises(OptionTableError, match="Invalid option entry #0"):
        convert_options([{"dest": "num", "value_kind": "decimal"}])


def test_missing_dest_entry():
    with pytest.raises(OptionTableError, match="Invalid option entry #1"):
        convert_options([{"dest": "a"}, {"short_name": "b"}])


def test_non_mapping_entry():
    with pytest.raises(OptionTableError, match="must be a mapping"):
        convert_options(["first"])


def test_duplicate_flags_in_file(tmp_path):
    content = "options:\n  - dest: a\n    short_name: x\n  - dest: b\n    short_name: x\n"
    with pytest.raises(OptionTableError, match="already used"):
        load_option_table(write(tmp_path, "options.yaml", content))


def test_non_string_key_entry(tmp_path):
    with pytest.raises(OptionTableError, match="Invalid option entry #0"):
        load_option_table(write(tmp_path, "options.yaml", "options:\n  - {1: x}\n"))


def test_unknown_key_entry():
    with pytest.raises(OptionTableError, match="Invalid option entry #0"):
        convert_options([{"dest": "num", "shortname": "n"}])


def test_undecodable_file(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_bytes(b"options:\n  - dest: \xff\xfe\n")
    with pytest.raises(OptionTableError, match="Cannot parse"):
        load_option_table(path)
