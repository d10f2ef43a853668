import logging
from dataclasses import dataclass, field

import pytest

from argstomp import OptionBinder, OptionTable, ValueKind, not_option, option
from argstomp.exceptions import MissingRequiredOptionError, OptionTableError


@dataclass
class Args:
    first_word: str = option(long_name="first", short_name="f", required=True)
    second_word: str = option(default="")
    num: int = option(short_name="n", default=0)
    ratio: float = option(value_kind=ValueKind.FLOAT, default=1.0)
    initial: str = option(value_kind="char", default="a")
    nickname: str | None = option(default=None, help="Optional nickname.")
    verbose: bool = option(short_name="b", default=True)
    not_an_arg: int = not_option(default=0)


@dataclass
class Undeclared:
    name: str = option(default="")
    stray: int = 0


@dataclass
class Unsupported:
    tags: list = option(default_factory=list)


def test_from_dataclass_builds_descriptors_in_field_order():
    table = OptionTable.from_dataclass(Args)
    assert [descriptor.dest for descriptor in table] == [
        "first_word",
        "second_word",
        "num",
        "ratio",
        "initial",
        "nickname",
        "verbose",
    ]


def test_from_dataclass_resolves_names_kinds_and_defaults():
    table = OptionTable.from_dataclass(Args)
    first = table.get_option("first_word")
    assert first.flags == ("--first", "-f")
    assert first.required is True
    assert first.default is None

    assert table.get_option("second_word").long_name == "second_word"
    assert table.get_option("num").value_kind == ValueKind.INTEGER
    assert table.get_option("ratio").value_kind == ValueKind.FLOAT
    assert table.get_option("initial").value_kind == ValueKind.CHAR
    assert table.get_option("nickname").value_kind == ValueKind.STRING
    assert table.get_option("nickname").help == "Optional nickname."
    assert table.get_option("verbose").value_kind == ValueKind.BOOLEAN
    assert table.get_option("verbose").default is True
    assert "not_an_arg" not in table


def test_from_dataclass_accepts_instance():
    instance = Args(first_word="x")
    assert OptionTable.from_dataclass(instance) == OptionTable.from_dataclass(Args)


def test_bind_into_dataclass_instance():
    args = Args(first_word="")
    binder = OptionBinder(OptionTable.from_dataclass(Args))
    binder.parse(["-f", "hello", "-n", "42", "-b", "--initial", "zed"], args)
    assert args == Args(
        first_word="hello", num=42, verbose=False, initial="z", not_an_arg=0
    )


def test_bind_into_dataclass_instance_requires_first():
    args = Args(first_word="preset")
    binder = OptionBinder(OptionTable.from_dataclass(Args))
    with pytest.raises(MissingRequiredOptionError):
        binder.parse(["-n", "1"], args)
    assert args.num == 1


def test_undeclared_field_is_skipped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="argstomp"):
        table = OptionTable.from_dataclass(Undeclared)
    assert [descriptor.dest for descriptor in table] == ["name"]
    assert "stray" in caplog.text


def test_not_option_is_skipped_silently(caplog):
    with caplog.at_level(logging.WARNING, logger="argstomp"):
        OptionTable.from_dataclass(Args)
    assert "not_an_arg" not in caplog.text


def test_unsupported_annotation():
    with pytest.raises(OptionTableError, match="Pass value_kind explicitly"):
        OptionTable.from_dataclass(Unsupported)


def test_not_a_dataclass():
    class Plain:
        name: str = ""

    with pytest.raises(OptionTableError):
        OptionTable.from_dataclass(Plain)


def test_option_keeps_extra_field_metadata():
    @dataclass
    class WithMetadata:
        name: str = option(default="", metadata={"source": "cli"})
        hidden: int = not_option(default=0, repr=False)

    fields = {f.name: f for f in WithMetadata.__dataclass_fields__.values()}
    assert fields["name"].metadata["source"] == "cli"
    assert fields["hidden"].repr is False
    assert [d.dest for d in OptionTable.from_dataclass(WithMetadata)] == ["name"]


def test_default_factory_is_used_as_default():
    @dataclass
    class Factory:
        name: str = option(default_factory=lambda: "generated")

    assert OptionTable.from_dataclass(Factory).get_option("name").default == "generated"


def test_raw_not_option_metadata_is_honored():
    @dataclass
    class Mixed:
        plain: int = field(default=0, metadata={"argstomp.not_option": True})

    assert len(OptionTable.from_dataclass(Mixed)) == 0
