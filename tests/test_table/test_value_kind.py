import pytest

from argstomp import ValueKind


def test_value_kind_enum_values():
    assert ValueKind.STRING.value == "string"
    assert ValueKind.INTEGER.value == "integer"
    assert ValueKind.BOOLEAN.value == "boolean"


def test_value_kind_str_representation():
    assert str(ValueKind.LONG) == "long"
    assert str(ValueKind.CHAR) == "char"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("string", ValueKind.STRING),
        ("str", ValueKind.STRING),
        ("INT", ValueKind.INTEGER),
        (" bool ", ValueKind.BOOLEAN),
        ("character", ValueKind.CHAR),
        ("Float", ValueKind.FLOAT),
    ],
)
def test_value_kind_aliases(value, expected):
    assert ValueKind(value) == expected


@pytest.mark.parametrize("value", ["decimal", "", 1, None])
def test_value_kind_invalid(value):
    with pytest.raises(ValueError):
        ValueKind(value)


def test_value_kind_choices():
    choices = ValueKind.choices()
    assert len(choices) == 9
    assert ValueKind.BYTE in choices


def test_value_kind_groups():
    assert ValueKind.integral() == (
        ValueKind.INTEGER,
        ValueKind.LONG,
        ValueKind.SHORT,
        ValueKind.BYTE,
    )
    assert ValueKind.floating() == (ValueKind.FLOAT, ValueKind.DOUBLE)


@pytest.mark.parametrize(
    "python_type, expected",
    [
        (str, ValueKind.STRING),
        (int, ValueKind.INTEGER),
        (float, ValueKind.DOUBLE),
        (bool, ValueKind.BOOLEAN),
    ],
)
def test_value_kind_from_type(python_type, expected):
    assert ValueKind.from_type(python_type) == expected


@pytest.mark.parametrize("python_type", [list, bytes, None, int | None])
def test_value_kind_from_type_invalid(python_type):
    with pytest.raises(ValueError):
        ValueKind.from_type(python_type)


def test_value_kind_invalid_lists_choices():
    with pytest.raises(ValueError, match="Must be one of: string, integer, long"):
        ValueKind("decimal")
