import pytest

from trivial_argument_parser.argument import ArgType


def test_arg_type():
    arg_type = ArgType.VALUE_LIST
    assert arg_type == ArgType.VALUE_LIST
    assert arg_type != ArgType.VALUE
    assert arg_type != "value_list"
    assert arg_type.value == "value_list"
    assert str(arg_type) == "value_list"
    assert len(ArgType.choices()) == 3


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("flag", ArgType.FLAG),
        ("FLAG", ArgType.FLAG),
        ("switch", ArgType.FLAG),
        (" value ", ArgType.VALUE),
        ("list", ArgType.VALUE_LIST),
        ("value-list", ArgType.VALUE_LIST),
        ("values", ArgType.VALUE_LIST),
    ],
)
def test_arg_type_aliases(raw, expected):
    assert ArgType(raw) is expected


def test_invalid_arg_type():
    with pytest.raises(ValueError, match="Must be one of: flag, value, value_list"):
        ArgType("counter")
    with pytest.raises(ValueError):
        ArgType(3)
