import pytest

from trivial_argument_parser import (
    Argument,
    ArgumentIdentification,
    ArgumentList,
    ArgType,
    ValueArgument,
)
from trivial_argument_parser.exceptions import (
    ArgumentDefinitionError,
    ArgumentValidationError,
)


def test_parse_negative_integer():
    number = ValueArgument.new_integer(ArgumentIdentification.long("number"))
    with ArgumentList() as args_list:
        args_list.register(number)
        args_list.parse_args(["--number", "-42"])
    assert number.first_value() == -42


def test_parse_negative_float():
    value = ValueArgument.new_typed(ArgumentIdentification.long("value"), float)
    with ArgumentList() as args_list:
        args_list.register(value)
        args_list.parse_args(["--value", "-3.14"])
    assert value.first_value() == -3.14


def test_negative_number_is_dangling():
    args_list = ArgumentList()
    args_list.append_arg(Argument("n", None, ArgType.FLAG))
    args_list.parse_args(["-1", "-n", "-2"])
    assert args_list.get_dangling_values() == ["-1", "-2"]


def test_lone_minus_is_not_a_number():
    number = ValueArgument.new_integer(ArgumentIdentification.short("n"))
    with ArgumentList() as args_list:
        args_list.register(number)
        with pytest.raises(ArgumentValidationError):
            args_list.parse_args(["-n", "-"])


def test_number_flag_rejected():
    with pytest.raises(ArgumentDefinitionError):
        ArgumentIdentification.short("-1")
