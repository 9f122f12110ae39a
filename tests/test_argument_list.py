from decimal import Decimal

import pytest

from trivial_argument_parser import (
    Argument,
    ArgumentIdentification,
    ArgumentList,
    ArgType,
    FlagResult,
    ValueArgument,
    ValueListResult,
    ValueResult,
)
from trivial_argument_parser.argument_list import long_option_name, short_option_name
from trivial_argument_parser.exceptions import (
    ArgumentValidationError,
    ArityError,
    MissingValueError,
    UnknownArgumentError,
)


def build_args_list() -> ArgumentList:
    args_list = ArgumentList()
    args_list.append_arg(Argument("d", None, ArgType.FLAG))
    args_list.append_arg(Argument("p", None, ArgType.VALUE))
    args_list.append_arg(Argument("l", "an-list", ArgType.VALUE_LIST))
    return args_list


def test_str():
    args_list = build_args_list()
    assert str(args_list) == "ArgumentList(arguments=3, registered=0, dangling=0)"
    assert repr(args_list) == str(args_list)


def test_parse_works():
    args_list = build_args_list()
    args_list.parse_args(["-d", "-p", "/file", "--an-list", "Marcin", "-l", "Mazgaj"])

    assert args_list.arguments[0].arg_result == FlagResult()
    assert args_list.arguments[1].arg_result == ValueResult("/file")
    assert args_list.arguments[2].arg_result == ValueListResult(["Marcin", "Mazgaj"])
    assert args_list.search_by_short_name("d").get_flag() is True
    assert args_list.search_by_long_name("an-list").get_values() == ["Marcin", "Mazgaj"]
    assert args_list.get_dangling_values() == []


def test_round_trip_with_list_long_name():
    args_list = ArgumentList()
    args_list.append_arg(Argument("d", None, ArgType.FLAG))
    args_list.append_arg(Argument("p", None, ArgType.VALUE))
    args_list.append_arg(Argument("l", "list", ArgType.VALUE_LIST))
    args_list.parse_args(["-d", "-p", "/file", "--list", "a", "-l", "b"])

    assert args_list.search_by_short_name("d").get_flag()
    assert args_list.search_by_short_name("p").get_value() == "/file"
    assert args_list.search_by_long_name("list").get_values() == ["a", "b"]
    assert args_list.get_dangling_values() == []


def test_get_dangling_values_works():
    args_list = build_args_list()
    args_list.parse_args(["-d", "-p", "/file", "--an-list", "Marcin", "dangling"])
    assert args_list.get_dangling_values() == ["dangling"]


def test_values_with_spaces_work():
    args_list = ArgumentList()
    args_list.append_arg(Argument("n", None, ArgType.VALUE))
    args_list.append_arg(Argument(None, "hello", ArgType.VALUE_LIST))
    args_list.parse_args(
        ["-n", "Marcin Mazgaj", "--hello", "Hello World!", "--hello", "Witaj świecie!"]
    )
    assert args_list.search_by_short_name("n").get_value() == "Marcin Mazgaj"
    assert args_list.search_by_long_name("hello").get_values() == [
        "Hello World!",
        "Witaj świecie!",
    ]


@pytest.mark.parametrize(
    "token",
    ["-1", "--", "-", "x", "ab", "-9", "--1", "---x", "-_", "file.txt", ""],
)
def test_positional_classification(token):
    args_list = build_args_list()
    args_list.parse_args([token])
    assert args_list.get_dangling_values() == [token]


def test_dangling_values_keep_order_and_duplicates():
    args_list = build_args_list()
    args_list.parse_args(["a", "-d", "b", "a", "-1", "--"])
    assert args_list.get_dangling_values() == ["a", "b", "a", "-1", "--"]


@pytest.mark.parametrize(
    "token,short,long",
    [
        ("-d", "d", None),
        ("-é", "é", None),
        ("--list", None, "list"),
        ("--an-list", None, "an-list"),
        ("--list=a", None, "list=a"),
        ("-dd", None, None),
        ("--", None, None),
        ("-1", None, None),
    ],
)
def test_token_classification(token, short, long):
    assert short_option_name(token) == short
    assert long_option_name(token) == long


def test_flag_set_twice_fails():
    args_list = build_args_list()
    with pytest.raises(ArityError, match="Error while parsing arguments: Flag already set"):
        args_list.parse_args(["-d", "-d"])


def test_value_set_twice_fails():
    args_list = build_args_list()
    with pytest.raises(ArityError) as excinfo:
        args_list.parse_args(["-p", "a", "-p", "b"])
    assert str(excinfo.value) == "Error while parsing arguments: Value already assigned"
    assert isinstance(excinfo.value.__cause__, ArityError)


def test_value_list_accumulates_n_values():
    args_list = build_args_list()
    tokens = []
    for index in range(5):
        tokens += ["-l", str(index)]
    args_list.parse_args(tokens)
    assert args_list.search_by_short_name("l").get_values() == ["0", "1", "2", "3", "4"]


def test_missing_value_fails():
    args_list = build_args_list()
    with pytest.raises(MissingValueError, match="Expected value"):
        args_list.parse_args(["-d", "-p"])


def test_value_may_look_like_an_option():
    args_list = build_args_list()
    args_list.parse_args(["-p", "-d"])
    assert args_list.search_by_short_name("p").get_value() == "-d"
    assert args_list.search_by_short_name("d").get_flag() is False


def test_unknown_option_halts_parsing():
    args_list = build_args_list()
    with pytest.raises(UnknownArgumentError) as excinfo:
        args_list.parse_args(["-d", "--unknown", "-p", "/file", "after"])
    assert str(excinfo.value) == (
        "Error while parsing arguments: could not find argument identified by --unknown"
    )
    assert args_list.search_by_short_name("d").get_flag() is True
    assert args_list.search_by_short_name("p").arg_result is None
    assert args_list.get_dangling_values() == []


def test_unknown_short_option():
    with pytest.raises(UnknownArgumentError, match="identified by -z"):
        build_args_list().parse_args(["-z"])


def test_names_are_case_sensitive():
    with pytest.raises(UnknownArgumentError):
        build_args_list().parse_args(["-D"])


def test_search_not_found():
    args_list = build_args_list()
    with pytest.raises(UnknownArgumentError, match="Argument not found"):
        args_list.search_by_short_name("z")
    with pytest.raises(UnknownArgumentError, match="Argument not found"):
        args_list.search_by_long_name("missing")


def test_append_arg_rejects_value_argument():
    args_list = ArgumentList()
    with pytest.raises(TypeError):
        args_list.append_arg(ValueArgument.new_string(ArgumentIdentification.short("s")))


def test_registered_arguments_are_dispatched():
    threads = ValueArgument.new_integer(ArgumentIdentification.both("t", "threads"))
    name = ValueArgument.new_string(ArgumentIdentification.long("name"))
    with build_args_list() as args_list:
        args_list.register(threads)
        args_list.register(name)
        args_list.parse_args(["-t", "4", "--name", "x", "-d", "--threads", "-8", "end"])
        assert args_list.search_by_short_name("d").get_flag()
        assert args_list.get_dangling_values() == ["end"]

    assert threads.values() == [4, -8]
    assert name.first_value() == "x"


def test_owned_argument_shadows_registered_argument():
    shadowed = ValueArgument.new_string(ArgumentIdentification.short("p"))
    with build_args_list() as args_list:
        args_list.register(shadowed)
        args_list.parse_args(["-p", "/file"])
        assert args_list.search_by_short_name("p").get_value() == "/file"
    assert shadowed.values() == []


def test_first_registered_argument_wins():
    first = ValueArgument.new_string(ArgumentIdentification.short("x"))
    second = ValueArgument.new_string(ArgumentIdentification.both("x", "ex"))
    with ArgumentList() as args_list:
        args_list.register(first)
        args_list.register(second)
        args_list.parse_args(["-x", "a", "--ex", "b"])
    assert first.values() == ["a"]
    assert second.values() == ["b"]


def test_registered_argument_errors_abort_parse():
    number = ValueArgument.new_integer(ArgumentIdentification.short("n"))
    with ArgumentList() as args_list:
        args_list.register(number)
        with pytest.raises(
            ArgumentValidationError,
            match="Error while parsing arguments: Input is not a number",
        ):
            args_list.parse_args(["-n", "12a", "leftover"])
        assert args_list.get_dangling_values() == []


def test_registered_argument_missing_value():
    number = ValueArgument.new_integer(ArgumentIdentification.short("n"))
    with ArgumentList() as args_list:
        args_list.register(number)
        with pytest.raises(MissingValueError, match="No remaining input values."):
            args_list.parse_args(["-n"])


def test_parse_accepts_any_iterable():
    args_list = build_args_list()
    args_list.parse_args(iter(["-p", "v", "x"]))
    assert args_list.search_by_short_name("p").get_value() == "v"
    assert args_list.get_dangling_values() == ["x"]


def test_parse_empty_input():
    args_list = build_args_list()
    args_list.parse_args([])
    assert args_list.get_dangling_values() == []
    assert all(argument.arg_result is None for argument in args_list.arguments)


def test_typed_conversion_errors_are_prefixed():
    amount = ValueArgument.new_typed(ArgumentIdentification.short("x"), Decimal)
    with ArgumentList() as args_list:
        args_list.register(amount)
        with pytest.raises(ArgumentValidationError) as excinfo:
            args_list.parse_args(["-x", "abc"])
    assert str(excinfo.value).startswith(
        "Error while parsing arguments: 'abc' could not be converted to Decimal"
    )
    assert isinstance(excinfo.value.__cause__, ArgumentValidationError)
