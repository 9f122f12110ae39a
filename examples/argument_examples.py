from enum import Enum

from trivial_argument_parser import (
    ArgBuilder,
    Argument,
    ArgumentIdentification,
    ArgumentList,
    ArgType,
    ValueArgument,
    args_to_list,
)
from trivial_argument_parser.display import render_arguments


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


threads = ValueArgument.new_integer(ArgumentIdentification.both("t", "threads"))
mode = ValueArgument.new_typed(ArgumentIdentification.long("mode"), Mode, multiple=False)

with ArgumentList() as args_list:
    args_list.append_arg(Argument("d", "debug", ArgType.FLAG))
    args_list.append_arg(ArgBuilder(ArgType.VALUE).set_short_name("p").build())
    args_list.append_arg(Argument("l", "list", ArgType.VALUE_LIST))
    args_list.register(threads)
    args_list.register(mode)

    args_list.parse_args(args_to_list())
    render_arguments(args_list)

print(f"threads={threads.values()} mode={mode.first_value()}")
