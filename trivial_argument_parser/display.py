# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Rich table view of the arguments bound by an `ArgumentList`."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trivial_argument_parser.argument.legacy_argument import (
    Argument,
    FlagResult,
    ValueListResult,
    ValueResult,
)
from trivial_argument_parser.argument_list import ArgumentList
from trivial_argument_parser.console import console as default_console


def _result_text(argument: Argument) -> str:
    result = argument.arg_result
    if result is None:
        return "[dim]unset[/dim]"
    if isinstance(result, FlagResult):
        return "set"
    if isinstance(result, ValueResult):
        return escape(result.value)
    if isinstance(result, ValueListResult):
        return escape(", ".join(result.values))
    return escape(repr(result))


def build_table(args_list: ArgumentList, title: str = "Arguments") -> Table:
    """Build a table with one row per owned argument and one for dangling values."""
    table = Table(title=title, expand=False, box=box.SIMPLE)
    table.add_column("Short", style="bold cyan")
    table.add_column("Long", style="bold cyan")
    table.add_column("Type", style="dim")
    table.add_column("Result", overflow="fold")

    for argument in args_list.arguments:
        table.add_row(
            f"-{argument.short}" if argument.short else "",
            f"--{escape(argument.long)}" if argument.long else "",
            str(argument.arg_type),
            _result_text(argument),
        )
    if args_list.dangling_values:
        table.add_row(
            "", "", "dangling", escape(", ".join(args_list.dangling_values))
        )
    return table


def render_arguments(
    args_list: ArgumentList, console: Console | None = None, title: str = "Arguments"
) -> None:
    """Print the parsed state of an `ArgumentList`."""
    (console or default_console).print(build_table(args_list, title=title))
