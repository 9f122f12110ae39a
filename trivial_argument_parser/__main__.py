"""
Trivial Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage:
    python -m trivial_argument_parser CONFIG [TOKEN ...]

Loads the argument definitions from CONFIG (YAML or TOML), parses the remaining
tokens against them and prints the bound results.
"""
import sys
from typing import Sequence

from rich.markup import escape

from trivial_argument_parser.config import loader
from trivial_argument_parser.console import console
from trivial_argument_parser.display import render_arguments
from trivial_argument_parser.exceptions import ArgumentParserError
from trivial_argument_parser.utils import args_to_list, setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    tokens = args_to_list(argv)
    if not tokens:
        console.print("usage: python -m trivial_argument_parser CONFIG [TOKEN ...]")
        return 2

    setup_logging()
    config_path, tokens = tokens[0], tokens[1:]
    try:
        args_list = loader(config_path)
    except (FileNotFoundError, ValueError) as error:
        console.print(
            f"[bold red]Could not load '{escape(config_path)}':[/] {escape(str(error))}"
        )
        return 1

    try:
        args_list.parse_args(tokens)
    except ArgumentParserError as error:
        console.print(f"[bold red]{type(error).__name__}:[/] {escape(str(error))}")
        return 1

    render_arguments(args_list, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
