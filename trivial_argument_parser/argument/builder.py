# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Fluent builder for owned `Argument` definitions."""
from __future__ import annotations

from trivial_argument_parser.argument.legacy_argument import Argument, ArgType


class ArgBuilder:
    """
    Accumulates the type and names of an `Argument` and builds it.

    Example:
        ArgBuilder(ArgType.VALUE).set_short_name("x").set_long_name("my-arg").build()
    """

    def __init__(self, arg_type: ArgType | str) -> None:
        self.arg_type: ArgType = ArgType(arg_type)
        self.short_name: str | None = None
        self.long_name: str | None = None

    def set_short_name(self, short_name: str) -> ArgBuilder:
        self.short_name = short_name
        return self

    def set_long_name(self, long_name: str) -> ArgBuilder:
        self.long_name = long_name
        return self

    def set_type(self, arg_type: ArgType | str) -> ArgBuilder:
        self.arg_type = ArgType(arg_type)
        return self

    def build(self) -> Argument:
        """
        Build the argument.

        Raises:
            ArgumentDefinitionError: If neither a short nor a long name was set.
        """
        return Argument(self.short_name, self.long_name, self.arg_type)
