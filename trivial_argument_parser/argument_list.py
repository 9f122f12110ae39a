# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentList`, the registry that owns the tokenization and
dispatch loop of the parser.

An `ArgumentList` holds three things:
- owned `Argument` definitions appended with `append_arg()`,
- leases on caller-owned `ValueArgument` definitions taken with `register()`,
- the dangling values, tokens that are not options.

Token grammar:
- `-x`: exactly two characters, a dash then a letter. Short option `x`.
- `--name`: more than two characters, two dashes then a letter. Long option `name`.
- Anything else (`-1`, `--`, `-`, `file.txt`, ...) is a dangling value.

For each option token the owned arguments are searched first, then the leased
arguments in registration order. An owned argument therefore shadows a leased one
with the same name. An option that matches nothing aborts the parse.

Example Usage:
    with ArgumentList() as args_list:
        args_list.append_arg(Argument("d", None, ArgType.FLAG))
        args_list.append_arg(Argument("p", None, ArgType.VALUE))
        args_list.register(threads)
        args_list.parse_args(["-d", "-p", "/file", "-t", "4", "extra"])

        args_list.search_by_short_name("p").get_value()  # "/file"
        args_list.get_dangling_values()                  # ["extra"]

    threads.first_value()  # 4, readable once the list released its lease
"""
from __future__ import annotations

from typing import Any, Iterable

from trivial_argument_parser.argument.base import HandleableArgument
from trivial_argument_parser.argument.legacy_argument import Argument
from trivial_argument_parser.argument.parsable_argument import (
    ArgumentLease,
    ValueArgument,
)
from trivial_argument_parser.cursor import ArgumentCursor
from trivial_argument_parser.exceptions import (
    ArgumentParserError,
    UnknownArgumentError,
)
from trivial_argument_parser.logger import logger


def short_option_name(token: str) -> str | None:
    """Return `x` for a `-x` token, else None."""
    if len(token) == 2 and token[0] == "-" and token[1].isalpha():
        return token[1]
    return None


def long_option_name(token: str) -> str | None:
    """Return `name` for a `--name` token, else None."""
    if len(token) > 2 and token.startswith("--") and token[2].isalpha():
        return token[2:]
    return None


class ArgumentList:
    """
    Registry of argument definitions and the dangling values left after parsing.

    Attributes:
        dangling_values (list[str]): Tokens that were not options, in input order.
        arguments (list[Argument]): Owned arguments, in append order.
    """

    def __init__(self) -> None:
        self.dangling_values: list[str] = []
        self.arguments: list[Argument] = []
        self._leases: list[ArgumentLease] = []

    def __enter__(self) -> ArgumentList:
        return self

    def __exit__(self, *_: Any) -> None:
        self.release()

    def append_arg(self, argument: Argument) -> None:
        """Append an owned argument to the end of the list."""
        if not isinstance(argument, Argument):
            raise TypeError(f"Expected an Argument, got {type(argument).__name__}")
        self.arguments.append(argument)

    def append_dangling_value(self, value: str) -> None:
        self.dangling_values.append(value)

    def register(self, argument: ValueArgument[Any]) -> ArgumentLease:
        """
        Lease a caller-owned `ValueArgument` for dispatch.

        The caller may not read or handle the argument until the lease is released
        with `release()`, by leaving the `with` block, or by dropping this list.

        Returns:
            ArgumentLease: The lease held by this list. Dropping the list only ends
            the borrow once no other reference to the lease remains, so a caller
            that keeps the returned lease must release it explicitly.

        Raises:
            ArgumentBorrowedError: If the argument is already leased.
        """
        if not isinstance(argument, ValueArgument):
            raise TypeError(f"Expected a ValueArgument, got {type(argument).__name__}")
        lease = argument.lease()
        self._leases.append(lease)
        logger.debug("Registered argument '%s'", argument.identification)
        return lease

    def release(self) -> None:
        """Release every lease held by this list."""
        for lease in self._leases:
            lease.release()
        self._leases.clear()

    @property
    def leases(self) -> list[ArgumentLease]:
        return list(self._leases)

    def search_by_short_name(self, name: str) -> Argument:
        """
        Return the owned argument with the given short name.

        Raises:
            UnknownArgumentError: If no owned argument has that short name.
        """
        for argument in self.arguments:
            if argument.is_by_short(name):
                return argument
        raise UnknownArgumentError("Argument not found")

    def search_by_long_name(self, name: str) -> Argument:
        """
        Return the owned argument with the given long name.

        Raises:
            UnknownArgumentError: If no owned argument has that long name.
        """
        for argument in self.arguments:
            if argument.is_by_long(name):
                return argument
        raise UnknownArgumentError("Argument not found")

    def get_dangling_values(self) -> list[str]:
        """Return all values not attached to any argument."""
        return self.dangling_values

    def _find_short(self, name: str) -> HandleableArgument | None:
        for owned in self.arguments:
            if owned.is_by_short(name):
                return owned
        return next((lease for lease in self._leases if lease.is_by_short(name)), None)

    def _find_long(self, name: str) -> HandleableArgument | None:
        for owned in self.arguments:
            if owned.is_by_long(name):
                return owned
        return next((lease for lease in self._leases if lease.is_by_long(name)), None)

    def parse_args(self, args: Iterable[str]) -> None:
        """
        Parse the tokens, binding values into the registered arguments.

        Args:
            args (Iterable[str]): The CLI-style token list, without interpretation.

        Raises:
            UnknownArgumentError: If an option token matches no registered argument.
            ArgumentParserError: Any error raised by the matched argument, re-raised
                with the same type and prefixed with "Error while parsing arguments: ".
        """
        cursor = ArgumentCursor(list(args))
        for token in cursor:
            short = short_option_name(token)
            long = long_option_name(token) if short is None else None
            if short is not None:
                argument = self._find_short(short)
            elif long is not None:
                argument = self._find_long(long)
            else:
                logger.debug("Dangling value '%s'", token)
                self.append_dangling_value(token)
                continue

            if argument is None:
                raise UnknownArgumentError(
                    "Error while parsing arguments: "
                    f"could not find argument identified by {token}"
                )

            logger.debug("Dispatching '%s' to %r", token, argument)
            try:
                argument.handle(cursor)
            except ArgumentParserError as error:
                raise type(error)(f"Error while parsing arguments: {error}") from error

    def __str__(self) -> str:
        return (
            f"ArgumentList(arguments={len(self.arguments)}, "
            f"registered={len(self._leases)}, dangling={len(self.dangling_values)})"
        )

    def __repr__(self) -> str:
        return str(self)
