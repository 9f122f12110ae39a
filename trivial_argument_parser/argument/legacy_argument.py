# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the owned `Argument`, its `ArgType` and the `ArgResult` types.

An `Argument` has a fixed arity chosen up front with `ArgType` and keeps its own
parsed result. It is handed over to an `ArgumentList` with `append_arg()` and read
back after parsing through `search_by_short_name()` / `search_by_long_name()`.

Arity kinds:
- FLAG: takes no value. Present or absent.
- VALUE: takes exactly one value. A second occurrence is an error.
- VALUE_LIST: takes one value per occurrence and accumulates them in order.

This is the older way of defining arguments; `ValueArgument` is preferred when the
value needs validation or conversion.

Example:
    argument = Argument("l", "an-list", ArgType.VALUE_LIST)
    argument.add_value(ArgumentCursor(["a"]))
    argument.get_values()  → ["a"]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from trivial_argument_parser.argument.base import HandleableArgument
from trivial_argument_parser.argument.identification import ArgumentIdentification
from trivial_argument_parser.cursor import ArgumentCursor
from trivial_argument_parser.exceptions import (
    ArgumentAccessError,
    ArityError,
    MissingValueError,
)


class ArgType(Enum):
    """
    Arity of an owned `Argument`.

    Members:
        FLAG: No trailing value.
        VALUE: Exactly one trailing value.
        VALUE_LIST: One trailing value per occurrence, accumulated.

    Aliases:
        - "list" → "value_list"
        - "values" → "value_list"
        - "switch" → "flag"

    Example:
        ArgType("list") → ArgType.VALUE_LIST
    """

    FLAG = "flag"
    VALUE = "value"
    VALUE_LIST = "value_list"

    @classmethod
    def choices(cls) -> list[ArgType]:
        """Return a list of all argument types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "list": "value_list",
            "values": "value_list",
            "switch": "flag",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ArgResult:
    """Base of the results an `Argument` can hold once parsed."""


@dataclass(frozen=True)
class FlagResult(ArgResult):
    """The flag was present."""


@dataclass(frozen=True)
class ValueResult(ArgResult):
    value: str


@dataclass
class ValueListResult(ArgResult):
    values: list[str] = field(default_factory=list)


class Argument(HandleableArgument):
    """
    Owned argument with a fixed arity and a self-contained result.

    Args:
        short (str | None): Single character short name.
        long (str | None): Long name.
        arg_type (ArgType | str): Arity of the argument.

    Raises:
        ArgumentDefinitionError: If neither name is given.
    """

    def __init__(
        self,
        short: str | None = None,
        long: str | None = None,
        arg_type: ArgType | str = ArgType.VALUE,
    ) -> None:
        self._identification = ArgumentIdentification(short, long)
        self._arg_type: ArgType = ArgType(arg_type)
        self.arg_result: ArgResult | None = None

    @classmethod
    def new_short(cls, name: str, arg_type: ArgType | str) -> Argument:
        return cls(short=name, arg_type=arg_type)

    @classmethod
    def new_long(cls, name: str, arg_type: ArgType | str) -> Argument:
        return cls(long=name, arg_type=arg_type)

    @property
    def identification(self) -> ArgumentIdentification:
        return self._identification

    @property
    def short(self) -> str | None:
        return self._identification.short_name

    @property
    def long(self) -> str | None:
        return self._identification.long_name

    @property
    def arg_type(self) -> ArgType:
        return self._arg_type

    def get_value(self) -> str:
        """
        Return the value of a VALUE argument.

        Raises:
            ArgumentAccessError: If the argument is not a VALUE or nothing was bound.
        """
        if self._arg_type is not ArgType.VALUE:
            raise ArgumentAccessError("This argument is not a value")
        result = self.arg_result
        if not isinstance(result, ValueResult):
            raise ArgumentAccessError("No value assigned to result")
        return result.value

    def get_values(self) -> list[str]:
        """
        Return the values of a VALUE_LIST argument in the order they were supplied.

        Raises:
            ArgumentAccessError: If the argument is not a VALUE_LIST or nothing was bound.
        """
        if self._arg_type is not ArgType.VALUE_LIST:
            raise ArgumentAccessError("This argument is not a value list")
        result = self.arg_result
        if not isinstance(result, ValueListResult):
            raise ArgumentAccessError("No result specified")
        return list(result.values)

    def get_flag(self) -> bool:
        """
        Return whether a FLAG argument was present.

        Raises:
            ArgumentAccessError: If the argument is not a FLAG.
        """
        if self._arg_type is not ArgType.FLAG:
            raise ArgumentAccessError("Argument is not a flag type")
        return self.arg_result is not None

    def add_value(self, cursor: ArgumentCursor) -> None:
        """
        Bind one occurrence of this argument, reading its value from the cursor.

        Raises:
            ArityError: If a FLAG or VALUE is bound a second time.
            MissingValueError: If a value is expected but the cursor is exhausted.
        """
        if self._arg_type is ArgType.FLAG:
            if self.arg_result is not None:
                raise ArityError("Flag already set")
            self.arg_result = FlagResult()
        elif self._arg_type is ArgType.VALUE:
            if self.arg_result is not None:
                raise ArityError("Value already assigned")
            word = cursor.next()
            if word is None:
                raise MissingValueError("Expected value")
            self.arg_result = ValueResult(word)
        else:
            result = self.arg_result
            if not isinstance(result, ValueListResult):
                result = self.arg_result = ValueListResult()
            word = cursor.next()
            if word is None:
                raise MissingValueError("Expected value")
            result.values.append(word)

    def handle(self, cursor: ArgumentCursor) -> None:
        self.add_value(cursor)

    def __repr__(self) -> str:
        return (
            f"Argument(identification='{self._identification}', "
            f"arg_type={self._arg_type}, arg_result={self.arg_result!r})"
        )
