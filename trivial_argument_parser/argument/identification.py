# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines how arguments are identified on the command line.

An argument is known by a short name (`-v`), a long name (`--verbose`) or both.
`ArgumentIdentification` holds those names for the generic `ValueArgument` and for
the owned `Argument`, and answers the two questions the registry asks while
dispatching: "are you `-x`?" and "are you `--name`?".

Names are compared with plain string equality: exact, case-sensitive and locale
independent.

Example:
    ArgumentIdentification.short("v")             → -v
    ArgumentIdentification.long("verbose")        → --verbose
    ArgumentIdentification.both("v", "verbose")   → -v/--verbose
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from trivial_argument_parser.exceptions import ArgumentDefinitionError


class IdentificationKind(Enum):
    """Which names an argument can be identified by."""

    SHORT = "short"
    LONG = "long"
    BOTH = "both"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ArgumentIdentification:
    """
    Short and/or long name of an argument.

    Attributes:
        short_name (str | None): Single character used as `-<short_name>`.
        long_name (str | None): Name used as `--<long_name>`.

    Raises:
        ArgumentDefinitionError: If neither name is given, or a name is malformed.
    """

    short_name: str | None = None
    long_name: str | None = None

    def __post_init__(self) -> None:
        if self.short_name is None and self.long_name is None:
            raise ArgumentDefinitionError(
                "At least one name of argument must be specified (short or long or both)"
            )
        if self.short_name is not None:
            if not isinstance(self.short_name, str) or len(self.short_name) != 1:
                raise ArgumentDefinitionError(
                    f"Short name {self.short_name!r} must be a single character"
                )
        if self.long_name is not None:
            if not isinstance(self.long_name, str) or not self.long_name:
                raise ArgumentDefinitionError(
                    f"Long name {self.long_name!r} must be a non-empty string"
                )

    @classmethod
    def short(cls, name: str) -> ArgumentIdentification:
        return cls(short_name=name)

    @classmethod
    def long(cls, name: str) -> ArgumentIdentification:
        return cls(long_name=name)

    @classmethod
    def both(cls, short_name: str, long_name: str) -> ArgumentIdentification:
        return cls(short_name=short_name, long_name=long_name)

    @property
    def kind(self) -> IdentificationKind:
        if self.short_name is not None and self.long_name is not None:
            return IdentificationKind.BOTH
        if self.short_name is not None:
            return IdentificationKind.SHORT
        return IdentificationKind.LONG

    def is_by_short(self, name: str) -> bool:
        """Check if this identification answers to `-<name>`."""
        return self.short_name is not None and self.short_name == name

    def is_by_long(self, name: str) -> bool:
        """Check if this identification answers to `--<name>`."""
        return self.long_name is not None and self.long_name == name

    def __str__(self) -> str:
        flags = []
        if self.short_name is not None:
            flags.append(f"-{self.short_name}")
        if self.long_name is not None:
            flags.append(f"--{self.long_name}")
        return "/".join(flags)
