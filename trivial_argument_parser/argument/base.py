# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `HandleableArgument`, the interface every argument registered in an
`ArgumentList` implements.

The registry dispatch loop only ever talks to this interface: it asks an argument
whether it answers to a short or long name, then hands it the shared cursor so it
can consume its trailing values.

Implementations:
- `Argument`: owned argument with a fixed `ArgType` (flag, value, value list).
- `ValueArgument`: caller-owned argument driven by a handler callable.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from trivial_argument_parser.argument.identification import ArgumentIdentification
from trivial_argument_parser.cursor import ArgumentCursor


class HandleableArgument(ABC):
    """Common capability of all arguments the registry can dispatch into."""

    @property
    @abstractmethod
    def identification(self) -> ArgumentIdentification:
        """Names this argument is identified by."""

    @abstractmethod
    def handle(self, cursor: ArgumentCursor) -> None:
        """Consume this argument's values from the cursor and store the result."""

    def is_by_short(self, name: str) -> bool:
        """Check if this argument is identified by the given short name."""
        return self.identification.is_by_short(name)

    def is_by_long(self, name: str) -> bool:
        """Check if this argument is identified by the given long name."""
        return self.identification.is_by_long(name)
