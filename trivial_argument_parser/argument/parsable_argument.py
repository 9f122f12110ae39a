# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueArgument`, the preferred, handler-driven way of defining arguments,
and `ArgumentLease`, the handle an `ArgumentList` holds on one while parsing.

A `ValueArgument` pairs an `ArgumentIdentification` with a handler callable. Each
time the argument appears on the command line the handler is called with the shared
cursor and the values accumulated so far; it consumes whatever tokens it needs and
returns the converted value, which is appended to the argument's values.

Ownership:
    A `ValueArgument` stays owned by the caller. `ArgumentList.register()` leases it:
    until the lease is released (`ArgumentList.release()`, leaving a `with` block, or
    the list being garbage collected) the caller may not read or handle the argument
    and doing so raises `ArgumentBorrowedError`. Once released the accumulated values
    are fully readable.

Handlers:
    handler(cursor: ArgumentCursor, values: list[V]) -> V

    A handler reports bad input by raising `ArgumentValidationError`,
    `MissingValueError` or a plain `ValueError` (reported as a validation error).

Example:
    port = ValueArgument.new_integer(ArgumentIdentification.both("p", "port"))
    with ArgumentList() as args:
        args.register(port)
        args.parse_args(["--port", "8080"])
    port.first_value()  → 8080
"""
from __future__ import annotations

import weakref
from typing import Any, Callable, Generic, TypeVar

from trivial_argument_parser.argument.base import HandleableArgument
from trivial_argument_parser.argument.identification import ArgumentIdentification
from trivial_argument_parser.coercion import coerce_value
from trivial_argument_parser.cursor import ArgumentCursor
from trivial_argument_parser.exceptions import (
    ArgumentBorrowedError,
    ArgumentValidationError,
    ArityError,
    MissingValueError,
)

V = TypeVar("V")

Handler = Callable[[ArgumentCursor, list[V]], V]


def _next_value(cursor: ArgumentCursor) -> str:
    value = cursor.next()
    if value is None:
        raise MissingValueError("No remaining input values.")
    return value


def validate_integer(value: str) -> str | None:
    """Return an error message unless the value is ASCII digits after an optional '-'."""
    digits = value[1:] if value.startswith("-") else value
    if not digits or not all(char.isascii() and char.isdigit() for char in digits):
        return "Input is not a number"
    return None


class ValueArgument(HandleableArgument, Generic[V]):
    """
    Caller-owned argument whose values are produced by a handler.

    Args:
        identification (ArgumentIdentification): Names of the argument.
        handler (Callable): Called once per occurrence with the cursor and the
            values accumulated so far; returns the value to append.
        multiple (bool): If False, a second occurrence raises `ArityError`.
            Defaults to True, which accumulates every occurrence.
    """

    def __init__(
        self,
        identification: ArgumentIdentification,
        handler: Handler[V],
        multiple: bool = True,
    ) -> None:
        if not isinstance(identification, ArgumentIdentification):
            raise TypeError("identification must be an ArgumentIdentification")
        if not callable(handler):
            raise TypeError(f"handler {handler!r} is not callable")
        self._identification = identification
        self._handler: Handler[V] = handler
        self.multiple: bool = multiple
        self._values: list[V] = []
        self._lease: weakref.ref[ArgumentLease] | None = None

    @classmethod
    def new_integer(
        cls, identification: ArgumentIdentification, multiple: bool = True
    ) -> ValueArgument[int]:
        """
        Integer argument. Consumes one token made of digits, optionally prefixed by
        a single '-'.
        """

        def handler(cursor: ArgumentCursor, _values: list[int]) -> int:
            value = _next_value(cursor)
            error = validate_integer(value)
            if error:
                raise ArgumentValidationError(error)
            try:
                return int(value)
            except ValueError as parse_error:
                raise ArgumentValidationError(str(parse_error)) from parse_error

        return cls(identification, handler, multiple)

    @classmethod
    def new_string(
        cls, identification: ArgumentIdentification, multiple: bool = True
    ) -> ValueArgument[str]:
        """String argument. Consumes one token as is."""

        def handler(cursor: ArgumentCursor, _values: list[str]) -> str:
            return _next_value(cursor)

        return cls(identification, handler, multiple)

    @classmethod
    def new_typed(
        cls,
        identification: ArgumentIdentification,
        target_type: Any,
        multiple: bool = True,
    ) -> ValueArgument[Any]:
        """Argument whose single token is converted with `coerce_value`."""

        def handler(cursor: ArgumentCursor, _values: list[Any]) -> Any:
            return coerce_value(_next_value(cursor), target_type)

        return cls(identification, handler, multiple)

    @classmethod
    def new_flag(
        cls, identification: ArgumentIdentification, multiple: bool = False
    ) -> ValueArgument[bool]:
        """Flag argument. Consumes no token and records True per occurrence."""

        def handler(_cursor: ArgumentCursor, _values: list[bool]) -> bool:
            return True

        return cls(identification, handler, multiple)

    @property
    def identification(self) -> ArgumentIdentification:
        return self._identification

    @property
    def is_borrowed(self) -> bool:
        """True while an `ArgumentList` holds a live lease on this argument."""
        return self._lease is not None and self._lease() is not None

    def _check_not_borrowed(self) -> None:
        if self.is_borrowed:
            raise ArgumentBorrowedError(
                f"Argument '{self._identification}' is registered in an ArgumentList; "
                "release the list before using it"
            )

    def lease(self) -> ArgumentLease:
        """
        Hand out exclusive access to this argument.

        Raises:
            ArgumentBorrowedError: If the argument is already leased.
        """
        self._check_not_borrowed()
        lease = ArgumentLease(self)
        self._lease = weakref.ref(lease)
        return lease

    def _release(self, lease: ArgumentLease) -> None:
        if self._lease is not None and self._lease() is lease:
            self._lease = None

    def _handle(self, cursor: ArgumentCursor) -> None:
        if not self.multiple and self._values:
            raise ArityError("Value already assigned")
        try:
            value = self._handler(cursor, self._values)
        except ValueError as error:
            raise ArgumentValidationError(str(error)) from error
        self._values.append(value)

    def handle(self, cursor: ArgumentCursor) -> None:
        """
        Run the handler against the cursor and append its result.

        Raises:
            ArgumentBorrowedError: If the argument is currently leased.
            ArityError: If `multiple` is False and a value is already present.
        """
        self._check_not_borrowed()
        self._handle(cursor)

    def first_value(self) -> V | None:
        """Return the first accumulated value, or None if there is none."""
        self._check_not_borrowed()
        return self._values[0] if self._values else None

    def values(self) -> list[V]:
        """Return the accumulated values in the order they were produced."""
        self._check_not_borrowed()
        return list(self._values)

    def __repr__(self) -> str:
        return (
            f"ValueArgument(identification='{self._identification}', "
            f"multiple={self.multiple}, borrowed={self.is_borrowed})"
        )


class ArgumentLease(HandleableArgument):
    """
    Handle held by an `ArgumentList` on a caller-owned `ValueArgument`.

    The lease is the only way to dispatch into the argument while it is borrowed.
    Releasing the lease, or dropping the last reference to it, hands exclusive
    access back to the caller.
    """

    def __init__(self, argument: ValueArgument[Any]) -> None:
        self._argument: ValueArgument[Any] | None = argument
        self._identification = argument.identification

    @property
    def identification(self) -> ArgumentIdentification:
        return self._identification

    @property
    def released(self) -> bool:
        return self._argument is None

    def handle(self, cursor: ArgumentCursor) -> None:
        if self._argument is None:
            raise ArgumentBorrowedError(
                f"Lease on argument '{self._identification}' was already released"
            )
        self._argument._handle(cursor)

    def release(self) -> None:
        """Return exclusive access to the owner of the argument."""
        if self._argument is not None:
            self._argument._release(self)
            self._argument = None

    def __repr__(self) -> str:
        return f"ArgumentLease(identification='{self._identification}', released={self.released})"
