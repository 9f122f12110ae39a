# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentCursor`, the shared position marker over the input tokens.

The registry reads option tokens from the cursor and hands the very same cursor to
the matched argument, which consumes as many trailing value tokens as it needs.
Because every consumer advances the same cursor, no token is ever read twice.
"""
from __future__ import annotations

from typing import Iterator, Sequence


class ArgumentCursor:
    """
    Stateful, forward-only reader over a sequence of tokens.

    Example:
        cursor = ArgumentCursor(["-p", "/file"])
        cursor.next()  # "-p"
        cursor.peek()  # "/file"
        cursor.next()  # "/file"
        cursor.next()  # None
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._position: int = 0

    @property
    def position(self) -> int:
        """Index of the next token to be read."""
        return self._position

    def has_next(self) -> bool:
        return self._position < len(self._tokens)

    def peek(self) -> str | None:
        """Return the next token without consuming it."""
        if not self.has_next():
            return None
        return self._tokens[self._position]

    def next(self) -> str | None:
        """Consume and return the next token, or None once the input is exhausted."""
        if not self.has_next():
            return None
        token = self._tokens[self._position]
        self._position += 1
        return token

    def remaining(self) -> list[str]:
        """Return the tokens not yet consumed."""
        return list(self._tokens[self._position :])

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def __len__(self) -> int:
        return len(self._tokens) - self._position

    def __repr__(self) -> str:
        return f"ArgumentCursor(position={self._position}, tokens={list(self._tokens)!r})"
