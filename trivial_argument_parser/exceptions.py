# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by the argument parser.

Every failure in this library is reported by raising one of these exceptions.
Nothing is printed and nothing is retried: the first error met while parsing
aborts the whole parse and reaches the caller.

All exceptions inherit from `ArgumentParserError`, the base exception for the library.

Exception Hierarchy:
- ArgumentParserError
    ├── ArgumentDefinitionError
    ├── ArityError
    ├── MissingValueError
    ├── ArgumentValidationError
    ├── UnknownArgumentError
    ├── ArgumentAccessError
    └── ArgumentBorrowedError
"""


class ArgumentParserError(Exception):
    """Base exception for the argument parser."""


class ArgumentDefinitionError(ArgumentParserError):
    """Exception raised when an argument is defined without a usable name or type."""


class ArityError(ArgumentParserError):
    """Exception raised when a flag or single value argument is bound a second time."""


class MissingValueError(ArgumentParserError):
    """Exception raised when an argument expects a value but the input is exhausted."""


class ArgumentValidationError(ArgumentParserError):
    """Exception raised when a consumed value fails validation or coercion."""


class UnknownArgumentError(ArgumentParserError):
    """Exception raised when no registered argument matches a name."""


class ArgumentAccessError(ArgumentParserError):
    """Exception raised when a result is read through the wrong accessor or is unset."""


class ArgumentBorrowedError(ArgumentParserError):
    """Exception raised when a leased argument is used outside of its registry."""
