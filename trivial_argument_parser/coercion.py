# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Converts command-line tokens into the Python type a typed `ValueArgument` declares.

Supported targets:
- `bool`: a fixed vocabulary of words ('yes', 'off', '1', ...).
- `Enum` subclasses: a member name, or the text of a member value.
- `Literal[...]`: one of the literal values, compared by their text.
- `datetime`: anything `dateutil` can parse.
- unions (`int | str`, `Optional[int]`): the first member that accepts the token.
- any other callable: called with the token.

Every failure is reported as `ValueError`, which `ValueArgument` turns into
`ArgumentValidationError`.
"""
import types
from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


def coerce_bool(token: str) -> bool:
    """
    Read a boolean word. Case and surrounding whitespace are ignored.

    Raises:
        ValueError: If the token is not one of the known true or false words.
    """
    word = token.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    choices = ", ".join(sorted(TRUE_WORDS | FALSE_WORDS))
    raise ValueError(f"'{token}' is not a boolean, expected one of {{{choices}}}")


def coerce_enum(token: str, enum_type: EnumMeta) -> Enum:
    """
    Resolve a token to a member of `enum_type`, by name first and then by value.

    Raises:
        ValueError: If no member has that name or a value with that text.
    """
    member = enum_type.__members__.get(token)
    if member is not None:
        return member
    for member in enum_type:
        if str(member.value) == token:
            return member
    values = ", ".join(str(member.value) for member in enum_type)
    raise ValueError(f"'{token}' should be one of {{{values}}}")


def _coerce_literal(token: str, choices: tuple[Any, ...]) -> Any:
    for choice in choices:
        if str(choice) == token:
            return choice
    raise ValueError(
        f"'{token}' should be one of {{{', '.join(str(choice) for choice in choices)}}}"
    )


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))


def coerce_value(token: str, target_type: Any) -> Any:
    """
    Convert a token to `target_type`.

    Args:
        token (str): The raw command-line token.
        target_type (Any): A type, typing construct or converter callable.

    Returns:
        Any: The converted value.

    Raises:
        ValueError: If the token cannot be converted. The converter's own error,
            whatever its class, is chained as the cause.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        return _coerce_literal(token, args)

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(token, arg)
            except ValueError:
                continue
        names = ", ".join(_type_name(arg) for arg in args)
        raise ValueError(f"'{token}' could not be coerced to any of ({names})")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(token, target_type)

    if target_type is bool:
        return coerce_bool(token)

    converter = date_parser.parse if target_type is datetime else target_type
    try:
        return converter(token)
    except Exception as error:
        raise ValueError(
            f"'{token}' could not be converted to {_type_name(target_type)}: {error}"
        ) from error
