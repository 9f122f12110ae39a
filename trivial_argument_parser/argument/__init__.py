"""
Trivial Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base import HandleableArgument
from .builder import ArgBuilder
from .identification import ArgumentIdentification, IdentificationKind
from .legacy_argument import (
    Argument,
    ArgResult,
    ArgType,
    FlagResult,
    ValueListResult,
    ValueResult,
)
from .parsable_argument import ArgumentLease, ValueArgument, validate_integer

__all__ = [
    "ArgBuilder",
    "Argument",
    "ArgumentIdentification",
    "ArgumentLease",
    "ArgResult",
    "ArgType",
    "FlagResult",
    "HandleableArgument",
    "IdentificationKind",
    "ValueArgument",
    "ValueListResult",
    "ValueResult",
    "validate_integer",
]
