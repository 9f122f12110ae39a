"""
Trivial Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import (
    ArgBuilder,
    Argument,
    ArgumentIdentification,
    ArgumentLease,
    ArgResult,
    ArgType,
    FlagResult,
    HandleableArgument,
    ValueArgument,
    ValueListResult,
    ValueResult,
)
from .argument_list import ArgumentList
from .cursor import ArgumentCursor
from .utils import args_to_list

logger = logging.getLogger("trivial_argument_parser")


__all__ = [
    "ArgBuilder",
    "Argument",
    "ArgumentCursor",
    "ArgumentIdentification",
    "ArgumentLease",
    "ArgumentList",
    "ArgResult",
    "ArgType",
    "FlagResult",
    "HandleableArgument",
    "ValueArgument",
    "ValueListResult",
    "ValueResult",
    "args_to_list",
]
