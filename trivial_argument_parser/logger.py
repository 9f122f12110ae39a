# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for the argument parser."""
import logging

logger: logging.Logger = logging.getLogger("trivial_argument_parser")
