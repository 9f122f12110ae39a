# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable

import pythonjsonlogger.json
from rich.logging import RichHandler


def args_to_list(args: Iterable[str] | None = None) -> list[str]:
    """
    Turn the invocation arguments into a plain list of tokens.

    Args:
        args (Iterable[str] | None): Tokens to convert. Defaults to `sys.argv[1:]`,
            the process arguments without the program name.

    Returns:
        list[str]: The tokens, in order.
    """
    if args is None:
        args = sys.argv[1:]
    tokens = []
    for arg in args:
        if not isinstance(arg, str):
            raise TypeError(f"Argument {arg!r} must be a string")
        tokens.append(arg)
    return tokens


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for applications using the parser, with support for both
    CLI-friendly and structured JSON output.

    The library never calls this itself; it only logs to the
    "trivial_argument_parser" logger.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default)
                - "json": machine-readable JSON logs
            If not provided, it will use the `TRIVIAL_ARGS_LOG_MODE` environment
            variable or fall back to "cli".
        log_filename (str | None):
            Path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON (structured) instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("TRIVIAL_ARGS_LOG_MODE") or "cli"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("trivial_argument_parser")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
