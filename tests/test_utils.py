import logging
import sys

import pytest
from rich.logging import RichHandler

from trivial_argument_parser.utils import args_to_list, setup_logging


def test_args_to_list_from_iterable():
    assert args_to_list(iter(["-d", "x"])) == ["-d", "x"]
    assert args_to_list(()) == []


def test_args_to_list_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-d", "--list", "a"])
    assert args_to_list() == ["-d", "--list", "a"]


def test_args_to_list_rejects_non_strings():
    with pytest.raises(TypeError):
        args_to_list(["-d", 1])


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(restore_root_logger, tmp_path):
    log_file = tmp_path / "parser.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = restore_root_logger.handlers
    assert any(isinstance(handler, RichHandler) for handler in handlers)
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    for handler in handlers:
        handler.close()


def test_setup_logging_json_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("TRIVIAL_ARGS_LOG_MODE", "json")
    setup_logging()
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RichHandler)
    assert isinstance(handlers[0], logging.StreamHandler)


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
