import pytest
from rich.console import Console

import trivial_argument_parser.__main__ as cli
from trivial_argument_parser.__main__ import main


@pytest.fixture(autouse=True)
def recorded_console(monkeypatch):
    console = Console(record=True, width=120)
    monkeypatch.setattr(cli, "console", console)
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    return console


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "arguments.yaml"
    path.write_text(
        "arguments:\n"
        "  - short: d\n"
        "    type: flag\n"
        "  - short: l\n"
        "    long: list\n"
        "    type: value_list\n",
        encoding="UTF-8",
    )
    return path


def test_main_without_arguments(recorded_console):
    assert main([]) == 2
    assert "usage" in recorded_console.export_text()


def test_main_parses_tokens(config_file, recorded_console):
    assert main([str(config_file), "-d", "--list", "a", "-l", "b", "extra"]) == 0
    output = recorded_console.export_text()
    assert "a, b" in output
    assert "extra" in output


def test_main_reports_parse_errors(config_file, recorded_console):
    assert main([str(config_file), "--unknown"]) == 1
    output = recorded_console.export_text()
    assert "UnknownArgumentError" in output
    assert "could not find argument identified by --unknown" in output


def test_main_reports_missing_config(tmp_path, recorded_console):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "Could not load" in recorded_console.export_text()


def test_main_prints_config_path_verbatim(tmp_path, monkeypatch, recorded_console):
    monkeypatch.chdir(tmp_path)
    assert main(["[red]missing.yaml"]) == 1
    output = recorded_console.export_text()
    assert "Could not load '[red]missing.yaml'" in output
    assert "No such config file: [red]missing.yaml" in output
