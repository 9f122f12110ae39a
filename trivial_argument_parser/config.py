# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads owned argument definitions from YAML or TOML files.

Example (YAML):
    arguments:
      - short: d
        type: flag
      - short: p
        long: path
        type: value
      - long: tag
        type: value_list

Example (TOML):
    [[arguments]]
    short = "d"
    type = "flag"
"""
from __future__ import annotations

from pathlib import Path

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from trivial_argument_parser.argument.legacy_argument import Argument, ArgType
from trivial_argument_parser.argument_list import ArgumentList
from trivial_argument_parser.logger import logger


class RawArgument(BaseModel):
    """Raw owned argument definition as written in a config file."""

    short: str | None = None
    long: str | None = None
    type: ArgType = ArgType.VALUE

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and (len(value) != 1 or not value.isalpha()):
            raise ValueError("short must be a single letter")
        return value

    @field_validator("long")
    @classmethod
    def validate_long(cls, value: str | None) -> str | None:
        if value is not None and (not value or not value[0].isalpha()):
            raise ValueError("long must start with a letter")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: ArgType | str) -> ArgType:
        return ArgType(value)

    @model_validator(mode="after")
    def validate_names(self) -> RawArgument:
        if self.short is None and self.long is None:
            raise ValueError("At least one of short or long must be specified")
        return self

    def to_argument(self) -> Argument:
        return Argument(self.short, self.long, self.type)


class ArgumentsConfig(BaseModel):
    """A set of owned argument definitions."""

    arguments: list[RawArgument] = Field(default_factory=list)

    def to_argument_list(self) -> ArgumentList:
        args_list = ArgumentList()
        for raw_argument in self.arguments:
            args_list.append_arg(raw_argument.to_argument())
        return args_list


def loader(file_path: Path | str) -> ArgumentList:
    """
    Load owned argument definitions from a YAML or TOML file.

    Args:
        file_path (str | Path): Path to the config file (.yaml, .yml or .toml).

    Returns:
        ArgumentList: A list holding one `Argument` per definition, ready to parse.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("arguments"), list
    ):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "arguments:\n"
            "  - short: 'd'\n"
            "    type: 'flag'"
        )

    try:
        config = ArgumentsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ValueError(f"Invalid argument configuration in {path}: {error}") from error

    logger.debug("Loaded %d argument(s) from '%s'", len(config.arguments), path)
    return config.to_argument_list()
