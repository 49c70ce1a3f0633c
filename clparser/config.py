# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declarative program settings.

Program settings can be described in a YAML or TOML file instead of code:

    program: numactl
    max_plain_args: 3
    options:
      - names: [i, interleave]
        help: Interleave memory allocation across given nodes.
        parameter: {type: int_list, name: NODES, lower: 0, upper: 3}
      - names: [p, preferred]
        parameter: {type: int, name: NODE, lower: 0, upper: 3}
      - names: [S, show]
    conflicts:
      - [i, p]

The file is validated with pydantic models and then replayed through the
`ProgramSettings` builder, so every registration rule applies unchanged.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from clparser.logger import logger
from clparser.parameters import (
    DateTimeParameter,
    IntListParameter,
    IntParameter,
    Parameter,
    StringParameter,
)
from clparser.settings import ProgramSettings


class RawParameter(BaseModel):
    """Parameter model for clparser configuration."""

    type: Literal["int", "string", "int_list", "datetime"] = "string"
    name: str = "VALUE"
    mandatory: bool = True
    lower: int | None = None
    upper: int | None = None
    domain: list[str] | None = None
    max_items: int | None = None

    @model_validator(mode="after")
    def validate_type_fields(self) -> RawParameter:
        if self.domain is not None and self.type != "string":
            raise ValueError("domain is only supported for string parameters")
        if (self.lower is not None or self.upper is not None) and self.type not in (
            "int",
            "int_list",
        ):
            raise ValueError("lower/upper are only supported for int parameters")
        if self.max_items is not None and self.type != "int_list":
            raise ValueError("max_items is only supported for int_list parameters")
        return self

    def to_parameter(self) -> Parameter:
        if self.type == "int":
            return IntParameter(self.name, self.mandatory, self.lower, self.upper)
        elif self.type == "int_list":
            if self.max_items is not None:
                return IntListParameter(
                    self.name, self.mandatory, self.lower, self.upper, self.max_items
                )
            return IntListParameter(self.name, self.mandatory, self.lower, self.upper)
        elif self.type == "datetime":
            return DateTimeParameter(self.name, self.mandatory)
        return StringParameter(self.name, self.mandatory, self.domain)


class RawOption(BaseModel):
    """Option model for clparser configuration."""

    names: list[str]
    mandatory: bool = False
    help: str | None = None
    parameter: RawParameter | None = None

    @field_validator("names", mode="before")
    @classmethod
    def validate_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class RawPlainArgument(BaseModel):
    """Plain argument documentation model for clparser configuration."""

    position: int
    name: str
    help: str | None = None


class SettingsConfig(BaseModel):
    """Program settings configuration model."""

    program: str
    help_text: str | None = None
    min_plain_args: int = 0
    max_plain_args: int | None = None
    options: list[RawOption] = Field(default_factory=list)
    dependencies: list[tuple[str, str]] = Field(default_factory=list)
    conflicts: list[list[str]] = Field(default_factory=list)
    plain_arguments: list[RawPlainArgument] = Field(default_factory=list)

    @field_validator("conflicts")
    @classmethod
    def validate_conflicts(cls, value: list[list[str]]) -> list[list[str]]:
        for group in value:
            if len(group) < 2:
                raise ValueError("Each conflict must name at least two options")
        return value

    def to_settings(self) -> ProgramSettings:
        settings = ProgramSettings(
            self.program,
            min_plain_args=self.min_plain_args,
            max_plain_args=self.max_plain_args,
            help_text=self.help_text,
        )
        for option in self.options:
            settings.add_option(
                *option.names,
                mandatory=option.mandatory,
                parameter=option.parameter.to_parameter() if option.parameter else None,
                help_text=option.help,
            )
        for dependent, independent in self.dependencies:
            settings.add_dependency(dependent, independent)
        for group in self.conflicts:
            settings.add_conflict(*group)
        for argument in self.plain_arguments:
            settings.add_plain_argument(argument.position, argument.name, argument.help)
        return settings


def settings_from_dict(raw_config: dict[str, Any]) -> ProgramSettings:
    """
    Build `ProgramSettings` from an already loaded configuration mapping.

    Raises:
        ValueError: If the mapping is not a dictionary.
        pydantic.ValidationError: If the mapping does not match the schema.
        SettingsError: If the described settings break a registration rule.
    """
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration must be a dictionary describing the program settings.\n"
            "Example:\n"
            "program: 'time'\n"
            "options:\n"
            "  - names: ['v', 'verbose']\n"
            "    help: 'Give very verbose output.'"
        )
    return SettingsConfig(**raw_config).to_settings()


def load_settings(file_path: Path | str) -> ProgramSettings:
    """
    Load program settings from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml`, `.toml`).

    Returns:
        ProgramSettings: The settings described by the file.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a mapping.
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

    logger.debug("Loaded settings configuration from %s", path)
    return settings_from_dict(raw_config)
