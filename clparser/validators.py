# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validators built from clparser settings.

These let an interactive program collect option values and whole command lines
with the same rules the parser enforces.

Included Validators:
- parameter_validator: Accepts text the given parameter converter accepts.
- command_line_validator: Accepts command lines that parse against the settings.
"""
from __future__ import annotations

from prompt_toolkit.validation import ValidationError, Validator

from clparser.parameters import ParameterProtocol
from clparser.parser.command_line_parser import CommandLineParser
from clparser.settings import ProgramSettings, Settings


def parameter_validator(
    parameter: ParameterProtocol, error_message: str | None = None
) -> Validator:
    """Validator for option parameter values."""

    def validate(text: str) -> bool:
        if not text:
            return not parameter.mandatory
        _, ok = parameter.convert(text)
        return ok

    if error_message is None:
        metavar = getattr(parameter, "metavar", parameter.name)
        error_message = f"Invalid input. Expected {metavar}."

    return Validator.from_callable(validate, error_message=error_message)


class CommandLineValidator(Validator):
    """Validator for full command lines, reporting the parser diagnostic."""

    def __init__(self, settings: Settings | ProgramSettings) -> None:
        super().__init__()
        self.parser = CommandLineParser(settings)

    def validate(self, document) -> None:
        _, message = self.parser.try_parse(document.text)
        if message:
            raise ValidationError(message=message, cursor_position=len(document.text))


def command_line_validator(settings: Settings | ProgramSettings) -> Validator:
    """Validator for command lines checked against `settings`."""
    return CommandLineValidator(settings)
