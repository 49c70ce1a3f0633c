# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, which validates and decodes a command
line against declarative `ProgramSettings`.

Parsing runs in three stages:
- tokenize: split the command line into argument tokens,
- match: identify options, their parameter values and the plain argument tail,
- validate: check mandatory options, dependencies, conflicts and plain argument
  count bounds.

The first problem found stops the parse with a `ParseError`. No partial result is
ever returned.

Public Interface:
- `CommandLineParser(settings).parse(command)`: return a `ParseResult` or raise.
- `CommandLineParser(settings).try_parse(command)`: return `(result, "")` or
  `(None, message)`.
- `parse(command, settings)` / `try_parse(command, settings)`: one-shot helpers.

Example Usage:
    settings = ProgramSettings("time")
    settings.add_option("o", "output", parameter=StringParameter("FILE"))
    settings.add_option("v", "verbose")

    result = parse("time -o out.txt -v -- ls -l", settings)
    result.get_parameter_value("output")  # 'out.txt'
    result.was_parsed("v")                # True
    result.plain_arguments                # ('ls', '-l')
"""
from __future__ import annotations

from clparser.exceptions import ParseError
from clparser.logger import logger
from clparser.parser.engine import MatchingEngine
from clparser.parser.tokenizer import CommandLine, tokenize
from clparser.parser.validation import validate
from clparser.result import ParseResult
from clparser.settings import ProgramSettings, Settings


class CommandLineParser:
    """
    Parses command lines against a fixed set of program settings.

    A `ProgramSettings` builder is snapshotted when the parser is created; later
    changes to the builder do not affect the parser.

    Args:
        settings (Settings | ProgramSettings): The rules to parse against.

    Raises:
        TypeError: If `settings` is not a `Settings` or `ProgramSettings`.
    """

    def __init__(self, settings: Settings | ProgramSettings) -> None:
        if isinstance(settings, ProgramSettings):
            settings = settings.build()
        if not isinstance(settings, Settings):
            raise TypeError(
                "settings must be a Settings or ProgramSettings instance, "
                f"got {type(settings).__name__}"
            )
        self.settings: Settings = settings
        self._engine = MatchingEngine(settings)

    def parse(self, command: CommandLine) -> ParseResult:
        """
        Parse a command line.

        Args:
            command (CommandLine): A command string, a list of argument tokens or a
                text stream to read one line from.

        Returns:
            ParseResult: The parsed options and plain arguments.

        Raises:
            ParseError: If the command line breaks any rule of the settings.
            TypeError: If the command is of an unsupported type.
        """
        tokens = tokenize(command)
        try:
            if not tokens:
                raise ParseError("No arguments were given")
            result = ParseResult()
            self._engine.match(tokens, result)
            validate(result, self.settings)
        except ParseError as error:
            logger.debug("Rejected command %s: %s", tokens, error)
            raise
        logger.debug("Parsed command %s into %s", tokens, result)
        return result

    def try_parse(self, command: CommandLine) -> tuple[ParseResult | None, str]:
        """
        Parse a command line without raising on invalid input.

        Returns:
            tuple[ParseResult | None, str]: `(result, "")` on success, otherwise
            `(None, message)` with the diagnostic of the first violated rule.
        """
        try:
            return self.parse(command), ""
        except ParseError as error:
            return None, error.message

    def __str__(self) -> str:
        return (
            f"CommandLineParser(program={self.settings.program_name!r}, "
            f"options={len(self.settings.options)})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse(command: CommandLine, settings: Settings | ProgramSettings) -> ParseResult:
    """Parse `command` against `settings`. See `CommandLineParser.parse`."""
    return CommandLineParser(settings).parse(command)


def try_parse(
    command: CommandLine, settings: Settings | ProgramSettings
) -> tuple[ParseResult | None, str]:
    """Parse `command` against `settings` without raising `ParseError`."""
    return CommandLineParser(settings).try_parse(command)
