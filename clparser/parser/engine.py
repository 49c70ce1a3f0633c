# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The matching engine: a single left-to-right pass over the argument tokens.

At each position, in priority order:

1. `--` ends option parsing. Every remaining token becomes a plain argument.
2. A parameter-shaped token that no option consumed is skipped.
3. Grouped short options (`-abc`): every name but the last is resolved as a flag.
   A group member that requires a parameter value is an error. The last name, with
   any attached text, is resolved like a single option.
4. A single option (`-a`, `--name`, with optional `=value` or attached value).
5. Resolution: the option must be registered. A flag must not receive a value. An
   option with a parameter converts its attached text, or otherwise consumes the
   next token when it is parameter-shaped. When no value is found, a mandatory
   parameter is an error and an optional one yields None.
6. Anything else is a malformed option.

Every problem raises `ParseError` with a message naming the offending token or
option. Options may repeat; each occurrence is added to the result.
"""
from __future__ import annotations

from typing import Any

from clparser.exceptions import ParseError
from clparser.logger import logger
from clparser.parameters import ParameterProtocol
from clparser.parser.tokens import (
    OptionToken,
    is_parameter,
    is_separator,
    match_option,
)
from clparser.result import ParsedOption, ParseResult
from clparser.settings import Option, Settings


class MatchingEngine:
    """
    Matches argument tokens against a `Settings` registry.

    The engine holds no per-parse state; one instance can serve any number of
    parses, including concurrent ones.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings: Settings = settings

    def match(self, tokens: list[str], result: ParseResult) -> None:
        """
        Match all tokens, adding parsed options and plain arguments to `result`.

        Args:
            tokens (list[str]): The argument tokens. A leading program name is skipped.
            result (ParseResult): The result to populate.

        Raises:
            ParseError: On the first token that cannot be matched.
        """
        index = 0
        if tokens and tokens[0] == self.settings.program_name:
            index = 1

        while index < len(tokens):
            token = tokens[index]

            if is_separator(token):
                plain_arguments = tokens[index + 1 :]
                result.add_plain_arguments(plain_arguments)
                logger.debug("Captured %d plain argument(s)", len(plain_arguments))
                return

            if is_parameter(token):
                logger.debug(
                    "Skipping unclaimed parameter token %r at position %d", token, index
                )
                index += 1
                continue

            option_token = match_option(token)
            if option_token is None:
                raise ParseError(f"Invalid option '{token}' at position {index}")

            if option_token.grouped:
                self._match_group(option_token, token, result)

            index = self._resolve_option(
                option_token.last_name, option_token.parameter, tokens, index, result
            )

    def _lookup(self, name: str) -> Option:
        option = self.settings.get_option(name)
        if option is None:
            raise ParseError(f"Unknown option '{name}'")
        return option

    def _match_group(
        self, option_token: OptionToken, token: str, result: ParseResult
    ) -> None:
        """Resolve every name of a group except the last as a flag."""
        for name in option_token.names[:-1]:
            option = self._lookup(name)
            if option.requires_parameter:
                raise ParseError(
                    f"Option '{name}' requires a parameter value and cannot be "
                    f"grouped before other options in '{token}'"
                )
            result.add_option(ParsedOption(names=option.names))
            logger.debug("Matched grouped option '%s'", name)

    def _convert(self, parameter: ParameterProtocol, name: str, raw: str) -> Any:
        value, ok = parameter.convert(raw)
        if not ok:
            raise ParseError(f"Invalid parameter value '{raw}' for option '{name}'")
        return value

    def _resolve_option(
        self,
        name: str,
        parameter_text: str | None,
        tokens: list[str],
        index: int,
        result: ParseResult,
    ) -> int:
        """
        Resolve one option and its value, returning the index of the next token.

        Returns `index + 2` when the following token was consumed as the value,
        otherwise `index + 1`.
        """
        option = self._lookup(name)
        next_index = index + 1

        if option.parameter is None:
            if parameter_text is not None:
                raise ParseError(f"Option '{name}' does not accept a parameter")
            result.add_option(ParsedOption(names=option.names))
            logger.debug("Matched option '%s'", name)
            return next_index

        value = None
        if parameter_text is not None:
            value = self._convert(option.parameter, name, parameter_text)
        elif next_index < len(tokens) and is_parameter(tokens[next_index]):
            value = self._convert(option.parameter, name, tokens[next_index])
            logger.debug(
                "Consumed %r as the parameter of option '%s'", tokens[next_index], name
            )
            next_index += 1
        elif option.parameter.mandatory:
            raise ParseError(f"Missing mandatory parameter value for option '{name}'")

        result.add_option(ParsedOption(names=option.names, value=value))
        logger.debug("Matched option '%s' with value %r", name, value)
        return next_index
