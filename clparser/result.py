# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse results returned by `CommandLineParser`.

`ParseResult` keeps the parsed options and the plain arguments in the order they
appeared, plus a lookup from every option name to its parsed entry so presence and
value queries work with any alias.

When the same option appears more than once, every occurrence is kept in
`parsed_options`, while name lookups return the first occurrence.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from clparser.exceptions import SettingsError
from clparser.logger import logger
from clparser.parameters import ParameterValue


@dataclass(frozen=True)
class ParsedOption:
    """
    An option found in the command line.

    Attributes:
        names (tuple[str, ...]): All names of the matched option.
        value (ParameterValue): The converted parameter value, or None when the
            option takes no parameter or none was given.
    """

    names: tuple[str, ...]
    value: ParameterValue = None

    @property
    def name(self) -> str:
        return self.names[0]

    @property
    def has_value(self) -> bool:
        return self.value is not None


class ParseResult:
    """
    Accumulated output of a parse.

    Created empty by the parser, filled while matching, and handed to the caller
    only after validation succeeds. Callers treat it as read-only.
    """

    def __init__(self) -> None:
        self._parsed_options: list[ParsedOption] = []
        self._plain_arguments: list[str] = []
        self._by_name: dict[str, ParsedOption] = {}

    @property
    def parsed_options(self) -> tuple[ParsedOption, ...]:
        return tuple(self._parsed_options)

    @property
    def plain_arguments(self) -> tuple[str, ...]:
        return tuple(self._plain_arguments)

    def add_option(self, parsed_option: ParsedOption) -> None:
        """Append a parsed option and index it under each of its names."""
        self._parsed_options.append(parsed_option)
        for name in parsed_option.names:
            if name in self._by_name:
                logger.debug("Option '%s' repeated; keeping first occurrence", name)
                continue
            self._by_name[name] = parsed_option

    def add_plain_arguments(self, plain_arguments: list[str]) -> None:
        self._plain_arguments.extend(plain_arguments)

    @staticmethod
    def _check_name(name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise SettingsError("Option name must be a non-empty string")

    def get_parameter_value(self, name: str) -> ParameterValue:
        """
        Return the parameter value of the option known by `name`.

        Returns None if the option was not parsed or carries no value.

        Raises:
            SettingsError: If `name` is empty or not a string.
        """
        self._check_name(name)
        parsed_option = self._by_name.get(name)
        if parsed_option is None:
            return None
        return parsed_option.value

    def was_parsed(self, name: str) -> bool:
        """
        Return True if the option known by `name` was present in the command.

        Raises:
            SettingsError: If `name` is empty or not a string.
        """
        self._check_name(name)
        return name in self._by_name

    def get(self, name: str) -> ParsedOption | None:
        """Return the first parsed occurrence of the option known by `name`."""
        self._check_name(name)
        return self._by_name.get(name)

    def get_all(self, name: str) -> list[ParsedOption]:
        """Return every parsed occurrence of the option known by `name`."""
        self._check_name(name)
        return [option for option in self._parsed_options if name in option.names]

    def as_dict(self) -> dict[str, ParameterValue]:
        """Map the first name of each parsed option to its (first) value."""
        values: dict[str, ParameterValue] = {}
        for option in self._parsed_options:
            values.setdefault(option.name, option.value)
        return values

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __iter__(self) -> Iterator[ParsedOption]:
        return iter(self._parsed_options)

    def __len__(self) -> int:
        return len(self._parsed_options)

    def __str__(self) -> str:
        return (
            f"ParseResult(options={[option.name for option in self._parsed_options]}, "
            f"plain_arguments={self._plain_arguments})"
        )

    def __repr__(self) -> str:
        return str(self)
