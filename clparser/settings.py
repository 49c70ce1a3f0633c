# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative program settings: the rules a command line is parsed against.

`ProgramSettings` is a builder. Options, dependencies, conflicts and plain argument
annotations are added through ordered method calls, and every addition is checked
against what has been registered so far. Registration mistakes raise immediately:

- `SettingsError` for invalid or duplicate option names, invalid plain argument
  bounds, or invalid plain argument annotations.
- `ConstraintError` for dependencies and conflicts that reference unknown options,
  use two names of the same option, or contradict each other.

`ProgramSettings.build()` returns a `Settings` snapshot: an immutable view of the
registry that the parsing engine and the help renderer consume.

Example:
    settings = ProgramSettings("time")
    settings.add_option("o", "output", parameter=StringParameter("FILE"))
    settings.add_option("a", "append", help_text="Append to the output file.")
    settings.add_dependency("a", "o")
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from clparser.exceptions import ConstraintError, SettingsError
from clparser.logger import logger
from clparser.parameters import ParameterProtocol, is_parameter

_OPTION_NAME = re.compile(r"[A-Za-z]+")


def is_valid_option_name(name: object) -> bool:
    """Option names are made of ASCII letters only, without leading dashes."""
    return isinstance(name, str) and _OPTION_NAME.fullmatch(name) is not None


@dataclass(frozen=True, eq=False)
class Option:
    """
    A declared option. Compared by identity: all names are aliases of one Option.

    Attributes:
        names (tuple[str, ...]): Every name of the option, in registration order.
        mandatory (bool): True if the option must appear in every valid command.
        parameter (ParameterProtocol | None): Converter for the option value, if any.
        help_text (str | None): Help text for the option.
    """

    names: tuple[str, ...]
    mandatory: bool = False
    parameter: ParameterProtocol | None = None
    help_text: str | None = None

    @property
    def name(self) -> str:
        """The first registered name, used in diagnostics."""
        return self.names[0]

    @property
    def takes_parameter(self) -> bool:
        return self.parameter is not None

    @property
    def requires_parameter(self) -> bool:
        return self.parameter is not None and self.parameter.mandatory

    def get_flags(self) -> list[str]:
        """Return the names as they are typed: `-x` for short, `--name` for long."""
        return [f"-{name}" if len(name) == 1 else f"--{name}" for name in self.names]

    def __repr__(self) -> str:
        return (
            f"Option(names={self.names}, mandatory={self.mandatory}, "
            f"parameter={self.parameter!r})"
        )


@dataclass(frozen=True)
class PlainArgument:
    """Documentation for the plain argument at a given position."""

    position: int
    name: str
    help_text: str | None = None


@dataclass(frozen=True)
class Settings:
    """
    Immutable snapshot of a `ProgramSettings` registry.

    This is the read-only surface consumed by the parser and the help renderer.
    It is safe to share between any number of concurrent parses.
    """

    program_name: str
    options: tuple[Option, ...] = ()
    option_map: Mapping[str, Option] = field(
        default_factory=lambda: MappingProxyType({})
    )
    mandatory_options: tuple[Option, ...] = ()
    dependencies: tuple[tuple[Option, Option], ...] = ()
    conflicts: tuple[tuple[Option, ...], ...] = ()
    min_plain_args: int = 0
    max_plain_args: int | None = None
    plain_arguments: tuple[PlainArgument, ...] = ()
    help_text: str | None = None

    def get_option(self, name: str) -> Option | None:
        """Look up an option by any of its names."""
        return self.option_map.get(name)


class ProgramSettings:
    """
    Builder for the rules a program's command line must follow.

    Args:
        program_name (str): Name of the program. A leading token equal to it is
            skipped by the parser.
        min_plain_args (int): Minimum number of plain arguments. Defaults to 0.
        max_plain_args (int | None): Maximum number of plain arguments, or None
            for no upper bound.
        help_text (str | None): Program description for help output.

    Raises:
        SettingsError: If the program name is empty or the bounds are invalid.
    """

    def __init__(
        self,
        program_name: str,
        min_plain_args: int = 0,
        max_plain_args: int | None = None,
        help_text: str | None = None,
    ) -> None:
        if not isinstance(program_name, str) or not program_name.strip():
            raise SettingsError("Program name must be a non-empty string")
        if not isinstance(min_plain_args, int) or min_plain_args < 0:
            raise SettingsError("Minimum plain argument count must not be negative")
        if max_plain_args is not None:
            if not isinstance(max_plain_args, int):
                raise SettingsError("Maximum number of plain arguments must be an int")
            if min_plain_args > max_plain_args:
                raise SettingsError(
                    "Minimum number of plain arguments must not exceed the maximum"
                )
        self.program_name: str = program_name
        self.min_plain_args: int = min_plain_args
        self.max_plain_args: int | None = max_plain_args
        self.help_text: str | None = help_text
        self._options: list[Option] = []
        self._option_map: dict[str, Option] = {}
        self._dependencies: list[tuple[Option, Option]] = []
        self._conflicts: list[tuple[Option, ...]] = []
        self._plain_arguments: list[PlainArgument] = []

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    @property
    def mandatory_options(self) -> tuple[Option, ...]:
        return tuple(option for option in self._options if option.mandatory)

    @property
    def dependencies(self) -> tuple[tuple[Option, Option], ...]:
        return tuple(self._dependencies)

    @property
    def conflicts(self) -> tuple[tuple[Option, ...], ...]:
        return tuple(self._conflicts)

    @property
    def plain_arguments(self) -> tuple[PlainArgument, ...]:
        return tuple(sorted(self._plain_arguments, key=lambda arg: arg.position))

    def get_option(self, name: str) -> Option | None:
        """Look up an option by any of its names."""
        return self._option_map.get(name)

    def _validate_names(self, names: tuple[str, ...]) -> None:
        if not names:
            raise SettingsError("An option must have at least one name")
        for name in names:
            if not is_valid_option_name(name):
                raise SettingsError(
                    f"Invalid option name {name!r}: only letters are allowed "
                    "(do not include leading dashes)"
                )
        if len(set(names)) != len(names):
            raise SettingsError(f"Duplicate names in option {names}")
        for name in names:
            if name in self._option_map:
                raise SettingsError(f"Option name '{name}' is already defined")

    def add_option(
        self,
        *names: str,
        mandatory: bool = False,
        parameter: ParameterProtocol | None = None,
        help_text: str | None = None,
    ) -> Option:
        """
        Register an option under one or more names.

        Single-letter names are typed as `-x`, longer names as `--name`.

        Args:
            *names (str): Names of the option, letters only.
            mandatory (bool): True if the option must be present in every command.
            parameter (ParameterProtocol | None): Converter for the option value,
                or None for a flag.
            help_text (str | None): Help text for the option.

        Returns:
            Option: The registered option.

        Raises:
            SettingsError: If a name is invalid or already used, or the parameter
                does not satisfy the converter contract.
        """
        self._validate_names(names)
        if parameter is not None and not is_parameter(parameter):
            raise SettingsError(
                f"Parameter for option '{names[0]}' must provide name, mandatory "
                "and convert()"
            )
        option = Option(
            names=tuple(names),
            mandatory=bool(mandatory),
            parameter=parameter,
            help_text=help_text,
        )
        self._options.append(option)
        for name in names:
            self._option_map[name] = option
        logger.debug("Registered option %s on '%s'", option.names, self.program_name)
        return option

    def _resolve(self, names: Iterable[str]) -> list[Option]:
        options = []
        for name in names:
            if not is_valid_option_name(name):
                raise SettingsError(f"Invalid option name {name!r}")
            option = self._option_map.get(name)
            if option is None:
                raise ConstraintError(f"Option '{name}' is not defined")
            options.append(option)
        return options

    def add_dependency(self, dependent: str, independent: str) -> None:
        """
        Require `independent` to be present whenever `dependent` is present.

        Args:
            dependent (str): Any name of the dependent option.
            independent (str): Any name of the option it depends on.

        Raises:
            SettingsError: If a name is not a valid option name.
            ConstraintError: If an option is not defined, both names belong to
                the same option, or both options are in a registered conflict.
        """
        dependent_option, independent_option = self._resolve((dependent, independent))
        if dependent_option is independent_option:
            raise ConstraintError(
                f"'{dependent}' and '{independent}' are names of the same option"
            )
        for group in self._conflicts:
            if dependent_option in group and independent_option in group:
                raise ConstraintError(
                    f"Options '{dependent_option.name}' and "
                    f"'{independent_option.name}' are in conflict and cannot "
                    "depend on each other"
                )
        pair = (dependent_option, independent_option)
        if pair in self._dependencies:
            return
        self._dependencies.append(pair)
        logger.debug(
            "Registered dependency '%s' -> '%s'",
            dependent_option.name,
            independent_option.name,
        )

    def add_conflict(self, first: str, second: str, *others: str) -> None:
        """
        Allow at most one of the given options in a command.

        Args:
            first (str): Any name of the first conflicting option.
            second (str): Any name of the second conflicting option.
            *others (str): Names of further conflicting options.

        Raises:
            SettingsError: If a name is not a valid option name.
            ConstraintError: If an option is not defined, two names belong to the
                same option, or two of the options are bound by a dependency.
        """
        group = self._resolve((first, second, *others))
        if len(set(map(id, group))) != len(group):
            raise ConstraintError("Conflicting option names must not be synonyms")
        for dependent_option, independent_option in self._dependencies:
            if dependent_option in group and independent_option in group:
                raise ConstraintError(
                    f"Option '{dependent_option.name}' depends on "
                    f"'{independent_option.name}'; they cannot be in conflict"
                )
        self._conflicts.append(tuple(group))
        logger.debug(
            "Registered conflict between %s", [option.name for option in group]
        )

    def add_plain_argument(
        self, position: int, name: str, help_text: str | None = None
    ) -> None:
        """
        Document the plain argument at a 0-based position.

        This only feeds help output; plain arguments are never interpreted.

        Raises:
            SettingsError: If the name is empty, the position is out of bounds, or
                the position is already documented.
        """
        if not isinstance(name, str) or not name.strip():
            raise SettingsError("Plain argument name must be a non-empty string")
        if (
            not isinstance(position, int)
            or position < 0
            or (self.max_plain_args is not None and position > self.max_plain_args)
        ):
            raise SettingsError(f"Invalid plain argument position: {position}")
        if any(arg.position == position for arg in self._plain_arguments):
            raise SettingsError(f"Plain argument at position {position} already added")
        self._plain_arguments.append(PlainArgument(position, name, help_text))

    def build(self) -> Settings:
        """Return an immutable snapshot of the current registry."""
        return Settings(
            program_name=self.program_name,
            options=self.options,
            option_map=MappingProxyType(dict(self._option_map)),
            mandatory_options=self.mandatory_options,
            dependencies=self.dependencies,
            conflicts=self.conflicts,
            min_plain_args=self.min_plain_args,
            max_plain_args=self.max_plain_args,
            plain_arguments=self.plain_arguments,
            help_text=self.help_text,
        )

    def __str__(self) -> str:
        return (
            f"ProgramSettings(program={self.program_name!r}, "
            f"options={len(self._options)}, mandatory={len(self.mandatory_options)}, "
            f"dependencies={len(self._dependencies)}, conflicts={len(self._conflicts)})"
        )

    def __repr__(self) -> str:
        return str(self)
