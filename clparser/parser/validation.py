# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Post-match validation of a `ParseResult` against its `Settings`.

Checks run in a fixed order and stop at the first violation:

1. every mandatory option is present,
2. every dependency is met,
3. no conflict group has more than one member present,
4. the plain argument count is within bounds.

Options are identified by their first registered name in all checks and messages.
"""
from __future__ import annotations

from clparser.exceptions import ParseError
from clparser.result import ParseResult
from clparser.settings import Settings


def check_mandatory_options(result: ParseResult, settings: Settings) -> None:
    for option in settings.mandatory_options:
        if not result.was_parsed(option.name):
            raise ParseError(f"Missing mandatory option '{option.name}'")


def check_dependencies(result: ParseResult, settings: Settings) -> None:
    for dependent, independent in settings.dependencies:
        if result.was_parsed(dependent.name) and not result.was_parsed(
            independent.name
        ):
            raise ParseError(
                f"Option '{dependent.name}' requires option '{independent.name}'"
            )


def check_conflicts(result: ParseResult, settings: Settings) -> None:
    for group in settings.conflicts:
        present = []
        for option in group:
            if result.was_parsed(option.name):
                present.append(option.name)
            if len(present) > 1:
                raise ParseError(
                    f"Options '{present[0]}' and '{present[1]}' cannot be used together"
                )


def check_plain_argument_count(result: ParseResult, settings: Settings) -> None:
    count = len(result.plain_arguments)
    minimum = settings.min_plain_args
    maximum = settings.max_plain_args
    if count < minimum:
        raise ParseError(
            f"Too few plain arguments: expected at least {minimum}, got {count}"
        )
    if maximum is not None and count > maximum:
        raise ParseError(
            f"Too many plain arguments: expected at most {maximum}, got {count}"
        )


def validate(result: ParseResult, settings: Settings) -> None:
    """
    Run every check against a fully matched result.

    Raises:
        ParseError: Describing the first violated rule.
    """
    check_mandatory_options(result, settings)
    check_dependencies(result, settings)
    check_conflicts(result, settings)
    check_plain_argument_count(result, settings)
