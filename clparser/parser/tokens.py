# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical grammar for command line tokens.

Token shapes, checked in this order by the matching engine:

- separator: exactly `--`. Everything after it is a plain argument.
- parameter: a non-empty token that is not option-led. A token is option-led when
  it starts with `-` followed by a letter or by another `-`, so `-5`, `-` and
  `1,2,3` are parameter tokens while `---` is not.
- grouped short options: `-abc`, `-abc=value`, `-abc42`. Only the last letter may
  receive the value.
- single option: `-a`, `-a=value`, `-a42`, `--name`, `--name=value`. Attached
  text without `=` must not start with a letter, otherwise the token is a group.

Anything else is a malformed option.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

SEPARATOR = "--"

_OPTION_LEAD = re.compile(r"-[A-Za-z-]")
_GROUPED = re.compile(
    r"-(?P<names>[A-Za-z]{2,})(?:=(?P<inline>.+)|(?P<attached>[^A-Za-z=].*))?",
    re.DOTALL,
)
_SHORT = re.compile(
    r"-(?P<name>[A-Za-z])(?:=(?P<inline>.+)|(?P<attached>[^A-Za-z=].*))?",
    re.DOTALL,
)
_LONG = re.compile(r"--(?P<name>[A-Za-z]{2,})(?:=(?P<inline>.+))?", re.DOTALL)


@dataclass(frozen=True)
class OptionToken:
    """
    An option token split into its parts.

    Attributes:
        names (tuple[str, ...]): The option names in the token. One name for a
            single option, two or more for grouped short options.
        parameter (str | None): Parameter text attached to the token, if any.
        grouped (bool): True for grouped short options.
    """

    names: tuple[str, ...]
    parameter: str | None = None
    grouped: bool = False

    @property
    def last_name(self) -> str:
        return self.names[-1]


def is_separator(token: str) -> bool:
    return token == SEPARATOR


def is_parameter(token: str) -> bool:
    """Return True if the token can be taken as a parameter value."""
    return bool(token) and not _OPTION_LEAD.match(token)


def match_grouped(token: str) -> OptionToken | None:
    match = _GROUPED.fullmatch(token)
    if not match:
        return None
    parameter = match.group("inline") or match.group("attached")
    return OptionToken(
        names=tuple(match.group("names")), parameter=parameter, grouped=True
    )


def match_single(token: str) -> OptionToken | None:
    match = _LONG.fullmatch(token) or _SHORT.fullmatch(token)
    if not match:
        return None
    parameter = match.group("inline")
    if parameter is None and "attached" in match.groupdict():
        parameter = match.group("attached")
    return OptionToken(names=(match.group("name"),), parameter=parameter)


def match_option(token: str) -> OptionToken | None:
    """Split an option token into names and attached parameter, or return None."""
    return match_grouped(token) or match_single(token)
