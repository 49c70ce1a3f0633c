# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parameter converters for option values.

A parameter converter turns the raw text attached to an option into a typed value,
or rejects it. The parsing engine only relies on three members:

- `name`: display name used in help output (e.g. `FILE`, `NUM`).
- `mandatory`: whether a value must be given whenever the owning option appears.
- `convert(raw)`: returns `(value, True)` on success and `(None, False)` when the
  text is rejected. Converters never raise on bad input and never mutate state.

Any object exposing those members satisfies `ParameterProtocol` and can be passed
to `ProgramSettings.add_option()`. The built-in converters derive from `Parameter`:

- `IntParameter`: base-10 integer within optional inclusive bounds.
- `StringParameter`: non-empty string, optionally restricted to a domain.
- `IntListParameter`: comma-separated integers and `a-b` ranges (`0,2,4-6`),
  capped at `max_items` values.
- `DateTimeParameter`: date/time text parsed by `dateutil`.

Parsed values form a closed set of kinds, see `ParameterValue`. `None` is the
explicit "no value" marker.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Collection, Protocol, Union, runtime_checkable

from dateutil import parser as date_parser

from clparser.exceptions import SettingsError

ParameterValue = Union[int, str, list[int], datetime, None]

_INTEGER = re.compile(r"[+-]?\d+")
_INTEGER_RANGE = re.compile(r"(?P<start>[+-]?\d+)(?:-(?P<end>[+-]?\d+))?")


@runtime_checkable
class ParameterProtocol(Protocol):
    name: str
    mandatory: bool

    def convert(self, raw: str) -> tuple[Any, bool]: ...


class Parameter(ABC):
    """
    Base class for the built-in parameter converters.

    Attributes:
        name (str): Display name of the parameter, used for help output.
        mandatory (bool): True if a value must follow the owning option.
    """

    def __init__(self, name: str, mandatory: bool = True) -> None:
        if not isinstance(name, str) or not name.strip():
            raise SettingsError("Parameter name must be a non-empty string")
        self.name: str = name
        self.mandatory: bool = bool(mandatory)

    @abstractmethod
    def convert(self, raw: str) -> tuple[ParameterValue, bool]:
        """Convert raw text to a value. Returns `(None, False)` if rejected."""

    @property
    def metavar(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, mandatory={self.mandatory})"
        )


def _check_bounds(lower: int | None, upper: int | None) -> None:
    if lower is not None and upper is not None and lower > upper:
        raise SettingsError(
            f"Lower bound {lower} must not be greater than upper bound {upper}"
        )


def _within(value: int, lower: int | None, upper: int | None) -> bool:
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


class IntParameter(Parameter):
    """
    Integer parameter with optional inclusive bounds.

    Accepts an optional sign followed by decimal digits. Surrounding whitespace is
    ignored; underscores, decimals and other bases are rejected.
    """

    def __init__(
        self,
        name: str,
        mandatory: bool = True,
        lower: int | None = None,
        upper: int | None = None,
    ) -> None:
        super().__init__(name, mandatory)
        _check_bounds(lower, upper)
        self.lower: int | None = lower
        self.upper: int | None = upper

    def convert(self, raw: str) -> tuple[int | None, bool]:
        if not isinstance(raw, str) or not _INTEGER.fullmatch(raw.strip()):
            return None, False
        value = int(raw.strip())
        if not _within(value, self.lower, self.upper):
            return None, False
        return value, True

    def __repr__(self) -> str:
        return (
            f"IntParameter(name={self.name!r}, mandatory={self.mandatory}, "
            f"lower={self.lower}, upper={self.upper})"
        )


class StringParameter(Parameter):
    """
    String parameter, optionally limited to a domain of admissible values.

    The empty string is always rejected. Domain membership is exact and
    case-sensitive.
    """

    def __init__(
        self,
        name: str,
        mandatory: bool = True,
        domain: Collection[str] | None = None,
    ) -> None:
        super().__init__(name, mandatory)
        if domain is not None:
            if isinstance(domain, str):
                raise SettingsError("domain must be a collection of strings, not a str")
            domain = tuple(domain)
            if not domain:
                raise SettingsError("domain must not be empty")
            if not all(isinstance(item, str) for item in domain):
                raise SettingsError("domain must only contain strings")
        self.domain: tuple[str, ...] | None = domain

    def convert(self, raw: str) -> tuple[str | None, bool]:
        if not isinstance(raw, str) or not raw:
            return None, False
        if self.domain is not None and raw not in self.domain:
            return None, False
        return raw, True

    @property
    def metavar(self) -> str:
        if self.domain:
            return f"{{{','.join(self.domain)}}}"
        return self.name

    def __repr__(self) -> str:
        return (
            f"StringParameter(name={self.name!r}, mandatory={self.mandatory}, "
            f"domain={self.domain})"
        )


class IntListParameter(Parameter):
    """
    Comma-separated list of integers and inclusive ranges.

    `0,1,3` yields `[0, 1, 3]` and `0-3` yields `[0, 1, 2, 3]`. Every item,
    including each expanded range member, must lie within the bounds. A value
    that would expand to more than `max_items` integers is rejected before any
    range is expanded.
    """

    DEFAULT_MAX_ITEMS = 4096

    def __init__(
        self,
        name: str,
        mandatory: bool = True,
        lower: int | None = None,
        upper: int | None = None,
        max_items: int = DEFAULT_MAX_ITEMS,
    ) -> None:
        super().__init__(name, mandatory)
        _check_bounds(lower, upper)
        if (
            isinstance(max_items, bool)
            or not isinstance(max_items, int)
            or max_items < 1
        ):
            raise SettingsError(f"max_items must be a positive integer: {max_items!r}")
        self.lower: int | None = lower
        self.upper: int | None = upper
        self.max_items: int = max_items

    def convert(self, raw: str) -> tuple[list[int] | None, bool]:
        if not isinstance(raw, str) or not raw.strip():
            return None, False
        values: list[int] = []
        for item in raw.split(","):
            match = _INTEGER_RANGE.fullmatch(item.strip())
            if not match:
                return None, False
            start = int(match.group("start"))
            end = int(match.group("end")) if match.group("end") is not None else start
            if start > end:
                return None, False
            if not (
                _within(start, self.lower, self.upper)
                and _within(end, self.lower, self.upper)
            ):
                return None, False
            if len(values) + end - start + 1 > self.max_items:
                return None, False
            values.extend(range(start, end + 1))
        return values, True

    def __repr__(self) -> str:
        return (
            f"IntListParameter(name={self.name!r}, mandatory={self.mandatory}, "
            f"lower={self.lower}, upper={self.upper}, max_items={self.max_items})"
        )

    @property
    def metavar(self) -> str:
        return f"{self.name}[,{self.name}...]"


class DateTimeParameter(Parameter):
    """Date and/or time parameter parsed with `dateutil.parser.parse`."""

    def convert(self, raw: str) -> tuple[datetime | None, bool]:
        if not isinstance(raw, str) or not raw.strip():
            return None, False
        try:
            return date_parser.parse(raw), True
        except (ValueError, OverflowError):
            return None, False


def is_parameter(value: Any) -> bool:
    """Return True if `value` satisfies the parameter converter contract."""
    return (
        isinstance(value, ParameterProtocol)
        and isinstance(getattr(value, "name", None), str)
        and callable(getattr(value, "convert", None))
    )
