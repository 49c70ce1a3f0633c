"""
Clparser Command Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import load_settings, settings_from_dict
from .exceptions import ClparserError, ConstraintError, ParseError, SettingsError
from .help import format_help, render_help
from .parameters import (
    DateTimeParameter,
    IntListParameter,
    IntParameter,
    Parameter,
    ParameterProtocol,
    StringParameter,
)
from .parser import CommandLineParser, parse, try_parse
from .result import ParsedOption, ParseResult
from .settings import Option, PlainArgument, ProgramSettings, Settings
from .version import __version__

logger = logging.getLogger("clparser")


__all__ = [
    "ClparserError",
    "CommandLineParser",
    "ConstraintError",
    "DateTimeParameter",
    "IntListParameter",
    "IntParameter",
    "Option",
    "Parameter",
    "ParameterProtocol",
    "ParseError",
    "ParseResult",
    "ParsedOption",
    "PlainArgument",
    "ProgramSettings",
    "Settings",
    "SettingsError",
    "StringParameter",
    "__version__",
    "format_help",
    "load_settings",
    "parse",
    "render_help",
    "settings_from_dict",
    "try_parse",
]
