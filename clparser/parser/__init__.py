"""
Clparser Command Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_line_parser import CommandLineParser, parse, try_parse
from .engine import MatchingEngine
from .tokenizer import tokenize
from .tokens import SEPARATOR, OptionToken, match_option
from .validation import validate

__all__ = [
    "CommandLineParser",
    "MatchingEngine",
    "OptionToken",
    "SEPARATOR",
    "match_option",
    "parse",
    "tokenize",
    "try_parse",
    "validate",
]
