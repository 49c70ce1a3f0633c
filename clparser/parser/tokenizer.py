# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw command line into argument tokens.

Accepted inputs:
- `str`: split on runs of whitespace. No quoting rules are applied.
- a sequence of `str` (e.g. `sys.argv`): taken as already split.
- a text stream: a single line is read and split like a string.
"""
from __future__ import annotations

import re
from typing import Sequence, TextIO, Union

_WHITESPACE = re.compile(r"\s+")

CommandLine = Union[str, Sequence[str], TextIO]


def split_command_line(command_line: str) -> list[str]:
    """Split a command string on whitespace, ignoring leading/trailing blanks."""
    stripped = command_line.strip()
    if not stripped:
        return []
    return _WHITESPACE.split(stripped)


def tokenize(command: CommandLine) -> list[str]:
    """
    Turn a command line into a list of tokens.

    Args:
        command (CommandLine): A command string, a pre-split sequence of strings,
            or a readable text stream.

    Returns:
        list[str]: The argument tokens, possibly empty.

    Raises:
        TypeError: If the command is of an unsupported type or a pre-split
            sequence contains non-string items.
    """
    if isinstance(command, str):
        return split_command_line(command)
    if hasattr(command, "readline"):
        return split_command_line(command.readline())
    if isinstance(command, Sequence):
        tokens = list(command)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(
                    f"Command tokens must be strings, got {type(token).__name__}"
                )
        return tokens
    raise TypeError(
        f"Command must be a string, a sequence of strings or a text stream, "
        f"got {type(command).__name__}"
    )
