"""
Clparser Command Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from argparse import Namespace
from pathlib import Path
from typing import Sequence

import yaml
from rich.markup import escape
from rich.table import Table

from clparser.config import load_settings
from clparser.console import console
from clparser.help import render_help
from clparser.logger import logger
from clparser.parser import CommandLineParser
from clparser.parsers import get_arg_parsers
from clparser.result import ParseResult
from clparser.settings import ProgramSettings
from clparser.utils import setup_logging


def find_clparser_config(config: str | None) -> Path | None:
    if config:
        return Path(config)
    from_env = os.environ.get("CLPARSER_CONFIG")
    if from_env:
        return Path(from_env)
    candidates = [
        Path.cwd() / "clparser.yaml",
        Path.cwd() / "clparser.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def get_result_table(result: ParseResult) -> Table:
    table = Table(title="Parsed options", show_header=True, header_style="bold")
    table.add_column("Option")
    table.add_column("Names")
    table.add_column("Value")
    for parsed_option in result:
        value = "" if parsed_option.value is None else repr(parsed_option.value)
        table.add_row(
            escape(parsed_option.name),
            escape(", ".join(parsed_option.names)),
            escape(value),
        )
    return table


def check_command(args: Namespace, settings: ProgramSettings) -> int:
    command = args.command_line if args.command_line is not None else sys.stdin
    result, message = CommandLineParser(settings).try_parse(command)
    if result is None:
        console.print(f"[bold red]error:[/bold red] {escape(message)}")
        return 2
    console.print(get_result_table(result))
    plain_arguments = " ".join(result.plain_arguments) or "(none)"
    console.print(f"[bold]plain arguments:[/bold] {escape(plain_arguments)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parsers = get_arg_parsers()
    args = parsers.parse_args(argv)

    setup_logging(
        mode="cli",
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if not args.command:
        parsers.root.print_help()
        return 1

    config_path = find_clparser_config(args.config)
    if config_path is None:
        console.print(
            "[bold red]error:[/bold red] no settings file given. "
            "Use --config or set CLPARSER_CONFIG."
        )
        return 1

    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as error:
        logger.debug("Failed to load settings from %s", config_path, exc_info=True)
        console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
        return 1

    if args.command == "help":
        render_help(settings)
        return 0
    return check_command(args, settings)


if __name__ == "__main__":
    sys.exit(main())
