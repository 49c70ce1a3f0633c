# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse infrastructure for the `clparser` command.

The `clparser` command is a small tool for trying out settings files: it checks
command lines against a YAML or TOML settings file and prints the generated help.

Key Components:
- `ClparserParsers`: Container for the root parser and its subcommand parsers.
- `get_root_parser()`: Creates the root-level parser with global options.
- `get_subparsers()`: Attaches the subcommand block to the root parser.
- `get_arg_parsers()`: Factory for the full parser suite.
"""
from argparse import ArgumentParser, Namespace, _SubParsersAction
from dataclasses import dataclass, fields
from typing import Sequence

from clparser.version import __version__


@dataclass
class ClparserParsers:
    """Defines the argument parsers for the clparser CLI."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    check: ArgumentParser
    help: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)

    def as_dict(self) -> dict[str, ArgumentParser]:
        """Convert the ClparserParsers instance to a dictionary."""
        return {field.name: getattr(self, field.name) for field in fields(self)}

    def get_parser(self, name: str) -> ArgumentParser | None:
        """Get the parser by name."""
        return self.as_dict().get(name)


def get_root_parser(
    prog: str | None = "clparser",
    description: str | None = "Check command lines against a clparser settings file.",
    epilog: str | None = "Tip: Use 'clparser help -c CONFIG' to see the full help.",
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the clparser CLI.

    Notes:
        ```
        Includes the following arguments:
            -v / --verbose       : Enable debug logging.
            --version            : Print the clparser version.
        ```
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "Clparser Commands",
    description: str | None = "Available commands for the clparser CLI.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering clparser subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    return parser.add_subparsers(title=title, description=description, dest="command")


def get_arg_parsers(
    prog: str | None = "clparser",
    root_parser: ArgumentParser | None = None,
    subparsers: _SubParsersAction | None = None,
) -> ClparserParsers:
    """
    Create and return the full suite of argument parsers used by the clparser CLI.

    Subcommands:
        check [-c CONFIG] [COMMAND]   Parse COMMAND against the settings in CONFIG.
        help [-c CONFIG]              Print the help generated from CONFIG.

    When CONFIG is omitted, the `CLPARSER_CONFIG` environment variable is used.
    """
    if root_parser is None:
        parser = get_root_parser(prog=prog)
    else:
        if not isinstance(root_parser, ArgumentParser):
            raise TypeError("root_parser must be an instance of ArgumentParser")
        parser = root_parser

    if subparsers is None:
        subparsers = get_subparsers(parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Parse a command line against a settings file",
        description="Parse COMMAND against the settings in CONFIG and show the result.",
        epilog="Example: clparser check -c time.yaml 'time -o out.txt -- ls -l'",
    )
    check_parser.add_argument(
        "-c", "--config", help="Path to a YAML or TOML settings file."
    )
    check_parser.add_argument(
        "command_line",
        nargs="?",
        help="The command line to check, quoted. Read from stdin when omitted.",
    )

    help_parser = subparsers.add_parser(
        "help",
        help="Show the help generated from a settings file",
        description="Print the usage and option list generated from CONFIG.",
    )
    help_parser.add_argument(
        "-c", "--config", help="Path to a YAML or TOML settings file."
    )

    return ClparserParsers(
        root=parser,
        subparsers=subparsers,
        check=check_parser,
        help=help_parser,
    )
