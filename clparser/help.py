# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help rendering for program settings.

Help output only reads the public surface of `Settings`: option names, parameter
display names, help strings and plain argument bounds. Nothing here is used by the
parser.

- `render_help(settings)`: print a Rich-styled help screen.
- `format_help(settings)`: return the same content as plain text.

Layout:
    usage: time [options] [-- arguments...]

    Run a program and summarize its resource usage.

    options:
      -o FILE, --output=FILE         Write the results to FILE.
      -a, --append                   Append to the output file.

    plain arguments (after --):
      at most 3 plain arguments
      0: COMMAND                     Program to run.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from clparser.console import console as default_console
from clparser.parser.tokens import SEPARATOR
from clparser.settings import Option, ProgramSettings, Settings

_COLUMN = 30


def _as_settings(settings: Settings | ProgramSettings) -> Settings:
    if isinstance(settings, ProgramSettings):
        return settings.build()
    return settings


def get_option_text(option: Option) -> str:
    """Return the flags with parameter placeholders, e.g. `-o FILE, --output=FILE`."""
    parts = []
    for flag in option.get_flags():
        if option.parameter is None:
            parts.append(flag)
            continue
        metavar = getattr(option.parameter, "metavar", option.parameter.name)
        short = not flag.startswith("--")
        if option.parameter.mandatory:
            parts.append(f"{flag} {metavar}" if short else f"{flag}={metavar}")
        else:
            parts.append(f"{flag} [{metavar}]" if short else f"{flag}[={metavar}]")
    return ", ".join(parts)


def get_usage(settings: Settings | ProgramSettings) -> str:
    """Return the usage line, listing mandatory options explicitly."""
    settings = _as_settings(settings)
    usage = [settings.program_name]
    for option in settings.mandatory_options:
        usage.append(get_option_text(option).split(", ")[0])
    if len(settings.options) > len(settings.mandatory_options):
        usage.append("[options]")
    if settings.max_plain_args != 0:
        if settings.min_plain_args > 0:
            usage.append(f"{SEPARATOR} arguments...")
        else:
            usage.append(f"[{SEPARATOR} arguments...]")
    return " ".join(usage)


def get_plain_argument_lines(settings: Settings | ProgramSettings) -> list[str]:
    """Describe the plain argument count bounds."""
    settings = _as_settings(settings)
    lines = []
    minimum, maximum = settings.min_plain_args, settings.max_plain_args
    if minimum:
        word = "argument" if minimum == 1 else "arguments"
        lines.append(f"at least {minimum} plain {word}")
    if maximum == 0:
        return []
    if maximum is not None:
        word = "argument" if maximum == 1 else "arguments"
        lines.append(f"at most {maximum} plain {word}")
    return lines


def _line(left: str, right: str | None) -> str:
    line = f"  {left:<{_COLUMN}} "
    if right and len(left) > _COLUMN:
        return f"{line.rstrip()}\n{'':<{_COLUMN + 3}}{right}"
    return f"{line}{right or ''}".rstrip()


def format_help(settings: Settings | ProgramSettings) -> str:
    """Return the help screen as plain text."""
    settings = _as_settings(settings)
    lines = [f"usage: {get_usage(settings)}", ""]
    if settings.help_text:
        lines.extend([settings.help_text, ""])

    if settings.options:
        lines.append("options:")
        for option in settings.options:
            help_text = option.help_text or ""
            if option.mandatory:
                help_text = f"(required) {help_text}".rstrip()
            lines.append(_line(get_option_text(option), help_text))
        lines.append("")

    plain_lines = get_plain_argument_lines(settings)
    if plain_lines or settings.plain_arguments:
        lines.append(f"plain arguments (after {SEPARATOR}):")
        lines.extend(f"  {line}" for line in plain_lines)
        for argument in settings.plain_arguments:
            lines.append(
                _line(f"{argument.position}: {argument.name}", argument.help_text)
            )
    return "\n".join(lines).rstrip() + "\n"


def render_help(
    settings: Settings | ProgramSettings, console: Console | None = None
) -> None:
    """
    Print formatted help text for the settings using Rich output.

    Includes usage, program description, options and plain argument bounds.
    """
    settings = _as_settings(settings)
    console = console or default_console
    console.print(f"[bold]usage: {escape(get_usage(settings))}[/bold]\n")

    if settings.help_text:
        console.print(escape(settings.help_text) + "\n")

    if settings.options:
        console.print("[bold]options:[/bold]")
        for option in settings.options:
            flags = escape(get_option_text(option))
            help_text = escape(option.help_text or "")
            if option.mandatory:
                help_text = f"[bold](required)[/bold] {help_text}".rstrip()
            arg_line = f"  {flags:<{_COLUMN}} "
            if help_text and len(flags) > _COLUMN:
                help_text = f"\n{'':<{_COLUMN + 3}}{help_text}"
            console.print(f"{arg_line}{help_text}")
        console.print()

    plain_lines = get_plain_argument_lines(settings)
    if plain_lines or settings.plain_arguments:
        console.print(f"[bold]plain arguments (after {SEPARATOR}):[/bold]")
        for line in plain_lines:
            console.print(f"  {line}", style="dim")
        for argument in settings.plain_arguments:
            name = escape(f"{argument.position}: {argument.name}")
            console.print(f"  {name:<{_COLUMN}} {escape(argument.help_text or '')}")
