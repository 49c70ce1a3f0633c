from io import StringIO

import pytest
from rich.console import Console

from clparser import IntParameter, ProgramSettings, StringParameter
from clparser.help import (
    format_help,
    get_option_text,
    get_plain_argument_lines,
    get_usage,
    render_help,
)


@pytest.fixture
def time_settings():
    settings = ProgramSettings(
        "time",
        max_plain_args=3,
        help_text="Run a program and summarize its resource usage.",
    )
    settings.add_option(
        "o",
        "output",
        parameter=StringParameter("FILE"),
        help_text="Write the results to FILE.",
    )
    settings.add_option("a", "append", help_text="Append to the output file.")
    settings.add_option(
        "f", "format", mandatory=True, parameter=StringParameter("FORMAT", False)
    )
    settings.add_plain_argument(0, "COMMAND", "Program to run.")
    return settings


def test_get_option_text(time_settings):
    output, append, fmt = time_settings.options
    assert get_option_text(output) == "-o FILE, --output=FILE"
    assert get_option_text(append) == "-a, --append"
    assert get_option_text(fmt) == "-f [FORMAT], --format[=FORMAT]"


def test_get_option_text_uses_metavar():
    settings = ProgramSettings("program")
    option = settings.add_option(
        "g", parameter=StringParameter("WORD", domain=["hello", "hi"])
    )
    assert get_option_text(option) == "-g {hello,hi}"


def test_get_usage(time_settings):
    assert get_usage(time_settings) == (
        "time -f [FORMAT] [options] [-- arguments...]"
    )


@pytest.mark.parametrize(
    "bounds, usage",
    [
        ({}, "program [-- arguments...]"),
        ({"max_plain_args": 0}, "program"),
        ({"min_plain_args": 1}, "program -- arguments..."),
    ],
)
def test_get_usage_plain_arguments(bounds, usage):
    assert get_usage(ProgramSettings("program", **bounds)) == usage


def test_get_usage_only_mandatory_options():
    settings = ProgramSettings("program", max_plain_args=0)
    settings.add_option("n", mandatory=True, parameter=IntParameter("NUM"))
    assert get_usage(settings) == "program -n NUM"


@pytest.mark.parametrize(
    "bounds, lines",
    [
        ({}, []),
        ({"min_plain_args": 1}, ["at least 1 plain argument"]),
        (
            {"min_plain_args": 2, "max_plain_args": 5},
            ["at least 2 plain arguments", "at most 5 plain arguments"],
        ),
        ({"max_plain_args": 1}, ["at most 1 plain argument"]),
    ],
)
def test_get_plain_argument_lines(bounds, lines):
    assert get_plain_argument_lines(ProgramSettings("program", **bounds)) == lines


def test_format_help(time_settings):
    lines = format_help(time_settings).splitlines()
    assert lines[0] == "usage: time -f [FORMAT] [options] [-- arguments...]"
    assert lines[2] == "Run a program and summarize its resource usage."
    assert lines[4] == "options:"
    output_line = "  -o FILE, --output=FILE" + " " * 9 + "Write the results to FILE."
    assert lines[5] == output_line
    assert lines[6] == "  -a, --append" + " " * 19 + "Append to the output file."
    assert lines[7] == "  " + "-f [FORMAT], --format[=FORMAT]" + " (required)"
    assert lines[9] == "plain arguments (after --):"
    assert lines[10] == "  at most 3 plain arguments"
    assert lines[11] == "  " + "0: COMMAND".ljust(30) + " Program to run."
    assert len(lines) == 12


def test_format_help_accepts_snapshot(time_settings):
    assert format_help(time_settings.build()) == format_help(time_settings)


def test_format_help_wraps_long_flags():
    settings = ProgramSettings("program", max_plain_args=0)
    settings.add_option(
        "i",
        "interleave",
        parameter=StringParameter("NODES", mandatory=False),
        help_text="Interleave memory.",
    )
    lines = format_help(settings).splitlines()
    assert lines[-2] == "  -i [NODES], --interleave[=NODES]"
    assert lines[-1] == " " * 33 + "Interleave memory."


def test_render_help(time_settings):
    output = StringIO()
    console = Console(file=output, width=200, color_system=None)
    render_help(time_settings, console=console)
    text = output.getvalue()
    assert "usage: time -f [FORMAT] [options] [-- arguments...]" in text
    assert "Run a program and summarize its resource usage." in text
    assert "-o FILE, --output=FILE" in text
    assert "(required)" in text
    assert "plain arguments (after --):" in text
    assert "at most 3 plain arguments" in text
    assert "0: COMMAND" in text
