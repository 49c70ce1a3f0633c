from clparser import (
    IntListParameter,
    IntParameter,
    ParseError,
    ProgramSettings,
    parse,
    render_help,
)
from clparser.console import console
from clparser.utils import setup_logging

setup_logging(mode="cli")

settings = ProgramSettings("numactl", min_plain_args=0, max_plain_args=3)
settings.add_option(
    "i",
    "interleave",
    parameter=IntListParameter("NODES", lower=0, upper=3),
    help_text="Interleave memory allocation across given nodes.",
)
settings.add_option(
    "p",
    "preferred",
    parameter=IntParameter("NODE", lower=0, upper=3),
    help_text="Prefer memory allocation from given node.",
)
settings.add_option(
    "m",
    "membind",
    parameter=IntListParameter("NODES", lower=0, upper=3),
    help_text="Allocate memory from given nodes only.",
)
settings.add_option(
    "C",
    "physcpubind",
    parameter=IntListParameter("CPUS", lower=0, upper=31),
    help_text="Run on given CPUs only.",
)
settings.add_option("S", "show", help_text="Show current NUMA policy.")
settings.add_option("H", "hardware", help_text="Print hardware configuration.")

settings.add_conflict("m", "p", "i")


def show_error(command: str) -> None:
    try:
        parse(command, settings)
    except ParseError as error:
        console.print(f"[bold]command:[/bold] {command}")
        console.print(f"[bold red]error:[/bold red] {error}")


if __name__ == "__main__":
    # conflicting options, then a node out of range
    show_error("numactl -i=0,1,3 -p=2")
    show_error("numactl -i 0,1,4")
    console.print()

    result = parse("numactl -SH", settings)
    console.print(f"show: {result.was_parsed('S')}, hardware: {result.was_parsed('H')}")

    result = parse("numactl -i 0,1,3 --physcpubind 15-17 -S -- my_file", settings)
    console.print(f"interleave: {result.get_parameter_value('i')}")
    console.print(f"physcpubind: {result.get_parameter_value('physcpubind')}")
    console.print(f"plain arguments: {list(result.plain_arguments)}\n")

    settings.add_plain_argument(0, "OUTPUT_FILE", "Specify the output file.")
    settings.add_plain_argument(1, "OUTPUT_DIR", "Specify the output directory.")
    settings.add_plain_argument(2, "ARGUMENT")
    render_help(settings)
