from clparser import ProgramSettings, StringParameter, parse, render_help
from clparser.console import console
from clparser.utils import setup_logging

setup_logging(mode="cli")

settings = ProgramSettings(
    "time", help_text="Run a program and summarize its system resource usage."
)
settings.add_option(
    "f",
    "format",
    parameter=StringParameter("FORMAT"),
    help_text="Specify output format, overriding the TIME environment variable.",
)
settings.add_option("p", "portability", help_text="Use the portable output format.")
settings.add_option(
    "o",
    "output",
    parameter=StringParameter("FILE"),
    help_text="Overwrite the specified file instead of writing to stderr.",
)
settings.add_option(
    "a", "append", help_text="(Used together with -o.) Do not overwrite but append."
)
settings.add_option(
    "v", "verbose", help_text="Give very verbose output about all the program knows."
)
settings.add_option(
    "V", "version", help_text="Print version information on standard output and exit."
)
settings.add_option("help", help_text="Print a usage message and exit.")

# -a only makes sense together with -o
settings.add_dependency("a", "o")


if __name__ == "__main__":
    command = "time -o output_file -a --verbose -- first_file second_file"
    result = parse(command, settings)

    console.print(f"[bold]command:[/bold] {command}")
    console.print(f"output file: {result.get_parameter_value('output')}")
    console.print(f"verbose: {result.was_parsed('v')}")
    console.print(f"portability: {result.was_parsed('p')}")
    for parsed_option in result:
        console.print(f"  {parsed_option.name} = {parsed_option.value!r}")
    console.print(f"plain arguments: {list(result.plain_arguments)}\n")

    render_help(settings)
