import io
import runpy
from pathlib import Path

import pytest
from rich.console import Console

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    console = Console(file=buffer, color_system=None, width=200)
    monkeypatch.setattr("clparser.console.console", console)
    monkeypatch.setattr("clparser.help.default_console", console)
    monkeypatch.setattr("clparser.utils.setup_logging", lambda **kwargs: None)
    return buffer


def test_time_example(output):
    namespace = runpy.run_path(str(EXAMPLES / "time_example.py"), run_name="__main__")
    text = output.getvalue()
    assert "output file: output_file" in text
    assert "verbose: True" in text
    assert "portability: False" in text
    assert "plain arguments: ['first_file', 'second_file']" in text
    assert "usage: time" in text
    assert "--help" in text
    dependencies = namespace["settings"].dependencies
    assert [(a.name, b.name) for a, b in dependencies] == [("a", "o")]


def test_numactl_example(output):
    runpy.run_path(str(EXAMPLES / "numactl_example.py"), run_name="__main__")
    text = output.getvalue()
    assert "error: Options 'p' and 'i' cannot be used together" in text
    assert "Invalid parameter value '0,1,4'" in text
    assert "show: True, hardware: True" in text
    assert "interleave: [0, 1, 3]" in text
    assert "physcpubind: [15, 16, 17]" in text
    assert "plain arguments: ['my_file']" in text
    assert "OUTPUT_DIR" in text
