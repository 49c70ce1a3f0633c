import io

import pytest

from clparser.parser.tokenizer import split_command_line, tokenize


@pytest.mark.parametrize(
    "command, expected",
    [
        ("time -o out.txt", ["time", "-o", "out.txt"]),
        ("  -a\t\t--bb \n -- x  ", ["-a", "--bb", "--", "x"]),
        ("", []),
        ("   \t\n", []),
    ],
)
def test_split_command_line(command, expected):
    assert split_command_line(command) == expected


def test_tokenize_sequence_passes_through():
    tokens = ("-a", "two words", "")
    assert tokenize(tokens) == ["-a", "two words", ""]


def test_tokenize_sequence_is_copied():
    tokens = ["-a"]
    result = tokenize(tokens)
    result.append("-b")
    assert tokens == ["-a"]


def test_tokenize_stream_reads_one_line():
    stream = io.StringIO("-a -e 3\n-b\n")
    assert tokenize(stream) == ["-a", "-e", "3"]
    assert tokenize(stream) == ["-b"]
    assert tokenize(stream) == []


@pytest.mark.parametrize("command", [None, 42, {"-a": 1}, ["-a", None]])
def test_tokenize_rejects_unsupported_input(command):
    with pytest.raises(TypeError):
        tokenize(command)
