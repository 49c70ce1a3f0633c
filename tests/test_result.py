import pytest

from clparser import ParsedOption, ParseResult, SettingsError


def make_result() -> ParseResult:
    result = ParseResult()
    result.add_option(ParsedOption(names=("a", "aa")))
    result.add_option(ParsedOption(names=("e", "ee"), value=42))
    result.add_plain_arguments(["x", "y"])
    return result


def test_queries_by_any_name():
    result = make_result()
    assert result.was_parsed("a")
    assert result.was_parsed("aa")
    assert result.was_parsed("ee")
    assert not result.was_parsed("b")
    assert result.get_parameter_value("e") == 42
    assert result.get_parameter_value("aa") is None
    assert result.get_parameter_value("b") is None
    assert "ee" in result
    assert "b" not in result
    assert 1 not in result


@pytest.mark.parametrize("name", ["", "   ", None, 1])
def test_queries_reject_empty_names(name):
    result = make_result()
    with pytest.raises(SettingsError):
        result.was_parsed(name)
    with pytest.raises(SettingsError):
        result.get_parameter_value(name)


def test_order_is_kept():
    result = make_result()
    assert [option.name for option in result] == ["a", "e"]
    assert result.plain_arguments == ("x", "y")
    assert len(result) == 2


def test_repeated_option_first_wins():
    result = make_result()
    result.add_option(ParsedOption(names=("e", "ee"), value=7))
    assert len(result) == 3
    assert result.get_parameter_value("e") == 42
    assert result.get("ee").value == 42
    assert [option.value for option in result.get_all("e")] == [42, 7]
    assert result.as_dict() == {"a": None, "e": 42}


def test_parsed_option():
    parsed_option = ParsedOption(names=("e", "ee"), value=0)
    assert parsed_option.name == "e"
    assert parsed_option.has_value
    assert not ParsedOption(names=("a",)).has_value
    with pytest.raises(AttributeError):
        parsed_option.value = 1


def test_views_are_read_only():
    result = make_result()
    assert isinstance(result.parsed_options, tuple)
    assert isinstance(result.plain_arguments, tuple)


def test_str():
    assert str(make_result()) == (
        "ParseResult(options=['a', 'e'], plain_arguments=['x', 'y'])"
    )
