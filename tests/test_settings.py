from types import MappingProxyType

import pytest

from clparser import (
    ConstraintError,
    IntParameter,
    Option,
    ProgramSettings,
    Settings,
    SettingsError,
    StringParameter,
)


def test_add_option_returns_option():
    settings = ProgramSettings("program")
    option = settings.add_option(
        "o", "output", parameter=StringParameter("FILE"), help_text="Output file."
    )
    assert isinstance(option, Option)
    assert option.names == ("o", "output")
    assert option.name == "o"
    assert option.takes_parameter
    assert option.requires_parameter
    assert option.get_flags() == ["-o", "--output"]
    assert settings.get_option("output") is option
    assert settings.get_option("o") is option
    assert settings.get_option("x") is None


@pytest.mark.parametrize("names", [("xx666",), ("-x",), ("",), ("a b",), ()])
def test_invalid_option_names(names):
    settings = ProgramSettings("program")
    with pytest.raises(SettingsError):
        settings.add_option(*names)


def test_duplicate_option_names():
    settings = ProgramSettings("program")
    settings.add_option("a", "aa")
    with pytest.raises(SettingsError, match="already defined"):
        settings.add_option("b", "aa")
    with pytest.raises(SettingsError, match="already defined"):
        settings.add_option("a", "bb")
    with pytest.raises(SettingsError, match="Duplicate"):
        settings.add_option("c", "c")
    assert len(settings.options) == 1


def test_option_names_are_case_sensitive():
    settings = ProgramSettings("program")
    settings.add_option("s")
    settings.add_option("S")
    assert settings.get_option("s") is not settings.get_option("S")


def test_invalid_parameter():
    settings = ProgramSettings("program")
    with pytest.raises(SettingsError):
        settings.add_option("a", parameter="NUM")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"program_name": ""},
        {"program_name": "p", "min_plain_args": -1},
        {"program_name": "p", "min_plain_args": 3, "max_plain_args": 2},
        {"program_name": "p", "max_plain_args": "5"},
    ],
)
def test_invalid_program_settings(kwargs):
    with pytest.raises(SettingsError):
        ProgramSettings(**kwargs)


def test_mandatory_options_in_registration_order():
    settings = ProgramSettings("program")
    settings.add_option("a", mandatory=True)
    settings.add_option("b")
    settings.add_option("c", mandatory=True)
    assert [option.name for option in settings.mandatory_options] == ["a", "c"]


def test_add_dependency(settings):
    settings.add_dependency("aa", "b")
    settings.add_dependency("a", "bb")
    dependencies = [(a.name, b.name) for a, b in settings.dependencies]
    assert dependencies == [("c", "d"), ("a", "b")]


def test_dependency_to_unknown_option(settings):
    with pytest.raises(ConstraintError, match="not defined"):
        settings.add_dependency("a", "x")
    with pytest.raises(SettingsError):
        settings.add_dependency("a", "-b")


def test_dependency_between_synonyms(settings):
    with pytest.raises(ConstraintError):
        settings.add_dependency("a", "aa")


def test_conflict_after_dependency_is_rejected(settings):
    settings.add_dependency("a", "b")
    with pytest.raises(ConstraintError):
        settings.add_conflict("a", "b")
    with pytest.raises(ConstraintError):
        settings.add_conflict("bb", "aa")
    with pytest.raises(ConstraintError):
        settings.add_conflict("e", "b", "a")


def test_dependency_after_conflict_is_rejected(settings):
    settings.add_conflict("a", "b", "e")
    with pytest.raises(ConstraintError):
        settings.add_dependency("a", "b")
    with pytest.raises(ConstraintError):
        settings.add_dependency("ee", "a")
    settings.add_dependency("a", "f")


def test_conflict_between_synonyms(settings):
    with pytest.raises(ConstraintError):
        settings.add_conflict("a", "aa")


def test_conflict_with_unknown_option(settings):
    with pytest.raises(ConstraintError):
        settings.add_conflict("a", "b", "x")
    assert settings.conflicts == ()


def test_add_plain_argument():
    settings = ProgramSettings("program", max_plain_args=2)
    settings.add_plain_argument(1, "DEST")
    settings.add_plain_argument(0, "SOURCE", "File to copy.")
    assert [argument.name for argument in settings.plain_arguments] == [
        "SOURCE",
        "DEST",
    ]
    with pytest.raises(SettingsError, match="already added"):
        settings.add_plain_argument(0, "OTHER")
    with pytest.raises(SettingsError, match="Invalid plain argument position"):
        settings.add_plain_argument(3, "EXTRA")
    with pytest.raises(SettingsError, match="Invalid plain argument position"):
        settings.add_plain_argument(-1, "EXTRA")
    with pytest.raises(SettingsError):
        settings.add_plain_argument(2, "")


def test_build_returns_immutable_snapshot(settings):
    snapshot = settings.build()
    assert isinstance(snapshot, Settings)
    assert isinstance(snapshot.option_map, MappingProxyType)
    assert snapshot.get_option("dd").name == "d"
    with pytest.raises(TypeError):
        snapshot.option_map["x"] = snapshot.options[0]

    settings.add_option("x")
    assert snapshot.get_option("x") is None
    assert len(snapshot.options) == 7
    assert [(a.name, b.name) for a, b in snapshot.dependencies] == [("c", "d")]


def test_str(settings):
    settings.add_option("m", mandatory=True, parameter=IntParameter("N"))
    assert str(settings) == (
        "ProgramSettings(program='program', options=8, mandatory=1, "
        "dependencies=1, conflicts=0)"
    )
