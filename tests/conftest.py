import pytest

from clparser import IntParameter, ProgramSettings, StringParameter


def make_settings() -> ProgramSettings:
    settings = ProgramSettings("program")
    settings.add_option("a", "aa")
    settings.add_option("b", "bb")
    settings.add_option("c", "cc")
    settings.add_option(
        "d", "dd", parameter=IntParameter("PARAM", mandatory=False, lower=2, upper=4)
    )
    settings.add_option("e", "ee", parameter=IntParameter("PARAM", mandatory=True))
    settings.add_option("f", "ff", parameter=StringParameter("PARAM", mandatory=False))
    settings.add_option(
        "g",
        "gg",
        parameter=StringParameter("PARAM", mandatory=True, domain=["hello", "hi"]),
    )
    settings.add_dependency("c", "d")
    return settings


@pytest.fixture
def settings() -> ProgramSettings:
    """Options a/aa, b/bb, c/cc (requires d), d/dd, e/ee, f/ff and g/gg."""
    return make_settings()
