import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from clparser import IntParameter, StringParameter
from clparser.validators import command_line_validator, parameter_validator


def test_parameter_validator_accepts_valid_values():
    validator = parameter_validator(IntParameter("NUM", lower=2, upper=4))
    for valid in ["2", "3", "4"]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["1", "5", "3.5", "three", ""])
def test_parameter_validator_rejects_invalid(invalid):
    validator = parameter_validator(IntParameter("NUM", lower=2, upper=4))
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document(invalid))
    assert exc_info.value.message == "Invalid input. Expected NUM."


def test_parameter_validator_optional_accepts_empty():
    validator = parameter_validator(StringParameter("WORD", mandatory=False))
    validator.validate(Document(""))


def test_parameter_validator_message():
    validator = parameter_validator(StringParameter("WORD", domain=["hello", "hi"]))
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("ciao"))
    assert exc_info.value.message == "Invalid input. Expected {hello,hi}."

    validator = parameter_validator(IntParameter("NUM"), error_message="Numbers only.")
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("x"))
    assert exc_info.value.message == "Numbers only."


def test_command_line_validator(settings):
    validator = command_line_validator(settings)
    validator.validate(Document("-a -e 3 -- x"))
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("-a -x"))
    assert exc_info.value.message == "Unknown option 'x'"
    assert exc_info.value.cursor_position == len("-a -x")
