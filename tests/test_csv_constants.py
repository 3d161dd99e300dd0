import pytest

from csvfile.core.processor.csv_helper.csv_constants import CSVError, CSVFormatConfig


def test_defaults():
    config = CSVFormatConfig()

    assert (config.separator, config.comment_marker, config.substitute, config.end_of_line) == (";", "#", ":", "\r\n")


@pytest.mark.parametrize("field", ["separator", "comment_marker", "substitute"])
@pytest.mark.parametrize("value", ["", ";;", "\n", "\r", "€", 1])
def test_invalid_format_character_in_constructor(field, value):
    with pytest.raises(ValueError):
        CSVFormatConfig(**{field: value})


def test_end_of_line_is_truncated_in_constructor():
    assert CSVFormatConfig(end_of_line="\r\n\r\n").end_of_line == "\r\n\r"


@pytest.mark.parametrize("value", ["", " \u2028", None])
def test_invalid_end_of_line_in_constructor(value):
    with pytest.raises(ValueError):
        CSVFormatConfig(end_of_line=value)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"substitute": ";"},
        {"substitute": "#"},
        {"separator": "#"},
        {"separator": ",", "comment_marker": ","},
    ],
)
def test_colliding_format_characters_are_rejected(kwargs):
    with pytest.raises(ValueError):
        CSVFormatConfig(**kwargs)


def test_distinct_custom_characters_are_accepted():
    config = CSVFormatConfig(separator="#", comment_marker=";", substitute="_")

    assert (config.separator, config.comment_marker, config.substitute) == ("#", ";", "_")


def test_assignment_is_validated():
    config = CSVFormatConfig()

    with pytest.raises(ValueError):
        config.separator = ""
    with pytest.raises(ValueError):
        config.substitute = ";"
    with pytest.raises(ValueError):
        config.comment_marker = ";"
    assert (config.separator, config.comment_marker, config.substitute) == (";", "#", ":")

    config.end_of_line = "\n\n\n\n"
    assert config.end_of_line == "\n\n\n"


def test_error_truthiness():
    assert not CSVError.NO_ERROR
    assert CSVError.MEMORY_ERROR
