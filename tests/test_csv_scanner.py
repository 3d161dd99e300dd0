import pytest

from csvfile.core.processor.csv_helper import (
    CSVAssessment,
    CSVFormatConfig,
    CSVScanner,
    CSVTable,
)


@pytest.fixture
def scanner():
    return CSVScanner()


@pytest.fixture
def config():
    return CSVFormatConfig()


def _parse(scanner, config, data):
    assessment = scanner.measure(data, config)
    table = CSVTable(assessment.rows, assessment.columns, assessment.comments)
    scanner.extract(data, config, table)
    return assessment, table


def test_measure_counts_rows_columns_comments(scanner, config):
    assessment = scanner.measure(b"#hdr\r\nx;\r\n;y\r\n", config)

    assert assessment == CSVAssessment(rows=2, columns=2, comments=1, max_line_length=4)


def test_measure_empty_buffer(scanner, config):
    assert scanner.measure(b"", config) == CSVAssessment()


def test_empty_cells_are_kept_as_columns(scanner, config):
    assessment, table = _parse(scanner, config, b"a;;b\n")

    assert (assessment.rows, assessment.columns) == (1, 3)
    assert table.to_rows() == [["a", None, "b"]]


def test_trailing_separator_adds_unset_column(scanner, config):
    _, table = _parse(scanner, config, b"a;b;\n")

    assert table.to_rows() == [["a", "b", None]]


def test_bare_comment_marker_counts_as_unset_comment(scanner, config):
    assessment, table = _parse(scanner, config, b"#\n#second\n")

    assert (assessment.rows, assessment.comments) == (0, 2)
    assert table.get_comments() == [None, "second"]


def test_comment_text_keeps_separators_and_markers(scanner, config):
    assessment, table = _parse(scanner, config, b"a;b#c;d#e\n")

    assert (assessment.rows, assessment.columns, assessment.comments) == (1, 2, 1)
    assert table.to_rows() == [["a", "b"]]
    assert table.get_comment(0) == "c;d#e"


def test_empty_and_comment_lines_are_not_rows(scanner, config):
    assessment, table = _parse(scanner, config, b"\n\n#c\nx\n\n")

    assert (assessment.rows, assessment.columns, assessment.comments) == (1, 1, 1)
    assert table.to_rows() == [["x"]]


def test_crlf_and_lone_terminators(scanner, config):
    assessment, table = _parse(scanner, config, b"a\rb\nc\r\n")

    assert (assessment.rows, assessment.columns) == (3, 1)
    assert table.to_rows() == [["a"], ["b"], ["c"]]


def test_unterminated_last_line_is_kept(scanner, config):
    assessment, table = _parse(scanner, config, b"a;b\r\nc;d")

    assert assessment == CSVAssessment(rows=2, columns=2, comments=0, max_line_length=3)
    assert table.to_rows() == [["a", "b"], ["c", "d"]]


def test_unterminated_last_comment_is_kept(scanner, config):
    _, table = _parse(scanner, config, b"x\n#tail")

    assert table.get_comments() == ["tail"]


def test_ragged_rows_use_widest_line(scanner, config):
    assessment, table = _parse(scanner, config, b"a\nb;c;d\ne;f\n")

    assert assessment.columns == 3
    assert table.to_rows() == [["a", None, None], ["b", "c", "d"], ["e", "f", None]]


def test_max_line_length_excludes_terminators(scanner, config):
    assessment = scanner.measure(b"ab\r\nabcdef\r\n#x\r\n", config)

    assert assessment.max_line_length == 6


def test_custom_separator_and_marker(scanner):
    config = CSVFormatConfig(separator=",", comment_marker="!")
    assessment, table = _parse(scanner, config, b"!note\na,b;c#d\n")

    assert (assessment.rows, assessment.columns, assessment.comments) == (1, 2, 1)
    assert table.to_rows() == [["a", "b;c#d"]]
    assert table.get_comment(0) == "note"


def test_whitespace_is_content(scanner, config):
    _, table = _parse(scanner, config, b" \t\n")

    assert table.to_rows() == [[" \t"]]


def test_high_bytes_are_decoded_one_to_one(scanner, config):
    _, table = _parse(scanner, config, b"caf\xe9;\xff\n")

    assert table.to_rows() == [["café", "ÿ"]]
