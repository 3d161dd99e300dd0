from csvfile.core.functions.sanitizer import is_structural_char, sanitize_text


def test_separator_and_control_characters_are_replaced():
    assert sanitize_text("Bad ; , Cell \r\n \n", ";", "#", ":") == "Bad : , Cell :: :"


def test_tab_and_comma_are_kept():
    assert sanitize_text("a\tb,c", ";", "#", ":") == "a\tb,c"


def test_comment_marker_is_replaced():
    assert sanitize_text("#note#", ";", "#", ":") == ":note:"


def test_uses_active_format_characters():
    assert sanitize_text("a;b,c|d", ",", "|", "_") == "a;b_c_d"


def test_characters_outside_single_byte_range_are_replaced():
    assert sanitize_text("café €", ";", "#", ":") == "café :"


def test_none_passes_through():
    assert sanitize_text(None, ";", "#", ":") is None


def test_is_structural_char():
    assert is_structural_char("\x00", ";", "#")
    assert is_structural_char("\x1f", ";", "#")
    assert not is_structural_char("\t", ";", "#")
    assert not is_structural_char(" ", ";", "#")
    assert is_structural_char(";", ";", "#")
