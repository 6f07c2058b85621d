import pytest

from tuikit.textwidth import graphemes, str_width


@pytest.mark.parametrize("line", ["┌────────┐", "│コンピュ│", "│ーa 上で│", "└────────┘"])
def test_box_lines_are_ten_columns(line):
    assert str_width(line) == 10


def test_double_width_line_fits_five_columns():
    assert str_width("コン ") == 5


def test_double_width_character_takes_two_narrow_columns():
    assert str_width("コ") == str_width("ab")
    assert str_width("コン") == 2 * str_width("コ")


def test_span_widths_add_up():
    assert str_width("My") + str_width(" text") == 7


def test_longest_line_width():
    lines = "The first line\nThe second line".split("\n")
    assert max(str_width(line) for line in lines) == 15


@pytest.mark.parametrize("text", ["hello", "The second line", "a b c"])
def test_ascii_width_is_length(text):
    assert str_width(text) == len(text)


def test_control_character_has_no_width():
    assert str_width("\x01a") == str_width("a")
    assert str_width("a\x01") == str_width("a")


def test_control_character_is_its_own_grapheme():
    assert graphemes("\x01a") == ["\x01", "a"]
    assert graphemes("a\x01") == ["a", "\x01"]


def test_combining_mark_joins_base():
    assert graphemes("e\u0301x") == ["e\u0301", "x"]
    assert str_width("e\u0301") == str_width("e")


@pytest.mark.parametrize("text", ["", "コンピュ", "e\u0301a\u0301", "┌Title─┐", "\x01a\r\nb"])
def test_graphemes_round_trip(text):
    assert "".join(graphemes(text)) == text


@pytest.mark.parametrize("text", ["コンピュ", "│ーa 上で│", "e\u0301a", "\x01ab"])
def test_width_is_sum_of_grapheme_widths(text):
    assert sum(str_width(g) for g in graphemes(text)) == str_width(text)


def test_empty_text():
    assert graphemes("") == []
    assert str_width("") == 0