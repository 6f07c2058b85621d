import pytest

from tuikit.buffer import Buffer, Cell
from tuikit.layout import Rect
from tuikit.style import NO_MODIFIERS, Color, Modifier, Style
from tuikit.text import Span, Spans


def cell(symbol):
    return Cell(symbol=symbol)


def test_doc_example():
    buf = Buffer.empty(Rect(0, 0, 10, 5))
    buf.get(0, 2).symbol = "x"
    assert buf.get(0, 2).symbol == "x"
    buf.set_string(3, 0, "string", Style().with_fg(Color.RED).with_bg(Color.WHITE))
    assert buf.get(5, 0) == Cell("r", Color.RED, Color.WHITE, NO_MODIFIERS)
    buf.get(5, 0).symbol = "x"
    assert buf.get(5, 0).symbol == "x"


def test_translates_to_and_from_coordinates():
    buf = Buffer.empty(Rect(200, 100, 50, 80))
    assert buf.pos_of(0) == (200, 100)
    assert buf.index_of(200, 100) == 0
    assert buf.pos_of(len(buf.content) - 1) == (249, 179)
    assert buf.index_of(249, 179) == len(buf.content) - 1


def test_pos_of_example():
    buf = Buffer.empty(Rect(200, 100, 10, 10))
    assert buf.pos_of(14) == (204, 101)


def test_pos_of_out_of_bounds():
    buf = Buffer.empty(Rect(0, 0, 10, 10))
    with pytest.raises(IndexError, match="outside the buffer"):
        buf.pos_of(100)


def test_index_of_out_of_bounds():
    buf = Buffer.empty(Rect(0, 0, 10, 10))
    with pytest.raises(IndexError, match="outside the buffer"):
        buf.index_of(10, 0)


def test_index_of_before_offset():
    buf = Buffer.empty(Rect(200, 100, 10, 10))
    with pytest.raises(IndexError):
        buf.index_of(0, 0)


def test_set_string():
    buffer = Buffer.empty(Rect(0, 0, 5, 1))
    buffer.set_stringn(0, 0, "aaa", 0, Style())
    assert buffer == Buffer.with_lines(["     "])
    buffer.set_string(0, 0, "aaa", Style())
    assert buffer == Buffer.with_lines(["aaa  "])
    buffer.set_stringn(0, 0, "bbbbbbbbbbbbbb", 4, Style())
    assert buffer == Buffer.with_lines(["bbbb "])
    buffer.set_string(0, 0, "12345", Style())
    assert buffer == Buffer.with_lines(["12345"])
    buffer.set_string(0, 0, "123456", Style())
    assert buffer == Buffer.with_lines(["12345"])


def test_set_stringn_returns_end_position():
    buffer = Buffer.empty(Rect(0, 0, 10, 3))
    assert buffer.set_stringn(2, 1, "abcdef", 3, Style()) == (5, 1)


def test_set_string_zero_width():
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    buffer.set_stringn(0, 0, "\x01a", 1, Style())
    assert buffer == Buffer.with_lines(["a"])
    buffer.set_stringn(0, 0, "a\x01", 1, Style())
    assert buffer == Buffer.with_lines(["a"])


def test_set_string_double_width():
    buffer = Buffer.empty(Rect(0, 0, 5, 1))
    buffer.set_string(0, 0, "コン", Style())
    assert buffer == Buffer.with_lines(["コン "])
    buffer.set_string(0, 0, "コンピ", Style())
    assert buffer == Buffer.with_lines(["コン "])


def test_with_lines():
    buffer = Buffer.with_lines(["┌────────┐", "│コンピュ│", "│ーa 上で│", "└────────┘"])
    assert buffer.area == Rect(0, 0, 10, 4)


def test_diffing_empty_empty():
    area = Rect(0, 0, 40, 40)
    assert Buffer.empty(area).diff(Buffer.empty(area)) == []


def test_diffing_empty_filled():
    area = Rect(0, 0, 40, 40)
    diff = Buffer.empty(area).diff(Buffer.filled(area, cell("a")))
    assert len(diff) == 40 * 40


def test_diffing_filled_filled():
    area = Rect(0, 0, 40, 40)
    prev = Buffer.filled(area, cell("a"))
    nxt = Buffer.filled(area, cell("a"))
    assert prev.diff(nxt) == []


def test_diffing_single_width():
    prev = Buffer.with_lines(
        ["          ", "┌Title─┐  ", "│      │  ", "│      │  ", "└──────┘  "]
    )
    nxt = Buffer.with_lines(
        ["          ", "┌TITLE─┐  ", "│      │  ", "│      │  ", "└──────┘  "]
    )
    assert prev.diff(nxt) == [
        (2, 1, cell("I")),
        (3, 1, cell("T")),
        (4, 1, cell("L")),
        (5, 1, cell("E")),
    ]


def test_diffing_multi_width():
    prev = Buffer.with_lines(["┌Title─┐  ", "└──────┘  "])
    nxt = Buffer.with_lines(["┌称号──┐  ", "└──────┘  "])
    assert prev.diff(nxt) == [
        (1, 0, cell("称")),
        (3, 0, cell("号")),
        (5, 0, cell("─")),
    ]


def test_diffing_multi_width_offset():
    prev = Buffer.with_lines(["┌称号──┐"])
    nxt = Buffer.with_lines(["┌─称号─┐"])
    assert prev.diff(nxt) == [
        (1, 0, cell("─")),
        (2, 0, cell("称")),
        (4, 0, cell("号")),
    ]


def test_merge():
    one = Buffer.filled(Rect(0, 0, 2, 2), cell("1"))
    two = Buffer.filled(Rect(0, 2, 2, 2), cell("2"))
    one.merge(two)
    assert one == Buffer.with_lines(["11", "11", "22", "22"])


def test_merge2():
    one = Buffer.filled(Rect(2, 2, 2, 2), cell("1"))
    two = Buffer.filled(Rect(0, 0, 2, 2), cell("2"))
    one.merge(two)
    assert one == Buffer.with_lines(["22  ", "22  ", "  11", "  11"])


def test_merge3():
    one = Buffer.filled(Rect(3, 3, 2, 2), cell("1"))
    two = Buffer.filled(Rect(1, 1, 3, 4), cell("2"))
    one.merge(two)
    merged = Buffer.with_lines(["222 ", "222 ", "2221", "2221"])
    merged.area = Rect(1, 1, 4, 4)
    assert one == merged


def test_merge_does_not_share_cells_with_other():
    one = Buffer.filled(Rect(0, 0, 1, 1), cell("1"))
    two = Buffer.filled(Rect(1, 0, 1, 1), cell("2"))
    one.merge(two)
    two.get(1, 0).symbol = "z"
    assert one.get(1, 0).symbol == "2"


def test_styles_accumulate_on_cell():
    styles = [
        Style().with_fg(Color.BLUE).with_added(Modifier.BOLD | Modifier.ITALIC),
        Style().with_bg(Color.RED),
        Style().with_fg(Color.YELLOW).with_removed(Modifier.ITALIC),
    ]
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    for style in styles:
        buffer.get(0, 0).apply_style(style)
    assert buffer.get(0, 0).style() == Style(
        fg=Color.YELLOW, bg=Color.RED, add_modifier=Modifier.BOLD, sub_modifier=NO_MODIFIERS
    )


def test_reset_style_clears_cell():
    styles = [
        Style().with_fg(Color.BLUE).with_added(Modifier.BOLD | Modifier.ITALIC),
        Style.reset().with_fg(Color.YELLOW),
    ]
    buffer = Buffer.empty(Rect(0, 0, 1, 1))
    for style in styles:
        buffer.get(0, 0).apply_style(style)
    assert buffer.get(0, 0).style() == Style(
        fg=Color.YELLOW, bg=Color.RESET, add_modifier=NO_MODIFIERS, sub_modifier=NO_MODIFIERS
    )


def test_cell_reset():
    c = Cell("x", Color.RED, Color.BLUE, Modifier.BOLD)
    c.reset()
    assert c == Cell()


def test_set_spans_respects_width():
    buffer = Buffer.empty(Rect(0, 0, 10, 1))
    spans = Spans.of([Span.raw("ab"), Span.styled("cd", Style().with_fg(Color.RED))])
    assert buffer.set_spans(0, 0, spans, 3) == (3, 0)
    assert [c.symbol for c in buffer.content[:4]] == ["a", "b", "c", " "]
    assert buffer.get(2, 0).fg == Color.RED
    assert buffer.get(1, 0).fg == Color.RESET


def test_set_span():
    buffer = Buffer.empty(Rect(0, 0, 5, 1))
    end = buffer.set_span(1, 0, Span.styled("hello", Style().with_bg(Color.GREEN)), 2)
    assert end == (3, 0)
    assert buffer == Buffer(
        Rect(0, 0, 5, 1),
        [
            Cell(),
            Cell("h", bg=Color.GREEN),
            Cell("e", bg=Color.GREEN),
            Cell(),
            Cell(),
        ],
    )


def test_set_style_area():
    buffer = Buffer.empty(Rect(0, 0, 3, 3))
    buffer.set_style(Rect(1, 1, 2, 1), Style().with_fg(Color.CYAN))
    coloured = [buffer.pos_of(i) for i, c in enumerate(buffer.content) if c.fg == Color.CYAN]
    assert coloured == [(1, 1), (2, 1)]


def test_resize_grows_and_shrinks():
    buffer = Buffer.with_lines(["ab"])
    buffer.resize(Rect(0, 0, 2, 2))
    assert len(buffer.content) == 4
    assert buffer.get(0, 1) == Cell()
    buffer.resize(Rect(0, 0, 1, 1))
    assert buffer.content == [cell("a")]
    assert buffer.area == Rect(0, 0, 1, 1)


def test_buffer_reset():
    buffer = Buffer.with_lines(["xyz"])
    buffer.reset()
    assert buffer == Buffer.with_lines(["   "])