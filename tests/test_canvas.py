import pytest

from tuikit.buffer import Buffer
from tuikit.layout import Rect
from tuikit.style import Color
from tuikit.symbols import BRAILLE_BLANK, BRAILLE_DOTS, Marker
from tuikit.text import Spans
from tuikit.widgets.block import Block, Borders
from tuikit.widgets.canvas import Canvas, Context, Painter, Shape


class _Dots(Shape):
    def __init__(self, points, color=Color.RED):
        self.points = points
        self.color = color

    def draw(self, painter):
        for x, y in self.points:
            point = painter.get_point(x, y)
            if point is not None:
                painter.paint(point[0], point[1], self.color)


def test_get_point_worked_example():
    ctx = Context(2, 2, (1.0, 2.0), (0.0, 2.0), Marker.BRAILLE)
    painter = Painter(ctx)
    assert painter.get_point(1.0, 0.0) == (0, 7)
    assert painter.get_point(1.5, 1.0) == (1, 3)
    assert painter.get_point(0.0, 0.0) is None
    assert painter.get_point(2.0, 2.0) == (3, 0)
    assert painter.get_point(1.0, 2.0) == (0, 0)


def test_get_point_with_empty_bounds_is_none():
    ctx = Context(2, 2, (1.0, 1.0), (0.0, 2.0), Marker.DOT)
    assert Painter(ctx).get_point(1.0, 1.0) is None


def test_braille_paint_sets_dot():
    ctx = Context(1, 1, (0.0, 2.0), (0.0, 2.0), Marker.BRAILLE)
    Painter(ctx).paint(1, 3, Color.RED)
    ctx.dirty = True
    ctx.finish()
    assert ctx.layers[0].string == chr(BRAILLE_BLANK | BRAILLE_DOTS[3][1])
    assert ctx.layers[0].colors == [Color.RED]


def test_braille_dots_combine_in_one_cell():
    ctx = Context(1, 1, (0.0, 1.0), (0.0, 1.0), Marker.BRAILLE)
    painter = Painter(ctx)
    painter.paint(0, 0, Color.BLUE)
    painter.paint(1, 0, Color.BLUE)
    ctx.layer()
    expected = BRAILLE_BLANK | BRAILLE_DOTS[0][0] | BRAILLE_DOTS[0][1]
    assert ctx.layers[0].string == chr(expected)


def test_paint_outside_grid_is_ignored():
    ctx = Context(2, 2, (0.0, 1.0), (0.0, 1.0), Marker.DOT)
    Painter(ctx).paint(0, 50, Color.RED)
    ctx.layer()
    assert ctx.layers[0].string == " " * 4


def test_layers_and_finish():
    ctx = Context(3, 3, (0.0, 2.0), (0.0, 2.0), Marker.DOT)
    ctx.draw(_Dots([(0.0, 0.0)]))
    ctx.layer()
    assert len(ctx.layers) == 1
    ctx.finish()
    assert len(ctx.layers) == 1
    ctx.draw(_Dots([(2.0, 2.0)]))
    ctx.finish()
    assert len(ctx.layers) == 2
    assert ctx.layers[1].string.count("•") == 1


def test_print_queues_label_as_spans():
    ctx = Context(3, 3, (0.0, 1.0), (0.0, 1.0))
    ctx.print(0.5, 0.5, "hi")
    assert len(ctx.labels) == 1
    assert str(ctx.labels[0].spans) == "hi"
    assert isinstance(ctx.labels[0].spans, Spans)


def test_render_without_painter_sets_background():
    area = Rect(0, 0, 3, 2)
    buf = Buffer.empty(area)
    Canvas(background_color=Color.BLUE).render(area, buf)
    assert all(cell.bg == Color.BLUE for cell in buf.content)
    assert all(cell.symbol == " " for cell in buf.content)


def test_render_draws_points_with_colour():
    area = Rect(0, 0, 4, 4)
    buf = Buffer.empty(area)
    canvas = Canvas(
        x_bounds=(0.0, 3.0),
        y_bounds=(0.0, 3.0),
        marker=Marker.DOT,
        paint=lambda ctx: ctx.draw(_Dots([(0.0, 3.0), (3.0, 0.0)], Color.GREEN)),
    )
    canvas.render(area, buf)
    painted = [cell for cell in buf.content if cell.symbol == "•"]
    assert len(painted) == 2
    assert all(cell.fg == Color.GREEN for cell in painted)
    assert buf.get(0, 0).symbol == "•"
    assert buf.get(3, 3).symbol == "•"


def test_render_inside_block():
    area = Rect(0, 0, 5, 5)
    buf = Buffer.empty(area)
    canvas = Canvas(
        block=Block(borders=Borders.ALL),
        x_bounds=(0.0, 2.0),
        y_bounds=(0.0, 2.0),
        marker=Marker.BLOCK,
        paint=lambda ctx: ctx.draw(_Dots([(0.0, 2.0)])),
    )
    canvas.render(area, buf)
    assert buf.get(0, 0).symbol == "┌"
    assert buf.get(1, 1).symbol == "▄"


def test_render_labels_inside_and_outside_bounds():
    area = Rect(0, 0, 4, 2)
    buf = Buffer.empty(area)

    def paint(ctx):
        ctx.print(0.0, 1.0, "hi")
        ctx.print(5.0, 5.0, "no")

    Canvas(x_bounds=(0.0, 1.0), y_bounds=(0.0, 1.0), paint=paint).render(area, buf)
    assert buf == Buffer.with_lines(["hi  ", "    "]) or [
        c.symbol for c in buf.content
    ] == list("hi      ")
    assert "n" not in [c.symbol for c in buf.content]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()