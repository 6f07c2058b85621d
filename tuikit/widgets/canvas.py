"""A widget for drawing shapes and labels at sub-cell resolution."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Callable

from tuikit.buffer import Buffer
from tuikit.layout import Rect
from tuikit.style import Color, Style
from tuikit.symbols import BRAILLE_BLANK, BRAILLE_DOTS, Marker
from tuikit.text import Spans
from tuikit.widgets.block import Block

_U16_MAX = 0xFFFF
_BLANK_BRAILLE_CHAR = chr(BRAILLE_BLANK)


class Shape(abc.ABC):
    """Something that can be drawn on a canvas."""

    @abc.abstractmethod
    def draw(self, painter: Painter) -> None:
        """Paint the shape's points through ``painter``."""


@dataclass
class Label:
    """Text printed on the canvas at a position in canvas coordinates."""

    x: float
    y: float
    spans: Spans


@dataclass
class _Layer:
    string: str
    colors: list[Color]


class _BrailleGrid:
    """A grid where each cell holds a 2x4 braille dot pattern."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [BRAILLE_BLANK] * (width * height)
        self.colors = [Color.RESET] * (width * height)

    def resolution(self) -> tuple[float, float]:
        return self.width * 2.0 - 1.0, self.height * 4.0 - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(chr(c) for c in self.cells), list(self.colors))

    def reset(self) -> None:
        self.cells = [BRAILLE_BLANK] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: Color) -> None:
        index = y // 4 * self.width + x // 2
        if index < len(self.cells):
            self.cells[index] |= BRAILLE_DOTS[y % 4][x % 2]
        if index < len(self.colors):
            self.colors[index] = color


class _CharGrid:
    """A grid where each painted cell shows a single marker character."""

    def __init__(self, width: int, height: int, cell_char: str) -> None:
        self.width = width
        self.height = height
        self.cell_char = cell_char
        self.cells = [" "] * (width * height)
        self.colors = [Color.RESET] * (width * height)

    def resolution(self) -> tuple[float, float]:
        return self.width - 1.0, self.height - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(self.cells), list(self.colors))

    def reset(self) -> None:
        self.cells = [" "] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: Color) -> None:
        index = y * self.width + x
        if index < len(self.cells):
            self.cells[index] = self.cell_char
        if index < len(self.colors):
            self.colors[index] = color


def _make_grid(width: int, height: int, marker: Marker) -> _BrailleGrid | _CharGrid:
    if marker is Marker.DOT:
        return _CharGrid(width, height, "•")
    if marker is Marker.BLOCK:
        return _CharGrid(width, height, "▄")
    return _BrailleGrid(width, height)


class Painter:
    """Maps canvas coordinates to grid points and paints them."""

    def __init__(self, context: Context) -> None:
        self.context = context
        self.resolution = context.grid.resolution()

    def get_point(self, x: float, y: float) -> tuple[int, int] | None:
        """Return the grid point for (x, y), or None if it lies outside the bounds."""
        left, right = self.context.x_bounds
        bottom, top = self.context.y_bounds
        if x < left or x > right or y < bottom or y > top:
            return None
        width = abs(right - left)
        height = abs(top - bottom)
        if width == 0.0 or height == 0.0:
            return None
        px = int((x - left) * self.resolution[0] / width)
        py = int((top - y) * self.resolution[1] / height)
        return max(px, 0), max(py, 0)

    def paint(self, x: int, y: int, color: Color) -> None:
        """Paint one grid point with the given colour."""
        self.context.grid.paint(x, y, color)


class Context:
    """The drawing state of a canvas: the current grid, saved layers and labels."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: tuple[float, float],
        y_bounds: tuple[float, float],
        marker: Marker = Marker.BRAILLE,
    ) -> None:
        self.x_bounds = (float(x_bounds[0]), float(x_bounds[1]))
        self.y_bounds = (float(y_bounds[0]), float(y_bounds[1]))
        self.grid = _make_grid(width, height, marker)
        self.dirty = False
        self.layers: list[_Layer] = []
        self.labels: list[Label] = []

    def draw(self, shape: Shape) -> None:
        """Draw a shape on the current layer."""
        self.dirty = True
        shape.draw(Painter(self))

    def layer(self) -> None:
        """Save the current layer and start a new one above it."""
        self.layers.append(self.grid.save())
        self.grid.reset()
        self.dirty = False

    def print(self, x: float, y: float, spans) -> None:
        """Queue text to be printed at (x, y) in canvas coordinates."""
        self.labels.append(Label(x, y, Spans.of(spans)))

    def finish(self) -> None:
        """Save the current layer if anything was drawn on it."""
        if self.dirty:
            self.layer()


def _scale(offset: float, resolution: float, extent: float) -> int:
    if extent == 0.0:
        return 0
    value = offset * resolution / extent
    return min(max(int(value), 0), _U16_MAX)


@dataclass
class Canvas:
    """A widget that draws shapes with braille, dot or block markers.

    ``paint`` is called with a fresh Context each time the canvas is rendered.
    """

    block: Block | None = None
    x_bounds: tuple[float, float] = (0.0, 0.0)
    y_bounds: tuple[float, float] = (0.0, 0.0)
    paint: Callable[[Context], None] | None = None
    background_color: Color = Color.RESET
    marker: Marker = Marker.BRAILLE
    _unused: None = field(default=None, init=False, repr=False, compare=False)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the canvas into ``buf`` within ``area``."""
        if self.block is not None:
            canvas_area = self.block.inner(area)
            self.block.render(area, buf)
        else:
            canvas_area = area

        buf.set_style(canvas_area, Style().with_bg(self.background_color))

        if self.paint is None:
            return

        width = canvas_area.width
        ctx = Context(
            canvas_area.width, canvas_area.height, self.x_bounds, self.y_bounds, self.marker
        )
        self.paint(ctx)
        ctx.finish()

        for layer in ctx.layers:
            for i, (ch, color) in enumerate(zip(layer.string, layer.colors)):
                if ch in (" ", _BLANK_BRAILLE_CHAR):
                    continue
                cell = buf.get(i % width + canvas_area.left(), i // width + canvas_area.top())
                cell.symbol = ch
                cell.fg = color

        left, right = self.x_bounds
        bottom, top = self.y_bounds
        bounds_width = abs(right - left)
        bounds_height = abs(top - bottom)
        res_x = float(canvas_area.width - 1)
        res_y = float(canvas_area.height - 1)
        for label in ctx.labels:
            if not (left <= label.x <= right and bottom <= label.y <= top):
                continue
            x = _scale(label.x - left, res_x, bounds_width) + canvas_area.left()
            y = _scale(top - label.y, res_y, bounds_height) + canvas_area.top()
            buf.set_spans(x, y, label.spans, max(canvas_area.right() - x, 0))