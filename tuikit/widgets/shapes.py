"""Basic shapes for the canvas: lines, point clouds and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tuikit.style import Color
from tuikit.widgets.canvas import Painter, Shape


def _draw_line_low(painter: Painter, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
    dx = x2 - x1
    dy = abs(y2 - y1)
    d = 2 * dy - dx
    y = y1
    for x in range(x1, x2 + 1):
        painter.paint(x, y, color)
        if d > 0:
            y = max(y - 1, 0) if y1 > y2 else y + 1
            d -= 2 * dx
        d += 2 * dy


def _draw_line_high(painter: Painter, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
    dx = abs(x2 - x1)
    dy = y2 - y1
    d = 2 * dx - dy
    x = x1
    for y in range(y1, y2 + 1):
        painter.paint(x, y, color)
        if d > 0:
            x = max(x - 1, 0) if x1 > x2 else x + 1
            d -= 2 * dy
        d += 2 * dx


@dataclass(frozen=True)
class Line(Shape):
    """A straight line from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = Color.RESET

    def draw(self, painter: Painter) -> None:
        start = painter.get_point(self.x1, self.y1)
        end = painter.get_point(self.x2, self.y2)
        if start is None or end is None:
            return
        (x1, y1), (x2, y2) = start, end
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        if dx == 0:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                painter.paint(x1, y, self.color)
        elif dy == 0:
            for x in range(min(x1, x2), max(x1, x2) + 1):
                painter.paint(x, y1, self.color)
        elif dy < dx:
            if x1 > x2:
                _draw_line_low(painter, x2, y2, x1, y1, self.color)
            else:
                _draw_line_low(painter, x1, y1, x2, y2, self.color)
        elif y1 > y2:
            _draw_line_high(painter, x2, y2, x1, y1, self.color)
        else:
            _draw_line_high(painter, x1, y1, x2, y2, self.color)


@dataclass(frozen=True)
class Points(Shape):
    """A group of points of one colour."""

    coords: Sequence[tuple[float, float]] = ()
    color: Color = Color.RESET

    def draw(self, painter: Painter) -> None:
        for x, y in self.coords:
            point = painter.get_point(x, y)
            if point is not None:
                painter.paint(point[0], point[1], self.color)


@dataclass(frozen=True)
class Rectangle(Shape):
    """The outline of a rectangle with its lower-left corner at (x, y)."""

    x: float
    y: float
    width: float
    height: float
    color: Color = Color.RESET

    def draw(self, painter: Painter) -> None:
        left, bottom = self.x, self.y
        right, top = self.x + self.width, self.y + self.height
        edges = (
            Line(left, bottom, left, top, self.color),
            Line(left, top, right, top, self.color),
            Line(right, bottom, right, top, self.color),
            Line(left, bottom, right, bottom, self.color),
        )
        for edge in edges:
            edge.draw(painter)