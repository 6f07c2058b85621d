"""A bordered box with an optional title, the base of the other widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tuikit.buffer import Buffer
from tuikit.layout import Alignment, Rect
from tuikit.style import Style
from tuikit.symbols import LINE_DOUBLE, LINE_NORMAL, LINE_ROUNDED, LINE_THICK, LineSet
from tuikit.text import Spans


class Borders(enum.Flag):
    """Which sides of a block have a border."""

    NONE = 0
    TOP = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100
    LEFT = 0b1000
    ALL = TOP | RIGHT | BOTTOM | LEFT


class BorderType(enum.Enum):
    """The line style used to draw a border."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"
    THICK = "thick"

    def line_symbols(self) -> LineSet:
        """Return the symbols that draw this kind of border."""
        return _LINE_SETS[self]


_LINE_SETS = {
    BorderType.PLAIN: LINE_NORMAL,
    BorderType.ROUNDED: LINE_ROUNDED,
    BorderType.DOUBLE: LINE_DOUBLE,
    BorderType.THICK: LINE_THICK,
}


def _has_any(flags: Borders, side: Borders) -> bool:
    return bool(flags & side)


def _has_all(flags: Borders, sides: Borders) -> bool:
    return (flags & sides) == sides


def _put(buf: Buffer, x: int, y: int, symbol: str, style: Style) -> None:
    cell = buf.get(x, y)
    cell.symbol = symbol
    cell.apply_style(style)


@dataclass
class Block:
    """A box that may draw borders around an area and a title on its top line."""

    title: Spans | None = None
    title_alignment: Alignment = Alignment.LEFT
    borders: Borders = Borders.NONE
    border_style: Style = field(default_factory=Style)
    border_type: BorderType = BorderType.PLAIN
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        if self.title is not None and not isinstance(self.title, Spans):
            self.title = Spans.of(self.title)

    def inner(self, area: Rect) -> Rect:
        """Return the part of ``area`` left inside the borders and title."""
        right = area.right()
        bottom = area.bottom()
        x, y, width, height = area.x, area.y, area.width, area.height
        if _has_any(self.borders, Borders.LEFT):
            x = min(x + 1, right)
            width = max(width - 1, 0)
        if _has_any(self.borders, Borders.TOP) or self.title is not None:
            y = min(y + 1, bottom)
            height = max(height - 1, 0)
        if _has_any(self.borders, Borders.RIGHT):
            width = max(width - 1, 0)
        if _has_any(self.borders, Borders.BOTTOM):
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the block's style, borders and title into ``buf``."""
        if area.area() == 0:
            return
        buf.set_style(area, self.style)
        symbols = self.border_type.line_symbols()
        borders = self.borders
        left, right, top, bottom = area.left(), area.right(), area.top(), area.bottom()

        if _has_any(borders, Borders.LEFT):
            for y in range(top, bottom):
                _put(buf, left, y, symbols.vertical, self.border_style)
        if _has_any(borders, Borders.TOP):
            for x in range(left, right):
                _put(buf, x, top, symbols.horizontal, self.border_style)
        if _has_any(borders, Borders.RIGHT):
            for y in range(top, bottom):
                _put(buf, right - 1, y, symbols.vertical, self.border_style)
        if _has_any(borders, Borders.BOTTOM):
            for x in range(left, right):
                _put(buf, x, bottom - 1, symbols.horizontal, self.border_style)

        corners = (
            (Borders.RIGHT | Borders.BOTTOM, right - 1, bottom - 1, symbols.bottom_right),
            (Borders.RIGHT | Borders.TOP, right - 1, top, symbols.top_right),
            (Borders.LEFT | Borders.BOTTOM, left, bottom - 1, symbols.bottom_left),
            (Borders.LEFT | Borders.TOP, left, top, symbols.top_left),
        )
        for sides, x, y, symbol in corners:
            if _has_all(borders, sides):
                _put(buf, x, y, symbol, self.border_style)

        if self.title is not None:
            left_dx = 1 if _has_any(borders, Borders.LEFT) else 0
            right_dx = 1 if _has_any(borders, Borders.RIGHT) else 0
            title_area_width = max(area.width - left_dx - right_dx, 0)
            title_width = self.title.width()
            if self.title_alignment is Alignment.LEFT:
                title_dx = left_dx
            elif self.title_alignment is Alignment.CENTER:
                title_dx = max(area.width - title_width, 0) // 2
            else:
                title_dx = max(max(area.width - title_width, 0) - right_dx, 0)
            buf.set_spans(left + title_dx, top, self.title, title_area_width)