"""A grid of styled cells describing what the terminal should show."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Iterable

from tuikit.layout import Rect
from tuikit.style import NO_MODIFIERS, Color, Modifier, Style
from tuikit.text import Span, Spans
from tuikit.textwidth import graphemes, str_width


def _without(flags: Modifier, removed: Modifier) -> Modifier:
    return Modifier(flags.value & ~removed.value)


@dataclass
class Cell:
    """One terminal cell: a grapheme with its colours and modifiers."""

    symbol: str = " "
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    modifier: Modifier = NO_MODIFIERS

    def apply_style(self, style: Style) -> Cell:
        """Apply an incremental style to this cell and return the cell."""
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        self.modifier = _without(self.modifier | style.add_modifier, style.sub_modifier)
        return self

    def style(self) -> Style:
        """Return the style that reproduces this cell's look."""
        return Style(fg=self.fg, bg=self.bg, add_modifier=self.modifier)

    def reset(self) -> None:
        """Return the cell to a blank space with default colours."""
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = NO_MODIFIERS


@dataclass
class Buffer:
    """The desired content of an area of the terminal, one cell per position."""

    area: Rect = field(default_factory=Rect)
    content: list[Cell] = field(default_factory=list)

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """Return a buffer of blank cells."""
        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        """Return a buffer with every cell a copy of ``cell``."""
        return cls(area, [replace(cell) for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[str]) -> Buffer:
        """Return a buffer at the origin holding the given lines."""
        lines = list(lines)
        width = max((str_width(line) for line in lines), default=0)
        buffer = cls.empty(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buffer.set_string(0, y, line, Style())
        return buffer

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at global coordinates (x, y)."""
        return self.content[self.index_of(x, y)]

    def index_of(self, x: int, y: int) -> int:
        """Return the content index of global coordinates (x, y)."""
        area = self.area
        if not (area.left() <= x < area.right() and area.top() <= y < area.bottom()):
            raise IndexError(
                f"Trying to access position outside the buffer: x={x}, y={y}, area={area!r}"
            )
        return (y - area.y) * area.width + (x - area.x)

    def pos_of(self, i: int) -> tuple[int, int]:
        """Return the global coordinates of the cell at content index ``i``."""
        if not 0 <= i < len(self.content):
            raise IndexError(
                f"Trying to get the coords of a cell outside the buffer: "
                f"i={i} len={len(self.content)}"
            )
        row, col = divmod(i, self.area.width)
        return self.area.x + col, self.area.y + row

    def set_string(self, x: int, y: int, string: str, style: Style) -> tuple[int, int]:
        """Print a string starting at (x, y), clipped at the end of the line."""
        return self.set_stringn(x, y, string, sys.maxsize, style)

    def set_stringn(
        self, x: int, y: int, string: str, width: int, style: Style
    ) -> tuple[int, int]:
        """Print at most ``width`` columns of a string starting at (x, y).

        Returns the position just after the last printed grapheme.
        """
        index = self.index_of(x, y)
        x_offset = x
        max_offset = min(self.area.right(), width + x)
        for grapheme in graphemes(string):
            grapheme_width = str_width(grapheme)
            if grapheme_width == 0:
                continue
            if grapheme_width > max(max_offset - x_offset, 0):
                break
            cell = self.content[index]
            cell.symbol = grapheme
            cell.apply_style(style)
            # Cells hidden behind a wide grapheme are cleared.
            for hidden in self.content[index + 1 : index + grapheme_width]:
                hidden.reset()
            index += grapheme_width
            x_offset += grapheme_width
        return x_offset, y

    def set_spans(self, x: int, y: int, spans: Spans, width: int) -> tuple[int, int]:
        """Print a line of spans within ``width`` columns starting at (x, y)."""
        remaining = width
        for span in Spans.of(spans):
            if remaining == 0:
                break
            end_x, _ = self.set_stringn(x, y, span.content, remaining, span.style)
            written = max(end_x - x, 0)
            x = end_x
            remaining = max(remaining - written, 0)
        return x, y

    def set_span(self, x: int, y: int, span: Span, width: int) -> tuple[int, int]:
        """Print a span within ``width`` columns starting at (x, y)."""
        return self.set_stringn(x, y, span.content, width, span.style)

    def set_style(self, area: Rect, style: Style) -> None:
        """Apply a style to every cell of the given area."""
        for y in range(area.top(), area.bottom()):
            for x in range(area.left(), area.right()):
                self.get(x, y).apply_style(style)

    def resize(self, area: Rect) -> None:
        """Map the buffer to ``area``, truncating or padding with blank cells."""
        length = area.area()
        if len(self.content) > length:
            del self.content[length:]
        else:
            self.content.extend(Cell() for _ in range(length - len(self.content)))
        self.area = area

    def reset(self) -> None:
        """Reset every cell."""
        for cell in self.content:
            cell.reset()

    def merge(self, other: Buffer) -> None:
        """Merge another buffer into this one; its cells win where they overlap."""
        area = self.area.union(other.area)
        merged = [Cell() for _ in range(area.area())]

        def place(source: Buffer, copy: bool) -> None:
            for i, cell in enumerate(source.content[: source.area.area()]):
                x, y = source.pos_of(i)
                merged[(y - area.y) * area.width + (x - area.x)] = replace(cell) if copy else cell

        place(self, copy=False)
        place(other, copy=True)
        self.content = merged
        self.area = area

    def diff(self, other: Buffer) -> list[tuple[int, int, Cell]]:
        """Return the (x, y, cell) updates needed to turn this buffer into ``other``.

        Cells covered by a preceding wide grapheme are skipped, and cells that a
        wide grapheme used to cover are redrawn.
        """
        updates: list[tuple[int, int, Cell]] = []
        invalidated = 0
        to_skip = 0
        for i, (current, previous) in enumerate(zip(other.content, self.content)):
            if (current != previous or invalidated > 0) and to_skip == 0:
                x, y = self.pos_of(i)
                updates.append((x, y, current))
            current_width = str_width(current.symbol)
            to_skip = max(current_width - 1, 0)
            affected = max(current_width, str_width(previous.symbol))
            invalidated = max(max(affected, invalidated) - 1, 0)
        return updates