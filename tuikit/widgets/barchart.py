"""A widget showing several labelled vertical bars."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from tuikit.buffer import Buffer
from tuikit.layout import Rect
from tuikit.style import Style
from tuikit.symbols import BAR_NINE_LEVELS, BarSet
from tuikit.textwidth import str_width
from tuikit.widgets.block import Block


@dataclass
class BarChart:
    """Bars for a sequence of (label, value) pairs, optionally inside a block.

    When ``max`` is None the largest value in ``data`` sets the full bar height.
    """

    data: Sequence[tuple[str, int]] = ()
    block: Block | None = None
    bar_width: int = 1
    bar_gap: int = 1
    bar_set: BarSet = BAR_NINE_LEVELS
    bar_style: Style = field(default_factory=Style)
    value_style: Style = field(default_factory=Style)
    label_style: Style = field(default_factory=Style)
    style: Style = field(default_factory=Style)
    max: int | None = None

    def __post_init__(self) -> None:
        self.data = tuple((str(label), int(value)) for label, value in self.data)
        if any(value < 0 for _, value in self.data):
            raise ValueError("bar values must not be negative")
        if self.max is not None and self.max < 0:
            raise ValueError("the maximum must not be negative")
        if self.bar_width < 0 or self.bar_gap < 0:
            raise ValueError("bar width and gap must not be negative")
        if self.bar_width + self.bar_gap == 0:
            raise ValueError("bar width and gap cannot both be zero")

    def _symbol(self, eighths: int) -> str:
        s = self.bar_set
        levels = (
            s.empty,
            s.one_eighth,
            s.one_quarter,
            s.three_eighths,
            s.half,
            s.five_eighths,
            s.three_quarters,
            s.seven_eighths,
        )
        return levels[eighths] if eighths < len(levels) else s.full

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the chart into ``buf`` within ``area``."""
        buf.set_style(area, self.style)

        if self.block is not None:
            chart_area = self.block.inner(area)
            self.block.render(area, buf)
        else:
            chart_area = area

        if chart_area.height < 2:
            return

        maximum = self.max if self.max is not None else max(
            (value for _, value in self.data), default=0
        )
        step = self.bar_width + self.bar_gap
        shown = self.data[: min(chart_area.width // step, len(self.data))]
        bar_rows = chart_area.height - 1
        heights = [value * bar_rows * 8 // max(maximum, 1) for _, value in shown]

        for j in reversed(range(bar_rows)):
            y = chart_area.top() + j
            for i, height in enumerate(heights):
                symbol = self._symbol(height)
                start = chart_area.left() + i * step
                for x in range(start, start + self.bar_width):
                    cell = buf.get(x, y)
                    cell.symbol = symbol
                    cell.apply_style(self.bar_style)
                heights[i] = max(height - 8, 0)

        for i, (label, value) in enumerate(shown):
            start = chart_area.left() + i * step
            if value != 0:
                value_label = str(value)
                width = str_width(value_label)
                if width < self.bar_width:
                    buf.set_string(
                        start + (self.bar_width - width) // 2,
                        chart_area.bottom() - 2,
                        value_label,
                        self.value_style,
                    )
            buf.set_stringn(
                start, chart_area.bottom() - 1, label, self.bar_width, self.label_style
            )