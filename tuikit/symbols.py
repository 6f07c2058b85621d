"""Box-drawing, block, bar and braille symbols used by the widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class _LevelSet:
    full: str
    seven_eighths: str
    three_quarters: str
    five_eighths: str
    half: str
    three_eighths: str
    one_quarter: str
    one_eighth: str
    empty: str


@dataclass(frozen=True)
class BlockSet(_LevelSet):
    """Horizontal block symbols for eight levels of fill."""


@dataclass(frozen=True)
class BarSet(_LevelSet):
    """Vertical bar symbols for eight levels of fill."""


@dataclass(frozen=True)
class LineSet:
    """Symbols used to draw borders and grid lines."""

    vertical: str
    horizontal: str
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    cross: str


class Marker(enum.Enum):
    """How points are plotted on a canvas."""

    DOT = "dot"
    BLOCK = "block"
    BRAILLE = "braille"


BLOCK_THREE_LEVELS = BlockSet(
    full="█",
    seven_eighths="█",
    three_quarters="▌",
    five_eighths="▌",
    half="▌",
    three_eighths="▌",
    one_quarter="▌",
    one_eighth=" ",
    empty=" ",
)

BLOCK_NINE_LEVELS = BlockSet(
    full="█",
    seven_eighths="▉",
    three_quarters="▊",
    five_eighths="▋",
    half="▌",
    three_eighths="▍",
    one_quarter="▎",
    one_eighth="▏",
    empty=" ",
)

BAR_THREE_LEVELS = BarSet(
    full="█",
    seven_eighths="█",
    three_quarters="▄",
    five_eighths="▄",
    half="▄",
    three_eighths="▄",
    one_quarter="▄",
    one_eighth=" ",
    empty=" ",
)

BAR_NINE_LEVELS = BarSet(
    full="█",
    seven_eighths="▇",
    three_quarters="▆",
    five_eighths="▅",
    half="▄",
    three_eighths="▃",
    one_quarter="▂",
    one_eighth="▁",
    empty=" ",
)

LINE_NORMAL = LineSet(
    vertical="│",
    horizontal="─",
    top_right="┐",
    top_left="┌",
    bottom_right="┘",
    bottom_left="└",
    vertical_left="┤",
    vertical_right="├",
    horizontal_down="┬",
    horizontal_up="┴",
    cross="┼",
)

LINE_ROUNDED = replace(
    LINE_NORMAL,
    top_right="╮",
    top_left="╭",
    bottom_right="╯",
    bottom_left="╰",
)

LINE_DOUBLE = LineSet(
    vertical="║",
    horizontal="═",
    top_right="╗",
    top_left="╔",
    bottom_right="╝",
    bottom_left="╚",
    vertical_left="╣",
    vertical_right="╠",
    horizontal_down="╦",
    horizontal_up="╩",
    cross="╬",
)

LINE_THICK = LineSet(
    vertical="┃",
    horizontal="━",
    top_right="┓",
    top_left="┏",
    bottom_right="┛",
    bottom_left="┗",
    vertical_left="┫",
    vertical_right="┣",
    horizontal_down="┳",
    horizontal_up="┻",
    cross="╋",
)

DOT = "•"

BRAILLE_BLANK = 0x2800
BRAILLE_DOTS: tuple[tuple[int, int], ...] = (
    (0x0001, 0x0008),
    (0x0002, 0x0010),
    (0x0004, 0x0020),
    (0x0040, 0x0080),
)