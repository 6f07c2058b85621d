"""Rectangles and constraint-based splitting of screen areas."""

from __future__ import annotations

import enum
import functools
import math
from dataclasses import dataclass, field

from tuikit.solver import (
    MEDIUM,
    REQUIRED,
    WEAK,
    LinearConstraint,
    Relation,
    Solver,
    Variable,
)

_U16_MAX = 0xFFFF


class Corner(enum.Enum):
    """A corner of a rectangle."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class Direction(enum.Enum):
    """The axis along which a layout splits its area."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(enum.Enum):
    """Horizontal alignment of text."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


_CONSTRAINT_KINDS = frozenset({"percentage", "ratio", "length", "max", "min"})


@dataclass(frozen=True)
class Constraint:
    """A size requirement for one chunk of a layout."""

    kind: str
    value: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.kind not in _CONSTRAINT_KINDS:
            raise ValueError(f"unknown constraint kind {self.kind!r}")
        if self.value < 0 or self.denominator < 0:
            raise ValueError("constraint values must not be negative")

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        """A share of the available length, in percent."""
        return cls("percentage", value)

    @classmethod
    def ratio(cls, numerator: int, denominator: int) -> Constraint:
        """A fraction of the available length."""
        return cls("ratio", numerator, denominator)

    @classmethod
    def length(cls, value: int) -> Constraint:
        """A fixed length."""
        return cls("length", value)

    @classmethod
    def max(cls, value: int) -> Constraint:
        """At most the given length."""
        return cls("max", value)

    @classmethod
    def min(cls, value: int) -> Constraint:
        """At least the given length."""
        return cls("min", value)

    def apply(self, length: int) -> int:
        """Return the size this constraint gives to an area of the given length."""
        if self.kind == "percentage":
            return length * self.value // 100
        if self.kind == "ratio":
            return (self.value * length // self.denominator) & _U16_MAX
        if self.kind in ("length", "max"):
            return min(length, self.value)
        return max(length, self.value)


@dataclass(frozen=True)
class Margin:
    """Space kept free around the edges of an area."""

    vertical: int = 0
    horizontal: int = 0


def _check_u16(value: int, name: str) -> None:
    if not isinstance(value, int) or not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be an integer in 0..{_U16_MAX}, got {value!r}")


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            _check_u16(getattr(self, name), name)

    @classmethod
    def clipped(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Create a rect whose area fits in 16 bits, keeping the aspect ratio if clipped."""
        if width * height > _U16_MAX:
            aspect_ratio = width / height
            height_f = math.sqrt(_U16_MAX / aspect_ratio)
            width_f = height_f * aspect_ratio
            width, height = int(width_f), int(height_f)
        return cls(x, y, width, height)

    def area(self) -> int:
        return self.width * self.height

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return min(self.x + self.width, _U16_MAX)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return min(self.y + self.height, _U16_MAX)

    def inner(self, margin: Margin) -> Rect:
        """Shrink by the margin on every side; an empty rect if it does not fit."""
        if self.width < 2 * margin.horizontal or self.height < 2 * margin.vertical:
            return Rect()
        return Rect(
            self.x + margin.horizontal,
            self.y + margin.vertical,
            self.width - 2 * margin.horizontal,
            self.height - 2 * margin.vertical,
        )

    def union(self, other: Rect) -> Rect:
        """Return the smallest rect holding both."""
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.x + self.width, other.x + other.width)
        y2 = max(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap of both; raise ValueError if they are apart."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.x + self.width, other.x + other.width)
        y2 = min(self.y + self.height, other.y + other.height)
        if x2 < x1 or y2 < y1:
            raise ValueError(f"{self!r} and {other!r} do not intersect")
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersects(self, other: Rect) -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Layout:
    """Splits an area into chunks along one direction according to constraints."""

    direction: Direction = Direction.VERTICAL
    margin: Margin = field(default_factory=Margin)
    constraints: tuple[Constraint, ...] = ()
    expand_to_fill: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.margin, int):
            object.__setattr__(self, "margin", Margin(self.margin, self.margin))
        object.__setattr__(self, "constraints", tuple(self.constraints))

    def split(self, area: Rect) -> tuple[Rect, ...]:
        """Return one rect per constraint; results are cached."""
        return _split(area, self)


class _Element:
    __slots__ = ("x", "y", "width", "height")

    def __init__(self) -> None:
        self.x = Variable("x")
        self.y = Variable("y")
        self.width = Variable("width")
        self.height = Variable("height")

    def main_axis(self, horizontal: bool) -> tuple[Variable, Variable]:
        return (self.x, self.width) if horizontal else (self.y, self.height)

    def cross_axis(self, horizontal: bool) -> tuple[Variable, Variable]:
        return (self.y, self.height) if horizontal else (self.x, self.width)


def _rel(lhs, relation: Relation, rhs, strength: float = REQUIRED) -> LinearConstraint:
    return LinearConstraint(lhs - rhs, relation, strength)


def _size_constraint(size: Variable, constraint: Constraint, total: int) -> LinearConstraint:
    if constraint.kind == "length":
        return _rel(size, Relation.EQ, constraint.value, MEDIUM)
    if constraint.kind == "percentage":
        return _rel(size, Relation.EQ, constraint.value * total / 100.0, MEDIUM)
    if constraint.kind == "ratio":
        return _rel(size, Relation.EQ, total * constraint.value / constraint.denominator, MEDIUM)
    if constraint.kind == "min":
        return _rel(size, Relation.GE, constraint.value, MEDIUM)
    return _rel(size, Relation.LE, constraint.value, MEDIUM)


def _to_u16(value: float) -> int:
    if value < 0 or math.copysign(1.0, value) < 0:
        return 0
    return min(int(value), _U16_MAX)


@functools.lru_cache(maxsize=None)
def _split(area: Rect, layout: Layout) -> tuple[Rect, ...]:
    dest = area.inner(layout.margin)
    horizontal = layout.direction is Direction.HORIZONTAL
    elements = [_Element() for _ in layout.constraints]

    ccs: list[LinearConstraint] = []
    for e in elements:
        ccs.append(_rel(e.width, Relation.GE, 0))
        ccs.append(_rel(e.height, Relation.GE, 0))
        ccs.append(_rel(e.x, Relation.GE, dest.left()))
        ccs.append(_rel(e.y, Relation.GE, dest.top()))
        ccs.append(_rel(e.x + e.width, Relation.LE, dest.right()))
        ccs.append(_rel(e.y + e.height, Relation.LE, dest.bottom()))

    if elements:
        start, _ = elements[0].main_axis(horizontal)
        ccs.append(_rel(start, Relation.EQ, dest.left() if horizontal else dest.top()))
        if layout.expand_to_fill:
            pos, size = elements[-1].main_axis(horizontal)
            ccs.append(_rel(pos + size, Relation.EQ, dest.right() if horizontal else dest.bottom()))

    for first, second in zip(elements, elements[1:]):
        pos, size = first.main_axis(horizontal)
        next_pos, _ = second.main_axis(horizontal)
        ccs.append(_rel(pos + size, Relation.EQ, next_pos))

    total = dest.width if horizontal else dest.height
    cross_start = dest.y if horizontal else dest.x
    cross_total = dest.height if horizontal else dest.width
    for e, constraint in zip(elements, layout.constraints):
        cross_pos, cross_size = e.cross_axis(horizontal)
        _, size = e.main_axis(horizontal)
        ccs.append(_rel(cross_pos, Relation.EQ, cross_start))
        ccs.append(_rel(cross_size, Relation.EQ, cross_total))
        ccs.append(_size_constraint(size, constraint, total))
        if constraint.kind in ("min", "max"):
            ccs.append(_rel(size, Relation.EQ, constraint.value, WEAK))

    solver = Solver()
    solver.add_constraints(ccs)
    results = [
        [_to_u16(solver.value_of(var)) for var in (e.x, e.y, e.width, e.height)]
        for e in elements
    ]

    if layout.expand_to_fill and results:
        last = results[-1]
        if horizontal:
            last[2] = dest.right() - last[0]
        else:
            last[3] = dest.bottom() - last[1]

    return tuple(Rect(*values) for values in results)