"""A small incremental linear constraint solver using the Cassowary simplex method."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Union

REQUIRED = 1_001_001_000.0
STRONG = 1_000_000.0
MEDIUM = 1_000.0
WEAK = 1.0

_EPSILON = 1.0e-8


def _near_zero(value: float) -> bool:
    return abs(value) < _EPSILON


class Variable:
    """An unknown whose value the solver works out."""

    __slots__ = ("name",)

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Variable({self.name!r})" if self.name else f"Variable(<{id(self):#x}>)"

    def _expr(self) -> Expression:
        return Expression(((self, 1.0),))

    def __add__(self, other: object) -> Expression:
        return self._expr() + other

    def __radd__(self, other: object) -> Expression:
        return self._expr().__radd__(other)

    def __sub__(self, other: object) -> Expression:
        return self._expr() - other

    def __rsub__(self, other: object) -> Expression:
        return self._expr().__rsub__(other)

    def __mul__(self, other: object) -> Expression:
        return self._expr() * other

    def __rmul__(self, other: object) -> Expression:
        return self._expr() * other

    def __neg__(self) -> Expression:
        return -self._expr()


Operand = Union["Expression", Variable, int, float]


def _coerce(value: object) -> Expression | None:
    if isinstance(value, Expression):
        return value
    if isinstance(value, Variable):
        return value._expr()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Expression((), float(value))
    return None


@dataclass(frozen=True)
class Expression:
    """A linear combination of variables plus a constant."""

    terms: tuple[tuple[Variable, float], ...] = ()
    constant: float = 0.0

    def __add__(self, other: object) -> Expression:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Expression(self.terms + rhs.terms, self.constant + rhs.constant)

    def __radd__(self, other: object) -> Expression:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __neg__(self) -> Expression:
        return self * -1.0

    def __sub__(self, other: object) -> Expression:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> Expression:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + (-self)

    def __mul__(self, other: object) -> Expression:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        factor = float(other)
        return Expression(
            tuple((var, coeff * factor) for var, coeff in self.terms),
            self.constant * factor,
        )

    def __rmul__(self, other: object) -> Expression:
        return self.__mul__(other)


class Relation(enum.Enum):
    """How a constraint's expression relates to zero."""

    LE = "<="
    GE = ">="
    EQ = "=="


@dataclass(eq=False)
class LinearConstraint:
    """The constraint ``expression <relation> 0`` with a given strength."""

    expression: Expression
    relation: Relation
    strength: float = REQUIRED

    def __post_init__(self) -> None:
        expression = _coerce(self.expression)
        if expression is None:
            raise TypeError(f"cannot build a constraint from {self.expression!r}")
        self.expression = expression
        self.strength = min(max(float(self.strength), 0.0), REQUIRED)


class UnsatisfiableConstraint(Exception):
    """Raised when a required constraint conflicts with those already added."""


class _Kind(enum.Enum):
    EXTERNAL = enum.auto()
    SLACK = enum.auto()
    ERROR = enum.auto()
    DUMMY = enum.auto()


class _Symbol:
    __slots__ = ("kind",)

    def __init__(self, kind: _Kind) -> None:
        self.kind = kind


class _Row:
    __slots__ = ("constant", "cells")

    def __init__(self, constant: float = 0.0, cells: dict[_Symbol, float] | None = None) -> None:
        self.constant = constant
        self.cells: dict[_Symbol, float] = dict(cells) if cells else {}

    def copy(self) -> _Row:
        return _Row(self.constant, self.cells)

    def insert_symbol(self, symbol: _Symbol, coefficient: float = 1.0) -> None:
        value = self.cells.get(symbol, 0.0) + coefficient
        if _near_zero(value):
            self.cells.pop(symbol, None)
        else:
            self.cells[symbol] = value

    def insert_row(self, other: _Row, coefficient: float = 1.0) -> None:
        self.constant += other.constant * coefficient
        for symbol, value in other.cells.items():
            self.insert_symbol(symbol, value * coefficient)

    def remove(self, symbol: _Symbol) -> None:
        self.cells.pop(symbol, None)

    def reverse_sign(self) -> None:
        self.constant = -self.constant
        self.cells = {symbol: -value for symbol, value in self.cells.items()}

    def solve_for(self, symbol: _Symbol) -> None:
        coefficient = -1.0 / self.cells.pop(symbol)
        self.constant *= coefficient
        self.cells = {s: value * coefficient for s, value in self.cells.items()}

    def solve_for_pair(self, lhs: _Symbol, rhs: _Symbol) -> None:
        self.insert_symbol(lhs, -1.0)
        self.solve_for(rhs)

    def coefficient_for(self, symbol: _Symbol) -> float:
        return self.cells.get(symbol, 0.0)

    def substitute(self, symbol: _Symbol, row: _Row) -> None:
        coefficient = self.cells.pop(symbol, None)
        if coefficient is not None:
            self.insert_row(row, coefficient)


@dataclass
class _Tag:
    marker: _Symbol
    other: _Symbol | None = None


@dataclass
class Solver:
    """Finds values for variables that satisfy a set of weighted linear constraints."""

    _constraints: dict[LinearConstraint, _Tag] = field(default_factory=dict, init=False)
    _rows: dict[_Symbol, _Row] = field(default_factory=dict, init=False)
    _vars: dict[Variable, _Symbol] = field(default_factory=dict, init=False)
    _objective: _Row = field(default_factory=_Row, init=False)
    _artificial: _Row | None = field(default=None, init=False)

    def add_constraint(self, constraint: LinearConstraint) -> None:
        """Add one constraint; raise UnsatisfiableConstraint if it cannot hold."""
        if constraint in self._constraints:
            raise ValueError("constraint has already been added")
        row, tag = self._create_row(constraint)
        subject = self._choose_subject(row, tag)
        if subject is None and all(s.kind is _Kind.DUMMY for s in row.cells):
            if not _near_zero(row.constant):
                raise UnsatisfiableConstraint(f"unsatisfiable constraint: {constraint!r}")
            subject = tag.marker
        if subject is None:
            if not self._add_with_artificial_variable(row):
                raise UnsatisfiableConstraint(f"unsatisfiable constraint: {constraint!r}")
        else:
            row.solve_for(subject)
            self._substitute(subject, row)
            self._rows[subject] = row
        self._constraints[constraint] = tag
        self._optimize(self._objective)

    def add_constraints(self, constraints: Iterable[LinearConstraint]) -> None:
        """Add several constraints in order."""
        for constraint in constraints:
            self.add_constraint(constraint)

    def value_of(self, variable: Variable) -> float:
        """Return the current value of a variable (0.0 if it is unknown)."""
        symbol = self._vars.get(variable)
        if symbol is None:
            return 0.0
        row = self._rows.get(symbol)
        return row.constant if row is not None else 0.0

    def _var_symbol(self, variable: Variable) -> _Symbol:
        symbol = self._vars.get(variable)
        if symbol is None:
            symbol = self._vars[variable] = _Symbol(_Kind.EXTERNAL)
        return symbol

    def _create_row(self, constraint: LinearConstraint) -> tuple[_Row, _Tag]:
        expression = constraint.expression
        row = _Row(expression.constant)
        for variable, coefficient in expression.terms:
            if _near_zero(coefficient):
                continue
            symbol = self._var_symbol(variable)
            basic = self._rows.get(symbol)
            if basic is not None:
                row.insert_row(basic, coefficient)
            else:
                row.insert_symbol(symbol, coefficient)

        strength = constraint.strength
        if constraint.relation in (Relation.LE, Relation.GE):
            coefficient = 1.0 if constraint.relation is Relation.LE else -1.0
            slack = _Symbol(_Kind.SLACK)
            tag = _Tag(slack)
            row.insert_symbol(slack, coefficient)
            if strength < REQUIRED:
                error = _Symbol(_Kind.ERROR)
                tag.other = error
                row.insert_symbol(error, -coefficient)
                self._objective.insert_symbol(error, strength)
        elif strength < REQUIRED:
            plus = _Symbol(_Kind.ERROR)
            minus = _Symbol(_Kind.ERROR)
            tag = _Tag(plus, minus)
            row.insert_symbol(plus, -1.0)
            row.insert_symbol(minus, 1.0)
            self._objective.insert_symbol(plus, strength)
            self._objective.insert_symbol(minus, strength)
        else:
            dummy = _Symbol(_Kind.DUMMY)
            tag = _Tag(dummy)
            row.insert_symbol(dummy)

        if row.constant < 0.0:
            row.reverse_sign()
        return row, tag

    @staticmethod
    def _choose_subject(row: _Row, tag: _Tag) -> _Symbol | None:
        for symbol in row.cells:
            if symbol.kind is _Kind.EXTERNAL:
                return symbol
        for candidate in (tag.marker, tag.other):
            if (
                candidate is not None
                and candidate.kind in (_Kind.SLACK, _Kind.ERROR)
                and row.coefficient_for(candidate) < 0.0
            ):
                return candidate
        return None

    def _add_with_artificial_variable(self, row: _Row) -> bool:
        art = _Symbol(_Kind.SLACK)
        self._rows[art] = row.copy()
        self._artificial = row.copy()
        self._optimize(self._artificial)
        success = _near_zero(self._artificial.constant)
        self._artificial = None

        basic = self._rows.pop(art, None)
        if basic is not None:
            if not basic.cells:
                return success
            entering = next(
                (s for s in basic.cells if s.kind in (_Kind.SLACK, _Kind.ERROR)), None
            )
            if entering is None:
                return False
            basic.solve_for_pair(art, entering)
            self._substitute(entering, basic)
            self._rows[entering] = basic

        for other in self._rows.values():
            other.remove(art)
        self._objective.remove(art)
        return success

    def _substitute(self, symbol: _Symbol, row: _Row) -> None:
        for other in self._rows.values():
            other.substitute(symbol, row)
        self._objective.substitute(symbol, row)
        if self._artificial is not None:
            self._artificial.substitute(symbol, row)

    def _optimize(self, objective: _Row) -> None:
        while True:
            entering = next(
                (
                    s
                    for s, coeff in objective.cells.items()
                    if s.kind is not _Kind.DUMMY and coeff < 0.0
                ),
                None,
            )
            if entering is None:
                return
            leaving = self._leaving_symbol(entering)
            if leaving is None:
                raise RuntimeError("the objective function is unbounded")
            row = self._rows.pop(leaving)
            row.solve_for_pair(leaving, entering)
            self._substitute(entering, row)
            self._rows[entering] = row

    def _leaving_symbol(self, entering: _Symbol) -> _Symbol | None:
        best_ratio = float("inf")
        found = None
        for symbol, row in self._rows.items():
            if symbol.kind is _Kind.EXTERNAL:
                continue
            coefficient = row.coefficient_for(entering)
            if coefficient < 0.0:
                ratio = -row.constant / coefficient
                if ratio < best_ratio:
                    best_ratio = ratio
                    found = symbol
        return found