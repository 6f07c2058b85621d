"""Colours, text modifiers and incremental styles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar

_NAMED_COLORS = frozenset(
    {
        "reset",
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "gray",
        "dark_gray",
        "light_red",
        "light_green",
        "light_yellow",
        "light_blue",
        "light_magenta",
        "light_cyan",
        "white",
    }
)


def _check_byte(value: int, what: str) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{what} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named colour, a 24-bit RGB value or a palette index."""

    kind: str
    value: tuple[int, ...] = ()

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.kind == "rgb":
            if len(self.value) != 3:
                raise ValueError("an RGB colour needs exactly three components")
            for component in self.value:
                _check_byte(component, "RGB component")
        elif self.kind == "indexed":
            if len(self.value) != 1:
                raise ValueError("an indexed colour needs exactly one index")
            _check_byte(self.value[0], "colour index")
        elif self.kind in _NAMED_COLORS:
            if self.value:
                raise ValueError(f"named colour {self.kind!r} takes no value")
        else:
            raise ValueError(f"unknown colour {self.kind!r}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Return a 24-bit colour."""
        return cls("rgb", (r, g, b))

    @classmethod
    def indexed(cls, index: int) -> Color:
        """Return a colour from the terminal's 256-colour palette."""
        return cls("indexed", (index,))


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("dark_gray")
Color.LIGHT_RED = Color("light_red")
Color.LIGHT_GREEN = Color("light_green")
Color.LIGHT_YELLOW = Color("light_yellow")
Color.LIGHT_BLUE = Color("light_blue")
Color.LIGHT_MAGENTA = Color("light_magenta")
Color.LIGHT_CYAN = Color("light_cyan")
Color.WHITE = Color("white")


class Modifier(enum.Flag):
    """Text emphasis flags; combine them with ``|``."""

    BOLD = 0b0000_0000_0001
    DIM = 0b0000_0000_0010
    ITALIC = 0b0000_0000_0100
    UNDERLINED = 0b0000_0000_1000
    SLOW_BLINK = 0b0000_0001_0000
    RAPID_BLINK = 0b0000_0010_0000
    REVERSED = 0b0000_0100_0000
    HIDDEN = 0b0000_1000_0000
    CROSSED_OUT = 0b0001_0000_0000


NO_MODIFIERS = Modifier(0)
ALL_MODIFIERS = Modifier(0b0001_1111_1111)


def _without(flags: Modifier, removed: Modifier) -> Modifier:
    return Modifier(flags.value & ~removed.value)


@dataclass(frozen=True)
class Style:
    """An incremental change to how a cell is displayed.

    ``None`` colours leave the existing colour untouched; ``add_modifier`` and
    ``sub_modifier`` switch modifiers on and off.
    """

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = field(default=NO_MODIFIERS)
    sub_modifier: Modifier = field(default=NO_MODIFIERS)

    @classmethod
    def reset(cls) -> Style:
        """Return a style that resets every property."""
        return cls(
            fg=Color.RESET,
            bg=Color.RESET,
            add_modifier=NO_MODIFIERS,
            sub_modifier=ALL_MODIFIERS,
        )

    def with_fg(self, color: Color) -> Style:
        """Return a copy with the given foreground colour."""
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        """Return a copy with the given background colour."""
        return replace(self, bg=color)

    def with_added(self, modifier: Modifier) -> Style:
        """Return a copy that switches the given modifiers on."""
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=_without(self.sub_modifier, modifier),
        )

    def with_removed(self, modifier: Modifier) -> Style:
        """Return a copy that switches the given modifiers off."""
        return replace(
            self,
            add_modifier=_without(self.add_modifier, modifier),
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Combine two styles as if ``other`` were applied after ``self``."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=_without(self.add_modifier, other.sub_modifier) | other.add_modifier,
            sub_modifier=_without(self.sub_modifier, other.add_modifier) | other.sub_modifier,
        )