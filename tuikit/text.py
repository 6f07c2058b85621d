"""Styled text: single-style spans, lines of spans, and multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Union

from tuikit.style import Style
from tuikit.textwidth import graphemes, str_width


@dataclass(frozen=True)
class StyledGrapheme:
    """A grapheme together with the style it is drawn with."""

    symbol: str
    style: Style


@dataclass(frozen=True)
class Span:
    """A string in which every grapheme has the same style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        """Create a span with no style."""
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        """Create a span with the given style."""
        return cls(content, style)

    def width(self) -> int:
        """Return the display width of the content."""
        return str_width(self.content)

    def styled_graphemes(self, base_style: Style) -> Iterator[StyledGrapheme]:
        """Yield each grapheme with ``base_style`` patched by the span's style.

        Newlines are skipped.
        """
        style = base_style.patch(self.style)
        for symbol in graphemes(self.content):
            if symbol != "\n":
                yield StyledGrapheme(symbol, style)


SpansLike = Union[str, Span, "Spans", Iterable[Span]]


@dataclass
class Spans:
    """One line made of spans, each with its own style."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def of(cls, value: SpansLike) -> Spans:
        """Build a line from a string, a span, spans or an iterable of spans."""
        if isinstance(value, Spans):
            return cls(list(value.spans))
        if isinstance(value, str):
            return cls([Span.raw(value)])
        if isinstance(value, Span):
            return cls([value])
        try:
            items = list(value)
        except TypeError:
            raise TypeError(f"cannot build Spans from {value!r}") from None
        if not all(isinstance(item, Span) for item in items):
            raise TypeError("Spans can only hold Span items")
        return cls(items)

    def width(self) -> int:
        """Return the display width of the whole line."""
        return sum(span.width() for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def __str__(self) -> str:
        return "".join(span.content for span in self.spans)


def _split_lines(content: str) -> list[str]:
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


TextLike = Union[str, Span, Spans, "Text", Iterable[Spans]]


@dataclass
class Text:
    """Text over several lines, each made of styled spans."""

    lines: list[Spans] = field(default_factory=list)

    @classmethod
    def raw(cls, content: str) -> Text:
        """Create unstyled text, one line per newline-separated part."""
        if content == "":
            return cls([Spans.of("")])
        return cls([Spans.of(line) for line in _split_lines(content)])

    @classmethod
    def styled(cls, content: str, style: Style) -> Text:
        """Create text with the given style applied to every span."""
        text = cls.raw(content)
        text.patch_style(style)
        return text

    @classmethod
    def of(cls, value: TextLike) -> Text:
        """Build text from a string, a span, a line, text or an iterable of lines."""
        if isinstance(value, Text):
            return cls(list(value.lines))
        if isinstance(value, str):
            return cls.raw(value)
        if isinstance(value, Span):
            return cls([Spans.of(value)])
        if isinstance(value, Spans):
            return cls([value])
        try:
            items = list(value)
        except TypeError:
            raise TypeError(f"cannot build Text from {value!r}") from None
        if not all(isinstance(item, Spans) for item in items):
            raise TypeError("Text can only hold Spans lines")
        return cls(items)

    def width(self) -> int:
        """Return the width of the widest line."""
        return max((line.width() for line in self.lines), default=0)

    def height(self) -> int:
        """Return the number of lines."""
        return len(self.lines)

    def patch_style(self, style: Style) -> None:
        """Patch the style of every span with ``style``."""
        for line in self.lines:
            line.spans = [replace(span, style=span.style.patch(style)) for span in line.spans]

    def extend(self, lines: Iterable[Spans]) -> None:
        """Append lines, for example those of another Text."""
        self.lines.extend(lines)

    def __iter__(self) -> Iterator[Spans]:
        return iter(self.lines)