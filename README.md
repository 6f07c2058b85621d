# tuikit

Building blocks for terminal user interfaces. Widgets never write to the
terminal themselves. They draw into an in-memory `Buffer`, a grid of cells that
each hold a grapheme, a foreground colour, a background colour and text
modifiers. `Buffer.diff` compares two buffers and returns the cell updates
needed to move the screen from one frame to the next.

## Installation

```
pip install tuikit
```

The dependencies are `regex` for grapheme segmentation and `wcwidth` for
display widths.

## Modules

- `tuikit.style`: `Color` (named colours such as `Color.RED`, plus
  `Color.rgb(r, g, b)` and `Color.indexed(i)`), `Modifier` flags and `Style`.
  A `Style` is an incremental change: `None` colours leave a cell's colour
  alone. Build one with `with_fg`, `with_bg`, `with_added` and `with_removed`;
  `Style.reset()` resets everything, and `patch` merges two styles as if applied
  one after the other.
- `tuikit.symbols`: the block, bar and line-drawing symbol sets
  (`BLOCK_NINE_LEVELS`, `BAR_NINE_LEVELS`, `LINE_NORMAL`, `LINE_ROUNDED`,
  `LINE_DOUBLE`, `LINE_THICK` and others), braille dot values, and the `Marker`
  kinds used by the canvas.
- `tuikit.textwidth`: `graphemes(text)` splits text into grapheme clusters and
  `str_width(text)` gives its width in terminal columns.
- `tuikit.solver`: a small linear constraint solver (`Variable`, `Expression`,
  `LinearConstraint`, `Relation`, `Solver`). `Solver.add_constraint` raises
  `UnsatisfiableConstraint` when a required constraint cannot hold.
- `tuikit.layout`: `Rect`, `Margin`, `Constraint` (`percentage`, `ratio`,
  `length`, `max`, `min`), `Direction`, `Alignment`, `Corner` and `Layout`.
  `Layout.split(area)` divides an area into one `Rect` per constraint using the
  solver; results are cached. `Rect.clipped` builds a rect whose area fits in
  16 bits, keeping its aspect ratio.
- `tuikit.text`: `Span`, `Spans` and `Text` for styled single-line and
  multi-line strings. `Spans.of` and `Text.of` accept strings, spans and lines.
- `tuikit.buffer`: `Cell` and `Buffer`, with `set_string`, `set_stringn`,
  `set_span`, `set_spans`, `set_style`, `resize`, `merge` and `diff`.
  Coordinates outside the buffer raise `IndexError`.
- `tuikit.widgets.block`: `Block`, with `Borders` flags, a `BorderType` and a
  title aligned left, centre or right. `Block.inner` gives the area left inside
  the borders and title.
- `tuikit.widgets.barchart`: `BarChart`, vertical bars for `(label, value)`
  pairs with the value and label printed under each bar.
- `tuikit.widgets.canvas` and `tuikit.widgets.shapes`: a `Canvas` that draws
  with braille, dot or block markers in layers, plus text labels, and the
  `Line`, `Points` and `Rectangle` shapes.

Every widget has `render(area, buf)`, which draws it into a buffer.

## Example

```python
from tuikit.buffer import Buffer
from tuikit.layout import Constraint, Direction, Layout, Rect
from tuikit.style import Color, Style
from tuikit.widgets.block import Block, Borders
from tuikit.widgets.canvas import Canvas
from tuikit.widgets.shapes import Line

area = Rect(0, 0, 20, 8)
top, bottom = Layout(
    direction=Direction.VERTICAL,
    constraints=[Constraint.length(1), Constraint.min(0)],
).split(area)

previous = Buffer.empty(area)
current = Buffer.empty(area)
current.set_string(top.x, top.y, "hello", Style().with_fg(Color.RED))

Canvas(
    block=Block(title="Plot", borders=Borders.ALL),
    x_bounds=(0.0, 10.0),
    y_bounds=(0.0, 10.0),
    paint=lambda ctx: ctx.draw(Line(0.0, 0.0, 10.0, 10.0, Color.GREEN)),
).render(bottom, current)

for x, y, cell in previous.diff(current):
    print(x, y, cell.symbol)
```

## What the package does not do

There is no terminal backend: nothing here writes escape sequences, reads the
terminal size, moves the cursor or handles keyboard and mouse input. The
updates from `Buffer.diff` are plain `(x, y, cell)` tuples that you send to the
terminal yourself. The canvas has no world-map shape; only `Line`, `Points` and
`Rectangle` are provided.

## Running the tests

```
pip install -e ".[test]"
pytest
```