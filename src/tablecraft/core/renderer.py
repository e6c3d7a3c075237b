"""Pure table rendering on top of ``rich``.

:func:`render_table` turns table content into plain text.  Rendering
goes through a private, colourless :class:`rich.console.Console` with a
fixed width, so the output depends only on the arguments and never on
the user's terminal.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich import box
from rich.cells import cell_len
from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from tablecraft.core.models import BorderStyle, TableStyle

_BOXES: dict[BorderStyle, box.Box] = {
    BorderStyle.ASCII: box.ASCII2,
    BorderStyle.MARKDOWN: box.MARKDOWN,
    BorderStyle.UNICODE: box.SQUARE,
    BorderStyle.UNICODE_ROUND: box.ROUNDED,
    BorderStyle.UNICODE_THICK_EDGE: box.HEAVY_EDGE,
}

_MIN_RENDER_WIDTH: int = 80
"""Console width floor; the real width is sized from the content."""

_TITLE_MARGIN: int = 4
"""Two border glyphs plus one space of padding on each side."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _column_count(headings: Sequence[str] | None, rows: Sequence[Sequence[str]]) -> int:
    widest_row = max((len(row) for row in rows), default=0)
    return max(len(headings or ()), widest_row)


def _cells(values: Sequence[str], count: int) -> list[Text]:
    """Wrap *values* as literal text, padded with blanks up to *count*."""
    padded = list(values) + [""] * (count - len(values))
    return [Text(value) for value in padded]


def _natural_width(
    title: str | None,
    headings: Sequence[str] | None,
    rows: Sequence[Sequence[str]],
    column_count: int,
) -> int:
    """Width of the table with every cell on one line, borders included."""
    widths = [0] * column_count
    for row in [headings or ()] + list(rows):
        for index, value in enumerate(row):
            widths[index] = max(widths[index], cell_len(value))
    # Cell padding on both sides plus one border glyph per column and the closing edge.
    table_width = sum(widths) + 3 * column_count + 1
    if title:
        table_width = max(table_width, cell_len(title) + _TITLE_MARGIN)
    return table_width


def _to_text(renderable: RenderableType, width: int) -> str:
    console = Console(
        file=io.StringIO(),
        width=max(width, _MIN_RENDER_WIDTH),
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
        highlight=False,
        emoji=False,
        markup=False,
    )
    with console.capture() as capture:
        console.print(renderable)
    # Markdown boxes have blank top/bottom edges.
    lines = [line.rstrip() for line in capture.get().splitlines()]
    return "".join(f"{line}\n" for line in lines if line)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_table(
    *,
    title: str | None,
    headings: Sequence[str] | None,
    rows: Sequence[Sequence[str]],
    style: TableStyle,
) -> Table | None:
    """Build the ``rich`` table for the given content.

    Returns ``None`` when there is nothing to draw (no title, headings
    or rows).  Rows without cells still get one blank column.
    """
    column_count = _column_count(headings, rows)
    if column_count == 0:
        if not title and not rows:
            return None
        column_count = 1

    table = Table(
        title=Text(title) if title else None,
        box=_BOXES[style.border],
        safe_box=False,
        show_header=bool(headings),
        show_lines=style.all_separators,
        min_width=cell_len(title) + _TITLE_MARGIN if title else None,
    )
    for heading in _cells(headings or (), column_count):
        table.add_column(heading, no_wrap=True)
    for row in rows:
        table.add_row(*_cells(row, column_count))
    return table


def render_table(
    *,
    title: str | None,
    headings: Sequence[str] | None,
    rows: Sequence[Sequence[str]],
    style: TableStyle,
) -> str:
    """Render the table to plain text.

    Every line is stripped of trailing whitespace and the result ends
    with a single newline.  An empty table renders as ``""``.
    """
    table = build_table(title=title, headings=headings, rows=rows, style=style)
    if table is None:
        return ""
    width = _natural_width(title, headings, rows, len(table.columns))
    return _to_text(table, width)
