"""Mutable table model: title, headings, rows and style.

:class:`TableState` knows nothing about commands or text parsing.  Its
only error policy for indices is clamping: an out-of-range index is
redirected to the nearest valid boundary, never rejected.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from tablecraft.core.models import BorderStyle, TableStyle
from tablecraft.core.renderer import render_table

_STYLE_OPTIONS: frozenset[str] = frozenset(
    field.name for field in dataclasses.fields(TableStyle)
)


def _clamp(index: int, upper: int) -> int:
    """Clamp *index* into ``[0, upper]``."""
    return max(0, min(index, upper))


class TableState:
    """Configuration and content of the table being built."""

    def __init__(self) -> None:
        self.title: str = ""
        self.title_enabled: bool = False
        self.headings: list[str] = []
        self.headings_enabled: bool = False
        self.rows: list[list[str]] = []
        self.style: TableStyle = TableStyle(border=BorderStyle.ASCII)

    # ------------------------------------------------------------------
    # Title / headings
    # ------------------------------------------------------------------

    def set_title(self, text: str) -> None:
        """Set the title, or disable it when *text* is empty."""
        if not text:
            self.title_enabled = False
            return
        self.title = text
        self.title_enabled = True

    def set_headings(self, headings: Sequence[str]) -> None:
        """Set the headings, or disable them when *headings* is empty."""
        if not headings:
            self.headings_enabled = False
            return
        self.headings = list(headings)
        self.headings_enabled = True

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def insert_row(self, row: Sequence[str], index: int | None = None) -> int:
        """Insert *row* at *index* (append by default).

        Indices past the end append; negative indices insert first.
        Returns the position the row actually landed at.
        """
        position = len(self.rows) if index is None else _clamp(index, len(self.rows))
        self.rows.insert(position, list(row))
        return position

    def remove_row(self, index: int | None = None) -> list[str] | None:
        """Remove and return the row at *index* (last row by default).

        Indices past the end remove the last row; negative indices remove
        the first.  Returns ``None`` when the table has no rows.
        """
        if not self.rows:
            return None
        last = len(self.rows) - 1
        position = last if index is None else _clamp(index, last)
        return self.rows.pop(position)

    def clear(self) -> None:
        """Drop every row.  Title, headings and style are kept."""
        self.rows = []

    # ------------------------------------------------------------------
    # Style
    # ------------------------------------------------------------------

    def set_style_option(self, key: str, value: object) -> None:
        """Upsert a single style option by name.

        Values are not validated here; the command layer only passes
        values it has already checked.

        Raises
        ------
        KeyError
            If *key* does not name a style option.
        """
        if key not in _STYLE_OPTIONS:
            raise KeyError(key)
        self.style = dataclasses.replace(self.style, **{key: value})

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the table as text.  Identical state gives identical text."""
        return render_table(
            title=self.title if self.title_enabled else None,
            headings=self.headings if self.headings_enabled else None,
            rows=self.rows,
            style=self.style,
        )
