"""Domain models for tablecraft.

Value objects are **frozen** dataclasses.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Table style
# ---------------------------------------------------------------------------

class BorderStyle(str, Enum):
    """Glyph set used to draw the table borders and separators."""

    ASCII = "ascii"
    MARKDOWN = "markdown"
    UNICODE = "unicode"
    UNICODE_ROUND = "unicode_round"
    UNICODE_THICK_EDGE = "unicode_thick_edge"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the accepted style names in declaration order."""
        return tuple(member.value for member in cls)


@dataclass(frozen=True, slots=True)
class TableStyle:
    """Rendering options for a table.

    Every option has a default, so a freshly created style is always
    complete.
    """

    border: BorderStyle = BorderStyle.ASCII
    """Border glyph set."""

    all_separators: bool = False
    """Draw a separator line between every row, not only under the headings."""


# ---------------------------------------------------------------------------
# Command results
# ---------------------------------------------------------------------------

class ResultKind(str, Enum):
    """Classification of a processed command."""

    TABLE = "table"
    """Success; ``text`` is the freshly rendered table."""

    MESSAGE = "message"
    """Success; ``text`` is an informational message."""

    ERROR = "error"
    """The command was rejected; state is unchanged."""


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one input line handed to the command processor."""

    kind: ResultKind
    text: str
    hint: str | None = None
    """Optional follow-up guidance (e.g. the list of valid values)."""

    exit_session: bool = False
    """``True`` when the session should end after displaying this result."""

    @classmethod
    def table(cls, text: str) -> CommandResult:
        return cls(ResultKind.TABLE, text)

    @classmethod
    def message(cls, text: str, *, exit_session: bool = False) -> CommandResult:
        return cls(ResultKind.MESSAGE, text, exit_session=exit_session)

    @classmethod
    def error(cls, text: str, *, hint: str | None = None) -> CommandResult:
        return cls(ResultKind.ERROR, text, hint=hint)

    @property
    def is_error(self) -> bool:
        return self.kind is ResultKind.ERROR
