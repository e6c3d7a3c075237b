"""Custom exception hierarchy for tablecraft.

User mistakes at the prompt are never exceptions: the command layer
reports them as :class:`~tablecraft.core.models.CommandResult` values.
Exceptions are reserved for conditions outside the table model, and
all of them inherit from :class:`TablecraftError` so the CLI error
boundary can render a clean message.

Hierarchy
---------
TablecraftError
├── TableSaveError
└── EnvironmentError
"""

from __future__ import annotations


class TablecraftError(Exception):
    """Base exception for all tablecraft errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Persistence -----------------------------------------------------------

class TableSaveError(TablecraftError):
    """Raised when the rendered table cannot be written to disk."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TablecraftError):
    """Raised when a required runtime dependency is not available."""
