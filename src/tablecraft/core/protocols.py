"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the command processor can be driven in tests
without touching the filesystem.
"""

from __future__ import annotations

from typing import Protocol


class TableWriter(Protocol):
    """Contract for persisting a rendered table."""

    def write(self, filename: str, text: str) -> None:
        """Write *text* verbatim to *filename*, replacing any existing file.

        Raises
        ------
        TableSaveError
            When the destination cannot be written.
        """
        ...  # pragma: no cover
