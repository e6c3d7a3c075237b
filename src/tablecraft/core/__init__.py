"""Core layer — the table model, rendering and command processing.

Rules
-----
* No ``print()`` calls.
* No filesystem access; saving goes through :class:`TableWriter`.
* No imports from ``cli`` or ``infra``.
"""

from tablecraft.core.commands import Command, CommandProcessor
from tablecraft.core.models import BorderStyle, CommandResult, ResultKind, TableStyle
from tablecraft.core.protocols import TableWriter
from tablecraft.core.table_state import TableState

__all__: list[str] = [
    "BorderStyle",
    "Command",
    "CommandProcessor",
    "CommandResult",
    "ResultKind",
    "TableState",
    "TableStyle",
    "TableWriter",
]
