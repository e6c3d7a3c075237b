"""Shared pytest fixtures and configuration for the tablecraft test suite.

Guidelines
----------
* Core tests must be pure — no filesystem, no terminal.
* File writes go to ``tmp_path`` only.
* The interactive prompt is always replaced by a scripted line reader.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from tablecraft.core.commands import CommandProcessor
from tablecraft.core.table_state import TableState


class RecordingWriter:
    """In-memory :class:`TableWriter` that remembers every write."""

    def __init__(self) -> None:
        self.writes: list[tuple[str, str]] = []

    def write(self, filename: str, text: str) -> None:
        self.writes.append((filename, text))


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def processor(writer: RecordingWriter) -> CommandProcessor:
    return CommandProcessor(writer, TableState())


def _scripted_reader(lines: Iterable[str]) -> Callable[[], str]:
    """Return a line reader that yields *lines* then signals end of input."""
    iterator = iter(lines)

    def read_line() -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[], str]]:
    return _scripted_reader
