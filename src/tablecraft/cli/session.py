"""Interactive read-eval-print loop for building a table.

This module is responsible for:

* Reading one line per turn with questionary (history included).
* Handing each line to the :class:`~tablecraft.core.commands.CommandProcessor`.
* Styling and printing each :class:`~tablecraft.core.models.CommandResult`.

All table logic lives in the core layer; nothing here mutates state
directly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich.text import Text

from tablecraft.cli import exit_codes
from tablecraft.cli.console import console
from tablecraft.core.commands import CommandProcessor
from tablecraft.core.models import CommandResult, ResultKind
from tablecraft.exceptions import EnvironmentError

PROMPT: str = ">>>"

LineReader = Callable[[], str]
"""Returns the next input line; raises ``EOFError``/``KeyboardInterrupt`` to stop."""


def _import_questionary() -> Any:
    """Import questionary lazily for line input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def questionary_reader() -> LineReader:
    """Build a line reader backed by a questionary text prompt.

    Entered lines are kept in an in-memory history for the lifetime of
    the reader, so the arrow keys recall earlier commands.
    """
    questionary = _import_questionary()
    from prompt_toolkit.history import InMemoryHistory

    history = InMemoryHistory()

    def read_line() -> str:
        answer: str | None = questionary.text(
            PROMPT, qmark="", history=history,
        ).unsafe_ask()
        if answer is None:
            raise EOFError
        return answer

    return read_line


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_banner() -> None:
    """Print the welcome message shown when a session starts."""
    console.print(
        "[green]Welcome to the interactive[/green] [bold blue]tablecraft[/bold blue][green]![/green]"
    )
    console.print("[green]Type[/green] [yellow]help[/yellow] [green]for a list of commands.[/green]")
    console.print(
        "[green]Type[/green] [red]exit[/red] [green]or press[/green] "
        "[red]CTRL+C[/red] [green]to quit.[/green]"
    )


def print_result(result: CommandResult) -> None:
    """Print *result* with a colour matching its kind.

    User text is wrapped in :class:`rich.text.Text` so square brackets
    in cells are never read as markup.
    """
    if not result.text:
        return
    if result.kind is ResultKind.TABLE:
        console.print(Text(result.text.rstrip("\n")), soft_wrap=True)
    elif result.kind is ResultKind.ERROR:
        console.print(Text(result.text, style="red"), soft_wrap=True)
    else:
        console.print(Text(result.text, style="green"), soft_wrap=True)
    if result.hint:
        console.print(Text(result.hint, style="yellow"), soft_wrap=True)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class InteractiveSession:
    """One interactive run, from the banner to ``exit`` or end of input.

    Parameters
    ----------
    processor:
        Command processor owning the table for this session.
    read_line:
        Source of input lines.  Defaults to :func:`questionary_reader`.
    """

    def __init__(
        self,
        processor: CommandProcessor,
        read_line: LineReader | None = None,
    ) -> None:
        self._processor: CommandProcessor = processor
        self._read_line: LineReader = (
            read_line if read_line is not None else questionary_reader()
        )

    def run(self, *, banner: bool = True) -> int:
        """Process lines until ``exit``, Ctrl+C or end of input.

        Returns
        -------
        int
            Always :data:`exit_codes.SUCCESS`; both ways of leaving are
            graceful.
        """
        if banner:
            print_banner()

        while True:
            try:
                line = self._read_line()
            except (EOFError, KeyboardInterrupt):
                console.print()
                return exit_codes.SUCCESS

            result = self._processor.execute(line)
            print_result(result)
            if result.exit_session:
                return exit_codes.SUCCESS
