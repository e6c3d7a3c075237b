"""CLI application entry point for tablecraft.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tablecraft.exceptions.TablecraftError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No table logic lives here — all work is delegated to the core layer
  through the interactive session.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from tablecraft.cli import exit_codes
from tablecraft.cli.console import console
from tablecraft.exceptions import EnvironmentError, TablecraftError
from tablecraft.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="tablecraft",
        description="Build ASCII/Unicode tables interactively.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Skip the welcome message.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _handle_session(*, banner: bool) -> int:
    """Wire the core processor to the file writer and run the session."""
    try:
        from tablecraft.cli.session import InteractiveSession
        from tablecraft.core.commands import CommandProcessor
    except ModuleNotFoundError as exc:
        package = (exc.name or "rich").split(".")[0]
        raise EnvironmentError(
            f"{package} is not installed. Install with: pip install {package}",
        ) from exc
    from tablecraft.infra.file_writer import FileTableWriter

    processor = CommandProcessor(FileTableWriter())
    return InteractiveSession(processor).run(banner=banner)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tablecraft CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _handle_session(banner=not args.no_banner)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except TablecraftError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
