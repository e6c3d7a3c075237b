"""CLI console helpers.

The Rich console is created per call so that output always follows the
current ``sys.stdout`` (which keeps pytest's ``capsys`` working).  When
Rich is missing, output degrades to plain ``print`` so the CLI error
boundary can still report it.
"""

from __future__ import annotations

import sys
from typing import Any

from tablecraft.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class(highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-print fallback."""

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Render with Rich when available, else plain stdout print.

		Rich-only keyword options are ignored by the fallback.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stdout)
			return
		rich_console.print(*objects, **kwargs)


console = _ConsoleProxy()
