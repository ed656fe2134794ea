"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that diagnostics
still reach stderr when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain stderr print.

		*options* are Rich ``Console.print`` keyword arguments and are
		ignored by the plain fallback.
		"""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, **options)

	def print_plain(self, text: str, *, style: str | None = None) -> None:
		"""Print *text* verbatim, without markup, emoji codes or line wrapping."""
		self.print(
			text,
			style=style,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
