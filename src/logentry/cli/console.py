"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap
paths (``--help``, ``--version``) and plain submissions remain
functional even when Rich is not installed.

Two proxies are exported: :data:`console` writes diagnostics to stderr,
:data:`output` writes results (lognumber messages, XML previews) to
stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from logentry.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print.

		*options* are forwarded to ``rich.console.Console.print`` and
		ignored by the fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, **options)

	def print_plain(self, text: str) -> None:
		"""Write *text* verbatim, without markup or highlighting."""
		self.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
