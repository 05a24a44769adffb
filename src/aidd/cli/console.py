"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
clones remain functional even when Rich is not installed.  Without Rich,
markup tags are stripped and tables are rendered as aligned text.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import Any

from aidd.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(
	r"\[/?(?:bold|dim|italic|red|green|yellow|cyan|blue|magenta)"
	r"(?: (?:bold|dim|italic|red|green|yellow|cyan|blue|magenta))*\]"
)


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
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def strip_markup(text: str) -> str:
	"""Remove the Rich style tags this CLI emits."""
	return _MARKUP_TAG.sub("", text)


def escape(text: str) -> str:
	"""Escape *text* so Rich renders square brackets literally."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)

	def table(
		self,
		title: str,
		columns: Sequence[str],
		rows: Sequence[Sequence[str]],
	) -> None:
		"""Render *rows* as a Rich table, or aligned plain text without Rich."""
		try:
			from rich.table import Table
		except ModuleNotFoundError:
			self._plain_table(title, columns, rows)
			return

		table = Table(
			title=title,
			show_header=True,
			header_style="bold cyan",
			border_style="dim",
		)
		for column in columns:
			table.add_column(column)
		for row in rows:
			table.add_row(*row)
		self.print(table)

	@staticmethod
	def _plain_table(
		title: str,
		columns: Sequence[str],
		rows: Sequence[Sequence[str]],
	) -> None:
		plain_rows = [[strip_markup(cell) for cell in row] for row in rows]
		widths = [len(column) for column in columns]
		for row in plain_rows:
			for index, cell in enumerate(row):
				widths[index] = max(widths[index], len(cell))

		rule = "-" * (sum(widths) + 2 * (len(widths) - 1))
		print(title, file=sys.stderr)
		print("  ".join(c.ljust(w) for c, w in zip(columns, widths)).rstrip(), file=sys.stderr)
		print(rule, file=sys.stderr)
		for row in plain_rows:
			print("  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip(), file=sys.stderr)


console = _ConsoleProxy()
