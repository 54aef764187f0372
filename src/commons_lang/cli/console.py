"""Output channels for the ``commons-lang`` command.

Two streams, two rules:

* **stderr** carries diagnostics: error messages, hints and the
  ``list`` catalogue.  They are rendered with Rich markup when Rich is
  installed and printed as plain text when it is not.
* **stdout** carries exactly one thing, the result of an operation,
  written byte for byte so that it can be piped into other tools.

Rich is imported on first use, never at module import, so ``--help``
and ``--version`` run on a bare interpreter.
"""

from __future__ import annotations

import sys
from typing import Any

from commons_lang.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyMissingError(
			"rich is not installed.",
			hint="Install with: pip install rich",
		) from exc
	return Console


def escape_markup(text: str) -> str:
	"""Neutralise ``[...]`` in user text before it is embedded in markup.

	Usage hints such as ``value size:int [char]`` would otherwise be
	swallowed as style tags.  Without Rich there is no markup to escape.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Return a fresh Rich console bound to the current ``sys.stderr``.

	Raises
	------
	DependencyMissingError
		When Rich is not installed.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Routes diagnostics to stderr and operation results to stdout."""

	def print(self, *objects: object) -> None:
		"""Show a diagnostic on stderr; markup is dropped without Rich."""
		try:
			rich_console = get_rich_console()
		except DependencyMissingError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def result(self, text: str) -> None:
		"""Write an operation result to stdout, followed by a newline.

		Results never pass through Rich, which would expand tabs and
		drop carriage returns.
		"""
		sys.stdout.write(text + "\n")


console = _ConsoleProxy()
