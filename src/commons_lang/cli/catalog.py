"""``commons-lang list``: render the catalogue of available operations.

Uses a Rich table when Rich is installed and a fixed-width plain-text
table on stderr otherwise.
"""

from __future__ import annotations

import sys

from commons_lang.cli import exit_codes
from commons_lang.cli.console import console
from commons_lang.cli.operations import OPERATIONS
from commons_lang.version import __version__


def _catalog_rows() -> list[tuple[str, str, str]]:
    """Return (name, arguments, summary) for every registered operation."""
    return [
        (operation.name, operation.signature(), operation.summary)
        for operation in OPERATIONS
    ]


def _print_plain_catalog(rows: list[tuple[str, str, str]]) -> None:
    """Render the catalogue without Rich."""
    print(f"\ncommons-lang {__version__} operations", file=sys.stderr)
    print("=" * 96, file=sys.stderr)
    print(f"{'Operation':<30} {'Arguments':<36} Summary", file=sys.stderr)
    print("-" * 96, file=sys.stderr)
    for name, arguments, summary in rows:
        print(f"{name:<30} {arguments:<36} {summary}", file=sys.stderr)
    print(file=sys.stderr)


def run_list() -> int:
    """Render every operation with its argument signature.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    rows = _catalog_rows()

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_catalog(rows)
        return exit_codes.SUCCESS

    table = Table(
        title=f"commons-lang {__version__} operations",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Operation", style="bold", min_width=12)
    table.add_column("Arguments", min_width=20)
    table.add_column("Summary")

    for name, arguments, summary in rows:
        table.add_row(name, escape(arguments), escape(summary))

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
