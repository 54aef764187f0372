"""CLI application entry point and command routing for commons-lang.

This module is the **sole error boundary** for the command line.  It
catches :class:`~commons_lang.exceptions.CommonsLangError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering a
short message and returning a well-defined exit code.

No string logic lives here.  Operations are looked up in
:mod:`commons_lang.cli.operations` and delegated to the core layer.
"""

from __future__ import annotations

import argparse
import sys

from commons_lang.cli import exit_codes
from commons_lang.cli.console import console, escape_markup
from commons_lang.exceptions import CommonsLangError
from commons_lang.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``commons-lang <operation> [args...]`` runs one string operation.
    * ``commons-lang list`` shows every operation.
    * ``commons-lang --version`` prints the version.
    """
    parser = argparse.ArgumentParser(
        prog="commons-lang",
        description="Run a commons-lang string helper from the command line.",
        epilog="Run 'commons-lang list' to see every operation and its arguments.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        default=None,
        help="Operation name (e.g. 'abbreviate'), or 'list'.",
    )
    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the operation, in order.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_operation(name: str, raw_args: list[str]) -> int:
    """Run one operation and print its rendered result on stdout."""
    from commons_lang.cli.operations import run_operation

    output = run_operation(name, raw_args)
    if output is not None:
        console.result(output)
    return exit_codes.SUCCESS


def _handle_list() -> int:
    """Dispatch the ``list`` command."""
    from commons_lang.cli.catalog import run_list

    return run_list()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the commons-lang CLI.

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

    if args.operation is None:
        parser.print_help()
        return exit_codes.SUCCESS

    operation: str = args.operation

    if operation.lower() == "list":
        return _handle_list()

    return _handle_operation(operation, list(args.arguments))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CommonsLangError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
