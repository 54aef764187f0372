"""Allow ``python -m commons_lang`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m commons_lang`` behaves identically to the ``commons-lang``
console script.
"""

from __future__ import annotations

from commons_lang.cli.app import cli

if __name__ == "__main__":
    cli()
