"""Exit-code constants used by the CLI layer.

Every exit path returns one of these values instead of a bare integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The operation ran and its result (if any) was printed."""

GENERAL_ERROR: int = 1
"""A CommonsLangError was caught and its message shown."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the CommonsLangError hierarchy escaped."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
