"""Custom exception hierarchy for commons-lang.

Only a handful of inputs are treated as errors.  Missing matches,
out-of-range indices and empty inputs are ordinary return values
(``-1``, ``""``, ``False`` or :data:`~commons_lang.core.models.ABSENT`).

Hierarchy
---------
CommonsLangError
├── InvalidArgumentError
│   ├── InvalidPaddingCharacterError
│   └── InvalidWidthError
├── UnknownOperationError
└── DependencyMissingError
"""

from __future__ import annotations


class CommonsLangError(Exception):
    """Base exception for all commons-lang errors.

    The CLI error boundary renders any subclass as a clean message,
    followed by :attr:`hint` when one is set.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidArgumentError(CommonsLangError):
    """Raised when an argument violates a function's contract."""


class InvalidPaddingCharacterError(InvalidArgumentError):
    """Raised when a padding value is not exactly one printable code point."""


class InvalidWidthError(InvalidArgumentError):
    """Raised when an abbreviation width is below the usable minimum."""


# --- Command line ----------------------------------------------------------

class UnknownOperationError(CommonsLangError):
    """Raised when the CLI is asked for an operation it does not provide."""


# --- Environment -----------------------------------------------------------

class DependencyMissingError(CommonsLangError):
    """Raised when an optional runtime dependency is not installed."""
