"""commons-lang: generic helpers for booleans, sequences, ordering and strings.

Every helper is a pure function over immutable values.  String helpers
index by Unicode code point, never by storage unit.
"""

from commons_lang.version import __version__

__all__: list[str] = ["__version__"]
