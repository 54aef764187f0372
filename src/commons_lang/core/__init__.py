"""Core layer: pure helpers over immutable values.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from commons_lang.core.booleans import and_all, or_any
from commons_lang.core.models import ABSENT, Absent, OptionalText, Present
from commons_lang.core.ordering import max_value, min_value
from commons_lang.core.search import (
    append_if_missing,
    common_prefix,
    contains_none,
    contains_only,
    first_non_empty,
    get_digits,
    has_suffix_ignore_case,
    index_of_any,
    index_of_difference,
    last_index_of,
    last_index_of_any,
    last_index_of_with_start_pos,
    length_of_strings,
    right,
    rotate,
    safe_deref,
    starts_with,
)
from commons_lang.core.sequences import add
from commons_lang.core.substring import (
    CR,
    LF,
    abbreviate,
    capitalize,
    center,
    chop,
    left_pad,
    remove_last_separator,
    right_pad,
    substr,
    substr_after,
    substr_after_last,
    substr_before,
    substr_left,
    substr_right,
)

__all__: list[str] = [
    "ABSENT",
    "Absent",
    "CR",
    "LF",
    "OptionalText",
    "Present",
    "abbreviate",
    "add",
    "and_all",
    "append_if_missing",
    "capitalize",
    "center",
    "chop",
    "common_prefix",
    "contains_none",
    "contains_only",
    "first_non_empty",
    "get_digits",
    "has_suffix_ignore_case",
    "index_of_any",
    "index_of_difference",
    "last_index_of",
    "last_index_of_any",
    "last_index_of_with_start_pos",
    "left_pad",
    "length_of_strings",
    "max_value",
    "min_value",
    "or_any",
    "remove_last_separator",
    "right",
    "right_pad",
    "rotate",
    "safe_deref",
    "starts_with",
    "substr",
    "substr_after",
    "substr_after_last",
    "substr_before",
    "substr_left",
    "substr_right",
]
