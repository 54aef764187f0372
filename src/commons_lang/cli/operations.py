"""Registry of string operations reachable from the command line.

Each :class:`Operation` pairs a core function with the argument kinds
needed to turn raw command-line text into call arguments, and knows how
to render the function's result back to text.  No string logic lives
here; everything is delegated to :mod:`commons_lang.core`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from commons_lang.core import search, substring
from commons_lang.core.models import Absent, Present
from commons_lang.exceptions import InvalidArgumentError, UnknownOperationError

ParamKind = Literal["text", "int", "bool"]

_TRUE_WORDS = frozenset({"true", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "no", "0"})


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Param:
    """One positional argument of an operation."""

    name: str
    kind: ParamKind = "text"
    required: bool = True
    variadic: bool = False
    """Accepts any number of trailing values, including none."""

    def usage(self) -> str:
        label = f"{self.name}..." if self.variadic else self.name
        if self.kind != "text":
            label = f"{label}:{self.kind}"
        return label if self.required and not self.variadic else f"[{label}]"


@dataclass(frozen=True, slots=True)
class Operation:
    """A named core function plus its command-line signature."""

    name: str
    func: Callable[..., Any]
    params: tuple[Param, ...]
    summary: str

    def signature(self) -> str:
        return " ".join(param.usage() for param in self.params)

    def usage(self) -> str:
        return f"commons-lang {self.name} {self.signature()}".rstrip()


# ---------------------------------------------------------------------------
# Argument conversion
# ---------------------------------------------------------------------------

def _convert(raw: str, param: Param, operation: Operation) -> object:
    if param.kind == "int":
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"{param.name!r} must be an integer, got {raw!r}.",
                hint=f"Usage: {operation.usage()}",
            ) from exc
    if param.kind == "bool":
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise InvalidArgumentError(
            f"{param.name!r} must be true or false, got {raw!r}.",
            hint=f"Usage: {operation.usage()}",
        )
    return raw


def parse_arguments(operation: Operation, raw_args: Sequence[str]) -> list[object]:
    """Convert *raw_args* into call arguments for *operation*.

    Raises
    ------
    InvalidArgumentError
        On wrong arity or an unparseable integer / boolean.
    """
    fixed = [param for param in operation.params if not param.variadic]
    variadic = next((param for param in operation.params if param.variadic), None)
    required = sum(1 for param in fixed if param.required)

    too_few = len(raw_args) < required
    too_many = variadic is None and len(raw_args) > len(fixed)
    if too_few or too_many:
        raise InvalidArgumentError(
            f"{operation.name} expects {operation.signature() or 'no arguments'}, "
            f"got {len(raw_args)} argument(s).",
            hint=f"Usage: {operation.usage()}",
        )

    slots = list(fixed)
    if variadic is not None:
        slots.extend([variadic] * (len(raw_args) - len(fixed)))
    return [_convert(raw, param, operation) for raw, param in zip(raw_args, slots)]


def format_result(result: object) -> str | None:
    """Render a core return value as text; ``None`` means print nothing."""
    if isinstance(result, Absent):
        return None
    if isinstance(result, Present):
        return result.value
    if isinstance(result, bool):
        return "true" if result else "false"
    return str(result)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_VALUE = Param("value")
_TEXT_CANDIDATES = Param("candidates", variadic=True)
_PAD_CHAR = Param("char", required=False)
_IGNORE_CASE = Param("ignore_case", kind="bool", required=False)

OPERATIONS: tuple[Operation, ...] = (
    # Substring & padding
    Operation("substr", substring.substr,
              (_VALUE, Param("start", "int"), Param("length", "int")),
              "Code points [start, start+length), clamped to the end."),
    Operation("substr-left", substring.substr_left,
              (_VALUE, Param("end", "int")), "Code points before end."),
    Operation("substr-right", substring.substr_right,
              (_VALUE, Param("start", "int")), "Code points from start onwards."),
    Operation("substr-before", substring.substr_before,
              (_VALUE, Param("separator")), "Text before the first separator."),
    Operation("substr-after", substring.substr_after,
              (_VALUE, Param("separator")), "Text after the first separator."),
    Operation("substr-after-last", substring.substr_after_last,
              (_VALUE, Param("separator")), "Text after the last separator."),
    Operation("abbreviate", substring.abbreviate,
              (_VALUE, Param("max_width", "int")), "Shorten to max_width with '...'."),
    Operation("chop", substring.chop, (_VALUE,), "Drop the last character (CR LF as one)."),
    Operation("remove-last-separator", substring.remove_last_separator,
              (_VALUE,), "Drop one trailing CR LF, LF or CR."),
    Operation("capitalize", substring.capitalize, (_VALUE,), "Upper-case the first character."),
    Operation("left-pad", substring.left_pad,
              (_VALUE, Param("size", "int"), _PAD_CHAR), "Pad on the left up to size."),
    Operation("right-pad", substring.right_pad,
              (_VALUE, Param("size", "int"), _PAD_CHAR), "Pad on the right up to size."),
    Operation("center", substring.center,
              (_VALUE, Param("size", "int"), _PAD_CHAR), "Pad both sides up to size."),
    # Search & comparison
    Operation("has-suffix-ignore-case", search.has_suffix_ignore_case,
              (_VALUE, Param("suffix")), "Case-insensitive suffix test."),
    Operation("append-if-missing", search.append_if_missing,
              (_VALUE, Param("suffix"), _IGNORE_CASE), "Append suffix unless already there."),
    Operation("contains-none", search.contains_none,
              (_VALUE, _TEXT_CANDIDATES), "True if no candidate occurs."),
    Operation("contains-only", search.contains_only,
              (_VALUE, _TEXT_CANDIDATES), "True if removing candidates leaves nothing."),
    Operation("first-non-empty", search.first_non_empty,
              (Param("values", variadic=True),), "First non-empty value, if any."),
    Operation("common-prefix", search.common_prefix,
              (Param("values", variadic=True),), "Longest prefix shared by all values."),
    Operation("get-digits", search.get_digits, (_VALUE,), "Every ASCII digit, in order."),
    Operation("index-of-any", search.index_of_any,
              (_VALUE, _TEXT_CANDIDATES), "Position of the first candidate found after 0."),
    Operation("index-of-difference", search.index_of_difference,
              (Param("values", variadic=True),), "First position where values differ."),
    Operation("last-index-of", search.last_index_of,
              (_VALUE, Param("target")), "Position of the last target."),
    Operation("last-index-of-with-start-pos", search.last_index_of_with_start_pos,
              (_VALUE, Param("target"), Param("start_pos", "int")),
              "Position of the last target at or before start_pos."),
    Operation("last-index-of-any", search.last_index_of_any,
              (_VALUE, _TEXT_CANDIDATES), "Rightmost position of any candidate."),
    Operation("right", search.right,
              (_VALUE, Param("length", "int")), "The last length characters."),
    Operation("rotate", search.rotate,
              (_VALUE, Param("shift", "int")), "Circular shift; positive is rightward."),
    Operation("starts-with", search.starts_with,
              (Param("prefix"), Param("text"), _IGNORE_CASE),
              "True if text begins with a non-empty prefix."),
)

_BY_NAME: dict[str, Operation] = {operation.name: operation for operation in OPERATIONS}


def get_operation(name: str) -> Operation:
    """Look up an operation by name; ``_`` and ``-`` are interchangeable."""
    operation = _BY_NAME.get(name.lower().replace("_", "-"))
    if operation is None:
        raise UnknownOperationError(
            f"Unknown operation {name!r}.",
            hint="Run 'commons-lang list' to see the available operations.",
        )
    return operation


def run_operation(name: str, raw_args: Sequence[str]) -> str | None:
    """Parse *raw_args*, call the named operation, and render its result."""
    operation = get_operation(name)
    arguments = parse_arguments(operation, raw_args)
    return format_result(operation.func(*arguments))
