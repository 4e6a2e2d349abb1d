"""Expansion of a single cron field into its explicit value list.

A field is first classified into one of five shapes by scanning its
characters, then each shape is expanded on its own terms. The expander is
normally called after ``validate_field`` succeeded, but it checks the shape
again and raises if nothing matches.
"""

from dataclasses import dataclass

from cronfmt.errors import (
    InvalidStepError,
    InvertedRangeError,
    OutOfRangeError,
    RangeParseError,
    UnrecognizedExpressionError,
)
from cronfmt.cron.validator import DIGITS, exceeds, significant_digits


@dataclass(frozen=True)
class Wildcard:
    """``*``"""


@dataclass(frozen=True)
class Range:
    """``A-B``"""

    start: int
    end: int


@dataclass(frozen=True)
class SteppedWildcard:
    """``*/N``"""

    step: int


@dataclass(frozen=True)
class ValueList:
    """``A,B,...`` kept as the caller wrote the tokens."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class Single:
    """A lone decimal token, kept verbatim."""

    value: str


FieldShape = Wildcard | Range | SteppedWildcard | ValueList | Single


def _is_decimal(text: str) -> bool:
    return bool(text) and all(ch in DIGITS for ch in text)


def _parse_int(text: str, max_bound: int, field_name: str) -> int:
    if not _is_decimal(text):
        raise RangeParseError(
            f"Unknown error occurred while parsing {text} in {field_name} as int"
        )
    digits = significant_digits(text)
    if exceeds(digits, max_bound):
        raise OutOfRangeError(f"Invalid {field_name} value: {digits}")
    return int(digits)


def step_range(min_bound: int, max_bound: int, step: int) -> list[int]:
    """Multiples of ``step`` in ``[1, max_bound]``, ascending.

    A leading ``0`` is added only when ``min_bound`` is 0 and ``step`` evenly
    divides ``max_bound + 1``. So ``step_range(0, 59, 15)`` starts at 0 but
    ``step_range(0, 59, 18)`` is ``[18, 36, 54]``. Output relies on this
    exact rule.
    """
    if step < 1:
        raise ValueError(f"step must be positive, got {step}")

    values = [0] if min_bound == 0 and (max_bound + 1) % step == 0 else []
    values.extend(i for i in range(1, max_bound + 1) if i % step == 0)
    return values


def _render(values: list[int]) -> str:
    return " ".join(str(v) for v in values)


def classify(expression: str, max_bound: int, field_name: str) -> FieldShape:
    """Work out which shape a field expression has.

    Raises:
        RangeParseError: a one-dash expression with a non-numeric side.
        OutOfRangeError: a range or step operand wider than ``max_bound``.
        UnrecognizedExpressionError: no shape matched.
    """
    if expression == "*":
        return Wildcard()

    if expression.startswith("*/") and _is_decimal(expression[2:]):
        return SteppedWildcard(_parse_int(expression[2:], max_bound, field_name))

    if expression.count("-") == 1 and not expression.startswith("-") and not expression.endswith("-"):
        start, _, end = expression.partition("-")
        return Range(_parse_int(start, max_bound, field_name), _parse_int(end, max_bound, field_name))

    tokens = expression.split(",")
    if len(tokens) >= 2 and all(_is_decimal(t) for t in tokens):
        return ValueList(tuple(tokens))

    if _is_decimal(expression):
        return Single(expression)

    raise UnrecognizedExpressionError(f"Invalid {field_name} expression or not yet recognisable")


def expand_field(expression: str, min_bound: int, max_bound: int, field_name: str) -> str:
    """Expand a field to its space-separated list of matching values."""
    shape = classify(expression, max_bound, field_name)

    if isinstance(shape, Wildcard):
        return _render(step_range(min_bound, max_bound, 1))

    if isinstance(shape, Range):
        if shape.start > shape.end:
            raise InvertedRangeError(f"Invalid range in {field_name}: {expression}")
        return _render(list(range(shape.start, shape.end + 1)))

    if isinstance(shape, SteppedWildcard):
        if shape.step == 0:
            raise InvalidStepError(f"Invalid step in {field_name}: {expression}")
        return _render(step_range(min_bound, max_bound, shape.step))

    if isinstance(shape, ValueList):
        # Order and duplicates are preserved
        return " ".join(shape.values)

    return shape.value
