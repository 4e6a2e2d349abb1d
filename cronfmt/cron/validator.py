"""Syntax and bounds checks for a single cron field."""

from cronfmt.errors import (
    ConflictingOperatorsError,
    CronSyntaxError,
    OperatorRepeatedError,
    OutOfRangeError,
)

DIGITS = "0123456789"
OPERATORS = "*/,-"
ALLOWED_PATTERN = r"'^[\*\/\d,-]+$'"


def _number_runs(expression: str) -> list[str]:
    """Maximal runs of consecutive digits, left to right."""
    runs: list[str] = []
    current = ""
    for ch in expression:
        if ch in DIGITS:
            current += ch
        elif current:
            runs.append(current)
            current = ""
    if current:
        runs.append(current)
    return runs


def significant_digits(run: str) -> str:
    """Digit run without leading zeros, ``"0"`` when it is all zeros."""
    return run.lstrip("0") or "0"


def exceeds(digits: str, max_bound: int) -> bool:
    """True when ``digits`` has more places than ``max_bound``, so it is larger."""
    return len(digits) > len(str(max_bound))


def validate_field(expression: str, min_bound: int, max_bound: int, field_name: str) -> None:
    """Check one field against the cron grammar and its numeric bounds.

    Rules are applied in order and the first failure is raised:

    1. only digits and ``*``, ``/``, ``,``, ``-`` are allowed (at least one char);
    2. ``*`` / ``/`` never mix with ``-`` / ``,`` and appear at most once each;
    3. ``-`` never mixes with ``/``, ``,`` or ``*`` and appears at most once;
    4. every number lies within ``[min_bound, max_bound]``.

    Raises:
        CronSyntaxError, ConflictingOperatorsError, OperatorRepeatedError,
        OutOfRangeError.
    """
    if not expression or any(ch not in DIGITS + OPERATORS for ch in expression):
        raise CronSyntaxError(
            f"Invalid cron expression value: {expression} "
            f"(each argument should fall within {ALLOWED_PATTERN} regex)"
        )

    if "*" in expression or "/" in expression:
        if "-" in expression or "," in expression:
            raise ConflictingOperatorsError(
                f"Invalid cron expression value: {expression} "
                "Special operator `*` cannot be used in conjunction `-` or `,`"
            )
        if expression.count("*") > 1 or expression.count("/") > 1:
            raise OperatorRepeatedError(
                f"Invalid cron expression value: {expression} "
                "Special operator `*` or `/` can only be used once"
            )

    if "-" in expression:
        if "/" in expression or "," in expression or "*" in expression:
            raise ConflictingOperatorsError(
                f"Invalid cron expression value: {expression} "
                "Special operator `-` cannot be used in conjunction `/` `*` or `,`"
            )
        if expression.count("-") > 1:
            raise OperatorRepeatedError(
                f"Invalid cron expression value: {expression} "
                "Special operator `-` can only be used once"
            )

    for run in _number_runs(expression):
        digits = significant_digits(run)
        if exceeds(digits, max_bound) or not min_bound <= int(digits) <= max_bound:
            raise OutOfRangeError(f"Invalid {field_name} value: {digits}")
