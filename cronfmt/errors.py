"""Shared error types for cronfmt.

Every failure in the validate/expand pipeline is terminal. The first error
raised aborts the whole run and its message is shown to the user verbatim.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Why a cron expression was rejected."""

    EMPTY_INPUT = "EmptyInput"
    WRONG_ARGUMENT_COUNT = "WrongArgumentCount"
    SYNTAX_ERROR = "SyntaxError"
    CONFLICTING_OPERATORS = "ConflictingOperators"
    OPERATOR_REPEATED = "OperatorRepeated"
    OUT_OF_RANGE = "OutOfRange"
    INVERTED_RANGE = "InvertedRange"
    RANGE_PARSE_ERROR = "RangeParseError"
    INVALID_STEP = "InvalidStep"
    UNRECOGNIZED_EXPRESSION = "UnrecognizedExpression"


class CronfmtError(Exception):
    """Base error for cronfmt."""

    kind: FailureKind


class EmptyInputError(CronfmtError):
    """One of the six arguments is an empty string."""

    kind = FailureKind.EMPTY_INPUT


class WrongArgumentCountError(CronfmtError):
    """Anything other than exactly six arguments was supplied."""

    kind = FailureKind.WRONG_ARGUMENT_COUNT


class CronSyntaxError(CronfmtError):
    """Expression holds a character outside digits and `*/,-`."""

    kind = FailureKind.SYNTAX_ERROR


class ConflictingOperatorsError(CronfmtError):
    """`*` or `/` mixed with `-` or `,`."""

    kind = FailureKind.CONFLICTING_OPERATORS


class OperatorRepeatedError(CronfmtError):
    """`*`, `/` or `-` used more than once."""

    kind = FailureKind.OPERATOR_REPEATED


class OutOfRangeError(CronfmtError):
    """A number falls outside the field's bounds."""

    kind = FailureKind.OUT_OF_RANGE


class InvertedRangeError(CronfmtError):
    """Range start is greater than its end."""

    kind = FailureKind.INVERTED_RANGE


class RangeParseError(CronfmtError):
    """A range or step operand is not a decimal integer."""

    kind = FailureKind.RANGE_PARSE_ERROR


class InvalidStepError(CronfmtError):
    """Step of zero in a `*/N` expression."""

    kind = FailureKind.INVALID_STEP


class UnrecognizedExpressionError(CronfmtError):
    """Expression does not match any supported shape."""

    kind = FailureKind.UNRECOGNIZED_EXPRESSION
