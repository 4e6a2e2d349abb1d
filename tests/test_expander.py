"""Tests for field classification, expansion and the step range rule."""

import pytest

from cronfmt.cron.expander import (
    Range,
    Single,
    SteppedWildcard,
    ValueList,
    Wildcard,
    classify,
    expand_field,
    step_range,
)
from cronfmt.errors import (
    FailureKind,
    InvalidStepError,
    InvertedRangeError,
    OutOfRangeError,
    RangeParseError,
    UnrecognizedExpressionError,
)


class TestStepRange:
    """Multiples of the step in [1, max], with a conditional leading zero."""

    def test_leading_zero_when_step_divides_field_size(self) -> None:
        assert step_range(0, 59, 15) == [0, 15, 30, 45]

    def test_no_leading_zero_when_step_does_not_divide(self) -> None:
        assert step_range(0, 59, 18) == [18, 36, 54]

    def test_hour_step_three(self) -> None:
        assert step_range(0, 23, 3) == [0, 3, 6, 9, 12, 15, 18, 21]

    def test_one_based_fields_never_get_zero(self) -> None:
        assert step_range(1, 12, 4) == [4, 8, 12]
        assert step_range(1, 12, 1) == list(range(1, 13))

    def test_step_one_from_zero_is_full_range(self) -> None:
        assert step_range(0, 6, 1) == [0, 1, 2, 3, 4, 5, 6]

    def test_step_larger_than_max_is_empty(self) -> None:
        assert step_range(1, 12, 13) == []

    def test_step_equal_to_max(self) -> None:
        assert step_range(0, 59, 59) == [59]

    @pytest.mark.parametrize("step", [0, -1])
    def test_rejects_non_positive_step(self, step: int) -> None:
        with pytest.raises(ValueError):
            step_range(0, 59, step)

    @pytest.mark.parametrize("step", range(1, 60))
    def test_zero_iff_step_divides_sixty(self, step: int) -> None:
        values = step_range(0, 59, step)
        assert (values[:1] == [0]) == (60 % step == 0)
        assert all(v % step == 0 for v in values)
        assert values == sorted(values)


class TestClassify:
    """Shapes are recognised by scanning the expression."""

    @pytest.mark.parametrize(
        ("expression", "shape"),
        [
            ("*", Wildcard()),
            ("*/5", SteppedWildcard(5)),
            ("1-5", Range(1, 5)),
            ("5,1,5", ValueList(("5", "1", "5"))),
            ("07", Single("07")),
        ],
    )
    def test_shapes(self, expression: str, shape) -> None:
        assert classify(expression, 59, "minute") == shape

    @pytest.mark.parametrize("expression", ["", "**", "*/", "*/x", "5-", "-5", "1,", ",1", "1,,2", "/5", "abc"])
    def test_unrecognized(self, expression: str) -> None:
        with pytest.raises(UnrecognizedExpressionError) as exc:
            classify(expression, 23, "hour")
        assert str(exc.value) == "Invalid hour expression or not yet recognisable"
        assert exc.value.kind is FailureKind.UNRECOGNIZED_EXPRESSION

    @pytest.mark.parametrize("expression", ["a-5", "1-b", "1,2-3"])
    def test_non_numeric_range_side(self, expression: str) -> None:
        with pytest.raises(RangeParseError, match="in minute as int"):
            classify(expression, 59, "minute")


class TestExpandField:
    """Expansion of each shape."""

    def test_wildcard_minute(self) -> None:
        assert expand_field("*", 0, 59, "minute") == " ".join(str(i) for i in range(60))

    def test_wildcard_month(self) -> None:
        assert expand_field("*", 1, 12, "month") == "1 2 3 4 5 6 7 8 9 10 11 12"

    @pytest.mark.parametrize(("lo", "hi"), [(0, 59), (0, 23), (1, 31), (1, 12), (0, 6)])
    def test_wildcard_equals_full_range(self, lo: int, hi: int) -> None:
        assert expand_field("*", lo, hi, "f") == expand_field(f"{lo}-{hi}", lo, hi, "f")

    def test_range(self) -> None:
        assert expand_field("1-5", 0, 6, "day of week") == "1 2 3 4 5"

    def test_range_not_starting_at_bound(self) -> None:
        assert expand_field("10-13", 1, 31, "day of month") == "10 11 12 13"

    def test_range_from_zero_includes_zero(self) -> None:
        assert expand_field("0-3", 0, 23, "hour") == "0 1 2 3"

    def test_degenerate_range(self) -> None:
        assert expand_field("4-4", 0, 6, "day of week") == "4"

    def test_inverted_range(self) -> None:
        with pytest.raises(InvertedRangeError) as exc:
            expand_field("5-1", 0, 59, "minute")
        assert str(exc.value) == "Invalid range in minute: 5-1"
        assert exc.value.kind is FailureKind.INVERTED_RANGE

    def test_stepped_wildcard(self) -> None:
        assert expand_field("*/15", 0, 59, "minute") == "0 15 30 45"
        assert expand_field("*/18", 0, 59, "minute") == "18 36 54"
        assert expand_field("*/4", 1, 12, "month") == "4 8 12"

    def test_zero_step(self) -> None:
        with pytest.raises(InvalidStepError, match="Invalid step in minute: \\*/0"):
            expand_field("*/0", 0, 59, "minute")

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [("5,10", "5 10"), ("5,1", "5 1"), ("3,3,3", "3 3 3"), ("1,2,3,4,5", "1 2 3 4 5")],
    )
    def test_list_is_verbatim(self, expression: str, expected: str) -> None:
        assert expand_field(expression, 0, 59, "minute") == expected

    def test_list_is_not_bounds_checked(self) -> None:
        assert expand_field("1,99", 0, 59, "minute") == "1 99"

    @pytest.mark.parametrize("value", ["0", "6", "59", "007"])
    def test_single_value_unchanged(self, value: str) -> None:
        assert expand_field(value, 0, 59, "minute") == value

    @pytest.mark.parametrize("expression", ["*/1", "1-59", "*"])
    def test_output_has_no_operators(self, expression: str) -> None:
        expanded = expand_field(expression, 0, 59, "minute")
        assert not any(ch in expanded for ch in "*/-,")
        assert all(0 <= int(tok) <= 59 for tok in expanded.split())


class TestLongOperands:
    """Range and step operands wider than the bound never reach int()."""

    def test_huge_step(self) -> None:
        with pytest.raises(OutOfRangeError, match="Invalid minute value"):
            classify("*/" + "9" * 5000, 59, "minute")

    def test_huge_range_end(self) -> None:
        with pytest.raises(OutOfRangeError):
            expand_field("1-" + "9" * 5000, 0, 59, "minute")

    def test_zero_padded_operands(self) -> None:
        assert classify("*/" + "0" * 5000 + "15", 59, "minute") == SteppedWildcard(15)
        assert expand_field("0" * 5000 + "2-0003", 0, 6, "day of week") == "2 3"
