"""Validate-then-expand pipeline over the six cron arguments."""

from collections.abc import Sequence

from loguru import logger

from cronfmt.cron.expander import expand_field
from cronfmt.cron.types import FIELD_SPECS, ExpandedCron, FieldSpec
from cronfmt.cron.validator import validate_field
from cronfmt.errors import CronfmtError, EmptyInputError, WrongArgumentCountError

ARGUMENT_COUNT = len(FIELD_SPECS) + 1


def expand_spec_field(expression: str, spec: FieldSpec) -> str:
    """Validate one field against its spec, then expand it."""
    try:
        validate_field(expression, spec.min_bound, spec.max_bound, spec.name)
        expanded = expand_field(expression, spec.min_bound, spec.max_bound, spec.name)
    except CronfmtError as e:
        logger.debug(f"Rejected {spec.name} {expression!r}: {e.kind.value}")
        raise
    logger.debug(f"Expanded {spec.name} {expression!r} -> {expanded!r}")
    return expanded


def expand_cron(args: Sequence[str]) -> ExpandedCron:
    """Expand minute, hour, day of month, month, day of week and command.

    Arguments are handled left to right and the first failure aborts the run,
    so when several fields are invalid only the leftmost error is raised.

    Raises:
        CronfmtError: any validation or expansion failure.
    """
    if len(args) != ARGUMENT_COUNT:
        raise WrongArgumentCountError("Invalid number of arguments")

    expanded: list[str] = []
    for index, arg in enumerate(args):
        if arg == "":
            raise EmptyInputError("Empty argument identified")
        if index < len(FIELD_SPECS):
            expanded.append(expand_spec_field(arg, FIELD_SPECS[index]))

    minute, hour, day_of_month, month, day_of_week = expanded
    return ExpandedCron(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month=month,
        day_of_week=day_of_week,
        command=args[-1],
    )
