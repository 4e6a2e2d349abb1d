"""Cron package.

`cron.types` is a stable contract (Pydantic models).
Field rules live in `cron.validator` and `cron.expander`; `cron.service`
chains them over the six arguments.
"""

from cronfmt.cron.expander import expand_field, step_range
from cronfmt.cron.service import expand_cron
from cronfmt.cron.types import FIELD_SPECS, ExpandedCron, FieldSpec
from cronfmt.cron.validator import validate_field

__all__ = [
    "ExpandedCron",
    "FieldSpec",
    "FIELD_SPECS",
    "expand_cron",
    "expand_field",
    "step_range",
    "validate_field",
]
