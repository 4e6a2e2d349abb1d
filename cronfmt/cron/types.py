"""Cron types (Pydantic models with CamelCase JSON aliases)."""

from pydantic import BaseModel, ConfigDict, Field


class FieldSpec(BaseModel):
    """Bounds and display name of one positional cron field."""

    name: str
    min_bound: int
    max_bound: int

    model_config = ConfigDict(frozen=True)


MINUTE = FieldSpec(name="minute", min_bound=0, max_bound=59)
HOUR = FieldSpec(name="hour", min_bound=0, max_bound=23)
DAY_OF_MONTH = FieldSpec(name="day of month", min_bound=1, max_bound=31)
MONTH = FieldSpec(name="month", min_bound=1, max_bound=12)
DAY_OF_WEEK = FieldSpec(name="day of week", min_bound=0, max_bound=6)

# Positional order of the five time fields
FIELD_SPECS: tuple[FieldSpec, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)


class ExpandedCron(BaseModel):
    """A cron expression with every time field fully expanded."""

    minute: str = Field(alias="Minute")
    hour: str = Field(alias="Hour")
    day_of_month: str = Field(alias="DayOfMonth")
    month: str = Field(alias="Month")
    day_of_week: str = Field(alias="DayOfWeek")
    command: str = Field(alias="Command")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def rows(self) -> list[tuple[str, str]]:
        """(label, value) pairs in display order."""
        return [
            (MINUTE.name, self.minute),
            (HOUR.name, self.hour),
            (DAY_OF_MONTH.name, self.day_of_month),
            (MONTH.name, self.month),
            (DAY_OF_WEEK.name, self.day_of_week),
            ("command", self.command),
        ]
