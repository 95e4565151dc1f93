"""Calendar value types shared by the parser, the grid builder and the engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_YEAR = 1
MAX_YEAR = 9999


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


class CalendarDate(BaseModel):
    """A wall-clock date with no time of day and no timezone.

    Invalid combinations (April 31, February 29 outside leap years) are
    rejected at construction; nothing rolls over into the next month.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=MIN_YEAR, le=MAX_YEAR)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _day_fits_month(self) -> CalendarDate:
        limit = days_in_month(self.year, self.month)
        if self.day > limit:
            raise ValueError(f"day {self.day} out of range for {self.year}-{self.month:02d} (max {limit})")
        return self

    @classmethod
    def from_date(cls, value: date) -> CalendarDate:
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class ParseFailureReason(StrEnum):
    EMPTY = "empty"
    FIELD_COUNT = "field_count"
    NON_NUMERIC = "non_numeric"
    YEAR_RANGE = "year_range"
    MONTH_RANGE = "month_range"
    DAY_RANGE = "day_range"


class ParseFailure(BaseModel):
    """Returned, never raised, when typed text is not a calendar-valid date."""

    model_config = ConfigDict(frozen=True)

    text: str
    reason: ParseFailureReason

    def __bool__(self) -> bool:
        return False


class ViewMode(StrEnum):
    DAY = "day"        # day grid of one month
    YEAR = "year"      # month (or quarter) picker
    DECADE = "decade"  # year picker


@dataclass(frozen=True)
class CalendarView:
    """The (year, month) pair shown in the popover, plus the zoom level."""

    year: int
    month: int
    mode: ViewMode = ViewMode.DAY

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in [1, 12], got {self.month}")

    @property
    def decade_start(self) -> int:
        return self.year // 10 * 10
