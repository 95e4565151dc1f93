"""Locale-aware formatting rules for numeric date entry.

A ``LocaleFormatRule`` is the single value the resolver hands to the engine:
it drives rendering, parsing and the calendar header for one locale.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldKind(StrEnum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Granularity(StrEnum):
    DAY = "day"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class LocaleFormatRule(BaseModel):
    """Field order, separator and name tables for one locale.

    ``order`` is always a permutation of the three field kinds. Day and month
    are zero-padded to two digits only when ``pad_day_month`` is set.
    ``month_header`` is a ``str.format`` pattern with ``{month}`` and
    ``{year}`` placeholders.
    """

    model_config = ConfigDict(frozen=True)

    locale: str
    order: tuple[FieldKind, FieldKind, FieldKind]
    separator: str = "/"
    pad_day_month: bool = False
    month_names: tuple[str, ...] = Field(min_length=12, max_length=12)
    short_month_names: tuple[str, ...] = Field(min_length=12, max_length=12)
    weekday_initials: tuple[str, ...] = Field(min_length=7, max_length=7)
    month_header: str = "{month} {year}"

    @field_validator("order")
    @classmethod
    def _order_is_permutation(cls, value: tuple[FieldKind, ...]) -> tuple[FieldKind, ...]:
        if set(value) != set(FieldKind) or len(value) != len(FieldKind):
            raise ValueError(f"order must be a permutation of day/month/year, got {value}")
        return value

    @field_validator("separator")
    @classmethod
    def _separator_not_digit(cls, value: str) -> str:
        if not value or any(ch.isdigit() for ch in value):
            raise ValueError(f"separator must be a non-empty, non-numeric string, got {value!r}")
        return value

    @property
    def day_first(self) -> bool:
        return self.order[0] is FieldKind.DAY

    def month_label(self, year: int, month: int) -> str:
        """Render the localized "<month> <year>" phrase, e.g. ``janeiro de 2023``."""
        return self.month_header.format(month=self.month_names[month - 1], year=year)
