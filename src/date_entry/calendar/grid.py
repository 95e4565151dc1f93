"""Pure calendar grid construction for the date picker popover.

Three zoom levels share this module: the day grid of one month, the month
(or quarter) picker of one year and the year picker of one decade. None of
them hold state; the engine rebuilds them from its ``CalendarView`` on every
render.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from ..models.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarDate,
    CalendarView,
    ViewMode,
    days_in_month,
)
from ..models.locale import Granularity, LocaleFormatRule


def weekday_of(year: int, month: int, day: int) -> int:
    """Column index of a date, 0 = Sunday .. 6 = Saturday."""
    return (date(year, month, day).weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move *delta* months, carrying into the year (0 -> December of the previous year)."""
    carry, index = divmod(month - 1 + delta, 12)
    return year + carry, index + 1


@dataclass(frozen=True)
class GridDay:
    day: int
    weekday: int


@dataclass(frozen=True)
class MonthGrid:
    """Day grid for one month.

    ``days()`` is a fresh generator on every call, so the grid can be
    iterated any number of times.
    """

    year: int
    month: int
    header: str
    weekday_labels: tuple[str, ...]

    @property
    def day_count(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def leading_blanks(self) -> int:
        return weekday_of(self.year, self.month, 1)

    def days(self) -> Iterator[GridDay]:
        first = self.leading_blanks
        for day in range(1, self.day_count + 1):
            yield GridDay(day=day, weekday=(first + day - 1) % 7)

    def __iter__(self) -> Iterator[GridDay]:
        return self.days()

    def weeks(self) -> list[list[int | None]]:
        """Rows of seven cells, ``None`` for slots outside the month."""
        cells: list[int | None] = [None] * self.leading_blanks
        cells.extend(d.day for d in self.days())
        cells.extend([None] * (-len(cells) % 7))
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]


@dataclass(frozen=True)
class PickerCell:
    """One selectable cell of the month/quarter or year picker."""

    label: str
    value: int
    selected: bool = False


def build_month_grid(year: int, month: int, rule: LocaleFormatRule) -> MonthGrid:
    return MonthGrid(
        year=year,
        month=month,
        header=rule.month_label(year, month),
        weekday_labels=rule.weekday_initials,
    )


QUARTER_START_MONTHS = (1, 4, 7, 10)


def build_year_grid(
    year: int,
    rule: LocaleFormatRule,
    granularity: Granularity = Granularity.DAY,
    selected: CalendarDate | None = None,
) -> list[PickerCell]:
    """Month picker for *year*; quarter picker when granularity is QUARTER.

    Cell values are the month number (the quarter's first month for quarters).
    """
    if granularity == Granularity.QUARTER:
        selected_quarter = None
        if selected is not None and selected.year == year:
            selected_quarter = (selected.month - 1) // 3
        return [
            PickerCell(label=f"Q{i + 1}", value=start, selected=selected_quarter == i)
            for i, start in enumerate(QUARTER_START_MONTHS)
        ]

    return [
        PickerCell(
            label=rule.short_month_names[month - 1],
            value=month,
            selected=selected is not None and selected.year == year and selected.month == month,
        )
        for month in range(1, 13)
    ]


def build_decade_grid(year: int, selected: CalendarDate | None = None) -> list[PickerCell]:
    """Year cells for the decade containing *year*, clipped to years 1..9999."""
    start = year // 10 * 10
    return [
        PickerCell(label=str(y), value=y, selected=selected is not None and selected.year == y)
        for y in range(max(start, MIN_YEAR), min(start + 10, MAX_YEAR + 1))
    ]


def header_label(view: CalendarView, rule: LocaleFormatRule) -> str:
    if view.mode == ViewMode.DECADE:
        start = view.decade_start
        return f"{start} - {start + 9}"
    if view.mode == ViewMode.YEAR:
        return str(view.year)
    return rule.month_label(view.year, view.month)


def step_view(view: CalendarView, direction: int) -> CalendarView:
    """Previous (-1) or next (+1) page for the view's zoom level.

    Stays put at the edges of the representable year range.
    """
    if view.mode == ViewMode.DAY:
        year, month = shift_month(view.year, view.month, direction)
    else:
        step = 10 if view.mode == ViewMode.DECADE else 1
        year, month = view.year + step * direction, view.month
    if not MIN_YEAR <= year <= MAX_YEAR:
        return view
    return CalendarView(year=year, month=month, mode=view.mode)


def zoom_out(view: CalendarView) -> CalendarView:
    if view.mode == ViewMode.DAY:
        return CalendarView(year=view.year, month=view.month, mode=ViewMode.YEAR)
    return CalendarView(year=view.year, month=view.month, mode=ViewMode.DECADE)
