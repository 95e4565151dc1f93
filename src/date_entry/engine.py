"""Date input engine: the stateful core behind a locale-aware date picker.

The host owns the committed value and passes it in; the engine owns only the
text in the field and the popover's calendar view. ``on_change`` fires with a
calendar-valid ``datetime.date`` on a successful text parse or on a calendar
selection, and on nothing else.
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Literal

import structlog

from .calendar.grid import (
    MonthGrid,
    PickerCell,
    build_decade_grid,
    build_month_grid,
    build_year_grid,
    header_label,
    step_view,
    zoom_out,
)
from .config import Settings
from .international.date_formatting import format_date, placeholder
from .international.date_parsing import parse_date, year_token_complete
from .international.locale_resolver import resolve
from .models.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarDate,
    CalendarView,
    ParseFailure,
    ViewMode,
    days_in_month,
)
from .models.locale import Granularity, LocaleFormatRule

logger = structlog.get_logger(__name__)

CommitOn = Literal["change", "blur"]

INITIAL_VIEW_MODE = {
    Granularity.DAY: ViewMode.DAY,
    Granularity.MONTH: ViewMode.YEAR,
    Granularity.QUARTER: ViewMode.YEAR,
    Granularity.YEAR: ViewMode.DECADE,
}


def _coerce(value: date | CalendarDate | None) -> CalendarDate | None:
    if value is None or isinstance(value, CalendarDate):
        return value
    return CalendarDate.from_date(value)


class DateInputEngine:
    """Keeps the displayed text, the calendar view and the committed value consistent."""

    def __init__(
        self,
        value: date | CalendarDate | None,
        on_change: Callable[[date], None],
        locale: str,
        granularity: Granularity | str = Granularity.DAY,
        commit_on: CommitOn = "change",
        today: Callable[[], date] = date.today,
    ):
        self._on_change = on_change
        self._today = today
        self.granularity = Granularity(granularity)
        self.commit_on = commit_on
        self.locale = locale
        self.rule: LocaleFormatRule = resolve(locale)
        self.value: CalendarDate | None = _coerce(value)
        self.text: str = format_date(self.value, self.rule, self.granularity)
        self.view: CalendarView | None = None
        self._dirty = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        value: date | CalendarDate | None,
        on_change: Callable[[date], None],
        locale: str | None = None,
        **kwargs,
    ) -> DateInputEngine:
        """Engine using the configured default locale, granularity and commit mode."""
        kwargs.setdefault("granularity", settings.default_granularity)
        kwargs.setdefault("commit_on", settings.commit_on)
        return cls(value, on_change, locale or settings.default_locale, **kwargs)

    # ── Host-driven updates ────────────────────────────────────────────────

    def set_value(self, value: date | CalendarDate | None) -> None:
        """The host pushed a committed value; the field shows it verbatim."""
        self.value = _coerce(value)
        self.text = format_date(self.value, self.rule, self.granularity)
        self._dirty = False
        if self.view is not None and self.value is not None:
            self.view = CalendarView(year=self.value.year, month=self.value.month, mode=self.view.mode)

    def set_locale(self, locale: str) -> None:
        self.locale = locale
        self.rule = resolve(locale)
        if not self._dirty:
            self.text = format_date(self.value, self.rule, self.granularity)

    @property
    def placeholder(self) -> str:
        return placeholder(self.rule, self.granularity)

    # ── Text input ─────────────────────────────────────────────────────────

    def edit(self, text: str) -> CalendarDate | None:
        """The user changed the field text.

        Returns the committed date when this edit committed one. Invalid or
        partial text stays in the field and nothing is notified. In "change"
        mode a keystroke commits only once the year has all four digits;
        shorter years such as "4/7/5" are committed on blur.
        """
        self.text = text
        self._dirty = True
        if self.commit_on == "blur":
            return None
        return self._commit_text()

    def blur(self) -> CalendarDate | None:
        if not self._dirty:
            return None
        parsed = parse_date(self.text, self.rule, self.granularity)
        if isinstance(parsed, ParseFailure):
            logger.debug("date_text_reset", text=self.text, reason=parsed.reason.value)
            self.text = format_date(self.value, self.rule, self.granularity)
            self._dirty = False
            return None
        self._dirty = False
        if parsed == self.value:
            return None
        self._commit(parsed, source="text")
        self._follow(parsed)
        return parsed

    def focus(self) -> None:
        self.open_calendar()

    def _commit_text(self) -> CalendarDate | None:
        if not year_token_complete(self.text, self.rule):
            return None
        parsed = parse_date(self.text, self.rule, self.granularity)
        if isinstance(parsed, ParseFailure):
            return None
        self._commit(parsed, source="text")
        self._follow(parsed)
        return parsed

    def _commit(self, value: CalendarDate, source: str) -> None:
        self.value = value
        logger.info("date_committed", value=str(value), source=source, locale=self.rule.locale)
        self._on_change(value.to_date())

    def _follow(self, value: CalendarDate) -> None:
        if self.view is not None:
            self.view = CalendarView(year=value.year, month=value.month, mode=self.view.mode)

    # ── Calendar popover ───────────────────────────────────────────────────

    @property
    def calendar_open(self) -> bool:
        return self.view is not None

    def open_calendar(self) -> CalendarView:
        if self.view is None:
            anchor = self.value if self.value is not None else CalendarDate.from_date(self._today())
            self.view = CalendarView(
                year=anchor.year,
                month=anchor.month,
                mode=INITIAL_VIEW_MODE[self.granularity],
            )
        return self.view

    def close_calendar(self) -> None:
        self.view = None

    def toggle_calendar(self) -> None:
        if self.view is None:
            self.open_calendar()
        else:
            self.close_calendar()

    def previous_page(self) -> None:
        if self.view is not None:
            self.view = step_view(self.view, -1)

    def next_page(self) -> None:
        if self.view is not None:
            self.view = step_view(self.view, +1)

    def header_click(self) -> None:
        if self.view is not None:
            self.view = zoom_out(self.view)

    @property
    def header(self) -> str | None:
        """Popover header label, or None while the popover is closed."""
        if self.view is None:
            return None
        return header_label(self.view, self.rule)

    def month_grid(self) -> MonthGrid | None:
        if self.view is None:
            return None
        return build_month_grid(self.view.year, self.view.month, self.rule)

    def year_grid(self) -> list[PickerCell] | None:
        if self.view is None:
            return None
        return build_year_grid(self.view.year, self.rule, self.granularity, self.value)

    def decade_grid(self) -> list[PickerCell] | None:
        if self.view is None:
            return None
        return build_decade_grid(self.view.year, self.value)

    def select_day(self, day: int) -> CalendarDate | None:
        """Commit *day* of the displayed month, whatever the field text says."""
        view = self.open_calendar()
        if not 1 <= day <= days_in_month(view.year, view.month):
            logger.warning("calendar_day_out_of_range", year=view.year, month=view.month, day=day)
            return None
        return self._select(CalendarDate(year=view.year, month=view.month, day=day))

    def select_month(self, month: int) -> CalendarDate | None:
        view = self.open_calendar()
        if not 1 <= month <= 12:
            logger.warning("calendar_month_out_of_range", year=view.year, month=month)
            return None
        if self.granularity in (Granularity.MONTH, Granularity.QUARTER):
            return self._select(CalendarDate(year=view.year, month=month, day=1))
        self.view = CalendarView(year=view.year, month=month, mode=ViewMode.DAY)
        return None

    def select_year(self, year: int) -> CalendarDate | None:
        view = self.open_calendar()
        if not MIN_YEAR <= year <= MAX_YEAR:
            logger.warning("calendar_year_out_of_range", year=year)
            return None
        if self.granularity == Granularity.YEAR:
            return self._select(CalendarDate(year=year, month=1, day=1))
        self.view = CalendarView(year=year, month=view.month, mode=ViewMode.YEAR)
        return None

    def _select(self, value: CalendarDate) -> CalendarDate:
        self._commit(value, source="calendar")
        self.text = format_date(value, self.rule, self.granularity)
        self._dirty = False
        self.close_calendar()
        return value
