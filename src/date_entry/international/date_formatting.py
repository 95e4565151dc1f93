"""Render calendar dates as text for a locale rule."""
from __future__ import annotations

from ..models.calendar import CalendarDate
from ..models.locale import FieldKind, Granularity, LocaleFormatRule


def _field_text(value: CalendarDate, kind: FieldKind, pad: bool) -> str:
    if kind is FieldKind.YEAR:
        return str(value.year)
    number = value.day if kind is FieldKind.DAY else value.month
    return f"{number:02d}" if pad else str(number)


def format_date(
    value: CalendarDate | None,
    rule: LocaleFormatRule,
    granularity: Granularity = Granularity.DAY,
) -> str:
    """Format *value* for display in the input field.

    - DAY: numeric fields in ``rule.order`` joined by ``rule.separator``
      ("15/01/2023" for pt-BR, "1/15/2023" for en-US)
    - MONTH: localized month header ("janeiro de 2023")
    - QUARTER: "Q1 2023"
    - YEAR: "2023"
    """
    if value is None:
        return ""

    if granularity == Granularity.YEAR:
        return str(value.year)
    if granularity == Granularity.QUARTER:
        return f"Q{quarter_of(value.month)} {value.year}"
    if granularity == Granularity.MONTH:
        return rule.month_label(value.year, value.month)

    return rule.separator.join(_field_text(value, kind, rule.pad_day_month) for kind in rule.order)


def quarter_of(month: int) -> int:
    return (month - 1) // 3 + 1


def placeholder(rule: LocaleFormatRule, granularity: Granularity = Granularity.DAY) -> str:
    """Input placeholder such as 'DD/MM/YYYY' or 'M/D/YYYY'."""
    if granularity != Granularity.DAY:
        return granularity.value
    width = 2 if rule.pad_day_month else 1
    tokens = {
        FieldKind.DAY: "D" * width,
        FieldKind.MONTH: "M" * width,
        FieldKind.YEAR: "YYYY",
    }
    return rule.separator.join(tokens[kind] for kind in rule.order)
