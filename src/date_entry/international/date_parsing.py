"""Locale-aware parsing of free-typed numeric dates."""
from __future__ import annotations
import re

import structlog

from ..models.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarDate,
    ParseFailure,
    ParseFailureReason,
    days_in_month,
)
from ..models.locale import FieldKind, Granularity, LocaleFormatRule

logger = structlog.get_logger(__name__)

# Separators accepted regardless of locale, in addition to the rule's own
ALTERNATE_SEPARATORS = ("/", "-", ".")

_DIGITS = re.compile(r'^[0-9]+$')
_YEAR_ONLY = re.compile(r'^[0-9]{4}$')

# Widest token each field accepts; longer digit runs are out of range
FIELD_WIDTHS = {FieldKind.DAY: 2, FieldKind.MONTH: 2, FieldKind.YEAR: 4}
FULL_YEAR_WIDTH = 4

_RANGE_FAILURES = {
    FieldKind.DAY: ParseFailureReason.DAY_RANGE,
    FieldKind.MONTH: ParseFailureReason.MONTH_RANGE,
    FieldKind.YEAR: ParseFailureReason.YEAR_RANGE,
}


def _split_fields(text: str, separator: str) -> list[str]:
    separators = {separator, *ALTERNATE_SEPARATORS}
    pattern = "|".join(re.escape(s) for s in sorted(separators, key=len, reverse=True))
    return [token.strip() for token in re.split(pattern, text)]


def _fail(text: str, reason: ParseFailureReason) -> ParseFailure:
    logger.debug("date_parse_failed", text=text, reason=reason.value)
    return ParseFailure(text=text, reason=reason)


def parse_date(
    text: str,
    rule: LocaleFormatRule,
    granularity: Granularity = Granularity.DAY,
) -> CalendarDate | ParseFailure:
    """Parse typed text into a calendar date using the rule's field order.

    The three numeric tokens are assigned to day/month/year strictly by
    ``rule.order``; "05/03/2024" is 5 March under pt-BR and 3 May under
    en-US. Out-of-range values are failures, never clamped. For month,
    quarter and year granularity a lone four-digit year is also accepted and
    means 1 January of that year.
    """
    s = (text or "").strip()
    if not s:
        return _fail(s, ParseFailureReason.EMPTY)

    if granularity != Granularity.DAY and _YEAR_ONLY.match(s):
        year = int(s)
        if year < MIN_YEAR:
            return _fail(s, ParseFailureReason.YEAR_RANGE)
        return CalendarDate(year=year, month=1, day=1)

    tokens = _split_fields(s, rule.separator)
    if len(tokens) != 3:
        return _fail(s, ParseFailureReason.FIELD_COUNT)
    if not all(_DIGITS.match(token) for token in tokens):
        return _fail(s, ParseFailureReason.NON_NUMERIC)

    for kind, token in zip(rule.order, tokens):
        if len(token) > FIELD_WIDTHS[kind]:
            return _fail(s, _RANGE_FAILURES[kind])

    fields = {kind: int(token) for kind, token in zip(rule.order, tokens)}
    year, month, day = fields[FieldKind.YEAR], fields[FieldKind.MONTH], fields[FieldKind.DAY]

    if not MIN_YEAR <= year <= MAX_YEAR:
        return _fail(s, ParseFailureReason.YEAR_RANGE)
    if not 1 <= month <= 12:
        return _fail(s, ParseFailureReason.MONTH_RANGE)
    if not 1 <= day <= days_in_month(year, month):
        return _fail(s, ParseFailureReason.DAY_RANGE)

    return CalendarDate(year=year, month=month, day=day)


def is_date_ambiguous(text: str, rule: LocaleFormatRule) -> bool:
    """True when swapping the day and month fields would also give a valid date."""
    parsed = parse_date(text, rule)
    if isinstance(parsed, ParseFailure):
        return False
    if parsed.day == parsed.month or parsed.day > 12:
        return False
    return True


def year_token_complete(text: str, rule: LocaleFormatRule) -> bool:
    """True once the year token of *text* has been typed to its full four digits.

    Used to hold back keystroke commits while the year is still being typed,
    so "31/12/2" is not taken as the year 2.
    """
    s = (text or "").strip()
    if _YEAR_ONLY.match(s):
        return True
    tokens = _split_fields(s, rule.separator)
    if len(tokens) != 3:
        return False
    year_token = tokens[rule.order.index(FieldKind.YEAR)]
    return len(year_token) >= FULL_YEAR_WIDTH
