#!/usr/bin/env python3
"""Print a locale-aware month grid and sample formatting/parsing to the terminal."""
import sys
from datetime import date

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from date_entry.calendar.grid import build_month_grid
from date_entry.config import Settings
from date_entry.international.date_formatting import format_date, placeholder
from date_entry.international.date_parsing import parse_date
from date_entry.international.locale_resolver import resolve
from date_entry.models.calendar import CalendarDate, ParseFailure
from date_entry.utils.logging import setup_logging


def main(argv: list[str]) -> None:
    """calendar_preview.py [locale] [year] [month] [text-to-parse]"""
    settings = Settings()
    setup_logging(settings.log_level, json_output=False)

    today = date.today()
    locale = argv[0] if len(argv) > 0 else settings.default_locale
    year = int(argv[1]) if len(argv) > 1 else today.year
    month = int(argv[2]) if len(argv) > 2 else today.month

    rule = resolve(locale)
    grid = build_month_grid(year, month, rule)

    print(f"Locale: {locale} -> {rule.locale} ({placeholder(rule)})")
    print("-" * 27)
    print(grid.header.center(27))
    print(" ".join(label.rjust(3) for label in grid.weekday_labels))
    for week in grid.weeks():
        print(" ".join(("" if cell is None else str(cell)).rjust(3) for cell in week))
    print()
    print(f"First of month: {format_date(CalendarDate(year=year, month=month, day=1), rule)}")

    if len(argv) > 3:
        parsed = parse_date(argv[3], rule)
        if isinstance(parsed, ParseFailure):
            print(f"Parse '{argv[3]}': failed ({parsed.reason.value})")
            sys.exit(1)
        print(f"Parse '{argv[3]}': {parsed}")


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print("Usage: python scripts/calendar_preview.py [locale] [year] [month] [text-to-parse]")
        sys.exit(1)
