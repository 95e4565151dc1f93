"""Calendar grid endpoints for the date picker popover."""
from __future__ import annotations
from fastapi import APIRouter, Path, Query, Request
from pydantic import BaseModel

from ...calendar.grid import build_decade_grid, build_month_grid, build_year_grid, shift_month
from ...international.locale_resolver import resolve
from ...models.locale import Granularity

router = APIRouter()


class GridDayOut(BaseModel):
    day: int
    weekday: int


class MonthGridOut(BaseModel):
    year: int
    month: int
    header: str
    weekday_labels: list[str]
    leading_blanks: int
    days: list[GridDayOut]
    weeks: list[list[int | None]]
    previous: tuple[int, int]
    next: tuple[int, int]


class PickerCellOut(BaseModel):
    label: str
    value: int


# Registered before the "/{year}" routes so "decade" is not taken for a year
@router.get("/decade/{year}", response_model=list[PickerCellOut])
async def decade_grid(year: int = Path(ge=1, le=9999)):
    return [PickerCellOut(label=c.label, value=c.value) for c in build_decade_grid(year)]


@router.get("/{year}/{month}", response_model=MonthGridOut)
async def month_grid(
    request: Request,
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    locale: str | None = Query(default=None),
):
    rule = resolve(locale or request.app.state.settings.default_locale)
    grid = build_month_grid(year, month, rule)
    return MonthGridOut(
        year=year,
        month=month,
        header=grid.header,
        weekday_labels=list(grid.weekday_labels),
        leading_blanks=grid.leading_blanks,
        days=[GridDayOut(day=d.day, weekday=d.weekday) for d in grid.days()],
        weeks=grid.weeks(),
        previous=shift_month(year, month, -1),
        next=shift_month(year, month, +1),
    )


@router.get("/{year}", response_model=list[PickerCellOut])
async def year_grid(
    request: Request,
    year: int = Path(ge=1, le=9999),
    locale: str | None = Query(default=None),
    granularity: Granularity = Query(default=Granularity.DAY),
):
    """Month picker, or quarter picker for ``granularity=quarter``."""
    rule = resolve(locale or request.app.state.settings.default_locale)
    return [PickerCellOut(label=c.label, value=c.value) for c in build_year_grid(year, rule, granularity)]
