"""Locale rule lookup plus date formatting and parsing endpoints."""
from __future__ import annotations
from datetime import date
from fastapi import APIRouter, Request
from pydantic import BaseModel
import structlog

from ...international.date_formatting import format_date, placeholder
from ...international.date_parsing import parse_date
from ...international.locale_resolver import resolve, supported_locales
from ...models.calendar import CalendarDate, ParseFailure, ParseFailureReason
from ...models.locale import Granularity, LocaleFormatRule

router = APIRouter()
logger = structlog.get_logger(__name__)


class FormatRequest(BaseModel):
    value: date | None = None
    locale: str | None = None
    granularity: Granularity | None = None


class FormatResponse(BaseModel):
    text: str
    locale: str
    placeholder: str


class ParseRequest(BaseModel):
    text: str
    locale: str | None = None
    granularity: Granularity | None = None


class ParseResponse(BaseModel):
    ok: bool
    value: date | None = None
    reason: ParseFailureReason | None = None
    locale: str


def _rule_for(request: Request, locale: str | None) -> LocaleFormatRule:
    return resolve(locale or request.app.state.settings.default_locale)


def _granularity_for(request: Request, granularity: Granularity | None) -> Granularity:
    return granularity or request.app.state.settings.default_granularity


@router.get("/locales")
async def list_locales():
    return {"locales": supported_locales()}


@router.get("/locales/{locale}", response_model=LocaleFormatRule)
async def get_locale_rule(locale: str):
    """Resolved rule; unknown locales get the default rule, never a 404."""
    return resolve(locale)


@router.post("/dates/format", response_model=FormatResponse)
async def format_value(body: FormatRequest, request: Request):
    rule = _rule_for(request, body.locale)
    granularity = _granularity_for(request, body.granularity)
    value = CalendarDate.from_date(body.value) if body.value is not None else None
    return FormatResponse(
        text=format_date(value, rule, granularity),
        locale=rule.locale,
        placeholder=placeholder(rule, granularity),
    )


@router.post("/dates/parse", response_model=ParseResponse)
async def parse_text(body: ParseRequest, request: Request):
    """Parse typed text; failures are a normal 200 response with ``ok=false``."""
    rule = _rule_for(request, body.locale)
    granularity = _granularity_for(request, body.granularity)
    parsed = parse_date(body.text, rule, granularity)
    if isinstance(parsed, ParseFailure):
        return ParseResponse(ok=False, reason=parsed.reason, locale=rule.locale)
    logger.info("date_parsed", text=body.text, value=str(parsed), locale=rule.locale)
    return ParseResponse(ok=True, value=parsed.to_date(), locale=rule.locale)
