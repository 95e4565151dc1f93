"""Resolve a locale identifier to its numeric date format rule."""
from __future__ import annotations

from functools import lru_cache

import structlog

from ..models.locale import LocaleFormatRule
from .locale_tables import DEFAULT_RULE, LOCALE_RULES

logger = structlog.get_logger(__name__)


def normalize_locale(locale: str | None) -> str:
    """'pt_BR ' -> 'pt-br'."""
    return (locale or "").strip().replace("_", "-").lower()


@lru_cache(maxsize=64)
def resolve(locale: str) -> LocaleFormatRule:
    """Return the format rule for *locale*.

    Exact locale match first, then the bare language subtag, then the
    day-first default. Unknown or empty locales never raise.
    """
    key = normalize_locale(locale)
    if key in LOCALE_RULES:
        return LOCALE_RULES[key]

    language = key.split("-", 1)[0]
    if language in LOCALE_RULES:
        return LOCALE_RULES[language]

    logger.debug("locale_unrecognized", locale=locale, fallback=DEFAULT_RULE.locale)
    return DEFAULT_RULE


def supported_locales() -> list[str]:
    """Canonical ids of all table entries."""
    return sorted({rule.locale for rule in LOCALE_RULES.values()})
