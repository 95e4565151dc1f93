"""Static locale tables: field order, separators and month/weekday names."""
from __future__ import annotations

from ..models.locale import FieldKind, LocaleFormatRule

DMY = (FieldKind.DAY, FieldKind.MONTH, FieldKind.YEAR)
MDY = (FieldKind.MONTH, FieldKind.DAY, FieldKind.YEAR)

# Month names (index 0 = January)
MONTH_NAMES: dict[str, tuple[str, ...]] = {
    'en': ('January', 'February', 'March', 'April', 'May', 'June',
           'July', 'August', 'September', 'October', 'November', 'December'),
    'pt': ('janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
           'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro'),
    'es': ('enero', 'febrero', 'marzo', 'abril', 'mayo', 'junio',
           'julio', 'agosto', 'septiembre', 'octubre', 'noviembre', 'diciembre'),
    'fr': ('janvier', 'février', 'mars', 'avril', 'mai', 'juin',
           'juillet', 'août', 'septembre', 'octobre', 'novembre', 'décembre'),
    'de': ('Januar', 'Februar', 'März', 'April', 'Mai', 'Juni',
           'Juli', 'August', 'September', 'Oktober', 'November', 'Dezember'),
}

SHORT_MONTH_NAMES: dict[str, tuple[str, ...]] = {
    'en': ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec'),
    'pt': ('jan.', 'fev.', 'mar.', 'abr.', 'mai.', 'jun.', 'jul.', 'ago.', 'set.', 'out.', 'nov.', 'dez.'),
    'es': ('ene', 'feb', 'mar', 'abr', 'may', 'jun', 'jul', 'ago', 'sept', 'oct', 'nov', 'dic'),
    'fr': ('janv.', 'févr.', 'mars', 'avr.', 'mai', 'juin', 'juil.', 'août', 'sept.', 'oct.', 'nov.', 'déc.'),
    'de': ('Jan.', 'Feb.', 'März', 'Apr.', 'Mai', 'Juni', 'Juli', 'Aug.', 'Sept.', 'Okt.', 'Nov.', 'Dez.'),
}

# Sunday first, matching the grid's column order
WEEKDAY_INITIALS: dict[str, tuple[str, ...]] = {
    'en': ('S', 'M', 'T', 'W', 'T', 'F', 'S'),
    'pt': ('D', 'S', 'T', 'Q', 'Q', 'S', 'S'),
    'es': ('D', 'L', 'M', 'X', 'J', 'V', 'S'),
    'fr': ('D', 'L', 'M', 'M', 'J', 'V', 'S'),
    'de': ('S', 'M', 'D', 'M', 'D', 'F', 'S'),
}

MONTH_HEADERS: dict[str, str] = {
    'en': '{month} {year}',
    'pt': '{month} de {year}',
    'es': '{month} de {year}',
    'fr': '{month} {year}',
    'de': '{month} {year}',
}


def _rule(locale: str, language: str, order, separator: str = "/", pad: bool = False) -> LocaleFormatRule:
    return LocaleFormatRule(
        locale=locale,
        order=order,
        separator=separator,
        pad_day_month=pad,
        month_names=MONTH_NAMES[language],
        short_month_names=SHORT_MONTH_NAMES[language],
        weekday_initials=WEEKDAY_INITIALS[language],
        month_header=MONTH_HEADERS[language],
    )


# Keys are lower-case; bare languages point at their most common region.
LOCALE_RULES: dict[str, LocaleFormatRule] = {
    'pt-br': _rule('pt-BR', 'pt', DMY, pad=True),
    'pt-pt': _rule('pt-PT', 'pt', DMY, pad=True),
    'pt': _rule('pt-BR', 'pt', DMY, pad=True),
    'en-us': _rule('en-US', 'en', MDY),
    'en-gb': _rule('en-GB', 'en', DMY, pad=True),
    'en': _rule('en-US', 'en', MDY),
    'es-es': _rule('es-ES', 'es', DMY),
    'es': _rule('es-ES', 'es', DMY),
    'fr-fr': _rule('fr-FR', 'fr', DMY, pad=True),
    'fr': _rule('fr-FR', 'fr', DMY, pad=True),
    'de-de': _rule('de-DE', 'de', DMY, separator="."),
    'de': _rule('de-DE', 'de', DMY, separator="."),
}

# Day-first with English names for anything not in the table
DEFAULT_RULE = _rule('und', 'en', DMY, pad=True)
