"""Display formatting for durations and amounts.

Both functions accept ``None`` for "no summary yet" and return a fixed
placeholder instead of raising. The placeholders can never be produced by a
real value.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from tietracker.domain.settings.models import Settings

TIME_PLACEHOLDER = "--:--:--"
CURRENCY_PLACEHOLDER = "-"

# (group separator, decimal separator) per locale
_SEPARATORS: dict[str, tuple[str, str]] = {
    "en": (",", "."),
    "de": (".", ","),
    "de-ch": ("'", "."),
    "fr": ("\u202f", ","),
    "fr-ch": ("\u202f", ","),
    "it": (".", ","),
    "it-ch": ("'", "."),
}

# Languages writing the symbol after the amount
_SUFFIX_LANGUAGES = {"de", "fr", "it"}

_SYMBOLS: dict[str, str] = {
    "CHF": "CHF",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "USD": "$",
}


def format_time(milliseconds: int | float | None) -> str:
    """Render a duration as ``HH:MM:SS``.

    Hours are not wrapped at 24 (a busy week renders as ``52:10:00``).
    Negative durations render as zero.
    """
    if milliseconds is None:
        return TIME_PLACEHOLDER

    total_seconds = max(0, int(milliseconds)) // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_currency(
    amount: Decimal | float | int | None,
    settings: Settings | None = None,
) -> str:
    """Render an amount in the configured currency and locale.

    Amounts are rounded half-up to two decimals. Unknown locales fall back
    to English separators, unknown currency codes are printed as-is.
    """
    if amount is None:
        return CURRENCY_PLACEHOLDER

    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return CURRENCY_PLACEHOLDER
    if not value.is_finite():
        return CURRENCY_PLACEHOLDER

    settings = settings or Settings()
    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    group, decimal = _separators(settings.locale)

    digits = f"{abs(value):,.2f}"
    digits = digits.replace(",", "\0").replace(".", decimal).replace("\0", group)
    sign = "-" if value < 0 else ""

    code = settings.currency.upper()
    symbol = _SYMBOLS.get(code, code)

    if _language(settings.locale) in _SUFFIX_LANGUAGES:
        return f"{sign}{digits} {symbol}"
    spacer = " " if symbol.isalpha() else ""
    return f"{sign}{symbol}{spacer}{digits}"


def _language(locale: str) -> str:
    return locale.lower().replace("_", "-").split("-")[0]


def _separators(locale: str) -> tuple[str, str]:
    normalized = locale.lower().replace("_", "-")
    if normalized in _SEPARATORS:
        return _SEPARATORS[normalized]
    return _SEPARATORS.get(_language(normalized), _SEPARATORS["en"])


__all__ = [
    "CURRENCY_PLACEHOLDER",
    "TIME_PLACEHOLDER",
    "format_currency",
    "format_time",
]
