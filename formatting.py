"""
Locale-aware currency formatting for Tip Calculator

Two implementations share the CurrencyFormatter interface:
- BabelCurrencyFormatter: symbol, currency code and number pattern from CLDR data via Babel
- FallbackCurrencyFormatter: "$" / "USD" with a fixed two-decimal pattern, used when
  no locale can be resolved
"""
from __future__ import annotations
import decimal
import logging
from datetime import date
from typing import Optional

from babel import Locale, UnknownLocaleError, default_locale
from babel.numbers import format_currency, get_currency_symbol, get_territory_currencies

logger = logging.getLogger(__name__)

FALLBACK_CURRENCY_CODE = "USD"
FALLBACK_CURRENCY_SYMBOL = "$"
# enough significant digits to quantize any finite float to cents
DECIMAL_PRECISION = 400


class CurrencyFormatter:
    """Formats monetary values for display"""
    code: str = FALLBACK_CURRENCY_CODE
    symbol: str = FALLBACK_CURRENCY_SYMBOL

    def format(self, value: float) -> str:
        raise NotImplementedError


class FallbackCurrencyFormatter(CurrencyFormatter):
    """Formatter used when locale data is unavailable"""

    def format(self, value: float) -> str:
        return f"{self.symbol}{value:,.2f}"


class BabelCurrencyFormatter(CurrencyFormatter):
    """Formatter backed by Babel locale data"""

    def __init__(self, locale: Locale, code: Optional[str] = None):
        self.locale = locale
        self.code = code or currency_for_locale(locale)
        self.symbol = get_currency_symbol(self.code, locale=locale)

    def format(self, value: float) -> str:
        with decimal.localcontext() as ctx:
            ctx.prec = max(ctx.prec, DECIMAL_PRECISION)
            return format_currency(value, self.code, locale=self.locale)


def currency_for_locale(locale: Locale, today: Optional[date] = None) -> str:
    """Currency code in use in the locale's territory, USD if there is none"""
    if not locale.territory:
        return FALLBACK_CURRENCY_CODE
    currencies = get_territory_currencies(locale.territory, start_date=today or date.today())
    return currencies[0] if currencies else FALLBACK_CURRENCY_CODE


def get_currency_formatter(locale_id: Optional[str] = None) -> CurrencyFormatter:
    """
    Build the formatter for locale_id, or for the environment's locale when None.
    Falls back to "$"/"USD" when the locale cannot be resolved.
    """
    ident = locale_id or default_locale("LC_MONETARY")
    if not ident:
        logger.warning("No locale detected; using %s formatting", FALLBACK_CURRENCY_CODE)
        return FallbackCurrencyFormatter()
    try:
        fmt = BabelCurrencyFormatter(Locale.parse(ident))
    except (UnknownLocaleError, ValueError) as ex:
        logger.warning("Locale %r unavailable (%s); using %s formatting", ident, ex, FALLBACK_CURRENCY_CODE)
        return FallbackCurrencyFormatter()
    logger.info("Currency formatting: locale=%s code=%s symbol=%s", fmt.locale, fmt.code, fmt.symbol)
    return fmt
