import logging

from babel import Locale

import formatting
from formatting import (
    BabelCurrencyFormatter,
    FallbackCurrencyFormatter,
    currency_for_locale,
    get_currency_formatter,
)


def test_en_us_formatter(en_us_formatter):
    assert en_us_formatter.code == "USD"
    assert en_us_formatter.symbol == "$"
    assert en_us_formatter.format(120) == "$120.00"
    assert en_us_formatter.format(1000) == "$1,000.00"
    assert en_us_formatter.format(13.5) == "$13.50"


def test_german_locale_uses_euro():
    fmt = BabelCurrencyFormatter(Locale.parse("de_DE"))
    assert fmt.code == "EUR"
    assert fmt.symbol == "€"
    text = fmt.format(12.5)
    assert "12,50" in text
    assert text.endswith("€")


def test_explicit_code_overrides_territory():
    fmt = BabelCurrencyFormatter(Locale.parse("en_US"), code="EUR")
    assert fmt.code == "EUR"
    assert fmt.symbol == "€"


def test_locale_without_territory_uses_usd():
    assert currency_for_locale(Locale.parse("en")) == "USD"


def test_fallback_formatter(fallback_formatter):
    assert fallback_formatter.code == "USD"
    assert fallback_formatter.symbol == "$"
    assert fallback_formatter.format(0) == "$0.00"
    assert fallback_formatter.format(1234.5) == "$1,234.50"


def test_get_currency_formatter_for_known_locale():
    fmt = get_currency_formatter("en_US")
    assert isinstance(fmt, BabelCurrencyFormatter)
    assert fmt.format(20) == "$20.00"


def test_unknown_locale_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="formatting"):
        fmt = get_currency_formatter("xx_YY")
    assert isinstance(fmt, FallbackCurrencyFormatter)
    assert "unavailable" in caplog.text


def test_malformed_locale_falls_back():
    assert isinstance(get_currency_formatter("not a locale!"), FallbackCurrencyFormatter)


def test_undetected_locale_falls_back(monkeypatch):
    monkeypatch.setattr(formatting, "default_locale", lambda *args, **kwargs: None)
    fmt = get_currency_formatter()
    assert isinstance(fmt, FallbackCurrencyFormatter)
    assert fmt.format(5) == "$5.00"


def test_format_beyond_default_decimal_precision(en_us_formatter):
    assert en_us_formatter.format(1e27) == "$1" + ",000" * 9 + ".00"
