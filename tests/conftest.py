"""Shared pytest fixtures for Tip Calculator tests."""
from __future__ import annotations

import pytest
from babel import Locale

from config import Settings, get_default_settings
from formatting import BabelCurrencyFormatter, FallbackCurrencyFormatter
from store import TipStore


@pytest.fixture
def settings() -> Settings:
    return get_default_settings()


@pytest.fixture
def store(settings: Settings) -> TipStore:
    return TipStore(settings)


@pytest.fixture
def en_us_formatter() -> BabelCurrencyFormatter:
    """USD formatting with en_US conventions, independent of the host locale."""
    return BabelCurrencyFormatter(Locale.parse("en_US"))


@pytest.fixture
def fallback_formatter() -> FallbackCurrencyFormatter:
    return FallbackCurrencyFormatter()
