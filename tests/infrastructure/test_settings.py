"""Tests for infrastructure settings."""

from datetime import timedelta

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LiquiditySettings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "LIQUIDITY_CURRENCY",
        "LIQUIDITY_ALERT_WINDOW_HOURS",
        "LIQUIDITY_CHANGE_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    settings = LiquiditySettings.from_env()

    assert settings.currency == "INR"
    assert settings.currency_symbol == "₹"
    assert settings.alert_window == timedelta(hours=48)
    assert settings.change_mode == "inprocess"


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("LIQUIDITY_CURRENCY", "eur")
    monkeypatch.setenv("LIQUIDITY_ALERT_WINDOW_HOURS", "24")
    monkeypatch.setenv("LIQUIDITY_CHANGE_MODE", " Polling ")

    settings = LiquiditySettings.from_env()

    assert settings.currency_symbol == "€"
    assert settings.alert_window == timedelta(hours=24)
    assert settings.change_mode == "polling"


def test_unknown_currency_uses_its_code() -> None:
    assert LiquiditySettings(currency="CHF").currency_symbol == "CHF"


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("LIQUIDITY_ALERT_WINDOW_HOURS", "two days")
    monkeypatch.setenv("LIQUIDITY_CHANGE_MODE", "websocket")

    settings = LiquiditySettings.from_env()

    assert settings.alert_window == timedelta(hours=48)
    assert settings.change_mode == "inprocess"
