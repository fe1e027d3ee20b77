"""Settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from notifier.config import Settings, get_settings, reset_settings_cache


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.delivery_channel_order() == ["sendgrid", "smtp", "ses"]
    assert settings.currency_symbol == "Rs"
    assert settings.accept_legacy_schema is True
    assert settings.smtp_port == 587


def test_sendgrid_settings_must_be_paired() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sendgrid_api_key="SG.fake", sendgrid_sender=None)

    with pytest.raises(ValidationError):
        Settings(_env_file=None, sendgrid_api_key="SG.fake", sendgrid_sender="not-an-address")


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DELIVERY_CHANNELS", "ses,smtp")
    monkeypatch.setenv("ACCEPT_LEGACY_SCHEMA", "false")
    monkeypatch.setenv("SES_REGION", "eu-west-1")
    reset_settings_cache()
    try:
        settings = get_settings()
        assert settings.delivery_channel_order() == ["ses", "smtp"]
        assert settings.accept_legacy_schema is False
        assert settings.ses_region == "eu-west-1"
        assert get_settings() is settings
    finally:
        reset_settings_cache()


@pytest.mark.parametrize("name", ["", "Not/AZone", "UTC+05:30"])
def test_unknown_timezone_falls_back_to_utc(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    from datetime import timezone

    from notifier.utils import app_timezone

    monkeypatch.setenv("APP_TIMEZONE", name)
    reset_settings_cache()
    app_timezone.cache_clear()
    try:
        assert app_timezone() is timezone.utc
    finally:
        reset_settings_cache()
        app_timezone.cache_clear()


def test_storage_timestamps_are_naive_in_app_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    from datetime import datetime, timezone

    from notifier.utils import app_timezone, from_storage, to_storage

    monkeypatch.setenv("APP_TIMEZONE", "Asia/Kolkata")
    reset_settings_cache()
    app_timezone.cache_clear()
    try:
        stored = to_storage(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc))
        assert stored == datetime(2024, 1, 1, 5, 30)
        restored = from_storage(stored)
        assert restored.utcoffset().total_seconds() == 5.5 * 3600
        assert to_storage(None) is None
    finally:
        reset_settings_cache()
        app_timezone.cache_clear()
