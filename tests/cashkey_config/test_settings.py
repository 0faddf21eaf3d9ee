"""Unit tests for application settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from cashkey_config import clear_settings_cache, get_settings
from cashkey_config.settings import Settings


class TestSettings:
    def test_cors_origins_are_split(self):
        settings = Settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_list(self):
        settings = Settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.api_cors_origins == "http://a.test,http://b.test"

    def test_vat_rate_from_environment(self, monkeypatch):
        monkeypatch.setenv("VAT_RATE", "0.19")

        assert Settings().vat_rate == Decimal("0.19")

    @pytest.mark.parametrize("rate", ["-0.1", "1", "2.5"])
    def test_vat_rate_out_of_range(self, rate):
        with pytest.raises(PydanticValidationError):
            Settings(vat_rate=Decimal(rate))

    def test_get_settings_is_cached(self, monkeypatch):
        clear_settings_cache()
        monkeypatch.setenv("APP_NAME", "Budgeteer")

        first = get_settings()
        monkeypatch.setenv("APP_NAME", "Other")

        assert get_settings() is first
        assert first.app_name == "Budgeteer"
        clear_settings_cache()
