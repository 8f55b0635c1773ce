"""Tests for environment-driven settings and engine construction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from buildcalc.config import DEFAULT_CORS_ORIGINS, Settings, load_settings
from buildcalc.data import prices
from buildcalc.exceptions import PriceTableError
from buildcalc.factory import create_default_engine, create_engine_from_settings


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings.price_table_path is None
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS
        assert settings.log_level == "INFO"

    def test_reads_variables(self) -> None:
        settings = load_settings(
            {
                "BUILDCALC_PRICE_TABLE": "/etc/buildcalc/prices.json",
                "BUILDCALC_CORS_ORIGINS": "https://a.example, https://b.example,",
                "BUILDCALC_LOG_LEVEL": "debug",
            }
        )
        assert settings.price_table_path == Path("/etc/buildcalc/prices.json")
        assert settings.cors_origins == ("https://a.example", "https://b.example")
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self) -> None:
        assert load_settings({"BUILDCALC_LOG_LEVEL": "chatty"}).log_level == "INFO"

    def test_blank_price_table_ignored(self) -> None:
        assert load_settings({"BUILDCALC_PRICE_TABLE": "  "}).price_table_path is None


class TestEngineFactory:
    def test_default_engine_uses_default_table(self) -> None:
        engine = create_default_engine()
        assert engine.price_table.price(prices.CONCRETE) == 150.0

    def test_settings_without_table(self) -> None:
        engine = create_engine_from_settings(Settings())
        assert engine.price_table.price(prices.WINDOWS) == 450.0

    def test_settings_with_table(self, tmp_path: Path) -> None:
        path = tmp_path / "prices.json"
        path.write_text(json.dumps({"unit_prices": {"windows": 520}}), encoding="utf-8")
        engine = create_engine_from_settings(Settings(price_table_path=path))
        assert engine.price_table.price(prices.WINDOWS) == 520.0

    def test_settings_with_missing_table(self, tmp_path: Path) -> None:
        with pytest.raises(PriceTableError):
            create_engine_from_settings(Settings(price_table_path=tmp_path / "none.json"))
