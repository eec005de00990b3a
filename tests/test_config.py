"""
Tests for configuration selection.
"""

import pytest

from config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config


class TestGetConfig:

    def test_defaults_to_development(self, monkeypatch):
        monkeypatch.delenv("STORE_ENV", raising=False)

        config = get_config()

        assert config is DevelopmentConfig
        assert config.ENVIRONMENT == "development"
        assert config.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("name,expected", [
        ("production", ProductionConfig),
        ("development", DevelopmentConfig),
        ("testing", TestingConfig),
    ])
    def test_by_name(self, name, expected):
        assert get_config(name) is expected

    def test_reads_store_env(self, monkeypatch):
        monkeypatch.setenv("STORE_ENV", "production")
        assert get_config() is ProductionConfig

    def test_unknown_name_gets_base_config(self):
        assert get_config("staging") is Config
