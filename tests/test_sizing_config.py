"""
sizing_config.py tests
"""

import pytest

from kafka_sizing_core.sizing_config import (
    DefaultsConfig,
    ExportConfig,
    SizingConfig,
    ValidationConfig,
    load_config,
)


class TestValidationConfig:
    def test_defaults(self):
        assert ValidationConfig().policy == "reject"

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match="Invalid validation policy"):
            ValidationConfig(policy="ignore")


class TestExportConfig:
    def test_defaults(self):
        config = ExportConfig()
        assert config.currency_symbol == "£"
        assert config.filename == "kafka-sizing-calculator.csv"


class TestDefaultsConfig:
    def test_defaults(self):
        assert DefaultsConfig().topology == "unified"

    def test_invalid_topology(self):
        with pytest.raises(ValueError, match="Invalid topology"):
            DefaultsConfig(topology="mesh")


class TestSizingConfig:
    def test_round_trip_dict(self):
        config = SizingConfig(
            validation=ValidationConfig(policy="clamp"),
            export=ExportConfig(currency_symbol="$"),
            defaults=DefaultsConfig(topology="per-domain"),
        )
        data = config.to_dict()
        assert data["sizing_config"]["validation"]["policy"] == "clamp"
        assert SizingConfig.from_dict(data) == config

    def test_from_dict_without_wrapper_key(self):
        config = SizingConfig.from_dict({"export": {"currency_symbol": "€"}})
        assert config.export.currency_symbol == "€"
        assert config.validation.policy == "reject"


class TestLoadConfig:
    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch):
        for key in [
            "SIZING_VALIDATION_POLICY",
            "SIZING_CURRENCY_SYMBOL",
            "SIZING_EXPORT_FILENAME",
            "SIZING_DEFAULT_TOPOLOGY",
        ]:
            monkeypatch.delenv(key, raising=False)

    def test_defaults_without_env(self):
        assert load_config() == SizingConfig()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SIZING_VALIDATION_POLICY", "CLAMP")
        monkeypatch.setenv("SIZING_CURRENCY_SYMBOL", "$")
        monkeypatch.setenv("SIZING_EXPORT_FILENAME", "costs.csv")
        monkeypatch.setenv("SIZING_DEFAULT_TOPOLOGY", "per-domain")
        config = load_config()
        assert config.validation.policy == "clamp"
        assert config.export.currency_symbol == "$"
        assert config.export.filename == "costs.csv"
        assert config.defaults.topology == "per-domain"

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("SIZING_VALIDATION_POLICY", "maybe")
        with pytest.raises(ValueError, match="SIZING_VALIDATION_POLICY"):
            load_config()
