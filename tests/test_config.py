"""Tests for configuration loading."""

import logging

from form_engine.config import FormEngineConfig, configure_logging


class TestConfig:
    """Tests for FormEngineConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("OPENAI_MODEL", "FORM_ENGINE_ENABLE_GUARDRAILS", "FORM_ENGINE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = FormEngineConfig.from_env()
        assert config.default_model == FormEngineConfig().default_model
        assert config.enable_guardrails is True
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
        monkeypatch.setenv("FORM_ENGINE_ENABLE_GUARDRAILS", "false")
        monkeypatch.setenv("FORM_ENGINE_MAX_SUGGESTED_FIELDS", "10")
        monkeypatch.setenv("FORM_ENGINE_LOG_LEVEL", "debug")
        config = FormEngineConfig.from_env()
        assert config.default_model == "gpt-4o"
        assert config.enable_guardrails is False
        assert config.max_suggested_fields == 10
        assert config.log_level == "DEBUG"

    def test_model_settings(self):
        settings = FormEngineConfig(default_temperature=0.3).get_model_settings()
        assert settings.temperature == 0.3

    def test_configure_logging(self):
        configure_logging("INFO")
        assert logging.getLogger("form_engine").level == logging.INFO
