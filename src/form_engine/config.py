"""
Configuration module for the form engine.

Handles environment variables and default settings.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from agents import ModelSettings

# Load environment variables
load_dotenv()


@dataclass
class FormEngineConfig:
    """Configuration settings for the form engine."""

    # OpenAI settings (form-builder suggestions only)
    openai_api_key: str = ""
    default_model: str = "gpt-4.1-nano-2025-04-14"

    # Model settings for deterministic behavior
    default_temperature: float = 0.0
    default_max_tokens: int | None = None

    # Guardrail settings
    enable_guardrails: bool = True
    max_suggested_fields: int = 50

    # Logging
    log_level: str = "WARNING"

    def get_model_settings(self) -> ModelSettings:
        """Get ModelSettings instance with configured defaults."""
        return ModelSettings(
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
        )

    @classmethod
    def from_env(cls) -> "FormEngineConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", _defaults.openai_api_key),
            default_model=os.getenv("OPENAI_MODEL", _defaults.default_model),
            default_temperature=float(os.getenv("FORM_ENGINE_TEMPERATURE", str(_defaults.default_temperature))),
            enable_guardrails=os.getenv("FORM_ENGINE_ENABLE_GUARDRAILS", str(_defaults.enable_guardrails).lower()).lower() == "true",
            max_suggested_fields=int(os.getenv("FORM_ENGINE_MAX_SUGGESTED_FIELDS", str(_defaults.max_suggested_fields))),
            log_level=os.getenv("FORM_ENGINE_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormEngineConfig.from_env()


def get_config() -> FormEngineConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormEngineConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the ``form_engine`` logger tree."""
    level = (level or get_config().log_level).upper()
    logger = logging.getLogger("form_engine")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
