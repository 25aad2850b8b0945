"""
Configuration management for the Gemini integration package.

This module handles environment variable configuration for the Gemini
REST client using Pydantic settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vastu_server.utils.logger import logger


class GeminiSettings(BaseSettings):
    """Configuration for Gemini integration using Pydantic settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="GEMINI_"
    )

    # A missing key disables the endpoints rather than failing startup
    api_key: str | None = Field(
        default=None, description="Gemini API key for authentication"
    )
    model_name: str = Field(
        default="gemini-2.5-flash", description="Gemini model name to use"
    )
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST API base URL",
    )
    timeout: int = Field(default=120, description="Request timeout in seconds")


_gemini_settings: GeminiSettings | None = None


def get_gemini_settings() -> GeminiSettings:
    """
    Get the global Gemini settings instance.

    Returns:
        GeminiSettings: The global settings instance
    """
    global _gemini_settings
    if _gemini_settings is None:
        _gemini_settings = GeminiSettings()
        logger.info(
            "Gemini settings loaded",
            model_name=_gemini_settings.model_name,
            api_key_configured=bool(_gemini_settings.api_key),
        )
    return _gemini_settings


def set_gemini_settings(settings: GeminiSettings | None) -> None:
    """
    Set the global Gemini settings instance.

    Args:
        settings: The settings to set, or None to reload from the environment
    """
    global _gemini_settings
    _gemini_settings = settings
