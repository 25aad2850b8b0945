"""Gemini REST integration package."""

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.config import GeminiSettings
from vastu_server.ai.gemini.exceptions import (
    ConfigurationError,
    GeminiConnectionError,
    GeminiError,
    UpstreamError,
)

__all__ = [
    "ConfigurationError",
    "GeminiClient",
    "GeminiConnectionError",
    "GeminiError",
    "GeminiSettings",
    "UpstreamError",
]
