"""
FastAPI dependencies for the Gemini integration.

Each request gets its own client, closed once the response is sent.
"""

from collections.abc import AsyncGenerator

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.config import get_gemini_settings


async def get_gemini_client() -> AsyncGenerator[GeminiClient, None]:
    """
    FastAPI dependency for getting a Gemini client instance.

    Yields:
        GeminiClient: A client configured from the global settings
    """
    client = GeminiClient(settings=get_gemini_settings())
    try:
        yield client
    finally:
        await client.close()
