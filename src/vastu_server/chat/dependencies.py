"""
FastAPI dependencies for the chat relay.
"""

from fastapi import Depends

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.dependencies import get_gemini_client
from vastu_server.chat.service import ChatService


def get_chat_service(
    gemini_client: GeminiClient = Depends(get_gemini_client),
) -> ChatService:
    """
    FastAPI dependency for getting the chat service instance.

    Args:
        gemini_client: The Gemini client from dependency injection

    Returns:
        ChatService: The chat service instance
    """
    return ChatService(gemini_client)
