"""
Chat service layer for the Vastu assistant.
"""

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.schemas import Content, GenerateContentRequest, Part
from vastu_server.chat.prompts import CHAT_FALLBACK_TEXT, build_chat_system_prompt
from vastu_server.utils.logger import logger


class ChatService:
    """Stateless relay of chat turns to Gemini."""

    def __init__(self, gemini_client: GeminiClient):
        """
        Initialize the chat service.

        Args:
            gemini_client: The Gemini client to use
        """
        self.gemini_client = gemini_client

    async def handle_chat(
        self, chat_history: list[Content], context_summary: str
    ) -> str:
        """
        Answer the latest turn of a conversation.

        Args:
            chat_history: Every turn so far; nothing is remembered between calls
            context_summary: Report summary embedded in the system prompt

        Returns:
            str: The model's reply, or a fixed apology if it returned nothing
        """
        logger.info("Handling chat", turn_count=len(chat_history))

        request = GenerateContentRequest(
            contents=chat_history,
            system_instruction=Content(
                parts=[Part.from_text(build_chat_system_prompt(context_summary))]
            ),
        )
        return await self.gemini_client.generate_text(
            request, fallback=CHAT_FALLBACK_TEXT
        )
