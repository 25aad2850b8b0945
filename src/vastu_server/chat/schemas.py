"""
Chat-specific Pydantic schemas for request models.
"""

from pydantic import BaseModel, Field

from vastu_server.ai.gemini.schemas import Content


class HandleChatRequest(BaseModel):
    """Request body for POST /api/handleChat."""

    model_config = {"populate_by_name": True}

    chat_history: list[Content] = Field(
        ...,
        alias="chatHistory",
        description="Full conversation so far, in Gemini content format",
    )
    chat_context_summary: str = Field(
        "",
        alias="chatContextSummary",
        description="Summary of the report the user is asking about",
    )
