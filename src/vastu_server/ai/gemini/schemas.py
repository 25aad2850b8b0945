"""Pydantic schemas for the Gemini generateContent wire format."""

from typing import Any

from pydantic import BaseModel, Field

from vastu_server.ai.gemini.constants import HarmBlockThreshold, HarmCategory


class InlineData(BaseModel):
    """Base64 encoded media embedded in a request part."""

    model_config = {"populate_by_name": True}

    mime_type: str = Field(..., alias="mimeType", description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded payload")


class Part(BaseModel):
    """One content part: text or inline media.

    Extra fields are kept so caller-supplied parts pass through untouched.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    text: str | None = Field(None, description="Plain text part")
    inline_data: InlineData | None = Field(
        None, alias="inlineData", description="Inline media part"
    )

    @classmethod
    def from_text(cls, text: str) -> "Part":
        return cls(text=text)

    @classmethod
    def from_image(cls, data: str, mime_type: str = "image/jpeg") -> "Part":
        return cls(inline_data=InlineData(mime_type=mime_type, data=data))


class Content(BaseModel):
    """A role-tagged list of parts."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    role: str | None = Field(None, description="Author role (user or model)")
    parts: list[Part] = Field(default_factory=list)


class SafetySetting(BaseModel):
    """Override for a single harm category."""

    category: HarmCategory
    threshold: HarmBlockThreshold


class GenerateContentRequest(BaseModel):
    """Request body for models/{model}:generateContent."""

    model_config = {"populate_by_name": True}

    contents: list[Content] = Field(..., description="Conversation turns, oldest first")
    safety_settings: list[SafetySetting] | None = Field(
        None, alias="safetySettings", description="Harm category overrides"
    )
    system_instruction: Content | None = Field(
        None, alias="systemInstruction", description="System prompt"
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body the REST API expects.

        Only fields that were actually supplied are sent, so caller-provided
        turns go out exactly as they came in.
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class Candidate(BaseModel):
    """One generated candidate."""

    model_config = {"populate_by_name": True}

    content: Content | None = None
    finish_reason: str | None = Field(None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    """The subset of the generateContent response that is consumed."""

    model_config = {"populate_by_name": True}

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: dict[str, Any] | None = Field(None, alias="usageMetadata")

    @property
    def text(self) -> str | None:
        """Text of the first part of the first candidate, if any."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
