"""Response models shared by the report and chat endpoints."""

from pydantic import BaseModel, Field


class TextResponse(BaseModel):
    """Successful generation result."""

    text: str = Field(description="Generated text")


class ErrorResponse(BaseModel):
    """Error body returned with HTTP 500."""

    error: str = Field(description="Human-readable failure reason")
