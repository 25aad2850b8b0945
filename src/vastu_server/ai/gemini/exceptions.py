"""Custom exceptions for the Gemini integration package."""


class GeminiError(Exception):
    """Base exception for all Gemini-related errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(GeminiError):
    """Raised when the API key is not configured."""

    def __init__(self, message: str = "Server API Key is not configured.") -> None:
        super().__init__(message)


class UpstreamError(GeminiError):
    """Raised when the Gemini API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Google API Error: {status_code} - {body}", status_code)
        self.body = body


class GeminiConnectionError(GeminiError):
    """Raised when the Gemini API cannot be reached."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class MalformedResponseError(GeminiError):
    """Raised when a successful response carries no candidate text."""

    pass
