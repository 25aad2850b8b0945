"""Exceptions raised by the report pipeline."""

from vastu_server.ai.gemini.exceptions import GeminiError


class AssessmentFailure(GeminiError):
    """Raised when the core assessment call fails; no final report is attempted."""

    pass
