"""
FastAPI dependencies for report generation.
"""

from fastapi import Depends

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.dependencies import get_gemini_client
from vastu_server.reports.service import ReportService


def get_report_service(
    gemini_client: GeminiClient = Depends(get_gemini_client),
) -> ReportService:
    """
    FastAPI dependency for getting the report service instance.

    Args:
        gemini_client: The Gemini client from dependency injection

    Returns:
        ReportService: The report service instance
    """
    return ReportService(gemini_client)
