"""
Report router with the generateReport endpoint.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vastu_server.ai.gemini.exceptions import GeminiError
from vastu_server.reports.dependencies import get_report_service
from vastu_server.reports.schemas import GenerateReportRequest
from vastu_server.reports.service import ReportService
from vastu_server.schemas import ErrorResponse, TextResponse
from vastu_server.utils.logger import logger

router = APIRouter(tags=["Reports"])


@router.post(
    "/generateReport",
    response_model=TextResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_report(
    request: GenerateReportRequest,
    report_service: ReportService = Depends(get_report_service),
) -> TextResponse | JSONResponse:
    """
    Generate a Vastu report for a room scan.

    Args:
        request: Scan data and report mode
        report_service: The report service instance from dependency injection

    Returns:
        TextResponse: Core assessment followed by the final report, or an
        error body with status 500
    """
    try:
        text = await report_service.generate_report(
            request.scan_data, request.is_deep_analysis
        )
    except GeminiError as e:
        logger.error(
            "Error in /api/generateReport",
            error=e.message,
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        return JSONResponse(status_code=500, content={"error": e.message})
    except Exception as e:
        logger.exception("Unexpected error in /api/generateReport", error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})

    return TextResponse(text=text)
