"""
Report service layer for business logic.

This module runs the two-stage report pipeline, sitting between the FastAPI
routes and the Gemini client.
"""

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.constants import HarmBlockThreshold, HarmCategory
from vastu_server.ai.gemini.exceptions import GeminiConnectionError, UpstreamError
from vastu_server.ai.gemini.schemas import (
    Content,
    GenerateContentRequest,
    Part,
    SafetySetting,
)
from vastu_server.reports.exceptions import AssessmentFailure
from vastu_server.reports.prompts import (
    CORE_ASSESSMENT_FALLBACK,
    REPORT_SEPARATOR,
    build_core_assessment_prompt,
    build_final_report_prompt,
    build_frame_parts,
)
from vastu_server.reports.schemas import ScanData
from vastu_server.utils.logger import logger

REPORT_SAFETY_SETTINGS = [
    SafetySetting(category=category, threshold=HarmBlockThreshold.BLOCK_NONE)
    for category in HarmCategory
]


def _build_request(parts: list[Part]) -> GenerateContentRequest:
    return GenerateContentRequest(
        contents=[Content(role="user", parts=parts)],
        safety_settings=REPORT_SAFETY_SETTINGS,
    )


class ReportService:
    """Service class for Vastu report generation."""

    def __init__(self, gemini_client: GeminiClient):
        """
        Initialize the report service.

        Args:
            gemini_client: The Gemini client to use
        """
        self.gemini_client = gemini_client

    async def generate_core_assessment(
        self, scan_data: ScanData, frame_parts: list[Part]
    ) -> str:
        """
        Run stage one: list the most severe defects without remedies.

        An empty model response is replaced by a placeholder assessment so the
        final report can still be attempted.

        Args:
            scan_data: The scan being assessed
            frame_parts: Image and marker parts for every frame

        Returns:
            str: The core assessment text

        Raises:
            ConfigurationError: If no API key is configured
            AssessmentFailure: If the Gemini call fails
        """
        prompt = build_core_assessment_prompt(scan_data)
        request = _build_request([*frame_parts, Part.from_text(prompt)])

        try:
            core_assessment = await self.gemini_client.generate_text(request)
        except UpstreamError as e:
            raise AssessmentFailure(
                f"Google API Error (Core Assessment): {e.status_code} - {e.body}",
                status_code=e.status_code,
            ) from e
        except GeminiConnectionError as e:
            raise AssessmentFailure(f"Core assessment failed: {e.message}") from e

        if not core_assessment:
            logger.warning(
                "Core assessment came back empty, substituting placeholder",
                room_tag=scan_data.current_room_tag,
            )
            return CORE_ASSESSMENT_FALLBACK
        return core_assessment

    async def generate_final_report(
        self,
        scan_data: ScanData,
        frame_parts: list[Part],
        is_deep_analysis: bool,
        core_assessment: str,
    ) -> str:
        """
        Run stage two: the full report or structural analysis.

        Args:
            scan_data: The scan being reported on
            frame_parts: Image and marker parts for every frame
            is_deep_analysis: Whether to request structural remedies
            core_assessment: Stage-one output used as the basis for remedies

        Returns:
            str: The final report text, empty if the model returned nothing
        """
        prompt = build_final_report_prompt(scan_data, is_deep_analysis, core_assessment)
        request = _build_request([*frame_parts, Part.from_text(prompt)])
        return await self.gemini_client.generate_text(request, fallback="")

    async def generate_report(self, scan_data: ScanData, is_deep_analysis: bool) -> str:
        """
        Generate a complete report for one scan.

        Args:
            scan_data: The scan to report on
            is_deep_analysis: Whether to request structural remedies

        Returns:
            str: Core assessment, separator, then the final report
        """
        logger.info(
            "Generating report",
            room_tag=scan_data.current_room_tag,
            frame_count=len(scan_data.captured_frames),
            is_deep_analysis=is_deep_analysis,
        )
        frame_parts = build_frame_parts(scan_data)

        core_assessment = await self.generate_core_assessment(scan_data, frame_parts)
        logger.info("Core assessment generated", text_length=len(core_assessment))

        final_report = await self.generate_final_report(
            scan_data, frame_parts, is_deep_analysis, core_assessment
        )
        logger.info("Final report generated", text_length=len(final_report))

        return f"{core_assessment}{REPORT_SEPARATOR}{final_report}"
