"""
Prompt templates for the Vastu report pipeline.

The model is told to reproduce the bold titles below verbatim, so the title
text is part of the contract with the client application.
"""

import textwrap

from vastu_server.ai.gemini.schemas import Part
from vastu_server.reports.schemas import ScanData

CORE_ASSESSMENT_TITLE = "**Core Vastu Assessment (Defects Found)**"

CORE_ASSESSMENT_FALLBACK = (
    f"{CORE_ASSESSMENT_TITLE}\n- Assessment failed to generate. Please rescan."
)

REPORT_SEPARATOR = "\n\n---\n\n"

FRAME_MARKER_TEMPLATE = (
    "--- Visual Data Segment {index} Captured at Heading {heading:.1f} degrees "
    "(Vastu Zone: {zone}) ---"
)

CORE_ASSESSMENT_TEMPLATE = textwrap.dedent("""\
    CRITICAL INSTRUCTION: You are a Vastu Analyst AI. Analyze the provided {frame_count} visual segments
    and the following room context: Room: {room_tag}, Location: {room_location},
    Concerns: {issues}.

    CRITICAL TASK: Your SOLE output must be a concise, bulleted list of the top 5 to 7 most severe Vastu defects found in this area.
    Focus ONLY on factual defects (directional, elemental, positional) and use simple language.

    Start with the exact bold markdown title:
    {title}

    Followed by a list using dashes (-). Do NOT include remedies.
""")

SHARED_CONTEXT_TEMPLATE = textwrap.dedent("""\
    CORE VASTU FINDINGS (MUST BE USED AS THE BASIS FOR ALL REMEDIES):
    {core_assessment}

    CONTEXT FOR THIS REPORT:
    - Area Scanned: {room_tag}
    - Location (C-Point): The {room_tag} is in the {room_location} zone of the house.
    - Floor: {floor}
    - User's Concerns: {issues}
    - Property Surroundings: {surroundings}
    - Scan Data: Average Heading: {average_heading:.1f} degrees. Zones Covered: {zones}.
""")

DEEP_ANALYSIS_TEMPLATE = textwrap.dedent("""\
    CRITICAL INSTRUCTION: You are a Master Vastu Shastra Analyst AI, specializing in structural and permanent solutions.
    Your task is to provide an EXPERT-LEVEL, STRUCTURAL Analysis based **EXCLUSIVELY** on the Core Vastu Findings provided below.

    {shared_context}

    CRITICAL TASK:
    Do NOT write a full report. Provide a structural analysis focusing on the defects in the CORE VASTU FINDINGS.

    Start with this exact title (using bold markdown):
    **Expert Analysis (Structural Recommendations)**

    Then, add this disclaimer on a new line:
    "The following are high-stakes, structural remedies a professional consultant might suggest. These are major changes and should be considered carefully."

    Then, create two subsections, both using bullet points (using a dash "-"):

    **Minor Structural Recommendations**
    (List minor demolition/construction remedies that address the core defects. e.g., "- Relocating the stove from the North to the South-East corner of the kitchen.")

    **Major Structural Recommendations**
    (List high-stakes demolition/construction remedies that address the core defects. e.g., "- The kitchen's location is a severe defect. The ideal expert solution is to move this kitchen to the South-East zone.")

    Formatting: Use bullet points (using -). You MUST use **bold markdown** for the main title and two sub-section titles.
""")

STANDARD_REPORT_TEMPLATE = textwrap.dedent("""\
    CRITICAL INSTRUCTION: You are a Master Vastu Shastra Analyst AI, specializing in non-structural, actionable remedies.
    Your response must be a single, structured Vastu Report, following all instructions below exactly. Use the Core Vastu Findings to guide your report.

    {shared_context}

    Based on ALL this data, provide a comprehensive report. Tailor your analysis and remedies in Section I and IV to address the user's primary concerns and the CORE VASTU FINDINGS.

    The report must be structured into FIVE consecutive sections. Use **bold markdown** for all section titles:

    **I. Executive Summary (Layman's Terms)**: Simple summary. Cover the 2-3 most critical findings (from CORE ASSESSMENT) and non-structural remedies, linking them to the user's primary concerns (if provided).
    Ensure you mention the Vastu Zone compliance of the scanned area ({room_tag}) based on its location ({room_location}).

    **II. Directional Data and Environmental Assessment**: Technical analysis of the observed headings and visual elements.

    **III. Analysis of Vastu Compliance**: Technical findings, issues, and defects found, explicitly referencing the points in the CORE ASSESSMENT.

    **IV. Remedial Recommendations (Advanced)**: CRITICAL: This section MUST use bullet points (using a dash "-"). Structure this section into two sub-sections using **bold markdown**. All remedies must be NON-STRUCTURAL (no construction or demolition suggested):
    **Minor Defects & Remedies**
    (List non-structural remedies here, like placing plants, changing colors, or adding mirrors.)
    **Major Defects & Remedies**
    (List more significant NON-STRUCTURAL remedies here, like moving heavy furniture or changing bed positions.)

    **V. Vastu Tips & Remedies (Actionable Advice)**: A short, separate section offering quick, general Vastu tips related to this specific room type.

    Formatting requirements: Use paragraph breaks for readability. You MUST use bullet points (using -). You MUST use **bold markdown** for all section and sub-section titles.
""")


def _room_location(scan_data: ScanData) -> str:
    return scan_data.room_location_in_house or "UNKNOWN"


def build_frame_parts(scan_data: ScanData) -> list[Part]:
    """Interleave each frame's image with a text marker describing it."""
    parts: list[Part] = []
    for index, frame in enumerate(scan_data.captured_frames, start=1):
        parts.append(Part.from_image(frame.image))
        parts.append(
            Part.from_text(
                FRAME_MARKER_TEMPLATE.format(
                    index=index, heading=frame.heading, zone=frame.zone
                )
            )
        )
    return parts


def build_core_assessment_prompt(scan_data: ScanData) -> str:
    return CORE_ASSESSMENT_TEMPLATE.format(
        frame_count=len(scan_data.captured_frames),
        room_tag=scan_data.current_room_tag,
        room_location=_room_location(scan_data),
        issues=scan_data.holistic_issues,
        title=CORE_ASSESSMENT_TITLE,
    )


def build_shared_context(scan_data: ScanData, core_assessment: str) -> str:
    return SHARED_CONTEXT_TEMPLATE.format(
        core_assessment=core_assessment,
        room_tag=scan_data.current_room_tag,
        room_location=_room_location(scan_data),
        floor=scan_data.floor_number or "N/A",
        issues=scan_data.holistic_issues,
        surroundings=scan_data.holistic_surroundings,
        average_heading=scan_data.average_heading,
        zones=", ".join(scan_data.observed_zones),
    )


def build_final_report_prompt(
    scan_data: ScanData, is_deep_analysis: bool, core_assessment: str
) -> str:
    """Build the second-stage instruction around an already generated assessment.

    Args:
        scan_data: The scan being reported on
        is_deep_analysis: Structural remedies only when True, five-section report otherwise
        core_assessment: Stage-one output, embedded verbatim

    Returns:
        str: The instruction text for the final report call
    """
    shared_context = build_shared_context(scan_data, core_assessment)
    if is_deep_analysis:
        return DEEP_ANALYSIS_TEMPLATE.format(shared_context=shared_context)
    return STANDARD_REPORT_TEMPLATE.format(
        shared_context=shared_context,
        room_tag=scan_data.current_room_tag,
        room_location=_room_location(scan_data),
    )
