"""
Report-specific Pydantic schemas for the scan request.
"""

from pydantic import BaseModel, Field


class Frame(BaseModel):
    """One captured image with its compass metadata."""

    model_config = {"populate_by_name": True, "frozen": True}

    image: str = Field(..., description="Base64 encoded JPEG")
    heading: float = Field(..., description="Compass heading in degrees")
    zone: str = Field(..., description="Vastu zone label for the heading")


class ScanData(BaseModel):
    """Everything captured during one room scan."""

    model_config = {"populate_by_name": True}

    captured_frames: list[Frame] = Field(
        ...,
        alias="capturedFrames",
        min_length=1,
        description="Frames in capture order (usually eight)",
    )
    current_room_tag: str = Field(
        ..., alias="currentRoomTag", description="Room type, e.g. Kitchen"
    )
    room_location_in_house: str | None = Field(
        None,
        alias="roomLocationInHouse",
        description="Zone of the house the room sits in",
    )
    floor_number: str | int | float | None = Field(
        None, alias="floorNumber", description="Floor identifier"
    )
    holistic_issues: str = Field(
        "", alias="holisticIssues", description="User's stated concerns"
    )
    holistic_surroundings: str = Field(
        "",
        alias="holisticSurroundings",
        description="Description of the property surroundings",
    )

    @property
    def average_heading(self) -> float:
        """Arithmetic mean of all frame headings."""
        headings = [frame.heading for frame in self.captured_frames]
        return sum(headings) / len(headings)

    @property
    def observed_zones(self) -> list[str]:
        """Distinct frame zones in order of first appearance."""
        return list(dict.fromkeys(frame.zone for frame in self.captured_frames))


class GenerateReportRequest(BaseModel):
    """Request body for POST /api/generateReport."""

    model_config = {"populate_by_name": True}

    is_deep_analysis: bool = Field(
        False,
        alias="isDeepAnalysis",
        description="Structural remedies instead of the five-section report",
    )
    scan_data: ScanData = Field(..., alias="scanData")

