"""Shared fixtures: a recording mock transport in place of the Gemini API."""

import base64
import json
from collections.abc import Callable

import httpx
import pytest

from vastu_server.ai.gemini.client import GeminiClient
from vastu_server.ai.gemini.config import GeminiSettings
from vastu_server.reports.schemas import ScanData


def gemini_response(text: str, status_code: int = 200) -> httpx.Response:
    """A generateContent response carrying a single text candidate."""
    return httpx.Response(
        status_code,
        json={
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": text}]},
                    "finishReason": "STOP",
                }
            ],
            "usageMetadata": {"totalTokenCount": 42},
        },
    )


class RecordingTransport(httpx.MockTransport):
    """Mock transport that replays queued responses and records every request.

    Queued exceptions are raised instead of returned.
    """

    def __init__(self, responses: list[httpx.Response | Exception]) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request to {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def settings() -> GeminiSettings:
    """Test settings."""
    return GeminiSettings(
        api_key="test-api-key",
        model_name="gemini-test",
        base_url="https://gemini.test/v1beta",
        timeout=5,
    )


@pytest.fixture
def unconfigured_settings() -> GeminiSettings:
    """Settings with no API key."""
    return GeminiSettings(
        api_key=None,
        model_name="gemini-test",
        base_url="https://gemini.test/v1beta",
    )


@pytest.fixture
def make_client(settings) -> Callable[..., tuple[GeminiClient, RecordingTransport]]:
    """Factory for a Gemini client wired to a recording transport."""

    def _make(
        responses: list[httpx.Response | Exception],
        client_settings: GeminiSettings | None = None,
    ) -> tuple[GeminiClient, RecordingTransport]:
        transport = RecordingTransport(responses)
        client = GeminiClient(settings=client_settings or settings, transport=transport)
        return client, transport

    return _make


def fake_image(index: int) -> str:
    return base64.b64encode(f"fake-jpeg-{index}".encode()).decode()


@pytest.fixture
def scan_payload() -> dict:
    """Request-shaped scan data for a kitchen with three frames."""
    return {
        "capturedFrames": [
            {"image": fake_image(0), "heading": 10, "zone": "North"},
            {"image": fake_image(1), "heading": 20, "zone": "South"},
            {"image": fake_image(2), "heading": 30, "zone": "North"},
        ],
        "currentRoomTag": "Kitchen",
        "roomLocationInHouse": "South-East",
        "floorNumber": "1",
        "holisticIssues": "Frequent arguments at home",
        "holisticSurroundings": "Park to the north, highway to the south",
    }


@pytest.fixture
def scan_data(scan_payload) -> ScanData:
    return ScanData.model_validate(scan_payload)
