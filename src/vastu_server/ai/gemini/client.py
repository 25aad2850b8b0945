"""Google Gemini REST client implementation."""

import httpx
from pydantic import ValidationError

from vastu_server.ai.gemini.config import GeminiSettings
from vastu_server.ai.gemini.constants import API_KEY_HEADER, GENERATE_CONTENT_PATH
from vastu_server.ai.gemini.exceptions import (
    ConfigurationError,
    GeminiConnectionError,
    MalformedResponseError,
    UpstreamError,
)
from vastu_server.ai.gemini.schemas import (
    GenerateContentRequest,
    GenerateContentResponse,
)
from vastu_server.utils.logger import logger


class GeminiClient:
    """Async client for the Gemini generateContent endpoint.

    Sends one request per call with no retries. The model name and API key
    come from the settings passed in at construction, and an optional httpx
    transport can be supplied to replace the network.
    """

    def __init__(
        self,
        settings: GeminiSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Gemini client.

        Args:
            settings: Gemini settings instance with API configuration
            transport: Optional httpx transport, used by tests to intercept requests
        """
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized.

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.settings.api_key:
            raise ConfigurationError()
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                headers={
                    API_KEY_HEADER: self.settings.api_key,
                    "Content-Type": "application/json",
                },
                timeout=self.settings.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _post_generate_content(self, request: GenerateContentRequest) -> dict:
        """POST a generateContent request and return the decoded JSON body.

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: If the API answers with a non-success status or non-JSON body
            GeminiConnectionError: If the API cannot be reached
        """
        client = await self._ensure_client()
        path = GENERATE_CONTENT_PATH.format(model_name=self.settings.model_name)

        try:
            response = await client.post(path, json=request.to_payload())
        except httpx.TimeoutException as e:
            raise GeminiConnectionError(
                f"Google API request timed out after {self.settings.timeout}s", e
            ) from e
        except httpx.RequestError as e:
            raise GeminiConnectionError(f"Google API request failed: {e}", e) from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, response.text) from e

    @staticmethod
    def _extract_text(data: dict) -> str:
        """Pull candidates[0].content.parts[0].text out of a response body.

        Raises:
            MalformedResponseError: If the body has no such text
        """
        try:
            parsed = GenerateContentResponse.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected response shape: {e}") from e

        if not parsed.text:
            finish_reason = (
                parsed.candidates[0].finish_reason if parsed.candidates else None
            )
            raise MalformedResponseError(
                f"Response has no candidate text (finish_reason={finish_reason})"
            )
        return parsed.text

    async def generate_text(
        self, request: GenerateContentRequest, fallback: str = ""
    ) -> str:
        """Generate text for a prompt.

        Args:
            request: The generateContent request body
            fallback: Returned when the response carries no candidate text

        Returns:
            str: Text of the first candidate's first part, or ``fallback``

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: If the API answers with a non-success status
            GeminiConnectionError: If the API cannot be reached
        """
        logger.info(
            "Generating content with model",
            model_name=self.settings.model_name,
            content_count=len(request.contents),
            part_count=sum(len(content.parts) for content in request.contents),
        )

        data = await self._post_generate_content(request)

        try:
            text = self._extract_text(data)
        except MalformedResponseError as e:
            logger.warning("Using fallback text for empty response", reason=e.message)
            return fallback

        logger.info("Content generated", text_length=len(text))
        return text
