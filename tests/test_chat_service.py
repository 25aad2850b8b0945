"""Tests for the chat relay."""

import httpx
import pytest

from tests.conftest import gemini_response
from vastu_server.ai.gemini.exceptions import ConfigurationError, UpstreamError
from vastu_server.chat.prompts import CHAT_FALLBACK_TEXT
from vastu_server.chat.schemas import HandleChatRequest
from vastu_server.chat.service import ChatService

HISTORY = [
    {"role": "user", "parts": [{"text": "Is my kitchen placement okay?"}]},
    {"role": "model", "parts": [{"text": "It sits in the North-East."}]},
    {"role": "user", "parts": [{"text": "What should I change first?"}]},
]


@pytest.fixture
def chat_request() -> HandleChatRequest:
    return HandleChatRequest.model_validate(
        {"chatHistory": HISTORY, "chatContextSummary": "Kitchen in the North-East"}
    )


class TestChatService:
    """Test cases for ChatService."""

    @pytest.mark.asyncio
    async def test_returns_model_reply(self, make_client, chat_request):
        client, transport = make_client([gemini_response("Move the stove.")])

        reply = await ChatService(client).handle_chat(
            chat_request.chat_history, chat_request.chat_context_summary
        )

        assert reply == "Move the stove."
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_history_is_sent_as_is_with_system_instruction(
        self, make_client, chat_request
    ):
        client, transport = make_client([gemini_response("ok")])

        await ChatService(client).handle_chat(
            chat_request.chat_history, chat_request.chat_context_summary
        )

        payload = transport.payloads[0]
        assert payload["contents"] == HISTORY
        assert "safetySettings" not in payload
        instruction = payload["systemInstruction"]["parts"][0]["text"]
        assert (
            "--- REPORT CONTEXT START --- Kitchen in the North-East "
            "--- REPORT CONTEXT END ---"
        ) in instruction

    @pytest.mark.asyncio
    async def test_unknown_turn_fields_pass_through(self, make_client):
        history = [
            {
                "role": "user",
                "parts": [{"text": "hi", "thought": False}],
                "clientTurnId": "t-1",
            }
        ]
        chat_request = HandleChatRequest.model_validate({"chatHistory": history})
        client, transport = make_client([gemini_response("hello")])

        await ChatService(client).handle_chat(
            chat_request.chat_history, chat_request.chat_context_summary
        )

        assert transport.payloads[0]["contents"] == history

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "history",
        [
            [{"role": "user", "content": "hi"}],
            [{"role": None, "parts": [{"text": "hi", "inlineData": None}]}],
        ],
    )
    async def test_turns_are_forwarded_without_added_or_dropped_fields(
        self, make_client, history
    ):
        chat_request = HandleChatRequest.model_validate({"chatHistory": history})
        client, transport = make_client([gemini_response("hello")])

        await ChatService(client).handle_chat(
            chat_request.chat_history, chat_request.chat_context_summary
        )

        assert transport.payloads[0]["contents"] == history

    @pytest.mark.asyncio
    async def test_empty_history_is_forwarded_upstream(self, make_client):
        client, transport = make_client(
            [httpx.Response(400, text="contents is not specified")]
        )

        with pytest.raises(UpstreamError):
            await ChatService(client).handle_chat([], "summary")

        assert transport.payloads[0]["contents"] == []

    @pytest.mark.asyncio
    async def test_empty_history_without_api_key_raises_configuration_error(
        self, make_client, unconfigured_settings
    ):
        client, transport = make_client([], client_settings=unconfigured_settings)

        with pytest.raises(ConfigurationError):
            await ChatService(client).handle_chat([], "summary")

        assert transport.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body", [{}, {"candidates": []}, {"candidates": [{"finishReason": "SAFETY"}]}]
    )
    async def test_empty_reply_uses_fallback_sentence(
        self, make_client, chat_request, body
    ):
        client, _ = make_client([httpx.Response(200, json=body)])

        reply = await ChatService(client).handle_chat(
            chat_request.chat_history, chat_request.chat_context_summary
        )

        assert reply == CHAT_FALLBACK_TEXT
        assert reply == "Sorry, I couldn't process that query."

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, make_client, chat_request):
        client, _ = make_client([httpx.Response(400, text="bad contents")])

        with pytest.raises(UpstreamError) as exc_info:
            await ChatService(client).handle_chat(
                chat_request.chat_history, chat_request.chat_context_summary
            )

        assert str(exc_info.value) == "Google API Error: 400 - bad contents"
