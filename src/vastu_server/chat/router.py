"""FastAPI router for the Vastu chat endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vastu_server.ai.gemini.exceptions import GeminiError
from vastu_server.chat.dependencies import get_chat_service
from vastu_server.chat.schemas import HandleChatRequest
from vastu_server.chat.service import ChatService
from vastu_server.schemas import ErrorResponse, TextResponse
from vastu_server.utils.logger import logger

router = APIRouter(tags=["Chat"])


@router.post(
    "/handleChat",
    response_model=TextResponse,
    responses={500: {"model": ErrorResponse}},
)
async def handle_chat(
    request: HandleChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> TextResponse | JSONResponse:
    """Relay one chat turn, returning the reply or an error body with status 500."""
    try:
        text = await chat_service.handle_chat(
            request.chat_history, request.chat_context_summary
        )
    except GeminiError as e:
        logger.error(
            "Error in /api/handleChat",
            error=e.message,
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        return JSONResponse(status_code=500, content={"error": e.message})
    except Exception as e:
        logger.exception("Unexpected error in /api/handleChat", error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})

    return TextResponse(text=text)
