"""Relay endpoint - forwards a question and its game context to the LLM."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from gamehelp.core.errors import LLMServiceError
from gamehelp.schemas.chat import RelayErrorResponse, RelayRequest, RelayResponse
from gamehelp.services.llm_service import llm_service

router = APIRouter()


@router.post(
    "",
    response_model=RelayResponse,
    responses={500: {"model": RelayErrorResponse}},
)
async def relay(req: RelayRequest):
    """Answer one question about the selected game."""
    try:
        text = await llm_service.respond(req.message, req.context)
    except LLMServiceError as e:
        logger.exception(f"Error in AI relay: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to get response from AI."},
        )
    return RelayResponse(response=text)
