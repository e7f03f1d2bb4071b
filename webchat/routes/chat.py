"""
Chat endpoint: local rules first, web search for anything they can't answer.
"""

from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse
from loguru import logger

from webchat.middleware.rate_limit import chat_rate_limit, limiter
from webchat.models.schemas import ChatRequest, ChatResponse, ErrorResponse
from webchat.services.responder import Unknown, respond
from webchat.services.search_service import search_web

router = APIRouter(prefix="/api", tags=["chat"])


async def generate_reply(message: str) -> str:
    """
    Answer from the local rules; when they come up empty, search the web once
    and fall back to the rules' own reply if the search gives nothing.
    """
    reply = respond(message)
    if isinstance(reply, Unknown):
        web_text = await search_web(message)
        if web_text is not None:
            return web_text
    return reply.text


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(chat_rate_limit)
async def chat(
    request: Request,
    req: ChatRequest,
    x_api_key: Optional[str] = Header(None),
):
    if not req.message:
        return JSONResponse(status_code=400, content={"error": "Message is required"})

    if x_api_key:
        # Collected by the widget settings panel; replies don't depend on it
        logger.debug("Request carries an X-API-KEY header")

    reply = await generate_reply(req.message)
    logger.info(f"Chat: '{req.message[:50]}' -> '{reply[:50]}'")
    return ChatResponse(response=reply)
