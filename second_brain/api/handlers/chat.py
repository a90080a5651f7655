"""Chat assistant endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Request

from second_brain.lib.errors import InvalidInputError

from ..models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, request: Request):
    """Answer one chat message.

    The transcript stays with the client; each call is independent. Model
    or storage failures come back as a normal reply with a fallback text.
    """
    chat_service = request.app.state.chat_service
    try:
        reply = await chat_service.ask(body.message or "", mode=body.mode, user_id=body.user_id)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ChatResponse.from_message(reply)
