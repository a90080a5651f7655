"""Server-side summary and tag suggestion endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Request

from second_brain.core.heuristics import summarize

from ..models.query import PROCESS_TYPES, ProcessRequest, ProcessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/ai/process", response_model=ProcessResponse)
async def process_content(body: ProcessRequest, request: Request):
    """Summarize content or suggest tags for it.

    Args:
        body: ``{content, type}`` where type is "summarize" or "suggest-tags"

    Returns:
        ``{result}``: a string for summarize, a list of tags for suggest-tags
    """
    if not body.content:
        raise HTTPException(status_code=400, detail="Content is required")
    if body.type not in PROCESS_TYPES:
        raise HTTPException(status_code=400, detail="Invalid type")

    try:
        if body.type == "summarize":
            return ProcessResponse(result=summarize(body.content))

        tagger = request.app.state.tag_suggester
        return ProcessResponse(result=tagger.suggest(body.content))
    except Exception as e:
        logger.error(f"Content processing failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
