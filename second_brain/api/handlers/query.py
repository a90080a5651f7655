"""Public brain query endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request

from ..models.query import QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/public/brain/query", response_model=QueryResponse)
async def query_brain(
    request: Request,
    query: str | None = Query(None, description="Question or keywords"),
    q: str | None = Query(None, description="Short alias for query"),
    user_id: str | None = Query(None, alias="userId", description="Requesting user"),
):
    """Answer a question from the caller's own and public notes.

    Returns:
        ``{answer, sources}``; a query nothing matches still returns 200
        with the not-found answer and no sources.
    """
    query_text = query or q
    if not query_text or not query_text.strip():
        raise HTTPException(status_code=400, detail="Query parameter is required")

    retriever = request.app.state.retriever
    synthesizer = request.app.state.synthesizer

    try:
        result = retriever.retrieve(query_text, user_id=user_id)
    except Exception as e:
        logger.error(f"Brain query failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    answer = synthesizer.synthesize(query_text, result.items)
    logger.info(f"Brain query answered from {result.stage} pass with {len(result)} source(s)")

    return QueryResponse(answer=answer.text, sources=answer.sources)
