"""Development seeding endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/dev/seed")
async def seed_examples(request: Request, user_id: str | None = Query(None, alias="userId")):
    """Insert the example notes as public items owned by ``userId``."""
    service = request.app.state.knowledge_service
    owner = user_id or service.default_user_id
    try:
        items = service.seed_examples(owner)
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return JSONResponse(
        content={
            "message": f"Successfully seeded {len(items)} items for user: {owner}",
            "items": [item.to_document() for item in items],
        }
    )
