"""Knowledge item CRUD and graph endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from second_brain.core.graph import KnowledgeGraph
from second_brain.lib.errors import InvalidInputError, ItemNotFoundError
from second_brain.models.knowledge import KnowledgeItem

from ..models.knowledge import KnowledgeCreateRequest, KnowledgeUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/knowledge")


@router.get("", response_model=list[KnowledgeItem])
async def list_knowledge(
    request: Request,
    user_id: str | None = Query(None, alias="userId"),
    type: str | None = Query(None, description="note, link, insight or all"),
    search: str | None = Query(None, description="Substring of title, content or a tag"),
):
    """List the items visible to a user, newest first."""
    service = request.app.state.knowledge_service
    try:
        return service.list_items(user_id=user_id, item_type=type, search=search)
    except Exception as e:
        logger.error(f"Failed to list knowledge items: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201, response_model=KnowledgeItem)
async def create_knowledge(body: KnowledgeCreateRequest, request: Request):
    """Capture a new item. The owner defaults to the placeholder user."""
    service = request.app.state.knowledge_service
    try:
        return service.create_item(body.to_document())
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create knowledge item: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/graph", response_model=KnowledgeGraph)
async def knowledge_graph(request: Request, user_id: str | None = Query(None, alias="userId")):
    """Nodes and shared-tag links for the items visible to a user."""
    service = request.app.state.knowledge_service
    try:
        return service.graph(user_id=user_id)
    except Exception as e:
        logger.error(f"Failed to build knowledge graph: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{item_id}", response_model=KnowledgeItem)
async def get_knowledge(item_id: str, request: Request):
    service = request.app.state.knowledge_service
    try:
        return service.get_item(item_id)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail="Item not found")
    except Exception as e:
        logger.error(f"Failed to load knowledge item {item_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{item_id}", response_model=KnowledgeItem)
async def update_knowledge(item_id: str, body: KnowledgeUpdateRequest, request: Request):
    """Edit an item; ``updatedAt`` is refreshed, nothing is regenerated."""
    service = request.app.state.knowledge_service
    try:
        return service.update_item(item_id, body.to_changes())
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail="Item not found")
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update knowledge item {item_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{item_id}")
async def delete_knowledge(item_id: str, request: Request):
    """Delete an item permanently."""
    service = request.app.state.knowledge_service
    try:
        service.delete_item(item_id)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail="Item not found")
    except Exception as e:
        logger.error(f"Failed to delete knowledge item {item_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return JSONResponse(content={"message": "Item deleted successfully"})
