"""Knowledge item management on top of the document store."""

import logging
from typing import Any

from second_brain.core.access import is_visible
from second_brain.core.graph import KnowledgeGraph, build_graph
from second_brain.core.heuristics import summarize
from second_brain.core.matcher import matches_query
from second_brain.core.retriever import newest_first
from second_brain.core.seed_data import EXAMPLE_ITEMS
from second_brain.lib.errors import ItemNotFoundError
from second_brain.models.knowledge import KnowledgeItem
from second_brain.storage.knowledge_store import DocumentStore

logger = logging.getLogger(__name__)


class KnowledgeService:
    """Create, browse, edit and delete knowledge items."""

    def __init__(self, store: DocumentStore, default_user_id: str = "demo-user"):
        """Initialize knowledge service.

        Args:
            store: Document store holding the items
            default_user_id: Placeholder owner used when a request names no user
        """
        self.store = store
        self.default_user_id = default_user_id

    def list_items(
        self,
        user_id: str | None = None,
        item_type: str | None = None,
        search: str | None = None,
    ) -> list[KnowledgeItem]:
        """Items visible to the user, newest first.

        Args:
            user_id: Requesting user (placeholder owner when omitted)
            item_type: note/link/insight; "all" or None disables the filter
            search: Substring looked up in title, content and tags
        """
        owner = user_id or self.default_user_id

        def predicate(item: KnowledgeItem) -> bool:
            if not is_visible(item, owner):
                return False
            if item_type and item_type != "all" and item.type != item_type:
                return False
            if search and not matches_query(item, search):
                return False
            return True

        return newest_first(self.store.find(predicate))

    def create_item(self, doc: dict[str, Any]) -> KnowledgeItem:
        data = dict(doc)
        if not data.get("user_id"):
            data["user_id"] = self.default_user_id
        return self.store.create(data)

    def get_item(self, item_id: str) -> KnowledgeItem:
        item = self.store.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def update_item(self, item_id: str, changes: dict[str, Any]) -> KnowledgeItem:
        item = self.store.find_by_id_and_update(item_id, changes)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def delete_item(self, item_id: str) -> KnowledgeItem:
        item = self.store.find_by_id_and_delete(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def graph(self, user_id: str | None = None) -> KnowledgeGraph:
        return build_graph(self.list_items(user_id=user_id))

    def seed_examples(self, user_id: str | None = None) -> list[KnowledgeItem]:
        """Insert the example items as public notes owned by ``user_id``."""
        owner = user_id or self.default_user_id
        created = [
            self.store.create(
                {
                    **entry,
                    "user_id": owner,
                    "summary": summarize(entry["content"]),
                    "is_public": True,
                }
            )
            for entry in EXAMPLE_ITEMS
        ]

        logger.info(f"Seeded {len(created)} example items for user {owner}")
        return created
