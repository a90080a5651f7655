# second_brain/storage/knowledge_store.py
"""Document-store interface consumed by the retrieval core and the CRUD API."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from second_brain.models.knowledge import KnowledgeItem

ItemPredicate = Callable[[KnowledgeItem], bool]


class DocumentStore(ABC):
    """Persistence collaborator for knowledge items.

    ``find`` returns items in the store's natural order, which for the
    bundled implementation is insertion order. Callers that need a
    different order sort the result themselves.
    """

    @abstractmethod
    def find(self, predicate: ItemPredicate | None = None) -> list[KnowledgeItem]:
        """Return every item satisfying ``predicate`` (all items when None)."""

    @abstractmethod
    def create(self, doc: dict[str, Any]) -> KnowledgeItem:
        """Validate and insert a new item, filling id and timestamps."""

    @abstractmethod
    def find_by_id(self, item_id: str) -> KnowledgeItem | None:
        pass

    @abstractmethod
    def find_by_id_and_update(
        self, item_id: str, changes: dict[str, Any]
    ) -> KnowledgeItem | None:
        """Apply ``changes`` (snake_case field names), refresh ``updated_at``.

        Returns the updated item, or None if no item has that id.
        """

    @abstractmethod
    def find_by_id_and_delete(self, item_id: str) -> KnowledgeItem | None:
        """Remove the item permanently and return what was deleted."""
