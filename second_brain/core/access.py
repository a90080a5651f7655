"""Visibility rules: an item is visible to its owner, and to everyone when public."""

from second_brain.models.knowledge import KnowledgeItem
from second_brain.storage.knowledge_store import ItemPredicate


def is_visible(item: KnowledgeItem, user_id: str | None = None) -> bool:
    if user_id:
        return item.user_id == user_id or item.is_public
    return item.is_public


def visible_to(user_id: str | None = None) -> ItemPredicate:
    """Build the access predicate for ``user_id`` (anonymous when falsy)."""

    def predicate(item: KnowledgeItem) -> bool:
        return is_visible(item, user_id)

    return predicate
