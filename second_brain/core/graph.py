"""Relationship graph: items linked by the tags they share."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from second_brain.models.knowledge import ItemType, KnowledgeItem


class GraphNode(BaseModel):
    id: str
    title: str
    type: ItemType
    tags: list[str] = Field(default_factory=list)


class GraphLink(BaseModel):
    source: str
    target: str
    shared_tags: list[str] = Field(default_factory=list, serialization_alias="sharedTags")


class KnowledgeGraph(BaseModel):
    nodes: list[GraphNode] = Field(default_factory=list)
    links: list[GraphLink] = Field(default_factory=list)


def shared_tags(first: KnowledgeItem, second: KnowledgeItem) -> list[str]:
    """Non-blank tags of ``first`` that ``second`` also carries, in ``first``'s order."""
    return [tag for tag in first.tags if tag.strip() and tag in second.tags]


def build_graph(items: Sequence[KnowledgeItem]) -> KnowledgeGraph:
    """One node per item, one link per pair sharing a non-blank tag."""
    nodes = [
        GraphNode(
            id=item.id,
            title=item.title,
            type=item.type,
            tags=[tag for tag in item.tags if tag.strip()],
        )
        for item in items
    ]

    links = []
    for i, first in enumerate(items):
        for second in items[i + 1 :]:
            common = shared_tags(first, second)
            if common:
                links.append(GraphLink(source=first.id, target=second.id, shared_tags=common))

    return KnowledgeGraph(nodes=nodes, links=links)
