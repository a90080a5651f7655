"""Unit tests for the shared-tag relationship graph."""

from second_brain.core.graph import build_graph, shared_tags
from second_brain.models.knowledge import KnowledgeItem


def item(item_id: str, tags: list[str]) -> KnowledgeItem:
    return KnowledgeItem(id=item_id, title=item_id.upper(), content="Body.", tags=tags, user_id="alice")


def test_items_sharing_a_tag_are_linked():
    graph = build_graph([item("a", ["ai", "rag"]), item("b", ["rag"]), item("c", ["cooking"])])

    assert [node.id for node in graph.nodes] == ["a", "b", "c"]
    assert len(graph.links) == 1
    link = graph.links[0]
    assert (link.source, link.target, link.shared_tags) == ("a", "b", ["rag"])


def test_blank_tags_never_create_links():
    graph = build_graph([item("a", ["", "  "]), item("b", [""])])

    assert graph.links == []
    assert all(node.tags == [] for node in graph.nodes)


def test_shared_tags_keep_first_items_order():
    assert shared_tags(item("a", ["x", "y", "z"]), item("b", ["z", "x"])) == ["x", "z"]


def test_link_serializes_shared_tags_in_camel_case():
    graph = build_graph([item("a", ["ai"]), item("b", ["ai"])])

    assert graph.model_dump(by_alias=True)["links"][0]["sharedTags"] == ["ai"]


def test_empty_graph():
    graph = build_graph([])

    assert graph.nodes == [] and graph.links == []
