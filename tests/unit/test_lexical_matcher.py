"""Unit tests for whole-query and keyword matching."""

from second_brain.core.matcher import (
    match_field,
    match_keyword,
    matches_any_keyword,
    matches_query,
    significant_words,
)
from second_brain.models.knowledge import KnowledgeItem


def item(**overrides) -> KnowledgeItem:
    data = {
        "id": "item-1",
        "title": "RAG Explained",
        "content": "Retrieval-Augmented Generation combines search and generation.",
        "tags": ["ai", "rag"],
        "user_id": "alice",
    }
    data.update(overrides)
    return KnowledgeItem(**data)


def test_title_match_is_case_insensitive():
    assert match_field(item(), "rag explained") == "title"


def test_content_match_reported_when_title_misses():
    assert match_field(item(), "combines SEARCH") == "content"


def test_tag_match_uses_substring_of_any_tag():
    assert match_field(item(tags=["machine-learning"]), "learn") == "tags"


def test_matching_is_substring_not_token_based():
    # "gener" is not a word, but it is a substring of "Generation"
    assert matches_query(item(), "gener")


def test_no_match_returns_none():
    assert match_field(item(), "quantum") is None
    assert not matches_query(item(), "quantum")


def test_blank_tags_are_tolerated():
    subject = item(title="Plain", content="Plain text.", tags=["", "   "])
    assert match_field(subject, "zzz") is None


def test_significant_words_drop_short_noise_words():
    assert significant_words("what is RAG") == ["what", "RAG"]
    assert significant_words("is it ok") == []


def test_significant_words_split_on_any_whitespace():
    assert significant_words("graph\tnotes\n  links") == ["graph", "notes", "links"]


def test_keyword_match_checks_content_only():
    subject = item(title="Quantum", content="Nothing relevant.", tags=["quantum"])

    assert match_keyword(subject, ["quantum"]) is None
    assert not matches_any_keyword(subject, ["quantum"])


def test_keyword_match_returns_first_word_found():
    assert match_keyword(item(), ["missing", "SEARCH", "generation"]) == "SEARCH"
