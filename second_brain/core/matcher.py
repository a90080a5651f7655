"""Case-insensitive substring matching of queries against knowledge items.

Matching is deliberately plain substring search: no tokenizing, stemming or
scoring. The whole-query rule looks at title, content and tags; the keyword
rule used by the fallback pass looks at content only.
"""

from collections.abc import Sequence

from second_brain.models.knowledge import KnowledgeItem, MatchedField

# Query words of this length or shorter are dropped before the keyword pass.
NOISE_WORD_LENGTH = 2


def match_field(item: KnowledgeItem, query: str) -> MatchedField | None:
    """Return the first field containing ``query``, or None."""
    needle = query.lower()

    if needle in item.title.lower():
        return "title"
    if needle in item.content.lower():
        return "content"
    if any(needle in tag.lower() for tag in item.tags):
        return "tags"
    return None


def matches_query(item: KnowledgeItem, query: str) -> bool:
    return match_field(item, query) is not None


def significant_words(query: str) -> list[str]:
    """Split on whitespace and drop words of two characters or fewer."""
    return [word for word in query.split() if len(word) > NOISE_WORD_LENGTH]


def match_keyword(item: KnowledgeItem, words: Sequence[str]) -> str | None:
    """Return the first word found in the item's content, or None.

    Title and tags are not consulted here.
    """
    content = item.content.lower()
    for word in words:
        if word.lower() in content:
            return word
    return None


def matches_any_keyword(item: KnowledgeItem, words: Sequence[str]) -> bool:
    return match_keyword(item, words) is not None
