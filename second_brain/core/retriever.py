"""Two-stage lexical retrieval over the document store."""

import logging
from collections.abc import Callable

from second_brain.core.access import visible_to
from second_brain.core.matcher import (
    match_field,
    match_keyword,
    significant_words,
)
from second_brain.lib.errors import InvalidInputError
from second_brain.models.knowledge import KnowledgeItem, RetrievalResult, RetrievedItem
from second_brain.storage.knowledge_store import DocumentStore

logger = logging.getLogger(__name__)

MAX_RESULTS = 3

RankingStrategy = Callable[[list[KnowledgeItem]], list[KnowledgeItem]]


def insertion_order(items: list[KnowledgeItem]) -> list[KnowledgeItem]:
    """Keep the store's natural order. No relevance is implied."""
    return list(items)


def newest_first(items: list[KnowledgeItem]) -> list[KnowledgeItem]:
    return sorted(items, key=lambda item: item.created_at, reverse=True)


RANKING_STRATEGIES: dict[str, RankingStrategy] = {
    "insertion": insertion_order,
    "newest": newest_first,
}


class TwoStageRetriever:
    """Whole-query search with a keyword fallback.

    The primary pass matches the full query against title, content and tags.
    Only when it finds nothing does the fallback pass run, matching any query
    word longer than two characters against content alone. Both passes apply
    the access filter before results are ranked and truncated, so hidden items
    never take a result slot.
    """

    def __init__(
        self,
        store: DocumentStore,
        ranking: RankingStrategy = insertion_order,
        max_results: int = MAX_RESULTS,
    ):
        self.store = store
        self.ranking = ranking
        self.max_results = max_results

    def _select(self, candidates: list[RetrievedItem]) -> list[RetrievedItem]:
        by_id = {match.item.id: match for match in candidates}
        ranked = self.ranking([match.item for match in candidates])
        return [by_id[item.id] for item in ranked[: self.max_results]]

    def primary_pass(self, query_text: str, user_id: str | None = None) -> list[RetrievedItem]:
        candidates = []
        for item in self.store.find(visible_to(user_id)):
            field = match_field(item, query_text)
            if field is not None:
                candidates.append(RetrievedItem(item=item, matched_field=field))
        return self._select(candidates)

    def fallback_pass(self, query_text: str, user_id: str | None = None) -> list[RetrievedItem]:
        words = significant_words(query_text)
        if not words:
            return []

        candidates = []
        for item in self.store.find(visible_to(user_id)):
            word = match_keyword(item, words)
            if word is not None:
                candidates.append(
                    RetrievedItem(item=item, matched_field="content", matched_word=word)
                )
        return self._select(candidates)

    def retrieve(self, query_text: str, user_id: str | None = None) -> RetrievalResult:
        """Return at most ``max_results`` visible items matching ``query_text``.

        Raises:
            InvalidInputError: If the query text is empty
        """
        if not query_text or not query_text.strip():
            raise InvalidInputError("Query text is required")

        matches = self.primary_pass(query_text, user_id)
        if matches:
            logger.debug(f"Primary pass matched {len(matches)} item(s) for {query_text!r}")
            return RetrievalResult(query=query_text, stage="primary", matches=matches)

        matches = self.fallback_pass(query_text, user_id)
        if matches:
            logger.debug(f"Keyword fallback matched {len(matches)} item(s) for {query_text!r}")
            return RetrievalResult(query=query_text, stage="fallback", matches=matches)

        logger.debug(f"No items matched {query_text!r}")
        return RetrievalResult(query=query_text, stage="empty")
