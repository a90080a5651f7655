"""Turns retrieved items into a templated answer or a model prompt."""

import logging
from collections.abc import Sequence

from second_brain.core.prompts import (
    ANSWER_MARKER,
    BULLET,
    CONTEXT_PROMPT,
    LANDING_PROMPT,
    NO_CONTEXT_PROMPT,
    NOTE_TEMPLATE,
    SOURCES_MARKER,
)
from second_brain.models.knowledge import KnowledgeItem, SourceItem, SynthesizedAnswer

logger = logging.getLogger(__name__)

# Only this many titles are named in the answer text; every item is still returned as a source.
NAMED_SOURCES = 2

KNOWLEDGE_BLURB = (
    "This concept is a key part of your knowledge base, helping you organize complex "
    "ideas efficiently. By connecting these insights, you can navigate your information "
    "network with greater clarity."
)

NOT_FOUND_TEMPLATE = (
    "I couldn’t find matching notes in the brain for \"{query}\". However, you can add "
    "new insights to capture this topic for the future!"
)


def lead_passage(item: KnowledgeItem) -> str:
    """The item's summary, or its content up to and including the first period."""
    if item.summary:
        return item.summary
    return item.content.split(".")[0] + "."


def is_answer_shaped(text: str | None) -> bool:
    """True when a model reply follows the answer template."""
    return bool(text) and ANSWER_MARKER in text


class AnswerSynthesizer:
    """Deterministic answers for the public query endpoint."""

    def sources(self, items: Sequence[KnowledgeItem]) -> list[SourceItem]:
        return [item.to_source() for item in items]

    def synthesize(self, query: str, items: Sequence[KnowledgeItem]) -> SynthesizedAnswer:
        if not items:
            text = f"{ANSWER_MARKER}\n{NOT_FOUND_TEMPLATE.format(query=query)}"
            logger.debug(f"No sources for {query!r}, returning not-found answer")
            return SynthesizedAnswer(text=text, sources=[])

        body = f"{lead_passage(items[0])} {KNOWLEDGE_BLURB}"
        named = "\n".join(f"{BULLET} {item.title}" for item in items[:NAMED_SOURCES])
        text = f"{ANSWER_MARKER}\n{body}\n\n{SOURCES_MARKER}\n{named}"

        return SynthesizedAnswer(text=text, sources=self.sources(items))


class PromptBuilder:
    """Prompts for the chat assistant's external model call."""

    def context_prompt(self, question: str, sources: Sequence[SourceItem]) -> str:
        notes = "\n\n".join(
            NOTE_TEMPLATE.format(title=source.title, content=source.content) for source in sources
        )
        return CONTEXT_PROMPT.format(
            notes=notes,
            question=question,
            answer_marker=ANSWER_MARKER,
            sources_marker=SOURCES_MARKER,
            bullet=BULLET,
        )

    def no_context_prompt(self, question: str) -> str:
        return NO_CONTEXT_PROMPT.format(question=question, answer_marker=ANSWER_MARKER)

    def landing_prompt(self, message: str) -> str:
        return LANDING_PROMPT.format(message=message)
