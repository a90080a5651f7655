"""Rule-based summary and tag suggestions used at capture and edit time."""

import random
import re

SENTENCE_SPLIT = re.compile(r"[.!?]+")
NON_ALPHA = re.compile(r"[^a-z]")

SUMMARY_FALLBACK_CHARS = 100
MAX_EXTRACTED_TAGS = 5
MAX_TAGS = 6
TAG_INCLUSION_PROBABILITY = 0.2

COMMON_TAGS = [
    "productivity",
    "learning",
    "coding",
    "design",
    "science",
    "insight",
    "personal",
    "growth",
    "project",
    "ai",
]


def summarize(content: str) -> str:
    """First two sentences, or the first 100 characters for short inputs.

    Sentence pieces are joined as split, so the whitespace that followed a
    terminator is preserved ("One. Two. Three." -> "One.  Two...").
    """
    sentences = [s for s in SENTENCE_SPLIT.split(content) if s.strip()]
    if len(sentences) > 2:
        return ". ".join(sentences[:2]) + "..."

    summary = content[:SUMMARY_FALLBACK_CHARS]
    if len(content) > SUMMARY_FALLBACK_CHARS:
        summary += "..."
    return summary


def extract_keywords(content: str, limit: int = MAX_EXTRACTED_TAGS) -> list[str]:
    """Lowercased alphabetic words longer than four letters, first-seen order."""
    words = [w for w in content.split() if len(w) > 3]
    cleaned = [NON_ALPHA.sub("", w.lower()) for w in words]

    keywords: list[str] = []
    for word in cleaned:
        if len(word) > 4 and word not in keywords:
            keywords.append(word)
    return keywords[:limit]


class TagSuggester:
    """Extracted keywords followed by a random sample of common tags.

    The random source is injectable so tests can seed it.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        common_tags: list[str] | None = None,
        inclusion_probability: float = TAG_INCLUSION_PROBABILITY,
    ):
        self.rng = rng or random.Random()
        self.common_tags = common_tags if common_tags is not None else COMMON_TAGS
        self.inclusion_probability = inclusion_probability

    def sample_common_tags(self) -> list[str]:
        return [tag for tag in self.common_tags if self.rng.random() < self.inclusion_probability]

    def suggest(self, content: str) -> list[str]:
        return (extract_keywords(content) + self.sample_common_tags())[:MAX_TAGS]
