"""Unit tests for rule-based summaries and tag suggestions."""

import random

import pytest

from second_brain.core.heuristics import (
    COMMON_TAGS,
    MAX_TAGS,
    TagSuggester,
    extract_keywords,
    summarize,
)


class FixedRandom(random.Random):
    """Random source whose draws always return ``value``."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


class TestSummarize:
    def test_four_sentences_keep_first_two(self):
        content = "First point here. Second point here. Third point here. Fourth point here."

        assert summarize(content) == "First point here.  Second point here..."

    def test_short_single_sentence_unchanged(self):
        content = "x" * 49 + "."

        assert summarize(content) == content

    def test_two_long_sentences_truncated_to_hundred_chars(self):
        content = "a" * 80 + ". " + "b" * 80 + "."

        assert summarize(content) == content[:100] + "..."

    def test_question_and_exclamation_marks_end_sentences(self):
        assert summarize("Why? Because! It works.") == "Why.  Because..."

    def test_exactly_hundred_chars_has_no_ellipsis(self):
        content = "c" * 100

        assert summarize(content) == content


class TestExtractKeywords:
    def test_keeps_long_words_in_order(self):
        content = "Learning quantum computing requires dedicated practice and study"

        assert extract_keywords(content) == [
            "learning",
            "quantum",
            "computing",
            "requires",
            "dedicated",
        ]

    def test_strips_punctuation_and_digits(self):
        assert extract_keywords("Hello, world-class testing!! 2024") == [
            "hello",
            "worldclass",
            "testing",
        ]

    def test_deduplicates_case_insensitively(self):
        assert extract_keywords("Python python PYTHON rocks") == ["python", "rocks"]

    def test_words_that_shrink_below_five_letters_are_dropped(self):
        # "it's!" is long enough to consider, but "its" is too short to keep
        assert extract_keywords("it's! tiny") == []


class TestTagSuggester:
    CONTENT = "Learning quantum computing requires dedicated practice and study"

    def test_extracted_keywords_come_first(self):
        tags = TagSuggester(rng=random.Random(7)).suggest(self.CONTENT)

        assert tags[:5] == ["learning", "quantum", "computing", "requires", "dedicated"]
        assert len(tags) <= MAX_TAGS

    def test_never_more_than_six_tags(self):
        tags = TagSuggester(rng=FixedRandom(0.0)).suggest(self.CONTENT)

        assert tags == ["learning", "quantum", "computing", "requires", "dedicated", "productivity"]

    def test_no_common_tags_when_draws_fail(self):
        assert TagSuggester(rng=FixedRandom(0.99)).suggest("a b c") == []

    def test_common_tags_fill_when_content_has_no_keywords(self):
        tags = TagSuggester(rng=FixedRandom(0.0)).suggest("a b c")

        assert tags == COMMON_TAGS[:MAX_TAGS]

    def test_duplicates_with_common_tags_are_possible(self):
        tags = TagSuggester(rng=FixedRandom(0.0)).suggest("learning")

        assert tags[:2] == ["learning", "productivity"]
        assert tags.count("learning") == 2

    @pytest.mark.parametrize("seed", [1, 42, 1234])
    def test_seeded_suggestions_are_reproducible(self, seed):
        first = TagSuggester(rng=random.Random(seed)).suggest(self.CONTENT)
        second = TagSuggester(rng=random.Random(seed)).suggest(self.CONTENT)

        assert first == second
