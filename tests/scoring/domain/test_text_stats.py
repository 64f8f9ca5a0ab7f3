"""Tests for tokenisation and shared text statistics."""

import pytest

from response_quality.scoring.domain.lexicon import DEFAULT_LEXICON
from response_quality.scoring.domain.text_stats import (
    complexity_score,
    compute_text_statistics,
    sentiment_polarity,
    split_paragraphs,
    split_sentences,
    split_sentences_with_terminators,
    tokenize,
)


class TestSentenceSplitting:
    """Sentences are split on runs of . ! ? and blank fragments dropped."""

    def test_splits_on_each_terminator(self) -> None:
        assert len(split_sentences("Hi there! How are you? Fine.")) == 3

    def test_runs_of_punctuation_count_once(self) -> None:
        assert split_sentences("Wait... what?!") == ["Wait", " what"]

    def test_trailing_text_without_terminator_is_a_sentence(self) -> None:
        assert split_sentences("One. Two") == ["One", " Two"]

    def test_punctuation_only_has_no_sentences(self) -> None:
        assert split_sentences("...!!!") == []

    def test_terminators_are_paired_with_sentences(self) -> None:
        pairs = split_sentences_with_terminators("Really? Yes! Fine")

        assert pairs == [("Really", "?"), (" Yes", "!"), (" Fine", "")]


class TestParagraphSplitting:
    """Paragraphs are separated by one or more blank lines."""

    def test_blank_lines_separate_paragraphs(self) -> None:
        assert len(split_paragraphs("a\n\nb\n  \n\nc")) == 3

    def test_single_newline_does_not_split(self) -> None:
        assert len(split_paragraphs("line one\nline two")) == 1

    def test_whitespace_only_text_has_no_paragraphs(self) -> None:
        assert split_paragraphs("  \n\n  ") == []


class TestTokenize:
    """Word tokens are lowercased ASCII \\w runs."""

    def test_lowercases_tokens(self) -> None:
        assert tokenize("The Cat") == ["the", "cat"]

    def test_apostrophes_split_words(self) -> None:
        assert tokenize("Don't stop") == ["don", "t", "stop"]

    def test_non_ascii_letters_act_as_separators(self) -> None:
        assert tokenize("café") == ["caf"]

    def test_digits_are_word_characters(self) -> None:
        assert tokenize("in 2024") == ["in", "2024"]


class TestComputeTextStatistics:
    """compute_text_statistics derives counts and ratios in one pass."""

    def test_reference_sentence_pair(self) -> None:
        stats = compute_text_statistics(
            "This is a great day. The weather is great and sunny."
        )

        assert stats.sentence_count == 2
        assert stats.word_count == 11
        assert stats.paragraph_count == 1
        assert stats.avg_sentence_length == pytest.approx(5.5)
        assert stats.sentence_lengths == (5, 6)

    def test_lexical_diversity_is_distinct_over_total(self) -> None:
        stats = compute_text_statistics("the the the cat")

        assert stats.lexical_diversity == pytest.approx(0.5)

    def test_empty_statistics_degrade_to_zero(self) -> None:
        stats = compute_text_statistics("   ")

        assert stats.word_count == 0
        assert stats.sentence_count == 0
        assert stats.paragraph_count == 0
        assert stats.avg_sentence_length == 0.0
        assert stats.lexical_diversity == 0.0
        assert stats.mean_word_length == 0.0

    def test_sentence_lengths_sum_to_word_count(self) -> None:
        stats = compute_text_statistics("It cost 3.5 dollars. Then it rose!")

        assert sum(stats.sentence_lengths) == stats.word_count


class TestSentimentPolarity:
    """Polarity is (positive - negative) / (positive + negative)."""

    def test_only_positive_words_give_one(self) -> None:
        words = tuple(tokenize("a great and wonderful day"))
        assert sentiment_polarity(words, DEFAULT_LEXICON) == 1.0

    def test_only_negative_words_give_minus_one(self) -> None:
        words = tuple(tokenize("a terrible, awful day"))
        assert sentiment_polarity(words, DEFAULT_LEXICON) == -1.0

    def test_mixed_words(self) -> None:
        words = tuple(tokenize("good bad bad"))
        assert sentiment_polarity(words, DEFAULT_LEXICON) == pytest.approx(-1 / 3)

    def test_no_sentiment_words_give_zero(self) -> None:
        words = tuple(tokenize("the committee reviewed the proposal"))
        assert sentiment_polarity(words, DEFAULT_LEXICON) == 0.0


class TestComplexityScore:
    """Complexity averages normalised word length and sentence length."""

    def test_short_words_short_sentence(self) -> None:
        stats = compute_text_statistics("Cat sat.")

        # word part 3/8, sentence part 2/25
        assert complexity_score(stats) == pytest.approx((0.375 + 0.08) / 2)

    def test_components_are_capped_at_one(self) -> None:
        long_sentence = " ".join(["incomprehensibilities"] * 40)
        stats = compute_text_statistics(long_sentence)

        assert complexity_score(stats) == 1.0

    def test_empty_text_has_zero_complexity(self) -> None:
        assert complexity_score(compute_text_statistics(" ")) == 0.0
