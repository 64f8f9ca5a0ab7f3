"""TextQualityScorer — maps a response (and optional prompt) to a MetricsResult."""

from typing import Any

from response_quality.scoring.domain.errors import InvalidInputError
from response_quality.scoring.domain.heuristics import (
    coherence_score,
    completeness_score,
    creativity_score,
    length_appropriateness_score,
    readability_score,
    specificity_score,
)
from response_quality.scoring.domain.lexicon import DEFAULT_LEXICON, Lexicon
from response_quality.scoring.domain.metrics import MetricsResult
from response_quality.scoring.domain.text_stats import (
    complexity_score,
    compute_text_statistics,
    sentiment_polarity,
)
from response_quality.scoring.domain.weighting import (
    OverallWeights,
    clamp,
    weighted_average,
)


class TextQualityScorer:
    """Pure, deterministic scorer.

    Holds only immutable configuration, so one instance can be shared across
    threads and tasks.
    """

    def __init__(
        self,
        weights: OverallWeights | None = None,
        lexicon: Lexicon | None = None,
    ) -> None:
        self._weights = weights or OverallWeights()
        self._lexicon = lexicon or DEFAULT_LEXICON

    @property
    def weights(self) -> OverallWeights:
        return self._weights

    def calculate_metrics(
        self, content: Any, original_prompt: Any = None
    ) -> MetricsResult:
        """
        Score content, optionally against the prompt that produced it.

        A None or empty prompt means "no prompt": completeness and length
        appropriateness then fall back to content-only heuristics. A
        whitespace-only prompt is still a prompt, one with no words.

        Raises:
            InvalidInputError: if content is missing, not a string, or empty,
                or if a prompt is given that is not a string.
        """
        _validate_content(content)
        prompt = _normalize_prompt(original_prompt)

        stats = compute_text_statistics(content)

        coherence = coherence_score(stats, self._lexicon)
        completeness = completeness_score(stats, prompt)
        readability = readability_score(stats)
        length = length_appropriateness_score(stats, prompt)
        creativity = creativity_score(stats, self._lexicon)
        specificity = specificity_score(stats, self._lexicon)

        w = self._weights
        overall = weighted_average(
            [
                (coherence, w.coherence),
                (completeness, w.completeness),
                (readability, w.readability),
                (length, w.length_appropriateness),
                (creativity, w.creativity),
                (specificity, w.specificity),
            ]
        )

        return MetricsResult(
            coherence_score=coherence,
            completeness_score=completeness,
            readability_score=readability,
            length_appropriateness_score=length,
            creativity_score=creativity,
            specificity_score=specificity,
            overall_score=clamp(overall),
            word_count=stats.word_count,
            sentence_count=stats.sentence_count,
            paragraph_count=stats.paragraph_count,
            avg_sentence_length=stats.avg_sentence_length,
            lexical_diversity=clamp(stats.lexical_diversity),
            sentiment_polarity=sentiment_polarity(stats.words, self._lexicon),
            complexity_score=complexity_score(stats),
        )


def _validate_content(content: Any) -> None:
    if content is None:
        raise InvalidInputError("content is required")
    if not isinstance(content, str):
        raise InvalidInputError(
            f"content must be a string, got {type(content).__name__}"
        )
    if content == "":
        raise InvalidInputError("content must not be empty")


def _normalize_prompt(prompt: Any) -> str | None:
    if prompt is None or prompt == "":
        return None
    if not isinstance(prompt, str):
        raise InvalidInputError(
            f"prompt must be a string, got {type(prompt).__name__}"
        )
    return prompt


_DEFAULT_SCORER = TextQualityScorer()


def calculate_metrics(content: Any, original_prompt: Any = None) -> MetricsResult:
    """Score content with the default weights and lexicon."""
    return _DEFAULT_SCORER.calculate_metrics(content, original_prompt)
