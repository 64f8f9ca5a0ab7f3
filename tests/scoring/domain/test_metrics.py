"""Tests for the MetricsResult domain model."""

from typing import Any

import pytest
from pydantic import ValidationError

from response_quality.scoring.domain.metrics import MetricsResult


def _fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "coherence_score": 0.5,
        "completeness_score": 0.6,
        "readability_score": 0.7,
        "length_appropriateness_score": 0.8,
        "creativity_score": 0.2,
        "specificity_score": 0.3,
        "overall_score": 0.55,
        "word_count": 42,
        "sentence_count": 3,
        "paragraph_count": 1,
        "avg_sentence_length": 14.0,
        "lexical_diversity": 0.8,
        "sentiment_polarity": -0.5,
        "complexity_score": 0.4,
    }
    fields.update(overrides)
    return fields


class TestMetricsResultConstruction:
    """MetricsResult accepts in-range values and rejects out-of-range ones."""

    def test_valid_construction_succeeds(self) -> None:
        result = MetricsResult(**_fields())

        assert result.overall_score == 0.55
        assert result.sentiment_polarity == -0.5

    def test_score_above_one_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MetricsResult(**_fields(coherence_score=1.01))

    def test_negative_score_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MetricsResult(**_fields(specificity_score=-0.01))

    def test_polarity_below_minus_one_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MetricsResult(**_fields(sentiment_polarity=-1.5))

    def test_negative_word_count_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MetricsResult(**_fields(word_count=-1))

    def test_boundary_values_are_valid(self) -> None:
        result = MetricsResult(
            **_fields(coherence_score=0.0, overall_score=1.0, sentiment_polarity=1.0)
        )

        assert result.coherence_score == 0.0
        assert result.overall_score == 1.0


class TestMetricsResultImmutability:
    """MetricsResult is frozen and cannot be mutated."""

    def test_assigning_field_raises_validation_error(self) -> None:
        result = MetricsResult(**_fields())

        with pytest.raises(ValidationError):
            result.word_count = 7  # type: ignore[misc]
