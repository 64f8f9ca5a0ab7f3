"""Tests for the weighted-average helper, clamp, and OverallWeights."""

import pytest
from pydantic import ValidationError

from response_quality.scoring.domain.weighting import (
    OverallWeights,
    clamp,
    weighted_average,
)


class TestWeightedAverage:
    """weighted_average divides the weighted sum by the total weight."""

    def test_equal_weights_give_plain_mean(self) -> None:
        assert weighted_average([(1.0, 0.5), (0.0, 0.5)]) == pytest.approx(0.5)

    def test_weights_need_not_sum_to_one(self) -> None:
        assert weighted_average([(1.0, 3.0), (0.0, 1.0)]) == pytest.approx(0.75)

    def test_empty_pairs_return_zero(self) -> None:
        assert weighted_average([]) == 0.0

    def test_zero_total_weight_returns_zero(self) -> None:
        assert weighted_average([(0.9, 0.0), (0.4, 0.0)]) == 0.0

    def test_accepts_a_generator(self) -> None:
        pairs = ((s, 1.0) for s in (0.2, 0.4, 0.6))
        assert weighted_average(pairs) == pytest.approx(0.4)


class TestClamp:
    """clamp limits a value to a closed interval."""

    def test_value_inside_range_is_unchanged(self) -> None:
        assert clamp(0.42) == 0.42

    def test_value_above_range_is_capped(self) -> None:
        assert clamp(1.7) == 1.0

    def test_value_below_range_is_floored(self) -> None:
        assert clamp(-0.2) == 0.0

    def test_custom_bounds(self) -> None:
        assert clamp(-3.0, -1.0, 1.0) == -1.0


class TestOverallWeights:
    """OverallWeights defaults to the documented weights and must sum to 1."""

    def test_defaults(self) -> None:
        weights = OverallWeights()

        assert weights.coherence == 0.25
        assert weights.completeness == 0.25
        assert weights.readability == 0.20
        assert weights.length_appropriateness == 0.10
        assert weights.creativity == 0.10
        assert weights.specificity == 0.10

    def test_defaults_sum_to_one(self) -> None:
        assert sum(OverallWeights().model_dump().values()) == pytest.approx(1.0)

    def test_weights_not_summing_to_one_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OverallWeights(coherence=0.5)

    def test_negative_weight_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OverallWeights(
                coherence=-0.1,
                completeness=0.35,
                readability=0.25,
                length_appropriateness=0.2,
                creativity=0.15,
                specificity=0.15,
            )

    def test_valid_override_is_accepted(self) -> None:
        weights = OverallWeights(
            coherence=0.5,
            completeness=0.5,
            readability=0.0,
            length_appropriateness=0.0,
            creativity=0.0,
            specificity=0.0,
        )

        assert weights.coherence == 0.5

    def test_is_frozen(self) -> None:
        weights = OverallWeights()

        with pytest.raises(ValidationError):
            weights.coherence = 0.3  # type: ignore[misc]
