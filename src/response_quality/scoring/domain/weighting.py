"""Weighted-average composition shared by every sub-score, plus the overall weights."""

import math
from collections.abc import Iterable
from typing import TypeAlias

from pydantic import BaseModel, Field, model_validator

WeightedScore: TypeAlias = tuple[float, float]  # (score, weight)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Return value limited to the closed interval [low, high]."""
    return max(low, min(high, value))


def weighted_average(pairs: Iterable[WeightedScore]) -> float:
    """Return sum(score * weight) / sum(weight), or 0.0 when the total weight is zero."""
    total = 0.0
    total_weight = 0.0
    for score, weight in pairs:
        total += score * weight
        total_weight += weight
    if total_weight == 0.0:
        return 0.0
    return total / total_weight


class OverallWeights(BaseModel, frozen=True):
    """Weights combining the six sub-scores into the overall score.

    Every weight is non-negative and the weights sum to 1, so the overall
    score is a convex combination and stays inside [0, 1].
    """

    coherence: float = Field(default=0.25, ge=0.0, le=1.0)
    completeness: float = Field(default=0.25, ge=0.0, le=1.0)
    readability: float = Field(default=0.20, ge=0.0, le=1.0)
    length_appropriateness: float = Field(default=0.10, ge=0.0, le=1.0)
    creativity: float = Field(default=0.10, ge=0.0, le=1.0)
    specificity: float = Field(default=0.10, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "OverallWeights":
        total = (
            self.coherence
            + self.completeness
            + self.readability
            + self.length_appropriateness
            + self.creativity
            + self.specificity
        )
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"overall weights must sum to 1.0, got {total:.6f}")
        return self
