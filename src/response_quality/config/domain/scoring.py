"""Scoring configuration model — overall weights and lexicon overrides."""

from pydantic import BaseModel, Field

from response_quality.scoring.domain.lexicon import Lexicon
from response_quality.scoring.domain.weighting import OverallWeights


class ScoringConfig(BaseModel, frozen=True):
    weights: OverallWeights = Field(default_factory=OverallWeights)
    lexicon: Lexicon = Field(default_factory=Lexicon)
