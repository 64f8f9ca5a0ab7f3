"""MetricsResult — the flat record produced by a single scoring call."""

from pydantic import BaseModel, ConfigDict, Field


class MetricsResult(BaseModel):
    """Immutable value object holding every score and statistic for one response.

    Scores are kept at full precision in [0, 1]; rescaling for display happens
    in the reporting layer.
    """

    model_config = ConfigDict(frozen=True)

    coherence_score: float = Field(ge=0.0, le=1.0)
    completeness_score: float = Field(ge=0.0, le=1.0)
    readability_score: float = Field(ge=0.0, le=1.0)
    length_appropriateness_score: float = Field(ge=0.0, le=1.0)
    creativity_score: float = Field(ge=0.0, le=1.0)
    specificity_score: float = Field(ge=0.0, le=1.0)
    overall_score: float = Field(ge=0.0, le=1.0)

    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    avg_sentence_length: float = Field(ge=0.0)
    lexical_diversity: float = Field(ge=0.0, le=1.0)
    sentiment_polarity: float = Field(ge=-1.0, le=1.0)
    complexity_score: float = Field(ge=0.0, le=1.0)


SCORE_FIELDS: tuple[str, ...] = (
    "coherence_score",
    "completeness_score",
    "readability_score",
    "length_appropriateness_score",
    "creativity_score",
    "specificity_score",
    "overall_score",
)
