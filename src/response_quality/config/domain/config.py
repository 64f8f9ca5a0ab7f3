"""Top-level BatchConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from response_quality.config.domain.dataset import DatasetConfig
from response_quality.config.domain.execution import ExecutionConfig
from response_quality.config.domain.scoring import ScoringConfig


class BatchConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a batch scoring run."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    dataset: DatasetConfig
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
