"""ScoredRecord — the outcome of scoring one ResponseRecord."""

from pydantic import BaseModel

from response_quality.dataset.domain.record import ResponseRecord
from response_quality.scoring.domain.metrics import MetricsResult


class ScoredRecord(BaseModel, frozen=True):
    """Immutable outcome: exactly one of metrics or error is set."""

    record: ResponseRecord
    metrics: MetricsResult | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.metrics is not None
