"""BatchSummary — the aggregate result of a completed batch scoring run."""

from pydantic import BaseModel, Field

from response_quality.batch.domain.outcome import ScoredRecord


class BatchSummary(BaseModel, frozen=True):
    """Immutable summary returned when a batch run completes.

    Outcomes are in dataset order. Records whose content could not be scored
    are kept as failed outcomes rather than aborting the run.
    """

    run_id: str = Field(min_length=1)
    dataset_sha256: str = Field(min_length=1)
    config_name: str = Field(min_length=1)
    outcomes: list[ScoredRecord]

    @property
    def total_requested(self) -> int:
        return len(self.outcomes)

    @property
    def processed(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def errors(self) -> int:
        return self.total_requested - self.processed

    @property
    def success_rate(self) -> float:
        if not self.outcomes:
            return 0.0
        return self.processed / self.total_requested
