"""Observer port for the batch domain — defines events in domain language."""

from typing import Protocol


class BatchObserver(Protocol):
    """Observer port emitting structured events during a batch scoring run.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def batch_started(
        self, run_id: str, total_records: int, max_concurrent: int
    ) -> None: ...

    def batch_record_scored(
        self, run_id: str, record_id: str, overall_score: float
    ) -> None: ...

    def batch_record_failed(self, run_id: str, record_id: str, reason: str) -> None: ...

    def batch_progress(self, run_id: str, completed: int, total: int) -> None: ...

    def batch_completed(
        self,
        run_id: str,
        processed: int,
        errors: int,
        elapsed_seconds: float,
    ) -> None: ...
