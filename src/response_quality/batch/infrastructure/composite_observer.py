"""CompositeBatchObserver — fans out all events to a list of observers."""

from response_quality.batch.domain.observer import BatchObserver


class CompositeBatchObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[BatchObserver]) -> None:
        self._observers = observers

    def batch_started(
        self, run_id: str, total_records: int, max_concurrent: int
    ) -> None:
        for obs in self._observers:
            obs.batch_started(
                run_id=run_id,
                total_records=total_records,
                max_concurrent=max_concurrent,
            )

    def batch_record_scored(
        self, run_id: str, record_id: str, overall_score: float
    ) -> None:
        for obs in self._observers:
            obs.batch_record_scored(
                run_id=run_id, record_id=record_id, overall_score=overall_score
            )

    def batch_record_failed(self, run_id: str, record_id: str, reason: str) -> None:
        for obs in self._observers:
            obs.batch_record_failed(run_id=run_id, record_id=record_id, reason=reason)

    def batch_progress(self, run_id: str, completed: int, total: int) -> None:
        for obs in self._observers:
            obs.batch_progress(run_id=run_id, completed=completed, total=total)

    def batch_completed(
        self,
        run_id: str,
        processed: int,
        errors: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.batch_completed(
                run_id=run_id,
                processed=processed,
                errors=errors,
                elapsed_seconds=elapsed_seconds,
            )
