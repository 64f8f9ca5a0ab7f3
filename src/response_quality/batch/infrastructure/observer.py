"""StructlogBatchObserver — production observer that delegates to structlog."""

import structlog


class StructlogBatchObserver:
    """Logs batch domain events to structlog.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(
        self, run_id: str, total_records: int, max_concurrent: int
    ) -> None:
        self._log.info(
            "batch.started",
            run_id=run_id,
            total_records=total_records,
            max_concurrent=max_concurrent,
        )

    def batch_record_scored(
        self, run_id: str, record_id: str, overall_score: float
    ) -> None:
        self._log.debug(
            "batch.record_scored",
            run_id=run_id,
            record_id=record_id,
            overall_score=overall_score,
        )

    def batch_record_failed(self, run_id: str, record_id: str, reason: str) -> None:
        self._log.warning(
            "batch.record_failed",
            run_id=run_id,
            record_id=record_id,
            reason=reason,
        )

    def batch_progress(self, run_id: str, completed: int, total: int) -> None:
        self._log.debug(
            "batch.progress", run_id=run_id, completed=completed, total=total
        )

    def batch_completed(
        self,
        run_id: str,
        processed: int,
        errors: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "batch.completed",
            run_id=run_id,
            processed=processed,
            errors=errors,
            elapsed_seconds=round(elapsed_seconds, 3),
        )
