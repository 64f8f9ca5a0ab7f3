"""BatchScoringRunner — scores every record of a dataset concurrently."""

import asyncio
import time
import uuid

from response_quality.batch.domain.observer import BatchObserver
from response_quality.batch.domain.outcome import ScoredRecord
from response_quality.batch.domain.summary import BatchSummary
from response_quality.config.domain.config import BatchConfig
from response_quality.core.errors import ResponseQualityError
from response_quality.dataset.domain.loader import DatasetLoader
from response_quality.dataset.domain.record import ResponseRecord
from response_quality.scoring.domain.errors import InvalidInputError
from response_quality.scoring.domain.scorer import TextQualityScorer


class BatchScoringRunner:
    """Loads records, scores each one, and returns a BatchSummary.

    Scoring is CPU-bound and synchronous, so each call runs in a worker thread;
    the semaphore bounds how many run at once.
    """

    def __init__(
        self,
        config: BatchConfig,
        dataset_loader: DatasetLoader,
        scorer: TextQualityScorer,
        observer: BatchObserver,
    ) -> None:
        self._config = config
        self._dataset_loader = dataset_loader
        self._scorer = scorer
        self._observer = observer

    async def run(self) -> BatchSummary:
        """Score every record and return the summary.

        A record whose content the scorer rejects becomes a failed outcome and
        the run continues. Any other error aborts the run. Outcomes are
        returned in dataset order whatever order they completed in.
        """
        run_id = str(uuid.uuid4())
        load_result = self._dataset_loader.load(config=self._config.dataset)
        records = load_result.records
        max_concurrent = self._config.execution.max_concurrent

        self._observer.batch_started(
            run_id=run_id,
            total_records=len(records),
            max_concurrent=max_concurrent,
        )
        started_at = time.monotonic()

        slots: list[ScoredRecord | None] = [None] * len(records)
        sem = asyncio.Semaphore(max_concurrent)
        completed_count: list[int] = [0]
        progress_lock = asyncio.Lock()

        try:
            async with asyncio.TaskGroup() as tg:
                for position, record in enumerate(records):
                    tg.create_task(
                        self._score_one(
                            sem=sem,
                            run_id=run_id,
                            position=position,
                            record=record,
                            slots=slots,
                            completed_count=completed_count,
                            progress_lock=progress_lock,
                        )
                    )
        except* ResponseQualityError as eg:
            raise eg.exceptions[0]

        outcomes = [outcome for outcome in slots if outcome is not None]
        summary = BatchSummary(
            run_id=run_id,
            dataset_sha256=load_result.sha256,
            config_name=self._config.name,
            outcomes=outcomes,
        )

        self._observer.batch_completed(
            run_id=run_id,
            processed=summary.processed,
            errors=summary.errors,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return summary

    async def _score_one(
        self,
        sem: asyncio.Semaphore,
        run_id: str,
        position: int,
        record: ResponseRecord,
        slots: list[ScoredRecord | None],
        completed_count: list[int],
        progress_lock: asyncio.Lock,
    ) -> None:
        async with sem:
            try:
                metrics = await asyncio.to_thread(
                    self._scorer.calculate_metrics, record.content, record.prompt
                )
            except InvalidInputError as exc:
                slots[position] = ScoredRecord(record=record, error=str(exc))
                self._observer.batch_record_failed(
                    run_id=run_id, record_id=record.record_id, reason=str(exc)
                )
            else:
                slots[position] = ScoredRecord(record=record, metrics=metrics)
                self._observer.batch_record_scored(
                    run_id=run_id,
                    record_id=record.record_id,
                    overall_score=metrics.overall_score,
                )

        async with progress_lock:
            completed_count[0] += 1
            self._observer.batch_progress(
                run_id=run_id,
                completed=completed_count[0],
                total=len(slots),
            )
