"""Tests for CompositeBatchObserver."""

from response_quality.batch.infrastructure.composite_observer import (
    CompositeBatchObserver,
)
from tests.batch.fake_observer import FakeBatchObserver


def _make_composite(*observers: FakeBatchObserver) -> CompositeBatchObserver:
    return CompositeBatchObserver(observers=list(observers))


class TestCompositeBatchObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_batch_started_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_started(run_id="run-1", total_records=3, max_concurrent=4)

        assert obs_a.started[0].run_id == "run-1"
        assert obs_b.started[0].total_records == 3
        assert obs_b.started[0].max_concurrent == 4

    def test_record_events_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_record_scored(run_id="r", record_id="a", overall_score=0.6)
        composite.batch_record_failed(run_id="r", record_id="b", reason="empty")

        for obs in (obs_a, obs_b):
            assert obs.scored[0].overall_score == 0.6
            assert obs.failed[0].reason == "empty"

    def test_progress_and_completed_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_progress(run_id="r", completed=1, total=2)
        composite.batch_completed(
            run_id="r", processed=2, errors=0, elapsed_seconds=1.5
        )

        for obs in (obs_a, obs_b):
            assert obs.progress[0].completed == 1
            assert obs.completed[0].elapsed_seconds == 1.5

    def test_empty_composite_is_a_no_op(self) -> None:
        composite = _make_composite()

        composite.batch_started(run_id="r", total_records=0, max_concurrent=1)
        composite.batch_completed(
            run_id="r", processed=0, errors=0, elapsed_seconds=0.0
        )
