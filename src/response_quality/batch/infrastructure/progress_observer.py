"""ProgressBatchObserver — renders a Rich progress bar for a batch run on stderr."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


class ProgressBatchObserver:
    """Shows one bar counting scored records, with a running failure count.

    Only batch_started, batch_record_failed, batch_progress, and
    batch_completed produce output; batch_record_scored is a no-op.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self.completed = 0
        self.failed = 0

    def batch_started(
        self, run_id: str, total_records: int, max_concurrent: int
    ) -> None:
        self.completed = 0
        self.failed = 0
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("[bold]Scoring[/bold]"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("{task.fields[failed]}"),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description="scoring", total=float(total_records), failed=""
        )
        self._progress.start()

    def batch_record_scored(
        self, run_id: str, record_id: str, overall_score: float
    ) -> None:
        pass

    def batch_record_failed(self, run_id: str, record_id: str, reason: str) -> None:
        self.failed += 1
        if self._progress is not None and self._task_id is not None:
            self._progress.update(
                self._task_id, failed=f"[red]{self.failed} failed[/red]"
            )

    def batch_progress(self, run_id: str, completed: int, total: int) -> None:
        self.completed = completed
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=completed)

    def batch_completed(
        self,
        run_id: str,
        processed: int,
        errors: int,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
