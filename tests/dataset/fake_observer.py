"""Fake DatasetObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadingStartedEvent:
    path: str
    content_key: str


@dataclass(frozen=True)
class RecordLoadedEvent:
    record_id: str


@dataclass(frozen=True)
class LoadingCompletedEvent:
    path: str
    total_records: int


@dataclass(frozen=True)
class LoadingFailedEvent:
    path: str
    reason: str


class FakeDatasetObserver:
    def __init__(self) -> None:
        self.loading_started: list[LoadingStartedEvent] = []
        self.records_loaded: list[RecordLoadedEvent] = []
        self.loading_completed: list[LoadingCompletedEvent] = []
        self.loading_failed: list[LoadingFailedEvent] = []

    def dataset_loading_started(self, path: str, content_key: str) -> None:
        self.loading_started.append(
            LoadingStartedEvent(path=path, content_key=content_key)
        )

    def dataset_record_loaded(self, record_id: str) -> None:
        self.records_loaded.append(RecordLoadedEvent(record_id=record_id))

    def dataset_loading_completed(self, path: str, total_records: int) -> None:
        self.loading_completed.append(
            LoadingCompletedEvent(path=path, total_records=total_records)
        )

    def dataset_loading_failed(self, path: str, reason: str) -> None:
        self.loading_failed.append(LoadingFailedEvent(path=path, reason=reason))
