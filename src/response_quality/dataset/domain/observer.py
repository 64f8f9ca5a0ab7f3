"""Observer port for the dataset domain — defines events in domain language."""

from typing import Protocol


class DatasetObserver(Protocol):
    def dataset_loading_started(self, path: str, content_key: str) -> None: ...

    def dataset_record_loaded(self, record_id: str) -> None: ...

    def dataset_loading_completed(self, path: str, total_records: int) -> None: ...

    def dataset_loading_failed(self, path: str, reason: str) -> None: ...
