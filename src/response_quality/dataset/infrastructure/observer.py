"""Structlog implementation of the DatasetObserver port."""

import structlog


class StructlogDatasetObserver:
    """Delegates dataset domain events to structlog.

    Satisfies the DatasetObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def dataset_loading_started(self, path: str, content_key: str) -> None:
        self._log.info("dataset.loading_started", path=path, content_key=content_key)

    def dataset_record_loaded(self, record_id: str) -> None:
        self._log.debug("dataset.record_loaded", record_id=record_id)

    def dataset_loading_completed(self, path: str, total_records: int) -> None:
        self._log.info(
            "dataset.loading_completed",
            path=path,
            total_records=total_records,
        )

    def dataset_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("dataset.loading_failed", path=path, reason=reason)
