"""DatasetLoadResult — the result of loading a dataset, including records and integrity hash."""

from pydantic import BaseModel, Field

from response_quality.dataset.domain.record import ResponseRecord


class DatasetLoadResult(BaseModel, frozen=True):
    """Immutable value object returned by a DatasetLoader.

    Carries both the parsed records and the SHA-256 hex digest of the raw file
    bytes, allowing callers to record which exact dataset version was scored.
    """

    records: list[ResponseRecord]
    sha256: str = Field(min_length=1)
