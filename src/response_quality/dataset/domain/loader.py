"""DatasetLoader Protocol — structural interface for loading response records."""

from typing import Protocol

from response_quality.config.domain.dataset import DatasetConfig
from response_quality.dataset.domain.load_result import DatasetLoadResult


class DatasetLoader(Protocol):
    """Loads records from a dataset described by DatasetConfig, returning a DatasetLoadResult."""

    def load(self, config: DatasetConfig) -> DatasetLoadResult: ...
