"""ConfigObserver port: config events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(
        self, name: str, version: str, dataset_path: str, max_concurrent: int
    ) -> None: ...

    def config_weights_overridden(self, weights: dict[str, float]) -> None: ...
