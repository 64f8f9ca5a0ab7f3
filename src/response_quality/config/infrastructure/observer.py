"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Logs config events; weight overrides are warnings since they change overall scores."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(
        self, name: str, version: str, dataset_path: str, max_concurrent: int
    ) -> None:
        self._log.info(
            "config.loaded",
            name=name,
            version=version,
            dataset_path=dataset_path,
            max_concurrent=max_concurrent,
        )

    def config_weights_overridden(self, weights: dict[str, float]) -> None:
        self._log.warning(
            "config.weights_overridden",
            **{f"{name}_weight": value for name, value in weights.items()},
        )
