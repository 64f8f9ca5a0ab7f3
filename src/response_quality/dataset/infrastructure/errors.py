"""Error types raised by dataset infrastructure."""

from response_quality.core.errors import ResponseQualityError


class DatasetLoadError(ResponseQualityError):
    """Raised when a JSONL dataset cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")
