"""Base exception class for all response-quality-specific errors."""


class ResponseQualityError(Exception):
    """Base class for all response-quality errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
