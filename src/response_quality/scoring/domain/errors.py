"""Error types raised by the scoring domain."""

from response_quality.core.errors import ResponseQualityError


class InvalidInputError(ResponseQualityError):
    """Raised when the content handed to the scorer is missing, empty, or not a string."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to score response: {reason}")
