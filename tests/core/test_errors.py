"""Tests verifying the ResponseQualityError type hierarchy."""

from pathlib import Path

from response_quality.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from response_quality.core.errors import ResponseQualityError
from response_quality.dataset.infrastructure.errors import DatasetLoadError
from response_quality.scoring.domain.errors import InvalidInputError


class TestResponseQualityErrorHierarchy:
    """All project-specific exceptions inherit from ResponseQualityError."""

    def test_invalid_input_error_is_response_quality_error(self) -> None:
        error = InvalidInputError(reason="content is required")
        assert isinstance(error, ResponseQualityError)

    def test_missing_env_vars_error_is_response_quality_error(self) -> None:
        error = MissingEnvVarsError(missing_vars=["MY_VAR"])
        assert isinstance(error, ResponseQualityError)

    def test_config_validation_error_is_response_quality_error(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert isinstance(error, ResponseQualityError)

    def test_config_load_error_is_response_quality_error(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert isinstance(error, ResponseQualityError)

    def test_dataset_load_error_is_response_quality_error(self) -> None:
        error = DatasetLoadError(reason="file not found")
        assert isinstance(error, ResponseQualityError)

    def test_response_quality_error_is_exception(self) -> None:
        error = ResponseQualityError("test")
        assert isinstance(error, Exception)


class TestInvalidInputError:
    """InvalidInputError is a non-retriable error with a 'Failed to' message."""

    def test_is_not_retriable(self) -> None:
        error = InvalidInputError(reason="content must not be empty")
        assert error.retriable is False

    def test_message_starts_with_failed(self) -> None:
        error = InvalidInputError(reason="content must not be empty")
        assert str(error).startswith("Failed to ")

    def test_message_includes_reason(self) -> None:
        error = InvalidInputError(reason="content must not be empty")
        assert "content must not be empty" in str(error)

    def test_missing_env_vars_are_listed_sorted(self) -> None:
        error = MissingEnvVarsError(missing_vars=["B_VAR", "A_VAR"])
        assert "A_VAR, B_VAR" in str(error)
