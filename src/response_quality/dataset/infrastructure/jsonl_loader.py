"""JSONL dataset loader — reads a responses file and returns typed ResponseRecord objects."""

import hashlib
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from response_quality.config.domain.dataset import DatasetConfig
from response_quality.dataset.domain.load_result import DatasetLoadResult
from response_quality.dataset.domain.observer import DatasetObserver
from response_quality.dataset.domain.record import GenerationParameters, ResponseRecord
from response_quality.dataset.infrastructure.errors import DatasetLoadError

_PARAMETER_KEYS = ("temperature", "top_p", "max_tokens")


class JsonlResponseLoader:
    """Loads a JSONL file of generated responses into ResponseRecord value objects."""

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, config: DatasetConfig) -> DatasetLoadResult:
        """
        Load all records from the JSONL file described by config.

        Generation parameters are read from a nested ``parameters`` object when
        present, otherwise from top-level ``temperature``/``top_p``/``max_tokens``
        keys. Collects ALL per-line errors before raising a single
        DatasetLoadError listing every issue found.

        Raises:
            DatasetLoadError: if the file is not found, any line is invalid JSON,
                or any line lacks a string content value.
        """
        path_str = str(config.path)
        self._observer.dataset_loading_started(
            path=path_str, content_key=config.content_key
        )

        try:
            raw_bytes = self._read_bytes(path=config.path)
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        lines = [
            line for line in raw_bytes.decode("utf-8").splitlines() if line.strip()
        ]
        records, errors = self._parse_lines(lines=lines, config=config)

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        self._observer.dataset_loading_completed(
            path=path_str,
            total_records=len(records),
        )
        return DatasetLoadResult(
            records=records,
            sha256=hashlib.sha256(raw_bytes).hexdigest(),
        )

    def _read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def _parse_lines(
        self,
        lines: list[str],
        config: DatasetConfig,
    ) -> tuple[list[ResponseRecord], list[str]]:
        """Parse each line into a ResponseRecord, collecting errors without aborting early."""
        records: list[ResponseRecord] = []
        errors: list[str] = []

        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index, config=config)
            if isinstance(result, str):
                errors.append(result)
            else:
                records.append(result)
                self._observer.dataset_record_loaded(record_id=result.record_id)

        return records, errors

    def _parse_line(
        self,
        line: str,
        index: int,
        config: DatasetConfig,
    ) -> ResponseRecord | str:
        """
        Parse a single JSONL line into a ResponseRecord.

        Returns a ResponseRecord on success, or an error string describing the problem.
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"

        if config.content_key not in data:
            return f"line {index}: missing key '{config.content_key}'"

        content = data[config.content_key]
        if not isinstance(content, str):
            return f"line {index}: '{config.content_key}' must be a string"

        prompt = data.get(config.prompt_key)
        if prompt is not None and not isinstance(prompt, str):
            return f"line {index}: '{config.prompt_key}' must be a string"

        record_id = data.get(config.id_key)
        try:
            return ResponseRecord(
                record_id=str(index) if record_id is None else str(record_id),
                content=content,
                prompt=prompt,
                parameters=GenerationParameters.model_validate(
                    _extract_parameters(data)
                ),
            )
        except ValidationError as exc:
            return f"line {index}: invalid parameters: {_first_error(exc)}"


def _extract_parameters(data: dict[str, Any]) -> dict[str, Any]:
    nested = data.get("parameters")
    source = nested if isinstance(nested, dict) else data
    return {key: source[key] for key in _PARAMETER_KEYS if key in source}


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"
