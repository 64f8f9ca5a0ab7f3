"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from response_quality.config.domain.config import BatchConfig
from response_quality.config.domain.observer import ConfigObserver
from response_quality.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from response_quality.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from response_quality.scoring.domain.weighting import OverallWeights


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a BatchConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> BatchConfig:
        """
        Load, interpolate, validate, and return a BatchConfig from a YAML file.

        A relative dataset path is resolved against the config file's directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the document does not match the schema.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        resolved = _resolve_dataset_path(interpolated=interpolated, base_dir=path.parent)
        cfg = _build_config(resolved=resolved)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            name=cfg.name,
            version=cfg.version,
            dataset_path=str(cfg.dataset.path),
            max_concurrent=cfg.execution.max_concurrent,
        )
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _resolve_dataset_path(interpolated: Any, base_dir: Path) -> Any:
    dataset = interpolated.get("dataset")
    if not isinstance(dataset, dict) or not isinstance(dataset.get("path"), str):
        return interpolated

    dataset_path = Path(dataset["path"])
    if not dataset_path.is_absolute():
        dataset_path = base_dir / dataset_path
    return {**interpolated, "dataset": {**dataset, "path": dataset_path}}


def _build_config(resolved: Any) -> BatchConfig:
    try:
        return BatchConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: BatchConfig, observer: ConfigObserver) -> None:
    if cfg.scoring.weights != OverallWeights():
        observer.config_weights_overridden(cfg.scoring.weights.model_dump())
