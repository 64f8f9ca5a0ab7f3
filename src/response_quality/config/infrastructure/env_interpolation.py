"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of all referenced env vars that are unset and have no default.

    Every missing var is collected before returning, in first-seen order.
    """
    missing: list[str] = []
    _collect(data, missing)
    return missing


def _collect(data: RawValue, missing: list[str]) -> None:
    if isinstance(data, str):
        for match in _ENV_VAR_PATTERN.finditer(data):
            name = match.group("name")
            if match.group("default") is not None:
                continue
            if name not in os.environ and name not in missing:
                missing.append(name)
    elif isinstance(data, list):
        for item in data:
            _collect(item, missing)
    elif isinstance(data, dict):
        for value in data.values():
            _collect(value, missing)


def _substitute(match: re.Match[str]) -> str:
    name = match.group("name")
    default = match.group("default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def interpolate(data: RawValue) -> RawValue:
    """
    Recursively substitute every ${ENV_VAR} reference with its runtime value.

    Call `collect_missing_vars` first: a reference without a default whose
    variable is unset raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
