"""Tests for recursive ${ENV_VAR} interpolation."""

import pytest

from response_quality.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    """Missing variables are collected across the whole tree."""

    def test_collects_from_nested_structures(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("A_VAR", raising=False)
        monkeypatch.delenv("B_VAR", raising=False)

        data = {"x": "${A_VAR}", "y": [{"z": "prefix-${B_VAR}"}]}

        assert collect_missing_vars(data) == ["A_VAR", "B_VAR"]

    def test_each_var_is_reported_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert collect_missing_vars(["${A_VAR}", "${A_VAR}"]) == ["A_VAR"]

    def test_vars_with_defaults_are_not_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert collect_missing_vars({"x": "${A_VAR:-fallback}"}) == []

    def test_non_string_scalars_are_ignored(self) -> None:
        assert collect_missing_vars({"n": 1, "f": 0.5, "b": True, "none": None}) == []


class TestInterpolate:
    """Interpolation substitutes values and defaults recursively."""

    def test_substitutes_set_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A_VAR", "value")

        assert interpolate({"x": ["a-${A_VAR}-b"]}) == {"x": ["a-value-b"]}

    def test_default_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert interpolate("${A_VAR:-fallback}") == "fallback"

    def test_set_variable_wins_over_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("A_VAR", "set")

        assert interpolate("${A_VAR:-fallback}") == "set"

    def test_non_string_values_pass_through(self) -> None:
        assert interpolate({"n": 3, "b": False}) == {"n": 3, "b": False}
