"""Aggregator — groups scored records by generation parameters and computes statistics."""

import statistics
from dataclasses import dataclass

from response_quality.batch.domain.outcome import ScoredRecord
from response_quality.dataset.domain.record import GenerationParameters, ParameterKey
from response_quality.scoring.domain.metrics import SCORE_FIELDS


@dataclass(frozen=True)
class ParameterGroupStats:
    """All successfully scored records sharing one parameter set, with per-metric statistics."""

    parameters: GenerationParameters
    outcomes: list[ScoredRecord]
    means: dict[str, float]
    stddevs: dict[str, float]

    @property
    def count(self) -> int:
        return len(self.outcomes)


def _stddev(values: list[float]) -> float:
    """Return sample stddev for N >= 2, else 0.0."""
    if len(values) < 2:
        return 0.0
    return statistics.stdev(values)


def aggregate(outcomes: list[ScoredRecord]) -> list[ParameterGroupStats]:
    """Group successful outcomes by (temperature, top_p, max_tokens).

    Failed outcomes are skipped. Returns one ParameterGroupStats per distinct
    parameter set, in order of first occurrence.
    """
    groups: dict[ParameterKey, list[ScoredRecord]] = {}
    parameters: dict[ParameterKey, GenerationParameters] = {}

    for outcome in outcomes:
        if outcome.metrics is None:
            continue
        key = outcome.record.parameters.key
        if key not in groups:
            groups[key] = []
            parameters[key] = outcome.record.parameters
        groups[key].append(outcome)

    results: list[ParameterGroupStats] = []
    for key, group in groups.items():
        means: dict[str, float] = {}
        stddevs: dict[str, float] = {}
        for field in SCORE_FIELDS:
            values = [float(getattr(o.metrics, field)) for o in group]
            means[field] = statistics.mean(values)
            stddevs[field] = _stddev(values)
        results.append(
            ParameterGroupStats(
                parameters=parameters[key],
                outcomes=group,
                means=means,
                stddevs=stddevs,
            )
        )

    return results


def best_group(
    groups: list[ParameterGroupStats], metric: str = "overall_score"
) -> ParameterGroupStats | None:
    """Return the group with the highest mean for metric; the earliest wins ties."""
    if metric not in SCORE_FIELDS:
        raise ValueError(f"unknown metric: {metric!r}")
    best: ParameterGroupStats | None = None
    for group in groups:
        if best is None or group.means[metric] > best.means[metric]:
            best = group
    return best
