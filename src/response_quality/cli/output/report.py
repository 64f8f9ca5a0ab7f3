"""Report builders — JSON summary and per-record JSONL lines in display scale."""

from typing import Any, TypeAlias

from response_quality.batch.domain.summary import BatchSummary
from response_quality.cli.output.aggregator import ParameterGroupStats
from response_quality.config.domain.config import BatchConfig
from response_quality.scoring.domain.metrics import SCORE_FIELDS, MetricsResult

JsonRecord: TypeAlias = dict[str, Any]

SCHEMA_VERSION = "response_quality_report_1"


def to_display_scale(score: float) -> float:
    """Rescale a [0, 1] score to [0, 100], rounded to two decimals."""
    return round(score * 100, 2)


def metrics_to_display(metrics: MetricsResult) -> JsonRecord:
    """Scores in display scale; text statistics rounded to two decimals."""
    data: JsonRecord = {
        field: to_display_scale(getattr(metrics, field)) for field in SCORE_FIELDS
    }
    data.update(
        {
            "word_count": metrics.word_count,
            "sentence_count": metrics.sentence_count,
            "paragraph_count": metrics.paragraph_count,
            "avg_sentence_length": round(metrics.avg_sentence_length, 2),
            "lexical_diversity": round(metrics.lexical_diversity, 2),
            "sentiment_polarity": round(metrics.sentiment_polarity, 2),
            "complexity_score": round(metrics.complexity_score, 2),
        }
    )
    return data


def build_report_json(
    summary: BatchSummary,
    groups: list[ParameterGroupStats],
    config: BatchConfig,
) -> JsonRecord:
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": summary.run_id,
        "config": {"name": config.name, "version": config.version},
        "dataset": {
            "path": str(config.dataset.path),
            "sha256": summary.dataset_sha256,
        },
        "weights": config.scoring.weights.model_dump(),
        "summary": {
            "total_requested": summary.total_requested,
            "processed": summary.processed,
            "errors": summary.errors,
            "success_rate": round(summary.success_rate, 4),
        },
        "parameter_groups": [
            {
                "parameters": group.parameters.model_dump(),
                "label": group.parameters.label(),
                "count": group.count,
                "mean": {f: to_display_scale(v) for f, v in group.means.items()},
                "stddev": {f: to_display_scale(v) for f, v in group.stddevs.items()},
            }
            for group in groups
        ],
        "detailed_results": {"format": "jsonl", "file_path": None},
    }


def build_record_jsonl_lines(summary: BatchSummary) -> list[JsonRecord]:
    lines: list[JsonRecord] = []
    for outcome in summary.outcomes:
        record = outcome.record
        lines.append(
            {
                "run_id": summary.run_id,
                "record_id": record.record_id,
                "parameters": record.parameters.model_dump(),
                "success": outcome.succeeded,
                "metrics": (
                    metrics_to_display(outcome.metrics)
                    if outcome.metrics is not None
                    else None
                ),
                "error": outcome.error,
            }
        )
    return lines
