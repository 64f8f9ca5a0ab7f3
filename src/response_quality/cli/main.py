"""CLI entrypoint for response-quality — typer app with `score` and `batch` commands."""

import asyncio
import json
import sys
import time
from datetime import datetime
from pathlib import Path

import structlog
import typer

from response_quality.batch.application.runner import BatchScoringRunner
from response_quality.batch.domain.observer import BatchObserver
from response_quality.batch.domain.summary import BatchSummary
from response_quality.batch.infrastructure.composite_observer import (
    CompositeBatchObserver,
)
from response_quality.batch.infrastructure.observer import StructlogBatchObserver
from response_quality.batch.infrastructure.progress_observer import (
    ProgressBatchObserver,
)
from response_quality.cli.output.aggregator import (
    ParameterGroupStats,
    aggregate,
    best_group,
)
from response_quality.cli.output.report import (
    build_record_jsonl_lines,
    build_report_json,
    metrics_to_display,
    to_display_scale,
)
from response_quality.config.domain.config import BatchConfig
from response_quality.config.infrastructure.observer import StructlogConfigObserver
from response_quality.config.infrastructure.yaml_loader import YamlConfigLoader
from response_quality.core.errors import ResponseQualityError
from response_quality.dataset.infrastructure.jsonl_loader import JsonlResponseLoader
from response_quality.dataset.infrastructure.observer import StructlogDatasetObserver
from response_quality.scoring.domain.metrics import MetricsResult
from response_quality.scoring.domain.scorer import TextQualityScorer

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _output_stem(config_name: str, run_id: str) -> str:
    """Build the output file stem: {config_name}_{YYYYMMDD}_{short_run_id}."""
    date_str = datetime.now().strftime("%Y%m%d")
    return f"{config_name}_{date_str}_{run_id[:8]}"


def _write_outputs(
    output_dir: Path,
    stem: str,
    summary: BatchSummary,
    groups: list[ParameterGroupStats],
    config: BatchConfig,
) -> tuple[Path, Path]:
    """Write the JSON report and detailed JSONL. Returns (json_path, jsonl_path)."""
    json_path = output_dir / f"{stem}.json"
    jsonl_path = output_dir / f"{stem}.detailed.jsonl"

    report = build_report_json(summary=summary, groups=groups, config=config)
    report["detailed_results"]["file_path"] = jsonl_path.name
    json_path.write_text(json.dumps(report, indent=2), encoding="utf-8")

    lines = build_record_jsonl_lines(summary=summary)
    jsonl_path.write_text(
        "".join(json.dumps(line) + "\n" for line in lines),
        encoding="utf-8",
    )
    return json_path, jsonl_path


def _read_input(text: str | None, file: Path | None, what: str) -> str | None:
    if text is not None and file is not None:
        typer.echo(f"Pass the {what} either inline or with a file, not both.")
        raise typer.Exit(code=2)
    if file is not None:
        return file.read_text(encoding="utf-8")
    return text


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"

_SCORE_LABELS: list[tuple[str, str]] = [
    ("Coherence", "coherence_score"),
    ("Completeness", "completeness_score"),
    ("Readability", "readability_score"),
    ("Length", "length_appropriateness_score"),
    ("Creativity", "creativity_score"),
    ("Specificity", "specificity_score"),
    ("Overall", "overall_score"),
]


def _score_color(score: float) -> str:
    """Color for a display-scale (0-100) score."""
    if score >= 75.0:
        return _GREEN
    if score >= 50.0:
        return _YELLOW
    return _RED


def _rule(width: int = 64, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _print_metrics(metrics: MetricsResult) -> None:
    label_w = max(len(label) for label, _ in _SCORE_LABELS)
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  Response quality{_RESET}")
    _rule(color=_CYAN)
    for label, field in _SCORE_LABELS:
        score = to_display_scale(getattr(metrics, field))
        color = _score_color(score)
        filled = round(score / 10)
        bar = f"{color}{'█' * filled}{_DIM}{'░' * (10 - filled)}{_RESET}"
        weight = _BOLD if field == "overall_score" else ""
        typer.echo(
            f"  {weight}{_WHITE}{label:<{label_w}}{_RESET}"
            f"  {color}{score:>6.2f}{_RESET}  {bar}"
        )

    typer.echo("")
    stats = [
        ("Words", str(metrics.word_count)),
        ("Sentences", str(metrics.sentence_count)),
        ("Paragraphs", str(metrics.paragraph_count)),
        ("Avg sentence length", f"{metrics.avg_sentence_length:.2f}"),
        ("Lexical diversity", f"{metrics.lexical_diversity:.2f}"),
        ("Sentiment polarity", f"{metrics.sentiment_polarity:+.2f}"),
        ("Complexity", f"{metrics.complexity_score:.2f}"),
    ]
    stat_w = max(len(label) for label, _ in stats)
    for label, value in stats:
        typer.echo(f"  {_DIM}{label:<{stat_w}}{_RESET}  {value}")
    typer.echo("")


def _format_elapsed(elapsed_seconds: float) -> str:
    """Format elapsed seconds as '1m 23.4s' or '5.2s'."""
    minutes, seconds = divmod(elapsed_seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{elapsed_seconds:.1f}s"


def _print_batch_summary(
    summary: BatchSummary,
    groups: list[ParameterGroupStats],
    json_path: Path,
    jsonl_path: Path,
    elapsed_seconds: float,
) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  response-quality  ·  Batch Complete{_RESET}")
    _rule(color=_CYAN)

    meta_rows: list[tuple[str, str]] = [
        ("Run ID", f"{summary.run_id[:8]}-..."),
        ("Config", summary.config_name),
        ("Dataset SHA256", f"{summary.dataset_sha256[:16]}..."),
        ("Records", str(summary.total_requested)),
        ("Scored", str(summary.processed)),
        ("Failed", str(summary.errors)),
        ("Success rate", f"{summary.success_rate:.0%}"),
        ("Elapsed", _format_elapsed(elapsed_seconds=elapsed_seconds)),
        ("Report JSON", str(json_path)),
        ("Detailed JSONL", str(jsonl_path)),
    ]
    label_w = max(len(label) for label, _ in meta_rows)
    for label, value in meta_rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")

    if not groups:
        typer.echo("")
        return

    typer.echo("")
    group_w = max(len(g.parameters.label()) for g in groups)
    header = f"  {_DIM}{'Parameters':<{group_w}}  {'N':>4}"
    for label, _ in _SCORE_LABELS:
        header += f"  {label[:7]:>7}"
    typer.echo(header + _RESET)

    winner = best_group(groups)
    for group in groups:
        marker = f"{_BOLD}▲{_RESET}" if group is winner and len(groups) > 1 else " "
        row = f"  {_WHITE}{group.parameters.label():<{group_w}}{_RESET}  {group.count:>4}"
        for _, field in _SCORE_LABELS:
            score = to_display_scale(group.means[field])
            row += f"  {_score_color(score)}{score:>7.2f}{_RESET}"
        typer.echo(row + f" {marker}")

    if winner is not None and len(groups) > 1:
        typer.echo("")
        typer.echo(
            f"  {_GREEN}{_BOLD}Best: {winner.parameters.label()}{_RESET}"
            f"  {_DIM}overall {to_display_scale(winner.means['overall_score']):.2f}{_RESET}"
        )
    typer.echo("")


@app.command()
def score(
    text: str | None = typer.Argument(None, help="Response text to score"),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Read the response text from a file"
    ),
    prompt: str | None = typer.Option(
        None, "--prompt", "-p", help="Prompt that produced the response"
    ),
    prompt_file: Path | None = typer.Option(
        None, "--prompt-file", help="Read the prompt from a file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print metrics as JSON"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Score a single response, optionally against its prompt."""
    _configure_structlog(log_format=log_format)
    content = _read_input(text=text, file=file, what="response")
    if content is None:
        typer.echo("Provide the response text as an argument or with --file.")
        raise typer.Exit(code=2)
    prompt_text = _read_input(text=prompt, file=prompt_file, what="prompt")

    try:
        metrics = TextQualityScorer().calculate_metrics(content, prompt_text)
    except ResponseQualityError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(metrics_to_display(metrics), indent=2))
    else:
        _print_metrics(metrics)


@app.command()
def batch(
    config_path: Path = typer.Argument(..., help="Path to batch config YAML"),
    output_dir: Path = typer.Option(
        Path("./results"),
        "--output-dir",
        "-o",
        help="Directory for output files",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Score every response in a JSONL dataset described by a YAML config."""
    try:
        _configure_structlog(log_format=log_format)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        try:
            config = loader.load(path=config_path)
        except ResponseQualityError as exc:
            typer.echo(str(exc))
            raise typer.Exit(code=1) from exc

        output_dir.mkdir(parents=True, exist_ok=True)

        observers: list[BatchObserver] = [StructlogBatchObserver()]
        if log_format != "json":
            observers.append(ProgressBatchObserver())

        runner = BatchScoringRunner(
            config=config,
            dataset_loader=JsonlResponseLoader(observer=StructlogDatasetObserver()),
            scorer=TextQualityScorer(
                weights=config.scoring.weights,
                lexicon=config.scoring.lexicon,
            ),
            observer=CompositeBatchObserver(observers=observers),
        )

        started_at = time.monotonic()
        summary = asyncio.run(runner.run())
        elapsed_seconds = time.monotonic() - started_at

        groups = aggregate(outcomes=summary.outcomes)
        json_path, jsonl_path = _write_outputs(
            output_dir=output_dir,
            stem=_output_stem(config_name=config.name, run_id=summary.run_id),
            summary=summary,
            groups=groups,
            config=config,
        )

        _print_batch_summary(
            summary=summary,
            groups=groups,
            json_path=json_path,
            jsonl_path=jsonl_path,
            elapsed_seconds=elapsed_seconds,
        )

    except KeyboardInterrupt:
        typer.echo("Batch interrupted.")
        sys.exit(1)
    except ResponseQualityError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
