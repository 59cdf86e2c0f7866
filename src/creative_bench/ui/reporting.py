"""
Result rendering utilities.

Builds Rich tables for benchmark results, run history, leaderboard and
model catalog, and renders a run as markdown for saving to disk.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from creative_bench.models.catalog import ModelMeta
from creative_bench.models.results import BenchmarkResult
from creative_bench.models.run import BenchmarkRun
from creative_bench.models.scores import SCORE_DIMENSIONS
from creative_bench.models.stats import ModelStats

_PREVIEW_CHARS = 120


def _preview(text: str, limit: int = _PREVIEW_CHARS) -> str:
	flat = " ".join(text.split())
	return flat[:limit] + "..." if len(flat) > limit else flat


def _short_dim(dim: str) -> str:
	return "".join(part[0] for part in dim.split("_")).upper()


def format_ts(ts: int) -> str:
	"""Format epoch milliseconds as a UTC timestamp."""
	return datetime.fromtimestamp(ts / 1000,
	                              tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def results_table(results: list[BenchmarkResult],
                  judge_model: str | None = None) -> Table:
	"""Build a ranked table of benchmark results."""
	title = f"Results (judge: {judge_model})" if judge_model else "Results"
	table = Table(title=title, box=box.ROUNDED, expand=True)
	table.add_column("#", justify="right")
	table.add_column("Model", style="bold")
	for dim in SCORE_DIMENSIONS:
		table.add_column(_short_dim(dim), justify="right")
	table.add_column("Total", justify="right", style="cyan")
	table.add_column("Latency", justify="right")
	table.add_column("Output")
	for rank, res in enumerate(results, start=1):
		output = Text(_preview(res.output))
		if res.error:
			output.stylize("red")
		elif not res.judged:
			output.append(" (unjudged)", style="yellow")
		table.add_row(
		    str(rank),
		    res.model,
		    *(str(getattr(res.scores, dim)) for dim in SCORE_DIMENSIONS),
		    f"{res.scores.total}/40",
		    f"{res.latency_ms / 1000:.2f}s",
		    output,
		)
	return table


def history_table(runs: list[BenchmarkRun]) -> Table:
	table = Table(title="Run history", box=box.ROUNDED, expand=True)
	table.add_column("When")
	table.add_column("Judge")
	table.add_column("Models", justify="right")
	table.add_column("Winner", style="bold")
	table.add_column("Prompt")
	for run in runs:
		winner = run.winner
		table.add_row(
		    format_ts(run.ts),
		    run.judge_model,
		    str(len(run.models)),
		    f"{winner.model} ({winner.scores.total})" if winner else "-",
		    _preview(run.prompt, 60),
		)
	return table


def theme_coherence(avg_total: float) -> str:
	"""Map an average total (0-40) onto a 0-10 theme coherence figure."""
	if avg_total <= 0:
		return "-"
	# halves round up, 5.25 -> 5.3
	scaled = avg_total / len(SCORE_DIMENSIONS)
	return f"{math.floor(scaled * 10 + 0.5) / 10:.1f}"


def _fmt(v: float | None, suffix: str = "") -> str:
	return "-" if v is None else f"{v:g}{suffix}"


def leaderboard_table(stats: list[ModelStats],
                      catalog: list[ModelMeta] | None = None) -> Table:
	"""
	Build the leaderboard, joined with catalog metadata when available.

	Parameters:
		stats: Rows from compute_model_stats, optionally extended with
			zero-run catalog models.
		catalog: Catalog rows supplying context and pricing columns.
	"""
	meta = {m.model: m for m in catalog or []}
	table = Table(title="Leaderboard", box=box.ROUNDED, expand=True)
	table.add_column("#", justify="right")
	table.add_column("Model", style="bold")
	table.add_column("Context", justify="right")
	table.add_column("$/1M in", justify="right")
	table.add_column("$/1M out", justify="right")
	table.add_column("Theme coherence", justify="right")
	table.add_column("Avg total", justify="right", style="cyan")
	table.add_column("Wins", justify="right")
	table.add_column("Avg latency", justify="right")
	table.add_column("Runs", justify="right")
	for rank, row in enumerate(stats, start=1):
		m = meta.get(row.model)
		table.add_row(
		    str(rank),
		    row.model,
		    (m.context if m else "") or "-",
		    _fmt(m.input_cost_per_1m if m else None),
		    _fmt(m.output_cost_per_1m if m else None),
		    theme_coherence(row.avg_total),
		    f"{row.avg_total:.1f}" if row.avg_total else "-",
		    str(row.wins),
		    f"{row.avg_latency_s:.2f}s" if row.avg_latency_s else "-",
		    str(row.runs),
		)
	return table


def catalog_table(models: list[ModelMeta]) -> Table:
	table = Table(title="Model catalog", box=box.ROUNDED, expand=True)
	table.add_column("Model", style="bold")
	table.add_column("Context", justify="right")
	table.add_column("$/1M in", justify="right")
	table.add_column("$/1M out", justify="right")
	table.add_column("Speed", justify="right")
	table.add_column("Latency", justify="right")
	for m in models:
		table.add_row(
		    m.model,
		    m.context or "-",
		    _fmt(m.input_cost_per_1m),
		    _fmt(m.output_cost_per_1m),
		    _fmt(m.speed, " tok/s"),
		    _fmt(m.latency, "s"),
		)
	return table


def render_run_md(run: BenchmarkRun) -> str:
	"""
	Render a benchmark run as markdown.

	Parameters:
		run: The run to render.

	Returns:
		Markdown with a score table followed by each model's output.
	"""
	dims = " | ".join(SCORE_DIMENSIONS)
	lines = [
	    f"# Creative writing benchmark ({format_ts(run.ts)} UTC)",
	    "",
	    f"- Judge: {run.judge_model}",
	    f"- Models: {', '.join(run.models)}",
	    "",
	    "## Prompt",
	    "",
	    run.prompt,
	    "",
	    "## Scores",
	    "",
	    f"| Rank | Model | {dims} | total | latency_ms | judged |",
	    "|" + "---|" * (len(SCORE_DIMENSIONS) + 5),
	]
	for rank, res in enumerate(run.results, start=1):
		values = " | ".join(
		    str(getattr(res.scores, d)) for d in SCORE_DIMENSIONS)
		lines.append(f"| {rank} | {res.model} | {values} | "
		             f"{res.scores.total} | {res.latency_ms} | "
		             f"{'yes' if res.judged else 'no'} |")
	lines.append("")
	lines.append("## Outputs")
	for res in run.results:
		lines.extend(["", f"### {res.model}", "", res.output])
	return "\n".join(lines) + "\n"


def save_report_md(path: Path | str, content: str) -> None:
	"""
	Persist markdown content to disk, ensuring parent directories.

	Parameters:
		path: Destination file path.
		content: Markdown content to write.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(content, encoding="utf-8")


__all__ = [
    "format_ts",
    "theme_coherence",
    "results_table",
    "history_table",
    "leaderboard_table",
    "catalog_table",
    "render_run_md",
    "save_report_md",
]
