"""
Leaderboard aggregation over recorded benchmark runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from creative_bench.models.catalog import ModelMeta
from creative_bench.models.run import BenchmarkRun
from creative_bench.models.stats import ModelStats


@dataclass
class _Accumulator:
	total_sum: int = 0
	latency_sum_ms: int = 0
	n: int = 0
	wins: int = 0


def compute_model_stats(runs: Iterable[BenchmarkRun]) -> list[ModelStats]:
	"""
	Aggregate per-model statistics across runs.

	The winner of a run is its highest-total result; the earliest entry
	wins ties.

	Parameters:
		runs: Recorded benchmark runs.

	Returns:
		One ModelStats per model seen, sorted by average total (desc),
		then wins (desc), then model name.
	"""
	per: dict[str, _Accumulator] = {}
	for run in runs:
		for res in run.results:
			acc = per.setdefault(res.model, _Accumulator())
			acc.total_sum += res.scores.total
			acc.latency_sum_ms += res.latency_ms
			acc.n += 1
		winner = run.winner
		if winner is not None:
			per[winner.model].wins += 1

	stats = [
	    ModelStats(
	        model=model,
	        avg_total=acc.total_sum / acc.n if acc.n else 0.0,
	        wins=acc.wins,
	        avg_latency_s=(acc.latency_sum_ms / acc.n) / 1000 if acc.n else 0.0,
	        runs=acc.n,
	    ) for model, acc in per.items()
	]
	stats.sort(key=lambda s: (-s.avg_total, -s.wins, s.model))
	return stats


def with_catalog_models(stats: list[ModelStats],
                        catalog: Iterable[ModelMeta]) -> list[ModelStats]:
	"""Append an empty row for each catalog model without recorded runs."""
	seen = {s.model for s in stats}
	rows = list(stats)
	for meta in catalog:
		if meta.model not in seen:
			seen.add(meta.model)
			rows.append(ModelStats(model=meta.model))
	return rows


__all__ = ["compute_model_stats", "with_catalog_models"]
