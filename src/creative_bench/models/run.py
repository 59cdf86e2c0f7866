"""
Benchmark run model.

A BenchmarkRun records one orchestration call for the run history.
"""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field

from .results import BenchmarkResult


def _now_ms() -> int:
	return int(time.time() * 1000)


class BenchmarkRun(BaseModel):
	"""One completed benchmark: prompt, judge, candidates and results."""

	model_config = ConfigDict(frozen=True)

	ts: int = Field(default_factory=_now_ms,
	                description="Creation time in epoch milliseconds")
	prompt: str
	judge_model: str
	models: tuple[str, ...] = ()
	results: tuple[BenchmarkResult, ...] = ()

	@property
	def winner(self) -> BenchmarkResult | None:
		"""Highest-scoring result; earliest entry wins ties."""
		if not self.results:
			return None
		return sorted(self.results, key=lambda r: -r.scores.total)[0]


def build_run(
    prompt: str,
    judge_model: str,
    models: list[str],
    results: list[BenchmarkResult],
) -> BenchmarkRun:
	"""Create a BenchmarkRun stamped with the current time."""
	return BenchmarkRun(
	    prompt=prompt,
	    judge_model=judge_model,
	    models=tuple(models),
	    results=tuple(results),
	)


__all__ = ["BenchmarkRun", "build_run"]
