"""
Protocol definitions for dependency injection.

Defines Protocol classes for the model invoker, fallback scoring and
history store so tests can substitute in-memory implementations.
"""

from __future__ import annotations

from typing import Protocol

from creative_bench.models.results import GenerationResult
from creative_bench.models.run import BenchmarkRun
from creative_bench.models.scores import ScoreSet


class InvokerProtocol(Protocol):
	"""
	Protocol for the chat backend invoker.

	One generation call and one judge call per candidate model.
	"""

	async def generate(self, model: str, prompt: str) -> GenerationResult:
		"""Generate text for the prompt with the candidate model."""
		...

	async def judge(self, model: str, prompt: str, output: str) -> str:
		"""Return the judge model's raw response text."""
		...


class FallbackScorer(Protocol):
	"""Scores an output without a judge, deterministically from a seed."""

	def __call__(self, seed: str) -> ScoreSet:
		...


class HistoryProtocol(Protocol):
	"""Protocol for a bounded, most-recent-first run history."""

	def load(self) -> list[BenchmarkRun]:
		...

	def save(self, run: BenchmarkRun) -> int:
		...

	def clear(self) -> None:
		...


__all__ = ["InvokerProtocol", "FallbackScorer", "HistoryProtocol"]
