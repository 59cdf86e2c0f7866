"""
Benchmark result models.

Defines GenerationResult (one candidate generation) and BenchmarkResult
(a generation extended with its scores).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .scores import ScoreSet


class GenerationResult(BaseModel):
	"""Output of a single generation call against a candidate model."""

	model_config = ConfigDict(frozen=True)

	model: str
	output: str = ""
	latency_ms: int = Field(0, ge=0,
	                        description="Wall-clock time of the call only")


class BenchmarkResult(GenerationResult):
	"""
	A generation result with its score set.

	``judged`` is True only when the scores came from a genuine judge
	round trip; degraded entries carry ``judged=False`` and, when the
	generation itself failed, an ``error`` description.
	"""

	scores: ScoreSet = Field(default_factory=ScoreSet.zero)
	judged: bool = False
	error: str | None = None

	@property
	def degraded(self) -> bool:
		return not self.judged


__all__ = ["GenerationResult", "BenchmarkResult"]
