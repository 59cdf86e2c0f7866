from __future__ import annotations

from pydantic import BaseModel, Field


class ModelStats(BaseModel):
	"""Aggregated leaderboard statistics for one model across runs."""

	model: str
	avg_total: float = Field(0, description="Mean total score (0-40)")
	wins: int = Field(0, description="Runs in which this model ranked first")
	avg_latency_s: float = Field(0, description="Mean generation latency")
	runs: int = Field(0, description="Number of results counted")


__all__ = ["ModelStats"]
