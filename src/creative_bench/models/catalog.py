"""
Model catalog entries.

Display metadata for selectable candidate models; every field but the
identifier is optional.
"""

from __future__ import annotations

from pydantic import BaseModel


class ModelMeta(BaseModel):
	"""Catalog row for one model identifier."""

	model: str
	context_tokens: int | None = None
	context: str = ""
	input_cost_per_1m: float | None = None
	output_cost_per_1m: float | None = None
	speed: float | None = None  # tokens/sec
	latency: float | None = None  # seconds


__all__ = ["ModelMeta"]
