"""
Run parameters model.

Validates orchestrator input before any network call is made.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RunParams(BaseModel):
	"""Validated benchmark input: prompt, candidate models, judge model."""

	prompt: str = Field(description="Creative-writing prompt")
	models: list[str] = Field(description="Ordered candidate model ids")
	judge_model: str = Field(description="Judge model id")

	@field_validator("prompt")
	@classmethod
	def validate_prompt(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("prompt must not be empty")
		return v

	@field_validator("models")
	@classmethod
	def validate_models(cls, v: list[str]) -> list[str]:
		if not v:
			raise ValueError("at least one candidate model is required")
		cleaned = [m.strip() for m in v]
		if any(not m for m in cleaned):
			raise ValueError("candidate model ids must not be empty")
		return cleaned

	@field_validator("judge_model")
	@classmethod
	def validate_judge_model(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("judge model must not be empty")
		return v.strip()


__all__ = ["RunParams"]
