"""
Score models.

Defines the four-dimension ScoreSet produced by judging a candidate output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

SCORE_DIMENSIONS: tuple[str, ...] = (
    "character_clarity",
    "originality",
    "sensory_detail",
    "tone_consistency",
)

MAX_DIMENSION_SCORE = 10


class ScoreSet(BaseModel):
	"""
	Judge scores for one candidate output.

	Each dimension is an integer in [0, 10]; total is always derived
	from the four dimensions and never set directly.
	"""

	model_config = ConfigDict(frozen=True)

	character_clarity: int = Field(0, ge=0, le=MAX_DIMENSION_SCORE)
	originality: int = Field(0, ge=0, le=MAX_DIMENSION_SCORE)
	sensory_detail: int = Field(0, ge=0, le=MAX_DIMENSION_SCORE)
	tone_consistency: int = Field(0, ge=0, le=MAX_DIMENSION_SCORE)

	@computed_field  # type: ignore[prop-decorator]
	@property
	def total(self) -> int:
		"""Sum of the four dimensions, range [0, 40]."""
		return (self.character_clarity + self.originality +
		        self.sensory_detail + self.tone_consistency)

	@classmethod
	def zero(cls) -> "ScoreSet":
		"""Return an all-zero score set."""
		return cls()


__all__ = ["ScoreSet", "SCORE_DIMENSIONS", "MAX_DIMENSION_SCORE"]
