"""
Score normalization and fallback scoring.

Coerces raw judge JSON into a canonical ScoreSet and provides the
deterministic scorers used when the judge is unavailable.
"""

from __future__ import annotations

import hashlib
import math
from typing import Any, Mapping

from creative_bench.models.scores import (
    MAX_DIMENSION_SCORE,
    SCORE_DIMENSIONS,
    ScoreSet,
)
from creative_bench.utils.parsing import extract_json_object


def _to_number(value: Any) -> float:
	"""Read a judge-supplied value as a finite float; anything else is 0."""
	if isinstance(value, bool):
		return 0.0
	if not isinstance(value, (int, float, str)):
		return 0.0
	try:
		number = float(value.strip() if isinstance(value, str) else value)
	except ValueError:
		return 0.0
	except OverflowError:
		# ints beyond float range read like infinity
		return 0.0
	return number if math.isfinite(number) else 0.0


def clamp_score(value: Any) -> int:
	"""
	Clamp a raw dimension value to an integer in [0, 10].

	Halves round up (7.5 -> 8), not to even.

	Parameters:
		value: Raw value from the judge (number, numeric string, anything).

	Returns:
		Integer score within [0, MAX_DIMENSION_SCORE].
	"""
	number = min(max(_to_number(value), 0.0), float(MAX_DIMENSION_SCORE))
	return int(math.floor(number + 0.5))


def normalize_scores(raw: Mapping[str, Any] | Any) -> ScoreSet:
	"""
	Normalize raw judge output into a ScoreSet.

	Any judge-supplied ``total`` is ignored; the total is always the
	sum of the four clamped dimensions.

	Parameters:
		raw: Parsed judge JSON object.

	Returns:
		Canonical ScoreSet.
	"""
	if not isinstance(raw, Mapping):
		return ScoreSet.zero()
	return ScoreSet(
	    **{dim: clamp_score(raw.get(dim))
	       for dim in SCORE_DIMENSIONS})


def parse_judge_response(text: str) -> ScoreSet:
	"""Extract the JSON object from judge text and normalize it.

	Raises:
		ParseError: If no JSON object can be recovered from ``text``.
	"""
	return normalize_scores(extract_json_object(text))


class HashFallbackScorer:
	"""
	Deterministic pseudo-scores derived from a stable hash of the seed.

	Keeps results populated and sortable while the judge is down; the
	orchestrator marks such results ``judged=False``.
	"""

	def __call__(self, seed: str) -> ScoreSet:
		digest = hashlib.sha256(seed.encode("utf-8")).digest()
		values = {
		    dim: digest[i] % (MAX_DIMENSION_SCORE + 1)
		    for i, dim in enumerate(SCORE_DIMENSIONS)
		}
		return ScoreSet(**values)


class ZeroFallbackScorer:
	"""Scores every unjudged output as zero."""

	def __call__(self, seed: str) -> ScoreSet:
		return ScoreSet.zero()


def fallback_seed(model: str, prompt: str) -> str:
	return f"{model}\n{prompt}"


__all__ = [
    "clamp_score",
    "normalize_scores",
    "parse_judge_response",
    "HashFallbackScorer",
    "ZeroFallbackScorer",
    "fallback_seed",
]
