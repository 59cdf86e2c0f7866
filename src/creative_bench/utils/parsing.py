"""
JSON extraction utilities for free-text model output.

Judge models are asked for bare JSON but often wrap it in prose or
markdown fences; these helpers recover the first JSON object.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from creative_bench.errors import ParseError

ANY_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.S)


def strip_code_fences(text: str) -> str:
	"""
	Return content inside the first fenced block if present; else the text.

	Parameters:
		text: Input text potentially containing fenced code blocks.

	Returns:
		Content of the first fence, or the original text if none found.
	"""
	m = ANY_FENCE_RE.search(text)
	if m:
		return m.group(1).strip()
	return text


def _extract_balanced_json(text: str) -> Optional[str]:
	"""Heuristic: extract first balanced ``{...}`` substring from text."""
	stack = 0
	start = None
	for i, ch in enumerate(text):
		if ch == '{':
			if stack == 0:
				start = i
			stack += 1
		elif ch == '}':
			if stack > 0:
				stack -= 1
				if stack == 0 and start is not None:
					return text[start:i + 1]
	return None


def _loads_object(candidate: str) -> Optional[dict[str, Any]]:
	try:
		obj = json.loads(candidate)
	except ValueError:
		return None
	return obj if isinstance(obj, dict) else None


def extract_json_object(text: str) -> dict[str, Any]:
	"""
	Extract a JSON object from judge output.

	Tries a direct parse of the whole text first, then the first fenced
	block, then the first balanced-brace substring.

	Parameters:
		text: Raw model output.

	Returns:
		The parsed JSON object.

	Raises:
		ParseError: If no candidate parses to a JSON object.
	"""
	stripped = (text or "").strip()
	direct = _loads_object(stripped)
	if direct is not None:
		return direct

	candidates = []
	fence = ANY_FENCE_RE.search(stripped)
	if fence:
		candidates.append(fence.group(1).strip())
	balanced = _extract_balanced_json(stripped)
	if balanced:
		candidates.append(balanced)
	for cand in candidates:
		obj = _loads_object(cand)
		if obj is not None:
			return obj
	raise ParseError("no JSON object found in judge output", text=text or "")


__all__ = ["extract_json_object", "strip_code_fences"]
