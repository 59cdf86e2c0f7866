"""
Model catalog loading.

Reads the selectable model list and optional display metadata from a
LiteLLM ``litellm-config.yaml``. A missing or malformed file yields an
empty catalog, never an error.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml

from creative_bench.models.catalog import ModelMeta
from creative_bench.utils.logging import get_logger

logger = get_logger(__name__)

PER_MILLION = 1_000_000


def format_context(tokens: int | None) -> str:
	"""Render a token count as ``128k`` / ``1M``; empty when unknown."""
	if not tokens or tokens <= 0:
		return ""
	# halves round up: 2_500_000 -> 3M
	if tokens >= PER_MILLION:
		return f"{(tokens + PER_MILLION // 2) // PER_MILLION}M"
	if tokens >= 1000:
		return f"{(tokens + 500) // 1000}k"
	return str(tokens)


def _number(value: Any) -> float | None:
	if isinstance(value, bool) or not isinstance(value, (int, float, str)):
		return None
	try:
		number = float(value)
	except (ValueError, OverflowError):
		return None
	return number if math.isfinite(number) else None


def _per_million(per_token: Any) -> float | None:
	value = _number(per_token)
	return round(value * PER_MILLION, 4) if value is not None else None


def _meta_from_model_info(info: dict[str, Any]) -> dict[str, Any]:
	"""Fields from a ``model_list[].model_info`` block (LiteLLM names)."""
	out: dict[str, Any] = {}
	max_tokens = info.get("max_input_tokens")
	if isinstance(max_tokens, int) and not isinstance(max_tokens, bool):
		out["context_tokens"] = max_tokens
		out["context"] = format_context(max_tokens)
	for src, dst in (("input_cost_per_token", "input_cost_per_1m"),
	                 ("output_cost_per_token", "output_cost_per_1m")):
		cost = _per_million(info.get(src))
		if cost is not None:
			out[dst] = cost
	return out


def _meta_from_display_info(info: dict[str, Any]) -> dict[str, Any]:
	"""Fields from the top-level ``model_info`` display mapping."""
	out: dict[str, Any] = {}
	if info.get("context") is not None:
		out["context"] = str(info["context"])
	for src, dst in (("input_cost", "input_cost_per_1m"),
	                 ("output_cost", "output_cost_per_1m"),
	                 ("speed", "speed"), ("latency", "latency")):
		value = _number(info.get(src))
		if value is not None:
			out[dst] = value
	return out


def parse_catalog(doc: Any) -> list[ModelMeta]:
	"""
	Build catalog rows from a parsed LiteLLM config document.

	Parameters:
		doc: Result of ``yaml.safe_load`` on the config file.

	Returns:
		Catalog rows in config order, first occurrence of each name kept.
	"""
	if not isinstance(doc, dict):
		return []
	model_list = doc.get("model_list")
	if not isinstance(model_list, list):
		model_list = []
	display = doc.get("model_info")
	if not isinstance(display, dict):
		display = {}

	rows: list[ModelMeta] = []
	seen: set[str] = set()
	for item in model_list:
		if not isinstance(item, dict):
			continue
		name = str(item.get("model_name") or "").strip()
		if not name or name in seen:
			continue
		seen.add(name)
		fields: dict[str, Any] = {}
		info = item.get("model_info")
		if isinstance(info, dict):
			fields.update(_meta_from_model_info(info))
		extra = display.get(name)
		if isinstance(extra, dict):
			fields.update(_meta_from_display_info(extra))
		rows.append(ModelMeta(model=name, **fields))
	return rows


def load_catalog(path: Path | str) -> list[ModelMeta]:
	"""
	Load the model catalog from a LiteLLM config file.

	Parameters:
		path: Path to ``litellm-config.yaml``.

	Returns:
		Catalog rows; empty when the file is missing or unreadable.
	"""
	p = Path(path)
	if not p.exists():
		logger.info("model catalog not found path=%s", p)
		return []
	try:
		doc = yaml.safe_load(p.read_text(encoding="utf-8"))
	except (OSError, yaml.YAMLError):
		logger.warning("model catalog unreadable path=%s", p, exc_info=True)
		return []
	rows = parse_catalog(doc)
	logger.debug("model catalog loaded models=%d path=%s", len(rows), p)
	return rows


__all__ = ["load_catalog", "parse_catalog", "format_context"]
