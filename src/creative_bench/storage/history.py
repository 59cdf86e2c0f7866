"""
Run history persistence.

Stores BenchmarkRun records as JSON under a single key, most recent
first, bounded to a fixed number of entries.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import pydantic

from creative_bench.models.run import BenchmarkRun
from creative_bench.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HISTORY_KEY = "cw_benchmark_runs"
DEFAULT_HISTORY_LIMIT = 50


class HistoryStore:
	"""
	Bounded, most-recent-first history of benchmark runs in a JSON file.

	The file holds an object so several histories can share it, each
	under its own key. Unreadable files and invalid entries are treated
	as absent rather than fatal.

	Parameters:
		path: JSON file location; parent directories are created on save.
		key: Key under which this history's runs are stored.
		limit: Maximum number of runs retained.
	"""

	def __init__(self, path: Path | str, key: str = DEFAULT_HISTORY_KEY,
	             limit: int = DEFAULT_HISTORY_LIMIT):
		if limit <= 0:
			raise ValueError("limit must be > 0")
		self.path = Path(path)
		self.key = key
		self.limit = limit

	def _read_document(self) -> dict[str, Any]:
		if not self.path.exists():
			return {}
		try:
			doc = json.loads(self.path.read_text(encoding="utf-8"))
		except (OSError, ValueError):
			logger.warning("history file unreadable, ignoring path=%s",
			               self.path,
			               exc_info=True)
			return {}
		return doc if isinstance(doc, dict) else {}

	def _write_document(self, doc: dict[str, Any]) -> None:
		self.path.parent.mkdir(parents=True, exist_ok=True)
		fd, tmp = tempfile.mkstemp(dir=self.path.parent,
		                           prefix=f".{self.path.name}.")
		try:
			with os.fdopen(fd, "w", encoding="utf-8") as fh:
				json.dump(doc, fh, indent=2)
			os.replace(tmp, self.path)
		except BaseException:
			Path(tmp).unlink(missing_ok=True)
			raise

	def load(self) -> list[BenchmarkRun]:
		"""Return stored runs, most recent first."""
		entries = self._read_document().get(self.key)
		if not isinstance(entries, list):
			return []
		runs: list[BenchmarkRun] = []
		for entry in entries:
			try:
				runs.append(BenchmarkRun.model_validate(entry))
			except pydantic.ValidationError:
				logger.debug("skipping invalid history entry", exc_info=True)
		return runs

	def save(self, run: BenchmarkRun) -> int:
		"""
		Prepend a run, truncating to ``limit``.

		Returns:
			Number of runs stored after saving.
		"""
		doc = self._read_document()
		runs = [run, *self.load()][:self.limit]
		doc[self.key] = [r.model_dump(mode="json") for r in runs]
		self._write_document(doc)
		logger.info("history saved runs=%d path=%s", len(runs), self.path)
		return len(runs)

	def clear(self) -> None:
		"""Remove every run stored under this key."""
		doc = self._read_document()
		if self.key in doc:
			del doc[self.key]
			self._write_document(doc)
		logger.info("history cleared path=%s", self.path)


__all__ = ["HistoryStore", "DEFAULT_HISTORY_KEY", "DEFAULT_HISTORY_LIMIT"]
