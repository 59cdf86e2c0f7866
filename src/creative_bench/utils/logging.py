"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels and consistent formatting.
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Bearer credentials in headers or error bodies,
# e.g. "Authorization: Bearer sk-1234"
_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+", re.IGNORECASE)
# Bare provider keys, e.g. sk-abc123 or sk-proj-abc123
_KEY_RE = re.compile(r"\bsk-[A-Za-z0-9_-]{4,}")


def sanitize_text(text: str) -> str:
	"""Mask backend credentials in text.

	Replaces bearer tokens and ``sk-`` style API keys with ``***``.

	Parameters:
		text: Raw text that may contain credentials.

	Returns:
		Text with credentials replaced by ``***``.
	"""
	text = _BEARER_RE.sub(r"\1***", text)
	return _KEY_RE.sub("***", text)


class CredentialSanitizingFilter(logging.Filter):
	"""Logging filter that redacts credentials from log records.

	Applied to the root logger so every handler benefits from
	credential masking without call-site awareness.
	"""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Sanitize the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = sanitize_text(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: sanitize_text(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    sanitize_text(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level, format, and credential masking.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.INFO
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	root = logging.getLogger()
	# Logger filters do not see records propagated from child loggers,
	# so handlers get the filter too. Avoid duplicates on repeated calls.
	for target in (root, *root.handlers):
		if not any(
		    isinstance(f, CredentialSanitizingFilter) for f in target.filters):
			target.addFilter(CredentialSanitizingFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_text",
    "CredentialSanitizingFilter",
]
