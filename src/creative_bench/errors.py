"""
Error taxonomy for benchmark runs.

Only ValidationError and ConfigurationError are fatal to a benchmark call;
BackendError and ParseError are absorbed per model by the orchestrator.
"""

from __future__ import annotations


class BenchError(Exception):
	"""Base class for all creative-bench errors."""


class ValidationError(BenchError):
	"""Malformed benchmark input (empty prompt, model list or judge)."""


class ConfigurationError(BenchError):
	"""Missing or invalid backend endpoint/credential configuration."""


class BackendError(BenchError):
	"""
	Non-success response or network failure from the chat backend.

	Parameters:
		message: Human-readable summary.
		status_code: HTTP status when a response was received, else None.
		body: Response body text (or the transport error text).
	"""

	def __init__(self, message: str, status_code: int | None = None,
	             body: str = ""):
		super().__init__(message)
		self.status_code = status_code
		self.body = body


class ParseError(BenchError):
	"""Judge output could not be recovered as a JSON object."""

	def __init__(self, message: str, text: str = ""):
		super().__init__(message)
		self.text = text


__all__ = [
    "BenchError",
    "ValidationError",
    "ConfigurationError",
    "BackendError",
    "ParseError",
]
