"""Shared utility functions.

This subpackage provides common utility functions used across
the application.

Key modules:
    - parsing: JSON extraction from free-text model output
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .parsing import extract_json_object, strip_code_fences
from .logging import configure_logging, get_logger
from .protocols import InvokerProtocol, FallbackScorer, HistoryProtocol

__all__ = [
    # parsing
    "extract_json_object",
    "strip_code_fences",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "InvokerProtocol",
    "FallbackScorer",
    "HistoryProtocol",
]
