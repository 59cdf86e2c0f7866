"""File and resource loading utilities.

Key modules:
    - catalog: Model catalog from a LiteLLM config file
"""

from .catalog import load_catalog, parse_catalog, format_context

__all__ = [
    "load_catalog",
    "parse_catalog",
    "format_context",
]
