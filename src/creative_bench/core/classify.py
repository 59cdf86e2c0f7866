"""
Provider-specific backend error classification.

A narrow keyword heuristic: some providers report exhausted credit as
ordinary backend errors, and those deserve a clearer message than a
generic failure. Rules are keyed by the provider prefix of the model
identifier (``provider/model-name``).
"""

from __future__ import annotations

from enum import Enum


class ErrorClass(str, Enum):
	GENERIC = "generic"
	BILLING = "billing"


_BILLING_RULES: dict[str, tuple[str, ...]] = {
    "anthropic": (
        "credit balance",
        "billing",
        "insufficient credit",
        "purchase credits",
    ),
}


def provider_prefix(model: str) -> str:
	"""Return the provider namespace of ``provider/model-name`` (lowercase)."""
	return model.split("/", 1)[0].strip().lower() if "/" in model else ""


def register_billing_rule(prefix: str, keywords: list[str]) -> None:
	"""Register billing-error keywords for a provider prefix."""
	_BILLING_RULES[prefix.lower()] = tuple(k.lower() for k in keywords)


def classify_backend_error(model: str, text: str) -> ErrorClass:
	"""
	Classify a backend error for a model by inspecting its text.

	Parameters:
		model: Candidate model identifier.
		text: Error message and/or response body.

	Returns:
		ErrorClass.BILLING when the model's provider has a rule whose
		keyword occurs in the text, else ErrorClass.GENERIC.
	"""
	keywords = _BILLING_RULES.get(provider_prefix(model))
	if not keywords:
		return ErrorClass.GENERIC
	lowered = (text or "").lower()
	if any(k in lowered for k in keywords):
		return ErrorClass.BILLING
	return ErrorClass.GENERIC


def billing_message(model: str) -> str:
	"""Explanatory output shown in place of text for billing failures."""
	provider = provider_prefix(model) or "the provider"
	return (f"[billing] {model} could not run: the {provider} account has "
	        "insufficient credit. Top up the provider balance and rerun.")


__all__ = [
    "ErrorClass",
    "provider_prefix",
    "register_billing_rule",
    "classify_backend_error",
    "billing_message",
]
