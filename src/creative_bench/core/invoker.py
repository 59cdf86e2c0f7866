"""
Chat backend invoker.

Performs single chat-completion exchanges against the configured
OpenAI-compatible backend (a LiteLLM proxy) for generation and judging.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from creative_bench.errors import BackendError, ConfigurationError
from creative_bench.models.config import Config
from creative_bench.models.results import GenerationResult
from creative_bench.core.judge import JUDGE_SYSTEM_PROMPT, build_judge_prompt
from creative_bench.utils.logging import get_logger

logger = get_logger(__name__)

GENERATION_SYSTEM_PROMPT = "You are a helpful creative-writing assistant."
JUDGE_TEMPERATURE = 0.0
CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


def _first_content(data: Any) -> str:
	"""Return choices[0].message.content, or "" when absent."""
	try:
		msg = ((data or {}).get("choices") or [{}])[0].get("message") or {}
	except (AttributeError, IndexError, TypeError):
		return ""
	content = msg.get("content") if isinstance(msg, dict) else None
	return content if isinstance(content, str) else ""


class ModelInvoker:
	"""
	Client for one chat backend endpoint.

	Performs no retries; retry or fallback policy belongs to the caller.

	Parameters:
		config: Application configuration with backend URL and key.
		transport: Optional httpx transport (used by tests).

	Raises:
		ConfigurationError: If the backend URL or credential is missing.
	"""

	def __init__(self, config: Config,
	             transport: httpx.AsyncBaseTransport | None = None):
		if not config.base_url:
			raise ConfigurationError("LITELLM_BASE_URL is required")
		if not config.api_key:
			raise ConfigurationError("LITELLM_MASTER_KEY is required")
		self._url = config.base_url + CHAT_COMPLETIONS_PATH
		self._temperature = config.generation_temperature
		self._client = httpx.AsyncClient(
		    timeout=config.call_timeout_seconds,
		    transport=transport,
		    headers={
		        "Authorization": f"Bearer {config.api_key}",
		        "Content-Type": "application/json",
		        "User-Agent": "creative-bench/0.1.0",
		    },
		)

	async def __aenter__(self) -> "ModelInvoker":
		return self

	async def __aexit__(self, exc_type, exc, tb) -> None:
		await self.aclose()

	async def aclose(self) -> None:
		await self._client.aclose()

	async def chat(self, model: str, messages: list[dict[str, str]],
	               temperature: float) -> dict[str, Any]:
		"""
		POST one chat-completions request and return the decoded body.

		Raises:
			BackendError: On transport failure, HTTP status >= 400, or a
				success body that is not a JSON object.
		"""
		payload = {
		    "model": model,
		    "messages": messages,
		    "temperature": temperature,
		}
		try:
			resp = await self._client.post(self._url, json=payload)
		except httpx.HTTPError as exc:
			raise BackendError(
			    f"backend request failed for {model}: "
			    f"{type(exc).__name__}: {exc}",
			    body=str(exc),
			) from exc
		if resp.status_code >= 400:
			raise BackendError(
			    f"backend error {resp.status_code} for {model}: {resp.text}",
			    status_code=resp.status_code,
			    body=resp.text,
			)
		try:
			data = resp.json()
		except ValueError as exc:
			raise BackendError(
			    f"backend returned non-JSON body for {model}",
			    status_code=resp.status_code,
			    body=resp.text,
			) from exc
		if not isinstance(data, dict):
			raise BackendError(
			    f"backend returned unexpected body for {model}",
			    status_code=resp.status_code,
			    body=resp.text,
			)
		return data

	async def generate(self, model: str, prompt: str) -> GenerationResult:
		"""Generate text for ``prompt`` and time the network call."""
		messages = [
		    {"role": "system", "content": GENERATION_SYSTEM_PROMPT},
		    {"role": "user", "content": prompt},
		]
		t0 = time.perf_counter()
		data = await self.chat(model, messages, self._temperature)
		latency_ms = max(0, int((time.perf_counter() - t0) * 1000))
		output = _first_content(data)
		logger.debug("generate model=%s latency_ms=%d chars=%d", model,
		             latency_ms, len(output))
		return GenerationResult(model=model, output=output,
		                        latency_ms=latency_ms)

	async def judge(self, model: str, prompt: str, output: str) -> str:
		"""Ask the judge model to score ``output``; return its raw text."""
		messages = [
		    {"role": "system", "content": JUDGE_SYSTEM_PROMPT},
		    {"role": "user", "content": build_judge_prompt(prompt, output)},
		]
		data = await self.chat(model, messages, JUDGE_TEMPERATURE)
		return _first_content(data).strip()


__all__ = [
    "ModelInvoker",
    "GENERATION_SYSTEM_PROMPT",
    "JUDGE_TEMPERATURE",
]
