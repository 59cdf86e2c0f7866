"""
Benchmark orchestrator.

Drives generation and judging for each candidate model in turn,
isolating per-model failures into degraded results, and returns the
results ordered by total score.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import httpx
import pydantic

from creative_bench.errors import (
    BackendError,
    ConfigurationError,
    ValidationError,
)
from creative_bench.models.config import Config
from creative_bench.models.results import BenchmarkResult, GenerationResult
from creative_bench.models.run_params import RunParams
from creative_bench.models.scores import ScoreSet
from creative_bench.core.classify import (
    ErrorClass,
    billing_message,
    classify_backend_error,
)
from creative_bench.core.invoker import ModelInvoker
from creative_bench.core.judge import judge_output
from creative_bench.core.scoring import HashFallbackScorer, fallback_seed
from creative_bench.utils.logging import get_logger
from creative_bench.utils.protocols import FallbackScorer, InvokerProtocol

logger = get_logger(__name__)

ProgressCallback = Callable[[str, str], None]

T = TypeVar("T")


def _describe(exc: BaseException) -> str:
	if isinstance(exc, asyncio.TimeoutError):
		return "timed out"
	return str(exc) or type(exc).__name__


def validate_input(prompt: str, models: list[str],
                   judge_model: str | None) -> RunParams:
	"""
	Validate benchmark input.

	Raises:
		ValidationError: On empty prompt, model list, or judge model.
	"""
	try:
		return RunParams(
		    prompt=prompt or "",
		    models=list(models or []),
		    judge_model=judge_model or "",
		)
	except pydantic.ValidationError as exc:
		msgs = "; ".join(e["msg"] for e in exc.errors())
		raise ValidationError(msgs) from exc


def sort_results(results: list[BenchmarkResult]) -> list[BenchmarkResult]:
	"""Order results by total score, best first; ties keep input order."""
	return sorted(results, key=lambda r: r.scores.total, reverse=True)


class BenchmarkOrchestrator:
	"""
	Runs one prompt against N candidate models and one judge model.

	Candidates are processed strictly sequentially. Only validation and
	configuration errors escape ``run``; every requested model gets a
	result entry.

	Parameters:
		config: Application configuration (default judge, call deadline).
		invoker: Backend invoker used for generation and judging.
		fallback_scorer: Scorer used when judging fails.
		progress_cb: Optional ``(model, message)`` progress callback.
	"""

	def __init__(
	    self,
	    config: Config,
	    invoker: InvokerProtocol,
	    fallback_scorer: FallbackScorer | None = None,
	    progress_cb: ProgressCallback | None = None,
	):
		self.config = config
		self.invoker = invoker
		self.fallback_scorer = fallback_scorer or HashFallbackScorer()
		self.progress_cb = progress_cb

	def _progress(self, model: str, msg: str) -> None:
		if self.progress_cb:
			self.progress_cb(model, msg)

	async def _with_deadline(self, coro: Awaitable[T]) -> T:
		return await asyncio.wait_for(coro,
		                              timeout=self.config.call_timeout_seconds)

	def validate(self, prompt: str, models: list[str],
	             judge_model: str | None) -> RunParams:
		"""Validate input, defaulting the judge to ``config.judge_model``."""
		return validate_input(prompt, models, judge_model
		                      or self.config.judge_model)

	def _generation_failed(self, model: str,
	                       exc: BaseException) -> BenchmarkResult:
		reason = _describe(exc)
		body = exc.body if isinstance(exc, BackendError) else ""
		if classify_backend_error(model,
		                          f"{reason}\n{body}") is ErrorClass.BILLING:
			output = billing_message(model)
			self._progress(model, "generate_failed_billing")
		else:
			output = f"[error] generation failed for {model}: {reason}"
			self._progress(model, "generate_failed")
		logger.warning("generation failed model=%s error=%s", model, reason)
		return BenchmarkResult(
		    model=model,
		    output=output,
		    latency_ms=0,
		    scores=ScoreSet.zero(),
		    judged=False,
		    error=reason,
		)

	async def _score(self, params: RunParams,
	                 gen: GenerationResult) -> BenchmarkResult:
		self._progress(gen.model, "judge_started")
		try:
			scores = await self._with_deadline(
			    judge_output(self.invoker, params.judge_model, params.prompt,
			                 gen.output))
		except ConfigurationError:
			raise
		except Exception as exc:
			logger.warning(
			    "judge failed model=%s judge=%s error=%s, using fallback score",
			    gen.model,
			    params.judge_model,
			    _describe(exc),
			)
			self._progress(gen.model, "judge_fallback")
			scores = self.fallback_scorer(
			    fallback_seed(gen.model, params.prompt))
			return BenchmarkResult(**gen.model_dump(), scores=scores,
			                       judged=False)
		self._progress(gen.model, "judge_completed")
		return BenchmarkResult(**gen.model_dump(), scores=scores, judged=True)

	async def run_one(self, params: RunParams, model: str) -> BenchmarkResult:
		"""Generate and judge for one candidate; never raises per-model errors."""
		self._progress(model, "generate_started")
		try:
			gen = await self._with_deadline(
			    self.invoker.generate(model, params.prompt))
		except ConfigurationError:
			raise
		except Exception as exc:
			return self._generation_failed(model, exc)
		self._progress(model, "generate_completed")
		return await self._score(params, gen)

	async def run(
	    self,
	    prompt: str,
	    models: list[str],
	    judge_model: str | None = None,
	) -> list[BenchmarkResult]:
		"""
		Benchmark ``prompt`` against each candidate model.

		Parameters:
			prompt: Creative-writing prompt.
			models: Ordered candidate model identifiers.
			judge_model: Judge model; defaults to ``config.judge_model``.

		Returns:
			One result per candidate, best total first (stable on ties).

		Raises:
			ValidationError: Before any network call, on invalid input.
		"""
		params = self.validate(prompt, models, judge_model)
		logger.info("benchmark start models=%d judge=%s",
		            len(params.models), params.judge_model)
		results: list[BenchmarkResult] = []
		for model in params.models:
			results.append(await self.run_one(params, model))
		ordered = sort_results(results)
		logger.info(
		    "benchmark done models=%d judged=%d degraded=%d",
		    len(ordered),
		    sum(1 for r in ordered if r.judged),
		    sum(1 for r in ordered if not r.judged),
		)
		return ordered


async def run_benchmark(
    config: Config,
    models: list[str],
    prompt: str,
    judge_model: str | None = None,
    progress_cb: ProgressCallback | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[BenchmarkResult]:
	"""
	Run a benchmark with a fresh backend invoker.

	Input is validated before the backend client is created, so a
	ValidationError never depends on backend configuration.

	Raises:
		ValidationError: On invalid input.
		ConfigurationError: If the backend URL or credential is missing.
	"""
	validate_input(prompt, models, judge_model or config.judge_model)
	async with ModelInvoker(config, transport=transport) as invoker:
		orchestrator = BenchmarkOrchestrator(config, invoker,
		                                     progress_cb=progress_cb)
		return await orchestrator.run(prompt, models, judge_model)


__all__ = [
    "BenchmarkOrchestrator",
    "ProgressCallback",
    "run_benchmark",
    "sort_results",
    "validate_input",
]
