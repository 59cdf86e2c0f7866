"""Core benchmark logic.

This subpackage contains the orchestration, backend invocation, judging
and scoring logic.

Key modules:
    - runner: BenchmarkOrchestrator and run_benchmark()
    - invoker: ModelInvoker for the chat backend
    - judge: Judge prompt construction
    - scoring: Score normalization and fallback scorers
    - classify: Provider-specific backend error classification
    - leaderboard: Per-model aggregation across runs
"""

from creative_bench.core.runner import (
    BenchmarkOrchestrator,
    run_benchmark,
    sort_results,
    validate_input,
)
from creative_bench.core.invoker import ModelInvoker
from creative_bench.core.judge import build_judge_prompt, judge_output
from creative_bench.core.scoring import (
    normalize_scores,
    parse_judge_response,
    HashFallbackScorer,
    ZeroFallbackScorer,
)
from creative_bench.core.classify import (
    ErrorClass,
    classify_backend_error,
    register_billing_rule,
)
from creative_bench.core.leaderboard import (
    compute_model_stats,
    with_catalog_models,
)

__all__ = [
    # runner
    "BenchmarkOrchestrator",
    "run_benchmark",
    "sort_results",
    "validate_input",
    # invoker
    "ModelInvoker",
    # judge
    "build_judge_prompt",
    "judge_output",
    # scoring
    "normalize_scores",
    "parse_judge_response",
    "HashFallbackScorer",
    "ZeroFallbackScorer",
    # classify
    "ErrorClass",
    "classify_backend_error",
    "register_billing_rule",
    # leaderboard
    "compute_model_stats",
    "with_catalog_models",
]
