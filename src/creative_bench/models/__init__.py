"""
Creative bench models.

This subpackage contains Pydantic models for configuration, scores,
benchmark results, run history records and catalog metadata.

Key models:
    - Config: Application configuration loaded from environment
    - ScoreSet: Four-dimension judge scores with derived total
    - BenchmarkResult: One candidate's output, latency and scores
    - BenchmarkRun: One recorded benchmark for the history store
    - RunParams: Validated orchestrator input
"""

from .config import Config, load_env
from .scores import ScoreSet, SCORE_DIMENSIONS, MAX_DIMENSION_SCORE
from .results import GenerationResult, BenchmarkResult
from .run import BenchmarkRun, build_run
from .run_params import RunParams
from .catalog import ModelMeta
from .stats import ModelStats

__all__ = [
    "Config",
    "load_env",
    "ScoreSet",
    "SCORE_DIMENSIONS",
    "MAX_DIMENSION_SCORE",
    "GenerationResult",
    "BenchmarkResult",
    "BenchmarkRun",
    "build_run",
    "RunParams",
    "ModelMeta",
    "ModelStats",
]
