from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables.

	Constructed once at process start and passed explicitly into the
	invoker and orchestrator.
	"""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False,
	                                  populate_by_name=True)

	base_url: str | None = Field(
	    default=None,
	    alias="LITELLM_BASE_URL",
	    description="Chat backend base URL (OpenAI-compatible proxy)",
	)
	api_key: str | None = Field(
	    default=None,
	    alias="LITELLM_MASTER_KEY",
	    description="Bearer credential for the chat backend",
	)
	judge_model: str = Field(
	    "openai/gpt-4o-mini",
	    alias="JUDGE_MODEL",
	    description="Default judge model identifier",
	)
	generation_temperature: float = Field(
	    0.9,
	    alias="GENERATION_TEMPERATURE",
	    description="Sampling temperature for candidate generation",
	)
	call_timeout_seconds: float = Field(
	    120,
	    alias="CALL_TIMEOUT_SECONDS",
	    description="Deadline for a single generate or judge call",
	)
	history_file: str = Field(
	    ".creative-bench/history.json",
	    alias="HISTORY_FILE",
	    description="Path of the JSON run history store",
	)
	history_limit: int = Field(
	    50,
	    alias="HISTORY_LIMIT",
	    description="Maximum number of runs kept in history",
	)
	catalog_file: str = Field(
	    "litellm-config.yaml",
	    alias="MODEL_CONFIG_FILE",
	    description="LiteLLM config file used as the model catalog",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("base_url", "api_key", mode="before")
	@classmethod
	def blank_to_none(cls, v: Any) -> Any:
		if isinstance(v, str) and not v.strip():
			return None
		return v.strip() if isinstance(v, str) else v

	@field_validator("base_url")
	@classmethod
	def strip_trailing_slash(cls, v: str | None) -> str | None:
		return v.rstrip("/") if v else v

	@field_validator("generation_temperature")
	@classmethod
	def validate_temperature(cls, v: float) -> float:
		if not 0 <= v <= 2:
			raise ValueError("generation_temperature must be within [0, 2]")
		return v

	@field_validator("call_timeout_seconds", "history_limit")
	@classmethod
	def validate_positive(cls, v: Any, info: ValidationInfo) -> Any:
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def history_path(self) -> Path:
		"""Return history_file as Path."""
		return Path(self.history_file)

	@property
	def catalog_path(self) -> Path:
		"""Return catalog_file as Path."""
		return Path(self.catalog_file)


__all__ = ["Config", "load_env"]
