import pytest

_ENV_VARS = (
    "LITELLM_BASE_URL",
    "LITELLM_MASTER_KEY",
    "JUDGE_MODEL",
    "GENERATION_TEMPERATURE",
    "CALL_TIMEOUT_SECONDS",
    "HISTORY_FILE",
    "HISTORY_LIMIT",
    "MODEL_CONFIG_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
	"""Keep developer environment variables out of Config defaults."""
	for name in _ENV_VARS:
		monkeypatch.delenv(name, raising=False)
