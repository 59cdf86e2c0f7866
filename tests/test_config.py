import pytest

from creative_bench.models.config import Config, load_env


def test_defaults():
	cfg = Config()
	assert cfg.base_url is None
	assert cfg.api_key is None
	assert cfg.judge_model == "openai/gpt-4o-mini"
	assert cfg.generation_temperature == 0.9
	assert cfg.call_timeout_seconds == 120
	assert cfg.history_limit == 50
	assert cfg.catalog_file == "litellm-config.yaml"


def test_reads_environment(monkeypatch):
	monkeypatch.setenv("LITELLM_BASE_URL", "http://proxy:4000/")
	monkeypatch.setenv("LITELLM_MASTER_KEY", "sk-abc")
	monkeypatch.setenv("JUDGE_MODEL", "anthropic/claude-3-haiku")
	cfg = Config()
	assert cfg.base_url == "http://proxy:4000"
	assert cfg.api_key == "sk-abc"
	assert cfg.judge_model == "anthropic/claude-3-haiku"


def test_blank_credentials_are_none():
	cfg = Config(LITELLM_BASE_URL="  ", LITELLM_MASTER_KEY="")
	assert cfg.base_url is None
	assert cfg.api_key is None


@pytest.mark.parametrize("value", [-0.1, 2.5])
def test_temperature_range(value):
	with pytest.raises(ValueError):
		Config(GENERATION_TEMPERATURE=value)


@pytest.mark.parametrize("field", ["CALL_TIMEOUT_SECONDS", "HISTORY_LIMIT"])
def test_positive_fields(field):
	with pytest.raises(ValueError):
		Config(**{field: 0})


def test_paths(tmp_path):
	cfg = Config(HISTORY_FILE=str(tmp_path / "h.json"),
	             MODEL_CONFIG_FILE=str(tmp_path / "c.yaml"))
	assert cfg.history_path == tmp_path / "h.json"
	assert cfg.catalog_path == tmp_path / "c.yaml"


def test_load_env(tmp_path, monkeypatch):
	env = tmp_path / ".env"
	env.write_text("JUDGE_MODEL=from/dotenv\n", encoding="utf-8")
	load_env(env)
	assert Config().judge_model == "from/dotenv"
	monkeypatch.delenv("JUDGE_MODEL")


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "missing.env")
	assert Config().judge_model == "openai/gpt-4o-mini"
