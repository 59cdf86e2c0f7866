import json

import httpx
import pytest

from creative_bench.core.invoker import (
    GENERATION_SYSTEM_PROMPT,
    JUDGE_TEMPERATURE,
    ModelInvoker,
)
from creative_bench.core.judge import JUDGE_SYSTEM_PROMPT
from creative_bench.errors import BackendError, ConfigurationError
from creative_bench.models.config import Config


def _config(**kwargs):
	values = {
	    "LITELLM_BASE_URL": "http://litellm.test/",
	    "LITELLM_MASTER_KEY": "sk-test-key",
	}
	values.update(kwargs)
	return Config(**values)


def _completion(content):
	return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class Recorder:
	"""MockTransport handler that records requests and replies in turn."""

	def __init__(self, *responses):
		self.responses = list(responses)
		self.requests = []

	def __call__(self, request):
		self.requests.append(request)
		resp = self.responses.pop(0)
		if isinstance(resp, Exception):
			raise resp
		return resp

	def body(self, i=0):
		return json.loads(self.requests[i].content)


def test_missing_base_url_is_configuration_error():
	with pytest.raises(ConfigurationError):
		ModelInvoker(Config(LITELLM_MASTER_KEY="k"))


def test_missing_key_is_configuration_error():
	with pytest.raises(ConfigurationError):
		ModelInvoker(Config(LITELLM_BASE_URL="http://x"))


@pytest.mark.asyncio
async def test_generate_request_shape_and_output():
	rec = Recorder(httpx.Response(200, json=_completion("Rain fell.")))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		res = await inv.generate("openai/gpt-4o-mini", "Write about rain.")
	assert res.model == "openai/gpt-4o-mini"
	assert res.output == "Rain fell."
	assert res.latency_ms >= 0
	req = rec.requests[0]
	assert req.method == "POST"
	assert str(req.url) == "http://litellm.test/v1/chat/completions"
	assert req.headers["Authorization"] == "Bearer sk-test-key"
	body = rec.body()
	assert body["model"] == "openai/gpt-4o-mini"
	assert body["temperature"] == 0.9
	assert body["messages"] == [
	    {"role": "system", "content": GENERATION_SYSTEM_PROMPT},
	    {"role": "user", "content": "Write about rain."},
	]


@pytest.mark.asyncio
async def test_generate_uses_configured_temperature():
	rec = Recorder(httpx.Response(200, json=_completion("x")))
	async with ModelInvoker(_config(GENERATION_TEMPERATURE=0.7),
	                        transport=httpx.MockTransport(rec)) as inv:
		await inv.generate("m", "p")
	assert rec.body()["temperature"] == 0.7


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {},
    {"choices": []},
    {"choices": [{}]},
    {"choices": [{"message": {"content": None}}]},
])
async def test_generate_missing_content_is_empty(payload):
	rec = Recorder(httpx.Response(200, json=payload))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		res = await inv.generate("m", "p")
	assert res.output == ""


@pytest.mark.asyncio
async def test_judge_request_shape():
	rec = Recorder(httpx.Response(200, json=_completion('  {"a": 1}\n')))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		raw = await inv.judge("judge/m", "the prompt", "the output")
	assert raw == '{"a": 1}'
	body = rec.body()
	assert body["model"] == "judge/m"
	assert body["temperature"] == JUDGE_TEMPERATURE == 0
	assert body["messages"][0] == {
	    "role": "system",
	    "content": JUDGE_SYSTEM_PROMPT
	}
	user = body["messages"][1]["content"]
	assert "the prompt" in user
	assert "the output" in user


@pytest.mark.asyncio
async def test_http_error_status_raises_backend_error():
	rec = Recorder(httpx.Response(429, text="rate limited"))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		with pytest.raises(BackendError) as exc_info:
			await inv.generate("m", "p")
	assert exc_info.value.status_code == 429
	assert exc_info.value.body == "rate limited"


@pytest.mark.asyncio
async def test_network_failure_raises_backend_error():
	rec = Recorder(httpx.ConnectError("connection refused"))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		with pytest.raises(BackendError) as exc_info:
			await inv.judge("j", "p", "o")
	assert exc_info.value.status_code is None
	assert "connection refused" in exc_info.value.body


@pytest.mark.asyncio
async def test_non_json_body_raises_backend_error():
	rec = Recorder(httpx.Response(200, text="<html>oops</html>"))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		with pytest.raises(BackendError):
			await inv.generate("m", "p")


@pytest.mark.asyncio
async def test_no_retries_on_failure():
	rec = Recorder(httpx.Response(500, text="boom"),
	               httpx.Response(200, json=_completion("ok")))
	async with ModelInvoker(_config(),
	                        transport=httpx.MockTransport(rec)) as inv:
		with pytest.raises(BackendError):
			await inv.generate("m", "p")
	assert len(rec.requests) == 1
