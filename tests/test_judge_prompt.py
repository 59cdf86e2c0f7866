import json

import pytest

from creative_bench.core.judge import (
    JUDGE_SYSTEM_PROMPT,
    build_judge_prompt,
    judge_output,
)
from creative_bench.errors import ParseError
from creative_bench.models.scores import SCORE_DIMENSIONS


def test_prompt_names_all_dimensions_with_bands():
	text = build_judge_prompt("p", "o")
	for dim in SCORE_DIMENSIONS:
		assert f"- {dim}:" in text
	assert text.count("0-3 =") == len(SCORE_DIMENSIONS)
	assert text.count("7-10 =") == len(SCORE_DIMENSIONS)


def test_prompt_demands_json_with_exact_keys():
	text = build_judge_prompt("p", "o")
	assert "ONLY a valid JSON object" in text
	start = text.index("{")
	end = text.index("}", start)
	schema = text[start:end + 1].replace("number", "0")
	assert list(json.loads(schema)) == list(SCORE_DIMENSIONS)


def test_prompt_embeds_inputs_verbatim():
	prompt = "Write two sentences about rain.\n  Keep it  odd."
	output = "Rain {fell} like \"glass\".\n\nThen stopped."
	text = build_judge_prompt(prompt, output)
	assert f"Prompt:\n{prompt}\n" in text
	assert text.endswith(f"Model Output:\n{output}")


def test_prompt_is_pure():
	assert build_judge_prompt("a", "b") == build_judge_prompt("a", "b")


def test_system_prompt_requires_json():
	assert "JSON only" in JUDGE_SYSTEM_PROMPT


class DummyInvoker:

	def __init__(self, reply):
		self.reply = reply
		self.calls = []

	async def judge(self, model, prompt, output):
		self.calls.append((model, prompt, output))
		return self.reply


@pytest.mark.asyncio
async def test_judge_output_parses_reply():
	inv = DummyInvoker('```json\n{"character_clarity": 8, "originality": 7,'
	                   ' "sensory_detail": 9, "tone_consistency": 8}\n```')
	scores = await judge_output(inv, "judge/m", "prompt", "text")
	assert scores.total == 32
	assert inv.calls == [("judge/m", "prompt", "text")]


@pytest.mark.asyncio
async def test_judge_output_raises_parse_error():
	with pytest.raises(ParseError):
		await judge_output(DummyInvoker("no scores"), "j", "p", "o")
