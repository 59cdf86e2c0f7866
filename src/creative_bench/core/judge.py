"""
Judge prompt construction and judge invocation.

Builds the rubric-based evaluation prompt sent to the judge model and
turns the judge's raw reply into a ScoreSet.
"""

from __future__ import annotations

from creative_bench.models.scores import SCORE_DIMENSIONS, ScoreSet
from creative_bench.core.scoring import parse_judge_response
from creative_bench.utils.logging import get_logger
from creative_bench.utils.protocols import InvokerProtocol

logger = get_logger(__name__)

JUDGE_SYSTEM_PROMPT = (
    "You are a strict creative-writing judge. Return JSON only. "
    "No markdown, no commentary.")

# dimension -> (question, low, mid, high)
RUBRIC: dict[str, tuple[str, str, str, str]] = {
    "character_clarity": (
        "Is the character vivid and understandable?",
        "flat, confusing or absent",
        "recognisable but generic",
        "distinct, vivid and coherent",
    ),
    "originality": (
        "Are the ideas fresh rather than generic?",
        "cliched or derivative",
        "some fresh touches on familiar ground",
        "surprising, inventive and specific",
    ),
    "sensory_detail": (
        "Is there concrete imagery: sights, sounds, smells, touch?",
        "abstract, little imagery",
        "some concrete detail",
        "rich, precise and evocative",
    ),
    "tone_consistency": (
        "Does the tone stay consistent and intentional?",
        "jarring or unintended shifts",
        "mostly steady with lapses",
        "controlled and deliberate throughout",
    ),
}


def _format_rubric() -> str:
	lines = []
	for dim in SCORE_DIMENSIONS:
		question, low, mid, high = RUBRIC[dim]
		lines.append(f"- {dim}: {question}\n"
		             f"    0-3 = {low}; 4-6 = {mid}; 7-10 = {high}")
	return "\n".join(lines)


def _format_schema() -> str:
	keys = ",\n".join(f'  "{dim}": number' for dim in SCORE_DIMENSIONS)
	return "{\n" + keys + "\n}"


def build_judge_prompt(prompt: str, output: str) -> str:
	"""
	Compose the judge instruction for one candidate output.

	The text is identical for every judge backend. The original prompt
	and the candidate output are embedded verbatim.

	Parameters:
		prompt: The creative-writing prompt given to the candidate.
		output: The candidate model's output.

	Returns:
		Judge instruction text.
	"""
	return ("Rate the writing below from 0 to 10 in each category:\n"
	        f"{_format_rubric()}\n\n"
	        "Return ONLY a valid JSON object with exactly these numeric keys "
	        "and nothing else:\n"
	        f"{_format_schema()}\n\n"
	        f"Prompt:\n{prompt}\n\n"
	        f"Model Output:\n{output}")


async def judge_output(
    invoker: InvokerProtocol,
    judge_model: str,
    prompt: str,
    output: str,
) -> ScoreSet:
	"""
	Score a candidate output with the judge model.

	Raises:
		BackendError: If the judge call fails.
		ParseError: If the judge reply holds no JSON object.
	"""
	raw = await invoker.judge(judge_model, prompt, output)
	scores = parse_judge_response(raw)
	logger.debug("judge model=%s total=%d", judge_model, scores.total)
	return scores


__all__ = [
    "JUDGE_SYSTEM_PROMPT",
    "RUBRIC",
    "build_judge_prompt",
    "judge_output",
]
