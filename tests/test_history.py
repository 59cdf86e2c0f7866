import json

from creative_bench.models.results import BenchmarkResult
from creative_bench.models.run import BenchmarkRun, build_run
from creative_bench.models.scores import ScoreSet
from creative_bench.storage.history import DEFAULT_HISTORY_KEY, HistoryStore


def _run(prompt="p", total=4):
	res = BenchmarkResult(
	    model="m1",
	    output="out",
	    latency_ms=12,
	    scores=ScoreSet(character_clarity=total),
	    judged=True,
	)
	return build_run(prompt, "judge/m", ["m1"], [res])


def test_load_missing_file(tmp_path):
	assert HistoryStore(tmp_path / "h.json").load() == []


def test_save_and_load_round_trip(tmp_path):
	store = HistoryStore(tmp_path / "nested" / "h.json")
	run = _run()
	assert store.save(run) == 1
	loaded = store.load()
	assert loaded == [run]
	assert loaded[0].results[0].scores.total == 4


def test_most_recent_first_and_bounded(tmp_path):
	store = HistoryStore(tmp_path / "h.json", limit=3)
	for i in range(5):
		store.save(_run(prompt=f"p{i}"))
	assert [r.prompt for r in store.load()] == ["p4", "p3", "p2"]


def test_clear(tmp_path):
	path = tmp_path / "h.json"
	store = HistoryStore(path)
	store.save(_run())
	store.clear()
	assert store.load() == []
	assert json.loads(path.read_text()) == {}


def test_keys_are_independent(tmp_path):
	path = tmp_path / "h.json"
	a = HistoryStore(path)
	b = HistoryStore(path, key="other")
	a.save(_run(prompt="a"))
	b.save(_run(prompt="b"))
	b.clear()
	assert [r.prompt for r in a.load()] == ["a"]
	assert b.load() == []


def test_corrupt_file_is_empty(tmp_path):
	path = tmp_path / "h.json"
	path.write_text("{not json", encoding="utf-8")
	store = HistoryStore(path)
	assert store.load() == []
	store.save(_run())
	assert len(store.load()) == 1


def test_invalid_entries_are_skipped(tmp_path):
	path = tmp_path / "h.json"
	good = _run().model_dump(mode="json")
	path.write_text(json.dumps({DEFAULT_HISTORY_KEY: [{"bogus": 1}, good]}),
	                encoding="utf-8")
	runs = HistoryStore(path).load()
	assert len(runs) == 1
	assert isinstance(runs[0], BenchmarkRun)


def test_legacy_entries_without_judged_flag(tmp_path):
	path = tmp_path / "h.json"
	legacy = {
	    "ts": 1700000000000,
	    "prompt": "p",
	    "judge_model": "j",
	    "models": ["m"],
	    "results": [{
	        "model": "m",
	        "output": "o",
	        "latency_ms": 3,
	        "scores": {
	            "character_clarity": 1,
	            "originality": 2,
	            "sensory_detail": 3,
	            "tone_consistency": 4,
	            "total": 10
	        },
	    }],
	}
	path.write_text(json.dumps({DEFAULT_HISTORY_KEY: [legacy]}),
	                encoding="utf-8")
	run = HistoryStore(path).load()[0]
	assert run.results[0].scores.total == 10
	assert run.results[0].judged is False
