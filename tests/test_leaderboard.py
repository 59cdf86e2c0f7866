from creative_bench.core.leaderboard import (
    compute_model_stats,
    with_catalog_models,
)
from creative_bench.models.catalog import ModelMeta
from creative_bench.models.results import BenchmarkResult
from creative_bench.models.run import build_run
from creative_bench.models.scores import ScoreSet


def _res(model, total, latency_ms=1000):
	return BenchmarkResult(model=model, latency_ms=latency_ms,
	                       scores=ScoreSet(character_clarity=total),
	                       judged=True)


def test_empty():
	assert compute_model_stats([]) == []


def test_averages_wins_and_order():
	runs = [
	    build_run("p1", "j", ["a", "b"], [_res("a", 8), _res("b", 4, 3000)]),
	    build_run("p2", "j", ["a", "b"], [_res("b", 10, 1000),
	                                      _res("a", 2)]),
	    build_run("p3", "j", ["a"], [_res("a", 5)]),
	]
	stats = compute_model_stats(runs)
	assert [s.model for s in stats] == ["b", "a"]
	b, a = stats
	assert b.avg_total == 7.0
	assert b.wins == 1
	assert b.runs == 2
	assert b.avg_latency_s == 2.0
	assert a.avg_total == 5.0
	assert a.wins == 2
	assert a.runs == 3


def test_tie_winner_is_first_listed():
	run = build_run("p", "j", ["x", "y"], [_res("x", 6), _res("y", 6)])
	stats = {s.model: s for s in compute_model_stats([run])}
	assert stats["x"].wins == 1
	assert stats["y"].wins == 0


def test_catalog_models_without_runs_are_appended():
	run = build_run("p", "j", ["b"], [_res("b", 6)])
	catalog = [ModelMeta(model="a"), ModelMeta(model="b"), ModelMeta(model="a")]
	rows = with_catalog_models(compute_model_stats([run]), catalog)
	assert [r.model for r in rows] == ["b", "a"]
	assert rows[1].runs == 0
	assert rows[1].avg_total == 0
	assert rows[1].wins == 0
