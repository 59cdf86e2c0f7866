from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import typer
from rich.console import Console
from typer.main import get_command

from creative_bench.errors import ConfigurationError, ValidationError
from creative_bench.models.config import Config, load_env
from creative_bench.models.run import build_run
from creative_bench.core.runner import run_benchmark
from creative_bench.core.leaderboard import (
    compute_model_stats,
    with_catalog_models,
)
from creative_bench.loaders.catalog import load_catalog
from creative_bench.storage.history import HistoryStore
from creative_bench.ui.reporting import (
    catalog_table,
    history_table,
    leaderboard_table,
    render_run_md,
    results_table,
    save_report_md,
)
from creative_bench.utils.logging import configure_logging
from creative_bench.utils.protocols import HistoryProtocol

cli = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

DEFAULT_CANDIDATE_COUNT = 3


@cli.callback()
def root() -> None:
	"""
	Root callback for the creative-bench CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _setup() -> Config:
	load_env()
	config = Config()
	configure_logging(config.log_level)
	return config


def _history(config: Config) -> HistoryProtocol:
	return HistoryStore(config.history_path, limit=config.history_limit)


def run_impl(
    prompt: str,
    models: list[str] | None = None,
    judge_model: str | None = None,
    save: bool = True,
    report: str | None = None,
) -> None:
	"""
	Benchmark a prompt across candidate models and print the ranking.

	When no models are given, the first catalog entries are used.

	Parameters:
		prompt: Creative-writing prompt.
		models: Candidate model identifiers.
		judge_model: Judge model override.
		save: Whether to append the run to history.
		report: Optional path for a markdown report.
	"""
	config = _setup()
	candidates = list(models or [])
	if not candidates:
		catalog = load_catalog(config.catalog_path)
		candidates = [m.model for m in catalog[:DEFAULT_CANDIDATE_COUNT]]
	judge = judge_model or config.judge_model
	typer.echo(f"Running prompt against {len(candidates)} model(s), "
	           f"judge={judge}, timeout={config.call_timeout_seconds}s")

	with console.status("benchmarking...") as status:

		def progress_cb(model: str, msg: str) -> None:
			status.update(f"{model}: {msg}")

		try:
			results = asyncio.run(
			    run_benchmark(config, candidates, prompt, judge_model=judge,
			                  progress_cb=progress_cb))
		except (ValidationError, ConfigurationError) as exc:
			typer.echo(f"error: {exc}", err=True)
			raise typer.Exit(code=2)

	console.print(results_table(results, judge_model=judge))
	run = build_run(prompt, judge, candidates, results)
	if save:
		count = _history(config).save(run)
		typer.echo(f"Saved run to {config.history_path} ({count} stored)")
	if report:
		save_report_md(report, render_run_md(run))
		typer.echo(f"Wrote report to {report}")


@cli.command()
def run(
    prompt: str,
    models: Optional[List[str]] = typer.Option(
        None, "--model", "-m", help="Candidate model id (repeatable)"),
    judge_model: str = typer.Option(None, "--judge-model",
                                    help="Override judge model"),
    save: bool = typer.Option(True, "--save/--no-save",
                              help="Append the run to history"),
    report: str = typer.Option(None, "--report",
                               help="Write a markdown report to this path"),
) -> None:
	"""
	Generate with each model, judge every output, and rank the results.

	This is the main CLI command.
	"""
	run_impl(prompt, models, judge_model, save, report)


@cli.command()
def history(
    limit: int = typer.Option(10, "--limit", help="Runs to show"),
    clear: bool = typer.Option(False, "--clear", help="Delete all runs"),
) -> None:
	"""Show (or clear) recorded benchmark runs, most recent first."""
	store = _history(_setup())
	if clear:
		store.clear()
		typer.echo("History cleared")
		return
	console.print(history_table(store.load()[:limit]))


@cli.command()
def leaderboard() -> None:
	"""Aggregate per-model averages and wins across recorded runs.

	Catalog models without runs are listed after the ranked models.
	"""
	config = _setup()
	models = load_catalog(config.catalog_path)
	stats = compute_model_stats(_history(config).load())
	console.print(leaderboard_table(with_catalog_models(stats, models), models))


@cli.command()
def catalog() -> None:
	"""List models from the LiteLLM config file."""
	config = _setup()
	models = load_catalog(config.catalog_path)
	if not models:
		typer.echo(f"No models found in {config.catalog_path}")
		return
	console.print(catalog_table(models))


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'creative-bench "a prompt" -m openai/gpt-4o-mini'
	without explicitly specifying the 'run' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="creative-bench",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
