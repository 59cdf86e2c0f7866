"""User interface components.

This subpackage provides terminal output rendering for benchmark
results, history, leaderboard and catalog.

Key modules:
    - reporting: Rich tables and markdown rendering
"""

from creative_bench.ui.reporting import (
    results_table,
    history_table,
    leaderboard_table,
    catalog_table,
    render_run_md,
    save_report_md,
)

__all__ = [
    "results_table",
    "history_table",
    "leaderboard_table",
    "catalog_table",
    "render_run_md",
    "save_report_md",
]
