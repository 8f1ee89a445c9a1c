"""
Main application entry for the league results statistics CLI.

This module defines the command-line interface users run. It handles:
    - environment variable loading via `python-dotenv`,
    - logging setup (delegated to `common.utils.setup_logging`),
    - loading the results file once (via `controllers.data_controller`),
    - printing the league-wide report and writing the two trend charts
      (via `controllers.report_controller`),
    - running the interactive single-team query.

This file only composes logic from helper modules; the statistics live
under `controllers/` and the reading/plotting helpers under `common/`.

Usage:
    plstats report --data pl_matches.csv --output-dir charts
    plstats query --data pl_matches.csv
"""

# Import libraries
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load `.env` before the settings in common.constants are read.
load_dotenv(override=False)

from common import constants
from common.exceptions import MatchStatsError
from common.utils import setup_logging
from controllers.data_controller import load_matches
from controllers.report_controller import (
    build_report, print_report, render_charts, run_team_query, format_team_query,
)
from models.match_model import MatchSet

app = typer.Typer(help="Descriptive statistics for historical league match results")


def _load_or_exit(data: Path) -> MatchSet:
    try:
        return load_matches(data)
    except MatchStatsError as e:
        typer.secho(f"Cannot load matches: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


def _query(matches: MatchSet) -> bool:
    """Run one interactive query; report the outcome and return success."""
    try:
        result = run_team_query(matches)
    except MatchStatsError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        return False
    typer.echo("")
    typer.echo(format_team_query(result))
    return True


@app.command()
def report(
    data: Path = typer.Option(constants.DATA_PATH, "--data", "-d", help="Results CSV file"),
    output_dir: Path = typer.Option(constants.OUTPUT_DIR, "--output-dir", "-o", help="Where to write the charts"),
    top: int = typer.Option(constants.TOP_N, "--top", "-n", min=1, help="Leaderboard length"),
    interactive: bool = typer.Option(True, "--interactive/--no-interactive", help="Run the team query afterwards"),
    log_level: str = typer.Option(constants.LOG_LEVEL, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
):
    """
    Print the league-wide summary, write the two trend charts and then
    (optionally) run the interactive team query.
    """
    setup_logging(log_level)
    matches = _load_or_exit(data)

    try:
        summary = build_report(matches, top_n=top)
    except MatchStatsError as e:
        typer.secho(f"Cannot build report: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    print_report(summary)
    rates, goals = render_charts(summary, output_dir)
    typer.echo(f"\nCharts saved to {rates} and {goals}")

    # A failed query is reported but does not fail the batch report.
    if interactive:
        typer.echo("")
        _query(matches)


@app.command()
def query(
    data: Path = typer.Option(constants.DATA_PATH, "--data", "-d", help="Results CSV file"),
    log_level: str = typer.Option(constants.LOG_LEVEL, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
):
    """Run only the interactive single-team query."""
    setup_logging(log_level)
    matches = _load_or_exit(data)
    if not _query(matches):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
