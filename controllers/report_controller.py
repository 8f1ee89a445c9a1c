"""
Report controller that composes the loader, statistics and leaderboard
helpers into what the CLI shows.

This module exposes:
    - `build_report(matches, seasons, top_n)` computes every figure of the
      league-wide summary into a `LeagueReport`,
    - `format_report` / `print_report` turn it into console text,
    - `render_charts(report, output_dir)` writes the two trend charts,
    - `run_team_query(matches, read_line)` runs the interactive single-team
      query and returns a `TeamQueryResult`.

Implementation notes:
    - Nothing here mutates the `MatchSet`; every statistic receives it by
      reference.
    - The interactive query reads answers through `read_line` (defaults to
      `typer.prompt`) so it can be driven by tests. Invalid answers raise
      immediately; there is no re-prompt.
"""

# Import libraries
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

import pandas as pd
import typer

from common.constants import TOP_N, OUTPUT_DIR, RATES_CHART, GOALS_CHART
from common.exceptions import UnknownTeam, InvalidSeasonRange, NoMatchingGames
from common.metrics import SeasonExtreme, column_mean, season_low, season_high
from common.plots import plot_result_rates, plot_goal_averages, save_chart
from common.utils import parse_season, season_span
from controllers.leaderboard_controller import top_win_rates, top_appearances
from controllers.stats_controller import (
    compute_season_trends, season_appearances, largest_margin, win_rate, team_games,
)
from models.match_model import MatchRecord, MatchSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeagueReport:
    seasons: List[int]
    teams: List[str]
    top_win_rates: List[Tuple[str, float]]
    top_appearances: List[Tuple[str, int]]
    trends: pd.DataFrame = field(compare=False)
    avg_home: float
    avg_away: float
    worst_home: SeasonExtreme
    worst_home_draw: float
    worst_home_away: float
    avg_goals: float
    best_goals: SeasonExtreme

    @property
    def avg_diff(self) -> float:
        return self.avg_home - self.avg_away

    @property
    def worst_home_diff(self) -> float:
        return self.worst_home.value - self.worst_home_away


@dataclass(frozen=True)
class TeamQueryResult:
    team: str
    seasons: List[int]
    played_seasons: List[int]
    season_count: int
    win_rate: float
    biggest_win: Optional[MatchRecord]


# ---------- League-wide summary ----------

def build_report(matches: MatchSet, seasons: Optional[List[int]] = None, top_n: int = TOP_N) -> LeagueReport:
    if len(matches) == 0:
        raise NoMatchingGames("No matches loaded; nothing to report")

    seasons = list(seasons) if seasons is not None else matches.seasons()
    teams = matches.teams()

    # 1) Per-season trend table (home/away/draw rates and goals).
    trends = compute_season_trends(matches, seasons)
    if trends.empty:
        raise NoMatchingGames(f"No games in the selected seasons {seasons}")

    # 2) Leaderboards; never ask for more places than there are ranked teams.
    # Only teams with a game in the seasons get a win rate.
    ranked = [t for t in teams if team_games(matches, t, seasons) > 0]
    n_pct = min(top_n, len(ranked))
    n_app = min(top_n, len(teams))
    if n_pct < top_n:
        logger.warning("Only %d teams played; win-rate leaderboard shortened from %d", n_pct, top_n)
    top_pct = top_win_rates(matches, ranked, seasons, n_pct)
    top_app = top_appearances(matches, teams, seasons, n_app)

    # 3) Extremes and averages over the table.
    worst = season_low(trends, "home_pct")
    worst_row = trends.loc[trends["season"] == worst.season].iloc[0]

    return LeagueReport(
        seasons=seasons,
        teams=teams,
        top_win_rates=top_pct,
        top_appearances=top_app,
        trends=trends,
        avg_home=column_mean(trends, "home_pct"),
        avg_away=column_mean(trends, "away_pct"),
        worst_home=worst,
        worst_home_draw=float(worst_row["draw_pct"]),
        worst_home_away=float(worst_row["away_pct"]),
        avg_goals=column_mean(trends, "goal_avg"),
        best_goals=season_high(trends, "goal_avg"),
    )


def format_report(report: LeagueReport) -> str:
    lines = [
        f"Over {len(report.seasons)} seasons, a total of {len(report.teams)} teams have competed in the league.",
        "",
        "Most successful teams by win percentage:",
    ]
    for i, (team, pct) in enumerate(report.top_win_rates, start=1):
        lines.append(f"{i}: {team} with a win percentage of {pct:.4f}")
    lines += ["", "Most successful teams by number of seasons:"]
    for i, (team, apps) in enumerate(report.top_appearances, start=1):
        lines.append(f"{i}: {team} with {apps} total seasons in the league")

    w = report.worst_home
    lines += [
        "",
        f"The average home win-rate across all seasons is {report.avg_home:.3f}%, "
        f"compared to an away win-rate of {report.avg_away:.3f}%.",
    ]
    if w.runner_up is not None:
        lines.append(
            f"The season with the lowest home-win rate was {w.season} with a home-win rate of {w.value:.3f}%, "
            f"which is {w.gap:.3f}% worse than the second-worst season of {w.runner_up}."
        )
    else:
        lines.append(f"The season with the lowest home-win rate was {w.season} with a home-win rate of {w.value:.3f}%.")
    lines += [
        f"In {w.season}, the draw rate was {report.worst_home_draw:.3f}% "
        f"and the away-win rate was {report.worst_home_away:.3f}%.",
        f"This is a home-away differential of {report.worst_home_diff:.3f}%. The average home-away "
        f"differential across all {len(report.trends)} seasons is {report.avg_diff:.3f}%.",
        f"The average number of goals scored in a game is {report.avg_goals:.4f}.",
        f"The season with the most average goals per game was {report.best_goals.season} "
        f"with {report.best_goals.value:.4f} goals per game.",
    ]
    return "\n".join(lines)


def print_report(report: LeagueReport) -> None:
    typer.echo(format_report(report))


def render_charts(report: LeagueReport, output_dir: Union[str, Path] = OUTPUT_DIR) -> Tuple[Path, Path]:
    out = Path(output_dir)
    rates = save_chart(plot_result_rates(report.trends), out / RATES_CHART)
    goals = save_chart(plot_goal_averages(report.trends), out / GOALS_CHART)
    logger.info("Charts written to %s and %s", rates, goals)
    return rates, goals


# ---------- Interactive single-team query ----------

def _prompt(prompt: str) -> str:
    return typer.prompt(prompt, type=str)


def _read_season(read_line: Callable[[str], str], prompt: str) -> int:
    answer = read_line(prompt)
    try:
        return parse_season(answer)
    except ValueError as e:
        raise InvalidSeasonRange(f"Enter a valid season in digits ({e}).") from e


def run_team_query(matches: MatchSet,
                   read_line: Optional[Callable[[str], str]] = None) -> TeamQueryResult:
    """
    Ask for a team, a starting season and an ending season, then compute the
    team's seasons played, biggest win and win rate over that range.

    Raises UnknownTeam, InvalidSeasonRange or NoMatchingGames on the first
    invalid answer.
    """
    read_line = read_line or _prompt
    all_teams = set(matches.teams())
    all_seasons = matches.seasons()
    if not all_seasons:
        raise NoMatchingGames("No matches loaded; nothing to query")
    first, last = all_seasons[0], all_seasons[-1]

    # 1) Team, matched exactly (no case or whitespace normalisation)
    team = read_line("Enter a team")
    if team not in all_teams:
        raise UnknownTeam(
            f"'{team}' is not a valid team. Here is the full list of teams: {sorted(all_teams)}"
        )

    # 2) Season bounds
    start = _read_season(read_line, f"Enter a starting season from {first} to {last}")
    end = _read_season(read_line, f"Enter an ending season from {first} to {last}")
    if start > end:
        raise InvalidSeasonRange("Your starting season must be earlier than your ending season.")
    if start < first or end > last:
        raise InvalidSeasonRange(
            f"One or more of your seasons is not in the valid range of {first} to {last}."
        )

    chosen = season_span(start, end)
    if team_games(matches, team, chosen) == 0:
        played, _ = season_appearances(matches, team, all_seasons)
        raise NoMatchingGames(
            f"{team} did not play for any of the time you specified. "
            f"{team} played during the following seasons: {played}"
        )

    # 3) Statistics for the selection
    played, count = season_appearances(matches, team, chosen)
    try:
        biggest = largest_margin(matches, team, chosen)
    except NoMatchingGames:
        biggest = None
    rate = win_rate(matches, team, chosen)

    logger.info("Query for %s over %s-%s: %d seasons", team, start, end, count)
    return TeamQueryResult(
        team=team,
        seasons=chosen,
        played_seasons=played,
        season_count=count,
        win_rate=rate,
        biggest_win=biggest,
    )


def format_team_query(result: TeamQueryResult) -> str:
    lines = [
        f"{result.team} played in {result.season_count} seasons over that interval: {result.played_seasons}",
        "",
    ]
    if result.biggest_win is not None:
        lines.append(f"The biggest win interval for {result.team} in those seasons was in the below game:")
        lines.append(result.biggest_win.describe())
    else:
        lines.append(f"{result.team} did not win a game in those seasons.")
    lines += [
        "",
        f"The {result.team} win rate for the {result.seasons[0]} to {result.seasons[-1]} seasons "
        f"is {result.win_rate:.4f}%.",
    ]
    return "\n".join(lines)
