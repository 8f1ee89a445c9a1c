"""
Aggregate statistics over a `MatchSet`.

Every function here is pure: it reads the match set it is given plus a
selection (team and/or seasons) and never mutates anything. Ratios over an
empty selection raise `NoMatchingGames` instead of returning NaN.
"""

import logging
from typing import Iterable, List, Tuple

import pandas as pd

from common.exceptions import NoMatchingGames
from common.metrics import percentage
from models.match_model import MatchRecord, MatchSet, Outcome

logger = logging.getLogger(__name__)


def win_rate(matches: MatchSet, team: str, seasons: Iterable[int]) -> float:
    """
    Percentage of `team`'s games won over all `seasons`.

    Wins and appearances are summed over the whole season list and divided
    once at the end.
    """
    wanted = set(seasons)
    appearances = 0
    wins = 0
    for game in matches:
        if game.season in wanted and game.involves(team):
            appearances += 1
            if game.is_win_for(team):
                wins += 1
    if appearances == 0:
        raise NoMatchingGames(f"{team} played no games in seasons {sorted(wanted)}")
    return percentage(wins, appearances)


def result_rate(matches: MatchSet, outcome: Outcome, season: int) -> float:
    """Percentage of the season's games that ended in `outcome`."""
    games = 0
    hits = 0
    for game in matches:
        if game.season == season:
            games += 1
            if game.outcome is outcome:
                hits += 1
    if games == 0:
        raise NoMatchingGames(f"No games recorded for season {season}")
    return percentage(hits, games)


def home_pct(matches: MatchSet, season: int) -> float:
    return result_rate(matches, Outcome.HOME_WIN, season)


def away_pct(matches: MatchSet, season: int) -> float:
    return result_rate(matches, Outcome.AWAY_WIN, season)


def draw_pct(matches: MatchSet, season: int) -> float:
    return result_rate(matches, Outcome.DRAW, season)


def season_appearances(matches: MatchSet, team: str, seasons: Iterable[int]) -> Tuple[List[int], int]:
    """Distinct seasons (in query order) in which `team` played, and how many."""
    played = {game.season for game in matches if game.involves(team)}
    found: List[int] = []
    for season in seasons:
        if season in played and season not in found:
            found.append(season)
    return found, len(found)


def goal_average(matches: MatchSet, season: int) -> float:
    """Average goals per game (home + away) in `season`."""
    goals = 0
    games = 0
    for game in matches:
        if game.season == season:
            goals += game.home_goals + game.away_goals
            games += 1
    if games == 0:
        raise NoMatchingGames(f"No games recorded for season {season}")
    return goals / games


def team_games(matches: MatchSet, team: str, seasons: Iterable[int]) -> int:
    wanted = set(seasons)
    return sum(1 for game in matches if game.season in wanted and game.involves(team))


def largest_margin(matches: MatchSet, team: str, seasons: Iterable[int]) -> MatchRecord:
    """
    The win with the biggest goal differential in `team`'s favour.

    Ties keep the first game in source order. Raises `NoMatchingGames` when
    the team has no win in the seasons.
    """
    wanted = set(seasons)
    best = None
    best_margin = 0
    for game in matches:
        if game.season not in wanted or not game.is_win_for(team):
            continue
        margin = game.margin_for(team)
        if best is None or margin > best_margin:
            best, best_margin = game, margin
    if best is None:
        raise NoMatchingGames(f"{team} has no wins in seasons {sorted(wanted)}")
    return best


def compute_season_trends(matches: MatchSet, seasons: Iterable[int]) -> pd.DataFrame:
    """
    One row per season with games:
      season, games, home_pct, away_pct, draw_pct, goal_avg
    Seasons without games are skipped.
    """
    rows = []
    for season in seasons:
        subset = matches.for_seasons([season])
        if len(subset) == 0:
            logger.warning("Season %s has no games; left out of the trends", season)
            continue
        rows.append({
            "season": season,
            "games": len(subset),
            "home_pct": home_pct(subset, season),
            "away_pct": away_pct(subset, season),
            "draw_pct": draw_pct(subset, season),
            "goal_avg": goal_average(subset, season),
        })
    return pd.DataFrame(rows, columns=["season", "games", "home_pct", "away_pct", "draw_pct", "goal_avg"])
