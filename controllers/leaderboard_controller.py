"""
Leaderboards: rank teams by a statistic and keep the top N.

`top_n_by` is generic over any `team -> value` function; the two builders
below bind it to the win-rate and season-appearance statistics.
"""

import logging
from typing import Callable, Iterable, List, Tuple, Union

from common.exceptions import InvalidRank
from controllers.stats_controller import win_rate, season_appearances, team_games
from models.match_model import MatchSet

logger = logging.getLogger(__name__)

Number = Union[int, float]


def top_n_by(statistic_fn: Callable[[str], Number], teams: Iterable[str], n: int) -> List[Tuple[str, Number]]:
    """
    Compute `statistic_fn` for every distinct team, sort by value (desc) and
    team name (asc), and return the first `n` (team, value) pairs.
    """
    distinct = sorted(set(teams))
    if n <= 0 or n > len(distinct):
        raise InvalidRank(f"Cannot rank top {n} out of {len(distinct)} teams")

    scored = [(team, statistic_fn(team)) for team in distinct]
    scored.sort(key=lambda tv: (-tv[1], tv[0]))
    return scored[:n]


def top_win_rates(matches: MatchSet, teams: Iterable[str], seasons: Iterable[int], n: int) -> List[Tuple[str, float]]:
    """Top `n` by win rate; teams without a game in `seasons` are not ranked."""
    seasons = list(seasons)
    ranked = [t for t in set(teams) if team_games(matches, t, seasons) > 0]
    logger.debug("Ranking win rates of %d teams over %d seasons", len(ranked), len(seasons))
    return top_n_by(lambda team: win_rate(matches, team, seasons), ranked, n)


def top_appearances(matches: MatchSet, teams: Iterable[str], seasons: Iterable[int], n: int) -> List[Tuple[str, int]]:
    """Top `n` by number of seasons played."""
    seasons = list(seasons)
    return top_n_by(lambda team: season_appearances(matches, team, seasons)[1], teams, n)
