"""
Small data model for the match results.

`MatchRecord` is one game as read from the results file and `MatchSet` is
the ordered collection built once by the loader. Both are frozen
(immutable) so they can be passed to every statistic without copies or
accidental modification.

Fields of a record:
    - `season`, `week`, `date`,
    - `home_team`, `away_team`, `home_goals`, `away_goals`,
    - `outcome` (the `H`/`A`/`D` code from the file as an `Outcome`).

The outcome is taken from the file as-is and never recomputed from goals.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from common.constants import HOME_WIN_CODE, AWAY_WIN_CODE, DRAW_CODE


class Outcome(Enum):
    HOME_WIN = HOME_WIN_CODE
    AWAY_WIN = AWAY_WIN_CODE
    DRAW = DRAW_CODE


@dataclass(frozen=True)
class MatchRecord:
    season: int
    week: int
    date: str
    home_team: str
    away_team: str
    home_goals: int
    away_goals: int
    outcome: Outcome

    def involves(self, team: str) -> bool:
        return team == self.home_team or team == self.away_team

    def is_win_for(self, team: str) -> bool:
        """True when `team` won according to the encoded result code."""
        if team == self.home_team and self.outcome is Outcome.HOME_WIN:
            return True
        if team == self.away_team and self.outcome is Outcome.AWAY_WIN:
            return True
        return False

    def margin_for(self, team: str) -> int:
        """Signed goal differential from `team`'s point of view (0 if not involved)."""
        if team == self.home_team:
            return self.home_goals - self.away_goals
        if team == self.away_team:
            return self.away_goals - self.home_goals
        return 0

    @property
    def winner(self) -> Optional[str]:
        if self.outcome is Outcome.HOME_WIN:
            return self.home_team
        if self.outcome is Outcome.AWAY_WIN:
            return self.away_team
        return None

    @property
    def loser(self) -> Optional[str]:
        if self.outcome is Outcome.HOME_WIN:
            return self.away_team
        if self.outcome is Outcome.AWAY_WIN:
            return self.home_team
        return None

    def describe(self) -> str:
        """Two-line narrative of the game, phrased from the winner's side."""
        if self.winner is None:
            head = (f"{self.home_team} played {self.away_team} "
                    f"in a {self.home_goals}-{self.away_goals} draw.")
        elif self.outcome is Outcome.HOME_WIN:
            head = (f"{self.winner} beat {self.loser} "
                    f"{self.home_goals}-{self.away_goals} in a home win.")
        else:
            head = (f"{self.winner} beat {self.loser} "
                    f"{self.away_goals}-{self.home_goals} in an away win.")
        tail = (f"This game happened on {self.date} during week {self.week} "
                f"of the {self.season} season.")
        return f"{head}\n{tail}"


@dataclass(frozen=True)
class MatchSet:
    """
    Ordered, read-only sequence of `MatchRecord`.

    Built once at load time; every analysis function receives it by
    reference together with its selection (team names, seasons).
    """
    records: Tuple[MatchRecord, ...] = ()
    header: Tuple[str, ...] = field(default=(), compare=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self.records)

    def __getitem__(self, idx: int) -> MatchRecord:
        return self.records[idx]

    def teams(self) -> List[str]:
        """Distinct team names (home and away), sorted."""
        names = {r.home_team for r in self.records} | {r.away_team for r in self.records}
        return sorted(names)

    def seasons(self) -> List[int]:
        return sorted({r.season for r in self.records})

    def for_seasons(self, seasons: Iterable[int]) -> "MatchSet":
        """Records whose season is in `seasons`, in source order."""
        wanted = set(seasons)
        return MatchSet(tuple(r for r in self.records if r.season in wanted), self.header)

