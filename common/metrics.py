"""
Small numeric helpers shared by the statistics and report controllers.

This module provides:
    - `percentage` used by every rate computation,
    - `column_mean` to average a per-season column of the trends table,
    - `season_low` / `season_high` to pick the extreme seasons of a column,
      with the runner-up season and the gap between the two.

The trends table is the DataFrame built by
`controllers.stats_controller.compute_season_trends`.
"""

#Import libraries
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class SeasonExtreme:
    season: int
    value: float
    runner_up: Optional[int] = None
    gap: float = 0.0


def percentage(part: int, whole: int) -> float:
    """100 * part / whole; callers guarantee whole > 0."""
    return 100.0 * part / whole


def column_mean(trends: pd.DataFrame, column: str) -> float:
    """Plain mean of a per-season column (each season weighted equally)."""
    if trends.empty:
        return float("nan")
    return float(np.mean(trends[column].to_numpy(dtype=float)))


def _extreme(trends: pd.DataFrame, column: str, ascending: bool) -> SeasonExtreme:
    if trends.empty:
        raise ValueError("trends table is empty")
    # stable sort keeps the earliest season first on ties
    ordered = trends.sort_values(column, ascending=ascending, kind="mergesort")
    best = ordered.iloc[0]
    if len(ordered) == 1:
        return SeasonExtreme(int(best["season"]), float(best[column]))
    second = ordered.iloc[1]
    return SeasonExtreme(
        season=int(best["season"]),
        value=float(best[column]),
        runner_up=int(second["season"]),
        gap=abs(float(second[column]) - float(best[column])),
    )


def season_low(trends: pd.DataFrame, column: str) -> SeasonExtreme:
    """Season with the lowest value in `column`."""
    return _extreme(trends, column, ascending=True)


def season_high(trends: pd.DataFrame, column: str) -> SeasonExtreme:
    """Season with the highest value in `column`."""
    return _extreme(trends, column, ascending=False)
