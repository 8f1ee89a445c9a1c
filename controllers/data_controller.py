"""
Data controller that turns the results file into the `MatchSet` used by
every other controller.

This module exposes one entry point:
    - `load_matches(path)` returns an immutable `MatchSet`.

The CSV mechanics (reading, column arity, integer parsing) live in
`common.utils.read_match_table`. This module only maps the validated,
named columns into `MatchRecord` values, in file order.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from common.utils import read_match_table
from common.constants import DATA_PATH
from models.match_model import MatchRecord, MatchSet, Outcome

logger = logging.getLogger(__name__)


def records_from_frame(df: pd.DataFrame) -> tuple:
    return tuple(
        MatchRecord(
            season=int(row.season),
            week=int(row.week),
            date=str(row.date),
            home_team=str(row.home_team),
            away_team=str(row.away_team),
            home_goals=int(row.home_goals),
            away_goals=int(row.away_goals),
            outcome=Outcome(row.outcome_code),
        )
        for row in df.itertuples(index=False)
    )


def load_matches(path: Union[str, Path] = DATA_PATH) -> MatchSet:
    # 1) Read and validate the table (raises SourceUnavailable / MalformedInput).
    header, df = read_match_table(path)

    # 2) Build records by field name, never by position.
    matches = MatchSet(records_from_frame(df), tuple(header))

    logger.info("Loaded %d matches from %s", len(matches), path)
    return matches
