"""
Common utility functions for reading the results file and lightweight
helpers used by multiple controllers.

This module contains the tabular reader (a small wrapper around
`pandas.read_csv` that validates the fixed 8-column layout), season
parsing helpers used by the interactive query, and the logging setup
shared by the CLI commands.

The reader returns a `pandas.DataFrame` with named, typed columns so the
rest of the app never depends on column positions.
"""

# Import libraries
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

from .constants import COLUMNS, NUMERIC_COLUMNS, TEXT_COLUMNS, OUTCOME_CODES
from .exceptions import SourceUnavailable, MalformedInput

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure console logging on stderr so stdout keeps only the report."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _line_numbers(mask: pd.Series) -> List[int]:
    # frame index 0 is the header, which is line 1 of the file
    return [int(i) + 1 for i in mask[mask].index]


def read_match_table(path: Union[str, Path]) -> Tuple[List[str], pd.DataFrame]:
    """
    Read the results file and return (header, frame).

    The header row is required and is returned as written. Data columns are
    renamed to `COLUMNS` by position; numeric columns come back as ints and
    the outcome code is validated against `H`/`A`/`D`.

    Raises:
        SourceUnavailable: the path cannot be opened.
        MalformedInput: wrong column count, bad number or unknown code.
    """
    p = Path(path)
    if not p.is_file():
        raise SourceUnavailable(f"Cannot open results file: {p}")

    # header=None keeps the header as row 0 so pandas never infers an index
    # column from a longer first row; longer rows raise ParserError.
    try:
        raw = pd.read_csv(p, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise MalformedInput(f"{p} is empty; a header row is required") from e
    except pd.errors.ParserError as e:
        raise MalformedInput(f"{p}: every row must have exactly {len(COLUMNS)} columns ({e})") from e
    except UnicodeDecodeError as e:
        raise MalformedInput(f"{p} is not valid UTF-8 text ({e})") from e
    except OSError as e:
        raise SourceUnavailable(f"Cannot open results file: {p} ({e})") from e

    if raw.shape[1] != len(COLUMNS):
        raise MalformedInput(
            f"{p}: expected {len(COLUMNS)} columns, found {raw.shape[1]}"
        )

    header = [str(h).strip() for h in raw.iloc[0].tolist()]
    df = raw.iloc[1:].copy()
    df.columns = COLUMNS

    # Short rows are padded with NaN by the parser
    short = df.isna().any(axis=1)
    if short.any():
        raise MalformedInput(
            f"{p}: rows with fewer than {len(COLUMNS)} columns on line(s) {_line_numbers(short)}"
        )

    for c in NUMERIC_COLUMNS:
        vals = df[c].str.strip()
        bad = ~vals.str.fullmatch(r"\d+")
        if bad.any():
            raise MalformedInput(
                f"{p}: column '{c}' must be a non-negative integer on line(s) {_line_numbers(bad)}"
            )
        df[c] = vals.astype(int)

    for c in TEXT_COLUMNS:
        df[c] = df[c].str.strip()

    df["outcome_code"] = df["outcome_code"].str.strip()
    bad = ~df["outcome_code"].isin(OUTCOME_CODES)
    if bad.any():
        raise MalformedInput(
            f"{p}: result code must be one of {OUTCOME_CODES} on line(s) {_line_numbers(bad)}"
        )

    logger.debug("Read %d data rows from %s", len(df), p)
    return header, df.reset_index(drop=True)


def parse_season(text: str) -> int:
    """Parse a user-typed season such as ' 2004 '; raises ValueError if not digits."""
    s = str(text).strip()
    if not (s.isascii() and s.isdigit()):
        raise ValueError(f"'{text}' is not a season in digits")
    return int(s)


def season_span(start: int, end: int) -> List[int]:
    """Inclusive list of seasons from `start` to `end`."""
    return list(range(start, end + 1))
