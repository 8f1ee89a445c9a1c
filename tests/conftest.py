"""Shared fixtures: small results files written to tmp_path."""

import pytest

from controllers.data_controller import load_matches

HEADER = "Season_End_Year,Wk,Date,Home,HomeGoals,AwayGoals,Away,FTR"

# Columns: season, week, date, home, home goals, away goals, away, code
LEAGUE_ROWS = [
    "2000,1,2000-08-19,A,4,0,B,H",
    "2000,1,2000-08-19,C,1,1,D,D",
    "2000,2,2000-08-26,B,2,1,C,H",
    "2000,2,2000-08-26,D,0,2,A,A",
    "2001,1,2001-08-18,A,1,2,C,A",
    "2001,1,2001-08-18,B,3,3,D,D",
    "2001,2,2001-08-25,C,5,0,A,H",
    "2001,2,2001-08-25,D,1,2,B,A",
    "2002,1,2002-08-17,A,2,0,E,H",
    "2002,1,2002-08-17,C,0,0,B,D",
]


def write_csv(path, rows, header=HEADER):
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def league_csv(tmp_path):
    return write_csv(tmp_path / "matches.csv", LEAGUE_ROWS)


@pytest.fixture
def league(league_csv):
    return load_matches(league_csv)


@pytest.fixture
def three_game_csv(tmp_path):
    rows = [
        "2000,1,2000-08-19,A,2,1,B,H",
        "2000,1,2000-08-19,B,0,3,C,A",
        "2000,2,2000-08-26,C,1,1,A,D",
    ]
    return write_csv(tmp_path / "three.csv", rows)


@pytest.fixture
def three_games(three_game_csv):
    return load_matches(three_game_csv)
