"""Tests for the league report, the charts and the interactive team query."""

import pytest

from common.exceptions import InvalidSeasonRange, NoMatchingGames, UnknownTeam
from controllers.data_controller import load_matches
from controllers.report_controller import (
    build_report, format_report, render_charts, run_team_query, format_team_query,
)
from conftest import write_csv


def reader(*answers):
    """Fake line reader returning the answers in order and recording prompts."""
    it = iter(answers)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return next(it)

    read_line.prompts = prompts
    return read_line


# ---------- league report ----------

def test_build_report_figures(league):
    report = build_report(league, top_n=3)
    assert report.seasons == [2000, 2001, 2002]
    assert report.teams == ["A", "B", "C", "D", "E"]
    assert [t for t, _ in report.top_win_rates] == ["A", "B", "C"]
    assert report.top_appearances == [("A", 3), ("B", 3), ("C", 3)]
    assert report.avg_home == pytest.approx(125 / 3)
    assert report.avg_away == pytest.approx(25.0)
    assert report.avg_diff == pytest.approx(125 / 3 - 25.0)
    assert report.avg_goals == pytest.approx((2.75 + 4.25 + 1.0) / 3)


def test_build_report_worst_home_season(league):
    report = build_report(league, top_n=3)
    worst = report.worst_home
    assert worst.season == 2001
    assert worst.value == pytest.approx(25.0)
    assert worst.runner_up == 2000
    assert worst.gap == pytest.approx(25.0)
    assert report.worst_home_draw == pytest.approx(25.0)
    assert report.worst_home_away == pytest.approx(50.0)
    assert report.worst_home_diff == pytest.approx(-25.0)


def test_build_report_best_goal_season(league):
    best = build_report(league, top_n=3).best_goals
    assert best.season == 2001
    assert best.value == pytest.approx(4.25)


def test_build_report_shortens_leaderboards(league):
    report = build_report(league, top_n=10)
    assert len(report.top_win_rates) == 5
    assert len(report.top_appearances) == 5


def test_build_report_over_season_subset(league):
    # E only played in 2002, so four teams have a win rate over 2000-2001
    report = build_report(league, seasons=[2000, 2001], top_n=10)
    assert [t for t, _ in report.top_win_rates] == ["A", "B", "C", "D"]
    assert len(report.top_appearances) == 5
    assert report.top_appearances[-1] == ("E", 0)


def test_build_report_on_empty_set_raises(tmp_path):
    matches = load_matches(write_csv(tmp_path / "m.csv", []))
    with pytest.raises(NoMatchingGames):
        build_report(matches)


def test_format_report_mentions_leaders(league):
    text = format_report(build_report(league, top_n=2))
    assert "Over 3 seasons, a total of 5 teams" in text
    assert "1: A with a win percentage of 60.0000" in text
    assert "2: B with 3 total seasons" in text
    assert "lowest home-win rate was 2001" in text
    assert "most average goals per game was 2001 with 4.2500" in text


def test_render_charts_writes_two_pngs(league, tmp_path):
    rates, goals = render_charts(build_report(league, top_n=3), tmp_path / "charts")
    assert rates.name == "all_time_rates.png"
    assert goals.name == "goal_averages.png"
    for p in (rates, goals):
        assert p.exists()
        assert p.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


# ---------- interactive query ----------

def test_team_query_success(league):
    read_line = reader("C", "2000", "2001")
    result = run_team_query(league, read_line)
    assert result.team == "C"
    assert result.seasons == [2000, 2001]
    assert result.played_seasons == [2000, 2001]
    assert result.season_count == 2
    assert result.win_rate == pytest.approx(50.0)
    assert (result.biggest_win.home_goals, result.biggest_win.away_goals) == (5, 0)
    assert len(read_line.prompts) == 3
    assert "2000 to 2002" in read_line.prompts[1]


def test_team_query_trims_seasons(league):
    result = run_team_query(league, reader("A", " 2000", "2002 "))
    assert result.team == "A"
    assert result.win_rate == pytest.approx(60.0)


def test_team_query_matches_team_exactly(league):
    with pytest.raises(UnknownTeam):
        run_team_query(league, reader(" A", "2000", "2000"))


def test_team_query_accepts_season_missing_from_data(tmp_path):
    matches = load_matches(write_csv(tmp_path / "m.csv", [
        "2000,1,d,A,1,0,B,H",
        "2002,1,d,B,0,2,A,A",
    ]))
    result = run_team_query(matches, reader("A", "2001", "2002"))
    assert result.seasons == [2001, 2002]
    assert result.played_seasons == [2002]
    assert result.win_rate == pytest.approx(100.0)


def test_team_query_without_wins_still_reports(league):
    result = run_team_query(league, reader("D", "2000", "2002"))
    assert result.biggest_win is None
    assert result.win_rate == 0.0
    assert result.played_seasons == [2000, 2001]
    assert "did not win a game" in format_team_query(result)


def test_team_query_unknown_team_aborts_before_seasons(league):
    read_line = reader("a", "2000", "2001")
    with pytest.raises(UnknownTeam, match="full list of teams"):
        run_team_query(league, read_line)
    assert len(read_line.prompts) == 1


def test_team_query_non_numeric_season(league):
    read_line = reader("A", "two thousand", "2001")
    with pytest.raises(InvalidSeasonRange, match="digits"):
        run_team_query(league, read_line)
    assert len(read_line.prompts) == 2


def test_team_query_inverted_range(league):
    with pytest.raises(InvalidSeasonRange, match="earlier"):
        run_team_query(league, reader("A", "2002", "2000"))


def test_team_query_out_of_range_season(league):
    with pytest.raises(InvalidSeasonRange, match="valid range of 2000 to 2002"):
        run_team_query(league, reader("A", "1999", "2001"))


def test_team_query_team_absent_from_range(league):
    with pytest.raises(NoMatchingGames, match=r"\[2000, 2001\]"):
        run_team_query(league, reader("D", "2002", "2002"))


def test_format_team_query(league):
    text = format_team_query(run_team_query(league, reader("A", "2000", "2000")))
    assert "A played in 1 seasons over that interval: [2000]" in text
    assert "A beat B 4-0 in a home win." in text
    assert "week 1 of the 2000 season" in text
    assert "win rate for the 2000 to 2000 seasons is 100.0000%" in text
