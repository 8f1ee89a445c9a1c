"""Custom exceptions for the match statistics application."""


class MatchStatsError(Exception):
    """Base exception for match statistics errors."""
    pass


class SourceUnavailable(MatchStatsError):
    """Raised when the input file cannot be opened."""
    pass


class MalformedInput(MatchStatsError):
    """Raised for a bad column count or a value that cannot be parsed."""
    pass


class UnknownTeam(MatchStatsError):
    """Raised when a team name does not appear in the loaded matches."""
    pass


class InvalidSeasonRange(MatchStatsError):
    """Raised for non-numeric, inverted or out-of-range season bounds."""
    pass


class NoMatchingGames(MatchStatsError):
    """Raised when a statistic is requested over zero qualifying games."""
    pass


class InvalidRank(MatchStatsError):
    """Raised when a leaderboard is asked for n <= 0 or more teams than exist."""
    pass
