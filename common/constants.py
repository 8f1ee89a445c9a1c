import os

# ----- Config (env or defaults) -----
DATA_PATH   = os.getenv("PLSTATS_DATA_PATH", "pl_matches.csv")
OUTPUT_DIR  = os.getenv("PLSTATS_OUTPUT_DIR", ".")
TOP_N       = int(os.getenv("PLSTATS_TOP_N", "10"))
LOG_LEVEL   = os.getenv("PLSTATS_LOG_LEVEL", "WARNING")

# Source columns in file order (goals come before the away team)
COLUMNS = [
    "season", "week", "date", "home_team",
    "home_goals", "away_goals", "away_team", "outcome_code",
]
NUMERIC_COLUMNS = ["season", "week", "home_goals", "away_goals"]
TEXT_COLUMNS    = ["date"]  # team names are kept exactly as written

HOME_WIN_CODE = "H"
AWAY_WIN_CODE = "A"
DRAW_CODE     = "D"
OUTCOME_CODES = [HOME_WIN_CODE, AWAY_WIN_CODE, DRAW_CODE]

RATES_CHART = "all_time_rates.png"
GOALS_CHART = "goal_averages.png"
