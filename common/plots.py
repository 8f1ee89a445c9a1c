# common/plots.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")  # charts are only written to files
import matplotlib.pyplot as plt

DEFAULT_FIGSIZE = (6.4, 4.8)  # 640x480 at 100 dpi
DEFAULT_DPI     = 100

RATE_SERIES = [
    ("home_pct", "Home win rate", "black"),
    ("away_pct", "Away win rate", "red"),
    ("draw_pct", "Draw rate", "blue"),
]

def _new_ax(ax=None):
    """Return a new figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax

def _season_span_label(trends: pd.DataFrame) -> str:
    if trends.empty:
        return ""
    return f"{int(trends['season'].min())}-{int(trends['season'].max())}"

def _style(ax: plt.Axes, title: str, ylabel: str) -> None:
    ax.set_title(title, fontsize=12)
    ax.set_xlabel("Season", fontsize=9)
    ax.set_ylabel(ylabel, fontsize=9)
    ax.tick_params(axis="both", labelsize=8)
    ax.grid(True, linewidth=0.5, alpha=0.5)
    ax.legend(loc="lower right", frameon=True, edgecolor="black", fontsize=8)


# --- Home / away / draw rates per season (three lines) ---
def plot_result_rates(trends: pd.DataFrame,
                      ax: Optional[plt.Axes] = None,
                      title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    x = trends["season"].to_numpy(dtype=float)

    for col, label, color in RATE_SERIES:
        ax.plot(x, trends[col].to_numpy(dtype=float), color=color, linewidth=1.5, label=label)

    _style(ax, title or f"Home, Away, and Draw results - {_season_span_label(trends)}", "% of games")
    return ax


# --- Average goals per game per season (one line) ---
def plot_goal_averages(trends: pd.DataFrame,
                       ax: Optional[plt.Axes] = None,
                       title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    x = trends["season"].to_numpy(dtype=float)
    y = trends["goal_avg"].to_numpy(dtype=float)

    ax.plot(x, y, color="black", linewidth=1.5, label="Average goals per game")
    if len(y):
        pad = max(0.1, 0.1 * float(np.ptp(y)))
        ax.set_ylim(float(y.min()) - pad, float(y.max()) + pad)

    _style(ax, title or f"Average goals per game - {_season_span_label(trends)}", "Goals per game")
    return ax


def save_chart(ax: plt.Axes, path: Union[str, Path], dpi: int = DEFAULT_DPI) -> Path:
    """Write the axes' figure to `path` and close it."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = ax.figure
    try:
        fig.savefig(out, dpi=dpi)
    finally:
        plt.close(fig)
    return out
