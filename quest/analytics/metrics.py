"""
Metric computations for analytics dashboards.
"""

from __future__ import annotations

import pandas as pd

from quest.models import AppData, Student

HISTORY_COLUMNS = ["word", "missed", "correct", "avg_seconds", "accuracy", "last_practiced"]
LEADERBOARD_COLUMNS = ["rank", "name", "emoji", "xp"]

ACCURACY_PENALTY_PER_MISS = 10


def history_frame(student: Student) -> pd.DataFrame:
    """
    One row per practiced word.

    accuracy = 100 - 10 * missed, floored at 0
    """
    rows = []
    for word, h in student.history.items():
        rows.append({
            "word": word,
            "missed": h.missed,
            "correct": len(h.times),
            "avg_seconds": sum(h.times) / len(h.times) if h.times else float("nan"),
            "accuracy": max(0, 100 - h.missed * ACCURACY_PENALTY_PER_MISS),
            "last_practiced": h.dates[-1] if h.dates else None,
        })
    if not rows:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def speed_series(history_df: pd.DataFrame) -> pd.Series:
    """Average answer time per word (words never answered are dropped)."""
    if history_df.empty:
        return pd.Series(dtype="float64")
    return history_df.set_index("word")["avg_seconds"].dropna().astype("float64")


def accuracy_series(history_df: pd.DataFrame) -> pd.Series:
    if history_df.empty:
        return pd.Series(dtype="int64")
    return history_df.set_index("word")["accuracy"].astype("int64")


def leaderboard_frame(data: AppData) -> pd.DataFrame:
    """
    Students ranked by XP (highest first), ranks starting at 1.
    """
    if not data.students:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)
    df = pd.DataFrame(
        [
            {"name": name, "emoji": s.emoji, "xp": s.xp}
            for name, s in data.students.items()
        ]
    )
    df = df.sort_values("xp", ascending=False, kind="stable").reset_index(drop=True)
    df.insert(0, "rank", range(1, len(df) + 1))
    return df[LEADERBOARD_COLUMNS]
