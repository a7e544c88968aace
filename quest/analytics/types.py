"""
Types for analytics dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class StudentDashboardData:
    """
    Precomputed metrics and series for one student's dashboard.
    """
    name: str
    level: int
    xp: int
    words_practiced: int
    goal_streak: int
    goal_log: list[str]
    speed_seconds: pd.Series
    accuracy_percent: pd.Series
    word_table: pd.DataFrame
