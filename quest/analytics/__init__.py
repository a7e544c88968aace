"""Analytics for student progress."""

from quest.analytics.metrics import (
    accuracy_series,
    history_frame,
    leaderboard_frame,
    speed_series,
)
from quest.analytics.service import build_student_dashboard
from quest.analytics.types import StudentDashboardData

__all__ = [
    "accuracy_series",
    "history_frame",
    "leaderboard_frame",
    "speed_series",
    "build_student_dashboard",
    "StudentDashboardData",
]
