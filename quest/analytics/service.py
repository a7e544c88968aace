"""
Service layer to assemble a student's analytics dashboard.
"""

from __future__ import annotations

from quest import ledger
from quest.analytics.metrics import accuracy_series, history_frame, speed_series
from quest.analytics.types import StudentDashboardData
from quest.models import Student


def build_student_dashboard(name: str, student: Student) -> StudentDashboardData:
    """
    Build all KPI values and series needed by the analytics page.
    """
    word_table = history_frame(student)
    return StudentDashboardData(
        name=name,
        level=ledger.level_for_xp(student.xp),
        xp=student.xp,
        words_practiced=len(word_table),
        goal_streak=ledger.goal_streak(student),
        goal_log=list(student.goal_history),
        speed_seconds=speed_series(word_table),
        accuracy_percent=accuracy_series(word_table),
        word_table=word_table,
    )
