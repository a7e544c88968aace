"""
Tests for analytics metrics and the dashboard service.
"""

import math

from quest.analytics import (
    build_student_dashboard,
    history_frame,
    leaderboard_frame,
)
from quest.models import AppData, Student, WordHistory


def _student_with_history():
    return Student(
        xp=150,
        goal_history=["2024-01-01"],
        history={
            "cat": WordHistory(missed=0, times=[2.0, 4.0], dates=["2024-01-01", "2024-01-02"]),
            "dog": WordHistory(missed=12, times=[], dates=["2024-01-02"]),
        },
    )


class TestHistoryFrame:

    def test_one_row_per_word(self):
        df = history_frame(_student_with_history()).set_index("word")
        assert df.loc["cat", "avg_seconds"] == 3.0
        assert df.loc["cat", "correct"] == 2
        assert df.loc["cat", "accuracy"] == 100
        assert df.loc["dog", "accuracy"] == 0
        assert math.isnan(df.loc["dog", "avg_seconds"])
        assert df.loc["dog", "last_practiced"] == "2024-01-02"

    def test_empty_history(self):
        df = history_frame(Student())
        assert df.empty
        assert list(df.columns) == ["word", "missed", "correct", "avg_seconds", "accuracy", "last_practiced"]


class TestDashboard:

    def test_dashboard_values(self):
        dashboard = build_student_dashboard("Mia", _student_with_history())
        assert dashboard.level == 2
        assert dashboard.words_practiced == 2
        assert dashboard.goal_streak == 1
        assert list(dashboard.speed_seconds.index) == ["cat"]
        assert dashboard.accuracy_percent.to_dict() == {"cat": 100, "dog": 0}


class TestLeaderboard:

    def test_ranked_by_xp(self):
        data = AppData(students={
            "Leo": Student(xp=10),
            "Mia": Student(xp=90, emoji="🦊"),
            "Ada": Student(xp=10),
        })
        board = leaderboard_frame(data)
        assert board["name"].tolist() == ["Mia", "Leo", "Ada"]
        assert board["rank"].tolist() == [1, 2, 3]
        assert board.loc[0, "emoji"] == "🦊"

    def test_empty(self):
        assert leaderboard_frame(AppData()).empty
