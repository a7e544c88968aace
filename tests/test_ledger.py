"""
Tests for the Progress Ledger

Tests cover:
- XP for spelling and memory outcomes
- Weekly goal milestones (one entry per date)
- Word history
- Levels and resets
"""

from datetime import date

import pytest

from quest import ledger
from quest.constants import MedalTier
from quest.models import Medals, Student
from quest.spelling import GuessResult, GuessStatus

JAN_1 = date(2024, 1, 1)


def _correct(word="cat", elapsed=3.2, first_try=True):
    return GuessResult(
        status=GuessStatus.CORRECT,
        word=word,
        elapsed=elapsed,
        medal=MedalTier.GOLD,
        first_try=first_try,
    )


class TestSpellingRewards:

    def test_first_try_gives_30_xp(self):
        student = Student()
        update = ledger.record_spelling_correct(student, _correct(), today=JAN_1)
        assert update.xp_awarded == 30
        assert student.xp == 30
        assert student.weekly_progress == 1

    def test_later_try_gives_20_xp(self):
        student = Student()
        ledger.record_spelling_correct(student, _correct(first_try=False), today=JAN_1)
        assert student.xp == 20

    def test_history_records_time_and_date(self):
        student = Student()
        ledger.record_spelling_correct(student, _correct(elapsed=3.14159), today=JAN_1)
        history = student.history["cat"]
        assert history.times == [3.142]
        assert history.dates == ["2024-01-01"]
        assert history.missed == 0

    def test_non_correct_result_is_rejected(self):
        with pytest.raises(ValueError):
            ledger.record_spelling_correct(Student(), GuessResult(status=GuessStatus.REVEAL, word="cat"))

    def test_misses_and_reveal(self):
        student = Student()
        for _ in range(4):
            ledger.record_spelling_miss(student, "dog", today=JAN_1)
        ledger.record_spelling_miss(student, "dog", revealed=True, today=JAN_1)
        assert student.history["dog"].missed == 5
        assert student.history["dog"].dates == ["2024-01-01"]
        assert student.xp == 0

    def test_session_medals_are_banked(self):
        student = Student(medals=Medals(gold=1))
        ledger.finish_spelling_session(student, Medals(gold=2, silver=1))
        assert student.medals == Medals(gold=3, silver=1, bronze=0)


class TestWeeklyGoal:

    def test_reaching_goal_logs_date_once(self):
        """Progress hitting the goal twice on one date adds a single milestone."""
        student = Student(weekly_goal=10, weekly_progress=9)

        update = ledger.record_spelling_correct(student, _correct(), today=JAN_1)

        assert update.goal_reached is True
        assert student.weekly_progress == 10
        assert student.goal_history == ["2024-01-01"]

        ledger.reset_weekly_progress(student)
        student.weekly_progress = 9
        ledger.record_spelling_correct(student, _correct(word="dog"), today=JAN_1)
        assert student.goal_history == ["2024-01-01"]

    def test_passing_goal_does_not_log_again(self):
        student = Student(weekly_goal=2, weekly_progress=2, goal_history=["2024-01-01"])
        assert ledger.bump_weekly_progress(student, today=date(2024, 1, 2)) is False
        assert student.goal_history == ["2024-01-01"]

    def test_goal_percent_is_capped(self):
        assert ledger.goal_percent(Student(weekly_goal=4, weekly_progress=2)) == 50.0
        assert ledger.goal_percent(Student(weekly_goal=4, weekly_progress=9)) == 100.0


class TestMemoryRewards:

    def test_match_and_win(self):
        student = Student(weekly_goal=1)
        ledger.record_memory_match(student)
        update = ledger.record_memory_win(student, today=JAN_1)

        assert student.xp == 55
        assert student.medals.gold == 1
        assert update.goal_reached is True
        assert ledger.goal_streak(student) == 1


class TestLevels:

    @pytest.mark.parametrize("xp,level", [(0, 1), (99, 1), (100, 2), (399, 2), (400, 3), (900, 4)])
    def test_level_for_xp(self, xp, level):
        assert ledger.level_for_xp(xp) == level

    def test_level_progress_percent(self):
        assert ledger.level_progress_percent(250) == 50


class TestResets:

    def test_reset_progress_keeps_lists_and_medals(self, student):
        student.xp = 120
        student.medals = Medals(gold=2)
        student.goal_history = ["2024-01-01"]
        ledger.record_spelling_miss(student, "cat")

        ledger.reset_progress(student)

        assert student.xp == 0
        assert student.history == {}
        assert student.goal_history == []
        assert student.medals.gold == 2
        assert "Week 1" in student.lists

    def test_reset_medals(self, student):
        student.medals = Medals(gold=1, silver=2, bronze=3)
        ledger.reset_medals(student)
        assert student.medals.total == 0
