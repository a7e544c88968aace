"""
Progress Ledger

Applies session outcomes to the durable Student record:
XP, medals, weekly goal progress, goal milestones and per-word history.

Dates are ISO strings (YYYY-MM-DD). Callers pass `today` explicitly in
tests; it defaults to the local date.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from quest.constants import (
    XP_CORRECT,
    XP_FIRST_TRY,
    XP_MEMORY_MATCH,
    XP_MEMORY_WIN,
    XP_PER_LEVEL,
    MedalTier,
)
from quest.models import Medals, Student, WordHistory
from quest.spelling import GuessResult, GuessStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerUpdate:
    """What a single ledger call changed (for presentation)."""
    xp_awarded: int = 0
    goal_reached: bool = False


def _today_str(today: Optional[date]) -> str:
    return (today or date.today()).isoformat()


def _history_for(student: Student, word: str) -> WordHistory:
    return student.history.setdefault(word, WordHistory())


def bump_weekly_progress(student: Student, today: Optional[date] = None) -> bool:
    """
    Add one unit of weekly progress.

    Returns:
        True if this call made progress newly reach the weekly goal
    """
    student.weekly_progress += 1
    if student.weekly_progress != student.weekly_goal:
        return False

    day = _today_str(today)
    if day not in student.goal_history:
        student.goal_history.append(day)
        logger.info("Weekly goal of %d reached on %s", student.weekly_goal, day)
    return True


# ---- Spelling ----

def record_spelling_correct(
    student: Student,
    result: GuessResult,
    today: Optional[date] = None
) -> LedgerUpdate:
    """
    Apply a CORRECT spelling result: XP, weekly progress, word history.
    """
    if result.status != GuessStatus.CORRECT:
        raise ValueError(f"Expected a CORRECT result, got {result.status.value}")

    xp = XP_FIRST_TRY if result.first_try else XP_CORRECT
    student.xp += xp
    goal_reached = bump_weekly_progress(student, today)

    history = _history_for(student, result.word)
    history.times.append(round(result.elapsed, 3))
    history.dates.append(_today_str(today))
    return LedgerUpdate(xp_awarded=xp, goal_reached=goal_reached)


def record_spelling_miss(
    student: Student,
    word: str,
    revealed: bool = False,
    today: Optional[date] = None
) -> None:
    """
    Count one wrong guess against a word. A reveal also logs the attempt date.
    """
    history = _history_for(student, word)
    history.missed += 1
    if revealed:
        history.dates.append(_today_str(today))


def finish_spelling_session(student: Student, session_medals: Medals) -> None:
    """Bank the medals earned during a completed spelling session."""
    student.medals.merge(session_medals)


# ---- Memory ----

def record_memory_match(student: Student) -> LedgerUpdate:
    student.xp += XP_MEMORY_MATCH
    return LedgerUpdate(xp_awarded=XP_MEMORY_MATCH)


def record_memory_win(student: Student, today: Optional[date] = None) -> LedgerUpdate:
    """
    Memory game won: +1 gold medal, win XP and one unit of weekly progress.
    """
    student.medals.add(MedalTier.GOLD)
    student.xp += XP_MEMORY_WIN
    goal_reached = bump_weekly_progress(student, today)
    return LedgerUpdate(xp_awarded=XP_MEMORY_WIN, goal_reached=goal_reached)


# ---- Resets ----

def reset_weekly_progress(student: Student) -> None:
    """Explicit week rollover; the only way weekly progress decreases."""
    student.weekly_progress = 0


def reset_medals(student: Student) -> None:
    student.medals = Medals()


def reset_progress(student: Student) -> None:
    """Wipe XP, history, milestones, streak and weekly progress."""
    student.xp = 0
    student.history = {}
    student.goal_history = []
    student.streak = 0
    student.weekly_progress = 0


# ---- Derived values ----

def level_for_xp(xp: int) -> int:
    return math.floor(math.sqrt(max(xp, 0) / XP_PER_LEVEL)) + 1


def level_progress_percent(xp: int) -> int:
    return max(xp, 0) % XP_PER_LEVEL


def goal_percent(student: Student) -> float:
    goal = student.weekly_goal if student.weekly_goal > 0 else 1
    return min(student.weekly_progress / goal * 100, 100.0)


def goal_streak(student: Student) -> int:
    """Number of weeks the goal was met."""
    return len(student.goal_history)
