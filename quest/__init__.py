"""
LevelUp Quest - spelling and memory practice core

Main API for the practice engines and the progress ledger.

Quick start:
    import random
    from quest import build_word_entries, SpellingSession, ledger

    entries = build_word_entries(student, "Week 1", rng=random.Random(7))
    session = SpellingSession(entries)

    result = session.evaluate_guess("cat")
    if result.status == GuessStatus.CORRECT:
        ledger.record_spelling_correct(student, result)
        session.advance()
"""

from quest import ledger
from quest.constants import ALL_LISTS, MedalTier
from quest.memory import (
    BoardPhase,
    CardState,
    FlipOutcome,
    FlipStatus,
    MemoryMatchEngine,
)
from quest.memory_runner import MemoryEvent, MemoryGameRunner
from quest.models import (
    AppData,
    ListConfig,
    Medals,
    NoWordsError,
    Student,
    WordEntry,
    WordHistory,
)
from quest.spelling import (
    GuessResult,
    GuessStatus,
    SessionState,
    SpellingSession,
    medal_for_elapsed,
)
from quest.word_lists import build_word_entries, memory_words


__all__ = [
    "ledger",

    # Word lists
    "ALL_LISTS",
    "build_word_entries",
    "memory_words",

    # Spelling engine
    "SpellingSession",
    "SessionState",
    "GuessResult",
    "GuessStatus",
    "MedalTier",
    "medal_for_elapsed",

    # Memory engine
    "MemoryMatchEngine",
    "MemoryGameRunner",
    "MemoryEvent",
    "BoardPhase",
    "CardState",
    "FlipOutcome",
    "FlipStatus",

    # Records
    "AppData",
    "ListConfig",
    "Medals",
    "NoWordsError",
    "Student",
    "WordEntry",
    "WordHistory",
]
