"""
Spelling Session Engine

State machine for a single spelling round.

Key rules:
- A guess is trimmed, lowercased and compared exactly to the current word
- Correct answers earn a medal tier by response speed (<5s gold, <10s silver)
- Each word allows MAX_ATTEMPTS guesses; the last wrong one reveals the word
- The engine never advances on its own; the caller calls advance()

The engine only produces GuessResult values. XP, history and medals on the
student record are applied by quest.ledger.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from quest.constants import (
    GOLD_MAX_SECONDS,
    HELP_AFTER_WRONG,
    MAX_ATTEMPTS,
    SILVER_MAX_SECONDS,
    MedalTier,
)
from quest.models import Medals, NoWordsError, WordEntry


class SessionState(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETE = "complete"


class GuessStatus(str, Enum):
    CORRECT = "CORRECT"
    INCORRECT = "INCORRECT"
    REVEAL = "REVEAL"
    PAUSED = "PAUSED"
    IGNORED = "IGNORED"  # no word awaiting a guess (resolved or session complete)


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome event of one evaluate_guess() call.

    Only the fields relevant to the status are populated.
    """
    status: GuessStatus
    word: Optional[str] = None
    elapsed: Optional[float] = None
    medal: Optional[MedalTier] = None
    first_try: bool = False
    is_session_complete: bool = False
    attempts_left: Optional[int] = None
    show_help: bool = False


def medal_for_elapsed(seconds: float) -> MedalTier:
    """
    Classify response time into a medal tier.
    """
    if seconds < GOLD_MAX_SECONDS:
        return MedalTier.GOLD
    if seconds < SILVER_MAX_SECONDS:
        return MedalTier.SILVER
    return MedalTier.BRONZE


def normalize_guess(text: str) -> str:
    return text.strip().lower()


class SpellingSession:
    """
    One practice round over an ordered WordEntry sequence.

    With strict=True (default) the engine enforces two terminal rules:
    a word that was answered or revealed ignores further guesses until
    advance(), and once the last word is resolved the session is COMPLETE
    and every later guess is IGNORED. strict=False keeps the permissive
    behaviour where completion is only a flag for the caller to observe.
    """

    def __init__(
        self,
        entries: Sequence[WordEntry],
        clock: Callable[[], float] = time.monotonic,
        strict: bool = True
    ):
        if not entries:
            raise NoWordsError("Cannot start a spelling session without words")
        self.entries: tuple[WordEntry, ...] = tuple(entries)
        self.index = 0
        self.wrong_count = 0
        self.session_medals = Medals()
        self.strict = strict
        self._clock = clock
        self._word_start = clock()
        self._paused = False
        self._complete = False
        self._resolved = False

    # ---- State ----

    @property
    def state(self) -> SessionState:
        if self._paused:
            return SessionState.PAUSED
        if self._complete:
            return SessionState.COMPLETE
        return SessionState.ACTIVE

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def length(self) -> int:
        return len(self.entries)

    def current_entry(self) -> Optional[WordEntry]:
        if self.index < len(self.entries):
            return self.entries[self.index]
        return None

    def elapsed(self) -> float:
        return self._clock() - self._word_start

    # ---- Transitions ----

    def reset_timer(self) -> None:
        """Restart the clock for the current word (called when it is shown)."""
        self._word_start = self._clock()

    def toggle_pause(self) -> bool:
        """
        Flip between active and paused. Timers and counters are untouched.

        Returns:
            True if the session is now paused
        """
        self._paused = not self._paused
        return self._paused

    def evaluate_guess(self, text: str) -> GuessResult:
        """
        Evaluate one typed guess against the current word.
        """
        if self._paused:
            return GuessResult(status=GuessStatus.PAUSED)

        entry = self.current_entry()
        if entry is None or (self.strict and (self._complete or self._resolved)):
            return GuessResult(status=GuessStatus.IGNORED)

        target = entry.word
        is_last = self.index + 1 >= len(self.entries)

        if normalize_guess(text) == target:
            elapsed = self.elapsed()
            medal = medal_for_elapsed(elapsed)
            self.session_medals.add(medal)
            self._resolve(is_last)
            return GuessResult(
                status=GuessStatus.CORRECT,
                word=target,
                elapsed=elapsed,
                medal=medal,
                first_try=self.wrong_count == 0,
                is_session_complete=is_last,
            )

        self.wrong_count += 1
        attempts_left = MAX_ATTEMPTS - self.wrong_count
        if attempts_left <= 0:
            self._resolve(is_last)
            return GuessResult(
                status=GuessStatus.REVEAL,
                word=target,
                is_session_complete=is_last,
            )

        return GuessResult(
            status=GuessStatus.INCORRECT,
            attempts_left=attempts_left,
            show_help=self.wrong_count >= HELP_AFTER_WRONG,
        )

    def advance(self) -> Optional[WordEntry]:
        """
        Move to the next word.

        Returns:
            The new current entry, or None once the sequence is exhausted
        """
        self.index = min(self.index + 1, len(self.entries))
        self.wrong_count = 0
        self._resolved = False
        self.reset_timer()
        return self.current_entry()

    def _resolve(self, is_last: bool) -> None:
        self._resolved = True
        if is_last:
            self._complete = True
