"""
Memory game runner.

Drives a MemoryMatchEngine on an asyncio timeline:
- announces targets (word, then letters) and unlocks when speech ends
- schedules the deferred continuation of every two-card flip
- applies XP and medals to the student through the ledger
- reports presentation events through a callback

Every await is followed by a liveness check, so continuations that outlive
close() (or a replaced engine) never touch shared state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Awaitable, Callable, Literal, Optional

from quest import ledger
from quest.constants import (
    MATCH_FEEDBACK_DELAY,
    MATCH_SETTLE_DELAY,
    MISMATCH_DELAY,
    REJECT_SETTLE_DELAY,
    REJECT_SPEECH_TIMEOUT,
    REJECT_VISUAL_DELAY,
    SPELL_OUT_TIMEOUT,
)
from quest.memory import FlipOutcome, FlipStatus, MemoryMatchEngine
from quest.models import Student
from quest.speech import SilentSpeech, SpeechCollaborator, await_speech, spelled_letters

logger = logging.getLogger(__name__)


MemoryEventKind = Literal["target", "flip", "match", "rejected", "mismatch", "hide", "won"]


@dataclass(frozen=True)
class MemoryEvent:
    """Presentation event emitted by the runner."""
    kind: MemoryEventKind
    word: Optional[str] = None
    card_index: Optional[int] = None
    matches_found: int = 0
    total_pairs: int = 0
    xp_awarded: int = 0


@dataclass(frozen=True)
class MemoryDelays:
    """Pacing of deferred steps, in seconds."""
    match_feedback: float = MATCH_FEEDBACK_DELAY
    match_settle: float = MATCH_SETTLE_DELAY
    reject_visual: float = REJECT_VISUAL_DELAY
    reject_settle: float = REJECT_SETTLE_DELAY
    mismatch: float = MISMATCH_DELAY
    spell_out_timeout: float = SPELL_OUT_TIMEOUT
    reject_speech_timeout: float = REJECT_SPEECH_TIMEOUT


def rejection_message(found: str, target: str) -> str:
    return f"That is {found}. But we need {target}."


class MemoryGameRunner:
    """
    Async driver for one memory game.
    """

    def __init__(
        self,
        engine: MemoryMatchEngine,
        student: Student,
        speech: Optional[SpeechCollaborator] = None,
        voice_id: Optional[str] = None,
        delays: MemoryDelays = MemoryDelays(),
        on_event: Optional[Callable[[MemoryEvent], None]] = None,
        today: Optional[date] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.engine = engine
        self.student = student
        self.speech = speech or SilentSpeech()
        self.voice_id = voice_id
        self.delays = delays
        self.today = today
        self._on_event = on_event
        self._sleep = sleep
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Exit the game: silence speech and invalidate pending continuations."""
        self._closed = True
        self.speech.cancel_all()
        logger.info("Memory game %s closed", self.engine.session_id)

    def _alive(self) -> bool:
        return not self._closed

    def _emit(self, kind: MemoryEventKind, **fields) -> None:
        if self._on_event is None:
            return
        self._on_event(MemoryEvent(
            kind=kind,
            matches_found=self.engine.matches_found,
            total_pairs=self.engine.total_pairs,
            **fields,
        ))

    # ---- Announcements ----

    async def start(self) -> None:
        """Pick the first target and announce it."""
        target = self.engine.choose_target()
        logger.info(
            "Memory game %s started with %d pairs",
            self.engine.session_id, self.engine.total_pairs,
        )
        await self._announce(target)

    async def _announce(self, target: Optional[str]) -> None:
        if target is None or not self._alive():
            return
        self._emit("target", word=target)
        self.speech.cancel_all()
        self.speech.speak(target, self.voice_id)
        await await_speech(
            self.speech.spell_out(spelled_letters(target), self.voice_id),
            self.delays.spell_out_timeout,
        )
        if self._alive():
            self.engine.target_announced()

    # ---- Flips ----

    async def flip(self, index: int) -> FlipOutcome:
        """
        Flip a card and, for the second card of a pair, run the resolution
        to completion before returning.
        """
        if not self._alive():
            return FlipOutcome(status=FlipStatus.IGNORED)

        outcome = self.engine.flip(index)
        if outcome.status == FlipStatus.IGNORED:
            return outcome

        self._emit("flip", word=outcome.word, card_index=index)
        self.speech.speak(outcome.word, self.voice_id)

        if outcome.status == FlipStatus.MATCH:
            await self._resolve_match()
        elif outcome.status == FlipStatus.REJECTED:
            await self._resolve_rejected(outcome.word)
        elif outcome.status == FlipStatus.MISMATCH:
            await self._resolve_mismatch()
        return outcome

    async def _resolve_match(self) -> None:
        engine = self.engine
        await self._sleep(self.delays.match_feedback)
        if not self._alive():
            return
        update = ledger.record_memory_match(self.student)
        self._emit("match", word=engine.current_target, xp_awarded=update.xp_awarded)

        await self._sleep(self.delays.match_settle)
        if not self._alive():
            return
        settlement = engine.finish_pair()
        if settlement is None:
            return
        if settlement.won:
            update = ledger.record_memory_win(self.student, self.today)
            logger.info("Memory game %s won", engine.session_id)
            self._emit("won", xp_awarded=update.xp_awarded)
            return
        await self._announce(settlement.next_target)

    async def _resolve_rejected(self, found: str) -> None:
        engine = self.engine
        await self._sleep(self.delays.reject_visual)
        if not self._alive():
            return
        self._emit("rejected", word=found)
        self.speech.cancel_all()
        await await_speech(
            self.speech.say(rejection_message(found, engine.current_target), self.voice_id),
            self.delays.reject_speech_timeout,
        )
        await self._sleep(self.delays.reject_settle)
        if not self._alive():
            return
        await self._settle_and_reannounce()

    async def _resolve_mismatch(self) -> None:
        self._emit("mismatch")
        await self._sleep(self.delays.mismatch)
        if not self._alive():
            return
        await self._settle_and_reannounce()

    async def _settle_and_reannounce(self) -> None:
        settlement = self.engine.finish_pair()
        if settlement is None:
            return
        for card_index in settlement.hidden_cards:
            self._emit("hide", card_index=card_index)
        await self._announce(settlement.next_target)
