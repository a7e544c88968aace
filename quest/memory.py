"""
Memory Match Engine

Paired-card matching with a forced target:
1. A target word is announced (board locked until the announcement ends)
2. The learner flips two cards
3. Only a pair of the announced word is credited; any other pair is rejected

The engine is synchronous. Every multi-step resolution is split into an
immediate evaluation (flip) and a deferred continuation (finish_pair); the
board stays locked in between, which is the only mutual exclusion needed.
Pacing and speech are driven by quest.memory_runner or the UI controller.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from quest.constants import MEMORY_MAX_PAIRS
from quest.models import NoWordsError


class CardState(str, Enum):
    FACE_DOWN = "face_down"
    FLIPPED = "flipped"
    MATCHED = "matched"


class BoardPhase(str, Enum):
    ANNOUNCING = "announcing"  # target being spoken, locked
    READY = "ready"            # accepting flips
    RESOLVING = "resolving"    # pair evaluated, continuation pending, locked
    WON = "won"                # terminal


class FlipStatus(str, Enum):
    IGNORED = "ignored"
    FIRST = "first"
    MATCH = "match"
    REJECTED = "rejected"      # a real pair, but not the current target
    MISMATCH = "mismatch"


@dataclass
class MemoryCard:
    index: int
    word: str
    state: CardState = CardState.FACE_DOWN


@dataclass(frozen=True)
class FlipOutcome:
    """
    Result of one flip() call.
    """
    status: FlipStatus
    word: Optional[str] = None
    target: Optional[str] = None
    matches_found: int = 0
    won: bool = False


@dataclass(frozen=True)
class PairSettlement:
    """
    Result of finish_pair(): what the board needs next.

    next_target is the word to announce (a fresh one after a credited match,
    the same one after a rejection or mismatch); None once the game is won.
    """
    won: bool
    next_target: Optional[str]
    hidden_cards: tuple[int, ...] = ()


def build_deck(
    words: Sequence[str],
    rng: random.Random,
    max_pairs: int = MEMORY_MAX_PAIRS
) -> tuple[list[str], list[str]]:
    """
    Pick up to max_pairs unique words and build the doubled, shuffled deck.

    Returns:
        (selected unique words, shuffled deck of words)
    """
    unique = list(dict.fromkeys(words))
    if len(unique) > max_pairs:
        unique = rng.sample(unique, max_pairs)
    deck = unique + unique
    rng.shuffle(deck)
    return unique, deck


class MemoryMatchEngine:
    """
    Board state for one memory game.
    """

    def __init__(
        self,
        words: Sequence[str],
        rng: Optional[random.Random] = None,
        max_pairs: int = MEMORY_MAX_PAIRS
    ):
        self._rng = rng or random.Random()
        selected, deck = build_deck(words, self._rng, max_pairs)
        if not selected:
            raise NoWordsError("Cannot start a memory game without words")

        self.session_id = str(uuid.uuid4())
        self.words: tuple[str, ...] = tuple(selected)
        self.cards: list[MemoryCard] = [
            MemoryCard(index=i, word=word) for i, word in enumerate(deck)
        ]
        self.remaining_targets: list[str] = list(selected)
        self.total_pairs = len(selected)
        self.matches_found = 0
        self.current_target: Optional[str] = None
        self.phase = BoardPhase.ANNOUNCING
        self.first: Optional[MemoryCard] = None
        self.second: Optional[MemoryCard] = None
        self._last_status: Optional[FlipStatus] = None

    # ---- State ----

    @property
    def locked(self) -> bool:
        return self.phase != BoardPhase.READY

    @property
    def is_won(self) -> bool:
        return self.phase == BoardPhase.WON

    # ---- Targets ----

    def choose_target(self) -> Optional[str]:
        """
        Pick a new target uniformly from the remaining words and lock the
        board for its announcement.
        """
        if not self.remaining_targets:
            return None
        self.current_target = self._rng.choice(self.remaining_targets)
        self.phase = BoardPhase.ANNOUNCING
        return self.current_target

    def target_announced(self) -> None:
        """Announcement finished (or timed out): accept flips again."""
        if self.phase == BoardPhase.ANNOUNCING:
            self.phase = BoardPhase.READY

    # ---- Flip protocol ----

    def flip(self, index: int) -> FlipOutcome:
        """
        Flip the card at index. Invalid flips are no-ops.
        """
        if self.locked or not 0 <= index < len(self.cards):
            return FlipOutcome(status=FlipStatus.IGNORED)

        card = self.cards[index]
        if card.state == CardState.MATCHED or card is self.first:
            return FlipOutcome(status=FlipStatus.IGNORED)

        card.state = CardState.FLIPPED
        if self.first is None:
            self.first = card
            return FlipOutcome(status=FlipStatus.FIRST, word=card.word, target=self.current_target)

        self.second = card
        self.phase = BoardPhase.RESOLVING
        status = self._evaluate_pair()
        self._last_status = status
        return FlipOutcome(
            status=status,
            word=card.word,
            target=self.current_target,
            matches_found=self.matches_found,
            won=status == FlipStatus.MATCH and self.matches_found == self.total_pairs,
        )

    def _evaluate_pair(self) -> FlipStatus:
        is_match = self.first.word == self.second.word
        is_target = self.first.word == self.current_target

        if is_match and is_target:
            self.first.state = CardState.MATCHED
            self.second.state = CardState.MATCHED
            self.remaining_targets.remove(self.current_target)
            self.matches_found += 1
            return FlipStatus.MATCH
        if is_match:
            return FlipStatus.REJECTED
        return FlipStatus.MISMATCH

    def finish_pair(self) -> Optional[PairSettlement]:
        """
        Deferred continuation of a two-card flip.

        Returns:
            PairSettlement, or None if no pair is pending
        """
        if self.phase != BoardPhase.RESOLVING:
            return None

        status = self._last_status
        hidden: list[int] = []
        if status != FlipStatus.MATCH:
            for card in (self.first, self.second):
                if card is not None and card.state == CardState.FLIPPED:
                    card.state = CardState.FACE_DOWN
                    hidden.append(card.index)

        self.first = None
        self.second = None
        self._last_status = None

        if status == FlipStatus.MATCH:
            if self.matches_found >= self.total_pairs:
                self.phase = BoardPhase.WON
                self.current_target = None
                return PairSettlement(won=True, next_target=None)
            return PairSettlement(won=False, next_target=self.choose_target())

        self.phase = BoardPhase.ANNOUNCING
        return PairSettlement(
            won=False,
            next_target=self.current_target,
            hidden_cards=tuple(hidden),
        )
