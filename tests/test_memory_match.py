"""
Tests for the Memory Match Engine

Tests cover:
- Deck construction
- Forced-target crediting
- Ignored flips (locked board, matched cards, same card twice)
- Pair settlement and winning
"""

import random

import pytest

from quest.memory import (
    BoardPhase,
    CardState,
    FlipStatus,
    MemoryMatchEngine,
    build_deck,
)
from quest.models import NoWordsError


def _positions(engine, word):
    return [c.index for c in engine.cards if c.word == word]


def _ready_engine(words, seed=7):
    engine = MemoryMatchEngine(words, rng=random.Random(seed))
    target = engine.choose_target()
    engine.target_announced()
    return engine, target


class TestDeck:

    def test_deck_is_doubled_unique_words(self):
        unique, deck = build_deck(["sun", "moon", "sun"], random.Random(1))
        assert sorted(unique) == ["moon", "sun"]
        assert sorted(deck) == ["moon", "moon", "sun", "sun"]

    def test_deck_is_capped_at_six_pairs(self):
        words = [f"w{i}" for i in range(10)]
        engine = MemoryMatchEngine(words, rng=random.Random(3))
        assert engine.total_pairs == 6
        assert len(engine.cards) == 12
        for word in engine.words:
            assert len(_positions(engine, word)) == 2

    def test_no_words_raises(self):
        with pytest.raises(NoWordsError):
            MemoryMatchEngine([])

    def test_seeded_rng_gives_same_board(self):
        a = MemoryMatchEngine(["a", "b", "c"], rng=random.Random(5))
        b = MemoryMatchEngine(["a", "b", "c"], rng=random.Random(5))
        assert [c.word for c in a.cards] == [c.word for c in b.cards]


class TestForcedTarget:

    def test_board_locked_until_announced(self):
        engine = MemoryMatchEngine(["sun", "moon"], rng=random.Random(1))
        engine.choose_target()
        assert engine.phase == BoardPhase.ANNOUNCING
        assert engine.flip(0).status == FlipStatus.IGNORED
        engine.target_announced()
        assert engine.flip(0).status == FlipStatus.FIRST

    def test_matching_non_target_pair_is_rejected(self):
        """Two cards of the non-target word match but earn no credit."""
        engine, target = _ready_engine(["sun", "moon"])
        other = next(w for w in engine.words if w != target)
        a, b = _positions(engine, other)

        engine.flip(a)
        outcome = engine.flip(b)

        assert outcome.status == FlipStatus.REJECTED
        assert engine.matches_found == 0
        assert target in engine.remaining_targets
        assert sorted(engine.remaining_targets) == sorted(engine.words)

        settlement = engine.finish_pair()
        assert settlement.won is False
        assert settlement.next_target == target
        assert sorted(settlement.hidden_cards) == [a, b]
        assert engine.cards[a].state == CardState.FACE_DOWN
        assert engine.phase == BoardPhase.ANNOUNCING

    def test_sun_pair_rejected_while_moon_is_target(self):
        """Deck of sun and moon, target moon: the sun pair earns nothing."""
        engine = MemoryMatchEngine(["sun", "moon"], rng=random.Random(2))
        engine.choose_target()
        engine.current_target = "moon"
        engine.target_announced()
        first, second = _positions(engine, "sun")

        assert engine.flip(first).status == FlipStatus.FIRST
        outcome = engine.flip(second)

        assert outcome.status == FlipStatus.REJECTED
        assert outcome.target == "moon"
        assert engine.matches_found == 0
        assert "moon" in engine.remaining_targets
        assert engine.finish_pair().next_target == "moon"

    def test_target_pair_is_credited(self):
        engine, target = _ready_engine(["sun", "moon"])
        a, b = _positions(engine, target)

        engine.flip(a)
        outcome = engine.flip(b)

        assert outcome.status == FlipStatus.MATCH
        assert outcome.matches_found == 1
        assert engine.cards[a].state == CardState.MATCHED
        assert target not in engine.remaining_targets

        settlement = engine.finish_pair()
        assert settlement.next_target in engine.remaining_targets

    def test_mismatch_hides_cards(self):
        engine, target = _ready_engine(["sun", "moon"])
        other = next(w for w in engine.words if w != target)
        a = _positions(engine, target)[0]
        b = _positions(engine, other)[0]

        engine.flip(a)
        assert engine.flip(b).status == FlipStatus.MISMATCH
        assert engine.locked

        settlement = engine.finish_pair()
        assert settlement.next_target == target
        assert all(c.state == CardState.FACE_DOWN for c in engine.cards)


class TestIgnoredFlips:

    def test_same_card_twice_is_ignored(self):
        engine, _ = _ready_engine(["sun", "moon"])
        engine.flip(0)
        assert engine.flip(0).status == FlipStatus.IGNORED
        assert engine.second is None

    def test_out_of_range_is_ignored(self):
        engine, _ = _ready_engine(["sun"])
        assert engine.flip(-1).status == FlipStatus.IGNORED
        assert engine.flip(99).status == FlipStatus.IGNORED

    def test_third_flip_while_resolving_is_ignored(self):
        engine, _ = _ready_engine(["sun", "moon", "star"])
        engine.flip(0)
        engine.flip(1)
        assert engine.flip(2).status == FlipStatus.IGNORED

    def test_matched_card_is_ignored(self):
        engine, target = _ready_engine(["sun", "moon"])
        a, b = _positions(engine, target)
        engine.flip(a)
        engine.flip(b)
        engine.finish_pair()
        engine.target_announced()
        assert engine.flip(a).status == FlipStatus.IGNORED

    def test_finish_pair_without_pending_pair(self):
        engine, _ = _ready_engine(["sun"])
        assert engine.finish_pair() is None


class TestWinning:

    def test_matching_every_target_wins(self):
        engine, target = _ready_engine(["sun", "moon", "star"])
        while True:
            a, b = _positions(engine, target)
            engine.flip(a)
            outcome = engine.flip(b)
            settlement = engine.finish_pair()
            if settlement.won:
                break
            target = settlement.next_target
            engine.target_announced()

        assert outcome.won is True
        assert engine.is_won
        assert engine.matches_found == engine.total_pairs == 3
        assert engine.current_target is None
        assert engine.flip(0).status == FlipStatus.IGNORED
