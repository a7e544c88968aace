"""
Word list builder.

Turns a student's named lists into shuffled session input:
- spelling sessions get WordEntry pairs (word + example sentence)
- memory games get the deduplicated word set

The ALL_LISTS sentinel aggregates every list that is not hidden.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from quest.constants import ALL_LISTS
from quest.models import Student, WordEntry

logger = logging.getLogger(__name__)


def _selected_list_names(student: Student, key: str) -> list[str]:
    if key == ALL_LISTS:
        return [name for name in student.lists if student.is_visible(name)]
    if key in student.lists:
        return [key]
    return []


def build_word_entries(
    student: Student,
    key: str,
    rng: Optional[random.Random] = None
) -> list[WordEntry]:
    """
    Build the ordered practice sequence for a spelling session.

    Args:
        student: Owner of the lists
        key: A list name, or ALL_LISTS for every visible list
        rng: Randomness source (seed it for deterministic order)

    Returns:
        Shuffled WordEntry list; empty when there is nothing to practice
    """
    rng = rng or random.Random()
    entries: list[WordEntry] = []
    for name in _selected_list_names(student, key):
        sentences = student.sentences.get(name, [])
        for i, word in enumerate(student.lists[name]):
            sentence = sentences[i] if i < len(sentences) else ""
            entries.append(WordEntry(word=word, sentence=sentence or ""))

    rng.shuffle(entries)
    if not entries:
        logger.info("No words available for list key %r", key)
    return entries


def memory_words(
    student: Student,
    key: str,
    rng: Optional[random.Random] = None
) -> list[str]:
    """
    Unique words for a memory game, in shuffled order.
    """
    rng = rng or random.Random()
    seen: dict[str, None] = {}
    for name in _selected_list_names(student, key):
        for word in student.lists[name]:
            seen.setdefault(word, None)
    words = list(seen)
    rng.shuffle(words)
    return words


def parse_word_field(raw: str) -> list[str]:
    """
    Parse a comma-separated word field into canonical lowercase words.
    """
    return [w.strip().lower() for w in raw.split(",") if w.strip()]


def parse_sentence_field(raw: str) -> list[str]:
    """
    Parse a comma-separated sentence field (case preserved).
    """
    return [s.strip() for s in raw.split(",") if s.strip()]
