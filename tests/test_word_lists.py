"""
Tests for the word list builder.
"""

import random

from quest.constants import ALL_LISTS
from quest.models import ListConfig, WordEntry
from quest.word_lists import (
    build_word_entries,
    memory_words,
    parse_sentence_field,
    parse_word_field,
)


class TestBuildWordEntries:

    def test_single_list_pairs_sentences_by_position(self, student, rng):
        entries = build_word_entries(student, "Week 1", rng=rng)
        assert sorted(entries, key=lambda e: e.word) == [
            WordEntry("cat", "The cat sat."),
            WordEntry("dog", "A dog ran."),
            WordEntry("sun", ""),
        ]

    def test_all_lists_skips_hidden(self, student, rng):
        student.list_configs["Week 2"] = ListConfig(visible=False)
        words = {e.word for e in build_word_entries(student, ALL_LISTS, rng=rng)}
        assert words == {"cat", "dog", "sun"}

    def test_all_lists_includes_every_visible_list(self, student, rng):
        words = [e.word for e in build_word_entries(student, ALL_LISTS, rng=rng)]
        assert sorted(words) == ["cat", "dog", "moon", "star", "sun"]

    def test_seeded_order_is_deterministic(self, student):
        a = build_word_entries(student, ALL_LISTS, rng=random.Random(9))
        b = build_word_entries(student, ALL_LISTS, rng=random.Random(9))
        assert a == b

    def test_unknown_or_empty_list_gives_nothing(self, student, rng):
        student.lists["Empty"] = []
        assert build_word_entries(student, "Nope", rng=rng) == []
        assert build_word_entries(student, "Empty", rng=rng) == []


class TestMemoryWords:

    def test_duplicates_across_lists_are_removed(self, student, rng):
        student.lists["Week 2"].append("cat")
        words = memory_words(student, ALL_LISTS, rng=rng)
        assert sorted(words) == ["cat", "dog", "moon", "star", "sun"]


class TestParsing:

    def test_word_field_is_canonicalized(self):
        assert parse_word_field(" Cat, DOG ,, sun ,") == ["cat", "dog", "sun"]

    def test_sentence_field_keeps_case(self):
        assert parse_sentence_field("The Cat sat. , ,A dog ran.") == ["The Cat sat.", "A dog ran."]
