import pytest

from quest.phonetics import phonetic_sounds
from quest.speech import estimate_spell_out_seconds, spelled_letters


@pytest.mark.parametrize("word,sounds", [
    ("night", ["n", "eye", "t"]),
    ("ship", ["shhh", "i", "p"]),
    ("phone", ["f", "o", "n", "e"]),
    ("Sing", ["s", "ing"]),
    ("cat", ["c", "a", "t"]),
])
def test_phonetic_sounds(word, sounds):
    assert phonetic_sounds(word) == sounds


def test_spelled_letters():
    assert spelled_letters("cat") == "c a t"


def test_spell_out_estimate_grows_with_length():
    assert estimate_spell_out_seconds("elephant") > estimate_spell_out_seconds("cat")
