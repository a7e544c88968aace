"""
Phonetic chunking for the "sound it out" helper.

Words are split greedily: three-letter graphemes first, then two, then single
letters. Known graphemes are replaced by a speakable sound.
"""

from __future__ import annotations

from typing import Final


PHONETICS_MAP: Final[dict[str, str]] = {
    "igh": "eye",
    "ing": "ing",
    "ch": "ch",
    "sh": "shhh",
    "th": "th",
    "ph": "f",
    "wh": "w",
    "ck": "k",
    "qu": "kw",
    "ai": "ay",
    "ay": "ay",
    "ee": "e",
    "ea": "e",
    "oa": "oh",
    "oe": "oh",
    "oi": "oy",
    "oy": "oy",
    "ou": "ow",
    "ow": "ow",
    "au": "aw",
    "aw": "aw",
    "oo": "oo",
    "ar": "ar",
    "er": "er",
    "ir": "er",
    "or": "or",
    "ur": "er",
}


def phonetic_sounds(word: str) -> list[str]:
    """
    Split a word into speakable sound chunks.

    >>> phonetic_sounds("night")
    ['n', 'eye', 't']
    """
    word = word.lower()
    sounds: list[str] = []
    i = 0
    while i < len(word):
        for size in (3, 2):
            chunk = word[i:i + size]
            if len(chunk) == size and chunk in PHONETICS_MAP:
                sounds.append(PHONETICS_MAP[chunk])
                i += size
                break
        else:
            letter = word[i]
            sounds.append(PHONETICS_MAP.get(letter, letter))
            i += 1
    return sounds
