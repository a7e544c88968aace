"""
Quest Constants and Parameters

All tunable game rules in one place: medal thresholds, retry budget,
XP rewards, memory board size and the pacing of deferred steps.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


# ---- Medal Tiers ----

class MedalTier(str, Enum):
    """Speed-based classification of a correct spelling."""
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


GOLD_MAX_SECONDS: Final[float] = 5.0     # t < 5s -> gold
SILVER_MAX_SECONDS: Final[float] = 10.0  # 5s <= t < 10s -> silver, else bronze


# ---- Spelling Rules ----

MAX_ATTEMPTS: Final[int] = 5  # 4 wrong guesses tolerated, the 5th reveals
HELP_AFTER_WRONG: Final[int] = 4  # show the phonetics helper on the last attempt


# ---- XP and Goals ----

XP_FIRST_TRY: Final[int] = 30
XP_CORRECT: Final[int] = 20
XP_MEMORY_MATCH: Final[int] = 5
XP_MEMORY_WIN: Final[int] = 50

DEFAULT_WEEKLY_GOAL: Final[int] = 10
XP_PER_LEVEL: Final[int] = 100


# ---- Word Lists ----

ALL_LISTS: Final[str] = "ALL"  # sentinel: every visible list of a student
LIST_EXPORT_TYPE: Final[str] = "levelup-list"


# ---- Memory Match ----

MEMORY_MAX_PAIRS: Final[int] = 6

# Deferred-step pacing (seconds)
MATCH_FEEDBACK_DELAY: Final[float] = 0.8
MATCH_SETTLE_DELAY: Final[float] = 2.0
REJECT_VISUAL_DELAY: Final[float] = 1.0
REJECT_SETTLE_DELAY: Final[float] = 1.0
MISMATCH_DELAY: Final[float] = 1.5

# Fallback timers for speech playback that never reports completion
SPELL_OUT_TIMEOUT: Final[float] = 6.0
REJECT_SPEECH_TIMEOUT: Final[float] = 8.0


# ---- Spelling Feedback Pacing ----

CORRECT_ADVANCE_DELAY: Final[float] = 3.0
REVEAL_ADVANCE_DELAY: Final[float] = 8.0


# ---- Speech ----

SPEAK_RATE: Final[float] = 0.85
SPELL_RATE: Final[float] = 0.75
PHONETICS_RATE: Final[float] = 0.8


# ---- Profile Defaults ----

COLORS: Final[dict[str, str]] = {
    "Teal": "#4ECDC4",
    "Crimson": "#eb4d4b",
    "Aqua": "#22a6b3",
    "Purple": "#be2edd",
    "Forest Green": "#6ab04c",
    "Orange": "#f0932b",
    "Indigo": "#4834d4",
    "Slate": "#2c3e50",
}

EMOJIS: Final[dict[str, str]] = {
    "🦁": "Lion",
    "🐼": "Panda",
    "🐯": "Tiger",
    "🦄": "Unicorn",
    "🦖": "Dino",
    "🦊": "Fox",
    "🐨": "Koala",
    "🐙": "Octopus",
    "🐧": "Penguin",
    "🦉": "Owl",
}

DEFAULT_ROLE: Final[str] = "Hero"
DEFAULT_COLOR: Final[str] = COLORS["Teal"]
DEFAULT_EMOJI: Final[str] = "🦁"

PRAISE_PHRASES: Final[list[str]] = [
    "Awesome!",
    "Great Job!",
    "Super!",
    "Fantastic!",
    "You did it!",
    "Match!",
    "Way to go!",
]


# ---- Parent Zone ----

PIN_CONFIG_KEY: Final[str] = "parentPin"
MIN_PIN_LENGTH: Final[int] = 4
