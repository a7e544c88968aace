"""
Domain records for students, word lists and progress.

These are the typed records the engines and the ledger work with.
Defaults are applied once, when a snapshot is decoded (see quest.transfer),
so callers never need to re-check for missing fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from quest.constants import (
    DEFAULT_COLOR,
    DEFAULT_EMOJI,
    DEFAULT_ROLE,
    DEFAULT_WEEKLY_GOAL,
    MedalTier,
)


class NoWordsError(ValueError):
    """Raised when a session is started without any words."""


@dataclass(frozen=True)
class WordEntry:
    """
    One practice item: a canonical word and its optional example sentence.
    """
    word: str
    sentence: str = ""


@dataclass
class Medals:
    """Gold/silver/bronze tally."""
    gold: int = 0
    silver: int = 0
    bronze: int = 0

    def add(self, tier: MedalTier, count: int = 1) -> None:
        setattr(self, tier.value, getattr(self, tier.value) + count)

    def merge(self, other: Medals) -> None:
        self.gold += other.gold
        self.silver += other.silver
        self.bronze += other.bronze

    @property
    def total(self) -> int:
        return self.gold + self.silver + self.bronze


@dataclass
class WordHistory:
    """
    Attempt history for one word.

    missed: number of wrong guesses ever recorded
    times: elapsed seconds of each correct answer
    dates: ISO dates (YYYY-MM-DD) of each attempt that resolved the word
    """
    missed: int = 0
    times: list[float] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)


@dataclass
class ListConfig:
    """Per-list display settings. Hidden lists are archived, not deleted."""
    visible: bool = True


@dataclass
class Student:
    """
    Durable learner record mutated by both engines via the ledger.
    """
    lists: dict[str, list[str]] = field(default_factory=dict)
    sentences: dict[str, list[str]] = field(default_factory=dict)
    list_configs: dict[str, ListConfig] = field(default_factory=dict)
    history: dict[str, WordHistory] = field(default_factory=dict)
    xp: int = 0
    medals: Medals = field(default_factory=Medals)
    weekly_goal: int = DEFAULT_WEEKLY_GOAL
    weekly_progress: int = 0
    goal_history: list[str] = field(default_factory=list)
    streak: int = 0
    role: str = DEFAULT_ROLE
    color: str = DEFAULT_COLOR
    emoji: str = DEFAULT_EMOJI

    def is_visible(self, list_name: str) -> bool:
        config = self.list_configs.get(list_name)
        return config is None or config.visible


@dataclass
class AppData:
    """
    Root of the persisted snapshot.

    config is kept as an opaque mapping (voice selection and any settings
    written by other versions pass through untouched).
    """
    students: dict[str, Student] = field(default_factory=dict)
    config: dict = field(default_factory=dict)

    @property
    def voice_id(self) -> str | None:
        return self.config.get("voiceURI")

    @voice_id.setter
    def voice_id(self, value: str | None) -> None:
        if value:
            self.config["voiceURI"] = value
        else:
            self.config.pop("voiceURI", None)
