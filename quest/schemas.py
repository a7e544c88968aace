"""
Pydantic models for persisted and exchanged documents.

These models define the JSON shape of:
- the full app snapshot (camelCase keys, compatible with browser backups)
- a single exported quest list

Every optional field carries its default here, so older or partial
documents decode into complete records.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from quest.constants import (
    DEFAULT_COLOR,
    DEFAULT_EMOJI,
    DEFAULT_ROLE,
    DEFAULT_WEEKLY_GOAL,
    LIST_EXPORT_TYPE,
)


# Student keys (aliases and field names) that fall back to their default
# when stored as null or an empty string
DEFAULTED_WHEN_BLANK = frozenset({
    "lists", "sentences", "listConfigs", "list_configs", "history", "xp",
    "medals", "weeklyGoal", "weekly_goal", "weeklyProgress", "weekly_progress",
    "goalHistory", "goal_history", "streak", "role", "color", "emoji",
})


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MedalsDocument(_Document):
    gold: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    bronze: int = Field(default=0, ge=0)


class WordHistoryDocument(_Document):
    missed: int = 0
    times: list[float] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)


class ListConfigDocument(_Document):
    visible: bool = True


class StudentDocument(_Document):
    """One student as stored in the snapshot."""
    lists: dict[str, list[str]] = Field(default_factory=dict)
    sentences: dict[str, list[str]] = Field(default_factory=dict)
    list_configs: dict[str, ListConfigDocument] = Field(default_factory=dict, alias="listConfigs")
    history: dict[str, WordHistoryDocument] = Field(default_factory=dict)
    xp: int = Field(default=0, ge=0)
    medals: MedalsDocument = Field(default_factory=MedalsDocument)
    weekly_goal: int = Field(default=DEFAULT_WEEKLY_GOAL, alias="weeklyGoal")
    weekly_progress: int = Field(default=0, ge=0, alias="weeklyProgress")
    goal_history: list[str] = Field(default_factory=list, alias="goalHistory")
    streak: int = 0
    role: str = DEFAULT_ROLE
    color: str = DEFAULT_COLOR
    emoji: str = DEFAULT_EMOJI

    @field_validator("goal_history")
    @classmethod
    def _dedupe_dates(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    @model_validator(mode="before")
    @classmethod
    def _blank_fields_use_defaults(cls, data):
        # Older saves hold null or "" for unset fields (e.g. a cleared goal box)
        if not isinstance(data, dict):
            return data
        return {
            key: value for key, value in data.items()
            if not (key in DEFAULTED_WHEN_BLANK and (value is None or value == ""))
        }


class SnapshotDocument(_Document):
    """Full persisted state."""
    students: dict[str, StudentDocument] = Field(default_factory=dict)
    config: dict = Field(default_factory=dict)


class ListExportDocument(_Document):
    """A single quest list exchanged between students or devices."""
    type: Literal["levelup-list"] = LIST_EXPORT_TYPE
    name: str = Field(..., min_length=1)
    words: list[str]
    sentences: Optional[list[str]] = None

    @field_validator("words")
    @classmethod
    def _canonical_words(cls, value: list[str]) -> list[str]:
        return [w.strip().lower() for w in value if w and w.strip()]
