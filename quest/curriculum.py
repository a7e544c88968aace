"""
Curriculum management: students, their lists and profile settings.

All functions mutate the given AppData/Student in place; persisting the
result is the caller's job (quest.storage.save_app_data).
"""

from __future__ import annotations

import logging

from quest import ledger
from quest.constants import COLORS, EMOJIS
from quest.models import AppData, ListConfig, Student
from quest.word_lists import parse_sentence_field, parse_word_field

logger = logging.getLogger(__name__)


class CurriculumError(ValueError):
    """Invalid curriculum input (empty or duplicate names, unknown list)."""


def get_student(data: AppData, name: str) -> Student:
    try:
        return data.students[name]
    except KeyError:
        raise CurriculumError(f"Unknown student: {name}") from None


def _require_list(student: Student, list_name: str) -> None:
    if list_name not in student.lists:
        raise CurriculumError(f"Unknown list: {list_name}")


# ---- Students ----

def add_student(data: AppData, name: str) -> Student:
    name = name.strip()
    if not name:
        raise CurriculumError("Please enter a student name.")
    if name in data.students:
        raise CurriculumError(f"{name} already exists.")
    student = Student()
    data.students[name] = student
    logger.info("Added student %s", name)
    return student


def delete_student(data: AppData, name: str) -> None:
    get_student(data, name)
    del data.students[name]
    logger.info("Deleted student %s", name)


def update_profile(
    student: Student,
    *,
    emoji: str | None = None,
    color: str | None = None,
    role: str | None = None,
    weekly_goal: int | None = None
) -> None:
    """
    Update profile fields. Unknown emoji/color values are rejected.
    """
    if emoji is not None:
        if emoji not in EMOJIS:
            raise CurriculumError(f"Unknown buddy: {emoji}")
        student.emoji = emoji
    if color is not None:
        if color not in COLORS.values():
            raise CurriculumError(f"Unknown color: {color}")
        student.color = color
    if role is not None and role.strip():
        student.role = role.strip()
    if weekly_goal is not None:
        try:
            goal = int(weekly_goal)
        except (TypeError, ValueError):
            raise CurriculumError(f"Weekly goal must be a whole number, got {weekly_goal!r}.") from None
        if goal < 1:
            raise CurriculumError("Weekly goal must be at least 1.")
        student.weekly_goal = goal


def reset_student(student: Student, wipe: str) -> None:
    """
    Reset a student.

    Args:
        wipe: "progress" (XP, history, milestones) or "lists" (lists, sentences)
    """
    if wipe == "progress":
        ledger.reset_progress(student)
    elif wipe == "lists":
        student.lists = {}
        student.sentences = {}
        student.list_configs = {}
    else:
        raise CurriculumError(f"Unknown reset option: {wipe}")


# ---- Lists ----

def create_list(student: Student, list_name: str) -> None:
    list_name = list_name.strip()
    if not list_name:
        raise CurriculumError("Please enter a list name.")
    if list_name in student.lists:
        raise CurriculumError(f"List {list_name!r} already exists.")
    student.lists[list_name] = []


def delete_list(student: Student, list_name: str) -> None:
    _require_list(student, list_name)
    del student.lists[list_name]
    student.sentences.pop(list_name, None)
    student.list_configs.pop(list_name, None)


def update_words(student: Student, list_name: str, raw: str) -> list[str]:
    """Replace a list's words from a comma-separated field."""
    _require_list(student, list_name)
    student.lists[list_name] = parse_word_field(raw)
    return student.lists[list_name]


def update_sentences(student: Student, list_name: str, raw: str) -> list[str]:
    """Replace a list's example sentences from a comma-separated field."""
    _require_list(student, list_name)
    student.sentences[list_name] = parse_sentence_field(raw)
    return student.sentences[list_name]


def toggle_list_visibility(student: Student, list_name: str) -> bool:
    """
    Archive or restore a list.

    Returns:
        The new visibility
    """
    _require_list(student, list_name)
    config = student.list_configs.setdefault(list_name, ListConfig())
    config.visible = not config.visible
    return config.visible


def visible_list_names(student: Student) -> list[str]:
    return [name for name in student.lists if student.is_visible(name)]


def search_lists(student: Student, query: str) -> list[str]:
    """List names whose words contain the query (case-insensitive)."""
    query = query.strip().lower()
    if not query:
        return list(student.lists)
    return [
        name for name, words in student.lists.items()
        if query in ", ".join(words)
    ]
