"""
Snapshot codec and list import/export.

Decoding comes in two flavours:
- load_snapshot(): tolerant, used at startup. Anything unreadable becomes a
  fresh empty AppData (logged), never a crash.
- import_snapshot() / parse_list_export(): strict, used for user-supplied
  files. Problems raise ImportValidationError and nothing is changed.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from quest.constants import LIST_EXPORT_TYPE
from quest.models import AppData, ListConfig, Medals, Student, WordHistory
from quest.schemas import (
    ListConfigDocument,
    ListExportDocument,
    MedalsDocument,
    SnapshotDocument,
    StudentDocument,
    WordHistoryDocument,
)

logger = logging.getLogger(__name__)


class ImportValidationError(ValueError):
    """A user-supplied document was unreadable or of the wrong kind."""


# ---- Document <-> domain ----

def student_from_document(doc: StudentDocument) -> Student:
    return Student(
        lists={name: list(words) for name, words in doc.lists.items()},
        sentences={name: list(s) for name, s in doc.sentences.items()},
        list_configs={name: ListConfig(visible=c.visible) for name, c in doc.list_configs.items()},
        history={
            word: WordHistory(missed=h.missed, times=list(h.times), dates=list(h.dates))
            for word, h in doc.history.items()
        },
        xp=doc.xp,
        medals=Medals(gold=doc.medals.gold, silver=doc.medals.silver, bronze=doc.medals.bronze),
        weekly_goal=doc.weekly_goal,
        weekly_progress=doc.weekly_progress,
        goal_history=list(doc.goal_history),
        streak=doc.streak,
        role=doc.role,
        color=doc.color,
        emoji=doc.emoji,
    )


def student_to_document(student: Student) -> StudentDocument:
    return StudentDocument(
        lists={name: list(words) for name, words in student.lists.items()},
        sentences={name: list(s) for name, s in student.sentences.items()},
        list_configs={
            name: ListConfigDocument(visible=c.visible)
            for name, c in student.list_configs.items()
        },
        history={
            word: WordHistoryDocument(missed=h.missed, times=list(h.times), dates=list(h.dates))
            for word, h in student.history.items()
        },
        xp=student.xp,
        medals=MedalsDocument(
            gold=student.medals.gold,
            silver=student.medals.silver,
            bronze=student.medals.bronze,
        ),
        weekly_goal=student.weekly_goal,
        weekly_progress=student.weekly_progress,
        goal_history=list(student.goal_history),
        streak=student.streak,
        role=student.role,
        color=student.color,
        emoji=student.emoji,
    )


def app_data_from_document(doc: SnapshotDocument) -> AppData:
    return AppData(
        students={name: student_from_document(s) for name, s in doc.students.items()},
        config=dict(doc.config),
    )


def app_data_to_document(data: AppData) -> SnapshotDocument:
    return SnapshotDocument(
        students={name: student_to_document(s) for name, s in data.students.items()},
        config=dict(data.config),
    )


# ---- Full snapshot ----

def dump_snapshot(data: AppData, indent: Optional[int] = None) -> str:
    """Serialize the whole app state (also the full-export format)."""
    doc = app_data_to_document(data)
    return json.dumps(doc.model_dump(by_alias=True), ensure_ascii=False, indent=indent)


def import_snapshot(raw: str) -> AppData:
    """
    Strictly decode a full backup.

    Raises:
        ImportValidationError: Not JSON, or not a snapshot document
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ImportValidationError(f"Backup is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ImportValidationError("Backup must be a JSON object")
    try:
        return app_data_from_document(SnapshotDocument.model_validate(payload))
    except ValidationError as exc:
        raise ImportValidationError(f"Backup has an invalid structure: {exc}") from exc


_FIELD_FOR_ALIAS = {
    field.alias: name
    for name, field in StudentDocument.model_fields.items()
    if field.alias
}


def _salvage_student(name: str, raw) -> StudentDocument:
    """
    Validate one stored student, replacing unusable fields by their defaults.
    """
    if not isinstance(raw, dict):
        logger.warning("Student %r is not an object, using defaults", name)
        return StudentDocument()
    try:
        return StudentDocument.model_validate(raw)
    except ValidationError as exc:
        bad_keys = {err["loc"][0] for err in exc.errors() if err["loc"]}
        bad_keys |= {_FIELD_FOR_ALIAS.get(key, key) for key in bad_keys}
        logger.warning("Student %r: resetting unreadable fields %s", name, sorted(map(str, bad_keys)))
        cleaned = {key: value for key, value in raw.items() if key not in bad_keys}
    try:
        return StudentDocument.model_validate(cleaned)
    except ValidationError:
        logger.warning("Student %r is unreadable, using defaults", name)
        return StudentDocument()


def load_snapshot(raw: Optional[str]) -> AppData:
    """
    Tolerantly decode a persisted snapshot.

    Missing, null or unreadable student fields get their defaults, student by
    student. Only a document that is not a JSON object yields a fresh empty
    state.
    """
    if not raw:
        return AppData()
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.warning("Corrupted snapshot, starting from an empty state: %s", exc)
        return AppData()
    if not isinstance(payload, dict):
        logger.warning("Corrupted snapshot (not an object), starting from an empty state")
        return AppData()

    students = payload.get("students")
    config = payload.get("config")
    doc = SnapshotDocument(
        students={
            str(name): _salvage_student(str(name), value)
            for name, value in (students.items() if isinstance(students, dict) else [])
        },
        config=config if isinstance(config, dict) else {},
    )
    return app_data_from_document(doc)


# ---- Single list ----

def export_list(student: Student, list_name: str) -> str:
    """
    Serialize one list as a quest-list export document.
    """
    if list_name not in student.lists:
        raise KeyError(list_name)
    doc = ListExportDocument(
        name=list_name,
        words=list(student.lists[list_name]),
        sentences=list(student.sentences[list_name]) if list_name in student.sentences else None,
    )
    return json.dumps(doc.model_dump(exclude_none=True), ensure_ascii=False, indent=2)


def parse_list_export(raw: str) -> ListExportDocument:
    """
    Validate a quest-list export document.

    Raises:
        ImportValidationError: Not JSON, wrong type marker or bad shape
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ImportValidationError(f"List file is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict) or payload.get("type") != LIST_EXPORT_TYPE:
        raise ImportValidationError("Invalid quest list")
    try:
        return ListExportDocument.model_validate(payload)
    except ValidationError as exc:
        raise ImportValidationError(f"Invalid quest list: {exc}") from exc


def import_list(student: Student, raw: str) -> str:
    """
    Merge an exported list into a student, overwriting a list of the same name.

    Returns:
        The imported list name
    """
    doc = parse_list_export(raw)
    student.lists[doc.name] = list(doc.words)
    if doc.sentences is not None:
        student.sentences[doc.name] = list(doc.sentences)
    logger.info("Imported list %r with %d words", doc.name, len(doc.words))
    return doc.name
