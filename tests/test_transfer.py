"""
Tests for snapshot encoding and list import/export.
"""

import json

import pytest

from quest.models import AppData, ListConfig, Student, WordHistory
from quest.transfer import (
    ImportValidationError,
    dump_snapshot,
    export_list,
    import_list,
    import_snapshot,
    load_snapshot,
)


class TestSnapshot:

    def test_round_trip_keeps_student(self, app_data):
        student = app_data.students["Mia"]
        student.xp = 75
        student.history["cat"] = WordHistory(missed=1, times=[2.5], dates=["2024-01-01"])
        student.list_configs["Week 2"] = ListConfig(visible=False)
        app_data.voice_id = "Samantha"

        restored = import_snapshot(dump_snapshot(app_data))

        assert restored.students["Mia"] == student
        assert restored.voice_id == "Samantha"

    def test_snapshot_uses_camel_case_keys(self, app_data):
        payload = json.loads(dump_snapshot(app_data))
        mia = payload["students"]["Mia"]
        assert "weeklyGoal" in mia and "listConfigs" in mia and "goalHistory" in mia

    def test_missing_fields_get_defaults(self):
        raw = json.dumps({"students": {"Leo": {"lists": {"A": ["x"]}}}})
        leo = load_snapshot(raw).students["Leo"]
        assert leo.xp == 0
        assert leo.weekly_goal == 10
        assert leo.emoji == "🦁"
        assert leo.medals.total == 0

    @pytest.mark.parametrize("raw", [None, "", "{not json", "[1, 2]"])
    def test_corrupted_snapshot_loads_empty(self, raw):
        assert load_snapshot(raw) == AppData()

    def test_strict_import_raises(self):
        with pytest.raises(ImportValidationError):
            import_snapshot("{not json")

    def test_blank_fields_fall_back_per_student(self):
        raw = json.dumps({"students": {
            "Mia": {"lists": {"A": ["cat"]}, "xp": 40, "weeklyGoal": "", "medals": None},
            "Leo": {"lists": {"B": ["dog"]}, "xp": 15, "goalHistory": None},
        }})

        data = load_snapshot(raw)

        assert sorted(data.students) == ["Leo", "Mia"]
        mia, leo = data.students["Mia"], data.students["Leo"]
        assert (mia.weekly_goal, mia.medals.total, mia.xp) == (10, 0, 40)
        assert mia.lists == {"A": ["cat"]}
        assert (leo.xp, leo.goal_history) == (15, [])

    def test_unreadable_field_only_resets_that_field(self):
        raw = json.dumps({"students": {
            "Mia": {"lists": {"A": ["cat"]}, "xp": "lots", "streak": 3},
            "Leo": {"lists": {"B": ["dog"]}},
        }})

        data = load_snapshot(raw)

        assert data.students["Mia"].xp == 0
        assert data.students["Mia"].streak == 3
        assert data.students["Mia"].lists == {"A": ["cat"]}
        assert "Leo" in data.students

    def test_strict_import_accepts_null_fields(self):
        raw = json.dumps({"students": {"Mia": {"weeklyProgress": None, "listConfigs": None}}})
        mia = import_snapshot(raw).students["Mia"]
        assert mia.weekly_progress == 0
        assert mia.list_configs == {}


class TestListExport:

    def test_export_then_import_into_other_student(self, student):
        other = Student()

        name = import_list(other, export_list(student, "Week 1"))

        assert name == "Week 1"
        assert other.lists["Week 1"] == ["cat", "dog", "sun"]
        assert other.sentences["Week 1"] == ["The cat sat.", "A dog ran."]

    def test_import_overwrites_same_name(self, student):
        raw = json.dumps({"type": "levelup-list", "name": "Week 1", "words": [" Tree "]})
        import_list(student, raw)
        assert student.lists["Week 1"] == ["tree"]
        assert student.sentences["Week 1"] == ["The cat sat.", "A dog ran."]

    def test_empty_sentences_are_exported_and_clear_on_import(self, student):
        student.sentences["Week 1"] = []
        other = Student(lists={"Week 1": ["old"]}, sentences={"Week 1": ["Old sentence."]})

        raw = export_list(student, "Week 1")
        import_list(other, raw)

        assert json.loads(raw)["sentences"] == []
        assert other.sentences["Week 1"] == []

    def test_list_without_sentences_omits_the_key(self, student):
        assert "sentences" not in json.loads(export_list(student, "Week 2"))

    @pytest.mark.parametrize("raw", [
        "nope",
        json.dumps({"name": "A", "words": ["x"]}),
        json.dumps({"type": "other", "name": "A", "words": ["x"]}),
        json.dumps({"type": "levelup-list", "name": "", "words": ["x"]}),
    ])
    def test_invalid_list_is_rejected_without_changes(self, student, raw):
        before = dict(student.lists)
        with pytest.raises(ImportValidationError):
            import_list(student, raw)
        assert student.lists == before

    def test_export_unknown_list(self, student):
        with pytest.raises(KeyError):
            export_list(student, "Nope")
