"""
Tests for curriculum management (students, lists, profiles).
"""

import pytest

from quest.curriculum import (
    CurriculumError,
    add_student,
    create_list,
    delete_list,
    delete_student,
    reset_student,
    search_lists,
    toggle_list_visibility,
    update_profile,
    update_sentences,
    update_words,
    visible_list_names,
)
from quest.models import AppData


class TestStudents:

    def test_add_and_delete(self):
        data = AppData()
        add_student(data, "  Leo ")
        assert "Leo" in data.students
        delete_student(data, "Leo")
        assert data.students == {}

    @pytest.mark.parametrize("name", ["", "   ", "Mia"])
    def test_invalid_names_are_rejected(self, app_data, name):
        with pytest.raises(CurriculumError):
            add_student(app_data, name)

    def test_update_profile(self, student):
        update_profile(student, emoji="🦊", color="#eb4d4b", role="Wizard", weekly_goal=5)
        assert (student.emoji, student.color, student.role, student.weekly_goal) == (
            "🦊", "#eb4d4b", "Wizard", 5
        )

    def test_update_profile_validates(self, student):
        with pytest.raises(CurriculumError):
            update_profile(student, emoji="🚗")
        with pytest.raises(CurriculumError):
            update_profile(student, weekly_goal=0)

    @pytest.mark.parametrize("goal", ["abc", "", "2.5", [3]])
    def test_non_numeric_weekly_goal_is_rejected(self, student, goal):
        with pytest.raises(CurriculumError):
            update_profile(student, weekly_goal=goal)
        assert student.weekly_goal == 10

    def test_reset_lists(self, student):
        reset_student(student, "lists")
        assert student.lists == {} and student.sentences == {}


class TestLists:

    def test_create_and_edit_list(self, student):
        create_list(student, "Week 3")
        words = update_words(student, "Week 3", "Tree, BUSH,")
        sentences = update_sentences(student, "Week 3", "A Tree., A bush.")
        assert words == ["tree", "bush"]
        assert sentences == ["A Tree.", "A bush."]

    def test_duplicate_list_is_rejected(self, student):
        with pytest.raises(CurriculumError):
            create_list(student, "Week 1")

    def test_delete_list_removes_sentences(self, student):
        delete_list(student, "Week 1")
        assert "Week 1" not in student.lists
        assert "Week 1" not in student.sentences

    def test_unknown_list_is_rejected(self, student):
        with pytest.raises(CurriculumError):
            update_words(student, "Nope", "a")

    def test_toggle_visibility(self, student):
        assert toggle_list_visibility(student, "Week 2") is False
        assert visible_list_names(student) == ["Week 1"]
        assert toggle_list_visibility(student, "Week 2") is True

    def test_search_lists(self, student):
        assert search_lists(student, "MOO") == ["Week 2"]
        assert search_lists(student, "") == ["Week 1", "Week 2"]
