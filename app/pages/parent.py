"""
Parent zone: students, word lists, backups and settings.
"""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from app.state import app_data, persist
from quest import ledger
from quest.constants import COLORS, EMOJIS
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
)
from quest.models import Student
from quest.security import PinError, has_pin, set_pin, verify_pin
from quest.transfer import (
    ImportValidationError,
    dump_snapshot,
    export_list,
    import_list,
    import_snapshot,
)

logger = logging.getLogger(__name__)


def render_parent_page() -> None:
    st.subheader("👪 Parent Zone")
    if not st.session_state.parent_unlocked:
        _render_pin_gate()
        return

    _render_add_student()
    names = list(app_data().students)
    if not names:
        return

    name = st.selectbox("Manage student", names, key="parent_student")
    student = app_data().students[name]

    profile_tab, lists_tab, data_tab = st.tabs(["Profile", "Word Lists", "Data"])
    with profile_tab:
        _render_profile(name, student)
    with lists_tab:
        _render_lists(name, student)
    with data_tab:
        _render_data()


def _render_pin_gate() -> None:
    data = app_data()
    pin_set = has_pin(data)
    with st.form("parent_pin", clear_on_submit=True):
        pin = st.text_input("Enter PIN" if pin_set else "Set PIN", type="password")
        if st.form_submit_button("🔓 Unlock"):
            if not pin_set:
                try:
                    set_pin(data, pin)
                except PinError as e:
                    st.error(f"⚠️ {e}")
                    return
                persist()
            elif not verify_pin(data, pin):
                st.error("❌ Incorrect PIN")
                return
            st.session_state.parent_unlocked = True
            logger.info("Parent zone unlocked")
            st.rerun()


def _render_add_student() -> None:
    with st.form("add_student", clear_on_submit=True):
        new_name = st.text_input("New student name")
        if st.form_submit_button("➕ Add Student"):
            try:
                add_student(app_data(), new_name)
            except CurriculumError as e:
                st.error(str(e))
            else:
                persist()
                st.rerun()


# ---- Profile ----

def _render_profile(name: str, student: Student) -> None:
    emojis = list(EMOJIS)
    colors = list(COLORS.values())
    color_names = {hex_value: label for label, hex_value in COLORS.items()}

    with st.form(f"profile_{name}"):
        emoji = st.selectbox(
            "Buddy",
            emojis,
            index=emojis.index(student.emoji) if student.emoji in emojis else 0,
            format_func=lambda e: f"{e} {EMOJIS[e]}"
        )
        color = st.selectbox(
            "Color",
            colors,
            index=colors.index(student.color) if student.color in colors else 0,
            format_func=lambda c: color_names[c]
        )
        role = st.text_input("Title", value=student.role)
        weekly_goal = st.number_input("Weekly goal (words)", min_value=1, value=student.weekly_goal, step=1)
        if st.form_submit_button("Save Profile", type="primary"):
            try:
                update_profile(student, emoji=emoji, color=color, role=role, weekly_goal=int(weekly_goal))
            except CurriculumError as e:
                st.error(str(e))
            else:
                persist()
                st.success("Profile saved.")

    st.caption(f"Weekly progress: {student.weekly_progress} / {student.weekly_goal}")
    if st.button("🔄 Start New Week", key=f"week_{name}"):
        ledger.reset_weekly_progress(student)
        persist()
        st.rerun()

    st.markdown("#### Danger zone")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.button("Reset Medals", key=f"reset_medals_{name}"):
            ledger.reset_medals(student)
            persist()
            st.rerun()
    with col2:
        if st.button("Reset Progress", key=f"reset_progress_{name}"):
            reset_student(student, "progress")
            persist()
            st.rerun()
    with col3:
        if st.button("Clear Lists", key=f"reset_lists_{name}"):
            reset_student(student, "lists")
            persist()
            st.rerun()
    with col4:
        if st.button("Delete Student", key=f"delete_{name}"):
            delete_student(app_data(), name)
            if st.session_state.current_student == name:
                st.session_state.current_student = None
            persist()
            st.rerun()


# ---- Lists ----

def _render_lists(name: str, student: Student) -> None:
    with st.form(f"new_list_{name}", clear_on_submit=True):
        list_name = st.text_input("New list name")
        if st.form_submit_button("➕ Create List"):
            try:
                create_list(student, list_name)
            except CurriculumError as e:
                st.error(str(e))
            else:
                persist()
                st.rerun()

    uploaded = st.file_uploader("Import a list", type=["json"], key=f"upload_list_{name}")
    if uploaded is not None and st.button("Import List", key=f"import_list_{name}"):
        try:
            list_name = import_list(student, uploaded.getvalue().decode("utf-8"))
        except (ImportValidationError, UnicodeDecodeError) as e:
            st.error(f"Invalid quest list. {e}")
        else:
            persist()
            st.success(f"Imported {list_name}.")

    query = st.text_input("🔍 Search words", key=f"search_{name}")
    for list_name in search_lists(student, query):
        _render_list_editor(name, student, list_name)


def _render_list_editor(name: str, student: Student, list_name: str) -> None:
    visible = student.is_visible(list_name)
    title = list_name if visible else f"{list_name} (hidden)"
    with st.expander(f"📜 {title} ({len(student.lists[list_name])} words)"):
        key = f"{name}_{list_name}"
        words_raw = st.text_area(
            "Words (comma separated)",
            value=", ".join(student.lists[list_name]),
            key=f"words_{key}"
        )
        sentences_raw = st.text_area(
            "Sentences (comma separated)",
            value=", ".join(student.sentences.get(list_name, [])),
            key=f"sentences_{key}"
        )

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            if st.button("Save", key=f"save_{key}", type="primary"):
                update_words(student, list_name, words_raw)
                update_sentences(student, list_name, sentences_raw)
                persist()
                st.rerun()
        with col2:
            if st.button("Show" if not visible else "Hide", key=f"toggle_{key}"):
                toggle_list_visibility(student, list_name)
                persist()
                st.rerun()
        with col3:
            st.download_button(
                "Export",
                data=export_list(student, list_name),
                file_name=f"{list_name}.json",
                mime="application/json",
                key=f"export_{key}"
            )
        with col4:
            if st.button("Delete", key=f"delete_list_{key}"):
                delete_list(student, list_name)
                persist()
                st.rerun()


# ---- Data ----

def _render_data() -> None:
    st.markdown("#### Backup")
    st.download_button(
        "💾 Download Full Backup",
        data=dump_snapshot(app_data(), indent=2),
        file_name=f"levelup_backup_{date.today().isoformat()}.json",
        mime="application/json"
    )

    backup = st.file_uploader("Restore a backup", type=["json"], key="upload_backup")
    if backup is not None and st.button("Restore Backup", type="primary"):
        try:
            restored = import_snapshot(backup.getvalue().decode("utf-8"))
        except (ImportValidationError, UnicodeDecodeError) as e:
            st.error(f"Could not restore backup. {e}")
        else:
            st.session_state.app_data = restored
            st.session_state.current_student = None
            persist()
            logger.info("Restored backup with %d students", len(restored.students))
            st.rerun()

    st.markdown("#### Voice")
    voice_id = st.text_input(
        "Speech voice (voiceURI, blank for browser default)",
        value=app_data().voice_id or ""
    )
    if st.button("Save Voice"):
        app_data().voice_id = voice_id.strip() or None
        persist()
        st.success("Voice saved.")

    st.markdown("#### Parent PIN")
    with st.form("change_pin", clear_on_submit=True):
        new_pin = st.text_input("New PIN", type="password")
        if st.form_submit_button("Update PIN"):
            try:
                set_pin(app_data(), new_pin)
            except PinError as e:
                st.error(f"⚠️ {e}")
            else:
                persist()
                st.success("✅ PIN Updated")
    if st.button("🔒 Lock Parent Zone"):
        st.session_state.parent_unlocked = False
        st.rerun()
