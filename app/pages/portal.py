"""
Quest page rendering: student portal, games and the win screen.
"""

from __future__ import annotations

import streamlit as st

from app import memory_controller, session_controller
from app.pages.memory import render_memory_screen
from app.pages.spelling import render_spelling_screen
from app.state import app_data, current_student, show_screen
from app.ui import render_level_card, render_win_screen
from quest import config
from quest.constants import ALL_LISTS
from quest.curriculum import visible_list_names

GAME_MODES = {
    "✏️ Spelling": "spelling",
    "🧠 Memory Match": "memory",
}


def render_quest_page() -> None:
    """
    Render whichever quest screen is active.
    """
    screen = st.session_state.screen
    if screen == "spelling":
        render_spelling_screen()
    elif screen == "memory":
        render_memory_screen()
    elif screen == "win":
        _render_win()
    else:
        _render_portal()


def _start(list_key: str) -> None:
    if st.session_state.game_mode == "memory":
        memory_controller.start_memory(list_key)
    else:
        session_controller.start_practice(list_key)


def _render_portal() -> None:
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("⭐ LevelUp Quest")
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test storage (set TEST_MODE=false in .env for production)")

    names = list(app_data().students)
    if not names:
        st.info("No heroes yet! Add a student on the Parents tab.")
        return

    current = st.session_state.current_student
    selected = st.selectbox(
        "Who is playing?",
        names,
        index=names.index(current) if current in names else 0
    )
    st.session_state.current_student = selected
    student = current_student()

    if st.session_state.flash:
        st.info(st.session_state.flash)
        st.session_state.flash = None

    render_level_card(selected, student)

    labels = list(GAME_MODES)
    mode_label = st.radio(
        "Game",
        labels,
        horizontal=True,
        index=list(GAME_MODES.values()).index(st.session_state.game_mode)
    )
    st.session_state.game_mode = GAME_MODES[mode_label]

    st.markdown("### 🗺️ Choose your quest")
    lists = visible_list_names(student)
    if not lists:
        st.caption("No quests yet. Ask a grown-up to add a word list.")
        return

    if len(lists) > 1:
        if st.button("🏰 MASTER QUEST (All Words)", type="primary", use_container_width=True):
            _start(ALL_LISTS)
            st.rerun()

    cols = st.columns(2)
    for i, list_name in enumerate(lists):
        with cols[i % 2]:
            count = len(student.lists[list_name])
            if st.button(f"{list_name} ({count})", key=f"quest_{list_name}", use_container_width=True):
                _start(list_name)
                st.rerun()


def _render_win() -> None:
    choice = render_win_screen(st.session_state.win_medals)
    if choice == "again":
        st.session_state.win_medals = None
        if st.session_state.game_mode == "memory":
            memory_controller.restart()
        elif st.session_state.current_list_key:
            session_controller.start_practice(st.session_state.current_list_key)
        st.rerun()
    elif choice == "home":
        st.session_state.win_medals = None
        show_screen("portal")
        st.rerun()
