"""
Streamlit session state and storage helpers.
"""

from __future__ import annotations

import streamlit as st

from app.speech import BrowserSpeech
from quest import storage
from quest.models import AppData, Student


@st.cache_resource
def get_store() -> storage.SnapshotStore:
    """
    Storage backend (cached per server process).
    """
    return storage.get_store()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "app_data" not in st.session_state:
        st.session_state.app_data = storage.load_app_data(get_store())
    if "current_student" not in st.session_state:
        st.session_state.current_student = None
    if "game_mode" not in st.session_state:
        st.session_state.game_mode = "spelling"
    if "screen" not in st.session_state:
        st.session_state.screen = "portal"
    if "current_list_key" not in st.session_state:
        st.session_state.current_list_key = None
    if "spelling_session" not in st.session_state:
        st.session_state.spelling_session = None
    if "last_result" not in st.session_state:
        st.session_state.last_result = None
    if "advance_at" not in st.session_state:
        st.session_state.advance_at = None
    if "show_help" not in st.session_state:
        st.session_state.show_help = False
    if "memory_engine" not in st.session_state:
        st.session_state.memory_engine = None
    if "memory_pending" not in st.session_state:
        st.session_state.memory_pending = None
    if "memory_message" not in st.session_state:
        st.session_state.memory_message = ""
    if "win_medals" not in st.session_state:
        st.session_state.win_medals = None
    if "flash" not in st.session_state:
        st.session_state.flash = None
    if "parent_unlocked" not in st.session_state:
        st.session_state.parent_unlocked = False


def app_data() -> AppData:
    return st.session_state.app_data


def current_student() -> Student | None:
    name = st.session_state.current_student
    if name is None:
        return None
    return app_data().students.get(name)


def persist() -> None:
    """Write the whole app state to storage."""
    storage.save_app_data(get_store(), app_data())


def speech() -> BrowserSpeech:
    return BrowserSpeech(voice_id=app_data().voice_id)


def show_screen(name: str) -> None:
    st.session_state.screen = name
