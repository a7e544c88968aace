"""
Session Statistics UI

Renders game progress metrics, controls and the win screen.
"""

import streamlit as st

from app.ui.profile import render_medals_row
from quest.memory import MemoryMatchEngine
from quest.models import Medals
from quest.spelling import SpellingSession


def render_spelling_stats(session: SpellingSession) -> bool:
    """
    Render spelling progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2, col3 = st.columns([2, 3, 1])

    with col1:
        position = min(session.index + 1, session.length)
        st.metric("Word", f"{position}/{session.length}")

    with col2:
        medals = session.session_medals
        st.metric("This Quest", f"🥇 {medals.gold}  🥈 {medals.silver}  🥉 {medals.bronze}")

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Exit quest", use_container_width=True, key="exit_spelling"):
            return True

    st.progress(min(session.index / session.length, 1.0))
    return False


def render_memory_stats(engine: MemoryMatchEngine) -> bool:
    """
    Render memory game progress and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2 = st.columns([5, 1])

    with col1:
        st.metric("Matches", f"{engine.matches_found} / {engine.total_pairs}")

    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("❌", help="Exit game", use_container_width=True, key="exit_memory"):
            return True

    st.divider()
    return False


def render_win_screen(medals: Medals | None) -> str | None:
    """
    Render the quest complete screen.

    Returns:
        "again" or "home" when a button was clicked, else None
    """
    st.balloons()
    st.success("🎉 Quest complete!")
    if medals is not None:
        st.markdown("**Medals earned**")
        render_medals_row(medals)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            return "again"
    with col2:
        if st.button("Home", use_container_width=True):
            return "home"
    return None
