"""
Spelling game screen.
"""

from __future__ import annotations

import streamlit as st

from app import session_controller
from app.state import show_screen, speech
from app.ui import render_spelling_stats
from quest.constants import MedalTier
from quest.spelling import GuessResult, GuessStatus, SpellingSession

MEDAL_ICONS = {
    MedalTier.GOLD: "🥇",
    MedalTier.SILVER: "🥈",
    MedalTier.BRONZE: "🥉",
}


def render_spelling_screen() -> None:
    session: SpellingSession | None = st.session_state.spelling_session
    if session is None:
        show_screen("portal")
        st.rerun()

    if render_spelling_stats(session):
        session_controller.exit_game()
        st.rerun()

    entry = session.current_entry()
    if entry is None:
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("🔊 Hear it", use_container_width=True, disabled=session.is_paused):
            session_controller.repeat_word()
    with col2:
        label = "▶️ Resume" if session.is_paused else "⏸️ Pause"
        if st.button(label, use_container_width=True):
            session_controller.toggle_pause()
            st.rerun()
    with col3:
        if entry.sentence and st.button("📖 Sentence", use_container_width=True, disabled=session.is_paused):
            speech().speak(entry.sentence)

    if session.is_paused:
        st.info("⏸️ Paused. Take a break!")
        return

    if st.session_state.show_help:
        st.warning("💡 Need help? Listen to the sounds.")
        if st.button("🗣️ Sound it out", use_container_width=True):
            session_controller.sound_out_word()

    waiting = st.session_state.advance_at is not None
    with st.form(key=f"spell_{session.index}", clear_on_submit=True):
        guess = st.text_input("Type the word", disabled=waiting, autocomplete="off")
        submitted = st.form_submit_button("Check ✔️", type="primary", use_container_width=True, disabled=waiting)
    if submitted and guess:
        session_controller.check_spelling(guess)

    _render_feedback(st.session_state.last_result)


def _render_feedback(result: GuessResult | None) -> None:
    if result is None:
        return
    if result.status == GuessStatus.CORRECT:
        icon = MEDAL_ICONS[result.medal]
        bonus = " First try!" if result.first_try else ""
        st.success(f"{icon} Correct! {result.elapsed:.1f}s.{bonus}")
    elif result.status == GuessStatus.INCORRECT:
        st.error(f"❌ Not quite. {result.attempts_left} tries left.")
    elif result.status == GuessStatus.REVEAL:
        st.warning(f"The word was **{result.word}**. Keep practicing!")
