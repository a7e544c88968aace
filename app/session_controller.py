"""
Spelling session lifecycle helpers for the Streamlit app.
"""

from __future__ import annotations

import logging
import time

import streamlit as st

from app.state import current_student, persist, show_screen, speech
from quest import ledger
from quest.constants import CORRECT_ADVANCE_DELAY, REVEAL_ADVANCE_DELAY
from quest.models import NoWordsError
from quest.spelling import GuessResult, GuessStatus, SpellingSession
from quest.speech import spelled_letters
from quest.word_lists import build_word_entries

logger = logging.getLogger(__name__)


def start_practice(list_key: str) -> None:
    """
    Start a new spelling session for the current student.
    """
    student = current_student()
    if student is None:
        return

    entries = build_word_entries(student, list_key)
    try:
        session = SpellingSession(entries)
    except NoWordsError:
        st.session_state.flash = "⚠️ No words in this quest! Add some words first."
        return

    st.session_state.current_list_key = list_key
    st.session_state.spelling_session = session
    st.session_state.last_result = None
    st.session_state.advance_at = None
    st.session_state.show_help = False
    logger.info("Spelling session started: %s (%d words)", list_key, session.length)
    show_screen("spelling")
    _present_current_word(session)


def _present_current_word(session: SpellingSession) -> None:
    session.reset_timer()
    entry = session.current_entry()
    if entry is not None and not session.is_paused:
        speech().speak(entry.word)


def repeat_word() -> None:
    session: SpellingSession | None = st.session_state.spelling_session
    if session is None or session.is_paused:
        return
    entry = session.current_entry()
    if entry is not None:
        speech().speak(entry.word)


def sound_out_word() -> None:
    session: SpellingSession | None = st.session_state.spelling_session
    if session is None or session.is_paused:
        return
    entry = session.current_entry()
    if entry is not None:
        speech().sound_out(entry.word)


def check_spelling(guess: str) -> GuessResult | None:
    """
    Evaluate a guess and apply its consequences to the student record.
    """
    session: SpellingSession | None = st.session_state.spelling_session
    student = current_student()
    if session is None or student is None or st.session_state.advance_at is not None:
        return None

    result = session.evaluate_guess(guess)
    st.session_state.last_result = result

    if result.status == GuessStatus.CORRECT:
        update = ledger.record_spelling_correct(student, result)
        if update.goal_reached:
            st.session_state.flash = "🏆 Weekly quest goal reached!"
        persist()
        speech().speak("Correct!")
        st.session_state.advance_at = time.time() + CORRECT_ADVANCE_DELAY
    elif result.status == GuessStatus.INCORRECT:
        ledger.record_spelling_miss(student, session.current_entry().word)
        persist()
        if result.show_help:
            st.session_state.show_help = True
        speech().speak("Incorrect!")
    elif result.status == GuessStatus.REVEAL:
        ledger.record_spelling_miss(student, result.word, revealed=True)
        persist()
        speech().speak(f"Correct is {spelled_letters(result.word)}.")
        st.session_state.advance_at = time.time() + REVEAL_ADVANCE_DELAY
    return result


def tick() -> bool:
    """
    Run the pending advance once its delay has passed.

    Returns:
        True if something changed and the page should rerun
    """
    advance_at = st.session_state.advance_at
    session: SpellingSession | None = st.session_state.spelling_session
    if advance_at is None or session is None or time.time() < advance_at:
        return False

    st.session_state.advance_at = None
    result: GuessResult | None = st.session_state.last_result
    if result is not None and result.is_session_complete:
        finish_session()
        return True

    st.session_state.last_result = None
    st.session_state.show_help = False
    if session.advance() is None:
        finish_session()
    else:
        _present_current_word(session)
    return True


def toggle_pause() -> None:
    session: SpellingSession | None = st.session_state.spelling_session
    if session is None:
        return
    if session.toggle_pause():
        speech().cancel_all()
    else:
        repeat_word()


def finish_session() -> None:
    """
    Bank session medals and show the win screen.
    """
    session: SpellingSession | None = st.session_state.spelling_session
    student = current_student()
    if session is None or student is None:
        return
    ledger.finish_spelling_session(student, session.session_medals)
    persist()
    st.session_state.win_medals = session.session_medals
    st.session_state.spelling_session = None
    logger.info("Spelling session finished: %s", session.session_medals)
    show_screen("win")


def exit_game() -> None:
    st.session_state.spelling_session = None
    st.session_state.advance_at = None
    st.session_state.last_result = None
    st.session_state.win_medals = None
    speech().cancel_all()
    show_screen("portal")
