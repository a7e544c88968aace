"""
Memory game lifecycle helpers for the Streamlit app.

Streamlit reruns the script on every interaction, so deferred steps are
stored as (session_id, step, due_time) in memory_pending and executed by
tick() once due. The session_id ties each pending step to the engine that
scheduled it; steps left over from an exited game are dropped.
"""

from __future__ import annotations

import logging
import random
import time

import streamlit as st

from app.state import current_student, persist, show_screen, speech
from quest import ledger
from quest.constants import (
    MATCH_FEEDBACK_DELAY,
    MATCH_SETTLE_DELAY,
    MISMATCH_DELAY,
    PRAISE_PHRASES,
    REJECT_SETTLE_DELAY,
    REJECT_SPEECH_TIMEOUT,
    REJECT_VISUAL_DELAY,
    SPELL_OUT_TIMEOUT,
)
from quest.memory import FlipStatus, MemoryMatchEngine
from quest.memory_runner import rejection_message
from quest.models import Medals, NoWordsError
from quest.word_lists import memory_words

logger = logging.getLogger(__name__)


def _schedule(engine: MemoryMatchEngine, step: str, delay: float) -> None:
    st.session_state.memory_pending = (engine.session_id, step, time.time() + delay)


def _announce(engine: MemoryMatchEngine, target: str | None) -> None:
    if target is None:
        return
    st.session_state.memory_message = f"Find: {target}"
    voice = speech()
    voice.cancel_all()
    seconds = voice.announce(target)
    _schedule(engine, "announced", min(seconds, SPELL_OUT_TIMEOUT))


def start_memory(list_key: str) -> None:
    """
    Start a memory game for the current student.
    """
    student = current_student()
    if student is None:
        return
    try:
        engine = MemoryMatchEngine(memory_words(student, list_key), rng=random.Random())
    except NoWordsError:
        st.session_state.flash = "⚠️ This list is empty!"
        return

    st.session_state.current_list_key = list_key
    st.session_state.memory_engine = engine
    logger.info("Memory game started: %s (%d pairs)", list_key, engine.total_pairs)
    show_screen("memory")
    _announce(engine, engine.choose_target())


def flip_card(index: int) -> None:
    engine: MemoryMatchEngine | None = st.session_state.memory_engine
    student = current_student()
    if engine is None or student is None:
        return

    outcome = engine.flip(index)
    if outcome.status == FlipStatus.IGNORED:
        return

    voice = speech()
    voice.speak(outcome.word)
    if outcome.status == FlipStatus.MATCH:
        # XP lands after the feedback delay, dropped if the game is exited first
        _schedule(engine, "credit", MATCH_FEEDBACK_DELAY)
    elif outcome.status == FlipStatus.REJECTED:
        message = rejection_message(outcome.word, outcome.target)
        st.session_state.memory_message = message
        voice.speak(message)
        speech_seconds = min(0.08 * len(message), REJECT_SPEECH_TIMEOUT)
        _schedule(engine, "settle", REJECT_VISUAL_DELAY + speech_seconds + REJECT_SETTLE_DELAY)
    elif outcome.status == FlipStatus.MISMATCH:
        st.session_state.memory_message = "Not a match, try again!"
        _schedule(engine, "settle", MISMATCH_DELAY)


def tick() -> bool:
    """
    Run the pending deferred step once it is due.

    Returns:
        True if something changed and the page should rerun
    """
    pending = st.session_state.memory_pending
    engine: MemoryMatchEngine | None = st.session_state.memory_engine
    if pending is None:
        return False

    session_id, step, due = pending
    if engine is None or engine.session_id != session_id:
        st.session_state.memory_pending = None
        return False
    if time.time() < due:
        return False

    st.session_state.memory_pending = None
    if step == "announced":
        engine.target_announced()
        return True
    if step == "credit":
        _credit_match(engine)
        return True

    settlement = engine.finish_pair()
    if settlement is None:
        return True
    if settlement.won:
        _game_won()
    else:
        _announce(engine, settlement.next_target)
    return True


def _credit_match(engine: MemoryMatchEngine) -> None:
    student = current_student()
    if student is not None:
        ledger.record_memory_match(student)
        persist()
    st.session_state.memory_message = random.choice(PRAISE_PHRASES)
    _schedule(engine, "settle", MATCH_SETTLE_DELAY)


def seconds_until_pending() -> float | None:
    pending = st.session_state.memory_pending
    if pending is None:
        return None
    return max(0.0, pending[2] - time.time())


def _game_won() -> None:
    student = current_student()
    if student is None:
        return
    update = ledger.record_memory_win(student)
    if update.goal_reached:
        st.session_state.flash = "🏆 Weekly quest goal reached!"
    persist()
    st.session_state.win_medals = Medals(gold=1)
    st.session_state.memory_engine = None
    logger.info("Memory game won")
    show_screen("win")


def restart() -> None:
    if st.session_state.current_list_key:
        start_memory(st.session_state.current_list_key)


def exit_game() -> None:
    st.session_state.memory_engine = None
    st.session_state.memory_pending = None
    st.session_state.memory_message = ""
    speech().cancel_all()
    show_screen("portal")
