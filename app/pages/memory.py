"""
Memory match game screen.
"""

from __future__ import annotations

import streamlit as st

from app import memory_controller
from app.state import show_screen
from app.ui import render_memory_grid, render_memory_stats
from quest.memory import MemoryMatchEngine


def render_memory_screen() -> None:
    engine: MemoryMatchEngine | None = st.session_state.memory_engine
    if engine is None:
        show_screen("portal")
        st.rerun()

    if render_memory_stats(engine):
        memory_controller.exit_game()
        st.rerun()

    if engine.current_target:
        st.markdown(f"### 🎯 Find: **{engine.current_target}**")
    if st.session_state.memory_message:
        st.caption(st.session_state.memory_message)

    clicked = render_memory_grid(engine)
    if clicked is not None:
        memory_controller.flip_card(clicked)
        st.rerun()
