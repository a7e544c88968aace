"""
LevelUp Quest - Main App

Streamlit UI for the spelling and memory practice games.
Run with: streamlit run app/streamlit_app.py
"""

import time

import streamlit as st

from app import memory_controller, session_controller
from app.router import PAGES
from app.state import ensure_session_state, speech
from quest import config


POLL_INTERVAL = 0.5  # seconds between reruns while a deferred step is pending


# ---- Page Setup ----

st.set_page_config(
    page_title="LevelUp Quest",
    page_icon="⭐",
    layout="centered"
)


@st.cache_resource
def _init_logging():
    """Configure logging once per server process."""
    config.configure_logging()


_init_logging()
ensure_session_state()


# ---- Deferred Steps ----

def _seconds_until_next_step() -> float | None:
    waits = []
    if st.session_state.advance_at is not None:
        waits.append(max(0.0, st.session_state.advance_at - time.time()))
    memory_wait = memory_controller.seconds_until_pending()
    if memory_wait is not None:
        waits.append(memory_wait)
    return min(waits) if waits else None


# ---- Main App ----

def main():
    """Main app entry point."""
    session_controller.tick()
    memory_controller.tick()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()

    # Queued speech must reach the browser before the poll below reruns the script
    speech().flush()

    wait = _seconds_until_next_step()
    if wait is not None:
        time.sleep(min(wait, POLL_INTERVAL))
        st.rerun()


main()
