"""
Memory board UI.

Renders the cards as a grid of buttons; returns the clicked index.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from quest.memory import CardState, MemoryMatchEngine

COLUMNS = 4


def _card_label(word: str, state: CardState) -> str:
    if state == CardState.FACE_DOWN:
        return "❓"
    if state == CardState.MATCHED:
        return f"✅ {word}"
    return word


def render_memory_grid(engine: MemoryMatchEngine) -> Optional[int]:
    """
    Render the board.

    Returns:
        Index of the card clicked this run, or None
    """
    clicked = None
    for row_start in range(0, len(engine.cards), COLUMNS):
        cols = st.columns(COLUMNS)
        for offset, card in enumerate(engine.cards[row_start:row_start + COLUMNS]):
            with cols[offset]:
                pressed = st.button(
                    _card_label(card.word, card.state),
                    key=f"card_{engine.session_id}_{card.index}",
                    use_container_width=True,
                    disabled=engine.locked or card.state == CardState.MATCHED,
                    type="primary" if card.state == CardState.FLIPPED else "secondary",
                )
                if pressed:
                    clicked = card.index
    return clicked
