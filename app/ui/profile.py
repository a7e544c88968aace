"""
Student profile widgets: level card and medal counts.
"""

from __future__ import annotations

import streamlit as st

from quest import ledger
from quest.models import Medals, Student


def render_medals_row(medals: Medals) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("🥇 Gold", medals.gold)
    col2.metric("🥈 Silver", medals.silver)
    col3.metric("🥉 Bronze", medals.bronze)


def render_level_card(name: str, student: Student) -> None:
    """
    Render the student's avatar, level, XP bar and weekly goal.
    """
    level = ledger.level_for_xp(student.xp)
    st.markdown(
        f"""
        <div style="border-left: 8px solid {student.color}; padding: 0.6rem 1rem;
                    border-radius: 10px; background: #f9fafb; margin-bottom: 0.8rem;">
            <span style="font-size: 2.4rem;">{student.emoji}</span>
            <span style="font-size: 1.4rem; font-weight: 700; margin-left: 0.6rem;">{name}</span>
            <span style="color: #555; margin-left: 0.4rem;">the {student.role}</span>
        </div>
        """,
        unsafe_allow_html=True
    )

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Level", level, help=f"{student.xp} XP total")
        st.progress(ledger.level_progress_percent(student.xp) / 100)
    with col2:
        st.metric(
            "Weekly Quest",
            f"{student.weekly_progress} / {student.weekly_goal}",
            help=f"Goal met {ledger.goal_streak(student)} time(s)"
        )
        st.progress(ledger.goal_percent(student) / 100)

    render_medals_row(student.medals)
