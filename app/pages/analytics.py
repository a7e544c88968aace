"""
Analytics page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import app_data
from quest.analytics import build_student_dashboard, leaderboard_frame


def render_analytics_page() -> None:
    st.subheader("Progress Analytics")

    data = app_data()
    if not data.students:
        st.info("No students yet.")
        return

    st.markdown("### 🏆 Leaderboard")
    st.dataframe(leaderboard_frame(data), hide_index=True, use_container_width=True)

    name = st.selectbox("Student", list(data.students), key="analytics_student")
    dashboard = build_student_dashboard(name, data.students[name])

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Level", dashboard.level, help=f"{dashboard.xp} XP")
    with col2:
        st.metric("Words Practiced", f"{dashboard.words_practiced:,}")
    with col3:
        st.metric("Goals Met", dashboard.goal_streak)

    if dashboard.word_table.empty:
        st.info("No practice history yet for this student.")
        return

    st.markdown("### Speed per Word")
    if dashboard.speed_seconds.empty:
        st.info("No correct answers yet.")
    else:
        st.caption("Average seconds to a correct spelling")
        st.bar_chart(dashboard.speed_seconds.rename("seconds").to_frame())

    st.markdown("### Accuracy per Word")
    st.bar_chart(dashboard.accuracy_percent.rename("accuracy").to_frame())

    st.markdown("### Word History")
    st.dataframe(dashboard.word_table, hide_index=True, use_container_width=True)

    if dashboard.goal_log:
        st.markdown("### Goal Log")
        st.write(", ".join(dashboard.goal_log))
