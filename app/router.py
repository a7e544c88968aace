"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.analytics import render_analytics_page
from app.pages.parent import render_parent_page
from app.pages.portal import render_quest_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="⭐ Quest", render=render_quest_page),
    AppPage(title="👪 Parents", render=render_parent_page),
    AppPage(title="📊 Analytics", render=render_analytics_page),
]
