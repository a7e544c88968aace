"""UI Components for LevelUp Quest"""

from app.ui.memory_grid import render_memory_grid
from app.ui.profile import render_level_card, render_medals_row
from app.ui.session_stats import render_memory_stats, render_spelling_stats, render_win_screen

__all__ = [
    "render_memory_grid",
    "render_level_card",
    "render_medals_row",
    "render_memory_stats",
    "render_spelling_stats",
    "render_win_screen",
]
