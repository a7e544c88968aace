"""
Environment configuration.

Settings come from environment variables (optionally a .env file):
- QUEST_STORAGE:   "sql" (default) or "json"
- DATABASE_URL:    SQLAlchemy URL for the sql backend (default: sqlite file in logs/)
- QUEST_JSON_PATH: file path for the json backend
- TEST_MODE:       "true" switches to separate test storage
- LOG_LEVEL:       logging level name (default INFO)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).parent.parent / "logs"
SNAPSHOT_KEY = "spellingBuddyData"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_storage_backend() -> str:
    backend = os.getenv("QUEST_STORAGE", "sql").lower()
    if backend not in ("sql", "json"):
        raise ValueError(
            f"Unknown QUEST_STORAGE backend {backend!r}. Use 'sql' or 'json'."
        )
    return backend


def get_database_url() -> str:
    """
    Get the database URL for the sql backend.

    In test mode a 'quest' database name is swapped for 'test_quest'.
    """
    base_url = os.getenv("DATABASE_URL")
    if not base_url:
        db_name = "test_quest.db" if is_test_mode() else "quest.db"
        return f"sqlite:///{DATA_DIR / db_name}"
    if is_test_mode():
        return base_url.replace("quest", "test_quest")
    return base_url


def get_json_path() -> Path:
    configured = os.getenv("QUEST_JSON_PATH")
    if configured:
        return Path(configured)
    file_name = "test_quest_data.json" if is_test_mode() else "quest_data.json"
    return DATA_DIR / file_name


def configure_logging() -> None:
    """Set up root logging once, level taken from LOG_LEVEL."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
