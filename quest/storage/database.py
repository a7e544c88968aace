"""
Database - snapshot storage on SQLAlchemy.

Handles ONLY database I/O. Encoding and decoding of the snapshot document
lives in quest.transfer.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from quest.config import SNAPSHOT_KEY, get_database_url
from quest.storage.models import Base, SnapshotRow


def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Create an engine for the configured database.

    SQLite files get their parent directory created on demand.
    """
    db_url = db_url or get_database_url()
    if db_url.startswith("sqlite:///") and db_url != "sqlite:///:memory:":
        Path(db_url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(db_url, pool_pre_ping=True, echo=False)


def init_db(engine: Engine) -> None:
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times.
    """
    Base.metadata.create_all(engine)


class SqlSnapshotStore:
    """
    Key/value snapshot store backed by a SQL table.
    """

    def __init__(self, engine: Optional[Engine] = None, key: str = SNAPSHOT_KEY):
        self.engine = engine or get_engine()
        self.key = key
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        init_db(self.engine)

    def _session(self) -> Session:
        return self._session_factory()

    def load(self) -> Optional[str]:
        session = self._session()
        try:
            row = session.get(SnapshotRow, self.key)
            return row.payload if row is not None else None
        finally:
            session.close()

    def save(self, snapshot: str) -> None:
        session = self._session()
        try:
            row = session.get(SnapshotRow, self.key)
            now = datetime.now(timezone.utc)
            if row is None:
                session.add(SnapshotRow(key=self.key, payload=snapshot, updated_at=now))
            else:
                row.payload = snapshot
                row.updated_at = now
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
