"""
SQLAlchemy ORM model for snapshot storage.

The core persists one opaque JSON document per key, so the table is a
plain key/value store.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class SnapshotRow(Base):
    """
    Latest serialized snapshot stored under a key.
    """
    __tablename__ = 'app_snapshots'

    key = Column(String(255), primary_key=True, nullable=False)
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<SnapshotRow({self.key}, updated_at={self.updated_at})>"
