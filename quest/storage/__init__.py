"""
Storage collaborator.

A store is anything with load() -> str | None and save(str). The helpers
here pair a store with the tolerant snapshot codec:

    from quest import storage

    store = storage.get_store()
    data = storage.load_app_data(store)
    ...
    storage.save_app_data(store, data)
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from quest.config import get_json_path, get_storage_backend
from quest.models import AppData
from quest.storage.database import SqlSnapshotStore, get_engine, init_db
from quest.storage.files import JsonFileStore, MemoryStore
from quest.transfer import dump_snapshot, load_snapshot

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    def load(self) -> Optional[str]:
        ...

    def save(self, snapshot: str) -> None:
        ...


def get_store() -> SnapshotStore:
    """Build the store selected by QUEST_STORAGE."""
    backend = get_storage_backend()
    if backend == "json":
        return JsonFileStore(get_json_path())
    return SqlSnapshotStore()


def load_app_data(store: SnapshotStore) -> AppData:
    """Read and decode the snapshot; never fails on bad data."""
    return load_snapshot(store.load())


def save_app_data(store: SnapshotStore, data: AppData) -> None:
    store.save(dump_snapshot(data))
    logger.debug("Snapshot saved (%d students)", len(data.students))


__all__ = [
    "SnapshotStore",
    "SqlSnapshotStore",
    "JsonFileStore",
    "MemoryStore",
    "get_engine",
    "init_db",
    "get_store",
    "load_app_data",
    "save_app_data",
]
