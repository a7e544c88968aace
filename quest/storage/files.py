"""
File and in-memory snapshot stores.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class JsonFileStore:
    """
    Snapshot stored as a single JSON file.

    Writes go to a sibling temp file first and are then renamed over the
    target, so a crash never leaves a half-written snapshot.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def save(self, snapshot: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(snapshot, encoding="utf-8")
        tmp_path.replace(self.path)


class MemoryStore:
    """Process-local store (tests, demos)."""

    def __init__(self, snapshot: Optional[str] = None):
        self.snapshot = snapshot
        self.saves = 0

    def load(self) -> Optional[str]:
        return self.snapshot

    def save(self, snapshot: str) -> None:
        self.snapshot = snapshot
        self.saves += 1
