import asyncio
import os
import random
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quest.models import AppData, Student
from quest.storage import MemoryStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSpeech:
    """
    Speech collaborator that records every call.

    With hang=True the awaitable utterances never complete, which exercises
    the timeout fallback.
    """

    def __init__(self, hang: bool = False):
        self.hang = hang
        self.calls: list[tuple[str, str]] = []

    def speak(self, text, voice_id=None):
        self.calls.append(("speak", text))

    async def _playback(self):
        if self.hang:
            await asyncio.Event().wait()

    def say(self, text, voice_id=None):
        self.calls.append(("say", text))
        return self._playback()

    def spell_out(self, text, voice_id=None):
        self.calls.append(("spell_out", text))
        return self._playback()

    def cancel_all(self):
        self.calls.append(("cancel_all", ""))

    def texts(self, kind: str) -> list[str]:
        return [text for call_kind, text in self.calls if call_kind == kind]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def speech():
    return RecordingSpeech()


@pytest.fixture
def student():
    return Student(
        lists={
            "Week 1": ["cat", "dog", "sun"],
            "Week 2": ["moon", "star"],
        },
        sentences={"Week 1": ["The cat sat.", "A dog ran."]},
    )


@pytest.fixture
def app_data(student):
    return AppData(students={"Mia": student})


@pytest.fixture
def store():
    return MemoryStore()
