"""
Speech collaborator contract.

The core never plays audio itself. It talks to an object with:
- speak(text, voice_id=None): fire-and-forget utterance
- say(text, voice_id=None): awaitable utterance, resolves when playback ends
- spell_out(text, voice_id=None): awaitable letter-by-letter spelling
- cancel_all(): stop anything queued

Playback completion is not guaranteed to be reported, so every wait goes
through await_speech(), which races the completion against a timeout and
always returns through one path.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Optional, Protocol

logger = logging.getLogger(__name__)


class SpeechCollaborator(Protocol):
    def speak(self, text: str, voice_id: Optional[str] = None) -> None:
        ...

    def say(self, text: str, voice_id: Optional[str] = None) -> Awaitable[None]:
        ...

    def spell_out(self, text: str, voice_id: Optional[str] = None) -> Awaitable[None]:
        ...

    def cancel_all(self) -> None:
        ...


class SilentSpeech:
    """Speech collaborator that plays nothing and completes immediately."""

    def speak(self, text: str, voice_id: Optional[str] = None) -> None:
        logger.debug("speak: %s", text)

    async def say(self, text: str, voice_id: Optional[str] = None) -> None:
        logger.debug("say: %s", text)

    async def spell_out(self, text: str, voice_id: Optional[str] = None) -> None:
        logger.debug("spell_out: %s", text)

    def cancel_all(self) -> None:
        pass


def spelled_letters(word: str) -> str:
    """'cat' -> 'c a t' (what the voice reads letter by letter)."""
    return " ".join(word)


def estimate_spell_out_seconds(word: str) -> float:
    """
    Rough playback length of saying a word and then spelling it.

    Used where completion cannot be observed (browser playback).
    """
    return 1.0 + 0.6 * len(word)


async def await_speech(playback: Awaitable[None], timeout: float) -> bool:
    """
    Wait for playback to finish, or give up after timeout seconds.

    Returns:
        True if playback reported completion, False if the timeout fired
    """
    try:
        await asyncio.wait_for(playback, timeout=timeout)
        return True
    except asyncio.TimeoutError:
        logger.warning("Speech completion not reported after %.1fs, continuing", timeout)
        return False
