"""
Browser speech synthesis for Streamlit.

Utterances are queued during a script run and flushed at the end of the
page as a tiny HTML component that drives window.speechSynthesis.
The browser never reports completion back to Python, so waits are based on
estimated durations capped by the fallback timeouts in quest.constants.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from quest.constants import PHONETICS_RATE, SPEAK_RATE, SPELL_RATE
from quest.phonetics import phonetic_sounds
from quest.speech import estimate_spell_out_seconds, spelled_letters

QUEUE_KEY = "speech_queue"


@dataclass(frozen=True)
class Utterance:
    text: str
    rate: float = SPEAK_RATE


def speech_script(utterances: list[Utterance], voice_id: Optional[str], cancel_first: bool = True) -> str:
    """
    Build the HTML/JS snippet that speaks the queued utterances in order.
    """
    payload = json.dumps([{"text": u.text, "rate": u.rate} for u in utterances])
    voice = json.dumps(voice_id)
    cancel = "synth.cancel();" if cancel_first else ""
    # The nonce forces Streamlit to re-run the component on every flush.
    return f"""
    <script>
      // {time.time()}
      try {{
        const synth = window.parent.speechSynthesis || window.speechSynthesis;
        {cancel}
        const voices = synth.getVoices();
        const chosen = voices.find(v => v.voiceURI === {voice});
        {payload}.forEach(item => {{
          const u = new SpeechSynthesisUtterance(item.text);
          if (chosen) u.voice = chosen;
          u.rate = item.rate;
          synth.speak(u);
        }});
      }} catch (e) {{}}
    </script>
    """


class BrowserSpeech:
    """
    Speech collaborator backed by the browser's speech synthesis.
    """

    def __init__(self, voice_id: Optional[str] = None):
        self.voice_id = voice_id

    def _queue(self) -> list[Utterance]:
        if QUEUE_KEY not in st.session_state:
            st.session_state[QUEUE_KEY] = []
        return st.session_state[QUEUE_KEY]

    def speak(self, text: str, voice_id: Optional[str] = None) -> None:
        self._queue().append(Utterance(text=text))

    def announce(self, word: str) -> float:
        """
        Queue the word followed by its spelling.

        Returns:
            Estimated playback seconds
        """
        queue = self._queue()
        queue.append(Utterance(text=word))
        queue.append(Utterance(text=spelled_letters(word), rate=SPELL_RATE))
        return estimate_spell_out_seconds(word)

    def sound_out(self, word: str) -> None:
        """Queue the phonetic chunks of a word (the spelling helper)."""
        for sound in phonetic_sounds(word):
            self._queue().append(Utterance(text=sound, rate=PHONETICS_RATE))

    def cancel_all(self) -> None:
        self._queue().clear()
        components.html(speech_script([], self.voice_id), height=0)

    def flush(self) -> None:
        """Render queued utterances into the page and empty the queue."""
        queue = self._queue()
        if not queue:
            return
        components.html(speech_script(list(queue), self.voice_id), height=0)
        queue.clear()
