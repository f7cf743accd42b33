"""
Speech synthesis adapters.

`speak` is fire-and-forget: it hands the text to the synthesizer and returns
at once. Callers never observe completion or failure.
"""

import logging
import queue
import threading
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .constants import DEFAULT_SPEECH_RATE, DEFAULT_SPEECH_VOLUME

logger = logging.getLogger(__name__)


@runtime_checkable
class SpeechService(Protocol):
    """Converts text to audible speech for a locale."""

    def speak(self, text: str, locale: str) -> None:
        ...


class NullSpeechService:
    """Drops every utterance. Used when the viewer runs muted."""

    def speak(self, text: str, locale: str) -> None:
        logger.debug(f"Muted utterance ({locale}): {text!r}")


def _default_engine_factory() -> Any:
    import pyttsx3

    return pyttsx3.init()


def _voice_matches(voice: Any, locale: str) -> bool:
    """
    Check a pyttsx3 voice against a locale tag such as 'it-IT'.

    Drivers expose the language either in the voice id or in a `languages`
    list whose entries may be bytes with a length prefix (espeak).
    """
    wanted = {locale.lower(), locale.lower().replace("-", "_")}
    language = locale.split("-")[0].lower()

    langs = []
    for lang in getattr(voice, "languages", None) or []:
        if isinstance(lang, (bytes, bytearray)):
            lang = bytes(lang).decode(errors="ignore")
        langs.append(str(lang).lower().lstrip("\x05"))

    if any(lang in wanted or lang == language for lang in langs):
        return True
    voice_id = (getattr(voice, "id", "") or "").lower()
    return any(tag in voice_id for tag in wanted)


class Pyttsx3SpeechService:
    """
    Offline speech through pyttsx3.

    The engine lives on one daemon worker thread; `speak` only enqueues. When
    a new utterance is queued while another plays, it is spoken afterwards.
    """

    def __init__(
        self,
        rate: int = DEFAULT_SPEECH_RATE,
        volume: float = DEFAULT_SPEECH_VOLUME,
        engine_factory: Optional[Callable[[], Any]] = None,
    ):
        self.rate = rate
        self.volume = volume
        self._engine_factory = engine_factory or _default_engine_factory
        self._engine: Any = None
        self._voice_locale: Optional[str] = None
        self._queue: queue.Queue = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def speak(self, text: str, locale: str) -> None:
        if not text:
            return
        self._ensure_worker()
        self._queue.put((text, locale))

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop the worker after the queued utterances have been spoken."""
        with self._lock:
            worker = self._worker
            self._worker = None
        if worker is not None:
            self._queue.put(None)
            worker.join(timeout)

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(
                    target=self._run, name="cardflip-speech", daemon=True
                )
                self._worker.start()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is None:
                    return
                self._say(*item)
            finally:
                self._queue.task_done()

    def _init_engine(self) -> Any:
        engine = self._engine_factory()
        engine.setProperty("rate", self.rate)
        engine.setProperty("volume", self.volume)
        self._voice_locale = None
        return engine

    def _select_voice(self, engine: Any, locale: str) -> None:
        if self._voice_locale == locale:
            return
        self._voice_locale = locale
        try:
            voices = engine.getProperty("voices") or []
        except Exception as e:  # noqa: BLE001
            logger.warning(f"Could not list TTS voices: {e}")
            return
        for voice in voices:
            if _voice_matches(voice, locale):
                engine.setProperty("voice", voice.id)
                logger.info(f"Selected TTS voice {voice.id} for {locale}")
                return
        logger.warning(f"No TTS voice for {locale}; using the default voice.")

    def _say(self, text: str, locale: str) -> None:
        for attempt in (1, 2):
            try:
                if self._engine is None:
                    self._engine = self._init_engine()
                self._select_voice(self._engine, locale)
                self._engine.say(text)
                self._engine.runAndWait()
                return
            except Exception as e:  # noqa: BLE001
                if attempt == 1:
                    logger.warning(
                        f"TTS failed, reinitializing engine: {e}"
                    )
                    self._engine = None
                else:
                    logger.error(f"TTS failed after reinit: {e}")
