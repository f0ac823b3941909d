"""Speech capture: platform recognizer interface and single-session controller."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from shopping_assistant.config import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class SpeechRecognizer(ABC):
    """A platform speech-to-text capability.

    Implementations report back through the callbacks handed to start():
    one final transcript per utterance, an error, then the end of the session.
    """

    is_supported: bool = True

    @abstractmethod
    def start(
        self,
        language: str,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        """Begin capturing one utterance."""

    @abstractmethod
    def stop(self) -> None:
        """Stop capturing."""


class UnsupportedSpeechRecognizer(SpeechRecognizer):
    """Stand-in used when the platform offers no speech recognition."""

    is_supported = False

    def start(
        self,
        language: str,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        return None

    def stop(self) -> None:
        return None


class SpeechCapture:
    """Gate a recognizer so only one capture session runs at a time.

    Results arriving after stop() are dropped.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        on_transcript: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[bool], None],
        language: str = "en-US",
    ) -> None:
        self.recognizer = recognizer
        self.language = language
        self.is_listening = False
        self._heard_speech = False
        self._on_transcript = on_transcript
        self._on_error = on_error
        self._on_end = on_end

    @property
    def is_supported(self) -> bool:
        return self.recognizer.is_supported

    def set_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported speech language: {language}")
        self.language = language

    def start(self) -> bool:
        """Start a capture session. Returns False if unsupported or already listening."""
        if not self.is_supported or self.is_listening:
            return False

        self.is_listening = True
        self._heard_speech = False
        try:
            self.recognizer.start(self.language, self._result, self._error, self._end)
        except Exception as e:
            # Recognizer refused to start (e.g. microphone permission denied)
            self._error(str(e))
            return False
        return True

    def stop(self) -> None:
        if not self.is_listening:
            return
        self.is_listening = False
        self.recognizer.stop()

    def _result(self, transcript: str) -> None:
        if not self.is_listening:
            logger.debug("Dropping transcript delivered after stop")
            return
        self._heard_speech = True
        self._on_transcript(transcript)

    def _error(self, error: str) -> None:
        logger.warning(f"Speech recognition error: {error}")
        self.is_listening = False
        self._on_error(error)

    def _end(self) -> None:
        # Sessions already closed by stop() or an error end quietly
        if not self.is_listening:
            return
        self.is_listening = False
        self._on_end(self._heard_speech)
