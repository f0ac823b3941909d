"""Voice shopping assistant: speech in, list changes and status messages out."""

import logging
from typing import Any

from shopping_assistant.config import get_settings
from shopping_assistant.models.enums import Intent
from shopping_assistant.services.heuristic_parser import HeuristicParser, ParsedCommand
from shopping_assistant.services.shopping_session import CommandOutcome, ShoppingSession
from shopping_assistant.services.speech import (
    SpeechCapture,
    SpeechRecognizer,
    UnsupportedSpeechRecognizer,
)
from shopping_assistant.services.state_client import StateClient
from shopping_assistant.services.suggestions import (
    history_suggestions,
    seasonal_suggestions,
    substitute_suggestions,
)

logger = logging.getLogger(__name__)

READY_STATUS = "Tap the mic and speak a command."


class VoiceAssistant:
    """Tie speech capture, command parsing, the list session and persistence together.

    Commands are handled one at a time: each transcript is parsed, applied
    and reported before the next capture can start.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer | None = None,
        state_client: StateClient | None = None,
        session: ShoppingSession | None = None,
        language: str | None = None,
    ) -> None:
        settings = get_settings()
        self.parser = HeuristicParser()
        self.session = session or ShoppingSession()
        self.state_client = state_client or StateClient()
        self.capture = SpeechCapture(
            recognizer or UnsupportedSpeechRecognizer(),
            on_transcript=self.handle_transcript,
            on_error=self._capture_failed,
            on_end=self._capture_ended,
            language=language or settings.speech_language,
        )
        self.status = READY_STATUS
        self.transcript = ""
        self.last_command: ParsedCommand | None = None
        self.last_outcome: CommandOutcome | None = None

    async def load(self) -> None:
        """Populate the session from the backend, staying empty when offline."""
        state = await self.state_client.load()
        if self.state_client.backend_online:
            self.session = ShoppingSession.from_state(state)
            self.status = f"Loaded your list from the server. {READY_STATUS}"

    def toggle_listening(self) -> None:
        if not self.capture.is_supported:
            self.status = "Your browser does not support speech recognition."
            return
        if self.capture.is_listening:
            self.capture.stop()
            return
        if self.capture.start():
            self.status = "Listening..."
            self.transcript = ""

    def set_language(self, language: str) -> None:
        self.capture.set_language(language)

    def handle_transcript(self, text: str) -> CommandOutcome:
        self.transcript = text
        self.status = "Processing command..."
        return self.handle_command(self.parser.parse_command(text))

    def handle_command(self, command: ParsedCommand) -> CommandOutcome:
        self.last_command = command
        outcome = self.session.apply(command)
        self.last_outcome = outcome
        self.status = outcome.message
        if outcome.mutated:
            self.state_client.schedule_save(self.session.to_state())
        return outcome

    def quick_add(self, name: str) -> CommandOutcome:
        return self.handle_command(
            ParsedCommand(intent=Intent.ADD, raw_text=f"add {name}", item_name=name, quantity=1)
        )

    def remove_item(self, name: str) -> CommandOutcome:
        return self.handle_command(
            ParsedCommand(intent=Intent.REMOVE, raw_text=f"remove {name}", item_name=name)
        )

    def suggestions(self) -> dict[str, Any]:
        last_item = self.last_command.item_name if self.last_command else None
        return {
            "history": history_suggestions(
                self.session.history, [item.name for item in self.session.items]
            ),
            "seasonal": seasonal_suggestions(),
            "substitutes": substitute_suggestions(last_item),
        }

    def _capture_failed(self, error: str) -> None:
        logger.debug(f"Capture failed: {error}")
        self.status = "Could not understand. Please try again."

    def _capture_ended(self, heard_speech: bool) -> None:
        if not heard_speech:
            self.status = "No speech detected. Tap the mic to try again."
