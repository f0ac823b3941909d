"""Pydantic schemas for API requests and responses."""

from shopping_assistant.schemas.command import (
    CatalogEntryResponse,
    CommandResultResponse,
    ParsedCommandResponse,
    SuggestionResponse,
    SuggestionsResponse,
    VoiceCommandRequest,
)
from shopping_assistant.schemas.state import (
    ShoppingItemSchema,
    StateAck,
    StateResponse,
    StateUpdate,
)

__all__ = [
    "ShoppingItemSchema",
    "StateResponse",
    "StateUpdate",
    "StateAck",
    "VoiceCommandRequest",
    "ParsedCommandResponse",
    "CatalogEntryResponse",
    "CommandResultResponse",
    "SuggestionResponse",
    "SuggestionsResponse",
]
