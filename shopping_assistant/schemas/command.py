"""Voice command schemas."""

from pydantic import BaseModel, ConfigDict, Field

from shopping_assistant.models.enums import Intent
from shopping_assistant.schemas.state import ShoppingItemSchema


class VoiceCommandRequest(BaseModel):
    """Transcript of one spoken command."""

    text: str = Field(..., min_length=1, max_length=1000)


class ParsedCommandResponse(BaseModel):
    """Structured interpretation of a transcript."""

    model_config = ConfigDict(from_attributes=True)

    intent: Intent
    raw_text: str
    item_name: str | None = None
    quantity: int | None = None
    new_quantity: int | None = None
    new_item_name: str | None = None
    price_max: float | None = None


class CatalogEntryResponse(BaseModel):
    """A catalog product matching a search."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    brand: str
    price: float


class CommandResultResponse(BaseModel):
    """Outcome of applying a command to a user's list."""

    command: ParsedCommandResponse
    status: str
    message: str
    items: list[ShoppingItemSchema]
    history: list[str]
    search_results: list[CatalogEntryResponse] = []


class SuggestionResponse(BaseModel):
    """An item offered for quick add."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    reason: str


class SuggestionsResponse(BaseModel):
    """Suggestions grouped by source."""

    history: list[SuggestionResponse]
    seasonal: list[SuggestionResponse]
    substitutes: list[SuggestionResponse]
