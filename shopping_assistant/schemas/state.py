"""Shopping list state schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ShoppingItemSchema(BaseModel):
    """A shopping list entry as exchanged with clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    quantity: int = Field(..., ge=0)
    category: str


class StateResponse(BaseModel):
    """Stored list state for one user."""

    items: list[dict[str, Any]] = []
    history: list[str] = []


class StateUpdate(BaseModel):
    """Replacement state posted by a client.

    Values that are not lists are accepted and stored as empty lists.
    """

    items: Any = None
    history: Any = None


class StateAck(BaseModel):
    """Acknowledgment of a state write."""

    ok: bool = True
