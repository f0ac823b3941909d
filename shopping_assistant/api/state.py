"""Shopping list state API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from shopping_assistant.api.dependencies import get_state_store, get_user_id
from shopping_assistant.schemas.state import StateAck, StateResponse, StateUpdate
from shopping_assistant.services.state_store import StateStore

router = APIRouter(prefix="/api/state", tags=["state"])


@router.get("", response_model=StateResponse)
def get_state(
    user_id: Annotated[str, Depends(get_user_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
):
    """Get the stored list and history, or empty defaults for a new user."""
    return store.get_state(user_id)


@router.post("", response_model=StateAck)
def save_state(
    state: StateUpdate,
    user_id: Annotated[str, Depends(get_user_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
):
    """Replace the stored list and history for a user."""
    store.set_state(user_id, state.items, state.history)
    return StateAck(ok=True)
