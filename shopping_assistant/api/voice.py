"""Voice command API endpoints."""

import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from shopping_assistant.api.dependencies import get_state_store, get_user_id
from shopping_assistant.schemas.command import (
    CommandResultResponse,
    ParsedCommandResponse,
    SuggestionsResponse,
    VoiceCommandRequest,
)
from shopping_assistant.services.heuristic_parser import HeuristicParser
from shopping_assistant.services.shopping_session import ShoppingSession
from shopping_assistant.services.state_store import StateStore
from shopping_assistant.services.suggestions import (
    history_suggestions,
    seasonal_suggestions,
    substitute_suggestions,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["voice"])


@router.post("/voice/parse", response_model=ParsedCommandResponse)
def parse_voice_command(voice_data: VoiceCommandRequest):
    """Interpret a transcript without touching any list."""
    command = HeuristicParser.parse_command(voice_data.text)
    return ParsedCommandResponse.model_validate(command)


@router.post("/voice/command", response_model=CommandResultResponse)
def apply_voice_command(
    voice_data: VoiceCommandRequest,
    user_id: Annotated[str, Depends(get_user_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
):
    """Interpret a transcript and apply it to the user's stored list.

    Rejected or unrecognised commands leave the stored state untouched
    and are reported through status and message.
    """
    command = HeuristicParser.parse_command(voice_data.text)
    session = ShoppingSession.from_state(store.get_state(user_id))
    outcome = session.apply(command)

    if outcome.mutated:
        state = session.to_state()
        store.set_state(user_id, state["items"], state["history"])

    logger.info(f"Voice command for user '{user_id}': {command.intent.value} -> {outcome.status}")

    return CommandResultResponse(
        command=ParsedCommandResponse.model_validate(command),
        status=outcome.status,
        message=outcome.message,
        items=[item.to_dict() for item in outcome.items],
        history=outcome.history,
        search_results=[asdict(entry) for entry in outcome.search_results],
    )


@router.get("/suggestions", response_model=SuggestionsResponse)
def get_suggestions(
    user_id: Annotated[str, Depends(get_user_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
    item: Annotated[str | None, Query(max_length=255)] = None,
):
    """Get quick-add suggestions from history, the season and substitutes for an item."""
    session = ShoppingSession.from_state(store.get_state(user_id))
    frequent = history_suggestions(session.history, [i.name for i in session.items])
    return SuggestionsResponse(
        history=[asdict(s) for s in frequent],
        seasonal=[asdict(s) for s in seasonal_suggestions()],
        substitutes=[asdict(s) for s in substitute_suggestions(item)],
    )
