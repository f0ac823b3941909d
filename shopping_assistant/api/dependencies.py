"""FastAPI dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from shopping_assistant.config import get_settings
from shopping_assistant.database import get_db
from shopping_assistant.services.state_store import StateStore


def get_user_id(
    user_id: Annotated[str | None, Query(alias="userId", max_length=255)] = None,
) -> str:
    """Resolve the userId query parameter, falling back to the configured default."""
    return user_id or get_settings().default_user_id


def get_state_store(db: Annotated[Session, Depends(get_db)]) -> StateStore:
    """Get a state store bound to the request's database session."""
    return StateStore(db)
