"""Keyed storage of shopping list state per user."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from shopping_assistant.models.user_state import UserState

logger = logging.getLogger(__name__)


class StateStore:
    """Read and upsert {items, history} documents keyed by user id."""

    def __init__(self, db: Session):
        self.db = db

    def get_state(self, user_id: str) -> dict[str, Any]:
        """Return the stored state, or empty defaults when the user has none."""
        row = self.db.query(UserState).filter(UserState.user_id == user_id).first()
        if row is None:
            return {"items": [], "history": []}
        return {
            "items": row.items if isinstance(row.items, list) else [],
            "history": row.history if isinstance(row.history, list) else [],
        }

    def set_state(self, user_id: str, items: Any, history: Any) -> UserState:
        """Upsert state for a user; anything that is not a list is stored as empty."""
        items = items if isinstance(items, list) else []
        history = history if isinstance(history, list) else []

        row = self.db.query(UserState).filter(UserState.user_id == user_id).first()
        if row is None:
            row = UserState(user_id=user_id, items=items, history=history)
            self.db.add(row)
        else:
            row.items = items
            row.history = history
        self.db.commit()
        self.db.refresh(row)

        logger.info(f"Saved state for user '{user_id}' ({len(items)} items)")
        return row
