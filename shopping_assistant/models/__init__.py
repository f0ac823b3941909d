"""SQLAlchemy models."""

from shopping_assistant.models.enums import Intent
from shopping_assistant.models.user_state import UserState

__all__ = [
    "Intent",
    "UserState",
]
