"""Persisted shopping list state, one row per user."""

from sqlalchemy import JSON, Column, Integer, String

from shopping_assistant.database import Base
from shopping_assistant.models.mixins import TimestampMixin


class UserState(Base, TimestampMixin):
    """Items and purchase history for a single user id."""

    __tablename__ = "user_states"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, unique=True, index=True)
    # [{"id": "...", "name": "milk", "quantity": 1, "category": "Dairy"}, ...]
    items = Column(JSON, nullable=False, default=list)
    history = Column(JSON, nullable=False, default=list)
