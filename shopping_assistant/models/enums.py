"""Enums for model fields."""

from enum import Enum


class Intent(str, Enum):
    """Kinds of action a spoken command can request."""

    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"
    SEARCH = "search"
    UNKNOWN = "unknown"

    def needs_item(self) -> bool:
        """Check if this intent must name an item to be actionable."""
        return self != Intent.UNKNOWN
