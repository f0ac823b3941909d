"""In-memory shopping list session that applies parsed commands."""

import logging
import uuid
from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any

from shopping_assistant.models.enums import Intent
from shopping_assistant.services.catalog import CatalogEntry, search_catalog
from shopping_assistant.services.categorization import categorize_item
from shopping_assistant.services.heuristic_parser import ParsedCommand

logger = logging.getLogger(__name__)

MAX_ITEM_NAME_LENGTH = 255
USAGE_HINT = "Try saying 'Add milk' or 'Find apples under 5 dollars'."
MODIFY_HINT = 'Say something like "Change milk to 3" or "Update milk to oat milk".'


class OutcomeStatus(StrEnum):
    """Result codes reported after applying a command."""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    RENAMED = "renamed"
    FOUND = "found"
    NOT_FOUND = "not_found"
    NO_ITEM = "no_item"
    CLARIFY = "clarify"
    UNKNOWN = "unknown"


@dataclass
class ShoppingItem:
    """An entry on the shopping list."""

    name: str
    quantity: int
    category: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def create(cls, name: str, quantity: int) -> "ShoppingItem":
        return cls(name=name, quantity=quantity, category=categorize_item(name))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShoppingItem":
        """Build an item from stored data.

        Raises:
            ValueError: if the quantity is not a positive whole number
        """
        name = str(data["name"])
        quantity = data.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int | str):
            raise ValueError(f"Invalid quantity for '{name}': {quantity!r}")
        quantity = int(quantity)
        if quantity < 1:
            raise ValueError(f"Quantity for '{name}' must be positive, got {quantity}")
        return cls(
            id=str(data.get("id") or uuid.uuid4().hex),
            name=name,
            quantity=quantity,
            category=data.get("category") or categorize_item(name),
        )

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def rename(self, new_name: str) -> None:
        self.name = new_name
        self.category = categorize_item(new_name)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CommandOutcome:
    """What happened when a command was applied, plus the resulting state."""

    status: OutcomeStatus
    message: str
    items: list[ShoppingItem]
    history: list[str]
    search_results: list[CatalogEntry] = field(default_factory=list)

    @property
    def mutated(self) -> bool:
        return self.status in (
            OutcomeStatus.ADDED,
            OutcomeStatus.REMOVED,
            OutcomeStatus.UPDATED,
            OutcomeStatus.RENAMED,
        )


class ShoppingSession:
    """Shopping list and purchase history owned by one user session.

    The list never holds two items whose names differ only by case, and
    no item is kept with a quantity below one. The history is append-only
    and holds each lower-cased name once.
    """

    def __init__(
        self,
        items: list[ShoppingItem] | None = None,
        history: list[str] | None = None,
    ) -> None:
        self._items: list[ShoppingItem] = list(items or [])
        self._history: list[str] = list(history or [])

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> "ShoppingSession":
        """Build a session from a persisted {items, history} payload."""
        raw_items = state.get("items")
        raw_history = state.get("history")
        if not isinstance(raw_items, list):
            raw_items = []
        if not isinstance(raw_history, list):
            raw_history = []
        items = []
        for raw in raw_items:
            # Entries without a name cannot be matched or categorized
            if not isinstance(raw, dict) or not raw.get("name"):
                continue
            try:
                items.append(ShoppingItem.from_dict(raw))
            except ValueError as e:
                logger.warning(f"Skipping stored item: {e}")
        history = [str(h) for h in raw_history]
        return cls(items=items, history=history)

    @property
    def items(self) -> list[ShoppingItem]:
        return [ShoppingItem(**item.to_dict()) for item in self._items]

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def to_state(self) -> dict[str, Any]:
        """Serialize to the {items, history} payload used for persistence."""
        return {
            "items": [item.to_dict() for item in self._items],
            "history": list(self._history),
        }

    def find(self, name: str) -> ShoppingItem | None:
        return next((item for item in self._items if item.matches(name)), None)

    def apply(self, command: ParsedCommand) -> CommandOutcome:
        """Apply a parsed command and report the outcome with the new state."""
        if not command.item_name and command.intent.needs_item():
            return self._outcome(
                OutcomeStatus.NO_ITEM, "I heard you, but could not detect the item name."
            )

        names = (command.item_name or "", command.new_item_name or "")
        if any(len(name.strip()) > MAX_ITEM_NAME_LENGTH for name in names):
            return self._outcome(
                OutcomeStatus.CLARIFY,
                f"That item name is too long. Use at most {MAX_ITEM_NAME_LENGTH} characters.",
            )

        if command.intent == Intent.ADD:
            return self._add(command)
        if command.intent == Intent.REMOVE:
            return self._remove(command)
        if command.intent == Intent.MODIFY:
            return self._modify(command)
        if command.intent == Intent.SEARCH:
            return self._search(command)

        return self._outcome(
            OutcomeStatus.UNKNOWN, f"I couldn't recognize that command. {USAGE_HINT}"
        )

    def _add(self, command: ParsedCommand) -> CommandOutcome:
        name = command.item_name.strip()
        # "add zero milk" still adds one
        quantity = command.quantity or 1

        existing = self.find(name)
        if existing:
            existing.quantity += quantity
        else:
            self._items.append(ShoppingItem.create(name, quantity))

        name_lower = name.lower()
        if name_lower not in self._history:
            self._history.append(name_lower)

        logger.info(f"Added {quantity} x '{name}'")
        return self._outcome(OutcomeStatus.ADDED, f"Added {quantity} {name} to your list.")

    def _remove(self, command: ParsedCommand) -> CommandOutcome:
        name = command.item_name.strip()
        remaining = [item for item in self._items if not item.matches(name)]
        if len(remaining) == len(self._items):
            return self._outcome(OutcomeStatus.NOT_FOUND, f"{name} is not on your list.")

        self._items = remaining
        logger.info(f"Removed '{name}'")
        return self._outcome(OutcomeStatus.REMOVED, f"Removed {name} from your list.")

    def _modify(self, command: ParsedCommand) -> CommandOutcome:
        name = command.item_name.strip()
        new_name = (command.new_item_name or "").strip()

        has_quantity = command.new_quantity is not None and command.new_quantity >= 0
        if not has_quantity and not new_name:
            return self._outcome(OutcomeStatus.CLARIFY, MODIFY_HINT)

        target = self.find(name)
        if target is None:
            return self._outcome(OutcomeStatus.NOT_FOUND, f"{name} is not on your list.")

        if has_quantity:
            if command.new_quantity == 0:
                self._items.remove(target)
                logger.info(f"Quantity of '{name}' set to 0, item removed")
                return self._outcome(
                    OutcomeStatus.REMOVED, f"Set {name} to 0 and removed it from your list."
                )
            target.quantity = command.new_quantity
            logger.info(f"Quantity of '{name}' set to {command.new_quantity}")
            return self._outcome(
                OutcomeStatus.UPDATED, f"Updated {name} quantity to {command.new_quantity}."
            )

        duplicate = self.find(new_name)
        if duplicate is not None and duplicate is not target:
            # Renaming onto an existing entry merges the two
            duplicate.quantity += target.quantity
            self._items.remove(target)
        else:
            target.rename(new_name)
        logger.info(f"Renamed '{name}' to '{new_name}'")
        return self._outcome(OutcomeStatus.RENAMED, f"Changed {name} to {new_name}.")

    def _search(self, command: ParsedCommand) -> CommandOutcome:
        results = search_catalog(command.item_name.strip(), command.price_max)
        if not results:
            return self._outcome(
                OutcomeStatus.NOT_FOUND, "No items found that match your search."
            )
        return self._outcome(
            OutcomeStatus.FOUND, f"Found {len(results)} matching items.", search_results=results
        )

    def _outcome(
        self,
        status: OutcomeStatus,
        message: str,
        search_results: list[CatalogEntry] | None = None,
    ) -> CommandOutcome:
        return CommandOutcome(
            status=status,
            message=message,
            items=self.items,
            history=self.history,
            search_results=search_results or [],
        )
