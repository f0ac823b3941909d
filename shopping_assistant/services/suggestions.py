"""Shopping suggestions from purchase history, the season and known substitutes."""

from dataclasses import dataclass
from datetime import date

HISTORY_SUGGESTION_LIMIT = 5

# Keyed by month number (1 = January)
SEASONAL_ITEMS: dict[int, list[str]] = {
    1: ["oranges", "hot chocolate"],
    2: ["strawberries", "valentine chocolates"],
    3: ["asparagus", "spring mix salad"],
    4: ["mangoes", "iced tea"],
    5: ["watermelon", "ice cream"],
    6: ["berries mix", "grill sausages"],
    7: ["corn", "lemonade"],
    8: ["peaches", "iced coffee"],
    9: ["pumpkin", "soup mix"],
    10: ["sweet potatoes", "spices"],
    11: ["cranberries", "stuffing mix"],
    12: ["cookies", "baking chocolate"],
}

SUBSTITUTES: dict[str, list[str]] = {
    "milk": ["almond milk", "soy milk", "oat milk"],
    "bread": ["whole grain bread", "gluten-free bread"],
    "butter": ["olive oil spread", "ghee"],
    "sugar": ["brown sugar", "honey"],
}


@dataclass(frozen=True)
class Suggestion:
    """An item worth offering for quick add."""

    name: str
    reason: str


def history_suggestions(history: list[str], current_names: list[str]) -> list[Suggestion]:
    """Suggest previously bought items that are not on the list right now."""
    on_list = {name.lower() for name in current_names}
    names = [name for name in history if name.lower() not in on_list]
    return [
        Suggestion(name=name, reason="You often buy this")
        for name in names[:HISTORY_SUGGESTION_LIMIT]
    ]


def seasonal_suggestions(today: date | None = None) -> list[Suggestion]:
    today = today or date.today()
    return [Suggestion(name=name, reason="Seasonal pick") for name in SEASONAL_ITEMS[today.month]]


def substitute_suggestions(item_name: str | None) -> list[Suggestion]:
    if not item_name:
        return []
    key = item_name.lower()
    return [
        Suggestion(name=name, reason=f"Alternative to {key}") for name in SUBSTITUTES.get(key, [])
    ]
