"""Keyword-based categorization for shopping items."""

import re

DEFAULT_CATEGORY = "Other"

# Checked in order; the first group with a keyword inside the name wins.
CATEGORY_KEYWORDS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Dairy", re.compile(r"milk|cheese|yogurt|butter")),
    ("Produce", re.compile(r"apple|banana|orange|tomato|onion|lettuce|spinach")),
    ("Grains", re.compile(r"bread|rice|pasta|cereal")),
    ("Snacks", re.compile(r"chips|cookies|snack|chocolate")),
    ("Household", re.compile(r"soap|shampoo|toothpaste|detergent")),
)


def categorize_item(name: str) -> str:
    """Derive a category from an item name.

    Pure function of the name, so renaming an item and recategorizing it
    always agree.
    """
    name_lower = name.lower()
    for category, pattern in CATEGORY_KEYWORDS:
        if pattern.search(name_lower):
            return category
    return DEFAULT_CATEGORY
