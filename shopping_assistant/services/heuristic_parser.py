"""Deterministic heuristic parsing for spoken shopping commands - no NLP models."""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal

from shopping_assistant.models.enums import Intent

logger = logging.getLogger(__name__)

NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

_NUMBER_WORD_ALT = "|".join(NUMBER_WORDS)
_UNIT_NOUN_ALT = r"items?|pieces?|bottles?|packs?|oranges?|apples?"

_DIGIT_QUANTITY = re.compile(rf"\b(\d+)\b(?:\s+(?:{_UNIT_NOUN_ALT})\b)?", re.I)
_WORD_QUANTITY = re.compile(rf"\b({_NUMBER_WORD_ALT})\b(?:\s+(?:{_UNIT_NOUN_ALT})\b)?", re.I)
_PRICE_CEILING = re.compile(r"(?:under|below|less than)\s*\$?\s*(\d+(?:\.\d+)?)", re.I)

# Checked in order; the first rule that matches decides the intent.
INTENT_RULES: tuple[tuple[Intent, re.Pattern[str]], ...] = (
    (Intent.ADD, re.compile(r"\b(?:add|i need|i want to buy|put|buy)\b")),
    (Intent.REMOVE, re.compile(r"\b(?:remove|delete|take off|clear)\b")),
    (Intent.MODIFY, re.compile(r"\b(?:change|update|set|modify|replace)\b")),
    (Intent.SEARCH, re.compile(r"\b(?:find|search|look for)\b")),
)


@dataclass(frozen=True)
class StripRule:
    """A single named rewrite applied to the working copy of an utterance."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str = "") -> StripRule:
    return StripRule(name, re.compile(pattern), replacement)


_WHITESPACE = _rule("collapse_whitespace", r"\s+", " ")

# Carrier phrases removed before the quantity is looked at.
CARRIER_RULES: tuple[StripRule, ...] = (
    _rule("add_verbs", r"\b(?:add|i need|i want to buy|put|buy)(?:\s+|$)"),
    _rule("remove_verbs", r"\b(?:remove|delete|take off|clear)(?:\s+|$)"),
    _rule("search_verbs", r"\b(?:find|search for|search|look for)(?:\s+me)?(?:\s+|$)"),
    _rule(
        "price_ceiling",
        r"\s*(?:under|below|less than)\s*\$?\s*\d+(?:\.\d+)?(?:\s*(?:dollars?|bucks))?",
    ),
    _rule("from_list", r"\s*\b(?:from|off)\s+(?:my|the)\s+list\b"),
    _rule("to_list", r"\b(?:to|on)\s+(?:my|the)\s+list\b"),
    _rule("politeness", r"\b(?:please|thank\s+you|thanks)\b"),
    _WHITESPACE,
    _rule("leading_determiner", r"^\s*(?:the|my|some|a|an)\s+"),
)

# Applied only when a quantity was found in the cleaned text, each at most once.
QUANTITY_RULES: tuple[StripRule, ...] = (
    _rule("digit", r"\b\d+\b"),
    _rule("number_word", rf"\b(?:{_NUMBER_WORD_ALT})\b"),
)
UNIT_RULE = _rule("unit_noun", rf"\b(?:{_UNIT_NOUN_ALT})\b(?:\s+of\b)?")

# Politeness and list references are dropped before matching the modify templates.
MODIFY_PRECLEAN_RULES: tuple[StripRule, ...] = (
    _rule("from_list", r"\s*\b(?:from|off|on|in)\s+(?:my|the)\s+list\b"),
    _rule("politeness", r"\b(?:please|thank\s+you|thanks)\b"),
    _WHITESPACE,
)

_MODIFY_QUANTITY = re.compile(r"\b(?:change|update|set|modify)\s+(.+?)\s+to\s+(\d+)\s*$")
_MODIFY_RENAME = re.compile(r"\b(?:change|update|replace)\s+(.+?)\s+to\s+(.+?)\s*$")
_MODIFY_TARGET_PREFIX = re.compile(r"\s*\b(?:quantity|amount|number)\s+of\s+")
_LEADING_DETERMINER = re.compile(r"^(?:the|my|some|a|an)\s+")


@dataclass(frozen=True)
class ParsedCommand:
    """Structured interpretation of a single utterance."""

    intent: Intent
    raw_text: str
    item_name: str | None = None
    quantity: int | None = None
    new_quantity: int | None = None
    new_item_name: str | None = None
    price_max: Decimal | None = None


@dataclass(frozen=True)
class ModifyParts:
    """Operands pulled out of a modify-shaped utterance."""

    item_name: str | None = None
    new_quantity: int | None = None
    new_item_name: str | None = None


def _run_rules(text: str, rules: tuple[StripRule, ...]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text.strip()


def _clean_operand(text: str) -> str:
    text = _MODIFY_TARGET_PREFIX.sub("", text, count=1).strip()
    return _LEADING_DETERMINER.sub("", text).strip()


class HeuristicParser:
    """Parse spoken shopping commands using deterministic rules."""

    @staticmethod
    def parse_quantity(text: str) -> int | None:
        """Extract the first quantity mentioned in the text.

        Digits win over number words; only "one".."ten" are recognised.

        Examples:
        - "add 3 apples" -> 3
        - "i need two bottles of water" -> 2
        - "add milk" -> None
        """
        match = _DIGIT_QUANTITY.search(text)
        if match:
            return int(match.group(1))

        match = _WORD_QUANTITY.search(text)
        if match:
            return NUMBER_WORDS[match.group(1).lower()]

        return None

    @staticmethod
    def parse_price_max(text: str) -> Decimal | None:
        """Extract an upper price bound such as "under $5" or "less than 2.50"."""
        match = _PRICE_CEILING.search(text)
        if match:
            return Decimal(match.group(1))
        return None

    @staticmethod
    def parse_intent(text: str) -> Intent:
        """Classify the text into one intent using the ordered INTENT_RULES."""
        text_lower = text.lower()
        for intent, pattern in INTENT_RULES:
            if pattern.search(text_lower):
                return intent
        return Intent.UNKNOWN

    @staticmethod
    def extract_item_name(text: str, intent: Intent | None = None) -> str | None:
        """Isolate the item name by stripping carrier phrases and quantities.

        The intent is accepted for diagnostics only; the same rules run for
        every intent. Returns None when nothing is left after stripping.

        Examples:
        - "add 3 apples" -> "apples"
        - "please add two bottles of water to my list" -> "water"
        - "remove milk from my list" -> "milk"
        """
        cleaned = _run_rules(text.lower(), CARRIER_RULES)

        if HeuristicParser.parse_quantity(cleaned) is not None:
            for rule in QUANTITY_RULES:
                cleaned = rule.pattern.sub(rule.replacement, cleaned, count=1)
            cleaned = _WHITESPACE.apply(cleaned).strip()

            # Keep the unit noun when it is the only word left ("add 3 apples")
            without_unit = _WHITESPACE.apply(UNIT_RULE.pattern.sub("", cleaned, count=1)).strip()
            if without_unit:
                cleaned = without_unit

        if not cleaned:
            logger.debug(f"No item name in {text!r} (intent={intent})")
            return None
        return cleaned

    @staticmethod
    def parse_modify(text: str) -> ModifyParts:
        """Split a modify command into target item and new quantity or new name.

        Quantity changes are tried before renames:
        - "change milk to 5" -> item "milk", new quantity 5
        - "update the quantity of eggs to 12" -> item "eggs", new quantity 12
        - "change milk to oat milk" -> item "milk", new name "oat milk"
        """
        text_lower = _run_rules(text.lower(), MODIFY_PRECLEAN_RULES)

        match = _MODIFY_QUANTITY.search(text_lower)
        if match:
            item_name = _clean_operand(match.group(1))
            return ModifyParts(item_name=item_name or None, new_quantity=int(match.group(2)))

        match = _MODIFY_RENAME.search(text_lower)
        if match:
            old_name = _clean_operand(match.group(1))
            new_name = _clean_operand(match.group(2))
            if old_name and new_name and old_name != new_name:
                return ModifyParts(item_name=old_name, new_item_name=new_name)

        return ModifyParts()

    @staticmethod
    def parse_command(text: str) -> ParsedCommand:
        """Run the full pipeline and assemble a ParsedCommand."""
        intent = HeuristicParser.parse_intent(text)
        item_name = HeuristicParser.extract_item_name(text, intent)
        modify = HeuristicParser.parse_modify(text) if intent == Intent.MODIFY else ModifyParts()

        command = ParsedCommand(
            intent=intent,
            raw_text=text,
            item_name=modify.item_name or item_name,
            quantity=HeuristicParser.parse_quantity(text),
            new_quantity=modify.new_quantity,
            new_item_name=modify.new_item_name,
            price_max=HeuristicParser.parse_price_max(text),
        )
        logger.debug(f"Parsed {text!r} -> {command}")
        return command
