"""Tests for the heuristic command parser."""

from decimal import Decimal

import pytest

from shopping_assistant.models.enums import Intent
from shopping_assistant.services.heuristic_parser import (
    CARRIER_RULES,
    HeuristicParser,
    ModifyParts,
    ParsedCommand,
)


class TestParseQuantity:
    """Tests for quantity extraction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("add 3 apples", 3),
            ("add 12 items of soap", 12),
            ("i need two bottles of water", 2),
            ("Add FIVE oranges", 5),
            ("buy ten packs of gum", 10),
            ("add milk", None),
        ],
    )
    def test_quantities(self, text, expected):
        assert HeuristicParser.parse_quantity(text) == expected

    def test_digits_win_over_words(self):
        """A digit anywhere beats a number word earlier in the text."""
        assert HeuristicParser.parse_quantity("add one pack of 6 eggs") == 6

    def test_only_first_digit_is_used(self):
        assert HeuristicParser.parse_quantity("add 2 milk and 3 bread") == 2

    def test_words_need_boundaries(self):
        """'one' inside 'someone' or 'stone' is not a quantity."""
        assert HeuristicParser.parse_quantity("add stone fruit for someone") is None


class TestParsePriceMax:
    """Tests for price ceiling extraction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("find apples under 3 dollars", Decimal("3")),
            ("find toothpaste below $4.50", Decimal("4.50")),
            ("search milk less than 2.99", Decimal("2.99")),
            ("Find apples UNDER $ 5", Decimal("5")),
        ],
    )
    def test_price_phrases(self, text, expected):
        assert HeuristicParser.parse_price_max(text) == expected

    def test_no_price_phrase(self):
        assert HeuristicParser.parse_price_max("find apples for 3 dollars") is None


class TestParseIntent:
    """Tests for ordered intent classification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("add milk", Intent.ADD),
            ("I need eggs", Intent.ADD),
            ("I want to buy bread", Intent.ADD),
            ("put butter on my list", Intent.ADD),
            ("buy cheese", Intent.ADD),
            ("remove milk", Intent.REMOVE),
            ("delete the eggs", Intent.REMOVE),
            ("take off bread", Intent.REMOVE),
            ("clear the soap", Intent.REMOVE),
            ("change milk to 5", Intent.MODIFY),
            ("update eggs to 12", Intent.MODIFY),
            ("set bread to 2", Intent.MODIFY),
            ("modify rice to 3", Intent.MODIFY),
            ("replace milk to oat milk", Intent.MODIFY),
            ("find apples", Intent.SEARCH),
            ("search toothpaste", Intent.SEARCH),
            ("look for almond milk", Intent.SEARCH),
            ("hello there", Intent.UNKNOWN),
            ("", Intent.UNKNOWN),
        ],
    )
    def test_keywords(self, text, expected):
        assert HeuristicParser.parse_intent(text) == expected

    def test_add_beats_later_rules(self):
        """Text with both add and modify keywords resolves to add."""
        assert HeuristicParser.parse_intent("add milk and change bread to 2") == Intent.ADD

    def test_remove_beats_modify(self):
        assert HeuristicParser.parse_intent("remove milk and update eggs") == Intent.REMOVE

    def test_inflected_keyword_does_not_match(self):
        """'added' is not the verb 'add', so replace decides the intent."""
        assert HeuristicParser.parse_intent("replace the milk I added") == Intent.MODIFY


class TestExtractItemName:
    """Tests for item name extraction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("add milk", "milk"),
            ("Add Milk", "milk"),
            ("add 3 apples", "apples"),
            ("add 2 milk", "milk"),
            ("i need two bottles of water", "water"),
            ("please add two bottles of water to my list", "water"),
            ("I want to buy 4 bananas", "bananas"),
            ("put eggs on my list thanks", "eggs"),
            ("remove milk from my list", "milk"),
            ("delete bread from the list please", "bread"),
            ("take off cheese off the list", "cheese"),
            ("add the milk", "milk"),
            ("find apples under 3 dollars", "apples"),
            ("find me organic apples under $5", "organic apples"),
            ("look for toothpaste thank you", "toothpaste"),
        ],
    )
    def test_extracts_name(self, text, expected):
        intent = HeuristicParser.parse_intent(text)
        assert HeuristicParser.extract_item_name(text, intent) == expected

    def test_unit_noun_removed_when_other_words_remain(self):
        assert HeuristicParser.extract_item_name("add 6 packs of yogurt") == "yogurt"

    def test_unit_noun_kept_when_it_is_the_item(self):
        assert HeuristicParser.extract_item_name("add five oranges") == "oranges"

    @pytest.mark.parametrize("text", ["add", "remove please", "add 3", "put to my list"])
    def test_nothing_left_is_absent(self, text):
        assert HeuristicParser.extract_item_name(text) is None

    def test_unexpected_template_leaves_connectives(self):
        """Phrases outside the known templates are not cleaned up."""
        assert HeuristicParser.extract_item_name("put milk in my cart") == "milk in my cart"
        assert HeuristicParser.extract_item_name("add milk for my mom") == "milk for my mom"

    def test_unknown_text_passes_through(self):
        assert HeuristicParser.extract_item_name("hello there") == "hello there"

    def test_carrier_rules_are_named(self):
        names = [rule.name for rule in CARRIER_RULES]
        assert names.index("add_verbs") < names.index("from_list")
        assert names[-1] == "leading_determiner"


class TestParseModify:
    """Tests for modify sub-parsing."""

    def test_quantity_change(self):
        assert HeuristicParser.parse_modify("change milk to 5") == ModifyParts(
            item_name="milk", new_quantity=5
        )

    @pytest.mark.parametrize("verb", ["change", "update", "set", "modify"])
    def test_quantity_verbs(self, verb):
        parts = HeuristicParser.parse_modify(f"{verb} eggs to 12")
        assert parts.item_name == "eggs"
        assert parts.new_quantity == 12

    def test_quantity_prefix_stripped(self):
        parts = HeuristicParser.parse_modify("Update the quantity of eggs to 12")
        assert parts == ModifyParts(item_name="eggs", new_quantity=12)

    def test_amount_prefix_stripped(self):
        parts = HeuristicParser.parse_modify("set amount of rice to 0")
        assert parts == ModifyParts(item_name="rice", new_quantity=0)

    def test_rename(self):
        assert HeuristicParser.parse_modify("change milk to oat milk") == ModifyParts(
            item_name="milk", new_item_name="oat milk"
        )

    def test_replace_renames(self):
        parts = HeuristicParser.parse_modify("replace white bread to whole grain bread please")
        assert parts == ModifyParts(item_name="white bread", new_item_name="whole grain bread")

    def test_set_does_not_rename(self):
        assert HeuristicParser.parse_modify("set milk to oat milk") == ModifyParts()

    def test_replace_does_not_change_quantity(self):
        """'replace X to N' is not a quantity template, so N becomes a name."""
        parts = HeuristicParser.parse_modify("replace milk to 3")
        assert parts == ModifyParts(item_name="milk", new_item_name="3")

    def test_same_name_rejected(self):
        assert HeuristicParser.parse_modify("change milk to milk") == ModifyParts()

    def test_no_template(self):
        assert HeuristicParser.parse_modify("change the milk") == ModifyParts()


class TestParseCommand:
    """Tests for the assembled command."""

    def test_add_with_quantity(self):
        command = HeuristicParser.parse_command("add 3 apples")
        assert command == ParsedCommand(
            intent=Intent.ADD, raw_text="add 3 apples", item_name="apples", quantity=3
        )

    def test_search_with_price(self):
        command = HeuristicParser.parse_command("find apples under 3 dollars")
        assert command.intent == Intent.SEARCH
        assert command.item_name == "apples"
        assert command.price_max == Decimal("3")

    def test_modify_item_from_sub_parser(self):
        command = HeuristicParser.parse_command("change milk to 5")
        assert command.intent == Intent.MODIFY
        assert command.item_name == "milk"
        assert command.new_quantity == 5
        assert command.new_item_name is None

    def test_modify_rename(self):
        command = HeuristicParser.parse_command("change milk to oat milk")
        assert command.item_name == "milk"
        assert command.new_item_name == "oat milk"
        assert command.new_quantity is None

    def test_modify_falls_back_to_generic_name(self):
        command = HeuristicParser.parse_command("change milk")
        assert command.intent == Intent.MODIFY
        assert command.item_name == "change milk"
        assert command.new_quantity is None
        assert command.new_item_name is None

    def test_raw_text_kept(self):
        command = HeuristicParser.parse_command("Please ADD Milk")
        assert command.raw_text == "Please ADD Milk"
        assert command.item_name == "milk"

    def test_unknown(self):
        command = HeuristicParser.parse_command("what time is it")
        assert command.intent == Intent.UNKNOWN

    @pytest.mark.parametrize(
        "text",
        ["add 3 apples", "change milk to oat milk", "find apples under 3 dollars", "hmm"],
    )
    def test_parsing_is_repeatable(self, text):
        assert HeuristicParser.parse_command(text) == HeuristicParser.parse_command(text)

    def test_command_is_immutable(self):
        command = HeuristicParser.parse_command("add milk")
        with pytest.raises(AttributeError):
            command.item_name = "eggs"
