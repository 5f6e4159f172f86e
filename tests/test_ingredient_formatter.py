"""
Unit tests for ingredient scaling, formatting and name extraction.
"""

import logging
import math

import pytest

from menu_planner.models.menu import IngredientLine
from menu_planner.parsers.quantity_parser import parse_ingredient_block
from menu_planner.services.ingredient_formatter import (
    compute_scale,
    format_ingredient,
    format_ingredients,
    format_quantity,
    ingredient_search_name,
    round_quantity,
)


def parse(text):
    return parse_ingredient_block(text)


class TestFormatQuantity:
    """Test the two-decimal rounding and display rules."""

    @pytest.mark.parametrize("quantity,expected", [
        (2.0, "2"),
        (2, "2"),
        (1.50, "1.5"),
        (1.25, "1.25"),
        (1.333, "1.33"),
        (0.125, "0.13"),
        (3.9999, "4"),
        (0.004, "0"),
        (10.1, "10.1"),
    ])
    def test_format(self, quantity, expected):
        assert format_quantity(quantity) == expected

    def test_none(self):
        assert format_quantity(None) == ""

    def test_halves_round_up(self):
        assert round_quantity(1.125) == 1.13
        assert round_quantity(0.005) == 0.01


class TestFormatIngredient:
    """Test rendering ingredient lines at a scale."""

    def test_round_trip(self):
        assert format_ingredient(parse("3 eggs")[0], 1) == "3 eggs"

    def test_default_scale_is_one(self):
        assert format_ingredient(parse("1/2 cup milk")[0]) == "0.5 cup milk"

    def test_double(self):
        assert format_ingredient(parse("2 1/2 cups flour")[0], 2) == "5 cups flour"

    def test_halve(self):
        assert format_ingredient(parse("2 1/2 cups flour")[0], 0.5) == "1.25 cups flour"

    def test_thirds_collapse_to_whole_number(self):
        assert format_ingredient(parse("1 1/3 cup sugar")[0], 3) == "4 cup sugar"

    def test_repeating_fraction(self):
        assert format_ingredient(parse("1/3 cup oil")[0], 1) == "0.33 cup oil"

    def test_single_noun_halved(self):
        assert format_ingredient(parse("3 eggs")[0], 0.5) == "1.5 eggs"

    def test_quantity_only(self):
        assert format_ingredient(parse("4")[0], 2) == "8"

    @pytest.mark.parametrize("scale", [1, 0.5, 2, 3.7])
    def test_raw_line_unchanged(self, scale):
        line = parse("salt to taste")[0]

        assert format_ingredient(line, scale) == "salt to taste"

    def test_raw_line_keeps_leading_fraction_text(self):
        line = parse("5/0 something")[0]

        assert format_ingredient(line, 2) == "5/0 something"

    def test_structured_line_built_by_hand(self):
        line = IngredientLine(raw="2 tbsp butter", quantity=2, unit="tbsp", name="butter")

        assert format_ingredient(line, 1.5) == "3 tbsp butter"

    def test_format_list(self):
        lines = parse("2 cups rice\nsalt\n1 tbsp oil")

        assert format_ingredients(lines, 2) == ["4 cups rice", "salt", "2 tbsp oil"]


class TestComputeScale:
    """Test the servings scale factor."""

    def test_ratio(self):
        assert compute_scale(4, 2) == 2.0
        assert compute_scale(1, 4) == 0.25

    def test_fractional_target(self):
        assert compute_scale(3, 2) == 1.5

    @pytest.mark.parametrize("base", [0, -2, None, "abc", 0.5])
    def test_base_clamped_to_one(self, base):
        assert compute_scale(3, base) == 3.0

    @pytest.mark.parametrize("target", [None, 0, -1, "abc", float("nan"), float("inf")])
    def test_invalid_target_is_unscaled(self, target, caplog):
        with caplog.at_level(logging.WARNING):
            assert compute_scale(target, 2) == 1.0

        assert "Cannot scale ingredients" in caplog.text


class TestIngredientSearchName:
    """Test the name used for nutrition lookups."""

    def test_uses_parsed_name(self):
        assert ingredient_search_name(parse("2 1/2 cups plain flour")[0]) == "plain flour"

    def test_single_noun(self):
        assert ingredient_search_name(parse("3 eggs")[0]) == "eggs"

    def test_raw_text(self):
        assert ingredient_search_name(parse("salt to taste")[0]) == "salt to taste"

    def test_raw_text_with_degenerate_fraction(self):
        assert ingredient_search_name(parse("5/0 something")[0]) == "something"

    def test_quantity_without_name_is_formatted(self):
        line = parse("4")[0]

        assert ingredient_search_name(line) == "4"
        assert ingredient_search_name(line, 2) == "8"

    def test_unit_without_name_is_formatted(self):
        line = IngredientLine(raw="2 cups", quantity=2, unit="cups", name="")

        assert ingredient_search_name(line) == "2 cups"


class TestOversizedQuantities:
    """Test that formatting extreme quantities never raises."""

    @pytest.mark.parametrize("quantity", [float("inf"), float("nan"), 1e308])
    def test_round_leaves_unroundable_values(self, quantity):
        rounded = round_quantity(quantity)

        assert rounded == quantity or math.isnan(rounded)

    def test_format_non_finite(self):
        assert format_quantity(float("inf")) == "inf"
        assert format_quantity(float("nan")) == "nan"

    def test_format_largest_float(self):
        assert format_quantity(1e308) == str(int(1e308))

    def test_raw_fallback_formats_unchanged(self):
        text = "1" * 400 + " cups flour"

        assert format_ingredient(parse(text)[0], 1) == text

    def test_scaling_past_float_range(self):
        line = parse("1" * 300 + " g salt")[0]

        assert format_ingredient(line, 1e10) == "inf g salt"

    @pytest.mark.parametrize("text", [
        "1" * 400 + "/1 cups flour",
        "1 " + "1" * 400 + "/1 cups flour",
        "1" * 5000 + "/2 cups flour",
        "1" * 400 + " cups flour",
        "1" * 300 + " cups flour",
        "1/" + "1" * 400 + " cup sugar",
    ])
    @pytest.mark.parametrize("scale", [0.5, 1, 3])
    def test_never_raises(self, text, scale):
        line = parse(text)[0]

        assert isinstance(format_ingredient(line, scale), str)
        assert isinstance(ingredient_search_name(line, scale), str)
