"""
Pytest configuration and shared fixtures.

Fixtures are reusable test setup that can be injected into tests.
"""

import pytest

from menu_planner.parsers.quantity_parser import QuantityParser
from menu_planner.services.menu_service import build_menu


@pytest.fixture
def parser():
    """A fresh QuantityParser."""
    return QuantityParser()


@pytest.fixture
def menu_form():
    """A menu form as submitted from the web page, for 2 servings."""
    return {
        "appetizer": "Bruschetta",
        "main": "Mushroom risotto",
        "dessert": "Panna cotta",
        "appetizer_ingredients": "4 slices bread\n2 tomatoes\nolive oil",
        "main_ingredients": "1 1/2 cups arborio rice\n\n250 g mushrooms\n1/2 cup parmesan\n",
        "dessert_ingredients": "2 cups cream\n1/3 cup sugar\n1 vanilla pod",
        "base_servings": "2",
    }


@pytest.fixture
def menu(menu_form):
    """A validated Menu built from menu_form."""
    return build_menu(menu_form)
