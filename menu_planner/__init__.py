"""
Menu Planner.

Parses free-text ingredient lists of three-course menus into structured
quantities, rescales them to a number of servings, and prepares the
ingredient names used for nutrition lookups.
"""
from __future__ import annotations

from .exceptions import IngredientCodecError, MenuPlannerError, MenuValidationError
from .models.menu import IngredientLine, Menu
from .parsers.quantity_parser import (
    QuantityParser,
    parse_ingredient_block,
    parse_ingredient_line,
)
from .services.ingredient_formatter import (
    compute_scale,
    format_ingredient,
    format_ingredients,
    format_quantity,
    ingredient_search_name,
)
from .services.menu_service import (
    build_menu,
    dump_ingredients,
    load_ingredients,
    menu_from_record,
    menu_nutrition_queries,
    menu_to_record,
    nutrition_queries,
    render_menu,
)

__all__ = [
    "IngredientCodecError",
    "IngredientLine",
    "Menu",
    "MenuPlannerError",
    "MenuValidationError",
    "QuantityParser",
    "build_menu",
    "compute_scale",
    "dump_ingredients",
    "format_ingredient",
    "format_ingredients",
    "format_quantity",
    "ingredient_search_name",
    "load_ingredients",
    "menu_from_record",
    "menu_nutrition_queries",
    "menu_to_record",
    "nutrition_queries",
    "parse_ingredient_block",
    "parse_ingredient_line",
    "render_menu",
]
