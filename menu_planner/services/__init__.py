"""Services package."""
from .ingredient_formatter import (
    compute_scale,
    format_ingredient,
    format_ingredients,
    format_quantity,
    ingredient_search_name,
    round_quantity,
)
from .menu_service import (
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
    "render_menu",
    "round_quantity",
]
