"""Parsers package."""
from .base_parser import BaseIngredientParser
from .quantity_parser import (
    QUANTITY_PATTERN,
    QuantityParser,
    parse_ingredient_block,
    parse_ingredient_line,
    strip_quantity,
)

__all__ = [
    "BaseIngredientParser",
    "QUANTITY_PATTERN",
    "QuantityParser",
    "parse_ingredient_block",
    "parse_ingredient_line",
    "strip_quantity",
]
