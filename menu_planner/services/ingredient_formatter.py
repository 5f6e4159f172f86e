"""
Ingredient Formatter and Scaler.

This module handles scaling and formatting of parsed ingredient lines for
display at a different number of servings, and extracts the bare ingredient
name used to query the nutrition database.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable

from ..const import DEFAULT_SCALE, MIN_BASE_SERVINGS, QUANTITY_DECIMALS
from ..models.menu import IngredientLine
from ..parsers.quantity_parser import strip_quantity

_LOGGER = logging.getLogger(__name__)


def round_quantity(quantity: float) -> float:
    """
    Round a quantity to two decimal places, halves rounding up.

    Values too large to round (or not finite) are returned unchanged.

    Examples:
        >>> round_quantity(1.125)
        1.13
        >>> round_quantity(3.9999)
        4.0
    """
    factor = 10 ** QUANTITY_DECIMALS
    scaled = quantity * factor
    if not math.isfinite(scaled):
        return quantity
    return math.floor(scaled + 0.5) / factor


def format_quantity(quantity: float | int | None) -> str:
    """
    Format quantity to remove unnecessary decimals.

    Args:
        quantity: The numeric quantity (can be int, float, or None)

    Returns:
        Formatted string (empty string if quantity is None)

    Examples:
        >>> format_quantity(2.0)
        '2'
        >>> format_quantity(1.50)
        '1.5'
        >>> format_quantity(1.333)
        '1.33'
    """
    if quantity is None:
        return ""

    quantity = round_quantity(quantity)
    if not math.isfinite(quantity):
        return str(quantity)

    # If it's a whole number, return without decimals
    if quantity == int(quantity):
        return str(int(quantity))

    # Otherwise, return with up to 2 decimal places, removing trailing zeros
    return f"{quantity:.{QUANTITY_DECIMALS}f}".rstrip('0').rstrip('.')


def _as_positive_number(value) -> float | None:
    """Coerce value to a finite positive float, or None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def compute_scale(
    target_servings: int | float | None,
    base_servings: int | float | None
) -> float:
    """Compute the factor that rescales a recipe to a number of servings.

    Args:
        target_servings: Number of servings to scale to (can be fractional)
        base_servings: Servings the quantities were written for; clamped to at least 1

    Returns:
        target_servings / base_servings, or 1.0 if the target is not usable
    """
    base = _as_positive_number(base_servings)
    if base is None or base < MIN_BASE_SERVINGS:
        base = float(MIN_BASE_SERVINGS)

    target = _as_positive_number(target_servings)
    if target is None:
        _LOGGER.warning(
            "Cannot scale ingredients: target servings %r must be a positive number",
            target_servings)
        return DEFAULT_SCALE

    scaling_factor = target / base
    _LOGGER.debug("Scaling from %s to %s servings (factor: %.2f)",
                  base, target, scaling_factor)
    return scaling_factor


def format_ingredient(ingredient: IngredientLine, scale: float = DEFAULT_SCALE) -> str:
    """Render an ingredient line at the given scale.

    Free-text lines without a quantity are returned unchanged.

    Args:
        ingredient: The parsed ingredient line
        scale: Factor to multiply the quantity by

    Returns:
        Display text such as '5 cups flour'
    """
    if ingredient.quantity is None:
        return ingredient.raw

    parts = [format_quantity(ingredient.quantity * scale)]
    if ingredient.unit:
        parts.append(ingredient.unit)
    if ingredient.name:
        parts.append(ingredient.name)

    formatted = ' '.join(parts).strip()
    _LOGGER.debug("Formatted '%s' at scale %s as '%s'",
                  ingredient.raw, scale, formatted)
    return formatted


def format_ingredients(
    ingredients: Iterable[IngredientLine],
    scale: float = DEFAULT_SCALE
) -> list[str]:
    """Format a list of ingredient lines at the same scale."""
    return [format_ingredient(ingredient, scale) for ingredient in ingredients]


def ingredient_search_name(ingredient: IngredientLine, scale: float = DEFAULT_SCALE) -> str:
    """Return the name to search the nutrition database with.

    Uses the parsed name when there is one. Raw-only lines have any
    leading quantity stripped; lines with a quantity but no name fall
    back to their formatted text.

    Examples:
        >>> ingredient_search_name(IngredientLine(raw="5/0 something"))
        'something'
    """
    if ingredient.name:
        return ingredient.name
    if ingredient.quantity is None:
        return strip_quantity(ingredient.raw)
    return format_ingredient(ingredient, scale)
