"""
Menu Service.

This module sits between the web form, the storage layer and the ingredient
engine: it validates submitted menus, encodes ingredient lists for storage,
renders menus at a target number of servings and collects the ingredient
names sent to the nutrition lookup.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

import voluptuous as vol
from pydantic import ValidationError

from ..const import (
    COURSES,
    DATA_ID,
    DATA_APPETIZER,
    DATA_MAIN,
    DATA_DESSERT,
    DATA_APPETIZER_INGREDIENTS,
    DATA_MAIN_INGREDIENTS,
    DATA_DESSERT_INGREDIENTS,
    DATA_BASE_SERVINGS,
    DATA_CREATED_AT,
    DEFAULT_BASE_SERVINGS,
    EMPTY_INGREDIENTS,
    ERROR_FIELDS_REQUIRED,
    ERROR_INGREDIENTS_REQUIRED,
    ERROR_INVALID_INGREDIENTS,
    ingredients_key,
)
from ..exceptions import IngredientCodecError, MenuPlannerError, MenuValidationError
from ..models.menu import IngredientLine, Menu, coerce_servings
from ..parsers.quantity_parser import parse_ingredient_block, parse_ingredient_line
from .ingredient_formatter import compute_scale, format_ingredients, ingredient_search_name

_LOGGER = logging.getLogger(__name__)


def _dish_name(value: Any) -> str:
    """Validate a course dish name: present and not blank."""
    if value is None:
        raise vol.Invalid(ERROR_FIELDS_REQUIRED)
    name = str(value).strip()
    if not name:
        raise vol.Invalid(ERROR_FIELDS_REQUIRED)
    return name


def _ingredient_lines(value: Any) -> list[IngredientLine]:
    """Validate an ingredient list given as a textarea or a list of entries.

    List entries may be IngredientLine objects, dicts in their stored form,
    or plain strings which are parsed as single lines.
    """
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return parse_ingredient_block(value)
    if not isinstance(value, (list, tuple)):
        raise vol.Invalid(
            f"Expected ingredient text or list, got {type(value).__name__}")

    lines = []
    for index, entry in enumerate(value):
        if isinstance(entry, IngredientLine):
            lines.append(entry)
        elif isinstance(entry, str):
            line = parse_ingredient_line(entry)
            if line is not None:
                lines.append(line)
        elif isinstance(entry, Mapping):
            try:
                lines.append(IngredientLine.model_validate(entry))
            except ValidationError as e:
                raise vol.Invalid(
                    f"Invalid ingredient entry: {e.errors()[0]['msg']}",
                    path=[index]) from e
        else:
            raise vol.Invalid(
                f"Invalid ingredient entry of type {type(entry).__name__}",
                path=[index])
    return lines


MENU_FORM_SCHEMA = vol.Schema(
    {
        vol.Optional(DATA_ID, default=None): vol.Any(None, vol.Coerce(int)),
        vol.Required(DATA_APPETIZER): _dish_name,
        vol.Required(DATA_MAIN): _dish_name,
        vol.Required(DATA_DESSERT): _dish_name,
        vol.Optional(DATA_APPETIZER_INGREDIENTS, default=None): _ingredient_lines,
        vol.Optional(DATA_MAIN_INGREDIENTS, default=None): _ingredient_lines,
        vol.Optional(DATA_DESSERT_INGREDIENTS, default=None): _ingredient_lines,
        vol.Optional(DATA_BASE_SERVINGS, default=DEFAULT_BASE_SERVINGS): coerce_servings,
        vol.Optional(DATA_CREATED_AT, default=None): vol.Any(None, datetime, str),
    },
    extra=vol.REMOVE_EXTRA,
)


def _validation_message(err: vol.Invalid) -> str:
    """Pick the user-facing message for a schema error."""
    errors = err.errors if isinstance(err, vol.MultipleInvalid) else [err]
    for error in errors:
        if error.path and error.path[0] in COURSES:
            return ERROR_FIELDS_REQUIRED
    return str(errors[0])


def build_menu(form: Mapping[str, Any]) -> Menu:
    """Validate a submitted menu form and build a Menu.

    Args:
        form: Submitted fields: the three dish names, optional
            '<course>_ingredients' text or lists, and optional base_servings

    Returns:
        The validated Menu, stamped with the current time if not already dated

    Raises:
        MenuValidationError: If a dish name is missing or an ingredient
            entry is malformed
    """
    try:
        data = MENU_FORM_SCHEMA(dict(form))
    except vol.Invalid as e:
        message = _validation_message(e)
        _LOGGER.warning("Rejected menu form: %s", e)
        raise MenuValidationError(message) from e

    if data[DATA_CREATED_AT] is None:
        data[DATA_CREATED_AT] = datetime.now(timezone.utc)

    try:
        menu = Menu.model_validate(data)
    except ValidationError as e:
        _LOGGER.warning("Rejected menu form: %s", e)
        raise MenuValidationError(str(e)) from e

    _LOGGER.info(
        "Built menu '%s' / '%s' / '%s' for %d servings with %d ingredients",
        menu.appetizer,
        menu.main,
        menu.dessert,
        menu.base_servings,
        len(menu.all_ingredients())
    )
    return menu


def dump_ingredients(ingredients: Iterable[IngredientLine]) -> str:
    """Encode ingredient lines as a JSON array for a text column.

    Raw-only lines are stored as {"raw": ...}; structured lines also carry
    quantity, unit and name.
    """
    return json.dumps(
        [ingredient.model_dump(exclude_none=True) for ingredient in ingredients])


def load_ingredients(value: str | list | None) -> list[IngredientLine]:
    """Decode a stored ingredient list.

    Args:
        value: JSON text, an already decoded list, or None/'' for no ingredients

    Returns:
        List of IngredientLine objects

    Raises:
        IngredientCodecError: If the value is not a JSON array of ingredient entries
    """
    if value is None or value == "":
        return []

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            _LOGGER.error("Stored ingredients are not valid JSON: %s", e)
            raise IngredientCodecError(ERROR_INVALID_INGREDIENTS) from e

    if not isinstance(value, list):
        _LOGGER.error("Stored ingredients are not a list: %r", value)
        raise IngredientCodecError(ERROR_INVALID_INGREDIENTS)

    try:
        return _ingredient_lines(value)
    except vol.Invalid as e:
        _LOGGER.error("Stored ingredients could not be read: %s", e)
        raise IngredientCodecError(ERROR_INVALID_INGREDIENTS) from e


def menu_to_record(menu: Menu) -> dict[str, Any]:
    """Flatten a menu into a storage row with JSON ingredient columns."""
    record: dict[str, Any] = {
        DATA_ID: menu.id,
        DATA_APPETIZER: menu.appetizer,
        DATA_MAIN: menu.main,
        DATA_DESSERT: menu.dessert,
        DATA_BASE_SERVINGS: menu.base_servings,
        DATA_CREATED_AT: menu.created_at.isoformat() if menu.created_at else None,
    }
    for course in COURSES:
        record[ingredients_key(course)] = dump_ingredients(menu.ingredients_for(course))
    return record


def menu_from_record(record: Mapping[str, Any]) -> Menu:
    """Rebuild a menu from a storage row.

    Rows written before the ingredient columns existed read as empty lists.

    Raises:
        IngredientCodecError: If an ingredient column cannot be decoded
        MenuPlannerError: If the row is missing required menu fields
    """
    data = dict(record)
    for course in COURSES:
        data[ingredients_key(course)] = load_ingredients(
            data.get(ingredients_key(course), EMPTY_INGREDIENTS))

    try:
        return Menu.model_validate(data)
    except ValidationError as e:
        _LOGGER.error("Stored menu %s could not be read: %s",
                      data.get(DATA_ID), e)
        raise MenuPlannerError(f"Invalid menu record: {e}") from e


def render_menu(menu: Menu, target_servings: int | float | None = None) -> dict[str, list[str]]:
    """Format every course's ingredients for a number of servings.

    Args:
        menu: The menu to render
        target_servings: Servings to scale to; defaults to the menu's base servings

    Returns:
        Mapping of course name to formatted ingredient strings, in course order
    """
    if target_servings is None:
        target_servings = menu.base_servings

    scale = compute_scale(target_servings, menu.base_servings)
    _LOGGER.info("Rendering menu %s for %s servings (factor: %.2f)",
                 menu.id, target_servings, scale)

    return {
        course: format_ingredients(menu.ingredients_for(course), scale)
        for course in COURSES
    }


def nutrition_queries(ingredients: Iterable[IngredientLine]) -> list[str]:
    """Collect the names to look up in the nutrition database.

    Blank names are dropped and repeated names (ignoring case) are only
    kept the first time they appear.
    """
    queries = []
    seen = set()
    for ingredient in ingredients:
        name = ingredient_search_name(ingredient).strip()
        key = name.lower()
        if not name or key in seen:
            continue
        seen.add(key)
        queries.append(name)
    return queries


def menu_nutrition_queries(menu: Menu, require: bool = False) -> list[str]:
    """Collect nutrition lookup names across all courses of a menu.

    Raises:
        MenuValidationError: If require is set and the menu has no ingredients
    """
    queries = nutrition_queries(menu.all_ingredients())
    if require and not queries:
        raise MenuValidationError(ERROR_INGREDIENTS_REQUIRED)
    _LOGGER.debug("Menu %s yields %d nutrition queries", menu.id, len(queries))
    return queries
