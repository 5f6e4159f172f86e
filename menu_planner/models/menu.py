"""
Menu data models for the Menu Planner package.

This module defines the Pydantic models used to structure ingredient lines
parsed from free text and the three-course menus that own them.
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ..const import COURSES, DEFAULT_BASE_SERVINGS, MIN_BASE_SERVINGS, ingredients_key


def coerce_servings(value: Any) -> int:
    """Coerce a servings count to a whole number of at least 1.

    Fractional values are truncated; anything that is not a finite
    number falls back to the default.

    Examples:
        >>> coerce_servings("2.7")
        2
        >>> coerce_servings("abc")
        1
    """
    try:
        servings = float(value)
    except (TypeError, ValueError):
        return DEFAULT_BASE_SERVINGS
    if not math.isfinite(servings):
        return DEFAULT_BASE_SERVINGS
    return max(MIN_BASE_SERVINGS, int(servings))


class IngredientLine(BaseModel):
    """A single ingredient line, structured where a leading quantity was found.

    Attributes:
        raw: The original trimmed text, always kept verbatim
        quantity: Optional numeric quantity (e.g., 2.5); None for free text
        unit: The word following the quantity (e.g., 'cups'), possibly empty
        name: The remaining words (e.g., 'all-purpose flour'), possibly empty
    """

    raw: str = Field(
        description="The original trimmed line, e.g., '2 1/2 cups flour'"
    )
    quantity: float | None = Field(
        default=None,
        ge=0,
        description="The numeric quantity, e.g., 2.5"
    )
    unit: str | None = Field(
        default=None,
        description="The word following the quantity, e.g., 'cups', 'tbsp'"
    )
    name: str | None = Field(
        default=None,
        description="The remaining words after the unit, e.g., 'flour'"
    )

    @model_validator(mode="after")
    def check_structure(self) -> IngredientLine:
        """Keep unit and name consistent with the presence of a quantity."""
        if self.quantity is None:
            # Raw-only lines carry nothing but their text
            self.unit = None
            self.name = None
        else:
            if self.unit is None:
                self.unit = ""
            if self.name is None:
                self.name = ""
        return self

    @property
    def is_structured(self) -> bool:
        """Whether a leading quantity was recognised."""
        return self.quantity is not None


class Menu(BaseModel):
    """A saved three-course menu.

    Attributes:
        id: Identifier assigned by the storage layer, if saved
        appetizer: Appetizer dish name
        main: Main dish name
        dessert: Dessert dish name
        appetizer_ingredients: Ordered ingredient lines for the appetizer
        main_ingredients: Ordered ingredient lines for the main dish
        dessert_ingredients: Ordered ingredient lines for the dessert
        base_servings: Servings the ingredient quantities were written for
        created_at: When the menu was saved
    """

    id: int | None = None
    appetizer: str
    main: str
    dessert: str
    appetizer_ingredients: list[IngredientLine] = Field(default_factory=list)
    main_ingredients: list[IngredientLine] = Field(default_factory=list)
    dessert_ingredients: list[IngredientLine] = Field(default_factory=list)
    base_servings: int = Field(
        default=DEFAULT_BASE_SERVINGS,
        description="Servings the recipe was written for, at least 1"
    )
    created_at: datetime | None = None

    @field_validator("base_servings", mode="before")
    @classmethod
    def normalize_servings(cls, value) -> int:
        """Apply coerce_servings to submitted and stored values alike."""
        return coerce_servings(value)

    def ingredients_for(self, course: str) -> list[IngredientLine]:
        """Return the ingredient lines of a course.

        Raises:
            ValueError: If the course is not one of the menu's courses
        """
        if course not in COURSES:
            raise ValueError(f"Unknown course: {course}")
        return getattr(self, ingredients_key(course))

    def all_ingredients(self) -> list[IngredientLine]:
        """Return the ingredient lines of every course, in course order."""
        lines: list[IngredientLine] = []
        for course in COURSES:
            lines.extend(self.ingredients_for(course))
        return lines
