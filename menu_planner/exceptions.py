"""Exceptions raised by the Menu Planner package."""
from __future__ import annotations


class MenuPlannerError(Exception):
    """Base class for all Menu Planner errors."""


class MenuValidationError(MenuPlannerError, ValueError):
    """A submitted menu or nutrition request failed validation.

    The message is safe to show to the user as-is.
    """


class IngredientCodecError(MenuPlannerError, ValueError):
    """A stored ingredient list could not be decoded."""
