"""Models package."""
from .menu import IngredientLine, Menu

__all__ = ["IngredientLine", "Menu"]
