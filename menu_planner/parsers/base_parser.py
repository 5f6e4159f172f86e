"""
Base Ingredient Parser.

This module defines the base interface that all ingredient parsers must implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.menu import IngredientLine


class BaseIngredientParser(ABC):
    """Abstract base class for ingredient parsers.

    All ingredient parsers must implement the parse_line method to convert
    a single line of free text into a structured IngredientLine.
    """

    @abstractmethod
    def parse_line(self, text: str) -> IngredientLine | None:
        """Parse one ingredient line.

        Args:
            text: A single line of free text

        Returns:
            An IngredientLine, or None if the line is blank
        """
        pass

    def parse_block(self, text: str | None) -> list[IngredientLine]:
        """Parse a multi-line block of ingredients.

        Blank lines are dropped; the remaining lines keep their input order.

        Args:
            text: Free text with one ingredient per line

        Returns:
            List of parsed IngredientLine objects
        """
        if not text:
            return []

        ingredients = []
        for line in text.splitlines():
            ingredient = self.parse_line(line)
            if ingredient is not None:
                ingredients.append(ingredient)
        return ingredients
