"""
Ingredient Quantity Parser.

This module turns free-text ingredient lines such as "2 1/2 cups flour" into
structured IngredientLine records. Only a leading quantity is recognised;
the word after it is taken as the unit purely by position, with no unit
dictionary. Anything that does not start with a quantity is kept as raw text.
"""
from __future__ import annotations

import logging
import math
import re

from ..models.menu import IngredientLine
from .base_parser import BaseIngredientParser

_LOGGER = logging.getLogger(__name__)

# Leading quantity, tried in order: mixed number, bare fraction, decimal/integer
QUANTITY_PATTERN = re.compile(
    r"^(?:"
    r"(?P<whole>\d+)\s+(?P<mixed_numerator>\d+)/(?P<mixed_denominator>\d+)"
    r"|(?P<numerator>\d+)/(?P<denominator>\d+)"
    r"|(?P<decimal>\d+(?:\.\d+)?)"
    r")",
    re.ASCII,
)


def strip_quantity(text: str) -> str:
    """Remove a leading quantity from text.

    Args:
        text: Ingredient text, e.g. '2 1/2 cups flour'

    Returns:
        The trimmed text without its leading quantity, e.g. 'cups flour'
    """
    return QUANTITY_PATTERN.sub("", text.strip(), count=1).strip()


class QuantityParser(BaseIngredientParser):
    """Parses ingredient lines that may start with a numeric quantity.

    Parsing never raises: lines that cannot be structured are returned
    as raw-only records so user input is never lost.
    """

    def __init__(self) -> None:
        """Initialize the quantity parser."""
        _LOGGER.debug("Initialized QuantityParser")

    def _finite(self, value: float) -> float:
        """Return value unchanged if it is a finite number.

        Raises:
            OverflowError: If value is infinite or NaN
        """
        if not math.isfinite(value):
            raise OverflowError("Quantity is out of range")
        return value

    def _parse_number(self, number_str: str) -> float:
        """Convert a digit string to a finite float."""
        return self._finite(float(number_str))

    def _parse_fraction(self, numerator: str, denominator: str) -> float:
        """Divide two integer strings.

        Raises:
            ZeroDivisionError: If denominator is zero
            OverflowError: If either part or the result is not a finite number
        """
        denominator_value = float(denominator)
        if denominator_value == 0:
            raise ZeroDivisionError("Fraction has zero denominator")
        return self._finite(float(numerator) / denominator_value)

    def _parse_quantity(self, match: re.Match) -> float | None:
        """Compute the numeric value of a matched quantity token.

        Args:
            match: A QUANTITY_PATTERN match

        Returns:
            The quantity, or None if the token cannot be used
        """
        try:
            if match.group("whole") is not None:
                whole = self._parse_number(match.group("whole"))
                try:
                    fraction = self._parse_fraction(
                        match.group("mixed_numerator"),
                        match.group("mixed_denominator"))
                except (ValueError, OverflowError, ZeroDivisionError) as e:
                    _LOGGER.debug("Ignoring fractional part of '%.40s': %s",
                                  match.group(0), e)
                    fraction = 0.0
                return self._finite(whole + fraction)

            if match.group("numerator") is not None:
                return self._parse_fraction(
                    match.group("numerator"), match.group("denominator"))

            return self._parse_number(match.group("decimal"))
        except (ValueError, OverflowError, ZeroDivisionError) as e:
            _LOGGER.debug("Keeping '%.40s' as raw text: %s", match.group(0), e)
            return None

    def parse_line(self, text: str) -> IngredientLine | None:
        """Parse one ingredient line.

        Supports:
        - Mixed numbers: "2 1/2 cups flour"
        - Fractions: "1/2 cup milk"
        - Decimals and integers: "0.5 l water", "3 eggs"
        - Free text: "salt to taste"

        Args:
            text: A single line of free text

        Returns:
            Structured IngredientLine, or None if the line is blank
        """
        raw = text.strip() if text else ""
        if not raw:
            return None

        match = QUANTITY_PATTERN.match(raw)
        if not match:
            _LOGGER.debug("No quantity found in '%s'", raw)
            return IngredientLine(raw=raw)

        quantity = self._parse_quantity(match)
        if quantity is None:
            return IngredientLine(raw=raw)

        words = raw[match.end():].split()
        if not words:
            unit, name = "", ""
        elif len(words) == 1:
            # A bare count and a noun, e.g. "3 eggs"
            unit, name = "", words[0]
        else:
            unit, name = words[0], " ".join(words[1:])

        _LOGGER.debug("Parsed '%s' as quantity=%s unit='%s' name='%s'",
                      raw, quantity, unit, name)
        return IngredientLine(raw=raw, quantity=quantity, unit=unit, name=name)


_PARSER = QuantityParser()


def parse_ingredient_line(text: str | None) -> IngredientLine | None:
    """Parse a single ingredient line with the shared parser."""
    return _PARSER.parse_line(text or "")


def parse_ingredient_block(text: str | None) -> list[IngredientLine]:
    """Parse a textarea of ingredients, one per line, dropping blank lines.

    Examples:
        >>> [line.raw for line in parse_ingredient_block("2 cups rice\\n\\n1 tbsp oil\\n")]
        ['2 cups rice', '1 tbsp oil']
    """
    return _PARSER.parse_block(text)
