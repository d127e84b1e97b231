"""
Abstract base class for all trade calculators.

Input: the form fields dict, exactly as the site's calculator forms post it
(numbers or numeric strings).
Output: a result dict with snake_case keys.

Inputs are validated, never coerced: a field that is not a number raises
InvalidNumberError instead of silently becoming zero.
"""

import logging
import math
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class CalculatorInputError(ValueError):
    """A form field the calculator cannot work with."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidNumberError(CalculatorInputError):
    """Missing, non-numeric, non-finite or out-of-range numeric field."""


class InvalidChoiceError(CalculatorInputError):
    """Value not among a field's enumerated options."""


class BaseCalculator(ABC):
    """All trade calculators inherit from this."""

    key = ""
    title = ""

    # Standard conversions
    CUBIC_FEET_PER_YARD = 27.0
    CUBIC_INCHES_PER_FOOT = 1728.0
    SQ_INCHES_PER_FOOT = 144.0
    GALLONS_PER_CUBIC_FOOT = 7.48

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the submitted form fields.
        Returns the result dict for this trade.
        """
        pass

    # --- Input parsing ---

    def _is_missing(self, value) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    def parse_number(self, value, field: str, default: float = None,
                     minimum: float = None, maximum: float = None) -> float:
        """
        Parse a numeric form value. Missing values take `default` when one is
        given; anything else that is not a finite number raises.
        """
        if self._is_missing(value):
            if default is None:
                raise InvalidNumberError(field, "is required")
            return float(default)
        if isinstance(value, bool):
            raise InvalidNumberError(field, f"must be a number, got {value!r}")
        try:
            number = float(str(value).strip()) if isinstance(value, str) else float(value)
        except (ValueError, TypeError):
            logger.debug("Rejected %s=%r", field, value)
            raise InvalidNumberError(field, f"must be a number, got {value!r}")
        if not math.isfinite(number):
            raise InvalidNumberError(field, f"must be a finite number, got {value!r}")
        if minimum is not None and number < minimum:
            raise InvalidNumberError(field, f"must be at least {minimum:g}, got {number:g}")
        if maximum is not None and number > maximum:
            raise InvalidNumberError(field, f"must be at most {maximum:g}, got {number:g}")
        return number

    def parse_int(self, value, field: str, default: int = None,
                  minimum: int = None, maximum: int = None) -> int:
        """Parse an integer form value. Fractions truncate toward zero."""
        number = self.parse_number(value, field, default=default)
        result = int(number)
        if minimum is not None and result < minimum:
            raise InvalidNumberError(field, f"must be at least {minimum}, got {result}")
        if maximum is not None and result > maximum:
            raise InvalidNumberError(field, f"must be at most {maximum}, got {result}")
        return result

    def parse_positive(self, value, field: str, default: float = None) -> float:
        """Parse a value the formula divides by — zero is not allowed."""
        number = self.parse_number(value, field, default=default)
        if number <= 0:
            raise InvalidNumberError(field, f"must be greater than 0, got {number:g}")
        return number

    def parse_choice(self, value, field: str, choices, default: str = None) -> str:
        """Parse an enumerated option (case-insensitive)."""
        if self._is_missing(value):
            if default is None:
                raise InvalidChoiceError(field, "is required")
            return default
        choice = str(value).strip().lower()
        if choice not in choices:
            raise InvalidChoiceError(
                field, f"must be one of {sorted(choices)}, got {value!r}")
        return choice

    # --- Helper methods for all calculators ---

    def apply_wastage(self, quantity: float, wastage_percent: float) -> float:
        """Add a percentage buffer for cutting and handling loss."""
        return quantity * (1 + wastage_percent / 100)

    def cubic_feet_to_yards(self, cubic_feet: float) -> float:
        return cubic_feet / self.CUBIC_FEET_PER_YARD

    def cubic_inches_to_feet(self, cubic_inches: float) -> float:
        return cubic_inches / self.CUBIC_INCHES_PER_FOOT

    def sq_ft_from_inches(self, length_in: float, width_in: float) -> float:
        """Square footage of a rectangle given in inches."""
        return (length_in * width_in) / self.SQ_INCHES_PER_FOOT

    def round_half_up(self, value: float, digits: int = 0) -> float:
        """Round halves upward, matching the site's front end."""
        factor = 10 ** digits
        rounded = math.floor(value * factor + 0.5) / factor
        return int(rounded) if digits == 0 else rounded

    def money(self, value: float) -> float:
        """Two-decimal currency value."""
        return self.round_half_up(value, 2)
