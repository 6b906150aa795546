"""
Abstract base class for all scaffold-system calculators.

Input: a CalculationInput record (DimensionForm or AreaForm)
Output: CalculationResult dict (see schemas.CalculationResult)
"""

import logging
import math
from abc import ABC, abstractmethod

from .catalog import (
    BUILDING_SIDE_RANGE,
    COMPONENT_KINDS,
    WORK_LEVEL_RANGE,
)
from .exceptions import ValidationError
from .inputs import CalculationPolicy

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All scaffold-system calculators inherit from this."""

    def __init__(self, policy: CalculationPolicy = None):
        self.policy = policy or CalculationPolicy.from_settings()

    @abstractmethod
    def calculate(self, form) -> dict:
        """
        Takes a validated-on-entry CalculationInput.
        Returns a CalculationResult dict.
        """
        pass

    # --- Validation helpers ---

    def require_positive(self, field: str, value) -> float:
        """Parse a measurement. Must be a finite number greater than zero."""
        if isinstance(value, bool) or value is None:
            raise ValidationError(field, "must be a number", value)
        try:
            number = float(str(value).strip()) if isinstance(value, str) else float(value)
        except (ValueError, TypeError):
            raise ValidationError(field, "must be a number", value) from None
        if not math.isfinite(number):
            raise ValidationError(field, "must be finite", value)
        if number <= 0:
            raise ValidationError(field, "must be greater than 0", value)
        return number

    def require_at_most(self, field: str, value: float, limit: float) -> float:
        """Upper bound for a measurement already parsed by require_positive."""
        if not math.isfinite(value) or value > limit:
            raise ValidationError(field, f"too large (at most {limit:g})", value)
        return value

    def require_int_in_range(self, field: str, value, low: int, high: int) -> int:
        """Parse a whole-number count within [low, high]."""
        if isinstance(value, bool) or value is None:
            raise ValidationError(field, "must be a whole number", value)
        try:
            number = float(str(value).strip()) if isinstance(value, str) else float(value)
        except (ValueError, TypeError):
            raise ValidationError(field, "must be a whole number", value) from None
        if not math.isfinite(number) or not number.is_integer():
            raise ValidationError(field, "must be a whole number", value)
        if not low <= number <= high:
            raise ValidationError(field, f"must be between {low} and {high}", value)
        return int(number)

    def require_work_levels(self, value) -> int:
        return self.require_int_in_range("work_levels", value, *WORK_LEVEL_RANGE)

    def require_building_sides(self, value) -> int:
        return self.require_int_in_range("building_sides", value, *BUILDING_SIDE_RANGE)

    # --- Arithmetic helpers ---

    def cm_to_m(self, cm: float) -> float:
        return cm / 100.0

    def ceil_count(self, quantity: float) -> int:
        """
        Physical component counts always round UP.
        Rounded to 9 places first so float noise (10.000000000000002)
        does not add a whole component.
        """
        return int(math.ceil(round(quantity, 9)))

    # --- Output builders ---

    def make_component_line(self, quantity: int, specification: str) -> dict:
        return {
            "quantity": int(quantity),
            "specification": specification,
        }

    def total_components(self, components: dict) -> int:
        return sum(line["quantity"] for line in components.values())

    def total_weight_kg(self, components: dict, unit_weights: dict) -> int:
        """Sum of quantity × unit weight, rounded half-up to the nearest kg."""
        raw = sum(
            components[kind]["quantity"] * unit_weights.get(kind, 0.0)
            for kind in components
        )
        return int(math.floor(round(raw, 6) + 0.5))

    def ordered_components(self, components: dict) -> dict:
        """Return component lines in catalog order."""
        return {kind: components[kind] for kind in COMPONENT_KINDS if kind in components}
