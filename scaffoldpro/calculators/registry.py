"""
Calculator registry: maps scaffold-system keys to calculator classes.
"""

from .base import BaseCalculator
from .catalog import get_system
from .inputs import CalculationPolicy
from .mason_frame import MasonFrameCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "mason-frame": MasonFrameCalculator,
}


def get_calculator(system: str, policy: CalculationPolicy = None) -> BaseCalculator:
    """Returns a calculator instance for a scaffold system, or raises UnknownCatalogKey."""
    get_system(system)
    if system not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for system: {system}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[system](policy=policy)


def has_calculator(system: str) -> bool:
    """Check if a calculator exists for a scaffold system."""
    return system in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered scaffold systems."""
    return list(CALCULATOR_REGISTRY.keys())


def calculate(form, policy: CalculationPolicy = None) -> dict:
    """Run the calculator for form.system on a DimensionForm or AreaForm."""
    return get_calculator(form.system, policy).calculate(form)
