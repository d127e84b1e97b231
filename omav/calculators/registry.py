"""
Calculator registry — maps calculator keys to calculator classes.
"""

from .base import BaseCalculator
from .concrete import ConcreteCalculator
from .electrical import ElectricalCalculator
from .flooring import FlooringCalculator
from .hvac import HvacCalculator
from .land_grading import LandGradingCalculator
from .loan import LoanCalculator
from .materials import MaterialsCalculator
from .paint import PaintCalculator
from .plumbing import PlumbingCalculator
from .renovation_roi import RenovationRoiCalculator
from .roof import RoofCalculator
from .staircase import StaircaseCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    cls.key: cls
    for cls in (
        ConcreteCalculator,
        ElectricalCalculator,
        FlooringCalculator,
        HvacCalculator,
        LandGradingCalculator,
        LoanCalculator,
        MaterialsCalculator,
        PaintCalculator,
        PlumbingCalculator,
        RoofCalculator,
        StaircaseCalculator,
        RenovationRoiCalculator,
    )
}


def get_calculator(key: str) -> BaseCalculator:
    """Returns an instance of the calculator for a key, or raises ValueError."""
    if key not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for: {key}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[key]()


def has_calculator(key: str) -> bool:
    """Check if a calculator exists for a key."""
    return key in CALCULATOR_REGISTRY


def list_calculators() -> list[dict]:
    """Key and title of every registered calculator, in registration order."""
    return [{"key": key, "title": cls.title} for key, cls in CALCULATOR_REGISTRY.items()]
