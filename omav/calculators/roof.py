"""
Roof calculator — pitched area by roof type, material units and cost.

Pitch is inches of rise per 12 inches of run; slope factor = √(1 + (pitch/12)²).
"""

import math

from .base import BaseCalculator

ROOF_TYPES = ("gable", "hip", "flat", "mansard", "gambrel")

# material -> (unit, sq ft covered per unit, labor per 100 sq ft)
ROOF_MATERIALS = {
    "asphalt": ("shingles (bundles)", 33.3, 150),
    "metal": ("panels", 100, 200),
    "tile": ("tiles", 15, 250),
    "slate": ("slates", 25, 350),
    "wood": ("shakes (bundles)", 33.3, 250),
}

HIP_EXTRA = 1.2
MANSARD_FACTOR = 1.4
GAMBREL_FACTOR = 1.3


def slope_factor(pitch: float) -> float:
    return math.sqrt(1 + (pitch / 12) ** 2)


def roof_area(flat_area: float, roof_type: str, pitch: float) -> float:
    """Actual surface area for a roof type over a footprint."""
    if roof_type == "flat":
        return flat_area
    if roof_type == "hip":
        return flat_area * slope_factor(pitch) * HIP_EXTRA
    if roof_type == "mansard":
        return flat_area * MANSARD_FACTOR
    if roof_type == "gambrel":
        return flat_area * GAMBREL_FACTOR
    return flat_area * slope_factor(pitch)


class RoofCalculator(BaseCalculator):

    key = "roof"
    title = "Roof Calculator"

    def calculate(self, fields: dict) -> dict:
        length = self.parse_number(fields.get("roof_length"), "roof_length", minimum=0)
        width = self.parse_number(fields.get("roof_width"), "roof_width", minimum=0)
        pitch = self.parse_number(fields.get("roof_pitch"), "roof_pitch", default=6, minimum=0)
        roof_type = self.parse_choice(fields.get("roof_type"), "roof_type", ROOF_TYPES,
                                      default="gable")
        material = self.parse_choice(fields.get("roof_material"), "roof_material",
                                     ROOF_MATERIALS, default="asphalt")
        wastage = self.parse_number(fields.get("wastage"), "wastage", default=15, minimum=0)
        price = self.parse_number(fields.get("price"), "price", default=0, minimum=0)

        area = roof_area(length * width, roof_type, pitch)
        area_with_wastage = self.apply_wastage(area, wastage)

        unit, coverage, labor_per_100 = ROOF_MATERIALS[material]
        quantity = math.ceil(area_with_wastage / coverage)

        material_cost = quantity * price
        labor_cost = (area / 100) * labor_per_100

        return {
            "roof_area": area,
            "roof_area_with_wastage": area_with_wastage,
            "slope_factor": slope_factor(pitch),
            "materials_needed": {
                "unit": unit,
                "quantity": quantity,
                "coverage": coverage,
            },
            "material_cost": material_cost,
            "labor_cost": labor_cost,
            "total_cost": material_cost + labor_cost,
        }
