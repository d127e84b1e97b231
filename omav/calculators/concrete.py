"""
Concrete calculator — volume by shape, wastage, mix materials by PSI tier.

Volumes are in cubic yards (ft³ / 27). Mix ratio and water-cement ratio
come from the PSI tier; a 94 lb cement bag is taken as ~1 ft³.
"""

import math

from .base import BaseCalculator

SHAPES = ("rectangular", "circular", "slab", "cylindrical")

# (min_psi, cement, sand, aggregate, water-cement ratio) — first match wins
MIX_TIERS = [
    (4000, 1.0, 1.5, 3.0, 0.45),
    (3500, 1.0, 2.0, 3.0, 0.48),
    (0, 1.0, 2.0, 3.0, 0.50),
]

TRUCK_CAPACITY_YD3 = 10
COST_PER_CUBIC_YARD = 6000


def mix_for_psi(psi: int) -> tuple:
    for min_psi, cement, sand, aggregate, water_ratio in MIX_TIERS:
        if psi >= min_psi:
            return cement, sand, aggregate, water_ratio
    return MIX_TIERS[-1][1:]


class ConcreteCalculator(BaseCalculator):

    key = "concrete"
    title = "Concrete Calculator"

    def calculate(self, fields: dict) -> dict:
        shape = self.parse_choice(fields.get("shape"), "shape", SHAPES, default="rectangular")
        wastage = self.parse_number(fields.get("wastage"), "wastage", default=10, minimum=0)
        psi = self.parse_int(fields.get("psi"), "psi", default=3000, minimum=0)

        if shape == "rectangular":
            length = self.parse_number(fields.get("length"), "length", minimum=0)
            width = self.parse_number(fields.get("width"), "width", minimum=0)
            height = self.parse_number(fields.get("height"), "height", minimum=0)
            cubic_feet = length * width * height
        elif shape == "circular":
            radius = self.parse_number(fields.get("radius"), "radius", minimum=0)
            height = self.parse_number(fields.get("height"), "height", minimum=0)
            cubic_feet = math.pi * radius ** 2 * height
        elif shape == "slab":
            length = self.parse_number(fields.get("length"), "length", minimum=0)
            width = self.parse_number(fields.get("width"), "width", minimum=0)
            thickness_in = self.parse_number(fields.get("thickness"), "thickness", minimum=0)
            cubic_feet = length * width * (thickness_in / 12)
        else:
            diameter = self.parse_number(fields.get("diameter"), "diameter", minimum=0)
            height = self.parse_number(fields.get("height"), "height", minimum=0)
            cubic_feet = math.pi * (diameter / 2) ** 2 * height

        volume = self.cubic_feet_to_yards(cubic_feet)
        volume_with_wastage = self.apply_wastage(volume, wastage)

        cement_ratio, sand_ratio, aggregate_ratio, water_ratio = mix_for_psi(psi)
        total_parts = cement_ratio + sand_ratio + aggregate_ratio

        cement = volume_with_wastage * (cement_ratio / total_parts)
        sand = volume_with_wastage * (sand_ratio / total_parts)
        aggregate = volume_with_wastage * (aggregate_ratio / total_parts)

        cement_cubic_feet = cement * self.CUBIC_FEET_PER_YARD
        water = cement_cubic_feet * water_ratio * self.GALLONS_PER_CUBIC_FOOT

        return {
            "shape": shape,
            "volume": volume,
            "volume_with_wastage": volume_with_wastage,
            "cement": cement,
            "sand": sand,
            "aggregate": aggregate,
            "water": water,
            "mix_bags": math.ceil(cement_cubic_feet),
            "ready_mix_trucks": math.ceil(volume_with_wastage / TRUCK_CAPACITY_YD3),
            "estimated_cost": volume_with_wastage * COST_PER_CUBIC_YARD,
            "mix_ratio": "%g:%g:%g" % (cement_ratio, sand_ratio, aggregate_ratio),
            "water_cement_ratio": water_ratio,
        }
