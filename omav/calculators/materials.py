"""
Building materials (masonry) calculator — bricks, cement, sand and water for a wall.

Mortar is taken as 20% of the wall volume, mixed 1:N cement to sand.
A cement bag is 1.25 ft³; each bag needs about 80 L of water.
"""

import math

from .base import BaseCalculator, InvalidNumberError

# inches (length, width, height)
BRICK_SIZES = {
    "standard": (9.0, 4.5, 3.0),
    "modular": (7.625, 3.625, 2.25),
}

MORTAR_RATIOS = {"1:4": 4, "1:5": 5, "1:6": 6}

BRICK_WASTE = 1.10
MORTAR_SHARE = 0.2
CEMENT_BAG_CUBIC_FEET = 1.25
WATER_LITERS_PER_BAG = 80


class MaterialsCalculator(BaseCalculator):

    key = "materials"
    title = "Building Materials Calculator"

    def calculate(self, fields: dict) -> dict:
        wall_length = self.parse_number(fields.get("wall_length"), "wall_length", minimum=0)
        wall_height = self.parse_number(fields.get("wall_height"), "wall_height", minimum=0)
        wall_thickness = self.parse_number(fields.get("wall_thickness"), "wall_thickness",
                                           minimum=0)
        openings_area = self.parse_number(fields.get("openings_area"), "openings_area",
                                          default=0, minimum=0)
        mortar = self.parse_choice(fields.get("mortar"), "mortar", MORTAR_RATIOS, default="1:6")
        brick_type = self.parse_choice(fields.get("brick_type"), "brick_type", BRICK_SIZES,
                                       default="standard")

        wall_area = wall_length * wall_height - openings_area
        if wall_area < 0:
            raise InvalidNumberError("openings_area", "is larger than the wall itself")
        wall_volume = wall_area * (wall_thickness / 12)

        length, width, height = BRICK_SIZES[brick_type]
        brick_volume = self.cubic_inches_to_feet(length * width * height)
        bricks = math.ceil(wall_volume / brick_volume * BRICK_WASTE)

        ratio = MORTAR_RATIOS[mortar]
        mortar_volume = wall_volume * MORTAR_SHARE
        cement_volume = mortar_volume / (1 + ratio)
        cement_bags = math.ceil(cement_volume / CEMENT_BAG_CUBIC_FEET)
        sand = math.ceil(mortar_volume * (ratio / (1 + ratio)))

        return {
            "wall_area": wall_area,
            "wall_volume": wall_volume,
            "bricks_required": bricks,
            "mortar_volume": mortar_volume,
            "cement": cement_bags,
            "sand": sand,
            "water_liters": cement_bags * WATER_LITERS_PER_BAG,
        }
