"""
Flooring calculator — tiles, planks, carpet; boxes, material and labor cost.

Tile and plank sizes are given in inches. Price is per box for boxed
materials and per square foot for carpet/other. Labor is charged on the
room area before wastage.
"""

import math

from .base import BaseCalculator

FLOORING_TYPES = ("tile", "hardwood", "laminate", "vinyl", "carpet", "other")
PLANK_TYPES = ("hardwood", "laminate", "vinyl")
AREA_PRICED_TYPES = ("carpet", "other")
PATTERNS = ("straight", "diagonal", "herringbone")

PATTERN_MULTIPLIERS = {"straight": 1.0, "diagonal": 1.15, "herringbone": 1.2}

# sq ft per box (per roll for carpet)
BOX_COVERAGE = {"tile": 10, "hardwood": 20, "laminate": 25, "vinyl": 30, "carpet": 100, "other": 20}

LABOR_PER_SQFT = {"tile": 6, "hardwood": 8, "laminate": 5, "vinyl": 4, "carpet": 3, "other": 5}

MATERIAL_UNITS = {
    "tile": "tiles",
    "hardwood": "planks",
    "laminate": "planks",
    "vinyl": "planks",
    "carpet": "square feet",
    "other": "units",
}


class FlooringCalculator(BaseCalculator):

    key = "flooring"
    title = "Flooring Calculator"

    def calculate(self, fields: dict) -> dict:
        room_length = self.parse_number(fields.get("room_length"), "room_length", minimum=0)
        room_width = self.parse_number(fields.get("room_width"), "room_width", minimum=0)
        flooring_type = self.parse_choice(fields.get("flooring_type"), "flooring_type",
                                          FLOORING_TYPES, default="tile")
        wastage = self.parse_number(fields.get("wastage"), "wastage", default=10, minimum=0)
        price = self.parse_number(fields.get("price"), "price", default=0, minimum=0)

        room_area = room_length * room_width
        room_area_with_wastage = self.apply_wastage(room_area, wastage)

        if flooring_type == "tile":
            pattern = self.parse_choice(fields.get("pattern"), "pattern", PATTERNS,
                                        default="straight")
            tile_area = self.sq_ft_from_inches(
                self.parse_positive(fields.get("tile_length"), "tile_length", default=12),
                self.parse_positive(fields.get("tile_width"), "tile_width", default=12),
            )
            units_needed = math.ceil(
                room_area_with_wastage * PATTERN_MULTIPLIERS[pattern] / tile_area)
        elif flooring_type in PLANK_TYPES:
            plank_area = self.sq_ft_from_inches(
                self.parse_positive(fields.get("plank_length"), "plank_length", default=48),
                self.parse_positive(fields.get("plank_width"), "plank_width", default=6),
            )
            units_needed = math.ceil(room_area_with_wastage / plank_area)
        else:
            units_needed = room_area_with_wastage

        box_coverage = BOX_COVERAGE[flooring_type]
        boxes_needed = math.ceil(room_area_with_wastage / box_coverage)

        if flooring_type in AREA_PRICED_TYPES:
            material_cost = room_area_with_wastage * price
        else:
            material_cost = boxes_needed * price

        labor_cost = room_area * LABOR_PER_SQFT[flooring_type]

        return {
            "flooring_type": flooring_type,
            "room_area": room_area,
            "room_area_with_wastage": room_area_with_wastage,
            "tiles_needed": units_needed,
            "material_unit": MATERIAL_UNITS[flooring_type],
            "box_coverage": box_coverage,
            "boxes_needed": boxes_needed,
            "estimated_cost": material_cost,
            "labor_cost": labor_cost,
            "total_cost": material_cost + labor_cost,
        }
