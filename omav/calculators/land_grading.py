"""
Land grading calculator — cut or fill volume, truck loads, cost and machine time.

A site above the desired grade is cut (excavated soil bulks up by the soil's
bulking factor); a site below it is filled (10% extra for compaction).
"""

import math

from .base import BaseCalculator

# % volume increase once excavated
SOIL_BULKING = {"sand": 15, "loam": 20, "clay": 35, "rock": 50}

# yd³ per hour
EQUIPMENT_RATES = {"bulldozer": 150, "excavator": 100, "skidsteer": 40, "grader": 80}

FILL_COMPACTION_PERCENT = 10
TRUCK_CAPACITY_YD3 = 10
DEFAULT_PRICE_PER_YD3 = 800


class LandGradingCalculator(BaseCalculator):

    key = "land_grading"
    title = "Land Grading Calculator"

    def calculate(self, fields: dict) -> dict:
        length = self.parse_number(fields.get("length"), "length", minimum=0)
        width = self.parse_number(fields.get("width"), "width", minimum=0)
        current_elevation = self.parse_number(fields.get("current_elevation"), "current_elevation")
        desired_elevation = self.parse_number(fields.get("desired_elevation"), "desired_elevation")
        soil_type = self.parse_choice(fields.get("soil_type"), "soil_type", SOIL_BULKING,
                                      default="loam")
        bulking_factor = self.parse_number(fields.get("bulking_factor"), "bulking_factor",
                                           default=SOIL_BULKING[soil_type], minimum=0)
        price = self.parse_number(fields.get("price_per_cubic_yard"), "price_per_cubic_yard",
                                  default=DEFAULT_PRICE_PER_YD3, minimum=0)
        equipment = self.parse_choice(fields.get("equipment_type"), "equipment_type",
                                      EQUIPMENT_RATES, default="bulldozer")

        area = length * width
        height_difference = current_elevation - desired_elevation

        cut_volume = 0.0
        fill_volume = 0.0
        if height_difference > 0:
            cut_volume = self.cubic_feet_to_yards(area * height_difference)
        else:
            fill_volume = self.cubic_feet_to_yards(area * abs(height_difference))

        if cut_volume > 0:
            operation = "cut"
            adjusted_volume = self.apply_wastage(cut_volume, bulking_factor)
        else:
            operation = "fill" if fill_volume > 0 else "none"
            adjusted_volume = self.apply_wastage(fill_volume, FILL_COMPACTION_PERCENT)

        return {
            "area": area,
            "operation": operation,
            "cut_volume": cut_volume,
            "fill_volume": fill_volume,
            "bulking_factor": bulking_factor,
            "adjusted_volume": adjusted_volume,
            "truck_loads": math.ceil(adjusted_volume / TRUCK_CAPACITY_YD3),
            "estimated_cost": adjusted_volume * price,
            "estimated_time": adjusted_volume / EQUIPMENT_RATES[equipment],
        }
