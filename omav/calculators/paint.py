"""
Paint calculator — paintable wall area, litres by quality tier, can breakdown.
"""

import math

from .base import BaseCalculator

DOOR_AREA_SQFT = 21    # 7 ft × 3 ft
WINDOW_AREA_SQFT = 15  # 5 ft × 3 ft

# quality -> (coverage sq ft per litre, price per litre)
PAINT_QUALITY = {
    "economy": (100, 200),
    "standard": (125, 350),
    "premium": (150, 500),
}

CAN_SIZES = [20, 10, 4, 1]  # litres, largest first


def can_breakdown(liters: float) -> list:
    """Greedy split into the can ladder; any leftover fraction gets one more 1 L can."""
    cans = []
    remaining = liters
    for size in CAN_SIZES:
        if remaining >= size:
            cans.append({"size": f"{size}L", "count": math.floor(remaining / size)})
            remaining = remaining % size
    if remaining > 0:
        cans.append({"size": "1L", "count": 1})
    return cans


class PaintCalculator(BaseCalculator):

    key = "paint"
    title = "Paint Calculator"

    def calculate(self, fields: dict) -> dict:
        room_length = self.parse_number(fields.get("room_length"), "room_length", minimum=0)
        room_width = self.parse_number(fields.get("room_width"), "room_width", minimum=0)
        room_height = self.parse_number(fields.get("room_height"), "room_height", minimum=0)
        doors = self.parse_int(fields.get("door_count"), "door_count", default=1, minimum=0)
        windows = self.parse_int(fields.get("window_count"), "window_count", default=1, minimum=0)
        quality = self.parse_choice(fields.get("paint_quality"), "paint_quality", PAINT_QUALITY,
                                    default="standard")
        coats = self.parse_int(fields.get("coat_count"), "coat_count", default=2, minimum=1)

        wall_area = 2 * (room_length + room_width) * room_height
        door_window_area = doors * DOOR_AREA_SQFT + windows * WINDOW_AREA_SQFT
        paintable_area = max(wall_area - door_window_area, 0.0)

        coverage, price_per_liter = PAINT_QUALITY[quality]
        liters = paintable_area / coverage * coats

        return {
            "wall_area": wall_area,
            "door_window_area": door_window_area,
            "paintable_area": paintable_area,
            "paint_liters": liters,
            "paint_cans": can_breakdown(liters),
            "estimated_cost": liters * price_per_liter,
        }
