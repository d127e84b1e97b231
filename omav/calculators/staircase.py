"""
Staircase calculator — step count, footprint, material volumes, handrail,
cost and a building-code check.

All lengths are inches. Steps = floor height / preferred riser, rounded
half-up and never fewer than one; the actual riser divides the rise evenly.
"""

import math

from .base import BaseCalculator

STAIRCASE_TYPES = ("straight", "l-shaped", "u-shaped", "spiral")

# cost per cubic foot of tread/riser/stringer material
MATERIAL_COST = {"wood": 2500, "concrete": 1000, "metal": 4000}
DEFAULT_MATERIAL_COST = 2000

# cost per running foot of handrail
HANDRAIL_COST = {"simple": 1200, "ornamental": 2500, "glass": 3500}

BALUSTERS_PER_FOOT = 3
BALUSTER_COST = 500

CENTER_COLUMN_DIAMETER = 12
U_TURN_GAP = 4
MIN_HEADROOM = 80

TREAD_THICKNESS = 1
RISER_THICKNESS = 0.75
STRINGER_COUNT = 2
STRINGER_WIDTH = 12
STRINGER_THICKNESS = 1.5

RISER_RANGE = (4, 7.75)
TREAD_RANGE = (10, 14)
ANGLE_RANGE = (20, 45)
MIN_WIDTH = 36

SPACE_WARNING = (
    "Warning: The calculated staircase dimensions exceed the available space. "
    "Consider a different staircase type or adjust the dimensions."
)
FORMULA_REMINDER = (
    'Remember: A well-designed staircase typically follows the "2R + T = 24-25" '
    "formula, where R is the riser height and T is the tread depth."
)


def in_range(value: float, bounds: tuple) -> bool:
    low, high = bounds
    return low <= value <= high


def _fmt(value: float) -> str:
    return f"{value:g}"


class StaircaseCalculator(BaseCalculator):

    key = "staircase"
    title = "Staircase Calculator"

    def _layout(self, staircase_type, steps, tread, width, total_run):
        """Footprint for a staircase type: (adjusted run, length, width, note)."""
        if staircase_type == "l-shaped":
            before = math.ceil(steps / 2)
            after = steps - before
            run_before = before * tread
            run_after = after * tread
            note = (f"L-shaped staircase with {before} steps before the landing "
                    f"and {after} steps after the landing.")
            return max(run_before, run_after), run_before + width, width + run_after, note
        if staircase_type == "u-shaped":
            per_flight = math.ceil(steps / 2)
            run = per_flight * tread
            note = f"U-shaped staircase with {per_flight} steps per flight and a landing between."
            return run, run, 2 * width + U_TURN_GAP, note
        if staircase_type == "spiral":
            outer = CENTER_COLUMN_DIAMETER + 2 * tread
            note = f"Spiral staircase with {steps} wedge-shaped steps around a central column."
            return outer / 2, outer, outer, note
        return total_run, total_run, width, None

    def _handrail_feet(self, staircase_type, rise, total_run, adjusted_run, width,
                       steps, tread):
        if staircase_type == "straight":
            return math.hypot(rise, total_run) / 12
        if staircase_type in ("l-shaped", "u-shaped"):
            flight = math.hypot(rise / 2, adjusted_run)
            return (2 * flight + width) / 12
        circumference = math.pi * (CENTER_COLUMN_DIAMETER + tread)
        return steps * circumference / 12 / 12

    def calculate(self, fields: dict) -> dict:
        rise = self.parse_positive(fields.get("floor_height"), "floor_height")
        space_length = self.parse_number(fields.get("space_length"), "space_length",
                                         default=0, minimum=0)
        space_width = self.parse_number(fields.get("space_width"), "space_width",
                                        default=0, minimum=0)
        riser = self.parse_positive(fields.get("riser_height"), "riser_height", default=7)
        tread = self.parse_positive(fields.get("tread_depth"), "tread_depth", default=11)
        width = self.parse_positive(fields.get("stair_width"), "stair_width", default=36)
        staircase_type = self.parse_choice(fields.get("staircase_type"), "staircase_type",
                                           STAIRCASE_TYPES, default="straight")
        material = self.parse_choice(fields.get("material"), "material",
                                     ("wood", "concrete", "metal", "other"), default="wood")
        handrail_type = self.parse_choice(fields.get("handrail_type"), "handrail_type",
                                          HANDRAIL_COST, default="simple")

        steps = max(self.round_half_up(rise / riser), 1)
        actual_riser = rise / steps
        total_run = steps * tread

        adjusted_run, length, footprint_width, type_note = self._layout(
            staircase_type, steps, tread, width, total_run)
        fits = length <= space_length and footprint_width <= space_width

        angle = math.degrees(math.atan(rise / total_run))
        headroom = MIN_HEADROOM + 12 * math.cos(math.radians(angle))

        tread_volume = self.cubic_inches_to_feet(width * tread * TREAD_THICKNESS * steps)
        riser_volume = self.cubic_inches_to_feet(width * actual_riser * RISER_THICKNESS * steps)
        stringer_volume = self.cubic_inches_to_feet(
            STRINGER_COUNT * STRINGER_WIDTH * math.hypot(rise, total_run) * STRINGER_THICKNESS)

        handrail = self._handrail_feet(staircase_type, rise, total_run, adjusted_run,
                                       width, steps, tread)
        balusters = math.ceil(handrail * BALUSTERS_PER_FOOT)

        per_cubic_foot = MATERIAL_COST.get(material, DEFAULT_MATERIAL_COST)
        cost = (
            (tread_volume + riser_volume + stringer_volume) * per_cubic_foot
            + handrail * HANDRAIL_COST[handrail_type]
            + balusters * BALUSTER_COST
        )

        riser_ok = in_range(actual_riser, RISER_RANGE)
        tread_ok = in_range(tread, TREAD_RANGE)
        angle_ok = in_range(angle, ANGLE_RANGE)
        width_ok = width >= MIN_WIDTH

        notes = []
        if type_note:
            notes.append(type_note)
        if not fits:
            notes.append(SPACE_WARNING)
        if not riser_ok:
            notes.append(f'Warning: The riser height ({actual_riser:.2f}") is outside the '
                         f'recommended range (4"-7.75"). Consider adjusting the number of steps.')
        if not tread_ok:
            notes.append(f'Warning: The tread depth ({_fmt(tread)}") is outside the '
                         f'recommended range (10"-14").')
        if not angle_ok:
            notes.append(f"Warning: The staircase angle ({angle:.2f}°) is outside the "
                         f"recommended range (20°-45°).")
        if not width_ok:
            notes.append(f'Warning: The staircase width ({_fmt(width)}") is less than the '
                         f'minimum recommended width (36").')
        notes.append(FORMULA_REMINDER)

        return {
            "total_rise": rise,
            "number_of_steps": steps,
            "total_run": total_run,
            "stair_angle": angle,
            "steps_details": {
                "riser_height": actual_riser,
                "tread_depth": tread,
                "stair_width": width,
            },
            "dimensions": {
                "total_stairway_length": length,
                "stairway_width": footprint_width,
                "headroom": headroom,
            },
            "materials": {
                "tread_volume": tread_volume,
                "riser_volume": riser_volume,
                "stringer_volume": stringer_volume,
                "handrail_length": handrail,
                "balusters_count": balusters,
            },
            "estimated_cost": cost,
            "fits_space": fits,
            "is_code_compliant": riser_ok and tread_ok and angle_ok and width_ok,
            "notes": notes,
        }
