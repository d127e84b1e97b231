"""
Building-envelope and finishing calculator tests — flooring, paint, roof, staircase.

Tests:
1-5.   Flooring
6-9.   Paint
10-13. Roof
14-24. Staircase
"""

import math

import pytest

from omav.calculators.base import InvalidChoiceError, InvalidNumberError
from omav.calculators.flooring import FlooringCalculator
from omav.calculators.paint import PaintCalculator, can_breakdown
from omav.calculators.roof import RoofCalculator, slope_factor
from omav.calculators.staircase import FORMULA_REMINDER, SPACE_WARNING, StaircaseCalculator


# ============================================================
# Flooring
# ============================================================

def test_flooring_tiles_straight_pattern():
    result = FlooringCalculator().calculate({
        "room_length": 10, "room_width": 10, "flooring_type": "tile",
        "tile_length": 12, "tile_width": 12, "wastage": 25, "price": 500,
    })
    assert result["room_area"] == 100
    assert result["room_area_with_wastage"] == 125
    assert result["tiles_needed"] == 125
    assert result["material_unit"] == "tiles"
    assert result["boxes_needed"] == 13
    assert result["estimated_cost"] == 6500
    assert result["labor_cost"] == 600
    assert result["total_cost"] == 7100


def test_flooring_diagonal_pattern_needs_more_tiles():
    result = FlooringCalculator().calculate({
        "room_length": 10, "room_width": 10, "flooring_type": "tile",
        "wastage": 25, "pattern": "diagonal",
    })
    assert result["tiles_needed"] == 144     # 125 × 1.15 = 143.75


def test_flooring_planks():
    result = FlooringCalculator().calculate({
        "room_length": 10, "room_width": 10, "flooring_type": "hardwood",
        "plank_length": 48, "plank_width": 6, "wastage": 0, "price": 2000,
    })
    assert result["tiles_needed"] == 50
    assert result["material_unit"] == "planks"
    assert result["boxes_needed"] == 5
    assert result["estimated_cost"] == 10000
    assert result["labor_cost"] == 800


def test_flooring_carpet_priced_by_area():
    result = FlooringCalculator().calculate({
        "room_length": 10, "room_width": 10, "flooring_type": "carpet",
        "wastage": 0, "price": 50,
    })
    assert result["tiles_needed"] == 100
    assert result["boxes_needed"] == 1
    assert result["estimated_cost"] == 5000
    assert result["labor_cost"] == 300


def test_flooring_zero_tile_size_rejected():
    with pytest.raises(InvalidNumberError) as exc:
        FlooringCalculator().calculate({
            "room_length": 10, "room_width": 10, "flooring_type": "tile", "tile_length": 0,
        })
    assert exc.value.field == "tile_length"


# ============================================================
# Paint
# ============================================================

def test_paint_standard_room():
    result = PaintCalculator().calculate({
        "room_length": 12, "room_width": 10, "room_height": 10,
    })
    assert result["wall_area"] == 440
    assert result["door_window_area"] == 36
    assert result["paintable_area"] == 404
    assert result["paint_liters"] == pytest.approx(6.464)
    assert result["estimated_cost"] == pytest.approx(2262.4)
    assert result["paint_cans"] == [
        {"size": "4L", "count": 1},
        {"size": "1L", "count": 2},
        {"size": "1L", "count": 1},
    ]


def test_can_breakdown_greedy():
    assert can_breakdown(20) == [{"size": "20L", "count": 1}]
    assert can_breakdown(45) == [
        {"size": "20L", "count": 2},
        {"size": "4L", "count": 1},
        {"size": "1L", "count": 1},
    ]
    assert can_breakdown(0) == []


def test_paint_openings_larger_than_walls_clamp_to_zero():
    result = PaintCalculator().calculate({
        "room_length": 1, "room_width": 1, "room_height": 1,
    })
    assert result["paintable_area"] == 0
    assert result["paint_liters"] == 0
    assert result["paint_cans"] == []


def test_paint_unknown_quality_rejected():
    with pytest.raises(InvalidChoiceError) as exc:
        PaintCalculator().calculate({
            "room_length": 12, "room_width": 10, "room_height": 10, "paint_quality": "gold",
        })
    assert exc.value.field == "paint_quality"


# ============================================================
# Roof
# ============================================================

def test_roof_gable_asphalt():
    result = RoofCalculator().calculate({
        "roof_length": 30, "roof_width": 20, "price": 1000,
    })
    factor = math.sqrt(1.25)
    assert result["slope_factor"] == pytest.approx(factor)
    assert result["roof_area"] == pytest.approx(600 * factor)
    assert result["roof_area_with_wastage"] == pytest.approx(600 * factor * 1.15)
    assert result["materials_needed"] == {
        "unit": "shingles (bundles)", "quantity": 24, "coverage": 33.3,
    }
    assert result["material_cost"] == 24000
    assert result["labor_cost"] == pytest.approx(6 * factor * 150)


def test_roof_flat_metal():
    result = RoofCalculator().calculate({
        "roof_length": 30, "roof_width": 20, "roof_type": "flat", "roof_material": "metal",
    })
    assert result["roof_area"] == 600
    assert result["materials_needed"]["unit"] == "panels"
    assert result["materials_needed"]["quantity"] == 7
    assert result["labor_cost"] == 1200


def test_roof_type_multipliers():
    calc = RoofCalculator()
    base = {"roof_length": 10, "roof_width": 10, "roof_pitch": 12}
    assert calc.calculate({**base, "roof_type": "mansard"})["roof_area"] == pytest.approx(140)
    assert calc.calculate({**base, "roof_type": "gambrel"})["roof_area"] == pytest.approx(130)
    assert calc.calculate({**base, "roof_type": "hip"})["roof_area"] == pytest.approx(
        100 * math.sqrt(2) * 1.2)


def test_slope_factor_flat_pitch():
    assert slope_factor(0) == 1


# ============================================================
# Staircase
# ============================================================

BASE_STAIRS = {"floor_height": 120, "space_length": 200, "space_width": 50}


def test_staircase_straight_compliant():
    result = StaircaseCalculator().calculate(BASE_STAIRS)
    assert result["number_of_steps"] == 17
    assert result["steps_details"]["riser_height"] == pytest.approx(120 / 17)
    assert result["total_run"] == 187
    assert result["stair_angle"] == pytest.approx(math.degrees(math.atan(120 / 187)))
    assert result["fits_space"] is True
    assert result["is_code_compliant"] is True
    assert result["notes"] == [FORMULA_REMINDER]
    handrail = math.hypot(120, 187) / 12
    assert result["materials"]["handrail_length"] == pytest.approx(handrail)
    assert result["materials"]["balusters_count"] == math.ceil(handrail * 3)


def test_staircase_l_shaped_footprint():
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "staircase_type": "l-shaped"})
    assert result["dimensions"]["total_stairway_length"] == 9 * 11 + 36
    assert result["dimensions"]["stairway_width"] == 36 + 8 * 11
    assert result["fits_space"] is False
    assert result["notes"][0] == (
        "L-shaped staircase with 9 steps before the landing and 8 steps after the landing.")
    assert result["notes"][1] == SPACE_WARNING


def test_staircase_u_shaped_footprint():
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "staircase_type": "u-shaped"})
    assert result["dimensions"]["total_stairway_length"] == 99
    assert result["dimensions"]["stairway_width"] == 76
    assert result["notes"][0] == (
        "U-shaped staircase with 9 steps per flight and a landing between.")


def test_staircase_spiral_footprint():
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "staircase_type": "spiral"})
    assert result["dimensions"]["total_stairway_length"] == 34
    assert result["dimensions"]["stairway_width"] == 34
    assert result["materials"]["handrail_length"] == pytest.approx(17 * math.pi * 23 / 144)


def test_staircase_steps_round_half_up():
    # 17.5 / 7 = 2.5 steps
    result = StaircaseCalculator().calculate({"floor_height": 17.5})
    assert result["number_of_steps"] == 3


def test_staircase_narrow_width_warns():
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "stair_width": 30})
    assert result["is_code_compliant"] is False
    assert any('width (30")' in note for note in result["notes"])
    assert result["notes"][-1] == FORMULA_REMINDER


def test_staircase_steep_riser_warns():
    # 120 / round(120 / 9) = 9.23 in risers
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "riser_height": 9})
    assert result["number_of_steps"] == 13
    assert result["is_code_compliant"] is False
    assert any(note.startswith('Warning: The riser height (9.23")') for note in result["notes"])


def test_staircase_shallow_tread_warns():
    result = StaircaseCalculator().calculate({**BASE_STAIRS, "tread_depth": 9})
    assert result["is_code_compliant"] is False
    assert any(note.startswith('Warning: The tread depth (9")') for note in result["notes"])
    assert not any("riser height" in note for note in result["notes"])


def test_staircase_low_angle_warns():
    result = StaircaseCalculator().calculate(
        {**BASE_STAIRS, "riser_height": 4, "tread_depth": 14})
    assert result["number_of_steps"] == 30
    assert result["stair_angle"] < 20
    assert result["is_code_compliant"] is False
    assert any(note.startswith("Warning: The staircase angle (15.95°)") for note in result["notes"])
    assert not any("riser height" in note or "tread depth" in note for note in result["notes"])


def test_staircase_cost_by_material():
    wood = StaircaseCalculator().calculate({**BASE_STAIRS, "material": "wood"})
    metal = StaircaseCalculator().calculate({**BASE_STAIRS, "material": "metal"})
    assert metal["estimated_cost"] > wood["estimated_cost"]


def test_staircase_zero_height_rejected():
    with pytest.raises(InvalidNumberError) as exc:
        StaircaseCalculator().calculate({"floor_height": 0})
    assert exc.value.field == "floor_height"
