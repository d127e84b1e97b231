"""
Site-work calculator tests — concrete, masonry materials, land grading, construction loan.

Tests:
1-4.   Framework (registry, parsing, rounding)
5-9.   Concrete
10-12. Building materials
13-15. Land grading
16-25. Construction loan
"""

import pytest

from omav.calculators.base import CalculatorInputError, InvalidChoiceError, InvalidNumberError
from omav.calculators.concrete import ConcreteCalculator
from omav.calculators.land_grading import LandGradingCalculator
from omav.calculators.loan import LoanCalculator, draw_amounts, monthly_payment
from omav.calculators.materials import MaterialsCalculator
from omav.calculators.registry import get_calculator, has_calculator, list_calculators


# ============================================================
# Framework tests
# ============================================================

def test_registry_lists_every_trade():
    keys = [c["key"] for c in list_calculators()]
    assert keys == [
        "concrete", "electrical", "flooring", "hvac", "land_grading", "loan",
        "materials", "paint", "plumbing", "roof", "staircase", "renovation_roi",
    ]
    assert has_calculator("concrete")
    assert not has_calculator("swimming_pool")
    assert isinstance(get_calculator("loan"), LoanCalculator)


def test_registry_unknown_key_raises():
    with pytest.raises(ValueError, match="No calculator registered"):
        get_calculator("swimming_pool")


def test_parse_number_rejects_garbage_instead_of_zero():
    calc = ConcreteCalculator()
    assert calc.parse_number("12.5", "x") == 12.5
    assert calc.parse_number(" 3 ", "x") == 3.0
    assert calc.parse_number("", "x", default=7) == 7.0
    for bad in ("abc", "nan", "inf", True):
        with pytest.raises(InvalidNumberError) as exc:
            calc.parse_number(bad, "x")
        assert exc.value.field == "x"
    with pytest.raises(InvalidNumberError):
        calc.parse_number(None, "x")
    with pytest.raises(InvalidNumberError):
        calc.parse_positive(0, "x")
    assert issubclass(InvalidChoiceError, CalculatorInputError)
    assert issubclass(CalculatorInputError, ValueError)


def test_round_half_up_matches_front_end():
    calc = ConcreteCalculator()
    assert calc.round_half_up(2.5) == 3
    assert calc.round_half_up(3.5) == 4
    assert calc.round_half_up(-0.5) == 0
    assert calc.money(1.005 + 1e-9) == 1.01
    assert calc.round_half_up(2.45, 1) == pytest.approx(2.5)


# ============================================================
# Concrete
# ============================================================

def test_concrete_rectangular_default_mix():
    result = ConcreteCalculator().calculate({"length": 10, "width": 10, "height": 1})
    assert result["volume"] == pytest.approx(100 / 27)
    assert result["volume_with_wastage"] == pytest.approx(100 / 27 * 1.1)
    assert result["mix_ratio"] == "1:2:3"
    assert result["water_cement_ratio"] == 0.5
    assert result["mix_bags"] == 19                 # 18.33 ft³ of cement
    assert result["ready_mix_trucks"] == 1
    assert result["estimated_cost"] == pytest.approx(100 / 27 * 1.1 * 6000)
    assert result["water"] == pytest.approx(110 / 6 * 0.5 * 7.48)


def test_concrete_high_strength_mix():
    result = ConcreteCalculator().calculate(
        {"length": 10, "width": 10, "height": 1, "psi": "4000"})
    assert result["mix_ratio"] == "1:1.5:3"
    assert result["water_cement_ratio"] == 0.45


def test_concrete_slab_thickness_in_inches():
    result = ConcreteCalculator().calculate(
        {"shape": "slab", "length": 10, "width": 10, "thickness": 6, "wastage": 0})
    assert result["volume"] == pytest.approx(50 / 27)
    assert result["volume_with_wastage"] == result["volume"]


def test_concrete_explicit_zero_wastage_is_kept():
    result = ConcreteCalculator().calculate(
        {"length": 3, "width": 3, "height": 3, "wastage": "0"})
    assert result["volume_with_wastage"] == pytest.approx(1.0)


def test_concrete_bad_inputs_raise():
    calc = ConcreteCalculator()
    with pytest.raises(InvalidNumberError) as exc:
        calc.calculate({"length": "abc", "width": 1, "height": 1})
    assert exc.value.field == "length"
    with pytest.raises(InvalidChoiceError) as exc:
        calc.calculate({"shape": "triangle"})
    assert exc.value.field == "shape"


# ============================================================
# Building materials
# ============================================================

def test_materials_brick_wall():
    result = MaterialsCalculator().calculate(
        {"wall_length": 10, "wall_height": 10, "wall_thickness": 9})
    assert result["wall_area"] == 100
    assert result["wall_volume"] == pytest.approx(75)
    assert result["bricks_required"] == 1174
    assert result["mortar_volume"] == pytest.approx(15)
    assert result["cement"] == 2
    assert result["sand"] == 13
    assert result["water_liters"] == 160


def test_materials_openings_reduce_area():
    result = MaterialsCalculator().calculate(
        {"wall_length": 10, "wall_height": 10, "wall_thickness": 9, "openings_area": 20})
    assert result["wall_area"] == 80


def test_materials_openings_larger_than_wall_rejected():
    with pytest.raises(InvalidNumberError) as exc:
        MaterialsCalculator().calculate(
            {"wall_length": 10, "wall_height": 10, "wall_thickness": 9, "openings_area": 200})
    assert exc.value.field == "openings_area"


# ============================================================
# Land grading
# ============================================================

def test_land_grading_cut_bulks_by_soil():
    result = LandGradingCalculator().calculate({
        "length": 100, "width": 100, "current_elevation": 2, "desired_elevation": 1,
    })
    assert result["operation"] == "cut"
    assert result["cut_volume"] == pytest.approx(10000 / 27)
    assert result["fill_volume"] == 0
    assert result["bulking_factor"] == 20
    assert result["adjusted_volume"] == pytest.approx(10000 / 27 * 1.2)
    assert result["truck_loads"] == 45
    assert result["estimated_cost"] == pytest.approx(10000 / 27 * 1.2 * 800)
    assert result["estimated_time"] == pytest.approx(10000 / 27 * 1.2 / 150)


def test_land_grading_fill_adds_compaction():
    result = LandGradingCalculator().calculate({
        "length": 100, "width": 100, "current_elevation": 1, "desired_elevation": 2,
        "soil_type": "clay",
    })
    assert result["operation"] == "fill"
    assert result["adjusted_volume"] == pytest.approx(10000 / 27 * 1.1)


def test_land_grading_level_site_needs_nothing():
    result = LandGradingCalculator().calculate({
        "length": 50, "width": 50, "current_elevation": 3, "desired_elevation": 3,
    })
    assert result["operation"] == "none"
    assert result["adjusted_volume"] == 0
    assert result["truck_loads"] == 0


# ============================================================
# Construction loan
# ============================================================

def test_draw_strategies_sum_to_loan():
    assert draw_amounts(1000, 4, "frontend") == pytest.approx([400, 300, 200, 100])
    assert draw_amounts(1000, 4, "backend") == pytest.approx([100, 200, 300, 400])
    custom = draw_amounts(1000, 10, "custom")
    assert custom == pytest.approx([100, 100, 75, 75, 75, 75, 125, 125, 125, 125])
    for strategy in ("equal", "frontend", "backend", "custom"):
        assert sum(draw_amounts(5000, 7, strategy)) == pytest.approx(5000)


def test_monthly_payment_standard_formula():
    assert monthly_payment(100000, 0.01, 12) == pytest.approx(8884.88, abs=0.01)


def test_monthly_payment_zero_rate_is_straight_line():
    assert monthly_payment(1200, 0, 12) == 100


def test_loan_interest_accrues_on_drawn_balance():
    result = LoanCalculator().calculate({
        "project_cost": 1200, "down_payment": 0, "loan_term": 1, "interest_rate": 12,
        "construction_period": 4, "draw_schedule": "equal",
    })
    phase = result["construction_phase"]
    assert [d["interest"] for d in phase["draw_schedule"]] == [0, 3, 6, 9]
    assert phase["total_interest_during_construction"] == pytest.approx(18)
    assert phase["monthly_interest_payment"] == pytest.approx(4.5)


def test_loan_amortization_pays_off():
    result = LoanCalculator().calculate({
        "project_cost": 5000000, "down_payment": 1000000, "loan_term": 20,
        "interest_rate": 8.5, "construction_period": 12,
    })
    assert result["loan_type"] == "construction-permanent"
    assert result["loan_amount"] == 4000000
    schedule = result["permanent_phase"]["amortization_schedule"]
    assert len(schedule) == 20
    assert abs(schedule[-1]["balance"]) < 1
    permanent = result["permanent_phase"]
    assert permanent["total_amount_paid"] == pytest.approx(
        permanent["monthly_payment"] * 240, abs=1)


def test_loan_zero_interest():
    result = LoanCalculator().calculate({
        "project_cost": 800000, "loan_term": 20, "interest_rate": 0, "construction_period": 10,
    })
    assert result["permanent_phase"]["monthly_payment"] == pytest.approx(3333.33)
    assert result["permanent_phase"]["total_interest_paid"] == pytest.approx(0, abs=0.01)
    assert result["construction_phase"]["total_interest_during_construction"] == 0


def test_loan_down_payment_over_cost_rejected():
    with pytest.raises(InvalidNumberError) as exc:
        LoanCalculator().calculate({
            "project_cost": 100, "down_payment": 200, "loan_term": 10,
            "interest_rate": 5, "construction_period": 6,
        })
    assert exc.value.field == "down_payment"
    with pytest.raises(InvalidNumberError) as exc:
        LoanCalculator().calculate({
            "project_cost": 100, "loan_term": 0, "interest_rate": 5, "construction_period": 6,
        })
    assert exc.value.field == "loan_term"


def test_monthly_payment_vanishing_rate_is_straight_line():
    # (1 + 1e-17) ** 12 == 1.0 in floating point
    assert monthly_payment(1200, 1e-17, 12) == 100


def test_loan_tiny_interest_rate():
    result = LoanCalculator().calculate({
        "project_cost": 1000, "loan_term": 1, "interest_rate": "1e-15",
        "construction_period": 1,
    })
    assert result["permanent_phase"]["monthly_payment"] == pytest.approx(83.33)


def test_loan_limits_rejected():
    base = {"project_cost": 1000, "loan_term": 10, "interest_rate": 10,
            "construction_period": 6}
    calc = LoanCalculator()
    for field, value in (("loan_term", 100000), ("construction_period", 10 ** 9),
                         ("interest_rate", 1e6)):
        with pytest.raises(InvalidNumberError) as exc:
            calc.calculate({**base, field: value})
        assert exc.value.field == field
    result = calc.calculate({**base, "loan_term": 50, "construction_period": 120})
    assert len(result["permanent_phase"]["amortization_schedule"]) == 50
