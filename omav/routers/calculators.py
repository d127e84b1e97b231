from fastapi import APIRouter, Body, HTTPException

from ..calculators.registry import get_calculator, has_calculator, list_calculators

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.get("")
def calculators_index():
    return list_calculators()


@router.post("/{key}")
def run_calculator(key: str, fields: dict = Body(...)):
    """
    Run one trade calculator on the posted form fields.

    Bad field values raise CalculatorInputError, rendered by the app as
    400 {message, field}.
    """
    if not has_calculator(key):
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {key}")
    return get_calculator(key).calculate(fields)
