"""
Router: POST /evaluate
Direct evaluation, returns only the final value.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_calculator
from api.schemas import EvaluateRequest, EvaluateResponse
from calculator import Calculator

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(body: EvaluateRequest, calc: Calculator = Depends(get_calculator)):
    outcome = calc.run(body.expression)
    return EvaluateResponse(expression=outcome.expression, result=outcome.value)
