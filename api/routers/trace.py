"""
Router: POST /trace
Stepwise evaluation: every post-order value, optionally cut after
max_steps (the remaining values are never computed).
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_calculator
from api.schemas import TraceRequest, TraceResponse
from calculator import Calculator

router = APIRouter(prefix="/trace", tags=["trace"])


@router.post("", response_model=TraceResponse)
async def trace(body: TraceRequest, calc: Calculator = Depends(get_calculator)):
    outcome = calc.run_trace(body.expression, max_steps=body.max_steps)
    return TraceResponse(**outcome.model_dump())
