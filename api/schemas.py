"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)


class EvaluateResponse(BaseModel):
    expression: str
    result: int


# ─────────────────────────── /trace ──────────────────────────────

class TraceRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)
    max_steps: Optional[int] = Field(default=None, ge=1)  # stop pulling after N values


class TraceResponse(BaseModel):
    expression: str
    steps: list[int]
    result: Optional[int] = None
    truncated: bool = False


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
