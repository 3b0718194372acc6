"""
dependencies.py — FastAPI dependency injection.
Each dependency returns the shared object from Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from calculator import Calculator


def get_calculator(request: Request) -> Calculator:
    return request.app.state.calculator
