"""
api/main.py — FastAPI entry point.

Lifespan:
  - Builds one shared Calculator (adapters are stateless)

Errors:
  - CalcError → ErrorReport JSON; 400 for PARAM/SYNTAX, 422 for ARITH
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import evaluate, trace
from api.schemas import HealthResponse
from calculator import Calculator
from config import Settings
from contracts import CalcError, ErrorKind

logger = logging.getLogger("intcalc.api")

_STATUS_BY_KIND = {
    ErrorKind.PARAM: 400,
    ErrorKind.SYNTAX: 400,
    ErrorKind.ARITH: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.calculator = Calculator()
    logger.info("IntCalc API ready.")
    yield
    logger.info("Shutting down.")


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(trace.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Global error handler
    @app.exception_handler(CalcError)
    async def calc_error_handler(request: Request, exc: CalcError):
        return JSONResponse(
            status_code=_STATUS_BY_KIND[exc.kind],
            content=exc.to_report().model_dump(mode="json"),
        )

    return app


app = create_app()
