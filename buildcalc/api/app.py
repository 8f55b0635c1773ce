"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from buildcalc.config import Settings, load_settings
from buildcalc.exceptions import BuildCalcError
from buildcalc.models.project import MaterialSelection, ProjectSpec, RateConfig
from buildcalc.report import render_text_report, report_filename

if TYPE_CHECKING:
    from buildcalc.engine import EstimationEngine

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


class EstimateRequest(BaseModel):
    """Request body shared by the estimate endpoints."""

    project: ProjectSpec
    materials: MaterialSelection = Field(default_factory=MaterialSelection)
    rates: RateConfig = Field(default_factory=RateConfig)


def create_app(
    *,
    engine: EstimationEngine | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from ``settings`` on first request.
    settings
        Optional settings. Read from the environment when omitted.
    """
    settings = settings or load_settings()
    logging.getLogger("buildcalc").setLevel(settings.log_level)

    app = FastAPI(title="BuildCalc", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject engines
    app.state.engine = engine
    app.state.settings = settings

    def _get_engine() -> EstimationEngine:
        eng: EstimationEngine | None = app.state.engine
        if eng is not None:
            return eng
        from buildcalc.factory import create_engine_from_settings

        try:
            eng = create_engine_from_settings(app.state.settings)
        except BuildCalcError as exc:
            logger.exception("Could not create estimation engine")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # GET /api/prices
    # ------------------------------------------------------------------

    @app.get("/api/prices")
    def price_table() -> dict[str, Any]:
        return _get_engine().price_table.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        eng = _get_engine()
        try:
            result = eng.estimate(request.project, request.materials, request.rates)
        except BuildCalcError as exc:
            logger.exception("Estimation failed")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/estimate/report
    # ------------------------------------------------------------------

    @app.post("/api/estimate/report", response_class=PlainTextResponse)
    def estimate_report(request: EstimateRequest) -> PlainTextResponse:
        eng = _get_engine()
        try:
            result = eng.estimate(request.project, request.materials, request.rates)
            content = render_text_report(
                request.project,
                request.rates,
                result,
                price_basis=eng.price_table.price_basis,
            )
        except BuildCalcError as exc:
            logger.exception("Report generation failed")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        filename = report_filename(request.project)
        return PlainTextResponse(
            content,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
