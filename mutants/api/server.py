from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas import AnalysisResult, DnaRequest, ErrorResponse, StatsResponse
from .service import MutantService
from .stats import StatsService
from ..datastore.records import DnaRecordStore, RecordStore
from ..detection import Detector, MutantDetector, validate_dna
from ..errors import DnaHashCalculationError, StoreError


logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, path: str | None) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        text = str(error.get("msg", "Invalid value"))
        messages.append(f"{location}: {text}" if location else text)
    return "; ".join(messages) or "Invalid request body"


def create_app(
    records_path: Path | None = None,
    detector: Detector | None = None,
    store: RecordStore | None = None,
) -> FastAPI:
    selected_store = store if store is not None else DnaRecordStore(records_path)
    selected_detector = detector or MutantDetector()
    service = MutantService(detector=selected_detector, store=selected_store)
    stats_service = StatsService(store=selected_store)

    app = FastAPI(title="Mutant Detector API", version="0.1.0")
    app.state.detector = selected_detector
    app.state.store = selected_store
    app.state.service = service
    app.state.stats_service = stats_service

    logger.info(
        "API server initialised detector=%s store=%s records_path=%s",
        selected_detector.__class__.__name__,
        selected_store.__class__.__name__,
        records_path,
    )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail), request.url.path)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_errors(exc)
        logger.info("Rejected request path=%s reason=%s", request.url.path, message)
        return _error_response(400, message, request.url.path)

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/mutant",
        response_model=AnalysisResult,
        responses={
            403: {"model": AnalysisResult, "description": "DNA belongs to a human"},
            400: {"model": ErrorResponse, "description": "Invalid DNA sequence"},
            500: {"model": ErrorResponse, "description": "Analysis failed"},
        },
    )
    def check_mutant(request: DnaRequest, response: Response) -> AnalysisResult:
        validation = validate_dna(request.dna)
        if not validation.is_valid:
            logger.info("Invalid DNA rows=%d reason=%s", len(request.dna), validation.message)
            raise HTTPException(status_code=400, detail=validation.message)

        try:
            is_mutant = service.analyze(request.dna)
        except DnaHashCalculationError as exc:
            logger.exception("DNA hash calculation failed: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        except StoreError as exc:
            logger.exception("DNA record store failure: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        if is_mutant:
            return AnalysisResult(result="mutant")
        response.status_code = 403
        return AnalysisResult(result="human")

    @app.get("/stats", response_model=StatsResponse)
    def fetch_stats() -> StatsResponse:
        try:
            stats = stats_service.get_stats()
        except StoreError as exc:
            logger.exception("Failed to compute stats: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        logger.debug(
            "Serving stats mutant=%d human=%d ratio=%.3f",
            stats.count_mutant_dna,
            stats.count_human_dna,
            stats.ratio,
        )
        return StatsResponse(
            count_mutant_dna=stats.count_mutant_dna,
            count_human_dna=stats.count_human_dna,
            ratio=stats.ratio,
        )

    return app


__all__ = ["create_app"]
