"""FastAPI surface for the rule-based Iris species predictor."""

import asyncio
import logging
from datetime import datetime
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas import ApiInfo, SpeciesInfo, ValidationNotice
from src.classifier import build_response
from src.constants import (
    BRANCH_CONFIDENCES,
    DISPLAY_CATEGORIES,
    DISPLAY_STYLES,
    MODEL_NAME,
)
from src.schemas.iris_features import (
    IrisFeatures,
    MeasurementForm,
    PredictionResponse,
)
from src.utils.constants import AppSettings, load_settings
from src.utils.validation import (
    MeasurementValidationError,
    error_from_field_errors,
    parse_measurements,
)

logger = logging.getLogger("iris_predictor")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create FastAPI app for Iris species prediction."""
    settings = settings or load_settings()

    web_app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
    )
    web_app.state.settings = settings

    @web_app.exception_handler(MeasurementValidationError)
    async def validation_error_handler(
        request: Request, exc: MeasurementValidationError
    ) -> JSONResponse:
        logger.warning(f"Rejected form input: {exc}")
        notice = ValidationNotice(detail=exc.notice, fields=exc.fields)
        return JSONResponse(status_code=400, content=notice.model_dump())

    @web_app.exception_handler(RequestValidationError)
    async def request_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Numeric measurements on /predict get the same notices as the form
        if request.url.path == "/predict":
            error = error_from_field_errors(exc.errors())
            if error is not None:
                return await validation_error_handler(request, error)
        return await request_validation_exception_handler(request, exc)

    async def _simulate_latency() -> None:
        if settings.delay_seconds:
            await asyncio.sleep(settings.delay_seconds)

    @web_app.get("/", response_model=ApiInfo)
    async def root(request: Request) -> Dict[str, object]:
        logger.info("Root endpoint called")
        base_url = str(request.base_url).rstrip("/")
        return {
            "message": f"{settings.title} API",
            "endpoints": {
                "root": base_url,
                "health": f"{base_url}/health",
                "species": f"{base_url}/species",
                "predict": f"{base_url}/predict",
                "predict_form": f"{base_url}/predict/form",
                "predict_batch": f"{base_url}/predict/batch",
            },
            "model": MODEL_NAME,
            "version": settings.version,
            "environment": settings.environment,
            "timestamp": datetime.now().isoformat(),
        }

    @web_app.get("/health")
    async def health() -> Dict[str, str]:
        """Health check endpoint."""
        logger.info("Health check called")
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
        }

    @web_app.get("/species", response_model=List[SpeciesInfo])
    async def species() -> List[SpeciesInfo]:
        """List the species the classifier can return."""
        return [
            SpeciesInfo(
                species=label,
                confidences=confidences,
                category=DISPLAY_CATEGORIES[label],
                style=DISPLAY_STYLES[DISPLAY_CATEGORIES[label]],
            )
            for label, confidences in BRANCH_CONFIDENCES.items()
        ]

    @web_app.post(
        "/predict",
        response_model=PredictionResponse,
        responses={400: {"model": ValidationNotice}},
    )
    async def predict(features: IrisFeatures) -> PredictionResponse:
        """Prediction endpoint for numeric measurements."""
        logger.info("Prediction request received")
        await _simulate_latency()
        return build_response(features)

    @web_app.post(
        "/predict/form",
        response_model=PredictionResponse,
        responses={400: {"model": ValidationNotice}},
    )
    async def predict_form(form: MeasurementForm) -> PredictionResponse:
        """Prediction endpoint for measurements typed as text."""
        logger.info("Form prediction request received")
        features = parse_measurements(form)
        await _simulate_latency()
        return build_response(features)

    @web_app.post("/predict/batch", response_model=List[PredictionResponse])
    async def predict_batch(batch: List[IrisFeatures]) -> List[PredictionResponse]:
        """Classify several measurements at once, without the artificial delay."""
        logger.info(f"Batch prediction request received ({len(batch)} rows)")
        return [build_response(features) for features in batch]

    logger.info("FastAPI app initialized")
    return web_app


app = create_app()


def serve(settings: AppSettings) -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    _settings = load_settings()
    logging.basicConfig(level=_settings.log_level, format=_settings.log_format)
    serve(_settings)
