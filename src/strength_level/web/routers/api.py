"""JSON API routes."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from ...models.strength import Measurement, MissingThresholdsError, Sex, ThresholdTable
from ...services.classifier import classify_measurement
from ..state import load_thresholds

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


class ClassifyRequest(BaseModel):
    sex: Sex = Sex.MALE
    # Raw values; parse_positive decides what is a valid number
    body_weight: Any = None
    one_rep_max: dict[str, Any] = Field(default_factory=dict)


def require_thresholds(request: Request) -> ThresholdTable:
    """Get the loaded table, or 503 while it is unavailable."""
    table = request.app.state.thresholds
    if table is None:
        detail = "Strength thresholds are not loaded"
        if request.app.state.threshold_error:
            detail += f": {request.app.state.threshold_error}"
        raise HTTPException(status_code=503, detail=detail)
    return table


@router.post("/classify")
async def classify_api(request: Request, body: ClassifyRequest):
    """Classify a measurement as JSON."""
    table = require_thresholds(request)
    measurement = Measurement(
        sex=body.sex,
        body_weight=body.body_weight,
        one_rep_max=dict(body.one_rep_max),
    )

    try:
        result = classify_measurement(table, measurement)
    except MissingThresholdsError as e:
        logger.exception("Strength thresholds are incomplete")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return result.to_dict()


@router.get("/thresholds")
async def get_thresholds(request: Request):
    """Get the loaded threshold table."""
    return require_thresholds(request).to_dict()


@router.post("/thresholds/reload")
async def reload_thresholds(request: Request):
    """Retry loading the threshold table."""
    if not await load_thresholds(request.app):
        raise HTTPException(status_code=503, detail=request.app.state.threshold_error)

    table = request.app.state.thresholds
    return {"status": "loaded", "exercises": table.exercises, "source": table.source}
