"""Strength level calculator form routes."""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from ...models.strength import EXERCISES, Measurement, MissingThresholdsError, Sex
from ...services.classifier import classify_measurement

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates


def render_calculator(request: Request, measurement: Measurement | None = None):
    """Render the form, with results when inputs were submitted.

    Results are only computed once the threshold table is loaded; until then
    the page shows them as pending.
    """
    templates = get_templates(request)
    table = request.app.state.thresholds
    if measurement is None:
        measurement = Measurement(sex=Sex.MALE, body_weight="", one_rep_max={e: "" for e in EXERCISES})

    result = None
    config_error = None
    status_code = 200
    if table is not None and not measurement.is_empty:
        try:
            result = classify_measurement(table, measurement)
        except MissingThresholdsError as e:
            logger.exception("Strength thresholds are incomplete")
            config_error = str(e)
            status_code = 500

    return templates.TemplateResponse(
        request,
        "calculator.html",
        {
            "sexes": list(Sex),
            "exercises": EXERCISES,
            "measurement": measurement,
            "result": result,
            "invalid_fields": result.invalid_fields if result else [],
            "pending": table is None,
            "load_error": request.app.state.threshold_error,
            "config_error": config_error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def calculator_page(request: Request):
    """Empty calculator form."""
    return render_calculator(request)


@router.post("/", response_class=HTMLResponse)
async def calculate(
    request: Request,
    sex: Sex = Form(Sex.MALE),
    body_weight: str = Form(""),
    squat: str = Form(""),
    bench: str = Form(""),
    deadlift: str = Form(""),
):
    """Classify the submitted form values."""
    measurement = Measurement(
        sex=sex,
        body_weight=body_weight,
        one_rep_max={"Squat": squat, "Bench": bench, "Deadlift": deadlift},
    )
    return render_calculator(request, measurement)
