"""Threshold table state held on the FastAPI app."""

import logging

from fastapi import FastAPI

from ..data.threshold_loader import ThresholdLoadError, fetch_threshold_table

logger = logging.getLogger(__name__)


async def load_thresholds(app: FastAPI) -> bool:
    """Fetch the threshold table into app state.

    On failure the error is logged and recorded, and any previously loaded
    table is left in place.

    Returns:
        True if the table was loaded
    """
    try:
        table = await fetch_threshold_table(app.state.thresholds_source)
    except ThresholdLoadError as e:
        logger.error("Failed to load strength thresholds: %s", e)
        app.state.threshold_error = str(e)
        return False

    app.state.thresholds = table
    app.state.threshold_error = None
    return True
