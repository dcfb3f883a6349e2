"""FastAPI application for the strength level calculator."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from .. import __version__
from .badges import badge_class
from .routers import api, calculator
from .state import load_thresholds

# Template path
TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - loads thresholds before serving."""
    await load_thresholds(app)
    yield


def create_app(thresholds_source: Path | str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        thresholds_source: File path or URL of the threshold table.
            Uses the packaged table if not provided.
    """
    app = FastAPI(
        title="strength-level",
        description="Strength Level Calculator",
        version=__version__,
        lifespan=lifespan,
    )

    # Nothing is classified until the lifespan load succeeds
    app.state.thresholds_source = thresholds_source
    app.state.thresholds = None
    app.state.threshold_error = None

    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    templates.env.filters["badge_class"] = badge_class
    app.state.templates = templates

    app.include_router(calculator.router)
    app.include_router(api.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "thresholds_loaded": app.state.thresholds is not None,
        }

    return app
