"""Web interface for strength-level."""

from .app import create_app

__all__ = ["create_app"]
