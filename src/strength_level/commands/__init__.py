"""CLI commands for strength-level."""

from .classify import classify
from .serve import serve
from .thresholds import thresholds

__all__ = [
    "classify",
    "serve",
    "thresholds",
]
