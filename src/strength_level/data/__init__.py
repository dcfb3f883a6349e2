"""Data loading utilities."""

from .threshold_loader import (
    ThresholdLoadError,
    fetch_threshold_table,
    load_threshold_table,
)

__all__ = ["ThresholdLoadError", "fetch_threshold_table", "load_threshold_table"]
