"""Data models for strength-level."""

from .strength import (
    EXERCISES,
    FREAK,
    INVALID_INPUT,
    UNTRAINED,
    ClassificationResult,
    Measurement,
    MissingThresholdsError,
    Sex,
    ThresholdTable,
)

__all__ = [
    "ClassificationResult",
    "EXERCISES",
    "FREAK",
    "INVALID_INPUT",
    "Measurement",
    "MissingThresholdsError",
    "Sex",
    "ThresholdTable",
    "UNTRAINED",
]
