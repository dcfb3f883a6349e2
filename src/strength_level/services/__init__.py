"""Services for strength-level."""

from .classifier import classify, classify_measurement, parse_positive

__all__ = ["classify", "classify_measurement", "parse_positive"]
