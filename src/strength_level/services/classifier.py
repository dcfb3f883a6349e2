"""Strength tier classification.

Assigns a tier label from the ratio of a one-rep max to body weight. The
boundary policy is asymmetric:

- below the lowest threshold is ``Untrained``
- exactly on the lowest threshold is the lowest tier
- each higher tier owns ``(previous threshold, its threshold]``
- at or above the highest threshold is ``Freak``
"""

import math
from numbers import Real
from typing import Any

from ..models.strength import (
    FREAK,
    INVALID_INPUT,
    UNTRAINED,
    ClassificationResult,
    Measurement,
    Sex,
    ThresholdTable,
)


def parse_positive(value: Any) -> float | None:
    """Coerce a raw input to a finite positive float.

    Accepts numbers and numeric strings. Returns None for blanks,
    non-numeric text, booleans, NaN/inf (including integers too large
    for a float), zero and negatives.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            number = float(value)
        except ValueError:
            return None
    elif isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        return None

    if not math.isfinite(number) or number <= 0:
        return None
    return number


def label_for_ratio(ratio: float, levels: tuple[tuple[str, float], ...]) -> str:
    """Pick the label for a ratio given (tier, threshold) pairs sorted ascending."""
    lowest_name, lowest = levels[0]
    highest = levels[-1][1]

    if ratio < lowest:
        return UNTRAINED
    if ratio == lowest:
        return lowest_name
    if ratio >= highest:
        return FREAK

    for (_, prev_threshold), (name, threshold) in zip(levels, levels[1:]):
        if prev_threshold < ratio <= threshold:
            return name

    # Unreachable for a sorted table with distinct thresholds
    raise AssertionError(f"Ratio {ratio} not placed within {levels!r}")


def classify(
    table: ThresholdTable,
    sex: Sex | str,
    exercise: str,
    body_weight: Any,
    one_rep_max: Any,
) -> str:
    """Classify one exercise.

    Args:
        table: Loaded strength standards
        sex: Sex code ("M"/"F")
        exercise: Exercise name as keyed in the table
        body_weight: Raw body weight input
        one_rep_max: Raw one-rep max input for the exercise

    Returns:
        A tier name from the table, "Untrained", "Freak" or "Invalid Input"

    Raises:
        MissingThresholdsError: If the table has no entry for (exercise, sex)
    """
    levels = table.sorted_levels(exercise, sex)

    weight = parse_positive(one_rep_max)
    bw = parse_positive(body_weight)
    if weight is None or bw is None:
        return INVALID_INPUT

    return label_for_ratio(weight / bw, levels)


def classify_measurement(table: ThresholdTable, measurement: Measurement) -> ClassificationResult:
    """Classify every exercise of a measurement independently."""
    result = ClassificationResult()

    if parse_positive(measurement.body_weight) is None:
        result.invalid_fields.append("body_weight")

    for exercise, one_rep_max in measurement.one_rep_max.items():
        label = classify(table, measurement.sex, exercise, measurement.body_weight, one_rep_max)
        result.labels[exercise] = label
        if parse_positive(one_rep_max) is None:
            result.invalid_fields.append(exercise)

    return result
