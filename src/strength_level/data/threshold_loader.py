"""Strength standards loader from JSON."""

import asyncio
import json
import logging
import math
import urllib.request
from numbers import Real
from pathlib import Path

from ..models.strength import RESERVED_LABELS, Sex, ThresholdTable

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS_PATH = Path(__file__).parent / "strength_levels.json"

URL_TIMEOUT = 10.0


class ThresholdLoadError(ValueError):
    """Raised when the threshold table cannot be read or is malformed."""


def get_thresholds_path(path: Path | str | None = None) -> Path | str:
    """Get the threshold source, falling back to the packaged table."""
    if path is None:
        return DEFAULT_THRESHOLDS_PATH
    return path


def _is_url(source: Path | str) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _read_source(source: Path | str) -> str:
    if _is_url(source):
        with urllib.request.urlopen(source, timeout=URL_TIMEOUT) as response:
            return response.read().decode("utf-8")

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict:
    data = {}
    for key, value in pairs:
        if key in data:
            raise KeyError(key)
        data[key] = value
    return data


def validate_threshold_data(data: object) -> dict[str, dict[str, dict[str, float]]]:
    """Check the nested exercise -> sex -> tier -> ratio shape.

    Tied thresholds within one (exercise, sex) pair are rejected: the tier
    order would be ambiguous.

    Returns:
        The data with thresholds coerced to float

    Raises:
        ThresholdLoadError: On the first problem found
    """
    if not isinstance(data, dict) or not data:
        raise ThresholdLoadError("Threshold table must be a non-empty object keyed by exercise")

    validated: dict[str, dict[str, dict[str, float]]] = {}
    for exercise, by_sex in data.items():
        if not isinstance(by_sex, dict) or not by_sex:
            raise ThresholdLoadError(f"{exercise}: expected a non-empty object keyed by sex")

        validated[exercise] = {}
        for sex, tiers in by_sex.items():
            try:
                Sex(sex)
            except ValueError:
                raise ThresholdLoadError(f"{exercise}: unknown sex code {sex!r}") from None

            where = f"{exercise}/{sex}"
            if not isinstance(tiers, dict) or not tiers:
                raise ThresholdLoadError(f"{where}: expected a non-empty object of tier thresholds")

            levels: dict[str, float] = {}
            for tier, threshold in tiers.items():
                if tier in RESERVED_LABELS:
                    raise ThresholdLoadError(f"{where}: {tier!r} is a reserved label, not a tier")
                if isinstance(threshold, bool) or not isinstance(threshold, Real):
                    raise ThresholdLoadError(f"{where}: threshold for {tier!r} is not a number")
                try:
                    value = float(threshold)
                except OverflowError:
                    value = math.inf
                if not math.isfinite(value) or value < 0:
                    raise ThresholdLoadError(f"{where}: threshold for {tier!r} must be finite and non-negative")
                levels[tier] = value

            values = sorted(levels.values())
            ties = {v for prev, v in zip(values, values[1:]) if prev == v}
            if ties:
                tied = sorted(t for t, v in levels.items() if v in ties)
                raise ThresholdLoadError(f"{where}: tiers {', '.join(tied)} share a threshold")

            validated[exercise][sex] = levels

    return validated


def load_threshold_table(source: Path | str | None = None) -> ThresholdTable:
    """Load and validate the threshold table.

    Args:
        source: File path or http(s) URL. Uses the packaged table if not provided.

    Returns:
        The validated, read-only ThresholdTable

    Raises:
        ThresholdLoadError: If the source cannot be read or parsed, or is malformed
    """
    source = get_thresholds_path(source)

    try:
        raw = _read_source(source)
    except (OSError, UnicodeDecodeError) as e:
        raise ThresholdLoadError(f"Could not read thresholds from {source}: {e}") from e

    try:
        data = json.loads(raw, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise ThresholdLoadError(f"Invalid JSON in {source}: {e}") from e
    except KeyError as e:
        raise ThresholdLoadError(f"Duplicate key {e.args[0]!r} in {source}") from None

    table = ThresholdTable.from_dict(validate_threshold_data(data), source=str(source))
    logger.info("Loaded strength thresholds for %d exercises from %s", len(table.exercises), source)
    return table


async def fetch_threshold_table(source: Path | str | None = None) -> ThresholdTable:
    """Load the threshold table without blocking the event loop."""
    return await asyncio.to_thread(load_threshold_table, source)
