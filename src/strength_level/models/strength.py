"""Strength standards data models."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Sex(str, Enum):
    """Sex codes used to key the threshold table."""

    MALE = "M"
    FEMALE = "F"

    @property
    def display_name(self) -> str:
        return "Male" if self is Sex.MALE else "Female"


# Synthetic labels that never appear as tier names in the table
UNTRAINED = "Untrained"  # below the lowest named threshold
FREAK = "Freak"  # at or above the highest named threshold
INVALID_INPUT = "Invalid Input"

RESERVED_LABELS = frozenset({UNTRAINED, FREAK, INVALID_INPUT})

# Exercises collected by the form, in display order
EXERCISES = ("Squat", "Bench", "Deadlift")


class MissingThresholdsError(LookupError):
    """Raised when the table has no thresholds for an (exercise, sex) pair.

    This is a data contract violation, never a user input problem.
    """

    def __init__(self, exercise: str, sex: str):
        self.exercise = exercise
        self.sex = sex
        super().__init__(f"No strength thresholds for exercise {exercise!r}, sex {sex!r}")


@dataclass(frozen=True)
class ThresholdTable:
    """Read-only strength standards: exercise -> sex -> tier -> ratio.

    Tables are built by the threshold loader, which validates them. Each
    (exercise, sex) entry is stored pre-sorted ascending by threshold.
    """

    levels: Mapping[str, Mapping[Sex, tuple[tuple[str, float], ...]]]
    source: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Mapping[str, float]]], source: str = "") -> "ThresholdTable":
        """Create from a nested mapping (no validation)."""
        levels = {}
        for exercise, by_sex in data.items():
            levels[exercise] = MappingProxyType(
                {
                    Sex(sex): tuple(sorted(tiers.items(), key=lambda item: item[1]))
                    for sex, tiers in by_sex.items()
                }
            )
        return cls(levels=MappingProxyType(levels), source=source)

    @property
    def exercises(self) -> list[str]:
        return list(self.levels)

    def sorted_levels(self, exercise: str, sex: Sex | str) -> tuple[tuple[str, float], ...]:
        """Get (tier, threshold) pairs for a pair, ascending by threshold.

        Raises:
            MissingThresholdsError: If the exercise or sex has no entry
        """
        sex = Sex(sex)
        pairs = self.levels.get(exercise, {}).get(sex)
        if not pairs:
            raise MissingThresholdsError(exercise, sex.value)
        return pairs

    def to_dict(self) -> dict:
        """Convert back to the nested JSON shape."""
        return {
            exercise: {sex.value: dict(pairs) for sex, pairs in by_sex.items()}
            for exercise, by_sex in self.levels.items()
        }


@dataclass
class Measurement:
    """One set of form inputs.

    Values are kept raw (numbers, numeric strings, blanks) so that
    validation happens per exercise during classification.
    """

    sex: Sex
    body_weight: Any = None
    one_rep_max: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when nothing has been entered yet."""
        values = [self.body_weight, *self.one_rep_max.values()]
        return all(v is None or (isinstance(v, str) and not v.strip()) for v in values)


@dataclass
class ClassificationResult:
    """Tier label per exercise plus the input fields that were invalid."""

    labels: dict[str, str] = field(default_factory=dict)
    invalid_fields: list[str] = field(default_factory=list)

    def __getitem__(self, exercise: str) -> str:
        return self.labels[exercise]

    @property
    def all_valid(self) -> bool:
        return not self.invalid_fields

    def to_dict(self) -> dict:
        return {
            "results": dict(self.labels),
            "invalid_fields": list(self.invalid_fields),
        }
