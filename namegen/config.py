#!/usr/bin/env python3
"""
Generation Parameters
=====================
Tunable probabilities and the last name syllable range used by a
NameGenerator. Unset fields come from the ``defaults`` section of app.yaml.

Out-of-range input is never an error: thresholds are clamped into [0, 1] and
the syllable range is repaired so that [min, max_exclusive) holds at least
one value.
"""

import math
from dataclasses import dataclass
from typing import Optional

from namegen.settings import get_setting


def clamp01(value: float) -> float:
    """Clamp into [0.0, 1.0]; NaN becomes 0.0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


@dataclass
class GenerationParameters:
    """Thresholds are probabilities to ADD a feature when random() < threshold."""
    first_extra: Optional[float] = None      # extra middle first name syllable
    double_last: Optional[float] = None      # hyphenated second last name
    longer_last: Optional[float] = None      # draw syllable count from the range
    nobility: Optional[float] = None         # nobility prefix before the last name

    min_syllables: Optional[int] = None            # inclusive
    max_syllables_exclusive: Optional[int] = None  # exclusive

    def __post_init__(self):
        thresholds = get_setting("defaults.thresholds", {}) or {}
        self.set_thresholds(
            thresholds.get("first_extra", 0.0) if self.first_extra is None else self.first_extra,
            thresholds.get("double_last", 0.0) if self.double_last is None else self.double_last,
            thresholds.get("longer_last", 0.0) if self.longer_last is None else self.longer_last,
            thresholds.get("nobility", 0.0) if self.nobility is None else self.nobility,
        )

        syllables = get_setting("defaults.lastname_syllables", {}) or {}
        min_incl = syllables.get("min", 2) if self.min_syllables is None else self.min_syllables
        if self.max_syllables_exclusive is None:
            max_excl = syllables.get("max_exclusive", min_incl + 1)
        else:
            max_excl = self.max_syllables_exclusive
        self.set_lastname_syllable_range(min_incl, max_excl)

    def set_thresholds(self, first_extra: float, double_last: float,
                       longer_last: float, nobility: float) -> None:
        """Set all four thresholds, each clamped into [0, 1]."""
        self.first_extra = clamp01(first_extra)
        self.double_last = clamp01(double_last)
        self.longer_last = clamp01(longer_last)
        self.nobility = clamp01(nobility)

    def set_lastname_syllable_range(self, min_incl: int, max_excl: int) -> None:
        """Set [min_incl, max_excl); min floors at 1, max at min + 1."""
        min_incl = max(1, int(min_incl))
        self.min_syllables = min_incl
        self.max_syllables_exclusive = max(min_incl + 1, int(max_excl))

    @property
    def thresholds(self) -> tuple:
        return (self.first_extra, self.double_last, self.longer_last, self.nobility)


__all__ = [
    'GenerationParameters',
    'clamp01',
]
