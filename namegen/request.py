#!/usr/bin/env python3
"""
Request Parameters
==================
Turns loosely typed form/query values into a GenerationRequest.

Nothing here raises on bad input. Missing or unparsable values fall back to
the app.yaml defaults, numbers are clamped to the configured limits.

Usage:
    req = GenerationRequest.from_query({'gender': 'f', 'count': '5', 'mode': 'lastname'})
    gen = req.build_generator(load_default_table())
    names = gen.generate_many(req.count, req.gender, req.mode)
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from namegen.config import GenerationParameters
from namegen.generators.german_generator import Mode, NameGenerator
from namegen.generators.syllables import SyllableTable
from namegen.settings import get_setting


# Query keys for the four thresholds, in GenerationParameters order
THRESHOLD_KEYS = {
    't_first_extra': 'first_extra',
    't_double_last': 'double_last',
    't_longer_last': 'longer_last',
    't_nobility': 'nobility',
}


def get01(query: Mapping[str, Any], key: str, default: float) -> float:
    """Float in [0, 1] from query[key], or default if missing/unparsable."""
    raw = query.get(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return max(0.0, min(1.0, value))


def get_int(query: Mapping[str, Any], key: str, default: int, low: int, high: int) -> int:
    """Integer clamped to [low, high] from query[key], or default."""
    raw = query.get(key)
    if raw is None:
        return default
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return default
    return max(low, min(high, value))


def _limits(name: str, low: int, high: int):
    cfg = get_setting(f"limits.{name}", {}) or {}
    return int(cfg.get("min", low)), int(cfg.get("max", high))


@dataclass
class GenerationRequest:
    """One form submission: what to generate and how."""
    gender: str
    count: int
    mode: Mode
    stats: bool
    first_extra: float
    double_last: float
    longer_last: float
    nobility: float
    min_last: int
    max_last: int

    @classmethod
    def from_query(cls, query: Optional[Mapping[str, Any]] = None) -> 'GenerationRequest':
        query = query or {}
        defaults = GenerationParameters()

        thresholds = {
            field_name: get01(query, key, getattr(defaults, field_name))
            for key, field_name in THRESHOLD_KEYS.items()
        }

        count_low, count_high = _limits("count", 1, 999)
        min_low, min_high = _limits("min_last", 1, 8)
        max_low, max_high = _limits("max_last", 2, 10)

        count = get_int(query, 'count', int(get_setting("defaults.count", 10)), count_low, count_high)
        min_last = get_int(query, 'min_last', defaults.min_syllables, min_low, min_high)
        max_last = get_int(query, 'max_last', defaults.max_syllables_exclusive, max_low, max_high)
        if max_last <= min_last:
            max_last = min_last + 1

        gender = query.get('gender')
        if gender is None or str(gender).strip() == '':
            gender = get_setting("defaults.gender", "random")

        return cls(
            gender=str(gender),
            count=count,
            mode=Mode.parse(query.get('mode', get_setting("defaults.mode", ""))),
            stats='stats' in query,
            min_last=min_last,
            max_last=max_last,
            **thresholds,
        )

    def to_parameters(self) -> GenerationParameters:
        return GenerationParameters(
            first_extra=self.first_extra,
            double_last=self.double_last,
            longer_last=self.longer_last,
            nobility=self.nobility,
            min_syllables=self.min_last,
            max_syllables_exclusive=self.max_last,
        )

    def build_generator(self, table: SyllableTable, rng=None, seed: Optional[int] = None) -> NameGenerator:
        return NameGenerator(table, params=self.to_parameters(), rng=rng, seed=seed)


__all__ = [
    'GenerationRequest',
    'THRESHOLD_KEYS',
    'get01',
    'get_int',
]
