#!/usr/bin/env python3
"""
German Personal Name Generator
==============================
Composes German-style personal names from a SyllableTable.

A name is built from:
- First name: opening syllable, optional middle syllable, closing syllable
- Last name: N syllables with no syllable repeated back to back
- Optional hyphenated second last name
- Optional gendered nobility prefix ("von", "zu", ...)

Each optional feature is gated by its own threshold in GenerationParameters
and evaluated with an independent random() draw.

Usage:
    table = load_default_table()
    gen = NameGenerator(table, seed=7)
    gen.generate('female')                 # 'Adelheid von Rosenbach'
    gen.generate('m', Mode.LAST_ONLY)      # 'Lindmann-Eckhardt'
"""

import logging
from enum import Enum
from typing import List, Optional

from namegen.config import GenerationParameters
from namegen.stats import StatsReport, compute_stats
from .entropy import TrueRandom, make_rng
from .syllables import SyllableTable, TableValidationError

logger = logging.getLogger(__name__)

RANDOM_GENDER = 'random'

# Single-letter shorthands accepted for gender
GENDER_ALIASES = {
    'f': 'female',
    'm': 'male',
    'r': RANDOM_GENDER,
}


class Mode(Enum):
    """What generate() returns."""
    FULL = "full"
    FIRST_ONLY = "firstname"
    LAST_ONLY = "lastname"

    @classmethod
    def parse(cls, value) -> 'Mode':
        """Map form/CLI values to a Mode; anything unknown means FULL."""
        if isinstance(value, cls):
            return value
        key = str(value or '').strip().lower()
        aliases = {
            'first': cls.FIRST_ONLY,
            'last': cls.LAST_ONLY,
        }
        if key in aliases:
            return aliases[key]
        for mode in cls:
            if mode.value == key:
                return mode
        return cls.FULL


def title_case(name: str) -> str:
    """Uppercase the first character, lowercase the rest."""
    return name.capitalize()


class NameGenerator:
    """
    Generates German-style personal names from a validated SyllableTable.

    The table is shared read-only; the parameters and the random source
    belong to this instance, so use one generator per request or thread.
    """

    def __init__(self,
                 table: SyllableTable,
                 params: Optional[GenerationParameters] = None,
                 rng: Optional[TrueRandom] = None,
                 seed: Optional[int] = None):
        if not table.is_valid():
            raise TableValidationError(
                "Syllable table needs male and female first name syllables, "
                "three non-empty slots for every gender "
                "and at least one last name syllable"
            )
        self.table = table
        self.params = params if params is not None else GenerationParameters()
        self.rng = rng if rng is not None else make_rng(seed)

    # -------------------------------------------------------------------------
    # Tuning
    # -------------------------------------------------------------------------

    def set_thresholds(self, first_extra: float, double_last: float,
                       longer_last: float, nobility: float) -> None:
        self.params.set_thresholds(first_extra, double_last, longer_last, nobility)

    def set_lastname_syllable_range(self, min_incl: int, max_excl: int) -> None:
        self.params.set_lastname_syllable_range(min_incl, max_excl)

    # -------------------------------------------------------------------------
    # Building blocks
    # -------------------------------------------------------------------------

    def _pick(self, seq):
        return seq[self.rng.randint(0, len(seq) - 1)]

    def _chance(self, threshold: float) -> bool:
        return self.rng.random() < threshold

    def resolve_gender(self, gender: Optional[str]) -> str:
        """
        Normalize gender input to a key of the table.

        'm'/'f'/'r' are shorthands; 'random', empty and unknown values pick
        uniformly among the table's genders.
        """
        key = str(gender or RANDOM_GENDER).strip().lower()
        key = GENDER_ALIASES.get(key, key)
        if key == RANDOM_GENDER or key not in self.table.first_name_syllables:
            key = self._pick(self.table.genders)
        return key

    def generate_firstname(self, gender: str = 'male') -> str:
        opening, middle, closing = self.table.first_name_syllables[gender]
        name = self._pick(opening)
        if self._chance(self.params.first_extra):
            name += self._pick(middle)
        name += self._pick(closing)
        return title_case(name)

    def _lastname_syllable_count(self) -> int:
        params = self.params
        if self._chance(params.longer_last):
            return self.rng.randint(params.min_syllables, params.max_syllables_exclusive - 1)
        return params.min_syllables

    def generate_lastname(self) -> str:
        syllables = self.table.last_name_syllables
        count = self._lastname_syllable_count()

        # One syllable cannot avoid itself; allow the repeat
        avoid_repeats = len(syllables) > 1

        parts = []
        last_idx = -1
        for _ in range(count):
            idx = self.rng.randint(0, len(syllables) - 1)
            while avoid_repeats and idx == last_idx:
                idx = self.rng.randint(0, len(syllables) - 1)
            parts.append(syllables[idx])
            last_idx = idx

        return title_case(''.join(parts))

    def get_nobility_prefix(self, gender: str = 'male') -> str:
        """Random prefix for gender, or '' when the gender has none."""
        prefixes = self.table.nobility_for(gender)
        if len(prefixes) == 0:
            return ''
        return self._pick(prefixes)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def generate(self, gender: str = RANDOM_GENDER, mode=Mode.FULL) -> str:
        """
        Generate one name.

        Parameters
        ----------
        gender : str
            'male', 'female', 'random' or a shorthand 'm', 'f', 'r'
        mode : Mode or str
            FULL, FIRST_ONLY or LAST_ONLY (strings go through Mode.parse)

        Returns
        -------
        str
            e.g. 'Friedhelm von Brandstetter-Kohl'
        """
        mode = Mode.parse(mode)
        resolved = self.resolve_gender(gender)

        if mode is Mode.FIRST_ONLY:
            return self.generate_firstname(resolved)

        last = self.generate_lastname()
        if self._chance(self.params.double_last):
            last += '-' + self.generate_lastname()

        if self._chance(self.params.nobility):
            prefix = self.get_nobility_prefix(resolved)
            if prefix != '':
                last = f"{prefix} {last}"

        if mode is Mode.LAST_ONLY:
            return last

        first = self.generate_firstname(resolved)
        return f"{first} {last}"

    def generate_many(self, count: int = 10, gender: str = RANDOM_GENDER, mode=Mode.FULL) -> List[str]:
        """Generate count independent names (gender is re-resolved per name)."""
        names = [self.generate(gender, mode) for _ in range(max(0, count))]
        logger.debug(f"Generated {len(names)} names (gender={gender}, mode={Mode.parse(mode).value})")
        return names

    def compute_stats(self) -> StatsReport:
        return compute_stats(self.table)


__all__ = [
    'NameGenerator',
    'Mode',
    'title_case',
    'GENDER_ALIASES',
    'RANDOM_GENDER',
]
