#!/usr/bin/env python3
"""
Syllable Table Loader
=====================
Loads the syllable data file and validates it into a SyllableTable.

File layout (JSON or YAML):

    {
        "firstNameSyllables": {
            "male":   [[opening...], [middle...], [closing...]],
            "female": [[opening...], [middle...], [closing...]]
        },
        "lastNameSyllables": ["berg", "mann", ...],
        "nobilityPrefixes": {"male": ["von", ...], "female": ["von", ...]}
    }

Usage:
    from namegen.generators.syllables import load_syllable_table

    table = load_syllable_table("namegen/data/namegen_data.json")
    table.genders          # ('male', 'female')
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

import yaml

from namegen.settings import require_setting, resolve_path

logger = logging.getLogger(__name__)

REQUIRED_GENDERS = ('male', 'female')
SLOT_COUNT = 3

# Keys as they appear in the data file
KEY_FIRST = 'firstNameSyllables'
KEY_LAST = 'lastNameSyllables'
KEY_NOBILITY = 'nobilityPrefixes'

Slots = Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]


class TableValidationError(ValueError):
    """The syllable data cannot be used for generation."""


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class SyllableTable:
    """
    Read-only syllable fragments keyed by gender and position.

    Constructing one directly skips validation, which lets statistics run on
    partial tables. Use from_dict() or load_syllable_table() for data that
    will feed a NameGenerator.

    Loaded tables are cached and shared, so the mappings are stored as
    read-only proxies over private copies.
    """
    first_name_syllables: Mapping[str, Slots]
    last_name_syllables: Tuple[str, ...]
    nobility_prefixes: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        first = {g: tuple(tuple(slot) for slot in slots)
                 for g, slots in self.first_name_syllables.items()}
        nobility = {g: tuple(prefixes) for g, prefixes in self.nobility_prefixes.items()}
        object.__setattr__(self, 'first_name_syllables', MappingProxyType(first))
        object.__setattr__(self, 'last_name_syllables', tuple(self.last_name_syllables))
        object.__setattr__(self, 'nobility_prefixes', MappingProxyType(nobility))

    @property
    def genders(self) -> Tuple[str, ...]:
        return tuple(self.first_name_syllables)

    def has_gender(self, gender: str) -> bool:
        """True if gender has three non-empty slots of non-empty strings."""
        slots = self.first_name_syllables.get(gender)
        if slots is None or len(slots) != SLOT_COUNT:
            return False
        return all(len(slot) > 0 and all(_is_syllable(s) for s in slot) for slot in slots)

    def is_valid(self) -> bool:
        """Male and female present, every gender usable, last names non-empty."""
        return (all(g in self.first_name_syllables for g in REQUIRED_GENDERS)
                and all(self.has_gender(g) for g in self.genders)
                and len(self.last_name_syllables) > 0)

    def slot(self, gender: str, index: int) -> Tuple[str, ...]:
        return self.first_name_syllables[gender][index]

    def nobility_for(self, gender: str) -> Tuple[str, ...]:
        """Prefixes for gender; a gender without an entry has none."""
        return self.nobility_prefixes.get(gender, ())

    @classmethod
    def from_dict(cls, raw: Any) -> 'SyllableTable':
        """Validate deserialized data and build a table from it."""
        if not isinstance(raw, Mapping):
            raise TableValidationError(
                f"Syllable data must be a mapping, got {type(raw).__name__}"
            )

        first = _parse_first_names(raw.get(KEY_FIRST))
        last = _parse_syllable_list(raw.get(KEY_LAST), KEY_LAST)
        if not last:
            raise TableValidationError(f"{KEY_LAST} must not be empty")
        nobility = _parse_nobility(raw.get(KEY_NOBILITY))

        for gender in REQUIRED_GENDERS:
            if gender not in first:
                raise TableValidationError(f"{KEY_FIRST} is missing gender '{gender}'")

        return cls(
            first_name_syllables=first,
            last_name_syllables=last,
            nobility_prefixes=nobility,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_dict, in the data file layout."""
        return {
            KEY_FIRST: {g: [list(s) for s in slots]
                        for g, slots in self.first_name_syllables.items()},
            KEY_LAST: list(self.last_name_syllables),
            KEY_NOBILITY: {g: list(p) for g, p in self.nobility_prefixes.items()},
        }


# =============================================================================
# Validation helpers
# =============================================================================

def _is_syllable(syllable: Any) -> bool:
    return isinstance(syllable, str) and syllable.strip() != ''


def _parse_syllable_list(value: Any, context: str, allow_empty: bool = True) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise TableValidationError(f"{context} must be a list of strings")
    for syllable in value:
        if not _is_syllable(syllable):
            raise TableValidationError(f"{context} contains an empty or non-string entry: {syllable!r}")
    if not value and not allow_empty:
        raise TableValidationError(f"{context} must not be empty")
    return tuple(value)


def _parse_first_names(value: Any) -> Dict[str, Slots]:
    if not isinstance(value, Mapping):
        raise TableValidationError(f"{KEY_FIRST} must map genders to three syllable lists")

    first: Dict[str, Slots] = {}
    for gender, slots in value.items():
        context = f"{KEY_FIRST}.{gender}"
        if not isinstance(slots, (list, tuple)) or len(slots) != SLOT_COUNT:
            raise TableValidationError(f"{context} must have exactly {SLOT_COUNT} slots")
        first[str(gender)] = tuple(
            _parse_syllable_list(slot, f"{context}[{i}]", allow_empty=False)
            for i, slot in enumerate(slots)
        )
    return first


def _parse_nobility(value: Any) -> Dict[str, Tuple[str, ...]]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TableValidationError(f"{KEY_NOBILITY} must map genders to prefix lists")
    return {
        str(gender): _parse_syllable_list(prefixes, f"{KEY_NOBILITY}.{gender}")
        for gender, prefixes in value.items()
    }


# =============================================================================
# Loader Functions
# =============================================================================

def _read_data_file(path: Path) -> Any:
    text = path.read_text(encoding='utf-8')
    try:
        if path.suffix.lower() in ('.yaml', '.yml'):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TableValidationError(f"Cannot parse {path.name}: {e}") from e


@lru_cache(maxsize=8)
def _load_cached(path: Path) -> SyllableTable:
    if not path.is_file():
        raise FileNotFoundError(f"Syllable data not found: {path}")

    table = SyllableTable.from_dict(_read_data_file(path))

    logger.debug(
        f"Loaded {path.name}: genders={list(table.genders)}, "
        f"last name syllables={len(table.last_name_syllables)}"
    )
    if len(table.last_name_syllables) == 1:
        logger.warning(f"{path.name} has a single last name syllable; adjacent repeats cannot be avoided")
    return table


def load_syllable_table(path) -> SyllableTable:
    """Load and validate a syllable data file (.json, .yaml or .yml)."""
    return _load_cached(Path(path).expanduser().resolve())


def load_default_table() -> SyllableTable:
    """Load the data file named by data.syllable_file in app.yaml."""
    return load_syllable_table(resolve_path(require_setting('data.syllable_file')))


def reload_tables():
    """Clear cached tables so files are re-read from disk."""
    _load_cached.cache_clear()


__all__ = [
    'SyllableTable',
    'TableValidationError',
    'REQUIRED_GENDERS',
    'load_syllable_table',
    'load_default_table',
    'reload_tables',
]
