#!/usr/bin/env python3
"""
Name Generators
===============
- syllables: SyllableTable data file loading and validation
- entropy: per-generator random sources (TrueRandom, SeededRandom)
- german_generator: German personal name composition
"""

from .syllables import (
    SyllableTable,
    TableValidationError,
    load_syllable_table,
    load_default_table,
    reload_tables,
)
from .entropy import (
    TrueRandom,
    SeededRandom,
    make_rng,
)
from .german_generator import (
    NameGenerator,
    Mode,
    title_case,
)

__all__ = [
    # Data
    'SyllableTable',
    'TableValidationError',
    'load_syllable_table',
    'load_default_table',
    'reload_tables',
    # Randomness
    'TrueRandom',
    'SeededRandom',
    'make_rng',
    # Generator
    'NameGenerator',
    'Mode',
    'title_case',
]
