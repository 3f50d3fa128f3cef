#!/usr/bin/env python3
"""
namegen - German Name Generator
===============================

Generates German-style personal names from a table of syllable fragments
and reports how many names the table can produce.

Quick Start
-----------
    from namegen import NameGenerator, Mode, load_default_table

    gen = NameGenerator(load_default_table())
    gen.generate('female')                   # full name
    gen.generate('m', Mode.FIRST_ONLY)       # first name only
    gen.set_thresholds(0.5, 0.0, 0.3, 1.0)   # always try a nobility prefix

    report = gen.compute_stats()
    report.total

Modules
-------
    namegen.generators - syllable table, random sources, name generator
    namegen.config     - GenerationParameters (thresholds, syllable range)
    namegen.stats      - name space statistics
    namegen.request    - form/query parameter parsing

CLI Usage
---------
    python -m namegen generate -n 10 --gender f
    python -m namegen stats
"""

__version__ = "1.9.0"
__author__ = "namegen"

from . import config
from . import generators
from . import stats

from .config import GenerationParameters
from .generators import (
    NameGenerator,
    Mode,
    SyllableTable,
    TableValidationError,
    TrueRandom,
    SeededRandom,
    load_syllable_table,
    load_default_table,
)
from .stats import StatsReport, compute_stats, format_stats
from .request import GenerationRequest

__all__ = [
    '__version__',
    'GenerationParameters',
    'NameGenerator',
    'Mode',
    'SyllableTable',
    'TableValidationError',
    'TrueRandom',
    'SeededRandom',
    'load_syllable_table',
    'load_default_table',
    'StatsReport',
    'compute_stats',
    'format_stats',
    'GenerationRequest',
]
