"""
Shared fixtures
===============
Small syllable tables and a scripted random source for deterministic tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namegen.generators.syllables import SyllableTable


SAMPLE_DATA = {
    "firstNameSyllables": {
        "male": [["Bern", "Ot"], ["e", "o"], ["hard", "win"]],
        "female": [["Hil", "Ad"], ["a"], ["gard", "de"]],
    },
    "lastNameSyllables": ["berg", "mann", "stein"],
    "nobilityPrefixes": {
        "male": ["von", "zu"],
        "female": ["von"],
    },
}


class ScriptedRandom:
    """
    Random source that replays fixed values.

    random() returns the next scripted float (or float_default once the
    script runs out). randint() returns the next scripted int and checks it
    lies in [a, b]; running out of ints is an error so a broken re-draw
    loop fails instead of hanging.
    """

    def __init__(self, floats=(), ints=(), float_default=0.0):
        self.floats = list(floats)
        self.ints = list(ints)
        self.float_default = float_default
        self.int_calls = []

    def random(self) -> float:
        if self.floats:
            return self.floats.pop(0)
        return self.float_default

    def randint(self, a: int, b: int) -> int:
        if not self.ints:
            raise IndexError(f"int script exhausted (randint({a}, {b}))")
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        self.int_calls.append((a, b, value))
        return value


@pytest.fixture
def sample_data():
    """Fresh copy of the raw sample data."""
    import copy
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def table(sample_data):
    """Validated sample table."""
    return SyllableTable.from_dict(sample_data)


@pytest.fixture
def scripted():
    """The ScriptedRandom class, for building replay sources in tests."""
    return ScriptedRandom
