#!/usr/bin/env python3
"""
Name Space Statistics
=====================
Counts how many distinct names a syllable table can produce.

The counts cover the two shapes the generator produces most often:
- first names with two syllables (short) and three syllables (long)
- last names with two syllables (short, N**2) and three syllables (long, N**3)

Last names outside the 2-3 syllable shapes (a widened syllable range) are
not counted, so the totals are a lower bound in that case.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from namegen.generators.syllables import REQUIRED_GENDERS, SyllableTable


@dataclass(frozen=True)
class ShapeCount:
    """Short (two syllable) and long (three syllable) name counts."""
    short: int
    long: int

    @property
    def total(self) -> int:
        return self.short + self.long

    def to_dict(self) -> Dict[str, int]:
        return {'short': self.short, 'long': self.long, 'total': self.total}


@dataclass(frozen=True)
class StatsReport:
    """Combinatorial size of the name space, per gender and in total."""
    slot_sizes: Dict[str, Tuple[int, int, int]]
    last_syllables: int
    firstnames: Dict[str, ShapeCount]
    lastnames: ShapeCount
    nobility: Dict[str, int]
    combinations: Dict[str, int]

    @property
    def genders(self) -> Tuple[str, ...]:
        return tuple(self.firstnames)

    @property
    def firstnames_total(self) -> int:
        return sum(c.total for c in self.firstnames.values())

    @property
    def nobility_total(self) -> int:
        return sum(self.nobility.values())

    @property
    def total(self) -> int:
        return sum(self.combinations.values())

    def to_dict(self) -> Dict[str, Any]:
        """Nested layout: syllables, firstnames, lastnames, nobility, per-gender totals."""
        syllables: Dict[str, int] = {}
        for gender, sizes in self.slot_sizes.items():
            for i, size in enumerate(sizes, 1):
                syllables[f'{gender}{i}'] = size
        syllables['lastname'] = self.last_syllables

        firstnames: Dict[str, Any] = {g: c.to_dict() for g, c in self.firstnames.items()}
        firstnames['total'] = self.firstnames_total

        nobility: Dict[str, int] = dict(self.nobility)
        nobility['total'] = self.nobility_total

        report: Dict[str, Any] = {
            'syllables': syllables,
            'firstnames': firstnames,
            'lastnames': self.lastnames.to_dict(),
            'nobility': nobility,
        }
        report.update(self.combinations)
        report['total'] = self.total
        return report


def _ordered_genders(table: SyllableTable) -> Tuple[str, ...]:
    first = [g for g in REQUIRED_GENDERS if g in table.first_name_syllables]
    return tuple(first + [g for g in table.genders if g not in first])


def compute_stats(table: SyllableTable) -> StatsReport:
    """Closed-form counts for table; parameters and randomness play no part."""
    slot_sizes = {}
    firstnames = {}
    for gender in _ordered_genders(table):
        opening, middle, closing = (len(s) for s in table.first_name_syllables[gender])
        slot_sizes[gender] = (opening, middle, closing)
        firstnames[gender] = ShapeCount(
            short=opening * closing,
            long=opening * middle * closing,
        )

    n = len(table.last_name_syllables)
    lastnames = ShapeCount(short=n ** 2, long=n ** 3)

    nobility = {g: len(table.nobility_for(g)) for g in firstnames}

    # +1: every name can also go without a prefix
    combinations = {
        g: firstnames[g].total * lastnames.total * (nobility[g] + 1)
        for g in firstnames
    }

    return StatsReport(
        slot_sizes=slot_sizes,
        last_syllables=n,
        firstnames=firstnames,
        lastnames=lastnames,
        nobility=nobility,
        combinations=combinations,
    )


def _display_order(report: StatsReport) -> Tuple[str, ...]:
    # Female block first, as in the web report
    first = [g for g in ('female', 'male') if g in report.firstnames]
    return tuple(first + [g for g in report.genders if g not in first])


def format_stats(report: StatsReport) -> str:
    """Plain text report, one block per section."""
    lines = []

    def section(title: str):
        if lines:
            lines.append('')
        lines.append(f'{title}:')
        lines.append('-' * (len(title) + 1))

    def row(label: str, value: int, width: int = 8):
        lines.append(f'{label:<23}: {value:>{width},}')

    section('Firstnames')
    for i, gender in enumerate(_display_order(report)):
        if i:
            lines.append('')
        counts = report.firstnames[gender]
        label = gender.capitalize()
        row(f'{label} short names', counts.short)
        row(f'{label} long names', counts.long)
        row(f'{label} names in total', counts.total)
    lines.append('')
    row('Firstnames in total', report.firstnames_total)

    section('Lastnames')
    row('Short lastnames', report.lastnames.short)
    row('Long lastnames', report.lastnames.long)
    row('Lastnames in total', report.lastnames.total)

    section('Nobility titles')
    for gender in _display_order(report):
        row(f'{gender.capitalize()} nobility titles', report.nobility[gender])
    row('Nobility titles total', report.nobility_total)

    section('Total')
    for gender in _display_order(report):
        lines.append(f"{gender.capitalize() + ' name combinations':<26}: {report.combinations[gender]:>15,}")
    lines.append(f"{'Name combinations in total':<26}: {report.total:>15,}")

    return '\n'.join(lines)


__all__ = [
    'ShapeCount',
    'StatsReport',
    'compute_stats',
    'format_stats',
]
