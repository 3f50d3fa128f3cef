#!/usr/bin/env python3
"""
namegen CLI
===========
Command-line interface for German name generation and name space statistics.

Usage:
    namegen generate -n 10 --gender f
    namegen generate -m lastname --nobility 1.0
    namegen stats
    namegen genders
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from namegen import __version__
from namegen.generators import (
    Mode,
    SyllableTable,
    load_default_table,
    load_syllable_table,
)
from namegen.request import GenerationRequest
from namegen.settings import get_setting
from namegen.stats import compute_stats, format_stats

logger = logging.getLogger(__name__)

MODE_CHOICES = [m.value for m in Mode] + ['first', 'last']


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def data(self, text: str):
        """Primary output; printed even in quiet mode."""
        self.console.print(text, markup=False, emoji=False, soft_wrap=True)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, emoji=False, soft_wrap=True)

    def table(self, title: str, headers: list, rows: list):
        """Print a rich table; columns after the first are right-aligned."""
        if self.quiet:
            return
        table = Table(title=title, box=box.SIMPLE_HEAVY, title_justify='left')
        for i, header in enumerate(headers):
            table.add_column(header, justify='right' if i else 'left')
        for row in rows:
            table.add_row(*(f"{c:,}" if isinstance(c, int) else str(c) for c in row))
        self.console.print(table)


def setup_logging(verbose: bool = False):
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
        stream=sys.stderr,
    )


def load_table(args) -> SyllableTable:
    if getattr(args, 'data', None):
        return load_syllable_table(args.data)
    return load_default_table()


def build_query(args) -> Dict[str, Any]:
    """Map CLI arguments onto form query keys (unset options are left out)."""
    mapping = {
        'gender': args.gender,
        'count': args.count,
        'mode': args.mode,
        't_first_extra': args.first_extra,
        't_double_last': args.double_last,
        't_longer_last': args.longer_last,
        't_nobility': args.nobility,
        'min_last': args.min_last,
        'max_last': args.max_last,
    }
    return {k: v for k, v in mapping.items() if v is not None}


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    table = load_table(args)
    request = GenerationRequest.from_query(build_query(args))
    gen = request.build_generator(table, seed=args.seed)

    logger.info(
        f"Generating {request.count} names: gender={request.gender}, mode={request.mode.value}, "
        f"thresholds={gen.params.thresholds}, "
        f"syllables=[{gen.params.min_syllables}, {gen.params.max_syllables_exclusive})"
    )

    names = gen.generate_many(request.count, request.gender, request.mode)

    if args.json:
        out.data(json.dumps(names, ensure_ascii=False, indent=2))
        return 0

    width = len(str(len(names)))
    for i, name in enumerate(names, 1):
        out.data(f"{i:>{width}}. {name}")
    return 0


def cmd_stats(args, out: Output):
    """Show how many names the syllable table can produce."""
    report = compute_stats(load_table(args))

    if args.json:
        out.data(json.dumps(report.to_dict(), indent=2))
        return 0
    if args.plain:
        out.data(format_stats(report))
        return 0

    genders = list(report.genders)

    rows = []
    for gender in genders:
        counts = report.firstnames[gender]
        rows.append([gender, counts.short, counts.long, counts.total])
    rows.append(['total', '', '', report.firstnames_total])
    out.table('Firstnames', ['Gender', 'Short', 'Long', 'Total'], rows)

    out.table('Lastnames', ['', 'Count'], [
        ['Short lastnames', report.lastnames.short],
        ['Long lastnames', report.lastnames.long],
        ['Lastnames in total', report.lastnames.total],
    ])

    rows = [[g, report.nobility[g]] for g in genders]
    rows.append(['total', report.nobility_total])
    out.table('Nobility titles', ['Gender', 'Titles'], rows)

    rows = [[g, report.combinations[g]] for g in genders]
    rows.append(['total', report.total])
    out.table('Name combinations', ['Gender', 'Combinations'], rows)

    # Quiet mode still gets the headline number
    if out.quiet:
        out.data(str(report.total))
    return 0


def cmd_genders(args, out: Output):
    """List genders in the syllable table."""
    table = load_table(args)
    rows: List[list] = []
    for gender in table.genders:
        opening, middle, closing = (len(s) for s in table.first_name_syllables[gender])
        rows.append([gender, opening, middle, closing, len(table.nobility_for(gender))])

    if out.quiet:
        for row in rows:
            out.data(row[0])
        return 0

    out.table('Genders', ['Gender', 'Opening', 'Middle', 'Closing', 'Nobility'], rows)
    out.print(f"Last name syllables: {len(table.last_name_syllables):,}")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namegen',
        description=f"{get_setting('app.title', 'German Name Generator')} - names from syllable tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --gender f
  %(prog)s generate -m lastname --double-last 0.5 --nobility 1
  %(prog)s generate --min-last 2 --max-last 6 --longer-last 1 --seed 42
  %(prog)s stats
  %(prog)s stats --json
  %(prog)s --data my_syllables.yaml genders
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')
    parser.add_argument('--data', '-d', help='Syllable data file (.json/.yaml); default from app.yaml')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, help='Number of names (default: 10, max: 999)')
    p.add_argument('--gender', '-g',
                   help='male, female, random, m/f/r or another gender in the table (default: random)')
    p.add_argument('--mode', '-m', type=str.lower, choices=MODE_CHOICES,
                   help='full name, firstname only or lastname only (default: full)')
    p.add_argument('--first-extra', type=float, help='Probability of a middle first name syllable')
    p.add_argument('--double-last', type=float, help='Probability of a hyphenated double last name')
    p.add_argument('--longer-last', type=float, help='Probability of a longer last name')
    p.add_argument('--nobility', type=float, help='Probability of a nobility prefix')
    p.add_argument('--min-last', type=int, help='Minimum last name syllables (inclusive)')
    p.add_argument('--max-last', type=int, help='Maximum last name syllables (exclusive)')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show name space statistics')
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    fmt.add_argument('--plain', action='store_true', help='Plain text report')

    # --- genders ---
    subparsers.add_parser('genders', help='List genders and slot sizes in the syllable table')

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'stats': cmd_stats,
        'genders': cmd_genders,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
