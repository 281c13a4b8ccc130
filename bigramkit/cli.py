#!/usr/bin/env python3
"""
bigramkit CLI
=============
Command-line interface for training, scoring and sampling the bigram model.

Usage:
    bigramkit report
    bigramkit score Emma Zyx
    bigramkit generate -n 10 --seed 42
    bigramkit matrix --row e
"""

import argparse
import logging
import sys

from bigramkit import __version__
from bigramkit.alphabet import LETTERS, BOUNDARY_CHAR, Symbol, normalize_name
from bigramkit.corpus import load_names
from bigramkit.model import build_model
from bigramkit.sampling import SeededRandomSource, generate_batch
from bigramkit.scoring import score_name, score_names
from bigramkit.settings import ModelSettings

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Always printed, even in quiet mode."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table. Headers follow quiet mode, rows are always printed."""
        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        self.print(header_line)
        self.print('-' * len(header_line))

        for row in rows:
            self.result(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def get_settings(args) -> ModelSettings:
    """Merge command-line overrides over the YAML defaults."""
    return ModelSettings(
        smoothing=getattr(args, 'smoothing', None),
        corpus_path=getattr(args, 'corpus', None),
        seed=getattr(args, 'seed', None),
    )


def load_model(settings: ModelSettings, out: Output):
    names = load_names(settings.corpus_path, keep_blank=settings.keep_blank)
    out.print(f"Training on {len(names)} names from {settings.corpus_path} "
              f"(smoothing={settings.smoothing})")
    return names, build_model(names, smoothing=settings.smoothing)


def format_surprisal(value: float) -> str:
    return f"{value:.4f}"


# =============================================================================
# Commands
# =============================================================================

def cmd_report(args, out: Output):
    """Score the first corpus names, then generate and score new ones."""
    settings = get_settings(args)
    show = args.show if args.show is not None else settings.show
    samples = args.samples if args.samples is not None else settings.samples

    names, matrix = load_model(settings, out)
    corpus_names = [normalize_name(n) for n in names[:show]]

    out.print()
    out.print("Corpus names")
    rows = [[s.name, format_surprisal(s.surprisal)] for s in score_names(corpus_names, matrix)]
    out.table(['Name', '-log10(p)/len'], rows, [20, 14])

    rng = SeededRandomSource(settings.seed)
    generated = generate_batch(matrix, samples, rng)

    out.print()
    out.print("Generated names")
    rows = [[s.name, format_surprisal(s.surprisal)] for s in score_names(generated, matrix)]
    out.table(['Name', '-log10(p)/len'], rows, [20, 14])
    return 0


def cmd_score(args, out: Output):
    """Score one or more names."""
    settings = get_settings(args)
    _, matrix = load_model(settings, out)

    rows = []
    for word in args.names:
        scored = score_name(normalize_name(word), matrix)
        rows.append([word, scored.name, f"{scored.likelihood:.3e}", format_surprisal(scored.surprisal)])

    out.print()
    out.table(['Input', 'Normalized', 'Likelihood', '-log10(p)/len'], rows, [20, 20, 12, 14])
    return 0


def cmd_generate(args, out: Output):
    """Generate new names."""
    settings = get_settings(args)
    _, matrix = load_model(settings, out)

    rng = SeededRandomSource(settings.seed)
    names = generate_batch(
        matrix,
        args.count,
        rng,
        unique=args.unique,
        max_attempts=args.count * settings.max_attempts_factor,
    )
    if not names:
        out.print("No names generated.")
        return 0

    out.print()
    if args.verbose:
        rows = [[i, s.name, format_surprisal(s.surprisal)]
                for i, s in enumerate(score_names(names, matrix), 1)]
        out.table(['#', 'Name', '-log10(p)/len'], rows, [4, 20, 14])
    else:
        for name in names:
            out.result(name.strip(BOUNDARY_CHAR).capitalize() if args.plain else name)
    return 0


def cmd_matrix(args, out: Output):
    """Print transition probabilities."""
    settings = get_settings(args)
    _, matrix = load_model(settings, out)
    out.print()

    if args.row:
        symbol = Symbol.from_char(args.row.lower())
        rows = [[Symbol(i).char, f"{p:.4f}"] for i, p in enumerate(matrix.row(symbol))]
        out.print(f"P(next | {symbol.char!r})")
        out.table(['Next', 'P'], rows, [6, 10])
        return 0

    symbols = BOUNDARY_CHAR + LETTERS
    out.result('  ' + ''.join(f"{c:>6}" for c in symbols))
    for i, row in enumerate(matrix.rows):
        out.result(f"{symbols[i]} " + ''.join(f"{p:6.3f}" for p in row))
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bigramkit',
        description='bigramkit - Bigram Name Model',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s report --show 10 --samples 10
  %(prog)s score Emma Zyx
  %(prog)s generate -n 20 --unique --seed 7
  %(prog)s matrix --row q --smoothing 0.1
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    # Shared model options
    model_opts = argparse.ArgumentParser(add_help=False)
    model_opts.add_argument('--corpus', help='Name list, one per line (default: bundled names)')
    model_opts.add_argument('--smoothing', type=float, help='Additive smoothing (default: 1.0)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- report ---
    p = subparsers.add_parser('report', aliases=['r'], parents=[model_opts],
                              help='Score corpus names and sample new ones')
    p.add_argument('--show', type=int, help='Corpus names to score (default: 5)')
    p.add_argument('--samples', type=int, help='Names to generate (default: 5)')
    p.add_argument('--seed', type=int, help='Random seed')

    # --- score ---
    p = subparsers.add_parser('score', aliases=['s'], parents=[model_opts], help='Score names')
    p.add_argument('names', nargs='+', help='Names to score')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], parents=[model_opts],
                              help='Generate names')
    p.add_argument('-n', '--count', type=int, default=10, help='Number of names (default: 10)')
    p.add_argument('--unique', '-u', action='store_true', help='Skip duplicates')
    p.add_argument('--seed', type=int, help='Random seed')
    p.add_argument('--plain', '-p', action='store_true', help='Print without boundary markers')
    p.add_argument('--verbose', '-v', action='store_true', help='Show surprisal per name')

    # --- matrix ---
    p = subparsers.add_parser('matrix', aliases=['m'], parents=[model_opts],
                              help='Show transition probabilities')
    p.add_argument('--row', help="Only the row for this character ('.' for the start)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'r': 'report',
        's': 'score',
        'gen': 'generate', 'g': 'generate',
        'm': 'matrix',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'report': cmd_report,
        'score': cmd_score,
        'generate': cmd_generate,
        'matrix': cmd_matrix,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (FileNotFoundError, ValueError) as e:
            out.error(str(e))
            logger.debug("Command failed", exc_info=True)
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
