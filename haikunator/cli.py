#!/usr/bin/env python3
"""
Haikunator CLI
==============
Command-line interface for readable name generation.

Usage:
    haikunator generate -n 5
    haikunator preview "user-42" --hex -l 6
    haikunator capacity -l 2
    haikunator presets
"""

import argparse
import json
import logging
import sys

from haikunator import __version__
from haikunator.errors import HaikunatorError

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
        """Primary command output, printed even in quiet mode."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def setup_logging(verbose: bool = False):
    from haikunator.settings import get_setting

    level = logging.DEBUG if verbose else get_setting('logging.level', 'WARNING')
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
    )


def build_options(args):
    """Per-call TokenConfig from command-line flags (None when no flag was given)."""
    from haikunator.config import TokenConfig

    options = TokenConfig(
        delimiter=args.delimiter,
        token_length=args.token_length,
        token_hex=True if args.hex else None,
        token_chars=args.token_chars,
    )
    return options if options.to_dict() else None


def build_haikunator(args):
    """Haikunator for the word list files and preset named on the command line."""
    from haikunator import Haikunator
    from haikunator.config import get_preset
    from haikunator.generators.words import load_word_file

    adjectives = load_word_file(args.adjectives) if args.adjectives else None
    nouns = load_word_file(args.nouns) if args.nouns else None
    defaults = get_preset(args.preset) if args.preset else None
    return Haikunator(adjectives=adjectives, nouns=nouns, defaults=defaults)


def print_names(names: list, args, out: Output):
    if args.json:
        payload = [n.to_dict() for n in names]
        out.result(json.dumps(payload if len(payload) != 1 else payload[0], indent=2))
        return

    if args.parts:
        rows = [[i, n.name, n.parts.adjective, n.parts.noun, n.parts.token or '-']
                for i, n in enumerate(names, 1)]
        out.table(['#', 'Name', 'Adjective', 'Noun', 'Token'], rows)
        return

    for n in names:
        out.result(n.name)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate random names."""
    from haikunator.generators import set_source, probe_source

    if args.allow_weak_entropy:
        set_source(probe_source(allow_weak=True))

    haiku = build_haikunator(args)
    options = build_options(args)
    opts = options.to_dict() if options else {}

    if args.count == 1:
        names = [haiku.generate(**opts)]
    else:
        names = haiku.bulk(args.count, **opts)

    print_names(names, args, out)
    return 0


def cmd_preview(args, out: Output):
    """Generate seeded names."""
    haiku = build_haikunator(args)
    options = build_options(args)
    opts = options.to_dict() if options else {}

    if args.count == 1:
        names = [haiku.preview(args.seed, **opts)]
    else:
        names = haiku.bulk(args.count, seed=args.seed, **opts)

    print_names(names, args, out)
    return 0


def cmd_capacity(args, out: Output):
    """Print the number of distinct names."""
    haiku = build_haikunator(args)
    options = build_options(args)
    total = haiku.capacity(**(options.to_dict() if options else {}))
    out.result(total)
    return 0


def cmd_presets(args, out: Output):
    """List presets."""
    from haikunator.config import list_presets

    presets = list_presets()
    if args.json:
        out.result(json.dumps(presets, indent=2))
        return 0

    rows = []
    for name, info in presets.items():
        settings = ', '.join(f"{k}={v}" for k, v in info['config'].items()) or '-'
        rows.append([name, settings, info['description']])
    out.table(['Preset', 'Settings', 'Description'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def add_token_arguments(p):
    p.add_argument('--delimiter', '-d', help='Separator between parts (default: -)')
    p.add_argument('--token-length', '-l', type=int, help='Token length (default: 4)')
    p.add_argument('--hex', action='store_true', help='Hexadecimal token (overrides --token-chars)')
    p.add_argument('--token-chars', '-c', help='Token alphabet (default: 0123456789)')
    p.add_argument('--preset', '-p', help='Named preset used as defaults (see: presets)')
    p.add_argument('--adjectives', metavar='FILE', help='Adjective list file, one per line')
    p.add_argument('--nouns', metavar='FILE', help='Noun list file, one per line')


def add_output_arguments(p):
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--parts', action='store_true', help='Show adjective/noun/token columns')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='haikunator',
        description='Haikunator - Readable Random Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate -n 10 --hex -l 6
  %(prog)s preview "user-42"
  %(prog)s preview "batch-seed" -n 5 --json
  %(prog)s capacity -l 2
  %(prog)s presets
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.add_argument('--allow-weak-entropy', action='store_true',
                        help='Fall back to a predictable source if the OS has no entropy pool')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate random names')
    p.add_argument('-n', '--count', type=int, default=1, help='Number of unique names (default: 1)')
    add_token_arguments(p)
    add_output_arguments(p)

    # --- preview ---
    p = subparsers.add_parser('preview', aliases=['p'], help='Generate seeded names')
    p.add_argument('seed', help='Seed string')
    p.add_argument('-n', '--count', type=int, default=1, help='Number of unique names (default: 1)')
    add_token_arguments(p)
    add_output_arguments(p)

    # --- capacity ---
    p = subparsers.add_parser('capacity', help='Count distinct possible names')
    add_token_arguments(p)

    # --- presets ---
    p = subparsers.add_parser('presets', help='List presets')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'p': 'preview',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'preview': cmd_preview,
        'capacity': cmd_capacity,
        'presets': cmd_presets,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (HaikunatorError, OSError) as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
