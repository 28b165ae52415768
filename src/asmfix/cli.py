# src/asmfix/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from asmfix.config import DEFAULT_ENCODING, DEFAULT_PATTERNS, DEFAULT_STRIP_CHARS
from asmfix.core.normalizer import FixtureNormalizer
from asmfix.models import NormalizeOptions, RunSummary

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Trim every line and strip '$' from the .asm fixtures in a directory, in place."
    )
    parser.add_argument("directory", type=str, nargs="?", default=None, help="Fixture directory (default: current directory)")

    parser.add_argument(
        "-p", "--pattern",
        dest="patterns",
        action="append",
        default=None,
        help=f"Fixture name pattern, repeatable (default: {', '.join(DEFAULT_PATTERNS)})"
    )

    parser.add_argument("--strip", type=str, default=DEFAULT_STRIP_CHARS, help="Characters to remove after trimming (default: '$')")
    parser.add_argument("--encoding", type=str, default=DEFAULT_ENCODING, help="Text encoding of the fixtures")
    parser.add_argument("-n", "--dry-run", action="store_true", help="Report what would change without writing")
    parser.add_argument("--backup", action="store_true", help="Keep a '<name>.bak' copy of each rewritten file")
    parser.add_argument("--atomic", action="store_true", help="Write through a temp file and rename over the original")
    parser.add_argument("-k", "--keep-going", action="store_true", help="Continue past per-file errors and report them at the end")
    return parser

def build_options(args: argparse.Namespace) -> NormalizeOptions:
    patterns = tuple(args.patterns) if args.patterns else tuple(DEFAULT_PATTERNS)
    return NormalizeOptions(
        patterns=patterns,
        strip_chars=args.strip,
        encoding=args.encoding,
        dry_run=args.dry_run,
        backup=args.backup,
        atomic=args.atomic,
        keep_going=args.keep_going,
    )

def print_failures(summary: RunSummary) -> None:
    print("-" * 60, file=sys.stderr)
    print(f"Processed: {summary.processed} | Failed: {len(summary.failed)}", file=sys.stderr)
    for r in summary.failed:
        print(f"  {r.name}: {r.error}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)

def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        # The working directory is only consulted here, never in the core
        directory = Path(args.directory if args.directory is not None else os.getcwd()).resolve()
        if not directory.is_dir():
            print(f"Error: Invalid directory '{directory}'", file=sys.stderr)
            sys.exit(1)

        options = build_options(args)

        # 2. Normalize
        summary = FixtureNormalizer(options).run(directory)

        # 3. Report
        if summary.failed:
            print_failures(summary)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
