# src/asmfix/core/normalizer.py
import sys
from pathlib import Path
from typing import Optional

from asmfix.core.patterns import load_fixture_spec
from asmfix.core.scanner import FixtureScanner
from asmfix.core.transform import normalize_text
from asmfix.core.writer import make_backup, write_atomic, write_direct
from asmfix.models import FileResult, NormalizeOptions, RunSummary

class FixtureNormalizer:
    """
    Rewrites every matching fixture in a directory, one file at a time.

    In the default fail-fast mode the first filesystem or decoding error
    propagates and the remaining fixtures are left alone. With
    ``keep_going`` each failure is recorded on its FileResult instead.
    """

    def __init__(self, options: Optional[NormalizeOptions] = None):
        self.options = options or NormalizeOptions()
        self.spec = load_fixture_spec(self.options.patterns)

    def process_file(self, path: Path) -> FileResult:
        opts = self.options
        if not opts.dry_run:
            print(path.name)

        original = path.read_bytes()
        text = original.decode(opts.encoding)
        data = normalize_text(text, opts.strip_chars).encode(opts.encoding)
        changed = data != original

        if opts.dry_run:
            print(f"{path.name} ({'would change' if changed else 'unchanged'})")
            return FileResult(path=path, name=path.name, changed=changed)

        if opts.backup:
            make_backup(path)

        if opts.atomic:
            write_atomic(path, data)
        else:
            write_direct(path, data)

        return FileResult(path=path, name=path.name, changed=changed)

    def run(self, directory: Path) -> RunSummary:
        summary = RunSummary()
        scanner = FixtureScanner(Path(directory), self.spec)

        for path in scanner.scan():
            if not self.options.keep_going:
                summary.results.append(self.process_file(path))
                continue

            try:
                result = self.process_file(path)
            except (OSError, UnicodeError) as e:
                print(f"  > [Warning] Failed {path.name}: {e}", file=sys.stderr)
                result = FileResult(path=path, name=path.name, error=e)
            summary.results.append(result)

        return summary

def run(directory: Path, options: Optional[NormalizeOptions] = None) -> RunSummary:
    """Normalizes all fixtures directly inside ``directory``."""
    return FixtureNormalizer(options).run(directory)
