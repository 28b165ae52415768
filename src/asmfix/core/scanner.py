# src/asmfix/core/scanner.py
import os
from pathlib import Path
from typing import Iterator

import pathspec

from asmfix.core.patterns import is_fixture_name

class FixtureScanner:
    def __init__(self, directory: Path, spec: pathspec.PathSpec):
        self.directory = directory
        self.spec = spec

    def scan(self) -> Iterator[Path]:
        """
        Lists the immediate entries of the directory (no recursion) and yields
        those whose name matches the fixture spec, sorted by name.

        Entries are not checked for being regular files: a directory named
        'x.asm' is yielded and fails later on read.
        """
        # os.listdir order is filesystem dependent; sort for a stable run order
        for name in sorted(os.listdir(self.directory)):
            if is_fixture_name(name, self.spec):
                yield self.directory / name
