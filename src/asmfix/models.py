# src/asmfix/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from asmfix.config import DEFAULT_ENCODING, DEFAULT_PATTERNS, DEFAULT_STRIP_CHARS

@dataclass(frozen=True)
class NormalizeOptions:
    """Immutable run configuration, built once at the CLI boundary."""
    patterns: Tuple[str, ...] = tuple(DEFAULT_PATTERNS)
    strip_chars: str = DEFAULT_STRIP_CHARS
    encoding: str = DEFAULT_ENCODING
    dry_run: bool = False
    backup: bool = False
    atomic: bool = False
    keep_going: bool = False

@dataclass(frozen=True)
class FileResult:
    """Outcome of processing a single fixture."""
    path: Path
    name: str
    changed: bool = False
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

@dataclass
class RunSummary:
    results: List[FileResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def changed(self) -> List[FileResult]:
        return [r for r in self.results if r.ok and r.changed]

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]
