# src/asmfix/core/patterns.py
import sys
from typing import Iterable, Optional
import pathspec
from asmfix.config import DEFAULT_PATTERNS

def load_fixture_spec(patterns: Optional[Iterable[str]] = None) -> pathspec.PathSpec:
    """
    Builds the PathSpec used to select fixture files by name.
    Falls back to DEFAULT_PATTERNS when no pattern is given.
    """
    lines = [p.strip() for p in (patterns or DEFAULT_PATTERNS) if p and p.strip()]
    if not lines:
        lines = list(DEFAULT_PATTERNS)

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except Exception as e:
        print(f"Error parsing fixture patterns: {e}", file=sys.stderr)
        raise

def is_fixture_name(name: str, spec: pathspec.PathSpec) -> bool:
    """Matches a bare entry name; directories are not told apart from files."""
    return spec.match_file(name)
