# src/asmfix/core/transform.py
from asmfix.config import DEFAULT_STRIP_CHARS, TRIM_CHARS

def normalize_text(text: str, strip_chars: str = DEFAULT_STRIP_CHARS) -> str:
    """
    Trims every line and drops all occurrences of ``strip_chars``.

    Only '\\n' delimits lines, and the result is joined with a bare '\\n', so a
    '\\r\\n' file comes back with '\\n' endings (the '\\r' is trimmed away).
    The number of '\\n'-separated segments never changes.

    Trimming uses TRIM_CHARS rather than str.strip()'s whitespace set, so a
    leading byte order mark is dropped while control characters such as
    '\\x1c' are kept.
    """
    joined = "\n".join(line.strip(TRIM_CHARS) for line in text.split("\n"))
    if not strip_chars:
        return joined
    # Removal happens after the join, with no regard for assembly syntax
    return joined.translate({ord(c): None for c in strip_chars})
