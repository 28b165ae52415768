# src/asmfix/config.py

# Fixture selection: gitignore-style patterns matched against bare entry names
DEFAULT_PATTERNS = [
    "*.asm",
]

# Characters removed from the joined text after trimming
DEFAULT_STRIP_CHARS = "$"

DEFAULT_ENCODING = "utf-8"

BACKUP_SUFFIX = ".bak"

# Prefix for temp files created by atomic writes (same directory as the target)
TEMP_PREFIX = ".asmfix-"

# Trimmed from both ends of every line: ASCII blanks, Unicode space separators,
# line/paragraph separators and U+FEFF (byte order mark). \x1c-\x1f and \x85 are kept.
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \xa0"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
