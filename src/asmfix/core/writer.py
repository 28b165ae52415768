# src/asmfix/core/writer.py
import os
import shutil
import tempfile
from pathlib import Path

from asmfix.config import BACKUP_SUFFIX, TEMP_PREFIX

def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)

def make_backup(path: Path) -> Path:
    """Copies the original file next to itself as '<name>.bak'."""
    target = backup_path(path)
    shutil.copy2(path, target)
    return target

def write_direct(path: Path, data: bytes) -> None:
    # Truncate and replace, same as the plain overwrite of the original tool
    with open(path, "wb") as f:
        f.write(data)

def write_atomic(path: Path, data: bytes) -> None:
    """
    Writes to a temp file in the target's directory and renames it over the
    target, so a crash never leaves a half-written fixture behind.
    """
    # Replace the file a symlink points at, not the link itself
    path = Path(os.path.realpath(path))
    fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
