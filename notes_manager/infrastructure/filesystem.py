# notes_manager/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from notes_manager.settings import RECOVERY_DIR


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
    make_parents: bool = True,
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    A crash mid-save leaves the previous version of the note in place.
    """
    path = Path(path)
    parent = path.parent
    if make_parents:
        parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass


def read_note_text(path: Path) -> str:
    # newline="" keeps "\r\n" intact; the codec decides what to strip
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_recovery_copy(
    note_path: Path,
    text: str,
    *,
    recovery_dir: Optional[Path] = None,
) -> Path:
    """
    Best-effort emergency save when normal save fails.

    Writes timestamped copy into:
      ~/.notes-manager/recovery/
    """
    note_path = Path(note_path)
    stem = note_path.stem or "Untitled"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")

    recovery_path = Path(recovery_dir or RECOVERY_DIR) / f"{stem}.recovery.{ts}.md"
    atomic_write_text(recovery_path, text, encoding="utf-8")
    return recovery_path
