from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from notes_manager.infrastructure.filesystem import read_note_text

from .codec import NOTE_SUFFIX, decode_note, note_filename
from .errors import NoteDecodeError, NoteStoreError
from .models import Note, NoteSnapshot

log = logging.getLogger(__name__)


def note_sort_key(note: Note) -> str:
    return note.title.casefold()


def sort_notes(notes: Iterable[Note]) -> NoteSnapshot:
    """
    Newest day first; same day -> title A..Z, case-insensitive.
    Exact (day, casefolded title) duplicates keep their input order.
    """
    by_title = sorted(notes, key=note_sort_key)
    return tuple(sorted(by_title, key=lambda n: n.created_date, reverse=True))


def note_path(directory: Path, note: Note) -> Path:
    return Path(directory) / note_filename(note)


def list_note_files(directory: Path) -> list[Path]:
    """
    All regular *.md files directly inside `directory`.

    A missing or unreadable directory raises NoteStoreError, so callers can
    tell it apart from an empty one.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise NoteStoreError(f"Cannot read note directory {directory}: {e}") from e

    files = []
    for path in entries:
        if path.suffix != NOTE_SUFFIX:
            continue
        try:
            if path.is_file():
                files.append(path)
        except OSError:
            continue
    return files


def load_note(path: Path) -> Note:
    path = Path(path)
    try:
        text = read_note_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise NoteStoreError(f"Cannot read note {path}: {e}") from e
    return decode_note(path.name, text)


def list_notes(directory: Path) -> NoteSnapshot:
    """
    Decode every note in `directory` and return them sorted.

    Files that cannot be read or decoded are skipped: one broken note must
    not hide the others.
    """
    notes: list[Note] = []
    skipped = 0
    for path in list_note_files(directory):
        try:
            notes.append(load_note(path))
        except (NoteStoreError, NoteDecodeError) as e:
            skipped += 1
            log.debug("Skipping note file: %s", e)

    log.debug("Catalog scan: dir=%s notes=%d skipped=%d", directory, len(notes), skipped)
    return sort_notes(notes)
