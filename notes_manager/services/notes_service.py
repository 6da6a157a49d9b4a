# notes_manager/services/notes_service.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path, PurePath
from typing import Optional

from notes_manager.core.catalog import list_notes
from notes_manager.core.codec import encode_note
from notes_manager.core.errors import NoteStoreError, NoteValidationError
from notes_manager.core.forms import build_note
from notes_manager.core.models import Note, NoteSnapshot
from notes_manager.infrastructure.filesystem import atomic_write_text, write_recovery_copy
from notes_manager.vcs.git_store import GitStore

log = logging.getLogger(__name__)


class NotesService:
    """
    What the editor window calls:
    - refresh(): current catalog snapshot
    - save(): write the note file, stage and commit it
    - pull()/push(): sync with the remote; pull returns a fresh snapshot

    Errors propagate as NotesError subclasses for the view to show.
    """

    def __init__(self, notes_dir: Path, store: GitStore) -> None:
        self.notes_dir = Path(notes_dir)
        self.store = store

    # ───────────────────────── catalog ─────────────────────────

    def refresh(self) -> NoteSnapshot:
        return list_notes(self.notes_dir)

    # ───────────────────────── save ─────────────────────────

    def save(self, note: Note) -> Path:
        if not note.title.strip():
            raise NoteValidationError("Title cannot be empty")

        filename, document = encode_note(note)
        if PurePath(filename).name != filename or "\\" in filename:
            raise NoteValidationError(f"Title cannot contain a path separator: {note.title!r}")
        path = self.notes_dir / filename
        existed = path.exists()
        if existed:
            # same day + same title: the earlier note is replaced
            log.warning("Overwriting existing note file: %s", path.name)

        try:
            atomic_write_text(path, document, encoding="utf-8", make_parents=False)
        except OSError as e:
            log.exception("Failed to save note: %s", path)
            try:
                rec = write_recovery_copy(path, document)
                log.warning("Recovery copy written: %s", rec)
            except OSError:
                log.exception("Failed to write recovery copy for %s", path.name)
            raise NoteStoreError(f"Cannot write note {path}: {e}") from e

        self.store.stage(path)
        verb = "Update" if existed else "Add"
        self.store.commit(f"{verb} note: {note.title}")
        log.info("Saved note: %s", path.name)
        return path

    def save_form(
        self,
        title: str,
        tags_text: str,
        content: str,
        *,
        created: Optional[datetime] = None,
    ) -> Path:
        return self.save(build_note(title, tags_text, content, created=created))

    # ───────────────────────── sync ─────────────────────────

    def pull(self) -> NoteSnapshot:
        self.store.pull()
        return self.refresh()

    def push(self) -> None:
        self.store.push()
