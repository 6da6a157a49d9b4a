from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from .codec import TAGS_SEPARATOR
from .errors import NoteValidationError
from .models import Note


@dataclass(frozen=True)
class NoteForm:
    """Text of the editor fields: title, comma separated tags, body."""
    title: str = ""
    tags_text: str = ""
    content: str = ""


def parse_tags_text(text: str) -> tuple[str, ...]:
    """ "work,  ideas , ,draft" -> ("work", "ideas", "draft") """
    if not text:
        return ()
    return tuple(t for t in (part.strip() for part in text.split(",")) if t)


def format_tags_text(tags: Iterable[str]) -> str:
    return TAGS_SEPARATOR.join(tags)


def build_note(
    title: str,
    tags_text: str,
    content: str,
    *,
    created: Optional[datetime] = None,
) -> Note:
    if not (title or "").strip():
        raise NoteValidationError("Title cannot be empty")
    return Note(
        title=title,
        tags=parse_tags_text(tags_text),
        content=content or "",
        created=created or datetime.now(),
    )


def note_to_form(note: Note) -> NoteForm:
    return NoteForm(
        title=note.title,
        tags_text=format_tags_text(note.tags),
        content=note.content,
    )
