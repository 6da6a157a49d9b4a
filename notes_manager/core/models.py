from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class Note:
    """
    One note as the editor sees it.

    Only the calendar day of `created` survives a save/reload, because the
    filename encodes year/month/day and nothing finer.
    """
    title: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    content: str = ""
    created: datetime = field(default_factory=datetime.now)

    @property
    def created_date(self) -> date:
        return self.created.date()


# Catalog snapshot: rebuilt on every refresh, never mutated in place.
NoteSnapshot = tuple[Note, ...]
