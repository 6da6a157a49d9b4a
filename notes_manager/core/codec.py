from __future__ import annotations

from datetime import date, datetime
from pathlib import PurePath

from .errors import InvalidDateError, MalformedFilenameError
from .models import Note

NOTE_SUFFIX = ".md"
TITLE_PREFIX = "# "
TAGS_PREFIX = "Tags: "
TAGS_SEPARATOR = ", "


def note_slug(title: str) -> str:
    """
    Spaces become hyphens, nothing else changes.

    Not reversible for titles that already contain a hyphen:
    "a b" and "a-b" both give "a-b".
    """
    return title.replace(" ", "-")


def note_filename(note: Note) -> str:
    d = note.created_date
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}-{note_slug(note.title)}{NOTE_SUFFIX}"


def render_note(note: Note) -> str:
    return (
        f"{TITLE_PREFIX}{note.title}\n"
        "\n"
        f"{TAGS_PREFIX}{TAGS_SEPARATOR.join(note.tags)}\n"
        "\n"
        f"{note.content}"
    )


def encode_note(note: Note) -> tuple[str, str]:
    """Returns (filename, document). The caller guarantees a non-empty title."""
    return note_filename(note), render_note(note)


def parse_note_filename(filename: str) -> tuple[date, str]:
    """
    "2024-01-02-My-Note.md" -> (date(2024, 1, 2), "My Note")

    Accepts a bare name or a path.
    """
    name = PurePath(filename).name
    parts = name.split("-")
    if len(parts) < 4:
        raise MalformedFilenameError(name, "expected YYYY-MM-DD-<title>.md")

    if not all(p.isascii() and p.isdigit() for p in parts[:3]):
        raise InvalidDateError(name, "date fields must be plain digits")
    try:
        year, month, day = (int(p) for p in parts[:3])
        created = date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(name, f"invalid date: {e}") from e

    slug = "-".join(parts[3:])
    if slug.endswith(NOTE_SUFFIX):
        slug = slug[: -len(NOTE_SUFFIX)]
    return created, slug.replace("-", " ")


def _is_blank(lines: list[str], i: int) -> bool:
    return i < len(lines) and lines[i].rstrip("\r") == ""


def _tags_value(line: str) -> str | None:
    line = line.rstrip("\r")
    if line.startswith(TAGS_PREFIX):
        return line[len(TAGS_PREFIX):]
    if line == TAGS_PREFIX.rstrip():
        return ""
    return None


def decode_note(filename: str, document: str) -> Note:
    """
    Rebuild a Note from its filename and markdown body.

    The `# ` first line wins over the filename-derived title. Only the first
    `Tags: ` line is metadata; any later one stays in the content. A blank
    line between the title and the tags line, and one right after the tags
    line, are the separators written by render_note and are dropped. Without
    a tags line right there, the blank after the title stays in the content.
    """
    created, title = parse_note_filename(filename)

    lines = document.split("\n")
    start = 0
    first = lines[0].rstrip("\r")
    if first.startswith(TITLE_PREFIX):
        start = 1
        title = first[len(TITLE_PREFIX):] or title
        if _is_blank(lines, start) and start + 1 < len(lines) and _tags_value(lines[start + 1]) is not None:
            start += 1
    elif document == "":
        lines = []

    body = lines[start:]
    tags: tuple[str, ...] = ()
    for i, line in enumerate(body):
        value = _tags_value(line)
        if value is None:
            continue
        tags = tuple(value.split(TAGS_SEPARATOR)) if value else ()
        skip = 2 if _is_blank(body, i + 1) else 1
        body = body[:i] + body[i + skip:]
        break

    return Note(
        title=title,
        tags=tags,
        content="\n".join(body),
        created=datetime(created.year, created.month, created.day),
    )
