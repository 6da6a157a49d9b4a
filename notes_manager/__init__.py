from .core.catalog import list_notes, load_note, sort_notes
from .core.codec import decode_note, encode_note
from .core.errors import (
    InvalidDateError,
    MalformedFilenameError,
    NoteDecodeError,
    NotesError,
    NoteStoreError,
    NoteValidationError,
    VersionControlError,
)
from .core.models import Note

__all__ = ["Note",
           "encode_note",
           "decode_note",
           "list_notes",
           "load_note",
           "sort_notes",
           "NotesError",
           "NoteValidationError",
           "NoteDecodeError",
           "MalformedFilenameError",
           "InvalidDateError",
           "NoteStoreError",
           "VersionControlError"
           ]
