from .models import Note
from .codec import encode_note, decode_note, note_filename, parse_note_filename
from .catalog import list_notes, load_note, sort_notes
from .forms import NoteForm, build_note, note_to_form

__all__ = ["Note",
           "encode_note",
           "decode_note",
           "note_filename",
           "parse_note_filename",
           "list_notes",
           "load_note",
           "sort_notes",
           "NoteForm",
           "build_note",
           "note_to_form"
           ]
