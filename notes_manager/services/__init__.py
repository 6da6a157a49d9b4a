from .notes_service import NotesService

__all__ = ["NotesService"]
