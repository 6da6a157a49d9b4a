from __future__ import annotations


class NotesError(Exception):
    """Base class for everything this package raises on purpose."""


class NoteValidationError(NotesError):
    pass


class NoteDecodeError(NotesError):
    def __init__(self, filename: str, reason: str):
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason = reason


class MalformedFilenameError(NoteDecodeError):
    pass


class InvalidDateError(NoteDecodeError):
    pass


class NoteStoreError(NotesError):
    """The note directory or a note file could not be accessed."""


class VersionControlError(NotesError):
    def __init__(self, command: list[str], output: str = "", returncode: int | None = None):
        cmd = " ".join(command)
        detail = output.strip() or "no output"
        super().__init__(f"`{cmd}` failed (exit={returncode}): {detail}")
        self.command = list(command)
        self.output = output
        self.returncode = returncode
