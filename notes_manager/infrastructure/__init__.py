from .filesystem import atomic_write_text, read_note_text, write_recovery_copy

__all__ = ["atomic_write_text",
           "read_note_text",
           "write_recovery_copy"
           ]
