import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notes_manager.infrastructure.filesystem import atomic_write_text, read_note_text, write_recovery_copy


def test_atomic_write_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "note.md"
    atomic_write_text(path, "hello\n")
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_atomic_write_replaces_and_leaves_no_temp(tmp_path):
    path = tmp_path / "note.md"
    atomic_write_text(path, "one")
    atomic_write_text(path, "two")
    assert path.read_text(encoding="utf-8") == "two"
    assert [p.name for p in tmp_path.iterdir()] == ["note.md"]


def test_read_keeps_crlf(tmp_path):
    path = tmp_path / "note.md"
    path.write_bytes(b"# T\r\nbody\r\n")
    assert read_note_text(path) == "# T\r\nbody\r\n"


def test_recovery_copy(tmp_path):
    rec = write_recovery_copy(tmp_path / "2024-01-02-Lost.md", "text", recovery_dir=tmp_path / "recovery")
    assert rec.parent == tmp_path / "recovery"
    assert rec.name.startswith("2024-01-02-Lost.recovery.")
    assert rec.read_text(encoding="utf-8") == "text"
