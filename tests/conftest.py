import sys
import os
import subprocess
import shutil

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not found")


@pytest.fixture
def git_repo(tmp_path):
    from notes_manager.vcs.git_store import GitStore

    repo = tmp_path / "notes"
    store = GitStore(repo, author_name="Test User", author_email="test@example.com")
    store.ensure_repository()
    return store


def git_log(repo, *args):
    res = subprocess.run(
        ["git", "log", *args],
        cwd=str(repo),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    return res.stdout
