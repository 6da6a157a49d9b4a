import sys
import os
import subprocess

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conftest import git_log, requires_git
from notes_manager.core.errors import VersionControlError
from notes_manager.vcs.git_store import GitStore

pytestmark = requires_git


def test_ensure_repository_creates_once(tmp_path):
    store = GitStore(tmp_path / "repo")
    assert store.ensure_repository() is True
    assert (tmp_path / "repo" / ".git").is_dir()
    assert store.ensure_repository() is False


def test_stage_and_commit(git_repo):
    path = git_repo.repo_dir / "2024-01-02-Note.md"
    path.write_text("# Note\n", encoding="utf-8")

    git_repo.stage(path)
    assert git_repo.has_staged_changes()

    head = git_repo.commit("Add note: Note")
    assert head and len(head) == 40
    assert "Add note: Note" in git_log(git_repo.repo_dir, "--oneline")
    assert not git_repo.has_staged_changes()


def test_commit_without_changes_returns_none(git_repo):
    assert git_repo.commit("nothing") is None


def test_stage_missing_file_fails(git_repo):
    with pytest.raises(VersionControlError) as exc:
        git_repo.stage(git_repo.repo_dir / "missing.md")
    assert exc.value.returncode != 0
    assert "add" in exc.value.command


def test_push_without_remote_fails(git_repo):
    with pytest.raises(VersionControlError):
        git_repo.push()


def test_missing_git_binary(tmp_path):
    store = GitStore(tmp_path, git="definitely-not-git-binary")
    with pytest.raises(VersionControlError):
        store.commit("x")


def test_push_and_pull_through_bare_remote(tmp_path):
    remote = tmp_path / "remote.git"
    subprocess.run(["git", "init", "--bare", str(remote)], check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)

    a = GitStore(tmp_path / "a", author_name="A", author_email="a@example.com")
    a.ensure_repository()
    subprocess.run(["git", "remote", "add", "origin", str(remote)], cwd=str(a.repo_dir), check=True)
    branch = subprocess.run(
        ["git", "symbolic-ref", "--short", "HEAD"], cwd=str(a.repo_dir), stdout=subprocess.PIPE, text=True,
    ).stdout.strip()
    a.branch = branch

    (a.repo_dir / "2024-01-02-Shared.md").write_text("# Shared\n", encoding="utf-8")
    a.stage(a.repo_dir / "2024-01-02-Shared.md")
    a.commit("Add note: Shared")
    a.push()

    subprocess.run(["git", "clone", str(remote), str(tmp_path / "b")], check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
    b = GitStore(tmp_path / "b", branch=branch, author_name="B", author_email="b@example.com")
    assert (b.repo_dir / "2024-01-02-Shared.md").exists()

    (a.repo_dir / "2024-01-03-Second.md").write_text("# Second\n", encoding="utf-8")
    a.stage(a.repo_dir / "2024-01-03-Second.md")
    a.commit("Add note: Second")
    a.push()

    b.pull()
    assert (b.repo_dir / "2024-01-03-Second.md").exists()


def test_relative_repo_dir_stages_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    store = GitStore("notes", author_name="Test User", author_email="test@example.com")
    store.ensure_repository()
    assert store.repo_dir == tmp_path / "notes"

    (tmp_path / "notes" / "2024-01-01-Hello.md").write_text("# Hello\n", encoding="utf-8")
    store.stage(os.path.join("notes", "2024-01-01-Hello.md"))

    assert store.commit("Add note: Hello")
    assert "Add note: Hello" in git_log(store.repo_dir, "--oneline")
