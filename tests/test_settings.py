import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notes_manager.settings import DEFAULT_REPO_PATH, AppConfig, load_config, save_config


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.conf")
    assert config == AppConfig()
    assert config.repo_path == DEFAULT_REPO_PATH
    assert config.remote == "origin"
    assert config.branch is None


def test_reads_key_value_file(tmp_path):
    path = tmp_path / "notes.conf"
    path.write_text(
        f"repo_path={tmp_path / 'my-notes'}\nremote=backup\nbranch=main\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.repo_path == tmp_path / "my-notes"
    assert config.remote == "backup"
    assert config.branch == "main"
    assert config.author_name is None


def test_repo_path_expands_user(tmp_path):
    path = tmp_path / "notes.conf"
    path.write_text("repo_path=~/somewhere\n", encoding="utf-8")
    assert load_config(path).repo_path == Path.home() / "somewhere"


def test_save_and_load(tmp_path):
    path = tmp_path / "notes.conf"
    config = AppConfig(
        repo_path=tmp_path / "repo",
        remote="origin",
        branch="main",
        author_name="Ann",
        author_email="ann@example.com",
    )
    save_config(config, path)
    assert load_config(path) == config


def test_value_with_comma_stays_a_string(tmp_path):
    path = tmp_path / "notes.conf"
    path.write_text("author_name=Doe, Jane\n", encoding="utf-8")
    assert load_config(path).author_name == "Doe, Jane"


def test_relative_repo_path_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "notes.conf"
    path.write_text("repo_path=notes\n", encoding="utf-8")
    assert load_config(path).repo_path == tmp_path / "notes"
