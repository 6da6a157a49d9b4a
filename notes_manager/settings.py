from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

# ───────────────────────── paths ─────────────────────────

APP_NAME = "notes-manager"
LOGGER_NAME = "notes_manager"

APP_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
RECOVERY_DIR = APP_DIR / "recovery"

# key=value file in the home directory, read once at startup
CONFIG_PATH = Path.home() / f".{APP_NAME}.conf"
DEFAULT_REPO_PATH = Path.home() / "notes-repo"


@dataclass(frozen=True)
class SettingsKeys:
    REPO_PATH: str = "repo_path"
    REMOTE: str = "remote"
    BRANCH: str = "branch"
    AUTHOR_NAME: str = "author_name"
    AUTHOR_EMAIL: str = "author_email"


KEYS = SettingsKeys()


@dataclass(frozen=True)
class AppConfig:
    repo_path: Path = DEFAULT_REPO_PATH
    remote: str = "origin"
    branch: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        if val is None:
            return default
        # IniFormat reads an unquoted "a, b" as a list
        if isinstance(val, (list, tuple)):
            return ", ".join(str(v) for v in val)
        return str(val)
    except Exception:
        return default


def _open(path: Optional[Path]) -> QSettings:
    return QSettings(str(path or CONFIG_PATH), QSettings.Format.IniFormat)


def load_config(path: Optional[Path] = None) -> AppConfig:
    settings = _open(path)

    repo = get_str(settings, KEYS.REPO_PATH, "").strip()
    remote = get_str(settings, KEYS.REMOTE, "").strip()
    return AppConfig(
        repo_path=Path(repo).expanduser().absolute() if repo else DEFAULT_REPO_PATH,
        remote=remote or "origin",
        branch=get_str(settings, KEYS.BRANCH, "").strip() or None,
        author_name=get_str(settings, KEYS.AUTHOR_NAME, "").strip() or None,
        author_email=get_str(settings, KEYS.AUTHOR_EMAIL, "").strip() or None,
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> None:
    settings = _open(path)
    settings.setValue(KEYS.REPO_PATH, str(config.repo_path))
    settings.setValue(KEYS.REMOTE, config.remote)
    settings.setValue(KEYS.BRANCH, config.branch or "")
    settings.setValue(KEYS.AUTHOR_NAME, config.author_name or "")
    settings.setValue(KEYS.AUTHOR_EMAIL, config.author_email or "")
    settings.sync()
