from __future__ import annotations

from pathlib import Path
from typing import Optional

from notes_manager.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from notes_manager.services.notes_service import NotesService
from notes_manager.settings import load_config
from notes_manager.vcs.git_store import GitStore


def bootstrap(
    config_path: Optional[Path] = None,
    *,
    log_dir: Optional[Path] = None,
    install_hooks: bool = True,
) -> NotesService:
    """Logging, config, repository; returns the service a window binds to."""
    setup_logging(log_dir)
    if install_hooks:
        install_global_exception_hooks()
    config = load_config(config_path)

    store = GitStore(
        config.repo_path,
        remote=config.remote,
        branch=config.branch,
        author_name=config.author_name,
        author_email=config.author_email,
    )
    store.ensure_repository()

    log.info("Notes repository ready: %s, SID=%s", config.repo_path, SESSION_ID)
    return NotesService(config.repo_path, store)
