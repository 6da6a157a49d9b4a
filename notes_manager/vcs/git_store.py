from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from notes_manager.core.errors import VersionControlError

log = logging.getLogger(__name__)


class GitStore:
    """
    Thin wrapper over the `git` executable for the note repository.

    Every failing command raises VersionControlError with git's output;
    nothing is retried.
    """

    def __init__(
        self,
        repo_dir: Path,
        *,
        remote: str = "origin",
        branch: Optional[str] = None,
        author_name: Optional[str] = None,
        author_email: Optional[str] = None,
        git: str = "git",
    ) -> None:
        self.repo_dir = Path(repo_dir).expanduser().absolute()
        self.remote = remote
        self.branch = branch
        self.author_name = author_name
        self.author_email = author_email
        self._git = git

    # ───────────────────────── internal ─────────────────────────

    def _command(self, *args: str) -> list[str]:
        cmd = [self._git]
        if self.author_name:
            cmd += ["-c", f"user.name={self.author_name}"]
        if self.author_email:
            cmd += ["-c", f"user.email={self.author_email}"]
        return cmd + list(args)

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = self._command(*args)
        try:
            res = subprocess.run(
                cmd,
                cwd=str(self.repo_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise VersionControlError(cmd, str(e)) from e

        if check and res.returncode != 0:
            log.warning("git failed: cmd=%s rc=%s out=%s", args, res.returncode, (res.stdout or "").strip())
            raise VersionControlError(cmd, res.stdout or "", res.returncode)
        return res

    def _remote_args(self) -> list[str]:
        args = [self.remote]
        if self.branch:
            args.append(self.branch)
        return args

    # ───────────────────────── public API ─────────────────────────

    def ensure_repository(self) -> bool:
        """
        Open the repository, running `git init` first if there is none.
        Returns True when a new repository was created.
        """
        self.repo_dir.mkdir(parents=True, exist_ok=True)
        if (self.repo_dir / ".git").exists():
            return False
        self._run("init")
        log.info("Initialized note repository: %s", self.repo_dir)
        return True

    def stage(self, path: Path) -> None:
        path = Path(path)
        if not path.is_absolute():
            path = Path.cwd() / path
        rel = path.resolve().relative_to(self.repo_dir.resolve())
        self._run("add", "--", rel.as_posix())

    def has_staged_changes(self) -> bool:
        # exit 1 == differences present
        res = self._run("diff", "--cached", "--quiet", check=False)
        if res.returncode not in (0, 1):
            raise VersionControlError(self._command("diff", "--cached", "--quiet"), res.stdout or "", res.returncode)
        return res.returncode == 1

    def commit(self, message: str) -> Optional[str]:
        """Commit whatever is staged. Returns the commit hash, or None if nothing was staged."""
        if not self.has_staged_changes():
            log.info("Nothing to commit: %s", message)
            return None
        self._run("commit", "-m", message)
        head = self._run("rev-parse", "HEAD").stdout.strip()
        log.info("Committed %s: %s", head[:8], message)
        return head

    def push(self) -> None:
        self._run("push", *self._remote_args())
        log.info("Pushed to %s", " ".join(self._remote_args()))

    def pull(self) -> None:
        self._run("pull", *self._remote_args())
        log.info("Pulled from %s", " ".join(self._remote_args()))
