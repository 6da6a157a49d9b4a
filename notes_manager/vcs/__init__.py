from .git_store import GitStore

__all__ = ["GitStore"]
