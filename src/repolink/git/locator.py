"""Locate the git repository that contains a file."""

import os
from collections.abc import Callable
from pathlib import Path

import structlog

from repolink.git.client import GitClient

logger = structlog.get_logger(__name__)


class RepositoryLocator:
    """Finds the repository root for a file path."""

    def __init__(self, git_factory: Callable[[Path], GitClient] = GitClient) -> None:
        self._git_factory = git_factory

    def locate(self, file_path: Path) -> Path | None:
        """Get the repository root, or None when the file is not tracked."""
        directory = file_path if file_path.is_dir() else file_path.parent
        root = self._git_factory(directory).show_toplevel()
        logger.debug("Located repository root", file_path=str(file_path), root=str(root) if root else None)
        return root


def relative_path(file_path: Path, root: Path) -> str:
    """Express a file path relative to the repository root with forward slashes.

    Only the containing directory is resolved, so symlinked locations (for
    example /tmp vs /private/tmp on macOS) compare equal while a symlinked
    file keeps its own name.
    """
    resolved = file_path.parent.resolve() / file_path.name
    relative = os.path.relpath(resolved, root.resolve())
    relative = relative.replace("\\", "/")
    if relative == ".":
        return ""
    return relative.lstrip("/")
