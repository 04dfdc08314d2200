"""Resolve the git reference that goes into a URL."""

import structlog

from repolink.core.exceptions import ReferenceUnresolvableError
from repolink.git.client import GitClient

logger = structlog.get_logger(__name__)


class ReferenceResolver:
    """Picks the branch name or commit id for a checkout."""

    def __init__(self, git: GitClient) -> None:
        self._git = git

    def resolve(self, use_commit_hash: bool = False) -> str:
        """Get the current branch, or the commit id when asked or detached."""
        if not use_commit_hash:
            branch = self._git.current_branch()
            if branch:
                return branch
            logger.debug("No current branch, falling back to commit id")

        commit = self._git.current_commit()
        if not commit:
            raise ReferenceUnresolvableError(details={"cwd": str(self._git.cwd)})
        return commit
