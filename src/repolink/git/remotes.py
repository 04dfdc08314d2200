"""Identify which remote is the canonical GitHub repository."""

import structlog

from repolink.core.models.repository import RemoteDescriptor
from repolink.git.client import GitClient
from repolink.git.patterns import normalize_remote_url

logger = structlog.get_logger(__name__)

PREFERRED_REMOTES = ("upstream", "origin")


class RemoteIdentifier:
    """Chooses the hosting repository URL for a checkout.

    Priority, first match wins:

    1. an explicitly configured repository URL, returned verbatim
    2. the ``upstream`` remote, if it is a GitHub URL
    3. the ``origin`` remote, if it is a GitHub URL
    4. the first GitHub URL among all remotes, in listed order
    """

    def __init__(self, git: GitClient, host_marker: str = "github.com") -> None:
        self._git = git
        self._host_marker = host_marker

    def describe(self, name: str) -> RemoteDescriptor | None:
        url = self._git.remote_url(name)
        if url is None:
            return None
        return RemoteDescriptor(
            name=name,
            url=url,
            normalized_url=normalize_remote_url(url, self._host_marker),
        )

    def identify(self, configured_url: str | None = None) -> str | None:
        """Get the canonical repository URL, or None if nothing matches."""
        if configured_url:
            logger.debug("Using configured repository URL", url=configured_url)
            return configured_url

        for name in PREFERRED_REMOTES:
            remote = self.describe(name)
            if remote is not None and remote.recognized:
                logger.debug("Using preferred remote", remote=name, url=remote.normalized_url)
                return remote.normalized_url

        for name in self._git.list_remotes():
            if name in PREFERRED_REMOTES:
                continue
            remote = self.describe(name)
            if remote is not None and remote.recognized:
                logger.debug("Using first matching remote", remote=name, url=remote.normalized_url)
                return remote.normalized_url

        logger.debug("No remote matches hosting service", host_marker=self._host_marker)
        return None
