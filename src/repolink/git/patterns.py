"""Named pattern matchers for remote URLs, blame output and commit messages.

Each matcher is a module-level function or constant so that the precedence
rules can be read and tested on their own.
"""

import re
from typing import NamedTuple

import structlog

from repolink.core.models.repository import HostingRepository

logger = structlog.get_logger(__name__)

# <scheme>://[user@]host[:port]/org/repo[.git][/]  or  user@host:org/repo[.git]
_REPOSITORY_URL = re.compile(
    r"""
    ^(?:(?:https?|ssh|git)://)?
    (?:[^@/\s]+@)?
    (?P<host>[^/:@\s]+)
    (?::\d+)?
    [:/]
    (?P<org>[^/\s]+)/
    (?P<repo>[^/\s]+?)
    (?:\.git)?/?$
    """,
    re.VERBOSE,
)

_COMMIT_ID = re.compile(r"^[0-9a-f]{40}$")
_UNCOMMITTED = "0" * 40


def parse_repository_url(url: str) -> HostingRepository | None:
    """Split a repository URL into host, org and repo.

    git@github.com:acme/widgets.git -> github.com / acme / widgets
    """
    match = _REPOSITORY_URL.match(url.strip())
    if not match:
        return None
    return HostingRepository(**match.groupdict())


def match_remote_url(url: str, host_marker: str) -> HostingRepository | None:
    """Recognize a remote URL as belonging to the hosting service."""
    if host_marker not in url:
        return None
    return parse_repository_url(url)


def normalize_remote_url(url: str, host_marker: str) -> str | None:
    """Normalize a git remote URL to ``https://<host>/<org>/<repo>``.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - ssh://git@github.com/org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    """
    repository = match_remote_url(url, host_marker)
    return repository.url if repository else None


def parse_blame_commit(output: str) -> str | None:
    """Get the commit id from ``git blame --porcelain`` output."""
    first_line = output.split("\n", 1)[0]
    token = first_line.split(" ", 1)[0]
    if not _COMMIT_ID.match(token) or token == _UNCOMMITTED:
        return None
    return token


class ChangeRequestPattern(NamedTuple):
    name: str
    regex: re.Pattern[str]


# Order is precedence: the first pattern that matches wins.
CHANGE_REQUEST_PATTERNS: tuple[ChangeRequestPattern, ...] = (
    ChangeRequestPattern(
        "merge-pull-request",
        re.compile(r"merge pull request #(\d+)", re.IGNORECASE),
    ),
    ChangeRequestPattern(
        "closing-keyword",
        re.compile(
            r"\b(?:fixes|fix|closes|close|resolves|resolve|refs|ref)\s+#(\d+)",
            re.IGNORECASE,
        ),
    ),
    # Most permissive; can also hit plain issue numbers.
    ChangeRequestPattern("bare-reference", re.compile(r"#(\d+)")),
)


def extract_change_request_number(message: str) -> int | None:
    """Find the pull request number referenced by a commit message."""
    for pattern in CHANGE_REQUEST_PATTERNS:
        match = pattern.regex.search(message)
        if match:
            number = int(match.group(1))
            logger.debug("Change request pattern matched", pattern=pattern.name, number=number)
            return number
    return None
