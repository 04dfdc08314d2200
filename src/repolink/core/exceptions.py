"""Exception hierarchy for repolink.

Every error here is user-facing: the command layer turns it into exactly
one notification naming the step that failed.
"""

from typing import Any


class RepoLinkError(Exception):
    """Base error for all repolink failures."""

    default_message = "Unexpected error"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(RepoLinkError):
    """Raised when a configuration value cannot be used."""

    default_message = "Invalid configuration"


class NotTrackedError(RepoLinkError):
    """The file's directory has no git repository root."""

    default_message = "File is not in a git repository"


class ReferenceUnresolvableError(RepoLinkError):
    """Neither the branch nor the commit id could be read."""

    default_message = "Failed to get git reference"


class RepositoryUrlUnresolvableError(RepoLinkError):
    """No configured URL and no remote matching the hosting service."""

    default_message = "Could not determine the GitHub repository URL"


class AttributionUnresolvableError(RepoLinkError):
    """Blame returned no commit for the requested line."""

    default_message = "Could not determine commit for this line"


class ChangeRequestNotFoundError(RepoLinkError):
    """No pull request reference in the commit message."""

    default_message = "Could not find pull request number in commit message"


class MalformedRepositoryUrlError(RepoLinkError):
    """The repository URL does not end in <org>/<repo>."""

    default_message = "Invalid repository URL format"


class MissingLineError(RepoLinkError):
    """A line-anchored command was invoked without a line."""

    default_message = "A line number is required for this command"
