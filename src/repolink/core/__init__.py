"""Core domain models and exceptions for repolink."""

from repolink.core.exceptions import (
    AttributionUnresolvableError,
    ChangeRequestNotFoundError,
    ConfigurationError,
    MalformedRepositoryUrlError,
    MissingLineError,
    NotTrackedError,
    ReferenceUnresolvableError,
    RepoLinkError,
    RepositoryUrlUnresolvableError,
)
from repolink.core.models import (
    EditorContext,
    GitResult,
    HostingRepository,
    LineAttribution,
    LinkConfig,
    LinkKind,
    RemoteDescriptor,
    ResolvedLink,
)

__all__ = [
    # Models
    "EditorContext",
    "GitResult",
    "HostingRepository",
    "LineAttribution",
    "LinkConfig",
    "LinkKind",
    "RemoteDescriptor",
    "ResolvedLink",
    # Exceptions
    "RepoLinkError",
    "ConfigurationError",
    "NotTrackedError",
    "ReferenceUnresolvableError",
    "RepositoryUrlUnresolvableError",
    "AttributionUnresolvableError",
    "ChangeRequestNotFoundError",
    "MalformedRepositoryUrlError",
    "MissingLineError",
]
