"""Domain models for repolink."""

from repolink.core.models.config import LinkConfig
from repolink.core.models.context import EditorContext
from repolink.core.models.git import GitResult
from repolink.core.models.link import LinkKind, ResolvedLink
from repolink.core.models.repository import (
    HostingRepository,
    LineAttribution,
    RemoteDescriptor,
)

__all__ = [
    "EditorContext",
    "GitResult",
    "HostingRepository",
    "LineAttribution",
    "LinkConfig",
    "LinkKind",
    "RemoteDescriptor",
    "ResolvedLink",
]
