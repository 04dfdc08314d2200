"""Services for repolink."""

from repolink.services.linking import LinkService

__all__ = ["LinkService"]
