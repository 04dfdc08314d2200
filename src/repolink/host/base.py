"""Base class for editor hosts."""

from abc import ABC, abstractmethod


class EditorHost(ABC):
    """What a link pipeline needs from the environment it runs in."""

    @abstractmethod
    def notify_error(self, message: str) -> None:
        """Show a transient error notification."""
        ...

    @abstractmethod
    def notify_info(self, message: str) -> None:
        """Show a transient informational notification."""
        ...

    @abstractmethod
    def open_url(self, url: str) -> None:
        """Open a URL in an external viewer, without waiting for it."""
        ...
