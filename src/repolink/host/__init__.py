"""Editor host collaborators."""

from repolink.host.base import EditorHost
from repolink.host.terminal import TerminalHost

__all__ = ["EditorHost", "TerminalHost"]
