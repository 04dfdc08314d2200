"""Git integration module for repolink."""

from repolink.git.client import GitClient
from repolink.git.locator import RepositoryLocator, relative_path
from repolink.git.refs import ReferenceResolver
from repolink.git.remotes import RemoteIdentifier
from repolink.git.url_builder import URLBuilder

__all__ = [
    "GitClient",
    "ReferenceResolver",
    "RemoteIdentifier",
    "RepositoryLocator",
    "URLBuilder",
    "relative_path",
]
