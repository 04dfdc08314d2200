"""Link service: the command pipelines behind each editor command."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from repolink.config.settings import Settings, get_settings
from repolink.core.exceptions import (
    AttributionUnresolvableError,
    ChangeRequestNotFoundError,
    ConfigurationError,
    MissingLineError,
    NotTrackedError,
    RepoLinkError,
    RepositoryUrlUnresolvableError,
)
from repolink.core.models.config import LinkConfig
from repolink.core.models.context import EditorContext
from repolink.core.models.link import LinkKind, ResolvedLink
from repolink.core.models.repository import LineAttribution
from repolink.git.client import GitClient
from repolink.git.locator import RepositoryLocator, relative_path
from repolink.git.patterns import extract_change_request_number
from repolink.git.refs import ReferenceResolver
from repolink.git.remotes import RemoteIdentifier
from repolink.git.url_builder import URLBuilder
from repolink.host.base import EditorHost

logger = structlog.get_logger(__name__)

CONFIG_NAMESPACE = "repolink"


class LinkService:
    """Resolves and opens GitHub links for the active editor state.

    Every call runs its own pipeline from scratch: the repository root,
    configuration snapshot, reference and remote are looked up again and
    nothing is kept between calls.

    The ``resolve_*`` methods raise ``RepoLinkError`` subclasses. The
    ``open_*`` methods are the command handlers: they never raise and
    report each outcome through exactly one host notification.
    """

    def __init__(
        self,
        host: EditorHost,
        settings: Settings | None = None,
        git_factory: Callable[[Path], GitClient] = GitClient,
        overrides: dict[str, Any] | None = None,
    ) -> None:
        self._host = host
        self._settings = settings or get_settings()
        self._git_factory = git_factory
        self._overrides = overrides or {}
        self._builder = URLBuilder()

    # --- pipelines ---

    def resolve_file_link(self, context: EditorContext, with_line: bool = False) -> ResolvedLink:
        """Build the /blob/ URL for the context's file, optionally at its line."""
        if with_line and context.line is None:
            raise MissingLineError()

        root, git, config = self._checkout(context)
        ref = ReferenceResolver(git).resolve(config.use_commit_hash)
        repository_url = self._repository_url(git, config)
        path = relative_path(context.file_path, root)

        url = self._builder.file_url(
            repository_url,
            ref,
            path,
            line=context.line if with_line else None,
            end_line=context.end_line if with_line else None,
        )
        logger.info("Resolved file link", url=url, ref=ref, relative_path=path)
        return ResolvedLink(kind=LinkKind.FILE, url=url, ref=ref, relative_path=path)

    def resolve_repository_link(self, context: EditorContext) -> ResolvedLink:
        """Build the /tree/ URL for the repository containing the context's file."""
        _, git, config = self._checkout(context)
        ref = ReferenceResolver(git).resolve(config.use_commit_hash)
        repository_url = self._repository_url(git, config)

        url = self._builder.tree_url(repository_url, ref)
        logger.info("Resolved repository link", url=url, ref=ref)
        return ResolvedLink(kind=LinkKind.REPOSITORY, url=url, ref=ref)

    def resolve_pull_request_link(self, context: EditorContext) -> ResolvedLink:
        """Find the pull request that introduced the context's line.

        Linear pipeline, aborting at the first step that fails:
        line -> blame -> commit message -> PR number -> org/repo -> URL.
        """
        if context.line is None:
            raise MissingLineError()

        root, git, config = self._checkout(context)
        repository_url = self._repository_url(git, config)
        path = relative_path(context.file_path, root)

        commit = git.blame_line(path, context.line)
        if commit is None:
            raise AttributionUnresolvableError(
                details={"relative_path": path, "line": context.line},
            )
        attribution = LineAttribution(line=context.line, commit=commit)
        logger.debug("Line attributed", line=attribution.line, commit=attribution.commit)

        message = git.commit_message(attribution.commit)
        if message is None:
            raise ChangeRequestNotFoundError(
                f"Could not read commit message for {attribution.commit[:8]}",
                details={"commit": attribution.commit},
            )

        number = extract_change_request_number(message)
        if number is None:
            raise ChangeRequestNotFoundError(details={"commit": attribution.commit})

        url = self._builder.pull_request_url(repository_url, number)
        logger.info("Resolved pull request link", url=url, commit=attribution.commit)
        return ResolvedLink(
            kind=LinkKind.PULL_REQUEST,
            url=url,
            ref=attribution.commit,
            relative_path=path,
            change_request=number,
        )

    # --- command handlers ---

    def open_file(self, context: EditorContext) -> ResolvedLink | None:
        """Open the current file at the resolved reference."""
        return self._run(
            "open_file",
            lambda: self.resolve_file_link(context),
            lambda link: f"Opened in GitHub: {link.relative_path}",
        )

    def open_file_at_line(self, context: EditorContext) -> ResolvedLink | None:
        """Open the current file anchored at the cursor line."""
        return self._run(
            "open_file_at_line",
            lambda: self.resolve_file_link(context, with_line=True),
            lambda link: f"Opened in GitHub: {link.relative_path}",
        )

    def open_repository(self, context: EditorContext) -> ResolvedLink | None:
        """Open the repository root at the resolved reference."""
        return self._run(
            "open_repository",
            lambda: self.resolve_repository_link(context),
            lambda link: "Opened repository in GitHub",
        )

    def open_pull_request(self, context: EditorContext) -> ResolvedLink | None:
        """Open the pull request that last touched the cursor line."""
        return self._run(
            "open_pull_request",
            lambda: self.resolve_pull_request_link(context),
            lambda link: f"Opened pull request #{link.change_request} in GitHub",
        )

    # --- helpers ---

    def _run(
        self,
        command: str,
        resolve: Callable[[], ResolvedLink],
        describe: Callable[[ResolvedLink], str],
    ) -> ResolvedLink | None:
        try:
            link = resolve()
            self._host.open_url(link.url)
        except RepoLinkError as e:
            logger.warning("Command failed", command=command, error=e.message, details=e.details)
            self._host.notify_error(e.message)
            return None
        except Exception as e:
            logger.exception("Command failed unexpectedly", command=command)
            self._host.notify_error(str(e) or type(e).__name__)
            return None

        self._host.notify_info(describe(link))
        return link

    def _checkout(self, context: EditorContext) -> tuple[Path, GitClient, LinkConfig]:
        """Locate the repository and take the configuration snapshot."""
        root = RepositoryLocator(self._git_factory).locate(context.file_path)
        if root is None:
            raise NotTrackedError(details={"file_path": str(context.file_path)})

        git = self._git_factory(root)
        try:
            config = LinkConfig.from_sources(
                self._settings,
                git.read_config(CONFIG_NAMESPACE),
                self._overrides,
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}",
                details={"root": str(root)},
            ) from e
        return root, git, config

    def _repository_url(self, git: GitClient, config: LinkConfig) -> str:
        url = RemoteIdentifier(git, config.host_marker).identify(config.repository_url)
        if url is None:
            raise RepositoryUrlUnresolvableError(details={"host_marker": config.host_marker})
        return url
