"""CLI for repolink.

Each command takes the editor state (file path and, where needed, the
cursor line) as arguments, so editors can bind it as an external tool.
"""

import sys
from pathlib import Path

import click
import structlog

from repolink.config.logging import configure_logging
from repolink.config.settings import get_settings
from repolink.core.models.context import EditorContext
from repolink.core.models.link import ResolvedLink
from repolink.host.terminal import TerminalHost
from repolink.services.linking import LinkService

logger = structlog.get_logger(__name__)


def _build_service(ctx: click.Context) -> LinkService:
    options = ctx.obj
    host = TerminalHost(launch=not options["no_open"])
    overrides = {
        "repository_url": options["repository_url"],
        "use_commit_hash": options["use_commit_hash"],
    }
    return LinkService(host, settings=get_settings(), overrides=overrides)


def _finish(link: ResolvedLink | None) -> None:
    if link is None:
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--repository-url", "-r", default=None, help="GitHub repository URL (skips remote detection)")
@click.option(
    "--use-commit-hash/--use-branch",
    default=None,
    help="Link to the commit id instead of the current branch",
)
@click.option("--no-open", is_flag=True, help="Print the URL instead of opening a browser")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    repository_url: str | None,
    use_commit_hash: bool | None,
    no_open: bool,
) -> None:
    """repolink: open the current file, line or pull request on GitHub."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)

    ctx.ensure_object(dict)
    ctx.obj.update(
        repository_url=repository_url,
        use_commit_hash=use_commit_hash,
        no_open=no_open,
    )


@cli.command("file")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_context
def open_file(ctx: click.Context, path: Path) -> None:
    """Open PATH at the current branch (or commit)."""
    service = _build_service(ctx)
    _finish(service.open_file(EditorContext(file_path=path.absolute())))


@cli.command("line")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.option("--end-line", "-e", type=click.IntRange(min=1), default=None, help="Last line of a range")
@click.pass_context
def open_line(ctx: click.Context, path: Path, line: int, end_line: int | None) -> None:
    """Open PATH anchored at LINE (1-based)."""
    service = _build_service(ctx)
    context = EditorContext(file_path=path.absolute(), line=line, end_line=end_line)
    _finish(service.open_file_at_line(context))


@cli.command("repo")
@click.argument("path", type=click.Path(path_type=Path), default=".")
@click.pass_context
def open_repo(ctx: click.Context, path: Path) -> None:
    """Open the repository containing PATH at the current branch."""
    service = _build_service(ctx)
    _finish(service.open_repository(EditorContext(file_path=path.absolute())))


@cli.command("pr")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.pass_context
def open_pr(ctx: click.Context, path: Path, line: int) -> None:
    """Open the pull request that last changed LINE of PATH."""
    service = _build_service(ctx)
    _finish(service.open_pull_request(EditorContext(file_path=path.absolute(), line=line)))


if __name__ == "__main__":
    cli()
