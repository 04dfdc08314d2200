"""Host implementation for terminal and editor shell-command use."""

import click
import structlog

from repolink.host.base import EditorHost

logger = structlog.get_logger(__name__)


class TerminalHost(EditorHost):
    """Opens URLs with the system browser and reports to stderr.

    With ``launch=False`` the URL is printed to stdout instead, which lets
    editors that shell out to ``repolink`` pick it up.
    """

    def __init__(self, launch: bool = True) -> None:
        self._launch = launch

    def notify_error(self, message: str) -> None:
        click.echo(f"Error: {message}", err=True)

    def notify_info(self, message: str) -> None:
        click.echo(message, err=True)

    def open_url(self, url: str) -> None:
        if not self._launch:
            click.echo(url)
            return
        status = click.launch(url)
        if status != 0:
            logger.warning("Browser launcher exited with non-zero status", url=url, status=status)
