"""Read-only git queries using subprocess."""

import subprocess
from pathlib import Path

import structlog

from repolink.core.models.git import GitResult
from repolink.git.patterns import parse_blame_commit

logger = structlog.get_logger(__name__)

# Returned when git itself cannot be started
COMMAND_NOT_RUN = 127


class GitClient:
    """Runs git commands inside one working directory.

    Uses subprocess + git CLI directly (no gitpython dependency). No query
    raises on failure; each returns None, an empty collection, or a failed
    ``GitResult``.
    """

    def __init__(self, cwd: Path | str) -> None:
        self._cwd = Path(cwd)

    @property
    def cwd(self) -> Path:
        return self._cwd

    def run(self, *args: str) -> GitResult:
        """Run a git command and capture its outcome."""
        try:
            proc = subprocess.run(
                ["git", *args],
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            # git missing, or cwd does not exist
            logger.debug("git could not be started", args=args, cwd=str(self._cwd), error=str(e))
            return GitResult(args=args, returncode=COMMAND_NOT_RUN, stderr=str(e))

        result = GitResult(
            args=args,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
        if not result.ok:
            logger.debug(
                "git command failed",
                args=args,
                cwd=str(self._cwd),
                returncode=result.returncode,
                stderr=result.stderr.strip(),
            )
        return result

    def show_toplevel(self) -> Path | None:
        """Get the repository root containing the working directory."""
        value = self.run("rev-parse", "--show-toplevel").value
        return Path(value) if value else None

    def current_branch(self) -> str | None:
        """Get the current branch name, or None when detached."""
        return self.run("branch", "--show-current").value or None

    def current_commit(self) -> str | None:
        """Get the full HEAD commit id."""
        return self.run("rev-parse", "HEAD").value or None

    def remote_url(self, name: str) -> str | None:
        """Get the URL configured for a named remote."""
        return self.run("remote", "get-url", name).value or None

    def list_remotes(self) -> list[str]:
        """List remote names in the order git reports them."""
        value = self.run("remote").value
        return value.splitlines() if value else []

    def blame_line(self, relative_path: str, line: int) -> str | None:
        """Get the commit that last touched a 1-based line of a file."""
        result = self.run("blame", "-L", f"{line},{line}", "--porcelain", "--", relative_path)
        if not result.ok:
            return None
        return parse_blame_commit(result.stdout)

    def commit_message(self, commit: str) -> str | None:
        """Get the full message of a commit."""
        result = self.run("log", "-1", "--format=%B", commit)
        if not result.ok:
            return None
        return result.stdout

    def read_config(self, namespace: str) -> dict[str, str]:
        """Read every git config variable under ``<namespace>.``.

        Keys come back lowercased (as git reports them) without the
        namespace prefix. Later values win when a key is set in several
        config files.
        """
        prefix = f"{namespace}."
        value = self.run("config", "--get-regex", f"^{namespace}\\.").value
        config: dict[str, str] = {}
        for line in (value or "").splitlines():
            key, _, raw = line.partition(" ")
            config[key[len(prefix):].lower()] = raw
        return config
