"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from fakes import FakeGitClient, FakeGitRepo, RecordingHost, git
from repolink.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep the environment and cached settings out of every test."""
    for name in (
        "REPOLINK_REPOSITORY_URL",
        "REPOLINK_USE_COMMIT_HASH",
        "REPOLINK_HOST_MARKER",
        "REPOLINK_LOG_LEVEL",
        "REPOLINK_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def fake_repo(tmp_path: Path) -> FakeGitRepo:
    """An empty fake checkout rooted at <tmp>/widgets on branch main."""
    return FakeGitRepo(tmp_path / "widgets")


@pytest.fixture
def git_factory(fake_repo: FakeGitRepo):
    return lambda cwd: FakeGitClient(Path(cwd), fake_repo)


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository on branch main with one commit."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    # Init repo
    git(repo_path, "init")
    git(repo_path, "config", "user.email", "test@test.com")
    git(repo_path, "config", "user.name", "Test")
    git(repo_path, "config", "commit.gpgsign", "false")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")

    # Create files
    (repo_path / "src").mkdir()
    (repo_path / "src" / "index.ts").write_text("export const a = 1;\nexport const b = 2;\n")
    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")

    # Commit
    git(repo_path, "add", ".")
    git(repo_path, "commit", "-m", "Initial commit")

    return repo_path
