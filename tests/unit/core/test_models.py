"""Tests for core domain models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from factories import (
    EditorContextFactory,
    HostingRepositoryFactory,
    LinkConfigFactory,
    RemoteDescriptorFactory,
    ResolvedLinkFactory,
)
from repolink.core.exceptions import NotTrackedError, RepoLinkError
from repolink.core.models.config import LinkConfig, parse_bool
from repolink.core.models.context import EditorContext
from repolink.core.models.git import GitResult
from repolink.core.models.link import LinkKind
from repolink.core.models.repository import LineAttribution, RemoteDescriptor


@pytest.mark.unit
class TestEditorContext:
    """Tests for EditorContext model."""

    def test_defaults(self) -> None:
        context = EditorContext(file_path=Path("/work/widgets/src/index.ts"))
        assert context.line is None
        assert context.end_line is None

    def test_line_is_one_based(self) -> None:
        with pytest.raises(ValidationError):
            EditorContextFactory(line=0)

    def test_end_line_requires_line(self) -> None:
        with pytest.raises(ValidationError):
            EditorContextFactory(end_line=5)

    def test_frozen(self) -> None:
        context = EditorContextFactory(line=3)
        with pytest.raises(ValidationError):
            context.line = 4


@pytest.mark.unit
class TestRepositoryModels:
    """Tests for HostingRepository, RemoteDescriptor and LineAttribution."""

    def test_hosting_repository_url(self) -> None:
        repository = HostingRepositoryFactory(org="acme", repo="widgets")
        assert repository.url == "https://github.com/acme/widgets"

    def test_remote_descriptor_recognized(self) -> None:
        remote = RemoteDescriptorFactory(url="git@github.com:acme/widgets.git")
        assert remote.recognized
        assert remote.normalized_url == "https://github.com/acme/widgets"

    def test_remote_descriptor_unrecognized(self) -> None:
        remote = RemoteDescriptor(name="mirror", url="https://gitlab.com/acme/widgets.git")
        assert not remote.recognized

    def test_line_attribution_requires_full_commit(self) -> None:
        assert LineAttribution(line=1, commit="a" * 40).commit == "a" * 40
        with pytest.raises(ValidationError):
            LineAttribution(line=1, commit="abc123")


@pytest.mark.unit
class TestGitResult:
    """Tests for GitResult model."""

    def test_success_value_is_stripped(self) -> None:
        result = GitResult(args=("rev-parse", "HEAD"), returncode=0, stdout="abc\n")
        assert result.ok
        assert result.value == "abc"

    def test_failure_has_no_value(self) -> None:
        result = GitResult(args=("rev-parse", "HEAD"), returncode=128, stderr="fatal")
        assert not result.ok
        assert result.value is None


@pytest.mark.unit
class TestLinkConfig:
    """Tests for LinkConfig merging."""

    def test_defaults_from_settings(self, settings) -> None:
        config = LinkConfig.from_sources(settings)
        assert config == LinkConfigFactory()

    def test_git_config_over_settings(self, settings) -> None:
        settings.repository_url = "https://github.com/env/repo"
        config = LinkConfig.from_sources(
            settings,
            {"repositoryurl": "https://github.com/git/repo", "usecommithash": "yes"},
        )
        assert config.repository_url == "https://github.com/git/repo"
        assert config.use_commit_hash is True

    def test_overrides_over_git_config(self, settings) -> None:
        config = LinkConfig.from_sources(
            settings,
            {"repositoryurl": "https://github.com/git/repo", "usecommithash": "true"},
            {"repository_url": "https://github.com/cli/repo", "use_commit_hash": False},
        )
        assert config.repository_url == "https://github.com/cli/repo"
        assert config.use_commit_hash is False

    def test_none_overrides_are_ignored(self, settings) -> None:
        config = LinkConfig.from_sources(
            settings,
            {"hostmarker": "github.corp.example"},
            {"repository_url": None, "use_commit_hash": None},
        )
        assert config.host_marker == "github.corp.example"
        assert config.repository_url is None

    def test_invalid_boolean_is_ignored(self, settings) -> None:
        config = LinkConfig.from_sources(settings, {"usecommithash": "sometimes"})
        assert config.use_commit_hash is False

    def test_unknown_keys_are_ignored(self, settings) -> None:
        config = LinkConfig.from_sources(settings, {"colour": "blue"})
        assert config == LinkConfigFactory()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("On", True), ("1", True), ("no", False), ("0", False), ("maybe", None)],
    )
    def test_parse_bool(self, raw: str, expected: bool | None) -> None:
        assert parse_bool(raw) is expected


@pytest.mark.unit
class TestResolvedLink:
    """Tests for ResolvedLink model."""

    def test_create_link(self) -> None:
        link = ResolvedLinkFactory(relative_path="src/index.ts")
        assert link.kind == LinkKind.FILE
        assert link.url == "https://github.com/acme/widgets/blob/main/src/index.ts"
        assert link.change_request is None


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_default_message(self) -> None:
        error = NotTrackedError(details={"file_path": "/tmp/x"})
        assert isinstance(error, RepoLinkError)
        assert error.message == "File is not in a git repository"
        assert str(error) == error.message
        assert error.details == {"file_path": "/tmp/x"}

    def test_custom_message(self) -> None:
        assert RepoLinkError("boom").message == "boom"
