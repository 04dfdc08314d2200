"""Tests for the terminal host."""

import pytest

from repolink.host import terminal
from repolink.host.terminal import TerminalHost


@pytest.mark.unit
class TestTerminalHost:
    """Tests for TerminalHost."""

    def test_print_instead_of_launch(self, capsys: pytest.CaptureFixture[str]) -> None:
        TerminalHost(launch=False).open_url("https://github.com/acme/widgets")
        captured = capsys.readouterr()
        assert captured.out == "https://github.com/acme/widgets\n"

    def test_launch(self, monkeypatch: pytest.MonkeyPatch) -> None:
        launched: list[str] = []
        monkeypatch.setattr(terminal.click, "launch", lambda url: launched.append(url) or 0)
        TerminalHost().open_url("https://github.com/acme/widgets")
        assert launched == ["https://github.com/acme/widgets"]

    def test_notifications_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        host = TerminalHost(launch=False)
        host.notify_error("File is not in a git repository")
        host.notify_info("Opened repository in GitHub")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: File is not in a git repository\nOpened repository in GitHub\n"
