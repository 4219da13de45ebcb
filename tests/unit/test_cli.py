"""Tests for the command line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from roster_sync.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestSyncCommand:
    """Tests for the sync command."""

    def test_sync_default_roster(
        self,
        runner: CliRunner,
        remote_repo: Path,
        workspace: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(workspace)
        Path("clone.txt").write_text(
            f"{remote_repo}\n\n# comment\nhttps://git.example.com/org/nostudentid.git",
            encoding="utf-8",
        )

        result = runner.invoke(cli, ["sync"])

        assert result.exit_code == 0, result.output
        assert f"New: {remote_repo} -> s24001" in result.output
        assert "No identifier found" in result.output
        assert "Done: 1 cloned, 0 updated, 0 failed, 1 warnings" in result.output
        assert (workspace / "s24001" / ".git").is_dir()

    def test_sync_with_dest(
        self, runner: CliRunner, remote_repo: Path, tmp_path: Path
    ) -> None:
        roster = tmp_path / "roster.txt"
        roster.write_text(f"{remote_repo}\n", encoding="utf-8")
        dest = tmp_path / "out"

        result = runner.invoke(cli, ["sync", str(roster), "--dest", str(dest)])

        assert result.exit_code == 0, result.output
        assert (dest / "s24001" / ".git").is_dir()

    def test_missing_roster(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["sync"])
        assert result.exit_code == 1
        assert "Cannot read roster file" in result.output

    def test_git_failure_exits(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        Path("clone.txt").write_text(f"{tmp_path / 's99999-missing.git'}\n", encoding="utf-8")

        result = runner.invoke(cli, ["sync"])

        assert result.exit_code == 1
        assert "Error: git clone" in result.output

    def test_keep_going_reports_failures(
        self,
        runner: CliRunner,
        remote_repo: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        Path("clone.txt").write_text(
            f"{tmp_path / 's99999-missing.git'}\n{remote_repo}\n", encoding="utf-8"
        )

        result = runner.invoke(cli, ["sync", "--keep-going"])

        assert result.exit_code == 1
        assert "Done: 1 cloned, 0 updated, 1 failed, 0 warnings" in result.output


@pytest.mark.unit
class TestParseCommand:
    """Tests for the parse command."""

    def test_parse(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = tmp_path / "clone.txt"
        roster.write_text(
            "https://git.example.com/org/s24001-project.git\n"
            "# comment\n"
            "https://git.example.com/org/nostudentid.git\n",
            encoding="utf-8",
        )

        result = runner.invoke(cli, ["parse", str(roster)])

        assert result.exit_code == 0
        assert "s24001  <-  https://git.example.com/org/s24001-project.git" in result.output
        assert "line    3: WARNING: No identifier found" in result.output
        assert "comment" not in result.output


@pytest.mark.unit
class TestConfiguration:
    """Tests for configuration errors at startup."""

    def test_invalid_env_setting(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ROSTER_SYNC_IDENTIFIER_PATTERN", "(")

        result = runner.invoke(cli, ["sync"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration" in result.output
        assert "identifier_pattern" in result.output
        assert isinstance(result.exception, SystemExit)
