"""Pytest configuration and fixtures."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
import structlog

from helpers import commit_file, git
from roster_sync.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_state():
    """Drop cached settings and logging handlers between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        # basicConfig handlers may point at a closed CliRunner stream
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def seed_repo(tmp_path: Path) -> Path:
    """A non-bare repository with branches main and feature-a."""
    repo_path = tmp_path / "seed"
    repo_path.mkdir()

    git("init", cwd=repo_path)
    git("symbolic-ref", "HEAD", "refs/heads/main", cwd=repo_path)
    git("config", "user.email", "test@test.com", cwd=repo_path)
    git("config", "user.name", "Test", cwd=repo_path)

    commit_file(repo_path, "README.md", "# Assignment\n", "Initial commit")
    git("checkout", "-b", "feature-a", cwd=repo_path)
    commit_file(repo_path, "feature.txt", "feature\n", "Add feature")
    git("checkout", "main", cwd=repo_path)

    return repo_path


@pytest.fixture
def make_remote(tmp_path: Path, seed_repo: Path) -> Callable[..., Path]:
    """Build bare remotes under tmp_path/remotes from the seed repository."""

    def _make(
        name: str = "s24001-project.git",
        branches: Sequence[str] = ("main", "feature-a"),
        head: str = "main",
    ) -> Path:
        remote_path = tmp_path / "remotes" / name
        remote_path.mkdir(parents=True)
        git("init", "--bare", cwd=remote_path)
        git("symbolic-ref", "HEAD", f"refs/heads/{head}", cwd=remote_path)
        git("push", str(remote_path), *branches, cwd=seed_repo)
        return remote_path

    return _make


@pytest.fixture
def remote_repo(make_remote: Callable[..., Path]) -> Path:
    """A bare remote named after identifier s24001, HEAD on main."""
    return make_remote()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory that receives the working copies."""
    path = tmp_path / "work"
    path.mkdir()
    return path
