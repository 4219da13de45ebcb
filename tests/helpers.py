"""Shared helpers for building git repositories in tests."""

import subprocess
from pathlib import Path


def git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command for test setup and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def commit_file(repo_path: Path, name: str, content: str, message: str) -> None:
    (repo_path / name).write_text(content)
    git("add", name, cwd=repo_path)
    git("commit", "-m", message, cwd=repo_path)


def local_branches(repo_path: Path) -> set[str]:
    output = git("for-each-ref", "--format=%(refname:short)", "refs/heads", cwd=repo_path)
    return set(output.splitlines())
