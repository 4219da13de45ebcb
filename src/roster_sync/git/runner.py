"""Git command runner using subprocess."""

import os
import subprocess
from pathlib import Path

import structlog

from roster_sync.core.exceptions import GitCommandError
from roster_sync.core.models.git import GitOutcome, GitResult

logger = structlog.get_logger(__name__)


def _is_probe(args: tuple[str, ...]) -> bool:
    """Check if a non-zero exit of this command means "absent" rather than an error."""
    if not args:
        return False
    if args[0] == "show-ref" and "--verify" in args:
        return True
    if args[0] == "symbolic-ref" and "-q" in args:
        return True
    if args[0] == "rev-parse" and any(arg.endswith("@{upstream}") for arg in args):
        return True
    return False


class GitRunner:
    """Runs git commands in a working directory.

    Uses subprocess + git CLI directly (no gitpython dependency).
    ``run`` always returns a GitResult; ``check`` raises GitCommandError
    for anything but success.
    """

    def __init__(self, cwd: str | Path | None = None, executable: str = "git") -> None:
        self._cwd = Path(cwd) if cwd is not None else None
        self._executable = executable

    def run(self, *args: str, env: dict[str, str] | None = None) -> GitResult:
        """Run a git command and classify its outcome.

        ``env`` entries are layered over the current process environment.
        """
        cmd = [self._executable, *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self._cwd,
                env={**os.environ, **env} if env else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            logger.debug("git could not be started", args=list(args), error=str(e))
            return GitResult(args=list(args), outcome=GitOutcome.FAILURE, stderr=str(e))

        if result.returncode == 0:
            outcome = GitOutcome.SUCCESS
        elif _is_probe(args):
            outcome = GitOutcome.NOT_FOUND
        else:
            outcome = GitOutcome.FAILURE

        git_result = GitResult(
            args=list(args),
            outcome=outcome,
            returncode=result.returncode,
            stdout=result.stdout.strip(),
            stderr=result.stderr.strip(),
        )
        if outcome == GitOutcome.FAILURE:
            logger.debug("git command failed", args=list(args), returncode=result.returncode)
        return git_result

    def check(self, *args: str) -> GitResult:
        """Run a git command that must succeed.

        Raises:
            GitCommandError: If the command does not exit successfully.
        """
        result = self.run(*args)
        if not result.ok:
            raise GitCommandError(
                result.message,
                args=result.args,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def output(self, *args: str, env: dict[str, str] | None = None) -> str | None:
        """Return stdout of a successful command, or None."""
        result = self.run(*args, env=env)
        return result.stdout if result.ok else None

    def ref_exists(self, ref: str) -> bool:
        """Check if a fully qualified ref exists."""
        return self.run("show-ref", "--verify", "--quiet", ref).ok
