"""Git command result models."""

from enum import Enum

from pydantic import BaseModel, Field


class GitOutcome(str, Enum):
    """Classified outcome of a single git invocation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


class GitResult(BaseModel):
    """The result of running one git command."""

    args: list[str] = Field(default_factory=list)
    outcome: GitOutcome
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == GitOutcome.SUCCESS

    @property
    def not_found(self) -> bool:
        return self.outcome == GitOutcome.NOT_FOUND

    @property
    def message(self) -> str:
        """A one-line description suitable for logs."""
        if self.ok:
            return "ok"
        detail = self.stderr.strip().splitlines()
        reason = detail[-1] if detail else f"exit code {self.returncode}"
        return f"git {' '.join(self.args)}: {reason}"
