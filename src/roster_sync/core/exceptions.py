"""Exception hierarchy for roster-sync."""

from typing import Any


class RosterSyncError(Exception):
    """Base exception for all roster-sync errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RosterSyncError):
    """Invalid or inconsistent configuration."""


class RosterFileError(RosterSyncError):
    """The roster file could not be opened or read."""


class GitCommandError(RosterSyncError):
    """A git command that must succeed exited with an error."""

    def __init__(
        self,
        message: str,
        args: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(
            message,
            details={"args": args or [], "returncode": returncode, "stderr": stderr},
        )
        self.git_args = args or []
        self.returncode = returncode
        self.stderr = stderr
