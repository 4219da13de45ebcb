"""Core domain models and exceptions for roster-sync."""

from roster_sync.core.exceptions import (
    ConfigurationError,
    GitCommandError,
    RosterFileError,
    RosterSyncError,
)
from roster_sync.core.models import (
    BranchSyncReport,
    GitOutcome,
    GitResult,
    RepoSyncResult,
    RosterEntry,
    RosterWarning,
    SyncAction,
    SyncSummary,
)

__all__ = [
    # Models
    "GitOutcome",
    "GitResult",
    "RosterEntry",
    "RosterWarning",
    "SyncAction",
    "BranchSyncReport",
    "RepoSyncResult",
    "SyncSummary",
    # Exceptions
    "RosterSyncError",
    "ConfigurationError",
    "RosterFileError",
    "GitCommandError",
]
