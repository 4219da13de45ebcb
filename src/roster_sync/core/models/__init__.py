"""Domain models for roster-sync."""

from roster_sync.core.models.git import GitOutcome, GitResult
from roster_sync.core.models.roster import RosterEntry, RosterWarning
from roster_sync.core.models.sync import (
    BranchSyncReport,
    RepoSyncResult,
    SyncAction,
    SyncSummary,
)

__all__ = [
    "GitOutcome",
    "GitResult",
    "RosterEntry",
    "RosterWarning",
    "SyncAction",
    "BranchSyncReport",
    "RepoSyncResult",
    "SyncSummary",
]
