"""Sync result models."""

from enum import Enum

from pydantic import BaseModel, Field

from roster_sync.core.models.roster import RosterEntry, RosterWarning


class SyncAction(str, Enum):
    """What the driver did with a roster entry."""

    CLONED = "cloned"
    UPDATED = "updated"
    SKIPPED = "skipped"


class BranchSyncReport(BaseModel):
    """Outcome of ensuring local tracking branches for one remote."""

    remote: str = "origin"
    remote_branches: list[str] = Field(default_factory=list)
    created: list[str] = Field(default_factory=list)
    upstream_set: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)


class RepoSyncResult(BaseModel):
    """Outcome of syncing one roster entry."""

    entry: RosterEntry
    action: SyncAction
    target_path: str
    branches: BranchSyncReport | None = None

    # Fresh clones
    default_branch: str | None = None
    checked_out: bool = False

    # Existing working copies
    current_branch: str | None = None
    pulled: bool = False
    pull_skipped_reason: str | None = None

    error: str | None = None


class SyncSummary(BaseModel):
    """Outcome of a whole roster run."""

    results: list[RepoSyncResult] = Field(default_factory=list)
    warnings: list[RosterWarning] = Field(default_factory=list)
    duplicates: list[str] = Field(default_factory=list)

    def _count(self, action: SyncAction) -> int:
        return sum(1 for result in self.results if result.action == action)

    @property
    def cloned(self) -> int:
        return self._count(SyncAction.CLONED)

    @property
    def updated(self) -> int:
        return self._count(SyncAction.UPDATED)

    @property
    def skipped(self) -> int:
        return self._count(SyncAction.SKIPPED)
