"""Git integration module for roster-sync."""

from roster_sync.git.branches import (
    current_branch,
    ensure_tracking_branches,
    get_upstream,
    list_remote_branches,
    resolve_default_branch,
)
from roster_sync.git.runner import GitRunner

__all__ = [
    "GitRunner",
    "current_branch",
    "ensure_tracking_branches",
    "get_upstream",
    "list_remote_branches",
    "resolve_default_branch",
]
