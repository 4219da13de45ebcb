"""Business logic services for roster-sync."""

from roster_sync.services.sync import RepositorySyncService

__all__ = [
    "RepositorySyncService",
]
