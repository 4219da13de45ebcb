"""Repository sync service."""

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import structlog

from roster_sync.config.settings import Settings
from roster_sync.core.exceptions import GitCommandError
from roster_sync.core.models.roster import RosterEntry, RosterWarning
from roster_sync.core.models.sync import RepoSyncResult, SyncAction, SyncSummary
from roster_sync.git.branches import (
    DEFAULT_FALLBACK_BRANCHES,
    current_branch,
    ensure_tracking_branches,
    get_upstream,
    resolve_default_branch,
)
from roster_sync.git.runner import GitRunner
from roster_sync.roster.parser import DEFAULT_IDENTIFIER_PATTERN, parse_roster

logger = structlog.get_logger(__name__)

Reporter = Callable[[str], None]


def _silent(message: str) -> None:
    pass


class RepositorySyncService:
    """Clones or updates every repository listed in a roster.

    Entries are processed one at a time, in roster order. Each entry is
    synced into ``<dest_dir>/<identifier>``:

    - existing working copy: refresh the remote URL, fetch with prune,
      ensure tracking branches, fast-forward the current branch if its
      upstream exists
    - otherwise: clone, fetch with prune, ensure tracking branches and
      check out the remote's default branch

    Human-readable status lines are passed to ``reporter``.
    """

    def __init__(
        self,
        dest_dir: str | Path = ".",
        remote: str = "origin",
        identifier_pattern: str = DEFAULT_IDENTIFIER_PATTERN,
        fallback_branches: Sequence[str] = DEFAULT_FALLBACK_BRANCHES,
        fail_fast: bool = True,
        reporter: Reporter | None = None,
        runner_factory: Callable[[Path], GitRunner] = GitRunner,
    ) -> None:
        self._dest_dir = Path(dest_dir)
        self._remote = remote
        self._pattern = identifier_pattern
        self._fallbacks = tuple(fallback_branches)
        self._fail_fast = fail_fast
        self._report = reporter or _silent
        self._runner_factory = runner_factory

    @classmethod
    def from_settings(
        cls, settings: Settings, reporter: Reporter | None = None
    ) -> "RepositorySyncService":
        return cls(
            dest_dir=settings.dest_path,
            remote=settings.remote_name,
            identifier_pattern=settings.identifier_pattern,
            fallback_branches=settings.fallback_branches,
            fail_fast=settings.fail_fast,
            reporter=reporter,
        )

    def target_path(self, entry: RosterEntry) -> Path:
        return self._dest_dir / entry.target_dir

    def sync_roster(self, lines: Iterable[str]) -> SyncSummary:
        """Sync every entry of a roster.

        Raises:
            GitCommandError: If a required git command fails and fail_fast is set.
        """
        summary = SyncSummary()
        seen: dict[str, str] = {}

        for item in parse_roster(lines, self._pattern):
            if isinstance(item, RosterWarning):
                logger.warning("No identifier found", line=item.line_number, url=item.url)
                summary.warnings.append(item)
                self._report(f"WARNING: {item.message}")
                self._report("")
                continue

            previous_url = seen.get(item.identifier)
            if previous_url is not None and previous_url != item.url:
                # Both URLs map to the same directory; the later one wins.
                logger.warning(
                    "Identifier collision",
                    identifier=item.identifier,
                    previous_url=previous_url,
                    url=item.url,
                )
                if item.identifier not in summary.duplicates:
                    summary.duplicates.append(item.identifier)
                self._report(
                    f"WARNING: {item.identifier} is also used by {previous_url}; "
                    f"{item.url} will reuse the same directory"
                )
            seen[item.identifier] = item.url

            try:
                result = self.sync_entry(item)
            except GitCommandError as e:
                logger.error(
                    "Repository sync failed",
                    identifier=item.identifier,
                    url=item.url,
                    error=e.message,
                )
                if self._fail_fast:
                    raise
                self._report(f"ERROR: {e.message}")
                result = RepoSyncResult(
                    entry=item,
                    action=SyncAction.SKIPPED,
                    target_path=str(self.target_path(item)),
                    error=e.message,
                )

            summary.results.append(result)
            self._report("")

        logger.info(
            "Roster sync completed",
            cloned=summary.cloned,
            updated=summary.updated,
            skipped=summary.skipped,
            warnings=len(summary.warnings),
        )
        return summary

    def sync_entry(self, entry: RosterEntry) -> RepoSyncResult:
        """Clone or update a single roster entry."""
        target = self.target_path(entry)
        if (target / ".git").is_dir():
            return self.update_existing(entry)
        return self.create_new(entry)

    def update_existing(self, entry: RosterEntry) -> RepoSyncResult:
        """Refresh an existing working copy from its remote."""
        target = self.target_path(entry)
        self._report(f"Existing: {entry.target_dir} -> updating and creating all branches")
        log = logger.bind(identifier=entry.identifier, path=str(target))

        runner = self._runner_factory(target)
        runner.check("remote", "set-url", "--", self._remote, entry.url)
        runner.check("fetch", "--all", "--prune")
        branches = ensure_tracking_branches(runner, self._remote)

        result = RepoSyncResult(
            entry=entry,
            action=SyncAction.UPDATED,
            target_path=str(target),
            branches=branches,
        )

        branch = current_branch(runner)
        result.current_branch = branch
        upstream = get_upstream(runner, branch) if branch else None

        if upstream and runner.ref_exists(f"refs/remotes/{upstream}"):
            pull = runner.run("pull", "--ff-only")
            result.pulled = pull.ok
            if not pull.ok:
                log.warning("Fast-forward pull failed", branch=branch, error=pull.message)
        else:
            result.pull_skipped_reason = f"current branch '{branch}' has no valid upstream"
            self._report(f"INFO: {result.pull_skipped_reason}; skipped pull")

        log.info(
            "Repository updated",
            branch=branch,
            pulled=result.pulled,
            created=len(branches.created),
        )
        return result

    def create_new(self, entry: RosterEntry) -> RepoSyncResult:
        """Clone a repository and check out its default branch."""
        target = self.target_path(entry)
        self._report(f"New: {entry.url} -> {entry.target_dir}")
        log = logger.bind(identifier=entry.identifier, path=str(target))

        self._dest_dir.mkdir(parents=True, exist_ok=True)
        self._runner_factory(self._dest_dir).check("clone", "--", entry.url, entry.target_dir)

        runner = self._runner_factory(target)
        runner.check("fetch", "--all", "--prune")
        branches = ensure_tracking_branches(runner, self._remote)

        result = RepoSyncResult(
            entry=entry,
            action=SyncAction.CLONED,
            target_path=str(target),
            branches=branches,
        )

        default_branch = resolve_default_branch(runner, self._remote, self._fallbacks)
        result.default_branch = default_branch or None
        if default_branch:
            checkout = runner.run("checkout", default_branch)
            result.checked_out = checkout.ok
            if not checkout.ok:
                log.warning("Checkout failed", branch=default_branch, error=checkout.message)
        else:
            log.info("Default branch not resolvable; keeping clone's branch")

        result.current_branch = current_branch(runner)
        log.info(
            "Repository cloned",
            default_branch=default_branch or None,
            branch=result.current_branch,
            created=len(branches.created),
        )
        return result
