"""Remote branch inspection and local tracking branch management."""

from collections.abc import Sequence

import structlog

from roster_sync.core.models.sync import BranchSyncReport
from roster_sync.git.runner import GitRunner

logger = structlog.get_logger(__name__)

DEFAULT_FALLBACK_BRANCHES = ("main", "master")

# `git remote show` prints this when the remote does not advertise HEAD
_UNKNOWN_HEAD = "(unknown)"


def list_remote_branches(runner: GitRunner, remote: str = "origin") -> list[str]:
    """List the short names of the real branches under a remote.

    The remote's symbolic HEAD and any aliased refs are excluded.
    """
    output = runner.output(
        "for-each-ref", "--format=%(refname:short)", f"refs/remotes/{remote}"
    )
    if not output:
        return []

    prefix = f"{remote}/"
    branches = []
    for line in output.splitlines():
        ref = line.strip()
        # Newer git abbreviates refs/remotes/<remote>/HEAD to just <remote>
        if not ref or ref in (remote, f"{remote}/HEAD") or " -> " in ref:
            continue
        if not ref.startswith(prefix):
            continue

        branch = ref[len(prefix):]
        if not runner.ref_exists(f"refs/remotes/{remote}/{branch}"):
            continue
        branches.append(branch)

    return branches


def get_upstream(runner: GitRunner, branch: str) -> str | None:
    """Get the configured upstream of a local branch, e.g. ``origin/main``."""
    upstream = runner.output(
        "rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch}@{{upstream}}"
    )
    return upstream or None


def current_branch(runner: GitRunner) -> str | None:
    """Get the current branch name (``HEAD`` when detached)."""
    return runner.output("rev-parse", "--abbrev-ref", "HEAD") or None


def ensure_tracking_branches(runner: GitRunner, remote: str = "origin") -> BranchSyncReport:
    """Ensure every remote branch has a local branch tracking it.

    Existing local branches without an upstream get one; missing local
    branches are created. Both are best-effort: failures are recorded in
    the report and logged, never raised.
    """
    report = BranchSyncReport(remote=remote)
    report.remote_branches = list_remote_branches(runner, remote)

    for branch in report.remote_branches:
        remote_ref = f"{remote}/{branch}"

        if runner.ref_exists(f"refs/heads/{branch}"):
            if get_upstream(runner, branch) is not None:
                continue
            result = runner.run("branch", f"--set-upstream-to={remote_ref}", branch)
            if result.ok:
                report.upstream_set.append(branch)
            else:
                report.failed.append(branch)
                logger.debug("Could not set upstream", branch=branch, error=result.message)
        else:
            result = runner.run("branch", "--track", branch, remote_ref)
            if result.ok:
                report.created.append(branch)
            else:
                report.failed.append(branch)
                logger.debug("Could not create tracking branch", branch=branch, error=result.message)

    logger.debug(
        "Tracking branches ensured",
        remote=remote,
        created=len(report.created),
        upstream_set=len(report.upstream_set),
        failed=len(report.failed),
    )
    return report


def _advertised_head(runner: GitRunner, remote: str) -> str:
    """Ask the remote which branch its HEAD points at."""
    output = runner.output("remote", "show", remote, env={"LC_ALL": "C"})
    if not output:
        return ""
    for line in output.splitlines():
        if "HEAD branch" not in line:
            continue
        _, _, name = line.partition(": ")
        name = name.strip()
        return "" if name == _UNKNOWN_HEAD else name
    return ""


def resolve_default_branch(
    runner: GitRunner,
    remote: str = "origin",
    fallbacks: Sequence[str] = DEFAULT_FALLBACK_BRANCHES,
) -> str:
    """Resolve the default branch of a remote.

    Tries, in order: the HEAD branch the remote advertises, the target of
    the local ``refs/remotes/<remote>/HEAD`` symref, then the first of
    ``fallbacks`` that exists as a remote branch. Returns an empty string
    if nothing resolves.
    """
    advertised = _advertised_head(runner, remote)
    if advertised:
        return advertised

    target = runner.output("symbolic-ref", "-q", f"refs/remotes/{remote}/HEAD")
    if target:
        return target.removeprefix(f"refs/remotes/{remote}/")

    for branch in fallbacks:
        if runner.ref_exists(f"refs/remotes/{remote}/{branch}"):
            return branch

    return ""
