"""CLI for roster-sync."""

import sys

import click
import structlog

from roster_sync.config.logging import configure_logging
from roster_sync.config.settings import get_settings
from roster_sync.core.exceptions import RosterSyncError
from roster_sync.core.models.roster import RosterWarning

logger = structlog.get_logger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """roster-sync: clone or update every repository listed in a roster."""
    try:
        settings = get_settings()
    except RosterSyncError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.argument("input_file", required=False)
@click.option("--dest", "-d", help="Directory holding the working copies (default: .)")
@click.option("--remote", "-r", help="Remote name (default: origin)")
@click.option(
    "--keep-going",
    is_flag=True,
    help="Continue with the next repository when a git command fails",
)
def sync(
    input_file: str | None,
    dest: str | None,
    remote: str | None,
    keep_going: bool,
) -> None:
    """Clone or update every repository in INPUT_FILE (default: clone.txt).

    Each repository is placed in a directory named after the identifier
    found in its URL. Every remote branch gets a local tracking branch.
    """
    from roster_sync.roster.parser import read_roster
    from roster_sync.services.sync import RepositorySyncService

    overrides = {}
    if dest is not None:
        overrides["dest_dir"] = dest
    if remote is not None:
        overrides["remote_name"] = remote
    if keep_going:
        overrides["fail_fast"] = False
    settings = get_settings().model_copy(update=overrides)

    roster_path = input_file or settings.input_file
    service = RepositorySyncService.from_settings(settings, reporter=click.echo)

    try:
        lines = read_roster(roster_path)
        summary = service.sync_roster(lines)
    except RosterSyncError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(
        f"Done: {summary.cloned} cloned, {summary.updated} updated, "
        f"{summary.skipped} failed, {len(summary.warnings)} warnings"
    )
    if summary.skipped:
        sys.exit(1)


@cli.command()
@click.argument("input_file", required=False)
def parse(input_file: str | None) -> None:
    """Show the directory each roster line maps to, without running git."""
    from roster_sync.roster.parser import parse_roster, read_roster

    settings = get_settings()
    roster_path = input_file or settings.input_file

    try:
        lines = read_roster(roster_path)
    except RosterSyncError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    for item in parse_roster(lines, settings.identifier_pattern):
        if isinstance(item, RosterWarning):
            click.echo(f"  line {item.line_number:>4}: WARNING: {item.message}")
        else:
            click.echo(f"  line {item.line_number:>4}: {item.target_dir}  <-  {item.url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
