"""Roster file parser.

A roster is a UTF-8 text file with one repository URL per line. Blank
lines and lines whose first non-whitespace character is ``#`` are
ignored. Each remaining line must contain an identifier (by default a
lowercase ``s`` followed by five digits), which names the local
directory the repository is cloned into.
"""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from roster_sync.core.exceptions import RosterFileError
from roster_sync.core.models.roster import RosterEntry, RosterWarning

logger = structlog.get_logger(__name__)

DEFAULT_IDENTIFIER_PATTERN = r"s[0-9]{5}"


def extract_identifier(text: str, pattern: str = DEFAULT_IDENTIFIER_PATTERN) -> str | None:
    """Return the first substring of ``text`` matching ``pattern``."""
    match = re.search(pattern, text)
    return match.group(0) if match else None


def is_ignored(line: str) -> bool:
    """Check if a roster line is blank or a comment."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_roster(
    lines: Iterable[str],
    pattern: str = DEFAULT_IDENTIFIER_PATTERN,
) -> Iterator[RosterEntry | RosterWarning]:
    """Parse roster lines in order.

    Yields a RosterEntry for every line with an identifier and a
    RosterWarning for every other non-ignored line.
    """
    for line_number, line in enumerate(lines, 1):
        if is_ignored(line):
            continue

        url = line.strip()
        identifier = extract_identifier(url, pattern)
        if identifier is None:
            yield RosterWarning(line_number=line_number, url=url)
            continue

        yield RosterEntry(line_number=line_number, url=url, identifier=identifier)


def read_roster(path: str | Path) -> list[str]:
    """Read all lines of a roster file.

    Raises:
        RosterFileError: If the file cannot be opened or decoded.
    """
    roster_path = Path(path)
    try:
        text = roster_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RosterFileError(
            f"Cannot read roster file {roster_path}: {e}",
            details={"path": str(roster_path)},
        ) from e

    lines = text.splitlines()
    logger.debug("Roster loaded", path=str(roster_path), lines=len(lines))
    return lines
