"""Roster file parsing."""

from roster_sync.roster.parser import (
    DEFAULT_IDENTIFIER_PATTERN,
    extract_identifier,
    is_ignored,
    parse_roster,
    read_roster,
)

__all__ = [
    "DEFAULT_IDENTIFIER_PATTERN",
    "extract_identifier",
    "is_ignored",
    "parse_roster",
    "read_roster",
]
