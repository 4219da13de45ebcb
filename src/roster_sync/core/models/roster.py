"""Roster file models."""

from pydantic import BaseModel


class RosterEntry(BaseModel):
    """A roster line that yielded an identifier."""

    line_number: int
    url: str
    identifier: str

    @property
    def target_dir(self) -> str:
        """Local directory name for the working copy."""
        return self.identifier


class RosterWarning(BaseModel):
    """A roster line that was skipped because no identifier was found."""

    line_number: int
    url: str

    @property
    def message(self) -> str:
        return f"No identifier found: {self.url}"
