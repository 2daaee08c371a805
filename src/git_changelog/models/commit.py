"""Commit models for changelog generation."""

from typing import NamedTuple, Optional

from pydantic import BaseModel


class RawCommit(NamedTuple):
    """The five delimited fields of one `git log` line."""

    date: str
    ref_names: str
    hash: str
    subject: str
    parents: str


class CommitRecord(BaseModel):
    """Represents a single commit as it flows through the changelog pipeline."""

    date: str
    tag: Optional[str] = None
    hash: str
    subject: str  # Markup-escaped
    merge_commit_start: bool = False
    merge_commit_end: bool = False
    indent: Optional[bool] = None  # Set by the indentation tagger

    @property
    def is_merge_boundary(self) -> bool:
        """Check if this commit opens or closes a merge span."""
        return self.merge_commit_start or self.merge_commit_end
