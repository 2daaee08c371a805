"""Parsing and formatting of raw git log records."""

import re
from typing import List, Optional, Tuple

from git_changelog.core.history import FIELD_DELIMITER
from git_changelog.models.commit import CommitRecord, RawCommit

TAG_PATTERN = re.compile(r"tag: v?(\d+\.\d+\.\d+[^,)]*)")
TAG_MARKER = "tag:"
MERGE_SUBJECT_PATTERN = re.compile(r"^Merge branch ('.+?').*")

FIELD_COUNT = len(RawCommit._fields)


def split_commits(log_text: str) -> List[RawCommit]:
    """Split raw git log output into one RawCommit per line.

    A subject that itself contains the field delimiter shifts the later
    fields; only the first five fields are kept.
    """
    log_text = log_text.strip()
    if not log_text:
        return []

    commits = []
    for line in log_text.split("\n"):
        fields = line.split(FIELD_DELIMITER)[:FIELD_COUNT]
        fields += [""] * (FIELD_COUNT - len(fields))
        commits.append(RawCommit(*fields))
    return commits


def extract_tag(ref_names: str) -> Optional[str]:
    """Get the semantic version of the tag in a ref-names annotation, if any."""
    if not ref_names or TAG_MARKER not in ref_names:
        return None

    match = TAG_PATTERN.search(ref_names)
    if match:
        return match.group(1).strip()
    return None


def escape_subject(subject: str) -> str:
    """Escape a subject so it is safe inside a markdown link."""
    subject = subject.replace("&", "&amp;").replace("<", "&lt;")
    if subject.endswith("\\"):
        subject += "\\"
    subject = subject.replace("]", "\\]")
    # Only brackets that no "]" follows could open a link
    subject = re.sub(r"\[(?!.*\])", "&#91;", subject)
    return subject.replace("`", "\\`")


def format_commit(
    raw: RawCommit, previous_merge_parent: Optional[str]
) -> Tuple[CommitRecord, Optional[str]]:
    """Format one raw commit, returning it with the updated merge parent."""
    subject = raw.subject
    merge_commit_start = False
    merge_commit_end = False

    parents = raw.parents.strip()
    if " " in parents:
        merge_commit_start = True
        previous_merge_parent = parents.split(" ", 1)[0]
        subject = MERGE_SUBJECT_PATTERN.sub(r"Implement \1", subject, count=1)
    elif raw.hash == previous_merge_parent:
        merge_commit_end = True

    record = CommitRecord(
        date=raw.date,
        tag=extract_tag(raw.ref_names),
        hash=raw.hash,
        subject=escape_subject(subject),
        merge_commit_start=merge_commit_start,
        merge_commit_end=merge_commit_end,
    )
    return record, previous_merge_parent


def format_commits(raw_commits: List[RawCommit]) -> List[CommitRecord]:
    """Format raw commits in order, tracking the most recent merge span."""
    formatted = []
    previous_merge_parent: Optional[str] = None

    for raw in raw_commits:
        record, previous_merge_parent = format_commit(raw, previous_merge_parent)
        formatted.append(record)

    return formatted
