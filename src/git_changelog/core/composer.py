"""Rendering the changelog document."""

from typing import List, Optional

from git_changelog.models.commit import CommitRecord
from git_changelog.models.release import PendingRelease

TITLE = "# Changelog\n"
INDENT = "  "


def commit_uri(homepage: Optional[str]) -> Optional[str]:
    """Get the commit-detail URL prefix for a project homepage."""
    if not homepage:
        return None

    base = homepage.split("#", 1)[0].rstrip("/")
    # Bitbucket spells its commit pages in the plural
    path = "/commits/" if "bitbucket" in base else "/commit/"
    return base + path


def format_entry(commit: CommitRecord, uri: Optional[str] = None) -> str:
    """Render one commit as a markdown bullet line."""
    line = INDENT if commit.indent else ""
    if uri:
        return f"{line}- [{commit.subject}]({uri}{commit.hash})\n"
    return f"{line}- {commit.subject}\n"


def compose_document(
    commits: List[CommitRecord],
    pending: Optional[PendingRelease] = None,
    uri: Optional[str] = None,
) -> str:
    """Build the full changelog text."""
    parts = [TITLE]
    if pending:
        parts.append(pending.render())

    for commit in commits:
        if commit.tag:
            parts.append(f"\n## {commit.tag} ({commit.date})\n\n")
        parts.append(format_entry(commit, uri))

    return "".join(parts)
