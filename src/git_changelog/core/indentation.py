"""Visual nesting of commits inside merge spans."""

from typing import List, Optional

from git_changelog.models.commit import CommitRecord


def flag_indentation(commits: List[CommitRecord]) -> List[CommitRecord]:
    """Set ``indent`` on each commit based on the commit before it.

    Commits following a merge start stay indented until a tag or another
    merge boundary resets them. Nesting is one level deep.
    """
    previous: Optional[CommitRecord] = None

    for commit in commits:
        if previous is None:
            commit.indent = False
        elif commit.tag or commit.is_merge_boundary:
            commit.indent = False
        elif previous.merge_commit_start or previous.indent:
            commit.indent = True
        else:
            commit.indent = False
        previous = commit

    return commits
