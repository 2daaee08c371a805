"""Tests for rendering the changelog document."""

from git_changelog.core.composer import commit_uri, compose_document, format_entry
from git_changelog.models.commit import CommitRecord
from git_changelog.models.release import PendingRelease


class TestCommitUri:
    def test_no_homepage(self):
        assert commit_uri(None) is None
        assert commit_uri("") is None

    def test_github_style(self):
        assert commit_uri("https://github.com/u/r") == "https://github.com/u/r/commit/"

    def test_bitbucket_style(self):
        assert (
            commit_uri("https://bitbucket.org/u/r")
            == "https://bitbucket.org/u/r/commits/"
        )

    def test_fragment_and_trailing_slash_removed(self):
        assert (
            commit_uri("https://github.com/u/r/#readme")
            == "https://github.com/u/r/commit/"
        )


class TestComposeDocument:
    def test_title_only(self):
        assert compose_document([]) == "# Changelog\n"

    def test_entries_with_links_and_tags(self):
        commits = [
            CommitRecord(date="2024-02-01", hash="m1", subject="Implement 'x'", indent=False),
            CommitRecord(date="2024-01-31", hash="f1", subject="Add x", indent=True),
            CommitRecord(
                date="2024-01-30", tag="1.0.0", hash="p1", subject="Release", indent=False
            ),
        ]
        pending = PendingRelease(label="Latest", date="2024-02-02")

        document = compose_document(commits, pending, "https://github.com/u/r/commit/")

        assert document == (
            "# Changelog\n"
            "\n## Latest (2024-02-02)\n\n"
            "- [Implement 'x'](https://github.com/u/r/commit/m1)\n"
            "  - [Add x](https://github.com/u/r/commit/f1)\n"
            "\n## 1.0.0 (2024-01-30)\n\n"
            "- [Release](https://github.com/u/r/commit/p1)\n"
        )

    def test_entry_without_link(self):
        commit = CommitRecord(date="2024-01-01", hash="a", subject="Plain", indent=True)

        assert format_entry(commit) == "  - Plain\n"
