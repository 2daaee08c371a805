"""Integration tests against a real git repository."""

import tempfile
from pathlib import Path

import pytest
from git import Repo

from git_changelog.core.config import ChangelogConfig
from git_changelog.core.errors import HistoryReadFailure, PersistFailure
from git_changelog.core.history import GitHistoryReader
from git_changelog.core.persister import ChangelogPersister
from git_changelog.core.pipeline import generate

PYPROJECT = """\
[project]
name = "demo"
version = "1.1.0"

[project.urls]
Homepage = "https://github.com/example/demo"
"""


def commit_file(repo: Repo, name: str, content: str, message: str) -> str:
    """Write a file in the repo and commit it, returning the short hash."""
    path = Path(repo.working_tree_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message).hexsha[:7]


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def git_project(temp_dir):
    """Create a repository with a tag, a feature branch and a merge."""
    repo = Repo.init(temp_dir)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    commit_file(repo, "pyproject.toml", PYPROJECT, "Initial commit")
    repo.create_tag("v1.0.0")

    base = repo.active_branch
    feature = repo.create_head("feat-x")
    feature.checkout()
    commit_file(repo, "feature.txt", "x\n", "Add feature x")

    base.checkout()
    commit_file(repo, "docs.txt", "docs\n", "Update docs")
    repo.git.merge("--no-ff", "--no-edit", "feat-x", "-m", "Merge branch 'feat-x'")
    return repo


def test_generate_writes_and_stages(git_project):
    repo_path = Path(git_project.working_tree_dir)

    path = generate(ChangelogConfig(repo_path=repo_path), stage=True)

    document = path.read_text(encoding="utf-8")
    lines = document.splitlines()
    assert lines[0] == "# Changelog"
    assert lines[2].startswith("## 1.1.0 (")
    assert lines[4].startswith(
        "- [Implement 'feat-x'](https://github.com/example/demo/commit/"
    )
    assert "## 1.0.0 (" in document
    assert "- [Initial commit](" in document
    assert ("CHANGELOG.md", 0) in git_project.index.entries


def test_generate_without_stage(git_project):
    repo_path = Path(git_project.working_tree_dir)

    generate(ChangelogConfig(repo_path=repo_path))

    assert (repo_path / "CHANGELOG.md").exists()
    assert ("CHANGELOG.md", 0) not in git_project.index.entries


def test_latest_tag_annotation(git_project):
    reader = GitHistoryReader(Path(git_project.working_tree_dir))

    assert "tag: v1.0.0" in reader.read_latest_tag()
    assert len(reader.read_history().strip().splitlines()) == 4


def test_history_outside_repository(temp_dir):
    with pytest.raises(HistoryReadFailure):
        GitHistoryReader(temp_dir).read_history()


def test_stage_outside_repository(temp_dir):
    persister = ChangelogPersister(temp_dir)
    persister.save("# Changelog\n")

    with pytest.raises(PersistFailure):
        persister.stage()


def test_save_into_missing_directory(temp_dir):
    persister = ChangelogPersister(temp_dir / "missing")

    with pytest.raises(PersistFailure):
        persister.save("# Changelog\n")
