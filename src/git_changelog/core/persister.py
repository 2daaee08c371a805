"""Writing and staging the changelog file."""

import logging
from pathlib import Path
from typing import Optional

import git
from git import Repo

from git_changelog.core.config import OUTPUT_FILE
from git_changelog.core.errors import PersistFailure

logger = logging.getLogger(__name__)


class ChangelogPersister:
    """Writes the changelog into a repository and stages it on request."""

    def __init__(self, repo_path: Path, output_file: str = OUTPUT_FILE):
        self.repo_path = Path(repo_path)
        self.output_file = output_file
        self._repo: Optional[Repo] = None

    @property
    def output_path(self) -> Path:
        return self.repo_path / self.output_file

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it if needed."""
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise PersistFailure(
                    f"No git repository found in {self.repo_path}"
                ) from e
        return self._repo

    def save(self, document: str) -> Path:
        """Overwrite the changelog file with the document."""
        try:
            self.output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise PersistFailure(f"Could not write {self.output_path}: {e}") from e

        logger.info("Wrote %s", self.output_path)
        return self.output_path

    def stage(self) -> None:
        """Add the changelog file to the git index."""
        try:
            self.repo.git.add(self.output_file)
        except git.exc.GitCommandError as e:
            raise PersistFailure(f"git add {self.output_file} failed: {e}") from e

        logger.info("Staged %s", self.output_file)
