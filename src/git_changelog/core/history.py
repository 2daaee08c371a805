"""Reading commit history from git."""

import logging
from pathlib import Path
from typing import Optional, Protocol

import git
from git import Repo

from git_changelog.core.errors import HistoryReadFailure

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "~>"
HISTORY_FORMAT = FIELD_DELIMITER.join(["%cd", "%d", "%h", "%s", "%p"])


class HistoryReader(Protocol):
    """Source of raw git log text for the pipeline."""

    def read_history(self) -> str:
        """Return one delimited line per commit, in topological order."""
        ...

    def read_latest_tag(self) -> str:
        """Return the ref-name annotation of the most recent tagged commit."""
        ...


class GitHistoryReader:
    """HistoryReader backed by a real git repository."""

    def __init__(self, repo_path: Path):
        self.repo_path = Path(repo_path)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it if needed."""
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise HistoryReadFailure(
                    f"No git repository found in {self.repo_path}"
                ) from e
        return self._repo

    def read_history(self) -> str:
        logger.debug("Reading history from %s", self.repo_path)
        return self._log(
            "--topo-order", "--date=short", f"--format={HISTORY_FORMAT}"
        )

    def read_latest_tag(self) -> str:
        logger.debug("Reading latest tag from %s", self.repo_path)
        return self._log("--tags", "-1", "--format=%d")

    def _log(self, *args: str) -> str:
        try:
            return self.repo.git.log(*args)
        except git.exc.GitCommandError as e:
            raise HistoryReadFailure(f"git log failed: {e}") from e
