"""The changelog pipeline, from git history to a written file."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from git_changelog.core.composer import commit_uri, compose_document
from git_changelog.core.config import ChangelogConfig
from git_changelog.core.header import resolve_header
from git_changelog.core.history import GitHistoryReader, HistoryReader
from git_changelog.core.indentation import flag_indentation
from git_changelog.core.manifest import read_manifest
from git_changelog.core.parser import format_commits, split_commits
from git_changelog.core.persister import ChangelogPersister
from git_changelog.models.manifest import Manifest

logger = logging.getLogger(__name__)


def build_changelog(
    reader: HistoryReader, manifest: Manifest, today: Optional[date] = None
) -> str:
    """Run every stage up to the composed document.

    Each stage consumes the full output of the one before it; nothing is
    written to disk here.
    """
    raw_commits = split_commits(reader.read_history())
    logger.debug("Read %d commits", len(raw_commits))

    commits = flag_indentation(format_commits(raw_commits))
    pending = resolve_header(commits, manifest.version, reader.read_latest_tag(), today)

    return compose_document(commits, pending, commit_uri(manifest.homepage))


def generate(config: ChangelogConfig, stage: bool = False) -> Path:
    """Build the changelog for a repository, save it and optionally stage it."""
    manifest = read_manifest(config.repo_path)
    document = build_changelog(GitHistoryReader(config.repo_path), manifest)

    persister = ChangelogPersister(config.repo_path, config.output_file)
    path = persister.save(document)
    if stage:
        persister.stage()
    return path
