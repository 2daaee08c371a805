"""Resolving the header for unreleased commits."""

import logging
import re
from datetime import date
from typing import List, Optional

from git_changelog.core.errors import ManifestError, VersionRegression
from git_changelog.core.parser import TAG_PATTERN
from git_changelog.core.semver import SemVer
from git_changelog.models.commit import CommitRecord
from git_changelog.models.release import PendingRelease

logger = logging.getLogger(__name__)

DEFAULT_TAG = "0.0.0"
LATEST_LABEL = "Latest"
TAG_CORE_PATTERN = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


def latest_tag_version(ref_names: str) -> str:
    """Get the version of the latest tag annotation, or 0.0.0 if untagged."""
    match = TAG_PATTERN.search(ref_names or "")
    if match:
        return match.group(1).strip()
    return DEFAULT_TAG


def check_version(manifest_version: str, latest_tag: str) -> None:
    """Raise VersionRegression if the manifest version falls before the tag."""
    current = SemVer.parse(manifest_version)
    if current is None:
        raise ManifestError(
            f"Your package version ({manifest_version}) is not a valid SemVer value."
        )

    latest = SemVer.parse(latest_tag)
    if latest is None:
        # Tag suffixes are loosely matched, compare on the x.y.z core
        major, minor, patch = TAG_CORE_PATTERN.match(latest_tag).groups()
        latest = SemVer(int(major), int(minor), int(patch))

    if current < latest:
        raise VersionRegression(
            f"Your package version ({manifest_version}) has a SemVer value "
            f"that falls before your latest tag ({latest_tag})."
        )


def resolve_header(
    commits: List[CommitRecord],
    manifest_version: str,
    latest_ref_names: str,
    today: Optional[date] = None,
) -> Optional[PendingRelease]:
    """Validate the manifest version and build the pending release header.

    Returns None when the newest commit is already tagged or there are no
    commits at all.
    """
    latest_tag = latest_tag_version(latest_ref_names)
    check_version(manifest_version, latest_tag)
    logger.info("Manifest version %s, latest tag %s", manifest_version, latest_tag)

    if not commits or commits[0].tag:
        return None

    today = today or date.today()
    label = LATEST_LABEL if manifest_version == latest_tag else manifest_version
    return PendingRelease(label=label, date=today.strftime("%Y-%m-%d"))
