"""Data models for Git Changelog."""

from .commit import CommitRecord, RawCommit
from .manifest import Manifest
from .release import PendingRelease

__all__ = ["CommitRecord", "RawCommit", "Manifest", "PendingRelease"]
