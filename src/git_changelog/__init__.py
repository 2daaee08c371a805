"""Git Changelog - markdown changelogs from git history."""

__version__ = "0.1.0"
