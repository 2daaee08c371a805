"""Errors raised while building a changelog."""


class ChangelogError(Exception):
    """Base class for every failure that aborts a changelog run."""


class InvalidArgument(ChangelogError):
    """The command line was not empty or a single recognized flag."""


class HistoryReadFailure(ChangelogError):
    """Git could not produce the commit history or latest tag."""


class VersionRegression(ChangelogError):
    """The manifest version orders before the latest tag."""


class PersistFailure(ChangelogError):
    """Writing or staging the changelog file failed."""


class ManifestError(ChangelogError):
    """The project manifest is missing or unusable."""
