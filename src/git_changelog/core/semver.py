"""Semantic version parsing and precedence."""

import re
from functools import total_ordering
from typing import Optional, Tuple, Union

SEMVER_PATTERN = re.compile(
    r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z.-]+)?$"
)

Identifier = Tuple[int, Union[int, str]]


@total_ordering
class SemVer:
    """A major.minor.patch[-prerelease][+build] version.

    Build metadata is accepted but plays no part in ordering.
    """

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        prerelease: Tuple[str, ...] = (),
    ):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.prerelease = prerelease

    @classmethod
    def parse(cls, text: str) -> Optional["SemVer"]:
        match = SEMVER_PATTERN.match(text.strip())
        if not match:
            return None
        major, minor, patch, prerelease = match.groups()
        return cls(
            int(major),
            int(minor or 0),
            int(patch or 0),
            tuple(prerelease.split(".")) if prerelease else (),
        )

    def _key(self):
        # A release outranks any of its pre-releases
        if not self.prerelease:
            pre: Tuple = ((1,),)
        else:
            pre = ((0,),) + tuple(_identifier_key(part) for part in self.prerelease)
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        return text

    def __repr__(self) -> str:
        return f"SemVer({str(self)!r})"


def _identifier_key(part: str) -> Identifier:
    # Numeric identifiers sort below alphanumeric ones
    if part.isdigit():
        return (0, int(part))
    return (1, part)
