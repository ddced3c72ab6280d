"""Data models for version checks and resolution results."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from semantic_version import NpmSpec, Version


@dataclass(frozen=True)
class Coordinates:
    """Maven coordinates without a version."""
    group_id: str
    artifact: str

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact}"


@dataclass(frozen=True)
class Requirement:
    """A semver range requirement, echoed back verbatim for display.

    ``spec`` is None only for the unconditional match-all requirement, which
    also accepts prerelease versions.
    """
    raw: str
    spec: Optional[NpmSpec] = field(default=None, compare=False, repr=False)
    match_all: bool = False

    @classmethod
    def any(cls) -> "Requirement":
        """Requirement matching every version, prereleases included."""
        return cls(raw="*", spec=None, match_all=True)

    def matches(self, version: Version) -> bool:
        if self.match_all:
            return True
        return self.spec is not None and self.spec.match(version)

    def __str__(self) -> str:
        return self.raw


@dataclass
class VersionCheck:
    """One coordinates argument with its ordered requirements."""
    coordinates: Coordinates
    requirements: List[Requirement] = field(default_factory=list)


# One entry per requirement, in requirement order.
ResolutionResult = List[Tuple[Requirement, Optional[Version]]]


@dataclass
class CheckResult:
    """Resolution outcome for one set of coordinates."""
    coordinates: Coordinates
    versions: ResolutionResult


@dataclass(frozen=True)
class Server:
    """Maven style repository to resolve against."""
    url: str
    auth: Optional[Tuple[str, str]] = field(default=None, repr=False)


@dataclass(frozen=True)
class Config:
    """Runtime options shared by all checks."""
    include_pre_releases: bool = False
    jobs: int = 1
