"""Parsing utilities for coordinates, range requirements and raw versions."""

import re
from typing import Optional

from semantic_version import NpmSpec, Version

from constants import Constants
from .errors import EmptyArtifactError, EmptyGroupIdError, InvalidRangeError, MissingArtifactError
from .models import Coordinates, Requirement, VersionCheck

_LENIENT_VERSION_RE = re.compile(r"""
    ^[vV]?
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.(?P<patch>\d+))?
    (?P<extra>(?:\.\d+)*)
    (?:(?P<separator>[-.])(?P<qualifier>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    $""", re.VERBOSE)


def _has_leading_zero(segment: Optional[str]) -> bool:
    return segment is not None and len(segment) > 1 and segment.startswith("0")


def parse_lenient(text: str) -> Optional[Version]:
    """Parse a version string leniently, returning None when it is not a version.

    Missing minor and patch segments default to zero, additional numeric
    segments and release qualifiers (``.Final``, ``.GA``, ``.RELEASE``) are
    kept as build metadata, any other qualifier becomes the prerelease.
    Leading zeros in the numeric core are rejected, as they are for ranges.
    """
    match = _LENIENT_VERSION_RE.match(text)
    if not match:
        return None

    major, minor, patch = match.group("major", "minor", "patch")
    if any(_has_leading_zero(segment) for segment in (major, minor, patch)):
        return None

    qualifier = match.group("qualifier")
    if qualifier and match.group("separator") == "." and patch is None:
        # 1.x.3 is a non-numeric minor, not a qualifier
        return None

    prerelease = []
    build = [segment for segment in match.group("extra").split(".") if segment]
    if qualifier:
        if qualifier.lower() in Constants.RELEASE_QUALIFIERS:
            build.append(qualifier)
        else:
            prerelease.append(qualifier)
    if match.group("build"):
        build.append(match.group("build"))

    normalized = f"{major}.{minor or 0}.{patch or 0}"
    if prerelease:
        normalized += "-" + ".".join(prerelease)
    if build:
        normalized += "+" + ".".join(build)
    try:
        return Version(normalized)
    except ValueError:
        # e.g. numeric prerelease identifiers with leading zeros
        return None


def parse_requirement(text: str) -> Requirement:
    """Parse an npm style range expression into a Requirement.

    Raises:
        InvalidRangeError: for blank input or anything NpmSpec rejects.
    """
    raw = text.strip()
    if not raw:
        raise InvalidRangeError(text, "empty range")
    try:
        spec = NpmSpec(raw)
    except ValueError as exc:
        raise InvalidRangeError(text, str(exc)) from exc
    return Requirement(raw=raw, spec=spec)


def parse_coordinates(token: str) -> VersionCheck:
    """Parse ``groupId:artifactId[:range]*`` into a VersionCheck.

    Every segment is trimmed; ranges keep their order.
    """
    segments = [segment.strip() for segment in token.split(":")]
    group_id = segments[0]
    if not group_id:
        raise EmptyGroupIdError(token)
    if len(segments) < 2:
        raise MissingArtifactError(token)
    artifact = segments[1]
    if not artifact:
        raise EmptyArtifactError(token)

    requirements = [parse_requirement(segment) for segment in segments[2:]]
    return VersionCheck(
        coordinates=Coordinates(group_id=group_id, artifact=artifact),
        requirements=requirements,
    )
