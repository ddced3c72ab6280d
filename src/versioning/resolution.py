"""Selection of the latest version per requirement.

Requirements are matched in order and every version is claimed by the first
requirement that matches it. A broad requirement listed after a narrow one
therefore never sees the versions the narrow one already took, so callers
should order requirements from most to least restrictive.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from semantic_version import Version

from common.logging_utils import extra_context, is_debug_enabled
from .models import Requirement, ResolutionResult
from .parser import parse_lenient, parse_requirement

logger = logging.getLogger(__name__)


def _match_key(version: Version, allow_pre_release: bool) -> Version:
    """Version tested against the ranges.

    With prereleases allowed only the release core is matched, so
    ``1.1.0-alpha01`` falls into ``^1``. Otherwise the version is matched as
    is and npm range semantics keep prereleases out of release ranges.
    """
    if allow_pre_release and (version.prerelease or version.build):
        return Version(major=version.major, minor=version.minor, patch=version.patch)
    return version


def find_latest_versions(
    raw_versions: Iterable[str],
    requirements: Sequence[Requirement],
    allow_pre_release: bool,
) -> List[Optional[Version]]:
    """Return the highest version claimed by each requirement, in requirement order."""
    latest: List[Optional[Version]] = [None] * len(requirements)
    if not requirements:
        return latest

    skipped = 0
    for raw in raw_versions:
        version = parse_lenient(raw)
        if version is None:
            skipped += 1
            continue
        key = _match_key(version, allow_pre_release)
        position = next(
            (idx for idx, requirement in enumerate(requirements) if requirement.matches(key)),
            None,
        )
        if position is None:
            continue
        current = latest[position]
        # precedence_key orders build metadata too, so 5.4.2+Final beats 5.4.2
        if current is None or version.precedence_key > current.precedence_key:
            latest[position] = version

    if skipped and is_debug_enabled(logger):
        logger.debug(
            "Skipped unparseable versions",
            extra=extra_context(
                event="decision",
                component="resolution",
                action="find_latest_versions",
                outcome="skipped_invalid",
                count=skipped
            )
        )
    return latest


def latest_versions(
    raw_versions: Iterable[str],
    requirements: Sequence[Requirement],
    allow_pre_release: bool,
) -> ResolutionResult:
    """Resolve the latest version for every requirement.

    Without requirements a single match-everything requirement is used:
    ``*`` when prereleases are excluded, the unconditional match-all otherwise.
    The result has one entry per requirement, in the same order, with None
    where no version matched.
    """
    requirements = list(requirements)
    if not requirements:
        requirements.append(Requirement.any() if allow_pre_release else parse_requirement("*"))
    latest = find_latest_versions(raw_versions, requirements, allow_pre_release)
    return list(zip(requirements, latest))
