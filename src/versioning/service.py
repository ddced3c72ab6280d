"""Run version checks against a resolver, sequentially or on a thread pool."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List

from common.logging_utils import extra_context, is_debug_enabled, Timer
from registry.maven.client import MavenMetadataResolver
from .models import CheckResult, Config, Server, VersionCheck
from .resolution import latest_versions

logger = logging.getLogger(__name__)


def run_check(check: VersionCheck, resolver: MavenMetadataResolver, include_pre_releases: bool) -> CheckResult:
    """Fetch the versions of one set of coordinates and resolve its requirements."""
    with Timer() as timer:
        raw_versions = resolver.resolve(check.coordinates)
        versions = latest_versions(raw_versions, check.requirements, include_pre_releases)
    if is_debug_enabled(logger):
        logger.debug(
            "Check finished",
            extra=extra_context(
                event="function_exit",
                component="service",
                action="run_check",
                outcome="success",
                coordinates=str(check.coordinates),
                duration_ms=timer.duration_ms()
            )
        )
    return CheckResult(coordinates=check.coordinates, versions=versions)


def run_checks(checks: List[VersionCheck], server: Server, config: Config) -> List[CheckResult]:
    """Run all checks and return their results in input order.

    The first failing check aborts the run by raising its error.
    """
    resolver = MavenMetadataResolver(server)
    if len(checks) <= 1 or config.jobs <= 1:
        return [run_check(check, resolver, config.include_pre_releases) for check in checks]

    workers = min(config.jobs, len(checks))
    logger.info("Checking %d coordinates with %d workers", len(checks), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(run_check, check, resolver, config.include_pre_releases)
            for check in checks
        ]
        return [future.result() for future in futures]
