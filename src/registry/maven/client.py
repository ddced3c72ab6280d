"""Maven repository client: fetch maven-metadata.xml and extract its versions."""
from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote, urlsplit

from constants import Constants
from common import http_client
from common.logging_utils import extra_context, is_debug_enabled, Timer, safe_url
from versioning.errors import (
    ClientResponseError,
    ConnectionFailedError,
    CoordinatesNotFoundError,
    InvalidResolverError,
    ServerResponseError,
)
from versioning.metadata import parse_versions
from versioning.models import Coordinates, Server

logger = logging.getLogger(__name__)


class MavenMetadataResolver:
    """Resolve the published versions of coordinates from a Maven style repository."""

    def __init__(self, server: Server):
        try:
            parts = urlsplit(server.url)
        except ValueError as exc:
            raise InvalidResolverError(server.url, str(exc)) from exc
        if parts.scheme not in ("http", "https"):
            raise InvalidResolverError(server.url, "Only http and https URLs are supported")
        if not parts.netloc:
            raise InvalidResolverError(server.url, "Cannot be a base")
        self.server = server

    @property
    def server_name(self) -> str:
        return safe_url(self.server.url)

    def metadata_url(self, coordinates: Coordinates) -> str:
        """Build ``<server>/<group/path>/<artifact>/maven-metadata.xml``."""
        segments = coordinates.group_id.split(".") + [coordinates.artifact, Constants.METADATA_FILE]
        path = "/".join(quote(segment, safe="") for segment in segments)
        return f"{self.server.url.rstrip('/')}/{path}"

    def resolve(self, coordinates: Coordinates) -> List[str]:
        """Fetch the metadata document and return its raw version texts.

        Raises:
            CoordinatesNotFoundError: the repository answered 404.
            ClientResponseError: any other 4xx answer.
            ServerResponseError: a 5xx answer after retries.
            ConnectionFailedError: the repository could not be reached.
            MetadataParseError: the document is not well-formed XML.
        """
        url = self.metadata_url(coordinates)
        if is_debug_enabled(logger):
            logger.debug(
                "Fetching Maven metadata",
                extra=extra_context(
                    event="function_entry",
                    component="client",
                    action="resolve",
                    target=safe_url(url),
                    coordinates=str(coordinates)
                )
            )

        with Timer() as timer:
            status_code, _, text = http_client.robust_get(url, auth=self.server.auth)

        if status_code == 0:
            raise ConnectionFailedError(self.server_name, text)
        if status_code == 404:
            raise CoordinatesNotFoundError(coordinates, self.server_name, safe_url(url))
        if 400 <= status_code < 500:
            raise ClientResponseError(self.server_name, text)
        if status_code >= 500:
            raise ServerResponseError(self.server_name, text)

        versions = parse_versions(text)
        logger.info(
            "Found %d version(s) for %s",
            len(versions),
            coordinates,
            extra=extra_context(
                event="function_exit",
                component="client",
                action="resolve",
                outcome="success",
                status_code=status_code,
                duration_ms=timer.duration_ms(),
                count=len(versions)
            )
        )
        return versions
