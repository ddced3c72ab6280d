"""Exception hierarchy for metadata extraction, input parsing and resolvers."""

from constants import Constants


class LatestVersionError(Exception):
    """Base class for all errors raised by this project."""


class MetadataParseError(LatestVersionError):
    """The metadata document is not well-formed XML."""

    def __init__(self, message: str, position=None):
        self.position = position
        super().__init__(f"Could not parse the metadata document: {message}")


class InvalidCoordinatesError(LatestVersionError):
    """A coordinates argument could not be parsed."""

    def __init__(self, value: str, message: str):
        self.value = value
        super().__init__(message)


class EmptyGroupIdError(InvalidCoordinatesError):
    def __init__(self, value: str):
        super().__init__(value, f"The groupId may not be empty in {value}")


class EmptyArtifactError(InvalidCoordinatesError):
    def __init__(self, value: str):
        super().__init__(value, f"The artifact may not be empty in {value}")


class MissingArtifactError(InvalidCoordinatesError):
    def __init__(self, value: str):
        super().__init__(value, f"The artifact is missing in {value}")


class InvalidRangeError(InvalidCoordinatesError):
    """A version requirement is not a valid semver range."""

    def __init__(self, value: str, reason: str = ""):
        self.reason = reason
        super().__init__(
            value,
            f"Could not parse {value!r} into a semantic version range. "
            f"Please provide a valid range according to {Constants.RANGE_SYNTAX_URL}",
        )


class ResolverError(LatestVersionError):
    """Fetching metadata from a resolver failed."""


class InvalidResolverError(ResolverError):
    def __init__(self, server: str, reason: str):
        self.server = server
        self.reason = reason
        super().__init__(f"The resolver {server} is invalid: {reason}")


class CoordinatesNotFoundError(ResolverError):
    def __init__(self, coordinates, server: str, url: str):
        self.coordinates = coordinates
        self.server = server
        self.url = url
        super().__init__(
            f"The coordinates {coordinates} could not be found using the resolver {server}. "
            "This could be because the coordinates do not exist or because the server does "
            f"not follow maven style publication. The following URL was tried and resulted in a 404: {url}"
        )


class ClientResponseError(ResolverError):
    def __init__(self, server: str, body: str):
        self.server = server
        self.body = body
        super().__init__(
            f"Could not read Maven metadata using the resolver {server}. "
            "There is likely something wrong with your request, please check your inputs."
        )


class ServerResponseError(ResolverError):
    def __init__(self, server: str, body: str):
        self.server = server
        self.body = body
        super().__init__(
            f"Could not read Maven metadata using the resolver {server}. "
            "There is likely something wrong with the server. Please try again later."
        )


class ConnectionFailedError(ResolverError):
    def __init__(self, server: str, reason: str):
        self.server = server
        self.reason = reason
        super().__init__(f"Could not connect to the resolver {server}: {reason}")
