"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_INPUT = 1
    CONNECTION_ERROR = 2
    METADATA_ERROR = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    MAVEN_CENTRAL = "https://repo.maven.apache.org/maven2"
    METADATA_FILE = "maven-metadata.xml"
    VERSION_TAG = "version"
    RELEASE_QUALIFIERS = ("final", "ga", "release")
    RANGE_SYNTAX_URL = "https://www.npmjs.com/package/semver#advanced-range-syntax"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ENV_LOG_LEVEL = "LATEST_MAVEN_VERSION_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    XML_FEED_CHUNK_SIZE = 64 * 1024
    USER_AGENT = "latest-maven-version/0.9.0"
