"""latest-maven-version - check a Maven repository for the latest versions of coordinates.

    Returns:
        int: Exit code
"""
import getpass
import logging
import sys

from constants import ExitCodes
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from versioning.errors import InvalidCoordinatesError, InvalidResolverError, MetadataParseError, ResolverError
from versioning.models import Config, Server
from versioning.parser import parse_coordinates
from versioning.service import run_checks

logger = logging.getLogger(__name__)


def build_server(args) -> Server:
    """Build the resolver server, prompting for a password when only a user is given."""
    auth = None
    if args.USER:
        password = args.INSECURE_PASSWORD
        if password is None:
            password = getpass.getpass(f"Enter password for [{args.USER}]: ")
        auth = (args.USER, password)
    return Server(url=args.RESOLVER, auth=auth)


def build_checks(tokens):
    """Parse every coordinates argument, exiting on the first invalid one."""
    checks = []
    for token in tokens:
        try:
            checks.append(parse_coordinates(token))
        except InvalidCoordinatesError as exc:
            logging.error("%s", exc)
            sys.exit(ExitCodes.INVALID_INPUT.value)
    return checks


def format_results(results):
    """Render check results as the lines printed to stdout."""
    lines = []
    for result in results:
        lines.append(f"Latest version(s) for {result.coordinates}:")
        for requirement, latest in result.versions:
            if latest is not None:
                lines.append(f"Latest version matching {requirement}: {latest}")
            else:
                lines.append(f"No version matching {requirement}")
    return lines


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    checks = build_checks(args.version_checks)
    server = build_server(args)
    config = Config(include_pre_releases=args.INCLUDE_PRE_RELEASES, jobs=args.JOBS)

    try:
        results = run_checks(checks, server, config)
    except InvalidResolverError as exc:
        logging.error("%s", exc)
        sys.exit(ExitCodes.INVALID_INPUT.value)
    except MetadataParseError as exc:
        logging.error("%s", exc)
        sys.exit(ExitCodes.METADATA_ERROR.value)
    except ResolverError as exc:
        logging.error("%s", exc)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    for line in format_results(results):
        print(line)
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
