"""Argument parsing functionality for latest-maven-version."""

import argparse
import os

from constants import Constants


def _positive_int(value):
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="latest-maven-version",
        description=(
            "Check a Maven repository for the latest version(s) of some maven coordinates."
        ),
        epilog=(
            "Requirements are matched in order and a version is only ever matched by the "
            "first requirement that accepts it. List them from most to least restrictive. "
            f"Ranges follow {Constants.RANGE_SYNTAX_URL}"
        ),
        add_help=True,
    )

    parser.add_argument("version_checks",
                        metavar="COORDINATES",
                        help="The maven coordinates to check for, in the form "
                             "{groupId}:{artifactId}[:{version}]*. Every version is a "
                             "semver range requirement.",
                        nargs="+",
                        type=str)
    parser.add_argument("-i", "--include-pre-releases",
                        dest="INCLUDE_PRE_RELEASES",
                        help="Also consider pre releases.",
                        action="store_true")
    parser.add_argument("-r", "--resolver", "--repo",
                        dest="RESOLVER",
                        help="Use this repository as resolver. It must follow maven style "
                             "publication (default: Maven Central).",
                        action="store",
                        type=str,
                        default=Constants.MAVEN_CENTRAL)
    parser.add_argument("-u", "--user", "--username",
                        dest="USER",
                        help="Username for basic authentication against the resolver. "
                             "The password is prompted for unless --insecure-password is given.",
                        action="store",
                        type=str)
    parser.add_argument("--insecure-password",
                        dest="INSECURE_PASSWORD",
                        help="Password for authentication against the resolver. "
                             "Consider leaving this undefined and use the prompt instead.",
                        action="store",
                        type=str)
    parser.add_argument("-j", "--jobs",
                        dest="JOBS",
                        help="When multiple coordinates are given, query at most JOBS at once "
                             "(default: number of CPUs).",
                        action="store",
                        type=_positive_int,
                        default=os.cpu_count() or 1)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    args = parser.parse_args(argv)
    if args.INSECURE_PASSWORD is not None and not args.USER:
        parser.error("--insecure-password requires --user")
    return args
