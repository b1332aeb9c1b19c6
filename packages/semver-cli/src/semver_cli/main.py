# SPDX-License-Identifier: MIT
"""CLI entry points for the semver and semver-compare commands."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from semver_core import InvalidSemverError, Ordering, compare, compare_precedence, parse_version

from . import __version__
from .config import ConfigError, load_config
from .display import print_version

logger = logging.getLogger(__name__)

# Exit status when two versions have no defined ordering
EXIT_NOT_COMPARABLE = 3

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "==",
    Ordering.GREATER: ">",
}


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def setup_logging(verbose: bool) -> None:
    """Send debug records from the semver packages to stderr."""
    if not verbose:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname).4s] %(name)s: %(message)s"))
    for name in ("semver_core", "semver_cli"):
        package_logger = logging.getLogger(name)
        package_logger.setLevel(logging.DEBUG)
        package_logger.handlers = [handler]


@click.command()
@click.version_option(version=__version__)
@click.argument("version")
@click.option(
    "-r",
    "--remove-v-prefix/--keep-v-prefix",
    default=None,
    help="Do not print the 'v' prefix (default from configuration).",
)
@click.option(
    "-p",
    "--prefix",
    default=None,
    help="Custom prefix printed before each version.",
)
@click.option(
    "-s",
    "--single-line/--multi-line",
    default=None,
    help="Display output on a single line (default from configuration).",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
def semver(
    version: str,
    remove_v_prefix: Optional[bool],
    prefix: Optional[str],
    single_line: Optional[bool],
    verbose: bool,
) -> None:
    """Parse a semantic version and print its major, minor and patch groups.

    \b
    Examples:
        semver 1.2.3              # v1, v1.2, v1.2.3
        semver -r -s 2.0.0        # 2,2.0,2.0.0
        semver v1.2.3-alpha+meta  # v1.2.3-alpha
        semver -p release- 1.0.0  # release-v1, release-v1.0, release-v1.0.0
    """
    setup_logging(verbose)

    try:
        config = load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    try:
        parsed = parse_version(version)
    except InvalidSemverError as e:
        echo_error(str(e))
        raise SystemExit(1)

    # Options left unset on the command line fall back to configuration
    options = config.display_options(
        prefix=prefix,
        remove_v_prefix=remove_v_prefix,
        single_line=single_line,
    )
    logger.debug("Display options: %s", options)
    print_version(parsed, options, echo=echo_info)


@click.command()
@click.version_option(version=__version__)
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--precedence",
    is_flag=True,
    help="Use full SemVer precedence, which orders every pair.",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
def semver_compare(version1: str, version2: str, precedence: bool, verbose: bool) -> None:
    """Compare two semantic versions.

    Prints the relation between VERSION1 and VERSION2. Versions with the
    same major.minor.patch but a different pre-release or build metadata are
    not comparable unless --precedence is given. A pair with no ordering
    exits with status 3.

    \b
    Examples:
        semver-compare 1.2.3 1.2.4                          # 1.2.3 < 1.2.4
        semver-compare 1.2.3-alpha 1.2.3-beta               # not comparable
        semver-compare --precedence 1.2.3-alpha 1.2.3-beta  # 1.2.3-alpha < 1.2.3-beta
    """
    setup_logging(verbose)

    try:
        v1 = parse_version(version1)
        v2 = parse_version(version2)
    except InvalidSemverError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if precedence:
        ordering: Optional[Ordering] = Ordering(compare_precedence(v1, v2))
    else:
        ordering = compare(v1, v2)

    if ordering is None:
        echo_info(f"{version1} and {version2} are not comparable")
        raise SystemExit(EXIT_NOT_COMPARABLE)

    echo_info(f"{version1} {_SYMBOLS[ordering]} {version2}")


def main() -> None:
    """Main entry point for the semver command."""
    try:
        semver()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


def compare_main() -> None:
    """Main entry point for the semver-compare command."""
    try:
        semver_compare()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
