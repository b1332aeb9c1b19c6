# SPDX-License-Identifier: MIT
"""Rendering of parsed versions for the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import click

from semver_core import Version


@dataclass
class DisplayOptions:
    """How a version is printed.

    Attributes:
        prefix: Text prepended to every rendered version
        remove_v_prefix: Do not append "v" to the prefix
        single_line: Join the rendered versions on one line
    """

    prefix: str = ""
    remove_v_prefix: bool = False
    single_line: bool = False

    @property
    def effective_prefix(self) -> str:
        return self.prefix if self.remove_v_prefix else f"{self.prefix}v"


def render_lines(version: Version, options: DisplayOptions) -> list[str]:
    """Render a version as the lines to print.

    A pre-release renders as a single ``major.minor.patch-prerelease`` line.
    Otherwise the major, major.minor and major.minor.patch groups are
    rendered, one per line or comma-joined when ``single_line`` is set.
    Build metadata is never rendered.

    Examples:
        >>> from semver_core import parse_version
        >>> render_lines(parse_version("1.2.3"), DisplayOptions())
        ['v1', 'v1.2', 'v1.2.3']
        >>> options = DisplayOptions(remove_v_prefix=True, single_line=True)
        >>> render_lines(parse_version("2.0.0"), options)
        ['2,2.0,2.0.0']
    """
    prefix = options.effective_prefix

    if version.prerelease is not None:
        return [f"{prefix}{version.base_version}-{version.prerelease}"]

    groups = [
        f"{prefix}{version.major}",
        f"{prefix}{version.major}.{version.minor}",
        f"{prefix}{version.major}.{version.minor}.{version.patch}",
    ]
    if options.single_line:
        return [",".join(groups)]
    return groups


def print_version(
    version: Version,
    options: DisplayOptions,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """Print a version according to the display options."""
    for line in render_lines(version, options):
        echo(line)
