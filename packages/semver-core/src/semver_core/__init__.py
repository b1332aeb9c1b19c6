# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package parses SemVer 2.0.0 strings (with an optional leading ``v``)
into immutable Version values and compares them under a partial order.

Example:
    >>> from semver_core import parse_version, compare, Ordering
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> compare("1.2.3", "1.2.4") is Ordering.LESS
    True
    >>> compare("1.2.3-alpha", "1.2.3-beta") is None
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    InvalidSemver,
    InvalidSemverError,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare,
    is_comparable_with,
    compare_precedence,
    precedence_key,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidSemver",
    "InvalidSemverError",
    "SEMVER_PATTERN",
    # Version comparison
    "Ordering",
    "compare",
    "is_comparable_with",
    "compare_precedence",
    "precedence_key",
]
