# SPDX-License-Identifier: MIT
"""Version comparison.

Two relations are provided:

- ``compare``: a partial order. Versions are ordered by ``major.minor.patch``;
  when that triple is equal they are equal only if pre-release and build
  metadata match exactly, otherwise they are not comparable (``None``).
- ``compare_precedence``: full SemVer 2.0.0 precedence, a total order over
  the core triple and pre-release. Build metadata is ignored.
"""

from __future__ import annotations

import enum
import logging
from typing import Optional, Union

from .semver import Version, parse_version

logger = logging.getLogger(__name__)

VersionLike = Union[str, Version]


class Ordering(enum.IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left, right) -> "Ordering":
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


def _coerce(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def compare(version1: VersionLike, version2: VersionLike) -> Optional[Ordering]:
    """Compare two versions under the partial order.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        The Ordering of version1 relative to version2, or None when the two
        share ``major.minor.patch`` but differ in pre-release or build metadata

    Raises:
        InvalidSemverError: If either argument is not a Version or a valid version string

    Examples:
        >>> compare("1.2.3", "1.2.4")
        <Ordering.LESS: -1>
        >>> compare("1.2.3-alpha", "1.2.3-alpha")
        <Ordering.EQUAL: 0>
        >>> compare("1.2.3-alpha", "1.2.3-beta") is None
        True
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    core = Ordering.of((v1.major, v1.minor, v1.patch), (v2.major, v2.minor, v2.patch))
    if core is not Ordering.EQUAL:
        return core

    # Same core triple: only identical suffixes are ordered
    if v1.prerelease != v2.prerelease or v1.buildmetadata != v2.buildmetadata:
        logger.debug("%s and %s are not comparable", v1, v2)
        return None
    return Ordering.EQUAL


def is_comparable_with(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if ``compare`` yields a defined ordering for the pair."""
    return compare(version1, version2) is not None


def _identifier_key(part: str) -> tuple:
    # Numeric identifiers carry no leading zeros, so (length, text) orders
    # them numerically without converting arbitrarily long digit strings.
    if part.isdigit():
        return (0, len(part), part)
    return (1, 0, part)


def _compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        key1 = _identifier_key(p1)
        key2 = _identifier_key(p2)
        if key1 != key2:
            return -1 if key1 < key2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0


def compare_precedence(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by SemVer 2.0.0 precedence.

    Unlike ``compare`` this is a total order: differing pre-releases are
    ordered identifier by identifier. Build metadata is ignored.

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidSemverError: If either argument is not a Version or a valid version string

    Examples:
        >>> compare_precedence("1.0.0-alpha", "1.0.0-beta")
        -1
        >>> compare_precedence("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_precedence("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def precedence_key(version: VersionLike) -> tuple:
    """Return a sort key consistent with ``compare_precedence``.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=precedence_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Release sorts after every pre-release of the same core triple
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in v.prerelease.split(".")))

    return (v.major, v.minor, v.patch, prerelease_key)
