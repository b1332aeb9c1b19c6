# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Accepts the SemVer 2.0.0 grammar with an optional leading ``v``:

    [v]MAJOR.MINOR.PATCH[-PRERELEASE][+BUILDMETADATA]

Numeric components have no upper bound; they are plain Python integers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_IDENTIFIER = rf"(?:{_NUMERIC}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"
_PRERELEASE = rf"{_PRERELEASE_IDENTIFIER}(?:\.{_PRERELEASE_IDENTIFIER})*"
_BUILDMETADATA = rf"{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*"

# SemVer 2.0.0 regex plus the optional "v" prefix
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^v?"
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILDMETADATA}))?$"
)

_PRERELEASE_PATTERN = re.compile(rf"^{_PRERELEASE}$")
_BUILDMETADATA_PATTERN = re.compile(rf"^{_BUILDMETADATA}$")

Identifier = Union[int, str]


class InvalidSemverError(ValueError):
    """Raised when a string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"invalid semver: {version}"
        super().__init__(self.message)


InvalidSemver = InvalidSemverError


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSemverError(
            repr(value), f"invalid semver: {name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidSemverError(str(value), f"invalid semver: {name} must not be negative")
    try:
        str(value)
    except ValueError as e:
        # str() refuses integers past sys.get_int_max_str_digits()
        raise InvalidSemverError(
            f"<{value.bit_length()}-bit {name}>", f"invalid semver: {name} {e}"
        ) from e


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed semantic version.

    Equality covers every field, build metadata included. Ordering is a
    partial order: versions sharing ``major.minor.patch`` but differing in
    pre-release or build metadata are not comparable, and every relational
    operator returns False for such a pair. See :mod:`semver_core.compare`.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-joined pre-release identifiers (e.g. "alpha.1"), or None
        buildmetadata: Dot-joined build metadata identifiers, or None
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    buildmetadata: Optional[str] = None

    def __post_init__(self) -> None:
        _check_number("major", self.major)
        _check_number("minor", self.minor)
        _check_number("patch", self.patch)
        source = self._describe()
        if self.prerelease is not None and not (
            isinstance(self.prerelease, str) and _PRERELEASE_PATTERN.fullmatch(self.prerelease)
        ):
            raise InvalidSemverError(source, f"invalid semver: bad pre-release {self.prerelease!r}")
        try:
            self.prerelease_identifiers
        except ValueError as e:
            # Numeric identifiers share the int() digit ceiling of the core numbers
            raise InvalidSemverError(source, f"invalid semver: pre-release {e}") from e
        if self.buildmetadata is not None and not (
            isinstance(self.buildmetadata, str)
            and _BUILDMETADATA_PATTERN.fullmatch(self.buildmetadata)
        ):
            raise InvalidSemverError(
                source, f"invalid semver: bad build metadata {self.buildmetadata!r}"
            )

    def _describe(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            text += f"-{self.prerelease}"
        if self.buildmetadata is not None:
            text += f"+{self.buildmetadata}"
        return text

    def __str__(self) -> str:
        """Return the canonical form, without any ``v`` prefix."""
        return self._describe()

    @classmethod
    def parse(cls, text: str) -> "Version":
        return parse_version(text)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return ``major.minor.patch`` without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[Identifier, ...]:
        """Pre-release identifiers, numeric ones converted to ``int``."""
        if self.prerelease is None:
            return ()
        return tuple(int(part) if part.isdigit() else part for part in self.prerelease.split("."))

    @property
    def buildmetadata_identifiers(self) -> tuple[str, ...]:
        if self.buildmetadata is None:
            return ()
        return tuple(self.buildmetadata.split("."))

    def is_comparable_with(self, other: "Version") -> bool:
        """Return True if ``self`` and ``other`` have a defined ordering."""
        from .compare import is_comparable_with

        return is_comparable_with(self, other)

    def _sign(self, other: "Version") -> Optional[int]:
        from .compare import compare

        ordering = compare(self, other)
        return None if ordering is None else ordering.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        sign = self._sign(other)
        return sign is not None and sign < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        sign = self._sign(other)
        return sign is not None and sign <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        sign = self._sign(other)
        return sign is not None and sign > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        sign = self._sign(other)
        return sign is not None and sign >= 0


def parse_version(text: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; a leading ``v`` is accepted and dropped.
    Surrounding whitespace is not stripped and makes the string invalid.

    Args:
        text: A string of the form [v]MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidSemverError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, buildmetadata=None)

        >>> parse_version("1.0.0-rc.1+build.456")
        Version(major=1, minor=0, patch=0, prerelease='rc.1', buildmetadata='build.456')
    """
    if not isinstance(text, str):
        raise InvalidSemverError(str(text))

    match = SEMVER_PATTERN.fullmatch(text)
    if not match:
        logger.debug("Rejected version string %r", text)
        raise InvalidSemverError(text)

    try:
        major, minor, patch = (int(match.group(name)) for name in ("major", "minor", "patch"))
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidSemverError(text, f"invalid semver: {e}") from e

    try:
        version = Version(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=match.group("prerelease"),
            buildmetadata=match.group("buildmetadata"),
        )
    except InvalidSemverError as e:
        raise InvalidSemverError(text, e.message) from e
    logger.debug("Parsed %r as %s", text, version)
    return version


def is_valid_semver(text: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("v1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(text)
    except InvalidSemverError:
        return False
    return True
