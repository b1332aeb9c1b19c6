# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_core import (
    InvalidSemverError,
    Ordering,
    compare,
    compare_precedence,
    is_comparable_with,
    parse_version,
    precedence_key,
)


class TestCompare:
    """Tests for the partial-order compare function."""

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare("1.2.3", "1.2.4") is Ordering.LESS
        assert compare("1.2.4", "1.2.3") is Ordering.GREATER

    def test_equal_versions(self):
        """Test that identical versions compare as equal."""
        assert compare("1.2.4", "1.2.4") is Ordering.EQUAL

    def test_minor_and_major_difference(self):
        """Test that the core triple is compared lexicographically."""
        assert compare("1.2.3", "1.3.3") is Ordering.LESS
        assert compare("1.3.3", "2.3.3") is Ordering.LESS
        assert compare("2.0.0", "1.99.99") is Ordering.GREATER

    def test_numeric_not_lexical(self):
        """Test that numbers compare numerically."""
        assert compare("1.10.0", "1.9.0") is Ordering.GREATER

    def test_core_triple_decides_first(self):
        """Test that suffixes are irrelevant once the core triple differs."""
        assert compare("1.2.3-beta+x", "1.2.4-alpha+y") is Ordering.LESS
        assert compare("1.2.4", "1.2.3-alpha") is Ordering.GREATER

    def test_same_prerelease(self):
        """Test that identical pre-releases are equal."""
        assert compare("1.2.3-alpha", "1.2.3-alpha") is Ordering.EQUAL

    def test_different_prerelease_not_comparable(self):
        """Test that differing pre-releases are not comparable."""
        assert compare("1.2.3-alpha", "1.2.3-beta") is None

    def test_prerelease_vs_release_not_comparable(self):
        """Test that a pre-release and its release are not comparable."""
        assert compare("1.0.0-alpha", "1.0.0") is None
        assert compare("1.0.0", "1.0.0-alpha") is None

    def test_different_build_not_comparable(self):
        """Test that differing build metadata is not comparable."""
        assert compare("1.0.0+build1", "1.0.0+build2") is None
        assert compare("1.0.0+build", "1.0.0") is None

    def test_same_build_equal(self):
        """Test that identical build metadata is equal."""
        assert compare("1.0.0-rc.1+build.5", "1.0.0-rc.1+build.5") is Ordering.EQUAL

    def test_v_prefix_ignored(self):
        """Test that the 'v' prefix does not affect comparison."""
        assert compare("v1.2.3", "1.2.3") is Ordering.EQUAL

    def test_arbitrary_precision(self):
        """Test comparison of numbers beyond 64 bits."""
        assert compare("18446744073709551616.0.0", "18446744073709551615.0.0") is Ordering.GREATER

    def test_version_objects(self):
        """Test comparison with Version objects and mixed arguments."""
        v = parse_version("1.0.0")
        assert compare(v, parse_version("2.0.0")) is Ordering.LESS
        assert compare("1.0.0", v) is Ordering.EQUAL

    def test_invalid_string(self):
        """Test that an invalid string fails in parsing, not in comparison."""
        with pytest.raises(InvalidSemverError):
            compare("1.0", "1.0.0")

    def test_non_string_operand(self):
        """Test that operands other than str or Version are rejected as invalid."""
        with pytest.raises(InvalidSemverError):
            compare(123, "1.0.0")
        with pytest.raises(InvalidSemverError):
            compare_precedence(None, "1.0.0")
        with pytest.raises(InvalidSemverError):
            precedence_key(1.0)

    def test_non_ascii_digits(self):
        """Test that Unicode digits do not parse as numbers."""
        with pytest.raises(InvalidSemverError):
            compare("1\u0662.0.0", "12.0.0")

    def test_ordering_values(self):
        """Test Ordering integer values."""
        assert [o.value for o in Ordering] == [-1, 0, 1]


class TestIsComparableWith:
    """Tests for is_comparable_with."""

    def test_comparable(self):
        """Test pairs with a defined ordering."""
        assert is_comparable_with("1.2.3", "1.2.4")
        assert is_comparable_with("1.2.3-alpha", "1.2.3-alpha")
        assert parse_version("1.2.3").is_comparable_with(parse_version("1.2.4"))

    def test_not_comparable(self):
        """Test pairs without a defined ordering."""
        assert not is_comparable_with("1.2.3-alpha", "1.2.3-beta")
        assert not parse_version("1.2.3-alpha").is_comparable_with(parse_version("1.2.3-beta"))


class TestOperators:
    """Tests for Version rich comparison operators."""

    def test_ordered_pairs(self):
        """Test operators on versions with a defined ordering."""
        v1 = parse_version("1.2.3")
        v2 = parse_version("1.2.4")
        v3 = parse_version("1.2.4")
        v4 = parse_version("1.3.3")
        v5 = parse_version("2.3.3")

        assert v1 < v2
        assert v2 > v1
        assert v1 <= v2
        assert v2 >= v1
        assert v2 <= v3
        assert v2 >= v3
        assert v2 == v3
        assert v1 != v2
        assert v3 < v4
        assert v4 < v5
        assert v5 > v3

    def test_equal_prerelease(self):
        """Test operators on versions with the same pre-release."""
        v6 = parse_version("1.2.3-alpha")
        v7 = parse_version("1.2.3-alpha")
        assert v6 <= v7
        assert v6 >= v7
        assert not v6 < v7
        assert not v6 > v7

    def test_not_comparable_pair(self):
        """Test that every relational operator is False for an unordered pair."""
        a = parse_version("1.2.3-alpha")
        b = parse_version("1.2.3-beta")
        assert not a < b
        assert not a <= b
        assert not a > b
        assert not a >= b
        assert a != b

    def test_non_version_operand(self):
        """Test that ordering against other types raises TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # noqa: B015


class TestComparePrecedence:
    """Tests for full SemVer precedence."""

    def test_core_triple(self):
        """Test comparison with different core triples."""
        assert compare_precedence("1.0.0", "2.0.0") == -1
        assert compare_precedence("2.1.0", "2.0.0") == 1
        assert compare_precedence("2.1.1", "2.1.1") == 0

    def test_semver_spec_chain(self):
        """Test the precedence example chain from semver.org."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_precedence(versions[i], versions[i + 1]) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"
            assert compare_precedence(versions[i + 1], versions[i]) == 1

    def test_numeric_below_alphanumeric(self):
        """Test that numeric identifiers have lower precedence."""
        assert compare_precedence("1.0.0-1", "1.0.0-a") == -1
        assert compare_precedence("1.0.0-999", "1.0.0-0a") == -1

    def test_numeric_identifiers(self):
        """Test numeric pre-release parts compare numerically."""
        assert compare_precedence("1.0.0-10", "1.0.0-2") == 1
        assert compare_precedence("1.0.0-123456789012345678901", "1.0.0-99") == 1

    def test_ascii_order(self):
        """Test alphanumeric parts compare in ASCII order."""
        assert compare_precedence("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_precedence("1.0.0--", "1.0.0-0a") == -1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored."""
        assert compare_precedence("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_precedence("1.0.0-rc.1+x", "1.0.0-rc.1") == 0


class TestPrecedenceKey:
    """Tests for precedence_key."""

    def test_sorting_mixed(self):
        """Test sorting versions by precedence."""
        versions = [
            "2.0.0",
            "1.0.0-beta.11",
            "1.0.0",
            "1.0.0-alpha",
            "1.0.0-beta.2",
            "1.0.0-alpha.1",
            "1.1.0-rc.1",
        ]
        assert sorted(versions, key=precedence_key) == [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0",
            "1.1.0-rc.1",
            "2.0.0",
        ]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("v1.0.0")]
        assert [v.major for v in sorted(versions, key=precedence_key)] == [1, 2]
