"""Unit tests for version comparison."""

import pytest

from chat_policy_sdk.core.versioning import is_newer_version, natural_compare, semver_compare


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestSemverCompare:

    def test_numeric_segments(self):
        assert semver_compare("1.2.0", "1.10.0") < 0
        assert semver_compare("1.10.0", "1.2.0") > 0
        assert semver_compare("2", "10") < 0

    def test_prerelease_before_release(self):
        assert semver_compare("1.2.0-beta", "1.2.0") < 0
        assert semver_compare("1.2.0", "1.2.0-beta") > 0

    def test_equal(self):
        assert semver_compare("2.15.8", "2.15.8") == 0

    def test_prerelease_ordering(self):
        assert semver_compare("1.0.0-alpha", "1.0.0-beta") < 0
        assert semver_compare("1.2.0-beta.2", "1.2.0-beta.10") < 0

    def test_shorter_version_first(self):
        assert semver_compare("1.2", "1.2.1") < 0

    @pytest.mark.parametrize("a, b", [
        ("1.2.0", "1.10.0"),
        ("1.2.0-beta", "1.2.0"),
        ("v2.0", "v2.0-rc1"),
        ("2.16.0", "2.15.8"),
        ("1.0.0-RC", "1.0.0-rc"),
        ("abc", "ABC"),
        ("1.0", "1.0"),
    ])
    def test_antisymmetric(self, a, b):
        assert _sign(semver_compare(a, b)) == -_sign(semver_compare(b, a))


class TestNaturalCompare:

    def test_case_is_tie_break_with_upper_first(self):
        assert natural_compare("RC", "rc") < 0
        assert natural_compare("rc", "RC") > 0

    def test_case_insensitive_before_tie_break(self):
        assert natural_compare("Alpha", "beta") < 0
        assert natural_compare("alpha", "Beta") < 0

    def test_digits_before_letters(self):
        assert natural_compare("1", "a") < 0


class TestIsNewerVersion:

    def test_newer(self):
        assert is_newer_version("2.16.0", "2.15.8") is True

    def test_same_or_older(self):
        assert is_newer_version("2.15.8", "2.15.8") is False
        assert is_newer_version("2.16.0-beta", "2.16.0") is False

    def test_accents_ignored(self):
        assert natural_compare("é", "e") == 0
        assert semver_compare("1.0-é", "1.0-e") == 0
        assert natural_compare("É", "e") < 0
