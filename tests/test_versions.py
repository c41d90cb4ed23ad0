"""Tests for package versions and numeric versions."""

import pytest

from versioning import NuGetVersion, NumericVersion


class TestNuGetVersion:
    """Test NuGet version parsing and comparison."""

    @pytest.mark.parametrize(
        "text,normalized",
        [
            ("1.0", "1.0.0"),
            ("1.2.3", "1.2.3"),
            ("1.2.3.4", "1.2.3.4"),
            ("1.2.3.0", "1.2.3"),
            ("1.0.0-beta.2", "1.0.0-beta.2"),
            ("2.0.0-rc1+build.7", "2.0.0-rc1"),
        ],
    )
    def test_normalized_string(self, text, normalized):
        """Versions normalize to three or four parts without metadata."""
        assert NuGetVersion.parse(text).to_normalized_string() == normalized

    @pytest.mark.parametrize("text", ["", "1.2.3.4.5", "a.b", "1.0-", "1.0.0-01", "1.0.0+"])
    def test_invalid(self, text):
        """Invalid versions are rejected."""
        assert NuGetVersion.try_parse(text) is None
        with pytest.raises(ValueError):
            NuGetVersion.parse(text)

    def test_prerelease_sorts_before_release(self):
        """Prerelease versions precede the release."""
        assert NuGetVersion.parse("1.0.0-alpha") < NuGetVersion.parse("1.0.0-beta") < NuGetVersion.parse("1.0.0")

    def test_labels_compare_ignoring_case(self):
        """Release labels are case-insensitive."""
        assert NuGetVersion.parse("1.0.0-BETA") == NuGetVersion.parse("1.0.0-beta")

    def test_metadata_ignored(self):
        """Build metadata does not affect equality."""
        assert NuGetVersion.parse("1.0.0+a") == NuGetVersion.parse("1.0.0+b")
        assert hash(NuGetVersion.parse("1.0.0+a")) == hash(NuGetVersion.parse("1.0.0"))

    def test_revision_ordering(self):
        """The fourth part orders after patch."""
        assert NuGetVersion.parse("1.0.0.1") > NuGetVersion.parse("1.0.0")


class TestNumericVersion:
    """Test 2-4 part numeric versions."""

    @pytest.mark.parametrize("text", ["1.0", "1.0.0", "1.0.0.0", "99.0", " 2.1 "])
    def test_valid(self, text):
        """Two to four numeric parts parse."""
        assert NumericVersion.try_parse(text) is not None

    @pytest.mark.parametrize("text", ["1", "1.0.0.0.0", "not-a-number", "1.-1", "1.a", "", "99999999999.0"])
    def test_invalid(self, text):
        """Anything else is rejected."""
        assert NumericVersion.try_parse(text) is None

    def test_undefined_parts_sort_first(self):
        """Missing parts sort before zero."""
        assert NumericVersion(1, 0) < NumericVersion(1, 0, 0) < NumericVersion(1, 0, 0, 0)
        assert NumericVersion(99, 0) > NumericVersion(1, 0, 0)

    def test_str(self):
        """Only declared parts are rendered."""
        assert str(NumericVersion.parse("1.0.0")) == "1.0.0"
        assert str(NumericVersion(2, 1)) == "2.1"
