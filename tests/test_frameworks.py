"""Tests for target framework parsing and ordering."""

import pytest

from frameworks import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkParseError,
    NuGetFramework,
    parse,
    parse_folder,
    parse_framework_name,
)


class TestParseFolder:
    """Test short folder names."""

    @pytest.mark.parametrize(
        "folder,identifier,version",
        [
            ("net45", ".NETFramework", (4, 5, 0, 0)),
            ("net462", ".NETFramework", (4, 6, 2, 0)),
            ("net4.5", ".NETFramework", (4, 5, 0, 0)),
            ("netstandard2.0", ".NETStandard", (2, 0, 0, 0)),
            ("netcoreapp3.1", ".NETCoreApp", (3, 1, 0, 0)),
            ("net6.0", ".NETCoreApp", (6, 0, 0, 0)),
            ("sl5", "Silverlight", (5, 0, 0, 0)),
            ("uap10.0", "UAP", (10, 0, 0, 0)),
        ],
    )
    def test_known_frameworks(self, folder, identifier, version):
        """Short names map to their long identifiers and versions."""
        framework = parse_folder(folder)

        assert framework.framework == identifier
        assert framework.version == version

    def test_platform(self):
        """net5+ folders carry an optional platform and platform version."""
        framework = parse_folder("net6.0-windows10.0.19041")

        assert framework.framework == ".NETCoreApp"
        assert framework.platform == "windows"
        assert framework.platform_version == (10, 0, 19041, 0)
        assert framework.get_short_folder_name() == "net6.0-windows10.0.19041"

    def test_profile(self):
        """Profile suffixes expand to their long names."""
        framework = parse_folder("net40-client")

        assert framework.profile == "Client"
        assert framework.get_short_folder_name() == "net40-client"

    def test_portable_members_are_normalized(self):
        """Portable member order does not affect identity."""
        assert parse_folder("portable-net45+win8") == parse_folder("portable-win8+net45")

    def test_special_frameworks(self):
        """any, agnostic and unknown names map onto the sentinels."""
        assert parse_folder("any") == ANY_FRAMEWORK
        assert parse_folder("Agnostic") == AGNOSTIC_FRAMEWORK
        assert parse_folder("foo12") == UNSUPPORTED_FRAMEWORK
        assert parse_folder("foo12").is_unsupported is True

    def test_escaped_folder(self):
        """Percent-escaped names are unescaped first."""
        assert parse_folder("net6.0%2Dwindows") == parse_folder("net6.0-windows")

    def test_invalid_platform_raises(self):
        """A malformed platform is an error, not Unsupported."""
        with pytest.raises(FrameworkParseError):
            parse_folder("net6.0-!!")


class TestParseFrameworkName:
    """Test long framework names."""

    def test_long_name(self):
        """Long names equal their short equivalents."""
        assert parse_framework_name(".NETFramework,Version=v4.5") == parse_folder("net45")

    def test_long_name_with_profile(self):
        """Profile components are read."""
        framework = parse_framework_name(".NETFramework, Version=v4.0, Profile=Client")

        assert framework.profile == "Client"
        assert framework.dotnet_framework_name == ".NETFramework,Version=v4.0,Profile=Client"

    def test_identifier_case_is_canonicalized(self):
        """Known identifiers are matched ignoring case."""
        assert parse_framework_name(".netstandard,Version=v2.0").framework == ".NETStandard"

    @pytest.mark.parametrize("name", [".NETFramework,Version=vx", ".NETFramework,Oops", ",Version=v1.0"])
    def test_malformed_long_names(self, name):
        """Malformed components raise."""
        with pytest.raises(FrameworkParseError):
            parse_framework_name(name)


class TestParse:
    """Test the combined entry point."""

    def test_dispatch(self):
        """Commas select the long form."""
        assert parse(".NETStandard,Version=v2.0") == parse("netstandard2.0")

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty(self, value):
        """Empty input raises."""
        with pytest.raises(FrameworkParseError):
            parse(value)

    def test_parse_error_is_value_error(self):
        """Parse errors can be caught as ValueError."""
        assert issubclass(FrameworkParseError, ValueError)


class TestFrameworkIdentity:
    """Test equality, hashing and ordering."""

    def test_equality_ignores_case(self):
        """Identifier, profile and platform compare ignoring case."""
        left = NuGetFramework(".NETFramework", (4, 0), profile="client")
        right = NuGetFramework(".netframework", (4, 0, 0, 0), profile="Client")

        assert left == right
        assert hash(left) == hash(right)

    def test_full_equality_distinguishes_profile(self):
        """Frameworks differing only in profile are different."""
        assert NuGetFramework(".NETFramework", (4, 0)) != NuGetFramework(".NETFramework", (4, 0), profile="Client")

    def test_immutable(self):
        """Frameworks cannot be modified."""
        with pytest.raises(AttributeError):
            ANY_FRAMEWORK.version = (1, 0, 0, 0)

    def test_total_order(self):
        """Any first, Unsupported last, then identifier and version."""
        frameworks = [
            UNSUPPORTED_FRAMEWORK,
            parse("netstandard2.0"),
            parse("net46"),
            ANY_FRAMEWORK,
            parse("net45"),
        ]

        assert sorted(frameworks) == [
            ANY_FRAMEWORK,
            parse("net45"),
            parse("net46"),
            parse("netstandard2.0"),
            UNSUPPORTED_FRAMEWORK,
        ]

    def test_order_folds_to_upper_case(self):
        """Ordering folds to upper case, so underscores sort after letters."""
        underscored = NuGetFramework("A_B")
        plain = NuGetFramework("ab")

        assert sorted([underscored, plain]) == [plain, underscored]
        assert underscored.sort_key() > plain.sort_key()
        assert NuGetFramework("AB").sort_key() == plain.sort_key()

    @pytest.mark.parametrize("folder", ["net45", "netstandard2.0", "netcoreapp3.1", "net8.0", "win8", "any"])
    def test_short_folder_name(self, folder):
        """Short names render back to their canonical folder form."""
        assert parse_folder(folder).get_short_folder_name() == folder
