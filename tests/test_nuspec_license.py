"""Tests for license metadata resolution."""

import pytest

from constants import LogCode
from licenses import (
    CURRENT_VERSION,
    EMPTY_VERSION,
    LicenseExpressionParsingError,
    LicenseType,
    parse_license_expression,
)
from nuspec import NuspecReader, PackagingException
from versioning import NumericVersion

NS = "http://schemas.microsoft.com/packaging/2013/05/nuspec.xsd"


def make_reader(license_xml: str) -> NuspecReader:
    """Helper to build a reader around a license element."""
    return NuspecReader.from_string(f"""<package xmlns="{NS}">
  <metadata>
    <id>Contoso.Widgets</id>
    <version>1.0.0</version>
    {license_xml}
  </metadata>
</package>""")


class TestLicenseExpression:
    """Test expression licenses."""

    def test_expression_without_version(self):
        """A plain expression parses with the empty version."""
        metadata = make_reader('<license type="expression">MIT</license>').get_license_metadata()

        assert metadata.type == LicenseType.EXPRESSION
        assert metadata.license == "MIT"
        assert metadata.version == EMPTY_VERSION
        assert metadata.license_expression is not None
        assert metadata.is_expression_evaluated is True
        assert metadata.non_standard_licenses == ()

    def test_compound_expression(self):
        """Compound expressions parse and produce an encoded license URL."""
        metadata = make_reader(
            '<license type="expression" version="1.0.0">MIT OR Apache-2.0</license>'
        ).get_license_metadata()

        assert metadata.version == CURRENT_VERSION
        assert metadata.license_expression is not None
        assert metadata.license_url == "https://licenses.nuget.org/MIT%20OR%20Apache-2.0"

    def test_type_is_case_insensitive(self):
        """The type attribute matches ignoring case."""
        metadata = make_reader('<license type="Expression">MIT</license>').get_license_metadata()

        assert metadata.type == LicenseType.EXPRESSION

    def test_newer_version_is_not_evaluated(self):
        """A version above the supported one keeps the raw text only."""
        metadata = make_reader(
            '<license type="expression" version="99.0">MIT AND Some-Future-Syntax</license>'
        ).get_license_metadata()

        assert metadata.type == LicenseType.EXPRESSION
        assert metadata.license == "MIT AND Some-Future-Syntax"
        assert metadata.license_expression is None
        assert metadata.is_expression_evaluated is False
        assert metadata.version == NumericVersion(99, 0)

    def test_invalid_version_raises_nu5034(self):
        """An unparseable version attribute is rejected."""
        reader = make_reader('<license type="expression" version="not-a-number">MIT</license>')

        with pytest.raises(PackagingException) as exc:
            reader.get_license_metadata()
        assert exc.value.log_code == LogCode.NU5034
        assert "not-a-number" in exc.value.message
        assert str(exc.value).startswith("NU5034: ")

    def test_malformed_expression_raises_nu5032(self):
        """An expression that does not parse is rejected with the parser cause."""
        reader = make_reader('<license type="expression">(MIT</license>')

        with pytest.raises(PackagingException) as exc:
            reader.get_license_metadata()
        assert exc.value.log_code == LogCode.NU5032
        assert isinstance(exc.value.__cause__, LicenseExpressionParsingError)

    def test_empty_expression_raises_nu5032(self):
        """An empty expression body is rejected."""
        reader = make_reader('<license type="expression"></license>')

        with pytest.raises(PackagingException) as exc:
            reader.get_license_metadata()
        assert exc.value.log_code == LogCode.NU5032

    def test_lowercase_operator_raises_nu5032(self):
        """A lowercase operator makes the expression invalid."""
        reader = make_reader('<license type="expression">MIT or Apache-2.0</license>')

        with pytest.raises(PackagingException) as exc:
            reader.get_license_metadata()
        assert exc.value.log_code == LogCode.NU5032
        assert isinstance(exc.value.__cause__, LicenseExpressionParsingError)


class TestLicenseFile:
    """Test file licenses and unrecognized declarations."""

    def test_file_license(self):
        """File licenses carry the path and the empty version."""
        metadata = make_reader('<license type="file">docs/LICENSE.txt</license>').get_license_metadata()

        assert metadata.type == LicenseType.FILE
        assert metadata.license == "docs/LICENSE.txt"
        assert metadata.license_expression is None
        assert metadata.version == EMPTY_VERSION
        assert metadata.license_url == "https://aka.ms/deprecateLicenseUrl"

    def test_file_license_ignores_declared_version(self):
        """A valid version on a file license is not carried over."""
        metadata = make_reader('<license type="file" version="2.0">LICENSE</license>').get_license_metadata()

        assert metadata.version == EMPTY_VERSION

    def test_unknown_type_is_none(self):
        """An unknown type is not an error."""
        reader = make_reader('<license type="url">https://example.com/license</license>')

        assert reader.get_license_metadata() is None

    def test_missing_type_is_none(self):
        """A license without a type is ignored."""
        assert make_reader("<license>MIT</license>").get_license_metadata() is None

    def test_no_license_element(self):
        """Manifests without a license element have no metadata."""
        assert make_reader("").get_license_metadata() is None


class TestParseLicenseExpression:
    """Test the expression parser wrapper."""

    def test_parses_with_exception(self):
        """WITH clauses are accepted."""
        expression = parse_license_expression("GPL-2.0-or-later WITH Classpath-exception-2.0")

        assert expression is not None

    def test_unbalanced_parentheses(self):
        """Unbalanced parentheses are rejected."""
        with pytest.raises(LicenseExpressionParsingError):
            parse_license_expression("MIT)")

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, text):
        """Empty text is rejected."""
        with pytest.raises(LicenseExpressionParsingError):
            parse_license_expression(text)

    @pytest.mark.parametrize(
        "text",
        ["mit and apache-2.0", "MIT With Classpath-exception-2.0", "(MIT Or Apache-2.0)"],
    )
    def test_operators_are_case_sensitive(self, text):
        """Operators spelled in any case other than upper are rejected."""
        with pytest.raises(LicenseExpressionParsingError):
            parse_license_expression(text)

    @pytest.mark.parametrize("text", ["MIT:foo", "MIT_foo", "MIT OR Apache/2.0", "GPL-2.0++"])
    def test_invalid_identifier_characters(self, text):
        """Identifiers are limited to letters, digits, dots, dashes and a trailing plus."""
        with pytest.raises(LicenseExpressionParsingError):
            parse_license_expression(text)

    def test_trailing_plus_is_accepted(self):
        """An identifier may end with a single plus."""
        assert parse_license_expression("LGPL-2.1+ OR MIT") is not None
