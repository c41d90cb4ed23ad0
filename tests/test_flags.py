"""Tests for include/exclude flag canonicalization."""

import pytest

from nuspec.flags import EMPTY_FLAGS, canonicalize_flags


class TestCanonicalizeFlags:
    """Test flag splitting, deduplication and ordering."""

    def test_mixed_case_duplicates(self):
        """Case variants collapse to one token, sorted ignoring case."""
        flags = canonicalize_flags("Build, build , COMPILE")

        assert [flag.lower() for flag in flags] == ["build", "compile"]

    def test_first_spelling_is_kept(self):
        """The first spelling of a token is the representative."""
        assert canonicalize_flags("runtime,Runtime,RUNTIME") == ("runtime",)

    def test_empty_tokens_dropped(self):
        """Empty and whitespace-only tokens are ignored."""
        assert canonicalize_flags(" ,Native,, ,Analyzers,") == ("Analyzers", "Native")

    @pytest.mark.parametrize("value", [None, "", " , ,"])
    def test_empty_input(self, value):
        """Nothing to split yields the empty tuple."""
        assert canonicalize_flags(value) == EMPTY_FLAGS

    def test_ordering_ignores_case(self):
        """Upper and lower case tokens interleave alphabetically."""
        assert canonicalize_flags("contentFiles,Build,analyzers") == ("analyzers", "Build", "contentFiles")
