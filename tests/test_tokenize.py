"""Tests for tokenization."""

import pytest

from namematch.utils.tokenize import Token, tokenize, compile_split


class TestTokenize:
    """Tests for tokenize()."""

    def test_splits_on_space_hyphen_underscore(self):
        """Test the default separators."""
        tokens = tokenize("JEAN-MICHEL DE_LA  FONTAINE", nchar_min=1)
        assert [t.text for t in tokens] == ["JEAN", "MICHEL", "DE", "LA", "FONTAINE"]

    def test_positions_are_one_based(self):
        """Test that positions start at 1."""
        tokens = tokenize("ANGELA MERKEL")
        assert [t.position for t in tokens] == [1, 2]

    def test_short_tokens_dropped_positions_kept(self):
        """Test that dropping short tokens does not renumber the rest."""
        tokens = tokenize("EMMANUEL J M MACRON", nchar_min=2)
        assert [t.text for t in tokens] == ["EMMANUEL", "MACRON"]
        assert [t.position for t in tokens] == [1, 4]

    def test_nchar_min_changes_token_count(self):
        """Test that a 3-letter token survives nchar_min=3 but not 4."""
        assert len(tokenize("charles abe smith", nchar_min=3)) == 3
        assert len(tokenize("charles abe smith", nchar_min=4)) == 2

    def test_empty_string(self):
        """Test that an empty name has no tokens."""
        assert tokenize("") == []

    def test_only_short_tokens(self):
        """Test that a name of initials has no tokens."""
        assert tokenize("J M F", nchar_min=2) == []

    def test_none(self):
        """Test that a missing name gives None, not an empty list."""
        assert tokenize(None) is None

    def test_custom_split(self):
        """Test a custom split pattern."""
        tokens = tokenize("SMITH/JONES", token_split=r"/")
        assert [t.text for t in tokens] == ["SMITH", "JONES"]

    def test_token_nchar(self):
        """Test the nchar property."""
        assert Token("DRAKE", 1).nchar == 5


class TestCompileSplit:
    """Tests for compile_split()."""

    def test_invalid_regex(self):
        """Test that a bad pattern raises ValueError."""
        with pytest.raises(ValueError):
            compile_split("[")
