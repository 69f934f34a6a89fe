"""Tests for the token frequency table."""

import pickle

import pandas as pd
import pytest

from namematch.data.token_frequency import MAX_FREQ, TokenFrequencyTable
from namematch.utils.standardize import standardize


@pytest.fixture
def freq_table():
    """Frequencies for a handful of standardized tokens."""
    return TokenFrequencyTable({"CHARLES": 100, "SMITH": 50, "SMYTH": 20})


class TestTokenFrequencyTable:
    """Tests for TokenFrequencyTable."""

    def test_lookup(self, freq_table):
        """Test that known tokens return their frequency."""
        assert freq_table.lookup("SMITH") == 50

    def test_unknown_is_none(self, freq_table):
        """Test that absent tokens are unknown, not zero."""
        assert freq_table.lookup("ABE") is None
        assert freq_table.lookup(None) is None

    def test_zero_frequency(self):
        """Test that a zero frequency is kept as 0."""
        assert TokenFrequencyTable({"RARE": 0}).lookup("RARE") == 0

    def test_read_only(self, freq_table):
        """Test that the table cannot be modified after construction."""
        with pytest.raises(TypeError):
            freq_table._freq["NEW"] = 1

    def test_container_protocol(self, freq_table):
        """Test len, membership and iteration."""
        assert len(freq_table) == 3
        assert "CHARLES" in freq_table
        assert sorted(freq_table) == ["CHARLES", "SMITH", "SMYTH"]

    def test_from_sequences(self):
        """Test building from parallel sequences."""
        tokens = [standardize(t) for t in ("charles", "smith", "smyth")]
        table = TokenFrequencyTable.from_sequences(tokens, [100, 50, 20])
        assert table.lookup("CHARLES") == 100

    def test_from_sequences_length_mismatch(self):
        """Test that mismatched lengths raise ValueError."""
        with pytest.raises(ValueError, match="differ in length"):
            TokenFrequencyTable.from_sequences(["A", "B"], [1])

    @pytest.mark.parametrize("freq", [-1, None, 1.5, "ten", True, MAX_FREQ + 1])
    def test_invalid_frequency(self, freq):
        """Test that bad frequencies raise ValueError."""
        with pytest.raises(ValueError):
            TokenFrequencyTable({"SMITH": freq})

    def test_largest_frequency(self):
        """Test that the Int32 maximum is accepted."""
        assert TokenFrequencyTable({"SMITH": MAX_FREQ}).lookup("SMITH") == MAX_FREQ

    def test_invalid_token(self):
        """Test that non-string tokens raise ValueError."""
        with pytest.raises(ValueError):
            TokenFrequencyTable({None: 5})

    def test_from_frame_named_columns(self):
        """Test building from a frame with the default column names."""
        df = pd.DataFrame({"freq": [7, 3], "token_std": ["MARTIN", "DUPONT"]})
        table = TokenFrequencyTable.from_frame(df)
        assert table.lookup("MARTIN") == 7

    def test_from_frame_positional(self):
        """Test that any two-column frame is read as token then frequency."""
        df = pd.DataFrame({"x1": ["CHARLES", "SMITH"], "x2": [100, 50]})
        assert TokenFrequencyTable.from_frame(df).lookup("SMITH") == 50

    def test_from_frame_ambiguous(self):
        """Test that an unrecognized frame layout raises ValueError."""
        df = pd.DataFrame({"a": ["X"], "b": [1], "c": [2]})
        with pytest.raises(ValueError):
            TokenFrequencyTable.from_frame(df)

    def test_from_csv(self, tmp_path):
        """Test loading from a CSV file."""
        path = tmp_path / "freq.csv"
        path.write_text("token_std,freq\nMARTIN,12\nNA,4\n", encoding="utf-8")
        table = TokenFrequencyTable.from_csv(path)
        assert table.lookup("MARTIN") == 12
        assert table.lookup("NA") == 4

    def test_pickle_round_trip(self, freq_table):
        """Test that tables can be sent to worker processes."""
        restored = pickle.loads(pickle.dumps(freq_table))
        assert restored.lookup("SMYTH") == 20
        assert len(restored) == 3
