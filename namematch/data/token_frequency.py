"""
Token frequency lookup.

Maps standardized tokens to how often they occur in the population of
interest (e.g. "MARTIN" is far more common than "QUOIREZ"). Frequencies only
annotate aligned token pairs; they do not change match decisions unless a
custom classifier uses them.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd

from ..utils.standardize import is_missing

logger = logging.getLogger(__name__)

# Frequencies are tabulated as nullable Int32
MAX_FREQ = 2**31 - 1


class TokenFrequencyTable:
    """Read-only mapping of standardized token to frequency."""

    __slots__ = ('_freq',)

    def __init__(self, frequencies: Optional[Mapping[str, int]] = None):
        """
        Build a table from a token -> frequency mapping.

        Args:
            frequencies: Standardized tokens mapped to non-negative counts

        Raises:
            ValueError: If a token is missing or a frequency is missing,
                non-integer, negative or above MAX_FREQ
        """
        table = {}
        for token, freq in (frequencies or {}).items():
            table[self._check_token(token)] = self._check_freq(token, freq)
        self._freq = MappingProxyType(table)

    @staticmethod
    def _check_token(token: Any) -> str:
        if is_missing(token) or not isinstance(token, str):
            raise ValueError(f"Frequency table tokens must be strings, got {token!r}")
        return token

    @staticmethod
    def _check_freq(token: str, freq: Any) -> int:
        if is_missing(freq) or isinstance(freq, bool):
            raise ValueError(f"Invalid frequency for token {token!r}: {freq!r}")
        try:
            value = int(freq)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid frequency for token {token!r}: {freq!r}") from e
        if value != freq or not 0 <= value <= MAX_FREQ:
            raise ValueError(f"Invalid frequency for token {token!r}: {freq!r}")
        return value

    @classmethod
    def from_sequences(cls, tokens: Iterable[str], freqs: Iterable[int]) -> 'TokenFrequencyTable':
        """
        Build a table from parallel token and frequency sequences.

        Raises:
            ValueError: If the sequences differ in length
        """
        tokens = list(tokens)
        freqs = list(freqs)
        if len(tokens) != len(freqs):
            raise ValueError(
                f"Token and frequency sequences differ in length ({len(tokens)} vs {len(freqs)})"
            )
        return cls(dict(zip(tokens, freqs)))

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        token_col: str = 'token_std',
        freq_col: str = 'freq',
    ) -> 'TokenFrequencyTable':
        """
        Build a table from a DataFrame.

        A frame without the named columns is accepted if it has exactly two
        columns, read as token then frequency.

        Raises:
            ValueError: If the columns cannot be identified
        """
        if token_col in df.columns and freq_col in df.columns:
            tokens, freqs = df[token_col], df[freq_col]
        elif df.shape[1] == 2:
            tokens, freqs = df.iloc[:, 0], df.iloc[:, 1]
        else:
            raise ValueError(
                f"Frequency frame needs columns {token_col!r} and {freq_col!r} "
                f"or exactly two columns, got {list(df.columns)}"
            )
        table = cls.from_sequences(tokens.tolist(), freqs.tolist())
        logger.debug(f"Loaded {len(table)} token frequencies from frame")
        return table

    @classmethod
    def from_csv(
        cls,
        path: Union[str, Path],
        token_col: str = 'token_std',
        freq_col: str = 'freq',
        **read_csv_kwargs: Any,
    ) -> 'TokenFrequencyTable':
        """Load a table from a CSV file via pandas.read_csv."""
        # keep_default_na=False so a token such as "NA" stays a token
        df = pd.read_csv(path, keep_default_na=False, **read_csv_kwargs)
        logger.debug(f"Read token frequency file {path}")
        return cls.from_frame(df, token_col=token_col, freq_col=freq_col)

    def lookup(self, token: Optional[str]) -> Optional[int]:
        """Frequency of token, or None if unknown."""
        if token is None:
            return None
        return self._freq.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._freq

    def __len__(self) -> int:
        return len(self._freq)

    def __iter__(self):
        return iter(self._freq)

    def __repr__(self) -> str:
        return f"TokenFrequencyTable({len(self._freq)} tokens)"

    def __getstate__(self):
        return dict(self._freq)

    def __setstate__(self, state):
        self._freq = MappingProxyType(state)
