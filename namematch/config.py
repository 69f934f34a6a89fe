"""Configuration for name matching."""

import numbers
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Pattern, Union

import pandas as pd

from .data.token_frequency import TokenFrequencyTable
from .matching.classifiers import match_eval, match_eval_token
from .matching.distance import DistanceFunction, get_distance_function
from .utils.standardize import standardize
from .utils.tokenize import DEFAULT_TOKEN_SPLIT, compile_split


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class MatchConfig:
    """
    Options controlling how name pairs are compared.

    Set once per batch and shared read-only by every pair. Invalid values
    raise ValueError on construction, before any name is processed.
    """

    # Tokenization
    token_split: Union[str, Pattern[str]] = DEFAULT_TOKEN_SPLIT
    nchar_min: int = 2

    # Token distance: a name from distance.DISTANCE_METHODS or a callable
    dist_method: Union[str, DistanceFunction] = 'osa'

    # Standardization; None disables it
    std: Optional[Callable[..., Optional[str]]] = standardize
    std_kwargs: Dict[str, Any] = field(default_factory=dict)

    # Classification
    eval_fn_token: Callable[..., Any] = match_eval_token
    eval_fn: Callable[..., Any] = match_eval
    eval_params: Dict[str, Any] = field(default_factory=lambda: {'n_match_crit': 2})

    # Optional token frequencies, annotation only
    token_freq: Optional[TokenFrequencyTable] = None

    # Output
    return_full: bool = False
    return_alignment: bool = False

    # Execution
    n_jobs: int = 1
    chunk_size: int = 1000

    def __post_init__(self):
        """Validate options."""
        if not _is_integer(self.nchar_min) or self.nchar_min < 0:
            raise ValueError(f"nchar_min must be a non-negative integer, got {self.nchar_min!r}")

        compile_split(self.token_split)
        get_distance_function(self.dist_method)

        if self.std is not None and not callable(self.std):
            raise ValueError("std must be callable or None")
        if not callable(self.eval_fn_token):
            raise ValueError("eval_fn_token must be callable")
        if not callable(self.eval_fn):
            raise ValueError("eval_fn must be callable")

        if isinstance(self.token_freq, pd.DataFrame):
            object.__setattr__(self, 'token_freq', TokenFrequencyTable.from_frame(self.token_freq))
        elif isinstance(self.token_freq, Mapping):
            object.__setattr__(self, 'token_freq', TokenFrequencyTable(self.token_freq))
        elif self.token_freq is not None and not isinstance(self.token_freq, TokenFrequencyTable):
            raise ValueError(
                f"token_freq must be a TokenFrequencyTable, mapping or DataFrame, "
                f"got {type(self.token_freq).__name__}"
            )

        if not _is_integer(self.n_jobs) or self.n_jobs < 1:
            raise ValueError(f"n_jobs must be >= 1, got {self.n_jobs!r}")
        if not _is_integer(self.chunk_size) or self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size!r}")

        # numpy integers (e.g. read from a DataFrame) are stored as int
        for name in ('nchar_min', 'n_jobs', 'chunk_size'):
            object.__setattr__(self, name, int(getattr(self, name)))

    @property
    def split_pattern(self) -> Pattern[str]:
        return compile_split(self.token_split)

    @property
    def distance(self) -> DistanceFunction:
        return get_distance_function(self.dist_method)


# Global configuration instance
default_config = MatchConfig()
