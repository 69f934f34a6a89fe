"""
Per-pair match summaries.

A name pair is scored in two steps: summarize() classifies each aligned token
pair and counts the results, then classify() applies the overall decision
rule to those counts.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Tuple

from ..data.token_frequency import TokenFrequencyTable
from ..utils.standardize import is_missing
from .alignment import Alignment
from .classifiers import match_eval, match_eval_token


def _as_bool(value: Any) -> bool:
    # Missing classifier results (None, NaN, pd.NA) count as no match
    return False if is_missing(value) else bool(value)


@dataclass(frozen=True)
class TokenPairResult:
    """Classification of one aligned token pair."""
    token_x: str
    token_y: str
    position_x: int
    position_y: int
    dist: int
    is_match: bool
    freq_x: Optional[int] = None
    freq_y: Optional[int] = None

    @property
    def freq_score(self) -> Optional[int]:
        """Summed frequency of both tokens, None if either is unknown."""
        if self.freq_x is None or self.freq_y is None:
            return None
        return self.freq_x + self.freq_y


@dataclass(frozen=True)
class MatchSummary:
    """
    Match details for one pair of names.

    Every numeric field is None when either name was missing. n_match and
    dist_total are also None when one name has no tokens left after
    filtering, since no alignment exists.
    """
    id: int
    is_match: bool = False
    k_x: Optional[int] = None
    k_y: Optional[int] = None
    k_align: Optional[int] = None
    n_match: Optional[int] = None
    dist_total: Optional[int] = None
    freq_score: Optional[str] = None
    align: Optional[Tuple[TokenPairResult, ...]] = None

    @classmethod
    def missing(cls, id: int) -> 'MatchSummary':
        """Summary for a pair where at least one name is missing."""
        return cls(id=id)

    def classifier_fields(self) -> Dict[str, Any]:
        """Fields passed to the overall classifier."""
        return {
            'k_x': self.k_x,
            'k_y': self.k_y,
            'k_align': self.k_align,
            'n_match': self.n_match,
            'dist_total': self.dist_total,
            'freq_score': self.freq_score,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Flat record, one key per output column."""
        record = {'id': self.id, 'is_match': self.is_match}
        record.update(self.classifier_fields())
        if self.align is not None:
            record['align'] = self.align
        return record


def score_pairs(
    alignment: Alignment,
    eval_fn_token: Callable[..., Any] = match_eval_token,
    token_freq: Optional[TokenFrequencyTable] = None,
) -> Tuple[TokenPairResult, ...]:
    """Classify every aligned token pair."""
    results = []
    for pair in alignment.pairs:
        x = pair.token_x.text
        y = pair.token_y.text
        freq_x = token_freq.lookup(x) if token_freq is not None else None
        freq_y = token_freq.lookup(y) if token_freq is not None else None
        freq_score = None if freq_x is None or freq_y is None else freq_x + freq_y

        is_match = eval_fn_token(
            nchar_x=len(x),
            nchar_y=len(y),
            nchar_max=max(len(x), len(y)),
            dist=pair.dist,
            token_x=x,
            token_y=y,
            freq_x=freq_x,
            freq_y=freq_y,
            freq_score=freq_score,
        )
        results.append(TokenPairResult(
            token_x=x,
            token_y=y,
            position_x=pair.token_x.position,
            position_y=pair.token_y.position,
            dist=pair.dist,
            is_match=_as_bool(is_match),
            freq_x=freq_x,
            freq_y=freq_y,
        ))
    return tuple(results)


def collapse_freq_scores(pairs: Tuple[TokenPairResult, ...]) -> str:
    """Join summed pair frequencies into one string, e.g. '200, NA, 70'."""
    return ', '.join(
        'NA' if p.freq_score is None else str(p.freq_score) for p in pairs
    )


def summarize(
    alignment: Alignment,
    k_x: int,
    k_y: int,
    id: int = 0,
    eval_fn_token: Callable[..., Any] = match_eval_token,
    token_freq: Optional[TokenFrequencyTable] = None,
    return_alignment: bool = False,
) -> MatchSummary:
    """
    Count matching token pairs in an alignment.

    The returned summary is not yet classified (is_match is False); pass
    it to classify().

    Args:
        alignment: Best alignment between the two token sets
        k_x: Number of tokens in x after filtering
        k_y: Number of tokens in y after filtering
        id: Position of the pair in its batch
        eval_fn_token: Token match classifier
        token_freq: Optional frequency table for annotation
        return_alignment: Keep the per-pair details on the summary

    Returns:
        MatchSummary with counts filled in
    """
    pairs = score_pairs(alignment, eval_fn_token, token_freq)

    if alignment.is_defined:
        n_match = sum(1 for p in pairs if p.is_match)
        freq_score = collapse_freq_scores(pairs) if token_freq is not None else None
    else:
        n_match = None
        freq_score = None

    return MatchSummary(
        id=id,
        k_x=k_x,
        k_y=k_y,
        k_align=min(k_x, k_y),
        n_match=n_match,
        dist_total=alignment.dist_total,
        freq_score=freq_score,
        align=pairs if return_alignment else None,
    )


def classify(
    summary: MatchSummary,
    eval_fn: Callable[..., Any] = match_eval,
    eval_params: Optional[Dict[str, Any]] = None,
) -> MatchSummary:
    """
    Apply the overall match rule to a summary.

    A pair with a missing name is never a match, whatever eval_fn says.

    Returns:
        Copy of summary with is_match set
    """
    if summary.k_x is None or summary.k_y is None:
        return replace(summary, is_match=False)

    kwargs = summary.classifier_fields()
    kwargs.update(eval_params or {})
    is_match = eval_fn(**kwargs)
    return replace(summary, is_match=_as_bool(is_match))
