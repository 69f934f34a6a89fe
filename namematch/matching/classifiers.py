"""
Default match classification rules.

Both classifiers are plain functions called with keyword arguments, so a
replacement only needs to name the fields it uses and accept **kwargs for
the rest. Missing inputs always classify as False, never None.

Token classifier keywords: nchar_x, nchar_y, nchar_max, dist, token_x,
token_y, freq_x, freq_y, freq_score.

Overall classifier keywords: k_x, k_y, k_align, n_match, dist_total,
freq_score, plus any eval_params.
"""

from typing import Any, Optional


def match_eval_token(
    nchar_x: Optional[int] = None,
    nchar_y: Optional[int] = None,
    dist: Optional[int] = None,
    nchar_max: Optional[int] = None,
    **kwargs: Any,
) -> bool:
    """
    Decide whether two aligned tokens match.

    The allowed distance grows with the longer token's length:

    | nchar_max | max dist |
    |-----------|----------|
    | <= 3      | 0        |
    | 4         | 1        |
    | 5 - 8     | 2        |
    | >= 9      | 3        |

    Args:
        nchar_x: Length of token x
        nchar_y: Length of token y
        dist: String distance between the tokens
        nchar_max: max(nchar_x, nchar_y), derived if not given

    Returns:
        True if the tokens match
    """
    if dist is None:
        return False
    if nchar_max is None:
        if nchar_x is None or nchar_y is None:
            return False
        nchar_max = max(nchar_x, nchar_y)

    if nchar_max <= 3:
        return dist == 0
    if nchar_max == 4:
        return dist <= 1
    if nchar_max <= 8:
        return dist <= 2
    return dist <= 3


def match_eval(
    k_x: Optional[int] = None,
    k_y: Optional[int] = None,
    n_match: Optional[int] = None,
    n_match_crit: int = 2,
    **kwargs: Any,
) -> bool:
    """
    Decide whether two names match overall.

    Names match when every token of the longer name found a match, or when
    at least n_match_crit aligned tokens match.

    Args:
        k_x: Number of tokens in x
        k_y: Number of tokens in y
        n_match: Number of matching aligned tokens
        n_match_crit: Minimum matching tokens for an overall match

    Returns:
        True if the names match
    """
    if k_x is None or k_y is None or n_match is None:
        return False
    return n_match == max(k_x, k_y) or n_match >= n_match_crit
