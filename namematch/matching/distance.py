"""
Token-level string distances.

All metrics return a non-negative integer edit count. The default, optimal
string alignment (OSA), is Levenshtein distance plus transposition of two
adjacent characters, where no substring is edited more than once. So
"CA" -> "ABC" costs 3 under OSA but 2 under unrestricted Damerau-Levenshtein.
"""

from typing import Callable, Dict, Union

from rapidfuzz.distance import OSA, DamerauLevenshtein, Hamming, Indel, Levenshtein


DistanceFunction = Callable[[str, str], int]


def osa_distance(a: str, b: str) -> int:
    """Optimal string alignment distance between two tokens."""
    return OSA.distance(a, b)


def levenshtein_distance(a: str, b: str) -> int:
    """Insertions, deletions and substitutions, unit cost."""
    return Levenshtein.distance(a, b)


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Full Damerau-Levenshtein (a substring may be edited more than once)."""
    return DamerauLevenshtein.distance(a, b)


def lcs_distance(a: str, b: str) -> int:
    """Insertions and deletions only."""
    return Indel.distance(a, b)


def hamming_distance(a: str, b: str) -> int:
    """Substitutions at equal positions; the shorter token is padded."""
    return Hamming.distance(a, b, pad=True)


DISTANCE_METHODS: Dict[str, DistanceFunction] = {
    'osa': osa_distance,
    'lv': levenshtein_distance,
    'dl': damerau_levenshtein_distance,
    'lcs': lcs_distance,
    'hamming': hamming_distance,
}


def get_distance_function(method: Union[str, DistanceFunction] = 'osa') -> DistanceFunction:
    """
    Resolve a distance method name or callable.

    Args:
        method: One of DISTANCE_METHODS, or a callable (a, b) -> int

    Returns:
        Distance function

    Raises:
        ValueError: If method is an unknown name or neither str nor callable
    """
    if callable(method):
        return method
    if isinstance(method, str):
        try:
            return DISTANCE_METHODS[method.lower()]
        except KeyError:
            supported = ', '.join(sorted(DISTANCE_METHODS))
            raise ValueError(
                f"Unsupported distance method {method!r} (expected one of: {supported})"
            ) from None
    raise ValueError(f"dist_method must be a name or callable, got {type(method).__name__}")
