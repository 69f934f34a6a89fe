"""
Name matching engine.

Token alignment, token distances and match classification. The batch
entry points (nmatch, nmatch_fast) live in namematch.matching.engine and
are re-exported from the top-level package.
"""

from .alignment import AlignedPair, Alignment, best_alignment, k_permutations
from .classifiers import match_eval, match_eval_token
from .distance import DISTANCE_METHODS, get_distance_function, osa_distance
from .summary import MatchSummary, TokenPairResult, classify, summarize

__all__ = [
    'AlignedPair',
    'Alignment',
    'best_alignment',
    'k_permutations',
    'match_eval',
    'match_eval_token',
    'DISTANCE_METHODS',
    'get_distance_function',
    'osa_distance',
    'MatchSummary',
    'TokenPairResult',
    'classify',
    'summarize',
]
