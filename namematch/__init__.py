"""namematch - Match proper names across data sources despite variation in format, order, spelling and accents."""

__version__ = "0.1.0"

from .config import MatchConfig, default_config
from .data.token_frequency import TokenFrequencyTable
from .matching.alignment import best_alignment
from .matching.classifiers import match_eval, match_eval_token
from .matching.distance import osa_distance
from .matching.engine import compare, compare_fast, compare_pair, nmatch, nmatch_fast, summaries_to_frame
from .matching.summary import MatchSummary, TokenPairResult
from .utils.standardize import name_standardize, standardize
from .utils.tokenize import Token, tokenize

__all__ = [
    'MatchConfig',
    'default_config',
    'TokenFrequencyTable',
    'best_alignment',
    'match_eval',
    'match_eval_token',
    'osa_distance',
    'compare',
    'compare_fast',
    'compare_pair',
    'nmatch',
    'nmatch_fast',
    'summaries_to_frame',
    'MatchSummary',
    'TokenPairResult',
    'name_standardize',
    'standardize',
    'Token',
    'tokenize',
]
