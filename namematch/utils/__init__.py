"""String preparation helpers: standardization and tokenization."""

from .standardize import standardize, name_standardize, is_missing
from .tokenize import Token, tokenize, DEFAULT_TOKEN_SPLIT

__all__ = [
    'standardize',
    'name_standardize',
    'is_missing',
    'Token',
    'tokenize',
    'DEFAULT_TOKEN_SPLIT',
]
