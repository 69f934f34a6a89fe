"""Split standardized names into tokens."""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Union


# Each run of one or more dash, underscore or whitespace characters
DEFAULT_TOKEN_SPLIT = r'[-_\s]+'


@dataclass(frozen=True)
class Token:
    """A single name token and its 1-based position in the unfiltered split."""
    text: str
    position: int

    @property
    def nchar(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


def compile_split(token_split: Union[str, Pattern[str]]) -> Pattern[str]:
    """Compile a split pattern, reporting bad regexes as ValueError."""
    if isinstance(token_split, re.Pattern):
        return token_split
    try:
        return re.compile(token_split)
    except re.error as e:
        raise ValueError(f"Invalid token_split pattern {token_split!r}: {e}") from e


def tokenize(
    x: Optional[str],
    nchar_min: int = 2,
    token_split: Union[str, Pattern[str]] = DEFAULT_TOKEN_SPLIT,
) -> Optional[List[Token]]:
    """
    Tokenize a standardized name.

    Pieces are numbered before short ones are dropped, so positions keep
    referring to the original split even when a token is filtered out.

    Args:
        x: Standardized name, or None
        nchar_min: Minimum token length to keep
        token_split: Regex separating tokens

    Returns:
        Tokens in their original order, or None if x is None
    """
    if x is None:
        return None

    pattern = compile_split(token_split)
    tokens = []
    for position, piece in enumerate(pattern.split(x), start=1):
        if piece and len(piece) >= nchar_min:
            tokens.append(Token(piece, position))
    return tokens
