"""String standardization for proper names.

Names coming from two different sources rarely agree on case, accents or
punctuation. Standardization removes those differences before tokenizing:

1. Transliterate accented Latin letters to ASCII (é -> E, ß -> SS, Ø -> O)
2. Uppercase
3. Replace each run of punctuation with a single space
4. Squish whitespace (collapse runs, trim both ends)

E.g. "QUOIREZ, Françoise D." becomes "QUOIREZ FRANCOISE D".
"""

import math
import re
import unicodedata
from typing import Any, Optional

from unidecode import unidecode


# Unicode general categories starting with 'P' are punctuation. Symbols
# (currency, math) are left alone, as the POSIX [[:punct:]] class does for
# non-ASCII input.
_ASCII_PUNCT = re.compile(r'[!"#$%&\'()*+,\-./:;<=>?@\[\\\]^_`{|}~]+')
_WHITESPACE = re.compile(r'\s+')


def is_missing(value: Any) -> bool:
    """True for None, NaN and pandas.NA."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    # pandas.NA / NaT compare ambiguously; avoid importing pandas here
    return type(value).__name__ in ('NAType', 'NaTType')


def _transliterate_latin(text: str) -> str:
    """Map Latin letters with diacritics to ASCII, leave other scripts intact."""
    if text.isascii():
        return text

    out = []
    for char in text:
        if char.isascii():
            out.append(char)
            continue
        name = unicodedata.name(char, '')
        if (
            name.startswith(('LATIN', 'MODIFIER LETTER'))
            or unicodedata.category(char) == 'Mn'
        ):
            out.append(unidecode(char))
        else:
            out.append(char)
    return ''.join(out)


def _replace_punctuation(text: str) -> str:
    text = _ASCII_PUNCT.sub(' ', text)
    if text.isascii():
        return text
    return ''.join(
        ' ' if unicodedata.category(char).startswith('P') else char
        for char in text
    )


def standardize(x: Optional[str]) -> Optional[str]:
    """
    Standardize a name string prior to matching.

    Args:
        x: Name to standardize, or None

    Returns:
        Uppercase, accent-free, punctuation-free name with single spaces,
        or None if x is missing

    Raises:
        TypeError: If x is neither a string nor a missing value
    """
    if is_missing(x):
        return None
    if not isinstance(x, str):
        raise TypeError(f"Expected a string name, got {type(x).__name__}")

    # Transliterate before uppercasing: some Latin lowercase letters
    # uppercase to non-Latin code points ('ↄ' -> Roman numeral 'Ↄ')
    text = _transliterate_latin(x)
    text = _transliterate_latin(text.upper()).upper()
    text = _replace_punctuation(text)
    text = _WHITESPACE.sub(' ', text).strip()
    return text


# Alternative public name
name_standardize = standardize
