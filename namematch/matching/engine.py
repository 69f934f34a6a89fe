"""
Batch name comparison.

Compares two aligned sequences of names element by element:

1. Standardize both names (default: standardize(); std=None disables)
2. Tokenize, dropping tokens shorter than nchar_min
3. Find the token alignment minimizing summed string distance
4. Classify each aligned token pair (default: match_eval_token())
5. Count tokens, aligned tokens, matching tokens and total distance
6. Classify the pair overall (default: match_eval())

Pairs are independent, so a batch can be spread over worker processes.
A missing name never stops the batch; it yields an all-missing summary
that is not a match.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd

from ..config import MatchConfig, default_config
from ..data.token_frequency import MAX_FREQ
from ..utils.standardize import is_missing
from ..utils.tokenize import Token, tokenize
from .alignment import best_alignment
from .summary import MatchSummary, classify, score_pairs, summarize

logger = logging.getLogger(__name__)

# Alignment cost grows factorially with the number of tokens
MAX_TOKENS_WARN = 8

FAST_COLUMNS = ['k_x', 'k_y', 'k_align', 'n_match', 'dist_total', 'freq1', 'freq2', 'freq3']

FastRow = Tuple[Optional[int], ...]


def _standardize(value: Any, config: MatchConfig) -> Optional[str]:
    if is_missing(value):
        return None
    if config.std is None:
        if not isinstance(value, str):
            raise TypeError(f"Expected a string name, got {type(value).__name__}")
        return value
    result = config.std(value, **config.std_kwargs)
    return None if is_missing(result) else result


def _tokens(value: Any, config: MatchConfig) -> Optional[List[Token]]:
    tokens = tokenize(_standardize(value, config), config.nchar_min, config.split_pattern)
    if tokens is not None and len(tokens) > MAX_TOKENS_WARN:
        logger.warning(
            f"Name has {len(tokens)} tokens; alignment search is factorial in token count"
        )
    return tokens


def compare_pair(x: Any, y: Any, config: MatchConfig = default_config, id: int = 0) -> MatchSummary:
    """
    Compare a single pair of names.

    Args:
        x: First name (None/NaN for missing)
        y: Second name (None/NaN for missing)
        config: Matching options
        id: Position of the pair in its batch

    Returns:
        Classified MatchSummary
    """
    tokens_x = _tokens(x, config)
    tokens_y = _tokens(y, config)
    if tokens_x is None or tokens_y is None:
        return MatchSummary.missing(id)

    alignment = best_alignment(tokens_x, tokens_y, config.distance)
    summary = summarize(
        alignment,
        k_x=len(tokens_x),
        k_y=len(tokens_y),
        id=id,
        eval_fn_token=config.eval_fn_token,
        token_freq=config.token_freq,
        return_alignment=config.return_alignment,
    )
    return classify(summary, config.eval_fn, config.eval_params)


def compare_pair_fast(x: Any, y: Any, config: MatchConfig = default_config) -> FastRow:
    """
    Compare a single pair of names, returning only the fast-path columns.

    Returns:
        (k_x, k_y, k_align, n_match, dist_total, freq1, freq2, freq3)
    """
    tokens_x = _tokens(x, config)
    tokens_y = _tokens(y, config)
    if tokens_x is None or tokens_y is None:
        return (None,) * len(FAST_COLUMNS)

    k_x = len(tokens_x)
    k_y = len(tokens_y)
    alignment = best_alignment(tokens_x, tokens_y, config.distance)
    if not alignment.is_defined:
        return (k_x, k_y, 0, None, None, None, None, None)

    pairs = score_pairs(alignment, config.eval_fn_token, config.token_freq)
    n_match = sum(1 for p in pairs if p.is_match)

    freqs: List[Optional[int]] = [None, None, None]
    for i, pair in enumerate(pairs[:3]):
        # Two valid frequencies can still sum past the Int32 range
        if pair.freq_score is not None and pair.freq_score <= MAX_FREQ:
            freqs[i] = pair.freq_score

    return (k_x, k_y, alignment.k_align, n_match, alignment.dist_total, *freqs)


def _compare_chunk(start: int, xs: Sequence[Any], ys: Sequence[Any], config: MatchConfig) -> List[MatchSummary]:
    return [compare_pair(x, y, config, id=start + i) for i, (x, y) in enumerate(zip(xs, ys))]


def _compare_chunk_fast(start: int, xs: Sequence[Any], ys: Sequence[Any], config: MatchConfig) -> List[FastRow]:
    return [compare_pair_fast(x, y, config) for x, y in zip(xs, ys)]


def _as_list(values: Union[str, Iterable[Any], None]) -> List[Any]:
    if values is None or isinstance(values, str):
        return [values]
    return list(values)


def _resolve_config(config: Optional[MatchConfig], options: dict) -> MatchConfig:
    config = config if config is not None else default_config
    if options:
        # replace() re-runs validation
        config = replace(config, **options)
    return config


def _run_batch(worker, xs: List[Any], ys: List[Any], config: MatchConfig) -> list:
    if len(xs) != len(ys):
        raise ValueError(f"x and y must have the same length ({len(xs)} vs {len(ys)})")

    n_missing = sum(1 for x, y in zip(xs, ys) if is_missing(x) or is_missing(y))
    logger.debug(
        f"Comparing {len(xs)} name pairs ({n_missing} with a missing name) "
        f"using {config.n_jobs} worker(s)"
    )

    size = config.chunk_size
    starts = range(0, len(xs), size)

    results = []
    if config.n_jobs == 1 or len(xs) <= size:
        for start in starts:
            results.extend(worker(start, xs[start:start + size], ys[start:start + size], config))
    else:
        # Workers receive a pickled copy of config, so strategy functions
        # must be importable module-level callables
        with ProcessPoolExecutor(max_workers=config.n_jobs) as executor:
            futures = [
                executor.submit(worker, start, xs[start:start + size], ys[start:start + size], config)
                for start in starts
            ]
            for future in futures:
                results.extend(future.result())

    logger.debug(f"Finished comparing {len(results)} name pairs")
    return results


def nmatch(
    x: Union[str, Iterable[Any]],
    y: Union[str, Iterable[Any]],
    config: Optional[MatchConfig] = None,
    **options: Any,
) -> Union[List[bool], List[MatchSummary]]:
    """
    Compare two sequences of proper names element by element.

    Args:
        x: Names from the first source
        y: Names from the second source, same length as x
        config: Matching options (default_config if None)
        **options: MatchConfig fields overriding config, e.g. nchar_min=3,
            eval_fn=my_classifier, return_full=True

    Returns:
        List of booleans, or of MatchSummary if return_full is set

    Raises:
        ValueError: On mismatched lengths or invalid options

    Example:
        >>> nmatch(["Beyoncé Knowles"], ["Beyonce Knowles-Carter"])
        [True]
    """
    config = _resolve_config(config, options)
    summaries = _run_batch(_compare_chunk, _as_list(x), _as_list(y), config)

    if config.return_full:
        return summaries
    return [s.is_match for s in summaries]


def nmatch_fast(
    x: Union[str, Iterable[Any]],
    y: Union[str, Iterable[Any]],
    config: Optional[MatchConfig] = None,
    **options: Any,
) -> pd.DataFrame:
    """
    Compare names returning only integer match details.

    Skips building per-pair records. Every column is a nullable Int32:
    k_x, k_y, k_align, n_match, dist_total and freq1..freq3 (summed token
    frequencies of the first three aligned pairs in x order, when a
    frequency table is given).

    Args:
        x: Names from the first source
        y: Names from the second source, same length as x
        config: Matching options (default_config if None)
        **options: MatchConfig fields overriding config

    Returns:
        DataFrame with one row per pair
    """
    config = _resolve_config(config, options)
    rows = _run_batch(_compare_chunk_fast, _as_list(x), _as_list(y), config)

    columns = list(zip(*rows)) if rows else [()] * len(FAST_COLUMNS)
    return pd.DataFrame({
        name: pd.array(list(values), dtype='Int32')
        for name, values in zip(FAST_COLUMNS, columns)
    })


def summaries_to_frame(summaries: Sequence[MatchSummary]) -> pd.DataFrame:
    """
    Tabulate match summaries.

    Counts become nullable Int32 columns; the align column is included only
    when alignment details were kept.
    """
    records = [s.to_dict() for s in summaries]
    df = pd.DataFrame({
        'id': pd.Series([r['id'] for r in records], dtype='int64'),
        'is_match': pd.Series([r['is_match'] for r in records], dtype=bool),
    })
    for name in ('k_x', 'k_y', 'k_align', 'n_match', 'dist_total'):
        df[name] = pd.array([r[name] for r in records], dtype='Int32')
    df['freq_score'] = pd.Series([r['freq_score'] for r in records], dtype=object)
    if any('align' in r for r in records):
        df['align'] = pd.Series([r.get('align') for r in records], dtype=object)
    return df


# Names used in the language-independent interface
compare = nmatch
compare_fast = nmatch_fast
