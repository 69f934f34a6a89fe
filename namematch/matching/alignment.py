"""
Optimal token alignment between two names.

The tokens of the smaller name are held in order while the tokens of the
larger name are permuted; every injective mapping is scored by its summed
token distance and the cheapest one wins. Candidate mappings are generated
lazily in lexicographic order of the larger side's indices, and ties keep
the first minimum in that order.

The search is factorial in the number of tokens. Real names rarely have
more than five or six tokens, so no attempt is made to prune beyond
stopping a candidate once it can no longer win.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..utils.tokenize import Token
from .distance import DistanceFunction, osa_distance


@dataclass(frozen=True)
class AlignedPair:
    """Two aligned tokens and the distance between them."""
    token_x: Token
    token_y: Token
    dist: int


@dataclass(frozen=True)
class Alignment:
    """
    Best alignment between two token sets.

    dist_total is None when either side has no tokens, which means no
    alignment is possible (as opposed to a perfect alignment of cost 0).
    """
    pairs: Tuple[AlignedPair, ...] = ()
    dist_total: Optional[int] = None

    @property
    def k_align(self) -> int:
        return len(self.pairs)

    @property
    def is_defined(self) -> bool:
        return self.dist_total is not None


def _next_permutation(values: List[int]) -> bool:
    """Rearrange values into the next lexicographic permutation, in place."""
    i = len(values) - 2
    while i >= 0 and values[i] >= values[i + 1]:
        i -= 1
    if i < 0:
        return False

    j = len(values) - 1
    while values[j] <= values[i]:
        j -= 1
    values[i], values[j] = values[j], values[i]
    values[i + 1:] = reversed(values[i + 1:])
    return True


def k_permutations(n: int, k: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield every ordered selection of k indices from range(n).

    Selections come in lexicographic order, which is also the order in which
    they first appear when walking the full permutations of range(n) and
    keeping the first k positions.
    """
    if k < 0 or k > n:
        raise ValueError(f"Cannot take {k} of {n} indices")
    if k == 0:
        yield ()
        return

    values = list(range(n))
    while True:
        yield tuple(values[:k])
        # Jump to the last permutation sharing this prefix, then step past it
        values[k:] = reversed(values[k:])
        if not _next_permutation(values):
            return


def best_alignment(
    tokens_x: Sequence[Token],
    tokens_y: Sequence[Token],
    distance: DistanceFunction = osa_distance,
) -> Alignment:
    """
    Find the token alignment minimizing total distance.

    Args:
        tokens_x: Tokens of name x
        tokens_y: Tokens of name y
        distance: Token distance function, always called as distance(x, y)

    Returns:
        Alignment of min(len(tokens_x), len(tokens_y)) pairs ordered by
        position in x; undefined (no pairs, dist_total None) if either side
        is empty
    """
    k_x = len(tokens_x)
    k_y = len(tokens_y)
    if k_x == 0 or k_y == 0:
        return Alignment()

    # dmat[i][j] is the distance between x token i and y token j
    dmat = [[distance(tx.text, ty.text) for ty in tokens_y] for tx in tokens_x]

    x_is_larger = k_x > k_y
    k_min = min(k_x, k_y)
    k_max = max(k_x, k_y)

    if x_is_larger:
        # rows index the smaller side (y), columns the larger side (x)
        cost = [[dmat[i][j] for i in range(k_x)] for j in range(k_y)]
    else:
        cost = dmat

    best_total = None
    best_cols: Tuple[int, ...] = ()
    for cols in k_permutations(k_max, k_min):
        total = 0
        for row, col in enumerate(cols):
            total += cost[row][col]
            if best_total is not None and total >= best_total:
                break
        else:
            if best_total is None or total < best_total:
                best_total = total
                best_cols = cols
                if best_total == 0:
                    break

    if x_is_larger:
        index_pairs = sorted((col, row) for row, col in enumerate(best_cols))
    else:
        index_pairs = list(enumerate(best_cols))

    pairs = tuple(
        AlignedPair(tokens_x[i], tokens_y[j], dmat[i][j])
        for i, j in index_pairs
    )
    return Alignment(pairs=pairs, dist_total=best_total)
