"""
Unordered pair enumeration and sampling without replacement.

The n(n-1)/2 pairs (i, j) with 0 <= i < j < n are numbered in lexicographic
order:

    rank 0 -> (0, 1), rank 1 -> (0, 2), ..., rank n-2 -> (0, n-1),
    rank n-1 -> (1, 2), ...

pair_rank / unrank_pair convert between the two forms in O(1), so the
G(n, m) generator can draw m distinct ranks and decode only those, never
materializing the full candidate list.
"""
from math import isqrt
from typing import Dict, Iterator, List, Tuple

from forge.params import max_simple_edges


def pair_rank(i: int, j: int, n: int) -> int:
    """Lexicographic rank of the pair (i, j), i < j, among n vertices."""
    if not (0 <= i < j < n):
        raise ValueError(f"expected 0 <= i < j < n, got i={i}, j={j}, n={n}")
    # Pairs in rows 0..i-1 come first: sum of (n-1-r) for r < i.
    return i * (2 * n - i - 1) // 2 + (j - i - 1)


def unrank_pair(rank: int, n: int) -> Tuple[int, int]:
    """
    Inverse of pair_rank().

    Counting ranks from the end of the order turns row lookup into a
    triangular-number root, computed exactly with integer square roots.
    """
    total = max_simple_edges(n)
    if not (0 <= rank < total):
        raise ValueError(f"rank must be in [0, {total}), got {rank}")
    i = n - 2 - (isqrt(4 * n * (n - 1) - 8 * rank - 7) - 1) // 2
    j = rank + i + 1 - total + (n - i) * (n - i - 1) // 2
    return i, j


def iter_pairs(n: int) -> Iterator[Tuple[int, int]]:
    """All unordered pairs in rank order."""
    for i in range(n - 1):
        for j in range(i + 1, n):
            yield i, j


def sample_pair_ranks(total: int, m: int, rng) -> List[int]:
    """
    Draw m distinct integers uniformly from [0, total).

    Partial Fisher-Yates over the implicit array [0, 1, ..., total-1]: only
    positions that have been swapped are stored, so memory is O(m) no matter
    how large total is. Every m-subset is equally likely.

    Returns:
        The selected ranks in ascending order
    """
    if not (0 <= m <= total):
        raise ValueError(f"cannot draw {m} distinct values from {total}")
    swapped: Dict[int, int] = {}
    chosen: List[int] = []
    for pos in range(m):
        pick = pos + rng.uniform_int(total - pos)
        chosen.append(swapped.get(pick, pick))
        # Position pos is consumed; its value moves into the slot we took.
        swapped[pick] = swapped.get(pos, pos)
        swapped.pop(pos, None)
    chosen.sort()
    return chosen


def sample_pairs(n: int, m: int, rng) -> List[Tuple[int, int]]:
    """m distinct unordered pairs over n vertices, in rank order."""
    return [unrank_pair(rank, n) for rank in sample_pair_ranks(max_simple_edges(n), m, rng)]
