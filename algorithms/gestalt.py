"""
Ratcliff/Obershelp string matching, a.k.a. Gestalt Pattern Matching.

Find the longest common substring, then do the same on the pieces left
of it and right of it, never across it. The score is
2 * matched / (len(a) + len(b)).

Works on any sequence whose elements support ==. Text goes through
similarity_ratio, which compares extended grapheme clusters.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from utils.segment import graphemes

T = TypeVar("T")
Span = Tuple[int, int]


class Match(NamedTuple):
    a: int
    b: int
    size: int


def longest_common_substring_idxs(
    a: Sequence[T],
    b: Sequence[T],
    alo: int = 0,
    ahi: Optional[int] = None,
    blo: int = 0,
    bhi: Optional[int] = None,
) -> Tuple[Span, Span]:
    """
    Half-open ranges of one longest common run in a[alo:ahi] and b[blo:bhi].

    Ties go to the run whose end comes first in row-major (i, j) order.
    No match -> ((ahi, ahi), (bhi, bhi)), an empty range on both sides.
    """
    if ahi is None:
        ahi = len(a)
    if bhi is None:
        bhi = len(b)
    m, n = ahi - alo, bhi - blo
    w = n + 1
    lookup = [0] * ((m + 1) * w)  # flat (m+1) x (n+1), row-major
    best, end_i, end_j = 0, m, n
    for i in range(1, m + 1):
        x = a[alo + i - 1]
        row, prev = i * w, (i - 1) * w
        for j in range(1, n + 1):
            if x == b[blo + j - 1]:
                k = lookup[prev + j - 1] + 1
                lookup[row + j] = k
                if k > best:
                    best, end_i, end_j = k, i, j
    return (
        (alo + end_i - best, alo + end_i),
        (blo + end_j - best, blo + end_j),
    )


def matching_blocks(a: Sequence[T], b: Sequence[T]) -> List[Match]:
    """All runs the Ratcliff/Obershelp decomposition matches, in order."""
    blocks: List[Match] = []
    todo = [(0, len(a), 0, len(b))]
    # explicit stack of (alo, ahi, blo, bhi) windows rather than recursion
    while todo:
        alo, ahi, blo, bhi = todo.pop()
        (l1, r1), (l2, r2) = longest_common_substring_idxs(a, b, alo, ahi, blo, bhi)
        assert r1 - l1 == r2 - l2, "matched run differs in length between sides"
        if l1 == r1:
            continue
        blocks.append(Match(l1, l2, r1 - l1))
        if l1 > alo and l2 > blo:
            todo.append((alo, l1, blo, l2))
        if r1 < ahi and r2 < bhi:
            todo.append((r1, ahi, r2, bhi))
    blocks.sort()
    return blocks


def matching_count(a: Sequence[T], b: Sequence[T]) -> int:
    return sum(m.size for m in matching_blocks(a, b))


def ratio_from_matches(matched: int, n1: int, n2: int) -> float:
    total = n1 + n2
    if total == 0:
        return 0.0
    return (2.0 * matched) / total


def similarity_ratio_sequence(seq1: Sequence[T], seq2: Sequence[T]) -> float:
    return ratio_from_matches(matching_count(seq1, seq2), len(seq1), len(seq2))


def similarity_ratio(text1: str, text2: str) -> float:
    """Similarity of two texts, one grapheme cluster per unit."""
    return similarity_ratio_sequence(graphemes(text1), graphemes(text2))
