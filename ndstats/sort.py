"""
In-place selection (quickselect) over a single mutable 1-dimensional sequence.

All functions operate on the inclusive range ``seq[lo..hi]`` through explicit
bounds, so a numpy view and a Python list are treated the same way and no
auxiliary copy of the data is made. Callers get back order statistics; the
order of the sequence afterwards is unspecified, but it always holds exactly
the values it held before (pure permutation).
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, MutableSequence, Optional


def partition_mut(seq: MutableSequence, pivot_index: int, lo: int = 0, hi: Optional[int] = None) -> int:
    """
    Partition ``seq[lo..hi]`` around the value found at ``pivot_index``.

    Returns the final position ``p`` of the pivot value, such that
    - every element in ``seq[lo:p]`` is strictly less than the pivot,
    - ``seq[p]`` is the pivot,
    - every element in ``seq[p+1:hi+1]`` is greater than or equal to the pivot.

    Ties go to the upper side.
    """
    if hi is None:
        hi = len(seq) - 1
    if not lo <= pivot_index <= hi:
        raise IndexError(f"pivot index {pivot_index} outside range [{lo}, {hi}]")

    pivot = seq[pivot_index]
    seq[pivot_index], seq[lo] = seq[lo], seq[pivot_index]

    i = lo + 1
    j = hi
    while True:
        while i <= j and seq[i] < pivot:
            i += 1
        while j > lo + 1 and pivot <= seq[j]:
            j -= 1
        if i >= j:
            break
        seq[i], seq[j] = seq[j], seq[i]
        i += 1
        j -= 1

    # seq[lo+1:i] < pivot and seq[i:hi+1] >= pivot: drop the pivot in between
    seq[lo], seq[i - 1] = seq[i - 1], seq[lo]
    return i - 1


def _select(seq: MutableSequence, rank: int, lo: int, hi: int) -> Any:
    """Select the rank'th smallest element, searching only seq[lo..hi]."""
    while lo < hi:
        p = partition_mut(seq, hi, lo, hi)
        if p == rank:
            return seq[p]
        if p < rank:
            lo = p + 1
        else:
            hi = p - 1
    return seq[rank]


def _check_rank(rank: int, n: int) -> int:
    if not 0 <= rank < n:
        raise IndexError(f"rank {rank} out of range for sequence of length {n}")
    return rank


def get_from_sorted_mut(seq: MutableSequence, rank: int) -> Any:
    """
    Return the value that would sit at position ``rank`` if ``seq`` were sorted.

    Quickselect with the last element of the current range as pivot:
    average O(n), worst case O(n^2) (e.g. already sorted input).
    """
    n = len(seq)
    _check_rank(rank, n)
    return _select(seq, rank, 0, n - 1)


def get_many_from_sorted_mut(seq: MutableSequence, ranks: Iterable[int]) -> Dict[int, Any]:
    """
    Return ``{rank: value}`` for every requested rank, in ascending rank order.

    Ranks may be given in any order and may repeat; each distinct rank is
    resolved exactly once. After resolving rank ``r`` the value at ``seq[r]``
    is in its sorted position and everything above it is ``>=`` it, so the
    next (larger) rank is searched in ``seq[r+1:]`` only.
    """
    n = len(seq)
    # sorted + deduplicated: the narrowing below is only valid on this input
    ordered: List[int] = sorted({_check_rank(int(r), n) for r in ranks})

    values: Dict[int, Any] = {}
    lo = 0
    for rank in ordered:
        values[rank] = _select(seq, rank, lo, n - 1)
        lo = rank + 1
    return values
