"""
Sorting algorithms for the alternating disks problem.

Both algorithms move every light disk to the left and every dark disk to
the right using only adjacent swaps, and report how many swaps they made:

- alternate: k+1 sweeps over alternating pair offsets (odd-even
  transposition)
- lawnmower: forward then backward bubble passes, stopping as soon as a
  full round trip swaps nothing
"""

import math
from typing import Callable, Dict

from .disk_state import DiskColor, DiskRow, SortResult


def _swap_if_inverted(row: DiskRow, left_index: int) -> bool:
    """Swap a DARK disk that sits immediately left of a LIGHT disk."""
    if row.get(left_index) == DiskColor.DARK and row.get(left_index + 1) == DiskColor.LIGHT:
        row.swap(left_index)
        return True
    return False


def sort_alternate(before: DiskRow) -> SortResult:
    """
    Sort disks with the alternate algorithm.

    Runs k+1 passes for a row of 2k disks. Even passes compare the pairs
    starting at 0, 2, 4, ...; odd passes compare the pairs starting at
    1, 3, 5, ... and stop before the last pair.

    Args:
        before: Row to sort (not modified)

    Returns:
        SortResult with the sorted row and swap count
    """
    after = before.copy()
    n = after.light_count()
    swap_count = 0

    if n == 0:
        return SortResult(after=after, swap_count=0, algorithm="alternate", passes=0)

    for i in range(n + 1):
        start = 0 if i % 2 == 0 else 1
        stop = 2 * n - 1 if i % 2 == 0 else 2 * n - 2
        for j in range(start, stop, 2):
            if _swap_if_inverted(after, j):
                swap_count += 1

    return SortResult(after=after, swap_count=swap_count, algorithm="alternate", passes=n + 1)


def sort_lawnmower(before: DiskRow) -> SortResult:
    """
    Sort disks with the lawnmower algorithm.

    Each round makes a left-to-right pass followed by a right-to-left pass
    over every adjacent pair. At most ceil(k/2) rounds run for a row of 2k
    disks, and the loop ends early once a round makes no swap.

    Args:
        before: Row to sort (not modified)

    Returns:
        SortResult with the sorted row and swap count
    """
    after = before.copy()
    n = after.light_count()
    swap_count = 0
    rounds = 0

    for _ in range(math.ceil(n / 2)):
        rounds += 1
        round_swaps = 0

        for j in range(0, 2 * n - 1):
            if _swap_if_inverted(after, j):
                round_swaps += 1

        for j in range(2 * n - 2, -1, -1):
            if _swap_if_inverted(after, j):
                round_swaps += 1

        swap_count += round_swaps
        if round_swaps == 0:
            break

    return SortResult(after=after, swap_count=swap_count, algorithm="lawnmower", passes=rounds)


SORT_ALGORITHMS: Dict[str, Callable[[DiskRow], SortResult]] = {
    "alternate": sort_alternate,
    "lawnmower": sort_lawnmower,
}


def get_sort_algorithm(name: str) -> Callable[[DiskRow], SortResult]:
    """
    Look up a sorting algorithm by name.

    Raises:
        ValueError: If no algorithm is registered under ``name``
    """
    try:
        return SORT_ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown sort algorithm: '{name}'. Must be one of {sorted(SORT_ALGORITHMS)}"
        )


def run_sort(name: str, row: DiskRow) -> SortResult:
    """Sort ``row`` with the algorithm registered under ``name``."""
    return get_sort_algorithm(name)(row)
