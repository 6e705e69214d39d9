"""
Sort Metrics and Reporting

Analyzes sort results against the minimum number of adjacent swaps a row
needs, and compares the algorithms across row sizes.
"""

from typing import Dict, List, Any, Iterable, Optional

import numpy as np

from .disk_state import DiskColor, DiskRow, SortResult
from .sorting import SORT_ALGORITHMS, get_sort_algorithm


def row_to_array(row: DiskRow) -> np.ndarray:
    """Encode a row as an int8 array: 1 for DARK, 0 for LIGHT."""
    return np.fromiter(
        (1 if color == DiskColor.DARK else 0 for color in row),
        dtype=np.int8,
        count=len(row),
    )


def count_inversions(row: DiskRow) -> int:
    """
    Count (DARK, LIGHT) pairs where the dark disk is left of the light one.

    An adjacent swap of a DARK-LIGHT pair removes exactly one inversion, so
    this is also the fewest swaps that can sort the row.
    """
    dark = row_to_array(row).astype(np.int64)
    if dark.size == 0:
        return 0
    darks_so_far = np.cumsum(dark)
    return int(darks_so_far[dark == 0].sum())


def expected_swap_count(light_count: int) -> int:
    """Inversions in an initialized row of 2 * light_count disks."""
    if light_count < 0:
        raise ValueError(f"light_count must be non-negative, got {light_count}")
    return light_count * (light_count - 1) // 2


class SortMetrics:
    """Metrics calculator for results produced from one input row"""

    def __init__(self, before: DiskRow):
        self.before = before
        self._snapshot = before.copy()
        self.minimum_swaps = count_inversions(before)

    def analyze(self, result: SortResult) -> Dict[str, Any]:
        """
        Analyze a sort result

        Returns:
            Dictionary of metrics for the result
        """
        before_counts = row_to_array(self._snapshot).sum()
        after_counts = row_to_array(result.after).sum()

        if result.swap_count == 0:
            efficiency = 1.0 if self.minimum_swaps == 0 else 0.0
        else:
            efficiency = self.minimum_swaps / result.swap_count

        return {
            'algorithm': result.algorithm,
            'light_count': self.before.light_count(),
            'swap_count': result.swap_count,
            'minimum_swaps': self.minimum_swaps,
            'passes': result.passes,
            'is_sorted': result.after.is_sorted(),
            'colors_conserved': (
                len(result.after) == len(self._snapshot)
                and int(before_counts) == int(after_counts)
            ),
            'input_unchanged': self.before == self._snapshot,
            'optimal': result.swap_count == self.minimum_swaps,
            'swap_efficiency': efficiency,
            'before': self._snapshot.to_string(),
            'after': result.after.to_string(),
        }


def compare_algorithms(light_counts: Iterable[int],
                       algorithms: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Run each algorithm on freshly initialized rows of every size

    Args:
        light_counts: Numbers of light disks (k) to try
        algorithms: Algorithm names, defaults to every registered algorithm

    Returns:
        Dictionary keyed by algorithm name, each holding the per-size
        analyses and numpy arrays of swap and pass counts
    """
    light_counts = list(light_counts)
    if algorithms is None:
        algorithms = list(SORT_ALGORITHMS)

    comparison = {}
    for name in algorithms:
        sort_fn = get_sort_algorithm(name)
        analyses = []
        for k in light_counts:
            row = DiskRow(k)
            analyses.append(SortMetrics(row).analyze(sort_fn(row)))

        comparison[name] = {
            'light_counts': np.array(light_counts, dtype=np.int64),
            'swap_counts': np.array([a['swap_count'] for a in analyses], dtype=np.int64),
            'passes': np.array([a['passes'] for a in analyses], dtype=np.int64),
            'all_sorted': all(a['is_sorted'] for a in analyses),
            'analyses': analyses,
        }

    return comparison


def format_sort_report(metrics: Dict[str, Any], detailed: bool = True) -> str:
    """Generate a human-readable report for one analyzed sort"""
    lines = []
    lines.append("=" * 60)
    lines.append(f"ALTERNATING DISKS SORT REPORT ({metrics['algorithm'] or 'unknown'})")
    lines.append("=" * 60)
    lines.append(f"Light disks: {metrics['light_count']}")
    lines.append(f"Swaps: {metrics['swap_count']} (minimum {metrics['minimum_swaps']})")
    lines.append(f"Passes: {metrics['passes']}")
    lines.append(f"Swap efficiency: {metrics['swap_efficiency']:.3f}")

    if detailed:
        lines.append("")
        lines.append(f"  before: {metrics['before']}")
        lines.append(f"  after:  {metrics['after']}")

    lines.append("")
    if metrics['is_sorted'] and metrics['colors_conserved']:
        lines.append("RESULT: Sorted ✓")
    else:
        lines.append("RESULT: NOT sorted")

    lines.append("=" * 60)

    return "\n".join(lines)
