"""
Alternating Disks

Sorts a row of alternating light and dark disks so that every light disk
ends up on the left, using only adjacent swaps, and counts the swaps.

Modules:
- disk_state: Core data structures (DiskColor, DiskRow, SortResult)
- sorting: Alternate and lawnmower algorithms, algorithm registry
- metrics: Inversion counting, result analysis and text reports
- config_loader: YAML run configuration loading and validation
"""

__version__ = "1.0.0"
__author__ = "Alternating Disks Team"

from .disk_state import DiskColor, DiskRow, SortResult
from .sorting import (
    sort_alternate,
    sort_lawnmower,
    SORT_ALGORITHMS,
    get_sort_algorithm,
    run_sort,
)
from .metrics import (
    SortMetrics,
    count_inversions,
    expected_swap_count,
    compare_algorithms,
    format_sort_report,
)
from .config_loader import (
    ConfigurationError,
    load_config,
    validate_config,
    create_rows_from_config,
    compare_from_config,
)

__all__ = [
    'DiskColor',
    'DiskRow',
    'SortResult',
    'sort_alternate',
    'sort_lawnmower',
    'SORT_ALGORITHMS',
    'get_sort_algorithm',
    'run_sort',
    'SortMetrics',
    'count_inversions',
    'expected_swap_count',
    'compare_algorithms',
    'format_sort_report',
    'ConfigurationError',
    'load_config',
    'validate_config',
    'create_rows_from_config',
    'compare_from_config',
]
