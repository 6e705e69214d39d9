"""
Tests for the alternate and lawnmower sorting algorithms
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from alternating_disks.disk_state import DiskColor, DiskRow
from alternating_disks.sorting import (
    sort_alternate,
    sort_lawnmower,
    SORT_ALGORITHMS,
    get_sort_algorithm,
    run_sort,
)


class SortAlgorithmTests:
    """Behavior shared by both algorithms"""

    sort_fn = None

    def sort(self, row):
        return type(self).sort_fn(row)

    def test_empty_row(self):
        result = self.sort(DiskRow(0))
        self.assertEqual(result.swap_count, 0)
        self.assertEqual(result.after, DiskRow(0))
        self.assertEqual(result.passes, 0)

    def test_two_disks_already_sorted(self):
        result = self.sort(DiskRow.from_string("L D"))
        self.assertEqual(result.after.to_string(), "L D")
        self.assertEqual(result.swap_count, 0)

    def test_six_disks(self):
        result = self.sort(DiskRow.from_string("L D L D L D"))
        self.assertEqual(result.after.to_string(), "L L L D D D")
        self.assertEqual(result.swap_count, 3)

    def test_sorted_for_many_sizes(self):
        for k in range(1, 21):
            with self.subTest(k=k):
                result = self.sort(DiskRow(k))
                self.assertTrue(result.after.is_sorted())

    def test_swap_count_is_minimal(self):
        for k in range(0, 21):
            with self.subTest(k=k):
                result = self.sort(DiskRow(k))
                self.assertEqual(result.swap_count, k * (k - 1) // 2)

    def test_colors_conserved(self):
        for k in (1, 4, 7, 12):
            with self.subTest(k=k):
                result = self.sort(DiskRow(k))
                self.assertEqual(result.after.total_count(), 2 * k)
                self.assertEqual(result.after.count(DiskColor.LIGHT), k)
                self.assertEqual(result.after.count(DiskColor.DARK), k)

    def test_input_not_mutated(self):
        row = DiskRow(5)
        self.sort(row)
        self.assertEqual(row, DiskRow(5))
        self.assertTrue(row.is_initialized())

    def test_result_owns_its_row(self):
        row = DiskRow(3)
        result = self.sort(row)
        self.assertIsNot(result.after, row)

    def test_deterministic(self):
        first = self.sort(DiskRow(9))
        second = self.sort(DiskRow(9))
        self.assertEqual(first.after, second.after)
        self.assertEqual(first.swap_count, second.swap_count)
        self.assertEqual(first.passes, second.passes)

    def test_sorted_input_needs_no_swaps(self):
        row = DiskRow.from_string("L L L L D D D D")
        result = self.sort(row)
        self.assertEqual(result.swap_count, 0)
        self.assertEqual(result.after, row)


class TestSortAlternate(SortAlgorithmTests, unittest.TestCase):
    """Test the alternate algorithm"""

    sort_fn = sort_alternate

    def test_algorithm_name(self):
        self.assertEqual(self.sort(DiskRow(2)).algorithm, "alternate")

    def test_pass_count(self):
        for k in (1, 2, 5, 10):
            with self.subTest(k=k):
                self.assertEqual(self.sort(DiskRow(k)).passes, k + 1)


class TestSortLawnmower(SortAlgorithmTests, unittest.TestCase):
    """Test the lawnmower algorithm"""

    sort_fn = sort_lawnmower

    def test_algorithm_name(self):
        self.assertEqual(self.sort(DiskRow(2)).algorithm, "lawnmower")

    def test_sorted_input_stops_after_first_round(self):
        row = DiskRow.from_string("L L L L L D D D D D")
        result = self.sort(row)
        self.assertEqual(result.swap_count, 0)
        self.assertEqual(result.passes, 1)

    def test_rounds_bounded(self):
        for k in (1, 2, 3, 8, 15):
            with self.subTest(k=k):
                self.assertLessEqual(self.sort(DiskRow(k)).passes, -(-k // 2))

    def test_eight_disks_trace(self):
        result = self.sort(DiskRow(4))
        self.assertEqual(result.after.to_string(), "L L L L D D D D")
        self.assertEqual(result.swap_count, 6)
        self.assertEqual(result.passes, 2)


class TestRegistry(unittest.TestCase):
    """Test algorithm lookup"""

    def test_registered_names(self):
        self.assertEqual(set(SORT_ALGORITHMS), {"alternate", "lawnmower"})

    def test_get_sort_algorithm(self):
        self.assertIs(get_sort_algorithm("alternate"), sort_alternate)
        self.assertIs(get_sort_algorithm("lawnmower"), sort_lawnmower)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            get_sort_algorithm("bubble")

    def test_run_sort(self):
        result = run_sort("lawnmower", DiskRow(3))
        self.assertTrue(result.after.is_sorted())
        self.assertEqual(result.algorithm, "lawnmower")


if __name__ == '__main__':
    unittest.main()
