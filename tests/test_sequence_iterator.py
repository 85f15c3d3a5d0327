"""Unit tests for SequenceIterator.

Covers ordering, cursor movement and the empty-sequence boundary.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzleiterlib import SequenceIterator, IteratorExhaustedError, drain


class TestSequenceIterator(unittest.TestCase):
    """Test linear iteration over sequences."""

    def test_array_drain_order(self):
        """Draining yields the array exactly, in order."""
        it = SequenceIterator([10, 20, 30, 40, 50])
        self.assertEqual(drain(it), [10, 20, 30, 40, 50])

    def test_duplicates_preserved(self):
        """Repeated values are yielded as many times as they appear."""
        data = [3, 3, 1, 3, 1]
        self.assertEqual(list(SequenceIterator(data)), data)

    def test_position_advances_by_one(self):
        """Each next() moves the cursor exactly one step."""
        it = SequenceIterator([7, 8, 9])
        self.assertEqual(it.position, 0)
        self.assertEqual(it.next(), 7)
        self.assertEqual(it.position, 1)
        self.assertEqual(it.next(), 8)
        self.assertEqual(it.position, 2)

    def test_empty_sequence(self):
        """Empty input is exhausted from the start."""
        it = SequenceIterator([])
        self.assertFalse(it.has_next())
        self.assertEqual(drain(it), [])

    def test_next_past_end_raises(self):
        """next() after the last element raises and keeps the cursor."""
        it = SequenceIterator([1])
        it.next()
        with self.assertRaises(IteratorExhaustedError):
            it.next()
        self.assertEqual(it.position, 1)
        self.assertFalse(it.has_next())

    def test_tuple_and_range_sources(self):
        """Any sequence type works, not just lists."""
        self.assertEqual(list(SequenceIterator((4, 5, 6))), [4, 5, 6])
        self.assertEqual(list(SequenceIterator(range(5))), [0, 1, 2, 3, 4])

    def test_source_not_modified(self):
        """Iteration leaves the source untouched."""
        data = [1, 2, 3]
        drain(SequenceIterator(data))
        self.assertEqual(data, [1, 2, 3])

    def test_generic_element_type(self):
        """The contract is generic over element type."""
        self.assertEqual(list(SequenceIterator(["a", "b"])), ["a", "b"])

    def test_repr_shows_position(self):
        it = SequenceIterator([1, 2])
        it.next()
        self.assertEqual(repr(it), "SequenceIterator(position=1, length=2)")


if __name__ == "__main__":
    unittest.main()
