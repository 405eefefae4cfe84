"""Unit tests for the chunking helper."""

import unittest

from dynamo_service.utils.chunking import chunk


class TestChunk(unittest.TestCase):
    """Test cases for chunk."""

    def test_splits_into_fixed_size_chunks(self):
        self.assertEqual([[1, 2], [3, 4], [5]], chunk([1, 2, 3, 4, 5], 2))

    def test_exact_multiple_has_no_empty_tail(self):
        chunks = chunk(list(range(200)), 100)

        self.assertEqual(2, len(chunks))
        self.assertEqual(list(range(100)), chunks[0])
        self.assertEqual(list(range(100, 200)), chunks[1])

    def test_empty_sequence(self):
        self.assertEqual([], chunk([], 100))

    def test_size_larger_than_sequence(self):
        self.assertEqual([["a", "b"]], chunk(("a", "b"), 100))

    def test_non_positive_size_raises(self):
        with self.assertRaises(ValueError):
            chunk([1, 2], 0)
