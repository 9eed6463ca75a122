# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
from ..util.growable import GrowableMatrix, GrowableVector


class GrowableMatrixTests(unittest.TestCase):
    def setUp(self):
        self.rng = np.random.RandomState(0)

    def test_view_is_concatenation_of_appends(self):
        blocks = [self.rng.randn(n, 3) for n in [4, 1, 2, 7, 1, 10, 3]]
        m = GrowableMatrix(blocks[0])
        for b in blocks[1:]:
            m.append(b)
        np.testing.assert_array_equal(m.view(), np.vstack(blocks))
        self.assertEqual(len(m), sum(b.shape[0] for b in blocks))

    def test_capacity_growth(self):
        m = GrowableMatrix(np.zeros((4, 2)))
        self.assertEqual(m.capacity, 4)
        m.append(np.ones((1, 2)))
        # grows by 3/2 when that is enough
        self.assertEqual(m.capacity, 6)
        m.append(np.ones((1, 2)))
        self.assertEqual(m.capacity, 6)
        # grows to the required size when 3/2 is not enough
        m.append(np.ones((10, 2)))
        self.assertEqual(m.capacity, 16)
        self.assertEqual(m.size, 16)

    def test_capacity_never_decreases(self):
        m = GrowableMatrix(self.rng.randn(2, 1))
        previous = m.capacity
        for n in [1, 3, 1, 1, 5, 2, 1]:
            required = m.size + n
            grows = required > m.capacity
            m.append(self.rng.randn(n, 1))
            self.assertGreaterEqual(m.capacity, previous)
            if grows:
                self.assertGreaterEqual(m.capacity, max(required, (3*previous)//2))
            previous = m.capacity

    def test_spare_rows_are_nan_and_hidden(self):
        m = GrowableMatrix(np.zeros((4, 2)))
        m.append(np.ones((1, 2)))
        self.assertTrue(np.all(np.isnan(m._data[m.size:])))
        self.assertEqual(m.view().shape, (5, 2))
        self.assertFalse(np.any(np.isnan(m.view())))

    def test_view_is_read_only(self):
        m = GrowableMatrix(np.zeros((2, 2)))
        v = m.view()
        with self.assertRaises(ValueError):
            v[0, 0] = 1.

    def test_append_wrong_columns(self):
        m = GrowableMatrix(np.zeros((2, 3)))
        with self.assertRaises(AssertionError):
            m.append(np.zeros((1, 2)))
        with self.assertRaises(AssertionError):
            m.append(np.zeros(3))

    def test_assign(self):
        m = GrowableMatrix(np.zeros((2, 2)))
        m.append(np.zeros((3, 2)))
        values = self.rng.randn(5, 2)
        m.assign(values)
        np.testing.assert_array_equal(m.view(), values)
        with self.assertRaises(AssertionError):
            m.assign(self.rng.randn(4, 2))


class GrowableVectorTests(unittest.TestCase):
    def test_append_and_assign(self):
        v = GrowableVector(np.array([1., 2.]))
        v.append(np.array([3.]))
        v.append(np.array([4., 5., 6.]))
        np.testing.assert_array_equal(v.view(), [1., 2., 3., 4., 5., 6.])
        self.assertGreaterEqual(v.capacity, 6)
        v.assign(np.zeros(6))
        np.testing.assert_array_equal(v.view(), np.zeros(6))
        with self.assertRaises(AssertionError):
            v.assign(np.zeros(7))

    def test_needs_vectors(self):
        with self.assertRaises(AssertionError):
            GrowableVector(np.zeros((2, 2)))
        v = GrowableVector(np.zeros(2))
        with self.assertRaises(AssertionError):
            v.append(np.zeros((1, 1)))


if __name__ == "__main__":
    unittest.main()
