# tests/test_dunders.py

import unittest
import copy
import pickle
import numpy as np
from vecmath import (
    DualQuaternion, Matrix2, Matrix3, Matrix4, Quaternion, SlowMatrix,
    SlowSquareMatrix, SlowVector, Vector2, Vector3, Vector4,
)


class TestFixedDunders(unittest.TestCase):
    def setUp(self):
        self.values = [
            Vector2(1, 2),
            Vector3(1, 2, 3),
            Vector4(1, 2, 3, 4),
            Quaternion(0.5, 0.5, 0.5, 0.5),
            Matrix2(1, 2, 3, 4),
            Matrix3(),
            Matrix4(),
            DualQuaternion(),
        ]

    def test_repr_and_str(self):
        self.assertEqual(repr(Vector3(1, 2, 3)), "Vector3(1.0, 2.0, 3.0)")
        self.assertEqual(str(Quaternion()), "Quaternion(0.0, 0.0, 0.0, 1.0)")
        for value in self.values:
            self.assertTrue(repr(value).startswith(type(value).__name__ + "("))

    def test_eq_and_not_eq(self):
        # same type and components compare equal
        self.assertEqual(Vector3(1, 2, 3), Vector3(1, 2, 3))
        self.assertNotEqual(Vector3(1, 2, 3), Vector3(1, 2, 4))

        # equal components in different types are still different values
        self.assertNotEqual(Vector4(0, 0, 0, 1), Quaternion())
        self.assertNotEqual(Matrix2(1, 0, 0, 1), Vector4(1, 0, 0, 1))
        self.assertFalse(Vector2(1, 2) == (1, 2))

    def test_copy_and_deepcopy(self):
        for value in self.values:
            for duplicate in (copy.copy(value), copy.deepcopy(value), value.clone()):
                self.assertIsInstance(duplicate, type(value))
                self.assertEqual(duplicate, value)
                # no shared storage
                self.assertFalse(np.shares_memory(duplicate.array, value.array))
                duplicate[0] = 99.0
                self.assertNotEqual(value[0], 99.0)

    def test_pickle_round_trip(self):
        for value in self.values:
            restored = pickle.loads(pickle.dumps(value))
            self.assertIsInstance(restored, type(value))
            self.assertEqual(restored, value)

    def test_array_protocol(self):
        v = Vector3(1, 2, 3)
        view = np.asarray(v)
        self.assertEqual(view.dtype, np.float64)
        view[0] = 7.0
        self.assertEqual(v.x, 7.0)

        copied = np.array(v, copy=True)
        copied[1] = 9.0
        self.assertEqual(v.y, 2.0)
        self.assertEqual(np.asarray(v, dtype=np.float32).dtype, np.float32)

    def test_matrix_array_is_column_major(self):
        np.testing.assert_array_equal(np.asarray(Matrix2(1, 2, 3, 4)), [1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(Matrix2(1, 2, 3, 4).to_numpy(), [[1.0, 3.0], [2.0, 4.0]])

    def test_len_and_iter(self):
        sizes = [2, 3, 4, 4, 4, 9, 16, 8]
        for value, size in zip(self.values, sizes):
            self.assertEqual(len(value), size)
            self.assertEqual(len(list(value)), size)
        self.assertEqual(list(Vector3(1, 2, 3)), [1.0, 2.0, 3.0])
        x, y = Vector2(5, 6)
        self.assertEqual((x, y), (5.0, 6.0))

    def test_indexing(self):
        v = Vector4(1, 2, 3, 4)
        self.assertEqual(v[2], 3.0)
        v[2] = 10
        self.assertEqual(v.z, 10.0)
        np.testing.assert_array_equal(v[1:3], [2.0, 10.0])

    def test_unhashable(self):
        for value in self.values:
            with self.assertRaises(TypeError):
                hash(value)

    def test_operators(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        np.testing.assert_array_equal(a + b, [5.0, 7.0, 9.0])
        np.testing.assert_array_equal(b - a, [3.0, 3.0, 3.0])
        np.testing.assert_array_equal(-a, [-1.0, -2.0, -3.0])
        self.assertIsInstance(a + b, Vector3)

        m = Matrix2(1, 2, 3, 4)
        np.testing.assert_array_equal((m @ m).to_numpy(), m.to_numpy() @ m.to_numpy())
        self.assertIsInstance(Quaternion() @ Quaternion(), Quaternion)
        self.assertIsInstance(DualQuaternion() @ DualQuaternion(), DualQuaternion)


class TestSlowDunders(unittest.TestCase):
    def setUp(self):
        self.vector = SlowVector(1, 2, 3, 4, 5)
        self.matrix = SlowMatrix([1, 2], [3, 4], [5, 6])
        self.square = SlowSquareMatrix([1, 2], [3, 4])

    def test_repr(self):
        self.assertEqual(repr(self.vector), "SlowVector(1.0, 2.0, 3.0, 4.0, 5.0)")
        self.assertEqual(repr(self.square), "SlowSquareMatrix([1.0, 2.0], [3.0, 4.0])")
        self.assertEqual(str(self.matrix), repr(self.matrix))

    def test_copy_and_deepcopy(self):
        for value in (self.vector, self.matrix, self.square):
            for duplicate in (copy.copy(value), copy.deepcopy(value), value.clone()):
                self.assertIsInstance(duplicate, type(value))
                self.assertEqual(duplicate, value)
                duplicate[0] = 99.0
                self.assertNotEqual(value[0], 99.0)

    def test_pickle_round_trip(self):
        for value in (self.vector, self.matrix, self.square):
            restored = pickle.loads(pickle.dumps(value))
            self.assertIsInstance(restored, type(value))
            self.assertEqual(restored, value)
        restored = pickle.loads(pickle.dumps(self.matrix))
        self.assertEqual((restored.width, restored.height), (3, 2))

    def test_eq_and_not_eq(self):
        self.assertEqual(self.square, SlowSquareMatrix([1, 2], [3, 4]))
        self.assertNotEqual(self.square, SlowSquareMatrix([1, 2], [3, 5]))
        # same components in a different shape
        self.assertNotEqual(SlowMatrix([1, 2, 3, 4]), SlowMatrix([1, 2], [3, 4]))
        self.assertFalse(self.vector == [1, 2, 3, 4, 5])

    def test_unhashable(self):
        for value in (self.vector, self.matrix, self.square):
            with self.assertRaises(TypeError):
                hash(value)

    def test_len_and_iter(self):
        self.assertEqual(len(self.vector), 5)
        self.assertEqual(list(self.vector), [1.0, 2.0, 3.0, 4.0, 5.0])
        self.assertEqual(len(self.matrix), 6)
        self.assertEqual(list(self.matrix), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        self.assertEqual(self.matrix.columns(), [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


if __name__ == "__main__":
    unittest.main()
