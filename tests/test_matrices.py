# tests/test_matrices.py

import math
import unittest

import numpy as np

from vecmath import (
    DualQuaternion, FieldOfView, Matrix2, Matrix3, Matrix4, MatrixSizeError,
    Quaternion, SingularMatrixError, SizeMismatchError, Vector3, matrix2,
    matrix3, matrix4,
)


def random_matrix(cls, rng, offset=0.0):
    values = rng.uniform(-2.0, 2.0, cls.size)
    m = cls.from_iterable(values)
    if offset:
        m.to_numpy()[:] += np.eye(cls.width) * offset
    return m


def same_rotation(a, b, atol=1e-9):
    # q and -q are the same rotation
    return abs(abs(float(np.dot(np.asarray(a), np.asarray(b)))) - 1.0) < atol


class TestMatrixContracts(unittest.TestCase):
    """Properties every fixed-size matrix type must satisfy."""

    types = (Matrix2, Matrix3, Matrix4)

    def setUp(self):
        self.rng = np.random.default_rng(42)

    def test_default_is_identity(self):
        for cls in self.types:
            np.testing.assert_array_equal(cls().to_numpy(), np.eye(cls.width))
            np.testing.assert_array_equal(cls.identity().to_numpy(), np.eye(cls.width))

    def test_identity_multiplication(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng)
            self.assertTrue(cls.identity().multiply(m).equals(m))
            self.assertTrue(m.multiply(cls.identity()).equals(m))

    def test_multiply_matches_numpy(self):
        for cls in self.types:
            a = random_matrix(cls, self.rng)
            b = random_matrix(cls, self.rng)
            np.testing.assert_allclose(a.multiply(b).to_numpy(), a.to_numpy() @ b.to_numpy())
            np.testing.assert_allclose((a @ b).to_numpy(), a.to_numpy() @ b.to_numpy())

    def test_multiply_aliasing(self):
        for cls in self.types:
            a = random_matrix(cls, self.rng)
            b = random_matrix(cls, self.rng)
            fresh = a.multiply(b)
            left = a.clone()
            left.multiply(b, left)
            right = b.clone()
            a.multiply(right, right)
            np.testing.assert_array_equal(left, fresh)
            np.testing.assert_array_equal(right, fresh)

    def test_inverse_round_trip(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng, offset=5.0)
            inverse = m.invert()
            self.assertIsInstance(inverse, cls)
            self.assertTrue(inverse.invert().equals(m))
            self.assertTrue(m.multiply(inverse).equals(cls.identity()))

    def test_invert_in_place(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng, offset=5.0)
            expected = np.linalg.inv(m.to_numpy())
            m.invert(m)
            np.testing.assert_allclose(m.to_numpy(), expected, atol=1e-12)

    def test_singular_raises_without_writing(self):
        for cls in self.types:
            zero = cls.from_iterable(np.zeros(cls.size))
            out = random_matrix(cls, self.rng)
            before = out.clone()
            with self.assertRaises(SingularMatrixError):
                zero.invert(out)
            np.testing.assert_array_equal(out, before)

    def test_singular_is_a_zero_division(self):
        with self.assertRaises(ZeroDivisionError):
            matrix2.invert([1, 2, 2, 4])

    def test_transpose_involution(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng)
            original = m.clone()
            self.assertTrue(m.transpose().transpose().exact_equals(original))
            m.transpose(m)
            np.testing.assert_array_equal(m.to_numpy(), original.to_numpy().T)
            m.transpose(m)
            self.assertTrue(m.exact_equals(original))

    def test_transpose_into_overlapping_view(self):
        m = Matrix3.from_values(1, 2, 3, 4, 5, 6, 7, 8, 9)
        view = m.array[:]
        matrix3.transpose(m, view)
        np.testing.assert_array_equal(m.to_numpy(), [[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    def test_determinant_multiplicativity(self):
        for cls in self.types:
            a = random_matrix(cls, self.rng)
            b = random_matrix(cls, self.rng)
            self.assertTrue(math.isclose(a.multiply(b).determinant(),
                                         a.determinant() * b.determinant(),
                                         rel_tol=1e-9, abs_tol=1e-9))

    def test_determinant_matches_numpy(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng)
            self.assertTrue(math.isclose(m.determinant(), np.linalg.det(m.to_numpy()),
                                         rel_tol=1e-9, abs_tol=1e-9))

    def test_adjoint(self):
        for cls in self.types:
            m = random_matrix(cls, self.rng)
            product = m.multiply(m.adjoint())
            np.testing.assert_allclose(product.to_numpy(), np.eye(cls.width) * m.determinant(),
                                       atol=1e-9)

    def test_elementwise_ops(self):
        for cls in self.types:
            a = random_matrix(cls, self.rng)
            b = random_matrix(cls, self.rng)
            np.testing.assert_allclose(a.add(b), a.array + b.array)
            np.testing.assert_allclose(a.subtract(b), a.array - b.array)
            np.testing.assert_allclose(a.multiply_scalar(3.0), a.array * 3.0)
            np.testing.assert_allclose(a.multiply_scalar_and_add(b, 0.5), a.array + b.array * 0.5)
            self.assertIsInstance(a.add(b), cls)

    def test_frob(self):
        self.assertEqual(Matrix4().frob(), 2.0)
        self.assertAlmostEqual(Matrix2(1, 2, 3, 4).frob(), math.sqrt(30.0))

    def test_numpy_interop(self):
        rows = np.arange(9.0).reshape(3, 3)
        m = Matrix3.from_numpy(rows)
        np.testing.assert_array_equal(m.to_numpy(), rows)
        # column-major storage
        np.testing.assert_array_equal(m.array[:3], rows[:, 0])
        with self.assertRaises(MatrixSizeError):
            Matrix3.from_numpy(np.eye(4))

    def test_wrong_input_length(self):
        with self.assertRaises(SizeMismatchError):
            matrix3.determinant([1, 2, 3, 4])


class TestMatrix2(unittest.TestCase):
    def test_determinant_of_identity(self):
        self.assertEqual(matrix2.determinant([1, 0, 0, 1]), 1.0)

    def test_invert_two_identity(self):
        np.testing.assert_array_equal(matrix2.invert([2, 0, 0, 2]), [0.5, 0.0, 0.0, 0.5])

    def test_invert_zero_raises(self):
        with self.assertRaises(SingularMatrixError):
            matrix2.invert([0, 0, 0, 0])

    def test_from_values_is_column_major(self):
        m = Matrix2.from_values(1, 2, 3, 4)
        np.testing.assert_array_equal(m.to_numpy(), [[1, 3], [2, 4]])

    def test_rotate_and_scale_compose(self):
        m = Matrix2(1, 2, 3, 4)
        self.assertTrue(m.rotate(0.4).equals(m.multiply(Matrix2.from_rotation(0.4))))
        self.assertTrue(m.scale([2, 3]).equals(m.multiply(Matrix2.from_scaling([2, 3]))))

    def test_adjoint_values(self):
        np.testing.assert_array_equal(Matrix2(1, 2, 3, 4).adjoint(), [4.0, -2.0, -3.0, 1.0])


class TestMatrix3(unittest.TestCase):
    def test_rotate_scale_translate_compose(self):
        m = Matrix3.from_values(1, 2, 0, 3, 4, 0, 5, 6, 1)
        self.assertTrue(m.rotate(0.3).equals(m.multiply(Matrix3.from_rotation(0.3))))
        self.assertTrue(m.scale([2, 3]).equals(m.multiply(Matrix3.from_scaling([2, 3]))))
        self.assertTrue(m.translate([2, 3]).equals(m.multiply(Matrix3.from_translation([2, 3]))))

    def test_from_quaternion_matches_matrix4(self):
        q = Quaternion.from_axis_angle(Vector3(1, -1, 2).normalize(), 1.3)
        m3 = Matrix3.from_quaternion(q)
        m4 = Matrix4.from_quaternion(q)
        np.testing.assert_allclose(m3.to_numpy(), m4.to_numpy()[:3, :3], atol=1e-12)
        np.testing.assert_allclose(Matrix3.from_matrix4(m4), m3, atol=1e-12)

    def test_normal_from_matrix4(self):
        m4 = Matrix4.from_scaling([2, 4, 8]).translate([1, 2, 3])
        normal = Matrix3.normal_from_matrix4(m4)
        expected = np.linalg.inv(m4.to_numpy())[:3, :3].T
        np.testing.assert_allclose(normal.to_numpy(), expected, atol=1e-12)

    def test_normal_from_singular_raises(self):
        with self.assertRaises(SingularMatrixError):
            matrix3.normal_from_matrix4(np.zeros(16))

    def test_projection_maps_corners(self):
        m = Matrix3.projection(800, 600)
        top_left = m.to_numpy() @ [0.0, 0.0, 1.0]
        bottom_right = m.to_numpy() @ [800.0, 600.0, 1.0]
        np.testing.assert_allclose(top_left, [-1.0, 1.0, 1.0])
        np.testing.assert_allclose(bottom_right, [1.0, -1.0, 1.0])


class TestMatrix4(unittest.TestCase):
    def test_add_sums_every_component(self):
        a = Matrix4.from_values(*range(16))
        b = Matrix4.from_values(*range(16, 32))
        np.testing.assert_array_equal(a.add(b), np.arange(16) + np.arange(16, 32))

    def test_axis_rotations_match_general_rotation(self):
        angle = 0.8
        self.assertTrue(Matrix4.from_x_rotation(angle).equals(Matrix4.from_rotation(angle, [1, 0, 0])))
        self.assertTrue(Matrix4.from_y_rotation(angle).equals(Matrix4.from_rotation(angle, [0, 2, 0])))
        self.assertTrue(Matrix4.from_z_rotation(angle).equals(Matrix4.from_rotation(angle, [0, 0, 3])))

    def test_from_rotation_matches_quaternion(self):
        axis = Vector3(1, 2, 3).normalize()
        expected = Matrix4.from_quaternion(Quaternion.from_axis_angle(axis, 1.1))
        self.assertTrue(Matrix4.from_rotation(1.1, axis).equals(expected))

    def test_zero_axis(self):
        np.testing.assert_array_equal(Matrix4.from_rotation(1.0, [0, 0, 0]), Matrix4())
        m = Matrix4.from_translation([1, 2, 3])
        np.testing.assert_array_equal(m.rotate(1.0, [0, 0, 0]), m)

    def test_incremental_transforms_compose(self):
        m = Matrix4.from_rotation_translation(
            Quaternion.from_axis_angle([0, 1, 0], 0.5), [1, 2, 3])
        self.assertTrue(m.rotate_x(0.7).equals(m.multiply(Matrix4.from_x_rotation(0.7))))
        self.assertTrue(m.rotate_y(0.7).equals(m.multiply(Matrix4.from_y_rotation(0.7))))
        self.assertTrue(m.rotate_z(0.7).equals(m.multiply(Matrix4.from_z_rotation(0.7))))
        self.assertTrue(m.rotate(0.7, [1, 1, 0]).equals(
            m.multiply(Matrix4.from_rotation(0.7, [1, 1, 0]))))
        self.assertTrue(m.translate([4, 5, 6]).equals(m.multiply(Matrix4.from_translation([4, 5, 6]))))
        self.assertTrue(m.scale([2, 3, 4]).equals(m.multiply(Matrix4.from_scaling([2, 3, 4]))))

    def test_decompose_trs(self):
        q = Quaternion.from_axis_angle(Vector3(1, 2, 3).normalize(), 0.9)
        m = Matrix4.from_rotation_translation_scale(q, [4, 5, 6], [2, 3, 0.5])
        np.testing.assert_allclose(m.translation, [4.0, 5.0, 6.0])
        np.testing.assert_allclose(m.scaling, [2.0, 3.0, 0.5], atol=1e-12)
        self.assertTrue(same_rotation(m.rotation, q))

    def test_get_rotation_branches(self):
        # trace > 0, then each of the three "largest diagonal" cases
        for axis, angle in (([1, 1, 1], 0.4), ([1, 0, 0], 3.0), ([0, 1, 0], 3.0), ([0, 0, 1], 3.0)):
            q = Quaternion.from_axis_angle(Vector3.from_iterable(axis).normalize(), angle)
            m = Matrix4.from_rotation_translation_scale(q, [0, 0, 0], [2, 2, 2])
            self.assertTrue(same_rotation(matrix4.get_rotation(m), q), axis)

    def test_origin_is_fixed_point(self):
        q = Quaternion.from_axis_angle([0, 0, 1], 1.0)
        origin = Vector3(1, 1, 0)
        m = Matrix4.from_rotation_translation_scale_origin(q, [0, 0, 0], [2, 2, 2], origin)
        np.testing.assert_allclose(origin.transform_matrix4(m), origin, atol=1e-12)

    def test_set_translation(self):
        m = Matrix4.from_scaling([2, 2, 2])
        moved = m.set_translation([7, 8, 9])
        np.testing.assert_array_equal(moved.get_translation(), [7.0, 8.0, 9.0])
        np.testing.assert_array_equal(m.get_translation(), [0.0, 0.0, 0.0])
        m.set_translation([1, 1, 1], m)
        np.testing.assert_array_equal(m.translation, [1.0, 1.0, 1.0])

    def test_from_dual_quaternion(self):
        q = Quaternion.from_axis_angle(Vector3(0, 1, 1).normalize(), 0.6)
        dq = DualQuaternion.from_rotation_translation(q, [3, -2, 1])
        expected = Matrix4.from_rotation_translation(q, [3, -2, 1])
        np.testing.assert_allclose(Matrix4.from_dual_quaternion(dq), expected, atol=1e-12)

    def test_perspective(self):
        m = Matrix4.perspective(math.pi / 2, 1.0, 1.0, 3.0)
        np.testing.assert_allclose(m[[0, 5, 10, 11, 14]], [1.0, 1.0, -2.0, -1.0, -3.0], atol=1e-12)
        infinite = Matrix4.perspective(math.pi / 2, 1.0, 1.0)
        np.testing.assert_allclose(infinite[[10, 14]], [-1.0, -2.0])
        zo = Matrix4.perspective_zo(math.pi / 2, 1.0, 1.0, 3.0)
        np.testing.assert_allclose(zo[[10, 14]], [-1.5, -1.5])

    def test_perspective_depth_range(self):
        near, far = 0.5, 10.0
        for m, low in ((Matrix4.perspective(1.0, 1.5, near, far), -1.0),
                       (Matrix4.perspective_zo(1.0, 1.5, near, far), 0.0)):
            for z, expected in ((-near, low), (-far, 1.0)):
                clip = m.to_numpy() @ [0.0, 0.0, z, 1.0]
                self.assertAlmostEqual(clip[2] / clip[3], expected)

    def test_perspective_from_field_of_view_symmetric(self):
        fov = FieldOfView(45.0, 45.0, 45.0, 45.0)
        m = Matrix4.perspective_from_field_of_view(fov, 1.0, 3.0)
        np.testing.assert_allclose(m, Matrix4.perspective_zo(math.pi / 2, 1.0, 1.0, 3.0), atol=1e-12)

    def test_frustum(self):
        m = Matrix4.frustum(-1, 1, -1, 1, 1, 3)
        np.testing.assert_allclose(m, Matrix4.perspective(math.pi / 2, 1.0, 1.0, 3.0), atol=1e-12)

    def test_ortho(self):
        m = Matrix4.ortho(-2, 2, -1, 1, 0.1, 100)
        corner = m.to_numpy() @ [2.0, 1.0, -100.0, 1.0]
        np.testing.assert_allclose(corner, [1.0, 1.0, 1.0, 1.0])
        zo = Matrix4.ortho_zo(-2, 2, -1, 1, 0.1, 100)
        near_corner = zo.to_numpy() @ [-2.0, -1.0, -0.1, 1.0]
        np.testing.assert_allclose(near_corner, [-1.0, -1.0, 0.0, 1.0], atol=1e-12)

    def test_look_at_inverts_target_to(self):
        eye, target, up = [1, 2, 3], [4, -1, 0], [0, 1, 0]
        view = Matrix4.look_at(eye, target, up)
        model = Matrix4.target_to(eye, target, up)
        self.assertTrue(view.multiply(model).equals(Matrix4.identity()))

    def test_look_at_moves_eye_to_origin(self):
        view = Matrix4.look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
        np.testing.assert_allclose(Vector3(0, 0, 5).transform_matrix4(view), [0.0, 0.0, 0.0])
        np.testing.assert_allclose(Vector3(0, 0, 0).transform_matrix4(view), [0.0, 0.0, -5.0])

    def test_look_at_degenerate_eye_is_identity(self):
        out = Matrix4.from_translation([9, 9, 9])
        matrix4.look_at([1, 1, 1], [1, 1, 1], [0, 1, 0], out)
        np.testing.assert_array_equal(out, Matrix4())

    def test_target_to_places_object(self):
        model = Matrix4.target_to([1, 2, 3], [1, 2, 0], [0, 1, 0])
        np.testing.assert_allclose(model.translation, [1.0, 2.0, 3.0])
        np.testing.assert_allclose(Vector3(0, 0, -1).transform_matrix4(model), [1.0, 2.0, 2.0])


if __name__ == "__main__":
    unittest.main()
