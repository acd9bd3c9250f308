# tests/test_quaternions.py

import math
import unittest

import numpy as np

from vecmath import (
    DualQuaternion, Matrix3, Matrix4, Quaternion, Vector3, dual_quaternion,
    quaternion,
)
from vecmath.structures import AxisAngle
from vecmath.utils import seed

X_AXIS = Vector3(1, 0, 0)
Y_AXIS = Vector3(0, 1, 0)
Z_AXIS = Vector3(0, 0, 1)


def assert_same_rotation(test, a, b, atol=1e-9):
    # q and -q encode the same rotation
    a = np.asarray(a)
    b = np.asarray(b)
    if np.dot(a, b) < 0:
        b = -b
    np.testing.assert_allclose(a, b, atol=atol)


class TestQuaternion(unittest.TestCase):
    def setUp(self):
        self.a = Quaternion.from_axis_angle(X_AXIS, 0.3)
        self.b = Quaternion.from_axis_angle(Vector3(1, 1, 0).normalize(), 1.2)

    def test_default_is_identity(self):
        np.testing.assert_array_equal(Quaternion(), [0.0, 0.0, 0.0, 1.0])
        np.testing.assert_array_equal(quaternion.identity(), [0.0, 0.0, 0.0, 1.0])

    def test_slerp_of_identities(self):
        identity = Quaternion.identity()
        self.assertTrue(identity.slerp(identity, 0.5).equals(identity))

    def test_slerp_boundaries(self):
        self.assertTrue(self.a.slerp(self.b, 0.0).equals(self.a))
        self.assertTrue(self.a.slerp(self.b, 1.0).equals(self.b))

    def test_slerp_takes_shorter_arc(self):
        flipped = self.b.scale(-1.0)
        self.assertTrue(self.a.slerp(flipped, 1.0).equals(self.b))
        np.testing.assert_allclose(self.a.slerp(flipped, 0.5), self.a.slerp(self.b, 0.5),
                                   atol=1e-12)

    def test_slerp_same_input(self):
        for t in (0.0, 0.25, 0.5, 1.0):
            self.assertTrue(self.b.slerp(self.b, t).equals(self.b))

    def test_slerp_midpoint_angle(self):
        a = Quaternion.from_axis_angle(Z_AXIS, 0.2)
        b = Quaternion.from_axis_angle(Z_AXIS, 1.0)
        assert_same_rotation(self, a.slerp(b, 0.5), Quaternion.from_axis_angle(Z_AXIS, 0.6))

    def test_sqlerp_endpoints(self):
        c = Quaternion.from_axis_angle(Y_AXIS, 0.7)
        d = Quaternion.from_axis_angle(Z_AXIS, 0.9)
        self.assertTrue(self.a.sqlerp(self.b, c, d, 0.0).equals(self.a))
        self.assertTrue(self.a.sqlerp(self.b, c, d, 1.0).equals(d))

    def test_normalize_keeps_unit(self):
        self.assertAlmostEqual(self.b.normalize().magnitude, 1.0)
        self.assertAlmostEqual(Quaternion(1, 2, 3, 4).normalize().magnitude, 1.0)

    def test_multiply_applies_right_operand_first(self):
        v = Vector3(1, 2, 3)
        combined = self.a.multiply(self.b)
        expected = v.transform_quaternion(self.b).transform_quaternion(self.a)
        np.testing.assert_allclose(v.transform_quaternion(combined), expected, atol=1e-12)
        np.testing.assert_array_equal(self.a @ self.b, combined)

    def test_multiply_aliasing(self):
        fresh = self.a.multiply(self.b)
        left = self.a.clone()
        left.multiply(self.b, left)
        right = self.b.clone()
        self.a.multiply(right, right)
        np.testing.assert_array_equal(left, fresh)
        np.testing.assert_array_equal(right, fresh)

    def test_invert(self):
        q = Quaternion(1, 2, 3, 4)
        self.assertTrue(q.multiply(q.invert()).equals(Quaternion.identity()))

    def test_invert_zero_returns_zero(self):
        np.testing.assert_array_equal(quaternion.invert([0, 0, 0, 0]), [0.0, 0.0, 0.0, 0.0])

    def test_conjugate(self):
        np.testing.assert_array_equal(Quaternion(1, 2, 3, 4).conjugate(), [-1.0, -2.0, -3.0, 4.0])

    def test_axis_angle_round_trip(self):
        axis = Vector3(1, -2, 2).normalize()
        result = Quaternion.from_axis_angle(axis, 1.2).get_axis_angle()
        self.assertIsInstance(result, AxisAngle)
        np.testing.assert_allclose(result.axis, axis, atol=1e-12)
        self.assertAlmostEqual(result.angle, 1.2)

    def test_axis_angle_of_identity(self):
        result = quaternion.get_axis_angle(Quaternion())
        np.testing.assert_array_equal(result.axis, [1.0, 0.0, 0.0])
        self.assertEqual(result.angle, 0.0)

    def test_get_angle(self):
        a = Quaternion.from_axis_angle(Z_AXIS, 0.2)
        b = Quaternion.from_axis_angle(Z_AXIS, 0.9)
        self.assertAlmostEqual(a.get_angle(b), 0.7)
        self.assertAlmostEqual(a.get_angle(a), 0.0, places=6)

    def test_rotate_axes_compose(self):
        for method, axis in (("rotate_x", X_AXIS), ("rotate_y", Y_AXIS), ("rotate_z", Z_AXIS)):
            expected = self.b.multiply(Quaternion.from_axis_angle(axis, 0.4))
            self.assertTrue(getattr(self.b, method)(0.4).equals(expected), method)

    def test_axis_rotation_round_trip(self):
        v = Vector3(0.5, -1.0, 2.0)
        axis = Vector3(2, 1, -1).normalize()
        there = v.transform_quaternion(Quaternion.from_axis_angle(axis, 0.8))
        back = there.transform_quaternion(Quaternion.from_axis_angle(axis, -0.8))
        np.testing.assert_allclose(back, v, atol=1e-12)

    def test_calculate_w(self):
        q = Quaternion(self.b.x, self.b.y, self.b.z, 0.0)
        np.testing.assert_allclose(q.calculate_w(), self.b, atol=1e-12)

    def test_exp_ln_round_trip(self):
        self.assertTrue(self.b.ln().exp().equals(self.b))
        np.testing.assert_allclose(Quaternion().ln(), [0.0, 0.0, 0.0, 0.0])

    def test_pow(self):
        self.assertTrue(self.b.pow(2.0).equals(self.b.multiply(self.b)))
        root = self.b.pow(0.5)
        self.assertTrue(root.multiply(root).equals(self.b))
        self.assertTrue(self.b.pow(1.0).equals(self.b))

    def test_random_is_unit(self):
        seed(99)
        for _ in range(10):
            self.assertAlmostEqual(Quaternion.random().magnitude, 1.0)

    def test_from_matrix3_branches(self):
        # positive trace, then each dominant diagonal entry
        cases = ((Vector3(1, 1, 1).normalize(), 0.5), (X_AXIS, 3.0), (Y_AXIS, 3.0), (Z_AXIS, 3.0))
        for axis, angle in cases:
            q = Quaternion.from_axis_angle(axis, angle)
            m = Matrix3.from_quaternion(q)
            assert_same_rotation(self, Quaternion.from_matrix3(m), q)

    def test_from_matrix3_half_turns(self):
        for axis in (X_AXIS, Y_AXIS, Z_AXIS):
            q = Quaternion.from_axis_angle(axis, math.pi)
            assert_same_rotation(self, quaternion.from_matrix3(Matrix3.from_quaternion(q)), q)

    def test_euler_orders_compose(self):
        x, y, z = 0.3, -0.7, 1.1
        qx = Quaternion.from_axis_angle(X_AXIS, x)
        qy = Quaternion.from_axis_angle(Y_AXIS, y)
        qz = Quaternion.from_axis_angle(Z_AXIS, z)
        cases = (
            (quaternion.from_euler_xyz(x, y, z, degrees=False), qx @ qy @ qz),
            (quaternion.from_euler_xzy(x, z, y, degrees=False), qx @ qz @ qy),
            (quaternion.from_euler_yxz(y, x, z, degrees=False), qy @ qx @ qz),
            (quaternion.from_euler_yzx(y, z, x, degrees=False), qy @ qz @ qx),
            (quaternion.from_euler_zxy(z, x, y, degrees=False), qz @ qx @ qy),
            (quaternion.from_euler_zyx(z, y, x, degrees=False), qz @ qy @ qx),
        )
        for result, expected in cases:
            np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_euler_orders_differ(self):
        xyz = quaternion.from_euler_xyz(10, 20, 30)
        zyx = quaternion.from_euler_zyx(30, 20, 10)
        self.assertFalse(xyz.equals(zyx))

    def test_euler_degrees_by_default(self):
        q = Quaternion.from_euler(90, 0, 0)
        assert_same_rotation(self, q, Quaternion.from_axis_angle(Z_AXIS, math.pi / 2))
        self.assertTrue(q.equals(quaternion.from_euler_zyx(math.pi / 2, 0, 0, degrees=False)))

    def test_from_axes(self):
        identity = Quaternion.from_axes([0, 0, -1], [1, 0, 0], [0, 1, 0])
        assert_same_rotation(self, identity, Quaternion.identity())

        rotation = Quaternion.from_axis_angle(Vector3(1, 2, 0).normalize(), 0.9)
        right = X_AXIS.transform_quaternion(rotation)
        up = Y_AXIS.transform_quaternion(rotation)
        view = Vector3(0, 0, -1).transform_quaternion(rotation)
        q = Quaternion.from_axes(view, right, up)
        np.testing.assert_allclose(right.transform_quaternion(q), [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(up.transform_quaternion(q), [0.0, 1.0, 0.0], atol=1e-12)

    def test_from_rotation_to(self):
        a = Vector3(1, 0, 0)
        b = Vector3(0, 0.6, 0.8)
        q = Quaternion.from_rotation_to(a, b)
        np.testing.assert_allclose(a.transform_quaternion(q), b, atol=1e-12)

    def test_from_rotation_to_parallel(self):
        np.testing.assert_array_equal(quaternion.from_rotation_to(X_AXIS, X_AXIS), Quaternion())

    def test_from_rotation_to_anti_parallel(self):
        for a in (X_AXIS, Y_AXIS, Vector3(0, 0.6, 0.8)):
            b = a.negate()
            q = quaternion.from_rotation_to(a, b)
            self.assertAlmostEqual(q.magnitude, 1.0)
            self.assertEqual(q.w, 0.0)
            np.testing.assert_allclose(a.transform_quaternion(q), b, atol=1e-12)

    def test_from_rotation_to_nearly_anti_parallel(self):
        # 1e-3 radians away from opposite, dot is about -0.9999995
        b = Vector3(-math.cos(1e-3), math.sin(1e-3), 0.0)
        q = quaternion.from_rotation_to(X_AXIS, b)
        self.assertEqual(q.w, 0.0)
        self.assertAlmostEqual(q.magnitude, 1.0)
        np.testing.assert_allclose(X_AXIS.transform_quaternion(q), b, atol=2e-3)


class TestDualQuaternion(unittest.TestCase):
    def setUp(self):
        self.q = Quaternion.from_axis_angle(Vector3(1, 2, 3).normalize(), 0.8)
        self.t = Vector3(3, -1, 2)
        self.dq = DualQuaternion.from_rotation_translation(self.q, self.t)

    def to_matrix(self, dq):
        return Matrix4.from_dual_quaternion(dq).to_numpy()

    def test_default_is_identity(self):
        np.testing.assert_array_equal(DualQuaternion(), [0, 0, 0, 1, 0, 0, 0, 0])

    def test_parts(self):
        np.testing.assert_array_equal(self.dq.get_real(), self.q)
        np.testing.assert_allclose(self.dq.get_translation(), self.t, atol=1e-12)
        self.assertIsInstance(self.dq.get_dual(), Quaternion)

    def test_set_parts(self):
        dq = DualQuaternion()
        dq.set_real(self.q)
        dq.set_dual([1, 2, 3, 4])
        np.testing.assert_array_equal(dq.get_real(), self.q)
        np.testing.assert_array_equal(dq.get_dual(), [1.0, 2.0, 3.0, 4.0])

    def test_set_parts_output_last(self):
        out = DualQuaternion()
        self.assertIs(dual_quaternion.set_real(self.q, out), out)
        self.assertIs(dual_quaternion.set_dual([1, 2, 3, 4], out), out)
        np.testing.assert_array_equal(out, [*self.q, 1.0, 2.0, 3.0, 4.0])

        fresh = dual_quaternion.set_dual([1, 2, 3, 4])
        self.assertIsInstance(fresh, DualQuaternion)
        np.testing.assert_array_equal(fresh.get_real(), Quaternion())

    def test_from_translation_and_rotation(self):
        moved = DualQuaternion.from_translation([1, 2, 3])
        np.testing.assert_allclose(moved.get_translation(), [1.0, 2.0, 3.0])
        turned = DualQuaternion.from_rotation(self.q)
        np.testing.assert_allclose(turned.get_translation(), [0.0, 0.0, 0.0], atol=1e-15)

    def test_multiply_matches_matrices(self):
        other = DualQuaternion.from_rotation_translation(
            Quaternion.from_axis_angle(Y_AXIS, -0.4), [0, 5, 1])
        product = self.dq.multiply(other)
        np.testing.assert_allclose(self.to_matrix(product),
                                   self.to_matrix(self.dq) @ self.to_matrix(other), atol=1e-12)

    def test_multiply_aliasing(self):
        other = DualQuaternion.from_translation([1, 1, 1])
        fresh = self.dq.multiply(other)
        left = self.dq.clone()
        left.multiply(other, left)
        np.testing.assert_array_equal(left, fresh)

    def test_translate_is_local(self):
        moved = self.dq.translate([1, 0, 0])
        expected = self.t.add(X_AXIS.transform_quaternion(self.q))
        np.testing.assert_allclose(moved.get_translation(), expected, atol=1e-12)

    def test_rotate_axes_keep_translation(self):
        for method, axis in (("rotate_x", X_AXIS), ("rotate_y", Y_AXIS), ("rotate_z", Z_AXIS)):
            rotated = getattr(self.dq, method)(0.5)
            np.testing.assert_allclose(rotated.get_translation(), self.t, atol=1e-12)
            expected = self.q.multiply(Quaternion.from_axis_angle(axis, 0.5))
            np.testing.assert_allclose(rotated.get_real(), expected, atol=1e-12)

    def test_rotate_by_quaternion(self):
        r = Quaternion.from_axis_angle(Z_AXIS, 0.6)
        appended = self.dq.rotate_by_quaternion_append(r)
        prepended = self.dq.rotate_by_quaternion_prepend(r)
        np.testing.assert_allclose(appended, self.dq.multiply(DualQuaternion.from_rotation(r)),
                                   atol=1e-12)
        np.testing.assert_allclose(prepended, DualQuaternion.from_rotation(r).multiply(self.dq),
                                   atol=1e-12)

    def test_rotate_around_axis(self):
        result = self.dq.rotate_around_axis([0, 0, 2], 0.6)
        expected = self.dq.rotate_by_quaternion_append(Quaternion.from_axis_angle(Z_AXIS, 0.6))
        np.testing.assert_allclose(result, expected, atol=1e-12)

    def test_rotate_around_axis_negligible_copies(self):
        np.testing.assert_array_equal(self.dq.rotate_around_axis([0, 0, 1], 0.0), self.dq)
        np.testing.assert_array_equal(self.dq.rotate_around_axis([0, 0, 0], 1.0), self.dq)

    def test_from_matrix4_round_trip(self):
        m = Matrix4.from_rotation_translation(self.q, self.t)
        dq = DualQuaternion.from_matrix4(m)
        np.testing.assert_allclose(self.to_matrix(dq), m.to_numpy(), atol=1e-12)

    def test_from_matrix4_discards_scale(self):
        m = Matrix4.from_rotation_translation_scale(self.q, self.t, [2, 3, 4])
        dq = dual_quaternion.from_matrix4(m)
        self.assertAlmostEqual(dq.magnitude, 1.0)
        np.testing.assert_allclose(dq.get_translation(), self.t, atol=1e-12)

    def test_invert(self):
        product = self.dq.multiply(self.dq.invert())
        self.assertTrue(product.equals(DualQuaternion.identity()))

    def test_invert_zero_returns_zero(self):
        np.testing.assert_array_equal(dual_quaternion.invert(np.zeros(8)), np.zeros(8))

    def test_conjugate_of_unit_is_inverse(self):
        np.testing.assert_allclose(self.dq.conjugate(), self.dq.invert(), atol=1e-12)

    def test_normalize(self):
        scaled = self.dq.scale(3.0)
        self.assertAlmostEqual(scaled.magnitude, 3.0)
        self.assertTrue(scaled.normalize().equals(self.dq))

    def test_normalize_zero_real_copies(self):
        values = [0, 0, 0, 0, 1, 2, 3, 4]
        np.testing.assert_array_equal(dual_quaternion.normalize(values), values)

    def test_dot_uses_real_parts(self):
        self.assertAlmostEqual(self.dq.dot(self.dq), 1.0)
        self.assertAlmostEqual(dual_quaternion.squared_magnitude(self.dq), 1.0)

    def test_lerp(self):
        other = DualQuaternion.from_translation([1, 0, 0])
        self.assertTrue(self.dq.lerp(other, 0.0).equals(self.dq))
        self.assertTrue(self.dq.lerp(other, 1.0).equals(other))

    def test_lerp_flips_opposite_hemisphere(self):
        flipped = self.dq.scale(-1.0)
        self.assertTrue(self.dq.lerp(flipped, 1.0).equals(self.dq))


if __name__ == "__main__":
    unittest.main()
