import unittest

from ecsig import (
    Affine,
    Curve,
    CurveMismatch,
    FieldElement,
    FieldMismatch,
    Infinity,
    OutOfRange,
    PointNotOnCurve,
    scalar_mul,
)

PRIME = 223


def make_curve(a, b, prime=PRIME):
    return Curve(FieldElement(a, prime), FieldElement(b, prime))


class PointTests(unittest.TestCase):
    def setUp(self):
        # y^2 = x^3 + 7 over F_223
        self.curve = make_curve(0, 7)
        self.inf = self.curve.infinity()

    def point(self, x, y):
        return self.curve.point(x, y)

    def test_on_curve(self):
        for x, y in ((192, 105), (17, 56), (1, 193), (6, 0)):
            p = self.point(x, y)
            self.assertEqual(p.x, FieldElement(x, PRIME))
            self.assertEqual(p.y, FieldElement(y, PRIME))
            self.assertEqual(p.a, FieldElement(0, PRIME))
            self.assertEqual(p.b, FieldElement(7, PRIME))

    def test_not_on_curve(self):
        for x, y in ((200, 119), (42, 99)):
            with self.assertRaises(PointNotOnCurve):
                self.point(x, y)

    def test_coordinate_checks(self):
        with self.assertRaises(OutOfRange):
            self.point(223, 0)
        with self.assertRaises(FieldMismatch):
            Affine(FieldElement(1, 19), FieldElement(1, 19), self.curve)
        with self.assertRaises(FieldMismatch):
            Curve(FieldElement(0, 19), FieldElement(7, 223))

    def test_equality(self):
        self.assertEqual(self.point(192, 105), self.point(192, 105))
        self.assertNotEqual(self.point(192, 105), self.point(17, 56))
        self.assertNotEqual(self.point(192, 105), self.inf)
        self.assertEqual(self.inf, Infinity(self.curve))
        self.assertTrue(self.inf.is_infinity())
        self.assertFalse(self.point(192, 105).is_infinity())

    def test_add_vectors(self):
        vectors = (
            ((192, 105), (17, 56), (170, 142)),
            ((170, 142), (60, 139), (220, 181)),
            ((47, 71), (117, 141), (60, 139)),
            ((143, 98), (76, 66), (47, 71)),
        )
        for p1, p2, expected in vectors:
            self.assertEqual(self.point(*p1) + self.point(*p2), self.point(*expected))

    def test_identity(self):
        p = self.point(47, 71)
        self.assertEqual(p + self.inf, p)
        self.assertEqual(self.inf + p, p)
        self.assertEqual(self.inf + self.inf, self.inf)

    def test_inverse(self):
        p = self.point(47, 71)
        reflected = self.point(47, PRIME - 71)
        self.assertEqual(-p, reflected)
        self.assertEqual(p + reflected, self.inf)
        self.assertEqual(p - p, self.inf)

    def test_negation_of_each_variant(self):
        p = self.point(47, 71)
        self.assertIs(-self.inf, self.inf)
        self.assertEqual(self.inf - p, self.point(47, 152))
        self.assertEqual(p - self.inf, p)
        self.assertEqual(self.point(15, 137) - p, self.point(36, 111))

    def test_doubling(self):
        self.assertEqual(self.point(192, 105) + self.point(192, 105), self.point(49, 71))
        self.assertEqual(self.point(143, 98) + self.point(143, 98), self.point(64, 168))
        self.assertEqual(self.point(47, 71) + self.point(47, 71), self.point(36, 111))

    def test_vertical_tangent(self):
        p = self.point(6, 0)
        self.assertEqual(p + p, self.inf)
        self.assertEqual(2 * p, self.inf)
        self.assertEqual(3 * p, p)

    def test_commutative(self):
        points = [self.point(192, 105), self.point(17, 56), self.point(47, 71), self.inf]
        for p in points:
            for q in points:
                self.assertEqual(p + q, q + p)

    def test_associative(self):
        p = self.point(192, 105)
        q = self.point(17, 56)
        r = self.point(47, 71)
        self.assertEqual((p + q) + r, p + (q + r))
        self.assertEqual((p + p) + q, p + (p + q))
        self.assertEqual((p + q) + (-q), p)

    def test_curve_mismatch(self):
        other = make_curve(1, 1)
        with self.assertRaises(CurveMismatch):
            self.point(47, 71) + other.point(0, 1)
        with self.assertRaises(CurveMismatch):
            self.point(47, 71) + make_curve(0, 7, prime=19).point(0, 8)

    def test_scalar_mul_vectors(self):
        p = self.point(47, 71)
        self.assertEqual(2 * p, self.point(36, 111))
        self.assertEqual(3 * p, self.point(15, 137))
        self.assertEqual(4 * p, self.point(194, 51))
        self.assertEqual(8 * p, self.point(116, 55))
        self.assertEqual(20 * p, self.point(47, 152))
        self.assertEqual(21 * p, self.inf)
        self.assertEqual(p * 2, self.point(36, 111))

    def test_scalar_mul_matches_repeated_addition(self):
        p = self.point(15, 86)
        expected = self.inf
        for k in range(51):
            self.assertEqual(scalar_mul(p, k), expected)
            expected = expected + p

    def test_scalar_mul_zero_and_negative(self):
        p = self.point(47, 71)
        self.assertEqual(0 * p, self.inf)
        self.assertEqual(-1 * p, -p)
        self.assertEqual(-3 * p, -(3 * p))
        self.assertEqual(5 * self.inf, self.inf)

    def test_scalar_mul_reduces_by_order(self):
        curve = Curve(FieldElement(0, PRIME), FieldElement(7, PRIME), order=21)
        p = curve.point(47, 71)
        self.assertEqual(22 * p, p)
        self.assertEqual(-1 * p, curve.point(47, 152))

    def test_scalar_must_be_integer(self):
        with self.assertRaises(ValueError):
            scalar_mul(self.point(47, 71), 1.5)

    def test_repr(self):
        self.assertEqual(repr(self.inf), "Point(∞)")
        self.assertEqual(repr(self.point(47, 71)), "Point(47, 71)_0_7 FieldF223")


if __name__ == "__main__":
    unittest.main()
