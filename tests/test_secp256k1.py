import unittest

from ecsig import G, INFINITY, N, P, S256Field, S256Point, SECP256K1, lift_x
from ecsig import OutOfRange, PointNotOnCurve
from ecsig.constants import G_x, G_y


class Secp256k1Tests(unittest.TestCase):
    def test_generator(self):
        self.assertEqual(G.x, S256Field(G_x))
        self.assertEqual(G.y, S256Field(G_y))
        self.assertEqual(G.curve, SECP256K1)
        self.assertEqual(SECP256K1.order, N)
        self.assertTrue(SECP256K1.contains(G_x, G_y))

    def test_small_multiples(self):
        self.assertEqual(1 * G, G)
        self.assertEqual(
            2 * G,
            S256Point(
                0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
                0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
            ),
        )
        self.assertEqual(
            3 * G,
            S256Point(
                0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
                0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
            ),
        )
        self.assertEqual(G + G, 2 * G)

    def test_order(self):
        self.assertEqual(N * G, INFINITY)
        self.assertEqual((N - 1) * G, -G)
        self.assertEqual((N + 1) * G, G)
        self.assertEqual(0 * G, INFINITY)

    def test_scalar_reduced_by_order(self):
        k = 0xDEADBEEF
        self.assertEqual((k + 5 * N) * G, k * G)
        self.assertEqual(-k * G, -(k * G))

    def test_distributive(self):
        a = 0x1F2E3D4C5B6A
        b = 0x0123456789ABCDEF
        self.assertEqual(a * G + b * G, (a + b) * G)
        self.assertEqual(a * (b * G), (a * b) * G)

    def test_not_on_curve(self):
        with self.assertRaises(PointNotOnCurve):
            S256Point(G_x, G_y + 1)
        with self.assertRaises(OutOfRange):
            S256Point(P, 0)

    def test_lift_x(self):
        # G has an even y-coordinate.
        self.assertEqual(lift_x(G_x), G)
        self.assertEqual(lift_x(G_x, even=False), -G)
        point = 3 * G
        self.assertEqual(lift_x(point.x.value, even=point.y.value % 2 == 0), point)

    def test_lift_x_without_root(self):
        # 5^3 + 7 = 132 is not a square modulo P.
        with self.assertRaises(PointNotOnCurve):
            lift_x(5)


if __name__ == "__main__":
    unittest.main()
