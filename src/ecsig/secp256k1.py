"""
The secp256k1 curve: y^2 = x^3 + 7 over the field of order P, with generator
G of prime order N.

Points on this curve share the generic group law in ecsig.point. The curve
descriptor carries N, so scalar multiplication by any integer is first reduced
modulo N (valid because G, and every other point on the curve, generates a
cyclic group of order N).
"""

from .constants import A, B, N, P, G_x, G_y
from .errors import PointNotOnCurve
from .field import S256Field
from .point import Affine, Curve, Infinity

SECP256K1: Curve = Curve(S256Field(A), S256Field(B), order=N, name="secp256k1")


def S256Point(x: int, y: int) -> Affine:
    """Return the secp256k1 point (x, y), checked against the curve equation."""
    return Affine(S256Field(x), S256Field(y), SECP256K1)


def lift_x(x: int, even: bool = True) -> Affine:
    """
    Recover the point with the given x-coordinate and y parity.

    Since P = 3 (mod 4), a square root of y^2 is (y^2)^((P + 1) / 4).

    Parameters:
    x (int): The x-coordinate.
    even (bool): Select the point whose y-coordinate is even.

    Raises:
    OutOfRange: If x is not in [0, P).
    PointNotOnCurve: If x^3 + 7 is not a square modulo P.
    """
    x_element = S256Field(x)
    y_squared = x_element ** 3 + SECP256K1.b
    y = y_squared ** ((P + 1) // 4)
    if y ** 2 != y_squared:
        raise PointNotOnCurve(f"No point on secp256k1 has x-coordinate 0x{x:x}")
    if (y.value % 2 == 0) != even:
        y = -y
    return Affine(x_element, y, SECP256K1)


# The generator point G
G: Affine = S256Point(G_x, G_y)

# The identity element
INFINITY: Infinity = SECP256K1.infinity()
