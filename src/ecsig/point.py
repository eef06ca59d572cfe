"""
This module defines elliptic curve points and the group law on the short
Weierstrass curve y^2 = x^3 + a*x + b over a prime field.

A Curve is a plain descriptor (its coefficients and, optionally, the order of
the group used for scalar reduction). Every point carries the Curve it lives
on, and is one of exactly two variants: Affine, a coordinate pair satisfying
the curve equation, or Infinity, the identity element. A single group-law
implementation serves every curve, toy test curves and secp256k1 alike.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import CurveMismatch, FieldMismatch, PointNotOnCurve
from .field import FieldElement

Coordinate = Union[FieldElement, int]


@dataclass(frozen=True)
class Curve:
    """
    Descriptor of the curve y^2 = x^3 + a*x + b.

    Two curves are the same curve when their coefficients match; order and
    name are informational. When order is set, scalar multiplication reduces
    its scalar modulo order.
    """

    a: FieldElement
    b: FieldElement
    order: Optional[int] = field(default=None, compare=False)
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if self.a.modulus != self.b.modulus:
            raise FieldMismatch("Curve coefficients must belong to the same field")

    @property
    def modulus(self) -> int:
        return self.a.modulus

    def lift(self, value: Coordinate) -> FieldElement:
        """Return value as an element of the curve's field."""
        if isinstance(value, FieldElement):
            if value.modulus != self.modulus:
                raise FieldMismatch(
                    f"Coordinate {value!r} is not in the field of order {self.modulus}"
                )
            return value
        return self.a.element(value)

    def contains(self, x: Coordinate, y: Coordinate) -> bool:
        """Check whether (x, y) satisfies the curve equation."""
        x, y = self.lift(x), self.lift(y)
        return y ** 2 == x ** 3 + self.a * x + self.b

    def point(self, x: Coordinate, y: Coordinate) -> Affine:
        return Affine(x, y, self)

    def infinity(self) -> Infinity:
        return Infinity(self)

    def __repr__(self) -> str:
        if self.name is not None:
            return f"Curve({self.name})"
        return f"Curve(a={self.a.value}, b={self.b.value}, p={self.modulus})"


class Point:
    """Base class of the two point variants, Affine and Infinity."""

    __slots__ = ("curve",)

    curve: Curve

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_infinity(self) -> bool:
        return isinstance(self, Infinity)

    def __add__(self, other: Point) -> Point:
        """
        Add two points with the chord-and-tangent rule.

        Parameters:
        other (Point): A point on the same curve.

        Returns:
        Point: The sum of the two points as a new Point object.

        Raises:
        CurveMismatch: If other lies on a different curve.
        """
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise CurveMismatch(f"{self!r} and {other!r} are not on the same curve")

        if isinstance(self, Infinity):
            return other
        if isinstance(other, Infinity):
            return self

        # Vertical chord: P + (-P) = O
        if self.x == other.x and self.y != other.y:
            return Infinity(self.curve)

        if self == other:
            return self._dbl()

        s = (other.y - self.y) / (other.x - self.x)
        sum_x = s ** 2 - self.x - other.x
        sum_y = s * (self.x - sum_x) - self.y
        return Affine._trusted(sum_x, sum_y, self.curve)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + -other

    def __mul__(self, scalar: int) -> Point:
        if not isinstance(scalar, int):
            return NotImplemented
        return scalar_mul(self, scalar)

    __rmul__ = __mul__


class Affine(Point):
    """A finite point (x, y) on a curve."""

    __slots__ = ("x", "y")

    x: FieldElement
    y: FieldElement

    def __init__(self, x: Coordinate, y: Coordinate, curve: Curve):
        """
        Initialize a point on an elliptic curve.

        Parameters:
        x (FieldElement or int): The x-coordinate of the point.
        y (FieldElement or int): The y-coordinate of the point.
        curve (Curve): The curve the point lies on.

        Raises:
        OutOfRange: If an integer coordinate is not in the curve's field.
        FieldMismatch: If a coordinate belongs to a different field.
        PointNotOnCurve: If (x, y) does not satisfy the curve equation.
        """
        x, y = curve.lift(x), curve.lift(y)
        if not curve.contains(x, y):
            raise PointNotOnCurve(f"({x.value}, {y.value}) is not on the curve {curve!r}")
        self._assign(x, y, curve)

    def _assign(self, x: FieldElement, y: FieldElement, curve: Curve) -> None:
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "curve", curve)

    @classmethod
    def _trusted(cls, x: FieldElement, y: FieldElement, curve: Curve) -> Affine:
        # Group-law results are on the curve by construction.
        point = object.__new__(cls)
        point._assign(x, y, curve)
        return point

    @property
    def a(self) -> FieldElement:
        return self.curve.a

    @property
    def b(self) -> FieldElement:
        return self.curve.b

    def _dbl(self) -> Point:
        """
        Double the point. A point with y = 0 has order 2 and its tangent is
        vertical, so the result is the point at infinity.
        """
        if self.y.is_zero():
            return Infinity(self.curve)

        x, y = self.x, self.y
        s = (3 * x ** 2 + self.curve.a) / (2 * y)
        sum_x = s ** 2 - 2 * x
        sum_y = s * (x - sum_x) - y
        return Affine._trusted(sum_x, sum_y, self.curve)

    def __neg__(self) -> Affine:
        return Affine._trusted(self.x, -self.y, self.curve)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if not isinstance(other, Affine):
            return False
        return self.x == other.x and self.y == other.y and self.curve == other.curve

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.curve))

    def __str__(self) -> str:
        return f"X: 0x{self.x.value:x}\nY: 0x{self.y.value:x}"

    def __repr__(self) -> str:
        return f"Point({self.x.value}, {self.y.value})_{self.a.value}_{self.b.value} FieldF{self.curve.modulus}"


class Infinity(Point):
    """The point at infinity, identity element of the group."""

    __slots__ = ()

    def __init__(self, curve: Curve):
        object.__setattr__(self, "curve", curve)

    def __neg__(self) -> Infinity:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return isinstance(other, Infinity)

    def __hash__(self) -> int:
        return hash(Infinity)

    def __str__(self) -> str:
        return "0"

    def __repr__(self) -> str:
        return "Point(∞)"


def scalar_mul(point: Point, scalar: int) -> Point:
    """
    Multiply a point by an integer scalar using the double-and-add method.

    When the point's curve declares a group order the scalar is reduced
    modulo that order first. Otherwise a negative scalar multiplies the
    negated point.

    Parameters:
    point (Point): The point to multiply.
    scalar (int): The scalar to multiply the point by.

    Returns:
    Point: The result of the scalar multiplication.

    Raises:
    ValueError: If the scalar is not an integer.
    """
    if not isinstance(scalar, int):
        raise ValueError("The scalar must be an integer")

    order = point.curve.order
    if order is not None:
        scalar %= order
    elif scalar < 0:
        point, scalar = -point, -scalar

    result: Point = Infinity(point.curve)
    current = point
    while scalar:
        if scalar & 1:
            result = result + current
        current = current + current
        scalar >>= 1
    return result
