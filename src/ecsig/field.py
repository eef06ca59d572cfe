"""
This module defines finite-field elements, the coordinates of every curve
point in ecsig.

Two variants are provided. FieldElement is the checked generic form: its
modulus is validated by trial division, which is only practical for small
moduli such as the toy curves used in tests. S256Field is bound to the
secp256k1 prime P, a trusted constant for which trial division would never
finish, so the primality check is skipped.

Elements are immutable; every operation returns a new instance of the same
variant as the left operand.
"""

from __future__ import annotations

from math import isqrt
from typing import Union

from .constants import P
from .errors import DivisionByZero, FieldMismatch, InvalidModulus, OutOfRange


def is_prime(n: int) -> bool:
    """Return True if n is prime, by trial division over odd divisors."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


class FieldElement:
    """Class representing an element of the prime field of order modulus."""

    __slots__ = ("value", "modulus")

    def __init__(self, value: int, modulus: int):
        """
        Initialize a field element.

        Parameters:
        value (int): The element, in the range [0, modulus).
        modulus (int): The prime order of the field.

        Raises:
        InvalidModulus: If modulus is not prime.
        OutOfRange: If value is not in [0, modulus).
        """
        if not is_prime(modulus):
            raise InvalidModulus(f"{modulus} is not a prime number")
        self._assign(value, modulus)

    def _assign(self, value: int, modulus: int) -> None:
        if not isinstance(value, int):
            raise OutOfRange(f"Field value must be an integer, got {value!r}")
        if not 0 <= value < modulus:
            raise OutOfRange(f"Value {value} not in field range 0 to {modulus - 1}")
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "modulus", modulus)

    def _make(self, value: int) -> FieldElement:
        # The modulus was validated when self was built.
        element = object.__new__(type(self))
        element._assign(value, self.modulus)
        return element

    def _check_same_field(self, other: FieldElement) -> None:
        if self.modulus != other.modulus:
            raise FieldMismatch(
                "Cannot operate on elements in different fields "
                f"({self.modulus} and {other.modulus})"
            )

    def element(self, value: int) -> FieldElement:
        """
        Return the element with the given value in this element's field.

        Raises:
        OutOfRange: If value is not in [0, modulus).
        """
        return self._make(value)

    def is_zero(self) -> bool:
        return self.value == 0

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.value == other.value and self.modulus == other.modulus

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self._make((self.value + other.value) % self.modulus)

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self._make((self.value - other.value) % self.modulus)

    def __neg__(self) -> FieldElement:
        return self._make(-self.value % self.modulus)

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        """
        Multiply by another element of the same field, or scale by an integer.

        Raises:
        FieldMismatch: If other belongs to a different field.
        """
        if isinstance(other, FieldElement):
            self._check_same_field(other)
            return self._make(self.value * other.value % self.modulus)
        if isinstance(other, int):
            return self._make(self.value * other % self.modulus)
        return NotImplemented

    def __rmul__(self, coefficient: int) -> FieldElement:
        if not isinstance(coefficient, int):
            return NotImplemented
        return self._make(coefficient * self.value % self.modulus)

    def __pow__(self, exponent: int) -> FieldElement:
        """
        Raise the element to an integer power.

        Non-negative exponents are first reduced modulo (modulus - 1), which
        Fermat's little theorem allows for every non-zero element, and then
        evaluated by square-and-multiply. A negative exponent -e is computed
        as (self ** (modulus - 2)) ** e.

        Raises:
        DivisionByZero: If the zero element is raised to a negative power.
        """
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            if self.value == 0:
                raise DivisionByZero("The zero element has no multiplicative inverse")
            return (self ** (self.modulus - 2)) ** -exponent
        if self.value == 0:
            return self._make(1 if exponent == 0 else 0)
        n = exponent % (self.modulus - 1)
        return self._make(pow(self.value, n, self.modulus))

    def __truediv__(self, other: FieldElement) -> FieldElement:
        """
        Divide using the Fermat inverse: a / b = a * b^(p - 2).

        Raises:
        FieldMismatch: If other belongs to a different field.
        DivisionByZero: If other is the zero element.
        """
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        if other.value == 0:
            raise DivisionByZero("Division by the zero field element")
        return self * other ** (self.modulus - 2)

    def __repr__(self) -> str:
        return f"FieldElement_{self.modulus}({self.value})"


class S256Field(FieldElement):
    """An element of the secp256k1 base field, whose prime P is trusted."""

    __slots__ = ()

    def __init__(self, value: int):
        self._assign(value, P)

    def __repr__(self) -> str:
        return f"S256Field(0x{self.value:064x})"
