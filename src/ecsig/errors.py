"""
Exceptions raised by ecsig.

Every exception derives from ECSigError and from the builtin exception a
caller would naturally expect (ValueError for bad input, ArithmeticError for
non-invertible elements), so existing ``except ValueError`` handlers keep
working.
"""


class ECSigError(Exception):
    """Base class for all ecsig errors."""


class ValidationError(ECSigError, ValueError):
    """An input failed a construction-time check."""


class InvalidModulus(ValidationError):
    """The field modulus is not prime."""


class OutOfRange(ValidationError):
    """A value, coordinate or scalar lies outside its allowed range."""


class PointNotOnCurve(ValidationError):
    """A coordinate pair does not satisfy the curve equation."""


class ChecksumError(ValidationError):
    """A Base58Check payload failed its checksum."""


class MismatchError(ECSigError, ValueError):
    """Operands belong to different fields or curves."""


class FieldMismatch(MismatchError):
    """Field elements have different moduli."""


class CurveMismatch(MismatchError):
    """Points lie on different curves."""


class ECArithmeticError(ECSigError, ArithmeticError):
    """An arithmetic operation has no defined result."""


class DivisionByZero(ECArithmeticError, ZeroDivisionError):
    """Division by the zero element of a field."""


class NotInvertible(ECArithmeticError):
    """An integer has no inverse modulo n."""


class ProtocolRetry(ECSigError):
    """A nonce produced r == 0 or s == 0 and must be replaced."""


class NonceExhausted(ECSigError, RuntimeError):
    """Signing produced only degenerate nonces; the randomness source is suspect."""
