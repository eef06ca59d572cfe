"""
Copyright (c) 2024 The ecsig developers

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

The arithmetic in ecsig is not constant time and the code has not been
audited. Do not use it to protect real funds.

This package implements ECDSA signatures over secp256k1 in pure Python, from
finite-field arithmetic upward.

Modules:
- field: Defines FieldElement, prime-field arithmetic, and S256Field for the
  secp256k1 base field.
- point: Defines Curve and the Point variants Affine and Infinity, with the
  group law and double-and-add scalar multiplication.
- secp256k1: The secp256k1 curve, its generator G and point recovery from x.
- modular: Modular inverse by the extended Euclidean algorithm.
- keys: PrivateKey and PublicKey, with hex, WIF and SEC encodings.
- ecdsa: The Signer and Verifier classes.
- signature: The Signature value type and its 64-byte compact form.
- rand: Scalar sampling from an injectable randomness source.
- encoding: Base58Check and double SHA-256.
- errors: The exception hierarchy.
- cli: The ecsig command-line tool.
- constants: Holds the secp256k1 parameters P, N, G_x and G_y and the
  signing limits.

The arithmetic runs in variable time and signing draws a fresh random nonce
for each signature.
"""

from .constants import P, N
from .errors import (
    ECSigError,
    ValidationError,
    InvalidModulus,
    OutOfRange,
    PointNotOnCurve,
    ChecksumError,
    MismatchError,
    FieldMismatch,
    CurveMismatch,
    ECArithmeticError,
    DivisionByZero,
    NotInvertible,
    NonceExhausted,
)
from .field import FieldElement, S256Field
from .point import Curve, Point, Affine, Infinity, scalar_mul
from .secp256k1 import SECP256K1, S256Point, G, INFINITY, lift_x
from .modular import mod_inverse
from .rand import random_scalar
from .signature import Signature
from .ecdsa import Signer, Verifier, sign, verify, hash_to_scalar
from .keys import PrivateKey, PublicKey
