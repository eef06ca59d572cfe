"""
This module defines secp256k1 key pairs.

A PrivateKey holds a scalar d in [1, N - 1]; its PublicKey is the point
d * G, derived once and cached. Both offer the raw accessors the rest of the
library works with (the scalar, and the point coordinates) along with the
common text and byte encodings: 64-digit hex and WIF for private keys, SEC 1
compressed and uncompressed form for public keys.
"""

from __future__ import annotations

import secrets
from typing import Optional

from . import ecdsa
from .constants import (
    N,
    SCALAR_BYTES,
    WIF_COMPRESSED_SUFFIX,
    WIF_MAINNET_PREFIX,
    WIF_TESTNET_PREFIX,
)
from .encoding import base58check_decode, base58check_encode
from .errors import OutOfRange, PointNotOnCurve
from .point import Affine, Point
from .rand import RandomSource, random_scalar
from .secp256k1 import G, S256Point, SECP256K1, lift_x
from .signature import Signature


class PrivateKey:
    """Class representing a secp256k1 private key."""

    __slots__ = ("_secret", "_public_key")

    def __init__(
        self,
        secret: Optional[int] = None,
        randbytes: RandomSource = secrets.token_bytes,
    ):
        """
        Initialize a private key.

        Parameters:
        secret (Optional[int]): The scalar d. Drawn from randbytes when omitted.
        randbytes (RandomSource): Randomness source used when secret is omitted.

        Raises:
        OutOfRange: If secret is not an integer in [1, N - 1].
        """
        if secret is None:
            secret = random_scalar(randbytes)
        elif not isinstance(secret, int) or not 1 <= secret < N:
            raise OutOfRange("Private key must be in range [1, N-1]")
        self._secret = secret
        self._public_key: Optional[PublicKey] = None

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def public_key(self) -> PublicKey:
        if self._public_key is None:
            self._public_key = PublicKey.from_private_key(self)
        return self._public_key

    def to_hex(self) -> str:
        return f"{self._secret:064x}"

    @classmethod
    def from_hex(cls, hex_key: str) -> PrivateKey:
        """
        Parse a private key from a hex string, with or without a 0x prefix.

        Raises:
        OutOfRange: If the string is not hex or the scalar is out of range.
        """
        digits = hex_key[2:] if hex_key.lower().startswith("0x") else hex_key
        try:
            secret = int(digits, 16)
        except ValueError as e:
            raise OutOfRange(f"Invalid private key hex {hex_key!r}") from e
        return cls(secret)

    def to_wif(self, compressed: bool = False, testnet: bool = False) -> str:
        """
        Encode the key in Wallet Import Format.

        The payload is a version byte (0x80 mainnet, 0xEF testnet), the
        32-byte big-endian scalar and, for keys whose public key is used in
        compressed form, a trailing 0x01.
        """
        prefix = WIF_TESTNET_PREFIX if testnet else WIF_MAINNET_PREFIX
        payload = bytes([prefix]) + self._secret.to_bytes(SCALAR_BYTES, "big")
        if compressed:
            payload += bytes([WIF_COMPRESSED_SUFFIX])
        return base58check_encode(payload)

    @classmethod
    def from_wif(cls, wif: str) -> PrivateKey:
        payload = base58check_decode(wif)
        if payload[:1] not in (bytes([WIF_MAINNET_PREFIX]), bytes([WIF_TESTNET_PREFIX])):
            raise OutOfRange("Unknown WIF version byte")
        body = payload[1:]
        if len(body) == SCALAR_BYTES + 1 and body[-1] == WIF_COMPRESSED_SUFFIX:
            body = body[:-1]
        if len(body) != SCALAR_BYTES:
            raise OutOfRange(f"WIF payload has invalid length {len(payload)}")
        return cls(int.from_bytes(body, "big"))

    def sign(self, message: ecdsa.Message, signer: Optional[ecdsa.Signer] = None) -> Signature:
        return (signer or ecdsa.Signer()).sign(message, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash((PrivateKey, self._secret))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<hidden>)"


class PublicKey:
    """Class representing a secp256k1 public key, a finite point on the curve."""

    __slots__ = ("_point",)

    def __init__(self, point: Point):
        """
        Wrap a secp256k1 point as a public key.

        Raises:
        PointNotOnCurve: If point is the point at infinity or lies on another curve.
        """
        if not isinstance(point, Affine):
            raise PointNotOnCurve("A public key cannot be the point at infinity")
        if point.curve != SECP256K1:
            raise PointNotOnCurve(f"{point!r} is not a secp256k1 point")
        self._point = point

    @classmethod
    def from_private_key(cls, private_key: PrivateKey) -> PublicKey:
        """Derive d * G. Never the identity, since 0 < d < N and G has order N."""
        return cls(G * private_key.secret)

    @property
    def point(self) -> Affine:
        return self._point

    @property
    def x(self) -> int:
        return self._point.x.value

    @property
    def y(self) -> int:
        return self._point.y.value

    def sec(self, compressed: bool = False) -> bytes:
        """
        Serialize the key in SEC 1 format.

        Uncompressed: 0x04 || X || Y (65 bytes).
        Compressed: 0x02 or 0x03 by parity of Y, then X (33 bytes).
        """
        x_bytes = self.x.to_bytes(SCALAR_BYTES, "big")
        if compressed:
            prefix = b"\x02" if self.y % 2 == 0 else b"\x03"
            return prefix + x_bytes
        return b"\x04" + x_bytes + self.y.to_bytes(SCALAR_BYTES, "big")

    @classmethod
    def from_sec(cls, data: bytes) -> PublicKey:
        """
        Parse a SEC 1 compressed or uncompressed public key.

        Raises:
        OutOfRange: If the length or prefix is invalid, or a coordinate is not below P.
        PointNotOnCurve: If the encoded point is not on secp256k1.
        """
        if len(data) == 2 * SCALAR_BYTES + 1 and data[0] == 4:
            x = int.from_bytes(data[1:SCALAR_BYTES + 1], "big")
            y = int.from_bytes(data[SCALAR_BYTES + 1:], "big")
            return cls(S256Point(x, y))
        if len(data) == SCALAR_BYTES + 1 and data[0] in (2, 3):
            x = int.from_bytes(data[1:], "big")
            return cls(lift_x(x, even=data[0] == 2))
        raise OutOfRange("Input must be a 33-byte compressed or 65-byte uncompressed SEC key")

    def hex(self, compressed: bool = False) -> str:
        return self.sec(compressed).hex()

    @classmethod
    def from_hex(cls, hex_public_key: str) -> PublicKey:
        digits = hex_public_key[2:] if hex_public_key.lower().startswith("0x") else hex_public_key
        try:
            data = bytes.fromhex(digits)
        except ValueError as e:
            raise OutOfRange(f"Invalid public key hex {hex_public_key!r}") from e
        return cls.from_sec(data)

    def verify(
        self,
        message: ecdsa.Message,
        signature: Signature,
        verifier: Optional[ecdsa.Verifier] = None,
    ) -> bool:
        return (verifier or ecdsa.Verifier()).verify(message, signature, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(self._point)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hex()})"
