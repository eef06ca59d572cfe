"""ECDSA signature value type."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import SCALAR_BYTES
from .errors import OutOfRange


@dataclass(frozen=True)
class Signature:
    """
    An ECDSA signature (r, s).

    The components are not range checked here; verification rejects
    signatures whose r or s falls outside [1, N - 1].
    """

    r: int
    s: int

    def to_bytes(self) -> bytes:
        """Serialize as the 64-byte compact form r || s."""
        if not (0 <= self.r < 2**256 and 0 <= self.s < 2**256):
            raise OutOfRange("Signature components do not fit in 32 bytes")
        return self.r.to_bytes(SCALAR_BYTES, "big") + self.s.to_bytes(SCALAR_BYTES, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        if len(data) != 2 * SCALAR_BYTES:
            raise OutOfRange(
                f"Compact signature must be {2 * SCALAR_BYTES} bytes, got {len(data)}"
            )
        r = int.from_bytes(data[:SCALAR_BYTES], "big")
        s = int.from_bytes(data[SCALAR_BYTES:], "big")
        return cls(r, s)

    def hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, hex_signature: str) -> Signature:
        try:
            data = bytes.fromhex(hex_signature)
        except ValueError as e:
            raise OutOfRange("Signature is not a valid hex string") from e
        return cls.from_bytes(data)

    def __str__(self) -> str:
        return f"Signature(r={self.r:x}, s={self.s:x})"
