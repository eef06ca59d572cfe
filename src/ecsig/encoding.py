"""
Base58Check, the encoding behind WIF private keys, and the double SHA-256
it shares with message hashing.

Base58Check appends the first four bytes of the double SHA-256 of a payload
before Base58-encoding it with the base58 library.
"""

from hashlib import sha256

import base58

from .errors import ChecksumError, OutOfRange

CHECKSUM_BYTES = 4


def hash256(data: bytes) -> bytes:
    """Double SHA-256."""
    return sha256(sha256(data).digest()).digest()


def base58check_encode(payload: bytes) -> str:
    checksum = hash256(payload)[:CHECKSUM_BYTES]
    return base58.b58encode(payload + checksum).decode("ascii")


def base58check_decode(text: str) -> bytes:
    """
    Decode a Base58Check string and return its payload.

    Raises:
    OutOfRange: If text is not valid Base58 or is too short to hold a checksum.
    ChecksumError: If the checksum does not match the payload.
    """
    try:
        data = base58.b58decode(text)
    except ValueError as e:
        raise OutOfRange(f"Invalid Base58 string {text!r}") from e
    if len(data) < CHECKSUM_BYTES:
        raise OutOfRange("Base58Check data is shorter than its checksum")
    payload, checksum = data[:-CHECKSUM_BYTES], data[-CHECKSUM_BYTES:]
    if hash256(payload)[:CHECKSUM_BYTES] != checksum:
        raise ChecksumError("Base58Check checksum mismatch")
    return payload
