"""
Scalar sampling for private keys and signing nonces.

The randomness source is an explicit argument: any callable that takes a
byte count and returns that many uniformly random bytes. secrets.token_bytes
is the default; tests pass fixed byte sequences.
"""

import secrets
from typing import Callable

from .constants import N, SCALAR_BYTES
from .errors import OutOfRange

RandomSource = Callable[[int], bytes]


def random_scalar(randbytes: RandomSource = secrets.token_bytes) -> int:
    """
    Draw a scalar in [1, N - 1] from 32 random bytes.

    The bytes are read as a big-endian integer and mapped to (raw mod (N - 1)) + 1.
    This reduction carries a negligible bias compared with rejection sampling.

    Raises:
    OutOfRange: If the source does not return exactly 32 bytes.
    """
    raw = randbytes(SCALAR_BYTES)
    if len(raw) != SCALAR_BYTES:
        raise OutOfRange(
            f"Randomness source returned {len(raw)} bytes, expected {SCALAR_BYTES}"
        )
    return int.from_bytes(raw, "big") % (N - 1) + 1
