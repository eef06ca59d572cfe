"""
ECDSA signing and verification over secp256k1.

Signing:
1. z = H(m), the double SHA-256 of the message read as a big-endian integer
2. choose a random nonce k in [1, N - 1]
3. R = k * G, r = R.x mod N
4. s = k^-1 * (z + r * d) mod N
A nonce giving r = 0 or s = 0 is discarded and a new one drawn.

Verification:
1. reject unless 1 <= r, s <= N - 1
2. w = s^-1, u = z * w, v = r * w (all mod N)
3. R' = u * G + v * Q
4. accept iff R' is finite and R'.x mod N == r

R' = (z + r * d) / s * G = k * G = R, which is why the check holds for an
honest signature.

Nonces are fresh randomness per signature, not derived from the key and
message as in RFC 6979: a weak randomness source leaks the private key.
The digest is used as z without truncation to the bit length of N.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Callable, Union

from .constants import MAX_NONCE_ATTEMPTS, N
from .encoding import hash256
from .errors import NonceExhausted, ProtocolRetry
from .modular import mod_inverse
from .rand import RandomSource, random_scalar
from .secp256k1 import G
from .signature import Signature

if TYPE_CHECKING:
    from .keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)

Hasher = Callable[[bytes], bytes]
Message = Union[bytes, bytearray, str]


def _message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError(f"Message must be bytes or str, got {type(message).__name__}")


def hash_to_scalar(message: Message, hasher: Hasher = hash256) -> int:
    """Hash a message and read the digest as a big-endian integer."""
    return int.from_bytes(hasher(_message_bytes(message)), "big")


class Signer:
    """Produces ECDSA signatures with a random nonce per signature."""

    def __init__(
        self,
        randbytes: RandomSource = secrets.token_bytes,
        hasher: Hasher = hash256,
        max_attempts: int = MAX_NONCE_ATTEMPTS,
    ):
        """
        Initialize a signer.

        Parameters:
        randbytes (RandomSource): Source of nonce randomness, called with 32.
        hasher (Hasher): Message hash, applied to the message bytes.
        max_attempts (int): Number of nonces to try before giving up.

        Raises:
        ValueError: If max_attempts is less than 1.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.randbytes = randbytes
        self.hasher = hasher
        self.max_attempts = max_attempts

    def sign(self, message: Message, private_key: PrivateKey) -> Signature:
        """
        Sign a message.

        Parameters:
        message (bytes or str): The message; str is UTF-8 encoded.
        private_key (PrivateKey): The signing key.

        Returns:
        Signature: The signature (r, s).

        Raises:
        NonceExhausted: If every nonce drawn within max_attempts was degenerate.
        """
        z = hash_to_scalar(message, self.hasher)
        d = private_key.secret

        for attempt in range(1, self.max_attempts + 1):
            k = random_scalar(self.randbytes)
            try:
                return self._sign_with_nonce(z, d, k)
            except ProtocolRetry as e:
                logger.debug("Discarding nonce on attempt %d: %s", attempt, e)

        raise NonceExhausted(
            f"No usable nonce after {self.max_attempts} attempts; "
            "check the randomness source"
        )

    @staticmethod
    def _sign_with_nonce(z: int, d: int, k: int) -> Signature:
        # R is finite because 1 <= k < N.
        R = G * k
        r = R.x.value % N
        if r == 0:
            raise ProtocolRetry("nonce produced r == 0")
        s = mod_inverse(k, N) * (z + r * d) % N
        if s == 0:
            raise ProtocolRetry("nonce produced s == 0")
        return Signature(r, s)


class Verifier:
    """Checks ECDSA signatures."""

    def __init__(self, hasher: Hasher = hash256):
        self.hasher = hasher

    def verify(
        self, message: Message, signature: Signature, public_key: PublicKey
    ) -> bool:
        """
        Verify a signature on a message.

        Malformed input (a message that is neither bytes nor str, or
        signature components that are not integers in [1, N - 1]) makes the
        signature invalid; it is not an error.

        Returns:
        bool: True if the signature is valid for the message and key.
        """
        if not isinstance(message, (bytes, bytearray, str)):
            return False
        r, s = signature.r, signature.s
        if not (isinstance(r, int) and isinstance(s, int)):
            return False
        if not (1 <= r < N and 1 <= s < N):
            return False

        z = hash_to_scalar(message, self.hasher)
        w = mod_inverse(s, N)
        u = z * w % N
        v = r * w % N

        R = G * u + public_key.point * v
        if R.is_infinity():
            return False
        return R.x.value % N == r


def sign(message: Message, private_key: PrivateKey) -> Signature:
    """Sign with a Signer using the system randomness source and hash256."""
    return Signer().sign(message, private_key)


def verify(message: Message, signature: Signature, public_key: PublicKey) -> bool:
    return Verifier().verify(message, signature, public_key)
