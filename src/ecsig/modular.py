"""Integer arithmetic modulo n shared by the signature protocol."""

from .errors import NotInvertible


def mod_inverse(a: int, n: int) -> int:
    """
    Compute the inverse of a modulo n with the extended Euclidean algorithm.

    Parameters:
    a (int): The value to invert. Reduced modulo n first.
    n (int): The modulus, greater than 1.

    Returns:
    int: The x in [0, n) with a * x = 1 (mod n).

    Raises:
    NotInvertible: If gcd(a, n) != 1.
    """
    if n < 2:
        raise NotInvertible(f"Modulus must be greater than 1, got {n}")

    t, new_t = 0, 1
    r, new_r = n, a % n
    while new_r != 0:
        quotient = r // new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    if r != 1:
        raise NotInvertible(f"{a} is not invertible modulo {n}")
    return t % n
