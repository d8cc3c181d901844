import math


def is_prime(n: int) -> bool:
    """Trial division by odd numbers up to isqrt(n)."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    # isqrt stays exact for arbitrarily large ints
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True
