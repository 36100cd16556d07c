# =============================================================================
# Integer Math Helpers
# =============================================================================
# Exact integer arithmetic used by the rasterizer. Nothing here touches
# floating point, so results are identical on every platform.
# =============================================================================


def isqrt(n: int) -> int:
    """
    Integer square root using Newton's method.

    Returns floor(sqrt(n)), i.e. the largest r with r*r <= n.
    Negative input returns 0.

    Example:
        >>> isqrt(24), isqrt(25), isqrt(26)
        (4, 5, 5)
    """
    if n < 0:
        return 0
    if n < 2:
        return n

    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def half(n: int) -> int:
    """Halve `n`, truncating toward zero (so half(-3) == -1)."""
    if n >= 0:
        return n // 2
    return -(-n // 2)
