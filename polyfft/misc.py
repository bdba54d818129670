"""Miscellaneous integer helpers."""


def is_power_of_2(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_2(n: int) -> int:
    """
    Smallest power of two greater than or equal to `n`.

    Zero is treated as already sized, so next_power_of_2(0) == 1.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return 1
    if is_power_of_2(n):
        return n
    return 1 << n.bit_length()
