"""Reversible encoding of signed integer pairs into a single key.

Signed values are first zig-zag mapped onto the non-negative integers
(0, -1, 1, -2, 2, ... -> 0, 1, 2, 3, 4, ...), then the two results are
combined with Cantor's pairing function:

    pair(k1, k2) = (k1 + k2) * (k1 + k2 + 1) / 2 + k2

Keys are fixed to the non-negative range of a signed 64-bit integer
(``0..KEY_MAX``). ``pair`` and the ``unpair_*`` functions do not check their
inputs: negative arguments to ``pair`` or keys outside that range give
meaningless results. ``encode``, ``decode`` and ``pair_checked`` validate the
range and raise ``KeyRangeError``.
"""

import math
from typing import Tuple

from .constants import KEY_MAX


class KeyRangeError(ValueError):
    """A pairing key or its inputs fall outside the 64-bit key range."""


def map_to_non_negative(x: int) -> int:
    """Zig-zag map a signed integer to a unique non-negative integer."""
    return x * 2 if x >= 0 else -x * 2 - 1


def unmap_from_non_negative(y: int) -> int:
    """Recreate the original value after ``map_to_non_negative``."""
    return y // 2 if y % 2 == 0 else -(y // 2) - 1


def pair(k1: int, k2: int) -> int:
    """Apply Cantor's pairing function to two non-negative integers.

    Args:
        k1: First component, >= 0 (unchecked)
        k2: Second component, >= 0 (unchecked)

    Returns:
        Unique non-negative key
    """
    return ((k1 + k2) * (k1 + k2 + 1)) // 2 + k2


def _diagonal(c: int) -> int:
    # floor(sqrt(0.25 + 2c) - 0.5), exact for any size of c
    return (math.isqrt(8 * c + 1) - 1) // 2


def unpair_second(c: int) -> int:
    """Inverse of ``pair``: recover the second component."""
    j = _diagonal(c)
    return c - j * (j + 1) // 2


def unpair_first(c: int) -> int:
    """Inverse of ``pair``: recover the first component."""
    return _diagonal(c) - unpair_second(c)


def unpair(c: int) -> Tuple[int, int]:
    """Inverse of ``pair``: recover both components."""
    j = _diagonal(c)
    k2 = c - j * (j + 1) // 2
    return j - k2, k2


def pair_checked(k1: int, k2: int) -> int:
    """``pair`` with its preconditions enforced.

    Raises:
        KeyRangeError: If an input is negative or the key exceeds KEY_MAX
    """
    if k1 < 0 or k2 < 0:
        raise KeyRangeError(f"Pairing inputs must be non-negative: ({k1}, {k2})")
    key = pair(k1, k2)
    if key > KEY_MAX:
        raise KeyRangeError(f"Key for ({k1}, {k2}) exceeds 64-bit range: {key}")
    return key


def encode(x: int, y: int) -> int:
    """Encode a signed pair into a single non-negative key.

    Raises:
        KeyRangeError: If the key does not fit in the 64-bit key range
    """
    return pair_checked(map_to_non_negative(x), map_to_non_negative(y))


def decode(c: int) -> Tuple[int, int]:
    """Decode a key produced by ``encode`` back into its signed pair.

    Raises:
        KeyRangeError: If c is outside ``0..KEY_MAX``
    """
    if c < 0 or c > KEY_MAX:
        raise KeyRangeError(f"Key must be in 0..{KEY_MAX}: {c}")
    k1, k2 = unpair(c)
    return unmap_from_non_negative(k1), unmap_from_non_negative(k2)
