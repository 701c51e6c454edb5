"""Power-of-two helpers used to derive chunk shifts and masks.

These are total functions over the integers. Two behaviours are kept on
purpose and callers should be aware of them:

- ``ceil_power_of_two`` returns 0 for any value <= 0, so
  ``is_power_of_two`` reports False for 0 and negative values.
- ``size_of_power`` is only meaningful for powers of two; for other values
  it returns the floor of log2.
"""

from .constants import SMEAR_SHIFTS


def ceil_power_of_two(value: int) -> int:
    """Lowest power of two greater than or equal to value.

    Propagates the highest set bit of ``value - 1`` into every lower bit and
    then increments. Exact for values up to 2**64.

    For values <= 0 returns 0.
    """
    if value <= 0:
        return 0
    result = value - 1
    for shift in SMEAR_SHIFTS:
        result |= result >> shift
    return result + 1


def is_power_of_two(value: int) -> bool:
    """Check if value is 1, 2, 4, 8, ... (never true for value <= 0)."""
    return value > 0 and value == ceil_power_of_two(value)


def size_of_power(value: int) -> int:
    """Get the exponent of a power of two, e.g. 32 -> 5."""
    power = 0
    val = value
    while val > 1:
        val >>= 1
        power += 1
    return power


def chunk_mask(exponent: int) -> int:
    """Bitmask selecting the in-chunk offset for a chunk of 2**exponent."""
    return (1 << exponent) - 1


def exponent_for_size(size: int) -> int:
    """Get the shift exponent for a chunk size.

    Args:
        size: Chunk extent along one axis, must be a power of two

    Returns:
        Exponent e such that 2**e == size

    Raises:
        ValueError: If size is not a positive power of two
    """
    if not is_power_of_two(size):
        raise ValueError(f"Chunk size must be a power of two: {size}")
    return size_of_power(size)
