"""Vectorised chunk addressing and pairing over numpy arrays.

Same semantics as ``addressing`` and ``pairing``, applied element-wise:

- world coordinates are ``int64``
- zig-zag mapped values and keys are ``uint64``
- keys are limited to ``0..KEY_MAX`` like the scalar codec
"""

import logging
from typing import Tuple

import numpy as np

from .config import ChunkLayout, DEFAULT_LAYOUT
from .constants import KEY_MAX
from .pairing import KeyRangeError

logger = logging.getLogger(__name__)

# Any zig-zag value or diagonal sum at or above 2**32 pairs past KEY_MAX
_PAIR_LIMIT = np.uint64(1 << 32)
_MAX_DIAGONAL = np.uint64((1 << 32) - 1)
_ONE = np.uint64(1)
_TWO = np.uint64(2)


def _as_points(points) -> np.ndarray:
    arr = np.asarray(points, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected an (N, 3) array of positions, got shape {arr.shape}")
    return arr


def chunk_indices(coords, chunk_exponent: int) -> np.ndarray:
    """Chunk index of each world coordinate (arithmetic right shift)."""
    return np.right_shift(np.asarray(coords, dtype=np.int64), chunk_exponent)


def local_offsets(coords, mask: int) -> np.ndarray:
    """In-chunk offset of each world coordinate (always in ``[0, mask]``)."""
    return np.bitwise_and(np.asarray(coords, dtype=np.int64), mask)


def chunk_positions(points, layout: ChunkLayout = DEFAULT_LAYOUT) -> np.ndarray:
    """Chunk position of each row of an (N, 3) array of world positions."""
    arr = _as_points(points)
    return np.right_shift(arr, np.array(layout.powers, dtype=np.int64))


def block_positions(points, layout: ChunkLayout = DEFAULT_LAYOUT) -> np.ndarray:
    """Block position of each row of an (N, 3) array of world positions.

    The y column is returned unchanged.
    """
    arr = _as_points(points)
    # -1 keeps every bit of y
    masks = np.array([layout.mask_x, -1, layout.mask_z], dtype=np.int64)
    return np.bitwise_and(arr, masks)


def map_to_non_negative_array(values) -> np.ndarray:
    """Zig-zag map signed ``int64`` values onto ``uint64``."""
    x = np.asarray(values, dtype=np.int64)
    non_negative = x.astype(np.uint64) * _TWO
    # -(x + 1) cannot overflow for negative x, even the int64 minimum
    negative = (-(x + 1)).astype(np.uint64) * _TWO + _ONE
    return np.where(x >= 0, non_negative, negative)


def unmap_from_non_negative_array(values) -> np.ndarray:
    """Inverse of ``map_to_non_negative_array``."""
    y = np.asarray(values, dtype=np.uint64)
    half = (y >> _ONE).astype(np.int64)
    return np.where((y & _ONE) == 0, half, -half - 1)


def encode_many(xs, ys) -> np.ndarray:
    """Encode signed pairs element-wise into ``uint64`` keys.

    Raises:
        KeyRangeError: If any key would exceed KEY_MAX
    """
    k1 = map_to_non_negative_array(xs)
    k2 = map_to_non_negative_array(ys)
    k1, k2 = np.broadcast_arrays(k1, k2)

    if np.any(k1 >= _PAIR_LIMIT) or np.any(k2 >= _PAIR_LIMIT):
        raise KeyRangeError("Pair components too large for a 64-bit key")
    s = k1 + k2
    if np.any(s >= _PAIR_LIMIT):
        raise KeyRangeError("Pair components too large for a 64-bit key")

    keys = s * (s + _ONE) // _TWO + k2
    if np.any(keys > np.uint64(KEY_MAX)):
        raise KeyRangeError(f"Keys exceed {KEY_MAX}")
    logger.debug("Encoded %d pairs", keys.size)
    return keys


def decode_many(keys) -> Tuple[np.ndarray, np.ndarray]:
    """Decode keys produced by ``encode_many`` (or ``encode``).

    Returns:
        (xs, ys) as ``int64`` arrays

    Raises:
        KeyRangeError: If any key is outside ``0..KEY_MAX``
    """
    raw = np.asarray(keys)
    if raw.dtype.kind == "i" and np.any(raw < 0):
        raise KeyRangeError("Keys must be non-negative")
    elif raw.dtype.kind not in "iu":
        raise KeyRangeError(f"Keys must be integers, got dtype {raw.dtype}")
    c = raw.astype(np.uint64)
    if np.any(c > np.uint64(KEY_MAX)):
        raise KeyRangeError(f"Keys must be in 0..{KEY_MAX}")

    # float64 estimate of the diagonal, then one integer correction each way
    estimate = np.floor(np.sqrt(c.astype(np.float64) * 2.0 + 0.25) - 0.5)
    j = np.minimum(estimate.astype(np.uint64), _MAX_DIAGONAL)
    tri = j * (j + _ONE) // _TWO
    j = np.where(tri > c, j - _ONE, j)
    tri = j * (j + _ONE) // _TWO
    j = np.where(tri + j + _ONE <= c, j + _ONE, j)
    tri = j * (j + _ONE) // _TWO

    k2 = c - tri
    k1 = j - k2
    logger.debug("Decoded %d keys", c.size)
    return unmap_from_non_negative_array(k1), unmap_from_non_negative_array(k2)
