"""Scalar keys for chunk columns.

A chunk column is identified by its horizontal chunk position (x, z). The
column key is the pairing key of that position, suitable as a dict key or a
file name stem.
"""

from typing import Tuple

from .addressing import chunk_index
from .config import ChunkLayout, DEFAULT_LAYOUT
from .pairing import decode, encode


def column_key(chunk_x: int, chunk_z: int) -> int:
    """Get the key of a chunk column."""
    return encode(chunk_x, chunk_z)


def column_from_key(key: int) -> Tuple[int, int]:
    """Get the (chunk_x, chunk_z) of a column key."""
    return decode(key)


def world_column_key(world_x: int, world_z: int, layout: ChunkLayout = DEFAULT_LAYOUT) -> int:
    """Get the key of the chunk column containing a world (x, z) position."""
    return column_key(
        chunk_index(world_x, layout.power_x),
        chunk_index(world_z, layout.power_z),
    )
